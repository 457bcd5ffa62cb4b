"""Host-layer data types, frame and audio configuration helpers, and monotonic timing utilities."""

__version__ = "0.1.0"
__all__ = ["types", "frame_config", "audio", "timing"]