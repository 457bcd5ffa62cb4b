"""Frame configuration defaults, buffer-count helpers and validation."""

from __future__ import annotations

import dataclasses
from typing import Optional

from primehost.types import (
    FrameConfig,
    FramePacingSource,
    FramePolicy,
    HostError,
    HostErrorCode,
    PresentMode,
    SurfaceCapabilities,
)


def preferred_buffer_count(mode: PresentMode, caps: SurfaceCapabilities) -> int:
    """Buffer count that suits ``mode`` within the surface's limits."""
    min_count = caps.min_buffer_count
    max_count = caps.max_buffer_count
    if min_count == 0 or max_count == 0:
        return min_count
    if mode == PresentMode.LOW_LATENCY:
        return min_count
    if mode == PresentMode.SMOOTH:
        return max(min(3, max_count), min_count)
    if mode == PresentMode.UNCAPPED:
        return max_count
    return min_count


def resolve_frame_config(
    config: FrameConfig,
    caps: SurfaceCapabilities,
    default_interval: Optional[int] = None,
) -> FrameConfig:
    """Return a copy of ``config`` with unset values filled from ``caps``.

    ``default_interval`` (nanoseconds) fills a missing interval for capped frames.
    """
    resolved = dataclasses.replace(config)
    if resolved.buffer_count == 0:
        resolved.buffer_count = preferred_buffer_count(resolved.present_mode, caps)
    if resolved.max_frame_latency == 0:
        resolved.max_frame_latency = 1
    if resolved.buffer_count > 0 and resolved.max_frame_latency > resolved.buffer_count:
        resolved.max_frame_latency = resolved.buffer_count
    if resolved.frame_policy == FramePolicy.CAPPED:
        interval = resolved.frame_interval
        if interval is None or interval <= 0:
            if default_interval is not None and default_interval > 0:
                resolved.frame_interval = default_interval
    return resolved


def effective_buffer_count(config: FrameConfig, caps: SurfaceCapabilities) -> int:
    """The buffer count actually used, clamped to the surface's limits when known."""
    low = caps.min_buffer_count
    high = caps.max_buffer_count
    if low == 0 or high == 0:
        return config.buffer_count
    if config.buffer_count < low:
        return low
    if high < config.buffer_count:
        return high
    return config.buffer_count


def mask_has(mask: int, value: int) -> bool:
    """Whether the bit for enum ``value`` is set in ``mask``."""
    return (mask & (1 << int(value))) != 0


def validate_frame_config(config: FrameConfig, caps: SurfaceCapabilities) -> FrameConfig:
    """Check ``config`` against ``caps`` and return it unchanged.

    Raises :class:`HostError` with ``INVALID_CONFIG`` on any mismatch.
    """

    def invalid(reason: str) -> HostError:
        return HostError(HostErrorCode.INVALID_CONFIG, reason)

    if config.frame_interval is not None and config.frame_interval <= 0:
        raise invalid("frame interval must be positive")
    if config.buffer_count != 0 and not (
        caps.min_buffer_count <= config.buffer_count <= caps.max_buffer_count
    ):
        raise invalid("buffer count outside surface limits")
    if not mask_has(caps.present_modes, config.present_mode):
        raise invalid("present mode not supported")
    if not mask_has(caps.color_formats, config.color_format):
        raise invalid("color format not supported")
    if config.allow_tearing and not caps.supports_tearing:
        raise invalid("tearing not supported")
    if not config.vsync and not caps.supports_vsync_toggle:
        raise invalid("vsync toggle not supported")
    if (
        config.frame_policy == FramePolicy.CAPPED
        and config.frame_pacing_source == FramePacingSource.HOST_LIMITER
        and (config.frame_interval is None or config.frame_interval <= 0)
    ):
        raise invalid("host-limited capped frames need an interval")
    if (
        config.buffer_count != 0
        and config.max_frame_latency != 0
        and config.max_frame_latency > config.buffer_count
    ):
        raise invalid("frame latency exceeds buffer count")
    return config