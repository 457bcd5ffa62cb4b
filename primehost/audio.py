"""Audio stream types, stream config defaults and validation."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Optional

from primehost.types import HostError, HostErrorCode

AUDIO_DEFAULT_BUFFER_FRAMES = 512
AUDIO_DEFAULT_PERIOD_FRAMES = 256
AUDIO_MAX_CHANNELS = 8


class SampleFormat(IntEnum):
    FLOAT32 = 0
    INT16 = 1


@dataclass
class AudioFormat:
    sample_rate: int = 48000
    channels: int = 2
    format: SampleFormat = SampleFormat.FLOAT32
    interleaved: bool = True


@dataclass
class AudioStreamConfig:
    format: AudioFormat = field(default_factory=AudioFormat)
    buffer_frames: int = AUDIO_DEFAULT_BUFFER_FRAMES
    period_frames: int = AUDIO_DEFAULT_PERIOD_FRAMES
    target_latency: int = 0


@dataclass
class AudioDeviceInfo:
    id: int = 0
    name: str = ""
    is_default: bool = False
    preferred_format: AudioFormat = field(default_factory=AudioFormat)


@dataclass
class AudioCallbackContext:
    frame_index: int = 0
    time: int = 0
    requested_frames: int = 0
    is_underrun: bool = False


@dataclass
class AudioDeviceEvent:
    device_id: int = 0
    connected: bool = True
    is_default: bool = False


@dataclass
class AudioCallbacks:
    on_device_event: Optional[Callable[[AudioDeviceEvent], None]] = None


def resolve_audio_stream_config(config: AudioStreamConfig) -> AudioStreamConfig:
    """Return a copy of ``config`` with zero frame counts replaced by defaults."""
    resolved = dataclasses.replace(config, format=dataclasses.replace(config.format))
    if resolved.buffer_frames == 0:
        resolved.buffer_frames = AUDIO_DEFAULT_BUFFER_FRAMES
    if resolved.period_frames == 0:
        resolved.period_frames = min(resolved.buffer_frames, AUDIO_DEFAULT_PERIOD_FRAMES)
    if resolved.period_frames > resolved.buffer_frames:
        resolved.period_frames = resolved.buffer_frames
    return resolved


def validate_audio_stream_config(config: AudioStreamConfig) -> AudioStreamConfig:
    """Check the stream format and return ``config`` unchanged.

    Raises :class:`HostError` with ``INVALID_CONFIG`` if it cannot be used.
    """
    fmt = config.format
    if fmt.channels == 0 or fmt.channels > AUDIO_MAX_CHANNELS:
        raise HostError(HostErrorCode.INVALID_CONFIG, "channel count out of range")
    if fmt.sample_rate == 0:
        raise HostError(HostErrorCode.INVALID_CONFIG, "sample rate must be non-zero")
    try:
        SampleFormat(fmt.format)
    except ValueError:
        raise HostError(HostErrorCode.INVALID_CONFIG, "unknown sample format") from None
    return config