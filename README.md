# primehost

This package holds the data model and configuration helpers for an application host
layer. It covers surfaces, input and lifecycle events, frame pacing configuration and
audio stream configuration, and it has a few small timing helpers. It needs nothing
outside the standard library.

All durations and time points are plain integers that count nanoseconds. Time points
are measured on a monotonic clock, the same clock as `time.monotonic_ns`.

## Installation

```
pip install .
```

To run the test suite with pytest, install the `test` extra:

```
pip install ".[test]"
pytest
```

## Modules

### `primehost.types`

This module holds the host data types:

- Enumerations: `PresentMode`, `FramePolicy`, `FramePacingSource`, `ColorFormat`, `CursorShape`, `DeviceType`, `PointerPhase`, `GamepadButtonId`, `GamepadAxisId`, `LifecyclePhase`, `EventScope`, and others. Each is an `IntEnum`.
- `KeyModifier`, an `IntFlag` of the modifier bits.
- Configuration and capability records, all dataclasses: `SurfaceId`, `FrameConfig`, `SurfaceCapabilities`, `SurfaceConfig`, `DisplayInfo`, `FileDialogConfig`, and others.
- The event model:
  - `Event` has a `scope`, an optional `surface_id`, a `time` and a `payload`.
  - The payload is one of the input events (`PointerEvent`, `KeyEvent`, `TextEvent`, `ScrollEvent`, `GamepadButtonEvent`, `GamepadAxisEvent`, `DeviceEvent`) or one of `ResizeEvent`, `DropEvent`, `FocusEvent`, `PowerEvent`, `ThermalEvent` and `LifecycleEvent`.
  - A default `Event` carries a `PointerEvent` in the `MOVE` phase.
  - `EventBatch` and `Callbacks` group events and their handlers.
- `HostError`, an exception whose `code` is a `HostErrorCode`.
- `PRIME_HOST_VERSION`, which is `1`.
- File dialog presets:
  - `directory_dialog_config`
  - `open_file_dialog_config`
  - `save_file_dialog_config`
  - `open_mixed_dialog_config`

### `primehost.frame_config`

This module resolves and validates frame configurations.

- `preferred_buffer_count(mode, caps)` picks a buffer count for a present mode:
  - low latency uses the minimum;
  - smooth uses 3, limited by the surface's buffer limits;
  - uncapped uses the maximum.
- `resolve_frame_config(config, caps, default_interval=None)` returns a filled-in copy of the configuration:
  - a zero buffer count gets the preferred value;
  - the frame latency is kept between 1 and the buffer count;
  - a capped policy with no positive interval gets `default_interval`.
- `effective_buffer_count(config, caps)` clamps the buffer count to the surface's limits. It does so only when both limits are non-zero.
- `mask_has(mask, value)` tests the bit for an enum value in a capability mask.
- `validate_frame_config(config, caps)` returns the configuration unchanged when it is acceptable. Otherwise it raises `HostError` with `HostErrorCode.INVALID_CONFIG`.

### `primehost.audio`

This module holds the audio types: `SampleFormat`, `AudioFormat`, `AudioStreamConfig`, `AudioDeviceInfo`, `AudioCallbackContext`, `AudioDeviceEvent` and `AudioCallbacks`.

- `resolve_audio_stream_config(config)` returns a copy with defaults in place of zero frame counts. The default buffer is 512 frames and the default period is 256 frames. The period is never larger than the buffer.
- `validate_audio_stream_config(config)` returns the configuration when it is acceptable. It raises `HostError` with `INVALID_CONFIG` in these cases:
  - the channel count is 0 or more than 8;
  - the sample rate is 0;
  - the sample format is unknown.

### `primehost.timing`

- `now()` gives the monotonic time in nanoseconds.
- `sleep_for(duration)` sleeps for a number of nanoseconds. A duration that is not positive returns at once.
- `sleep_until(target)` sleeps until the clock reaches the target. A target in the past returns at once.

## Example

```python
from primehost.types import (
    FrameConfig, FramePolicy, HostError, PresentMode, SurfaceCapabilities,
)
from primehost.frame_config import resolve_frame_config, validate_frame_config

caps = SurfaceCapabilities(min_buffer_count=2, max_buffer_count=3)
config = FrameConfig(
    buffer_count=0,
    present_mode=PresentMode.SMOOTH,
    frame_policy=FramePolicy.CAPPED,
)

resolved = resolve_frame_config(config, caps, 16_000_000)
print(resolved.buffer_count)    # 3
print(resolved.frame_interval)  # 16000000

try:
    validate_frame_config(resolved, caps)  # caps advertises no present modes
except HostError as error:
    print(error.code.name)      # INVALID_CONFIG
```

## What this package does not do

This package describes a host. It does not implement one. It has no window or surface
backend, no event loop, and no event polling. It also has no clipboard, dialog or
display access, and no audio output. A program that wants any of these must supply
its own implementation and can use these types for it.