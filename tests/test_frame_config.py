import dataclasses

import pytest

from primehost.frame_config import (
    effective_buffer_count,
    mask_has,
    preferred_buffer_count,
    resolve_frame_config,
    validate_frame_config,
)
from primehost.types import (
    ColorFormat,
    FrameConfig,
    FramePacingSource,
    FramePolicy,
    HostError,
    HostErrorCode,
    PresentMode,
    SurfaceCapabilities,
)

MS = 1_000_000


def _caps(min_count, max_count, **kwargs):
    return SurfaceCapabilities(min_buffer_count=min_count, max_buffer_count=max_count, **kwargs)


def test_preferred_buffer_count_uses_caps():
    caps = _caps(2, 3)
    assert preferred_buffer_count(PresentMode.LOW_LATENCY, caps) == 2
    assert preferred_buffer_count(PresentMode.SMOOTH, caps) == 3
    assert preferred_buffer_count(PresentMode.UNCAPPED, caps) == 3

    caps = _caps(4, 2)
    assert preferred_buffer_count(PresentMode.LOW_LATENCY, caps) == 4
    assert preferred_buffer_count(PresentMode.SMOOTH, caps) == 4
    assert preferred_buffer_count(PresentMode.UNCAPPED, caps) == 2

    assert preferred_buffer_count(PresentMode.SMOOTH, _caps(0, 5)) == 0
    assert preferred_buffer_count(PresentMode.SMOOTH, _caps(4, 6)) == 4


@pytest.mark.parametrize(
    "mode, expected",
    [(PresentMode.LOW_LATENCY, 2), (PresentMode.SMOOTH, 3), (PresentMode.UNCAPPED, 3)],
)
def test_defaults_prefer_present_mode(mode, expected):
    config = FrameConfig(buffer_count=0, present_mode=mode)
    assert resolve_frame_config(config, _caps(2, 3)).buffer_count == expected


def test_defaults_clamp_to_min():
    config = FrameConfig(buffer_count=0, present_mode=PresentMode.SMOOTH)
    assert resolve_frame_config(config, _caps(2, 2)).buffer_count == 2


def test_defaults_fill_capped_interval():
    config = FrameConfig(
        buffer_count=0,
        present_mode=PresentMode.SMOOTH,
        frame_policy=FramePolicy.CAPPED,
        frame_interval=None,
    )
    resolved = resolve_frame_config(config, _caps(2, 3), 16 * MS)
    assert resolved.frame_interval is not None
    assert resolved.frame_interval > 0


def test_defaults_clamp_max_frame_latency():
    config = FrameConfig(buffer_count=0, present_mode=PresentMode.SMOOTH, max_frame_latency=0)
    resolved = resolve_frame_config(config, _caps(2, 3), 16 * MS)
    assert resolved.buffer_count == 3
    assert resolved.max_frame_latency == 1

    config.max_frame_latency = 5
    clamped = resolve_frame_config(config, _caps(2, 3), 16 * MS)
    assert clamped.max_frame_latency == clamped.buffer_count


@pytest.mark.parametrize(
    "mode, expected",
    [(PresentMode.LOW_LATENCY, 1), (PresentMode.SMOOTH, 3), (PresentMode.UNCAPPED, 4)],
)
def test_defaults_respect_present_mode_buffer_counts(mode, expected):
    config = FrameConfig(buffer_count=0, present_mode=mode)
    assert resolve_frame_config(config, _caps(1, 4)).buffer_count == expected


def test_defaults_use_max_buffer_for_uncapped():
    config = FrameConfig(buffer_count=0, present_mode=PresentMode.UNCAPPED)
    assert resolve_frame_config(config, _caps(2, 5)).buffer_count == 5


def test_defaults_use_provided_interval_for_capped():
    config = FrameConfig(buffer_count=0, frame_policy=FramePolicy.CAPPED)
    resolved = resolve_frame_config(config, _caps(2, 3), 8 * MS)
    assert resolved.frame_interval == 8 * MS


def test_defaults_leave_capped_interval_empty_without_default():
    config = FrameConfig(buffer_count=0, frame_policy=FramePolicy.CAPPED)
    assert resolve_frame_config(config, _caps(2, 3)).frame_interval is None


def test_defaults_ignore_interval_when_not_capped():
    config = FrameConfig(
        buffer_count=0, frame_policy=FramePolicy.CONTINUOUS, frame_interval=5 * MS
    )
    resolved = resolve_frame_config(config, _caps(2, 3), 16 * MS)
    assert resolved.frame_interval == 5 * MS


def test_defaults_do_not_override_explicit_interval():
    config = FrameConfig(
        buffer_count=0,
        present_mode=PresentMode.SMOOTH,
        frame_policy=FramePolicy.CAPPED,
        frame_interval=12 * MS,
    )
    assert resolve_frame_config(config, _caps(2, 3), 8 * MS).frame_interval == 12 * MS


def test_defaults_keep_explicit_capped_interval_over_default():
    config = FrameConfig(buffer_count=0, frame_policy=FramePolicy.CAPPED, frame_interval=7 * MS)
    assert resolve_frame_config(config, _caps(2, 3), 16 * MS).frame_interval == 7 * MS


@pytest.mark.parametrize(
    "min_count, max_count, buffer_count, mode, expected",
    [
        (0, 0, 0, PresentMode.SMOOTH, 0),
        (0, 3, 0, PresentMode.SMOOTH, 0),
        (2, 0, 0, PresentMode.LOW_LATENCY, 2),
        (0, 0, 3, PresentMode.LOW_LATENCY, 3),
    ],
)
def test_defaults_zero_buffer_limits(min_count, max_count, buffer_count, mode, expected):
    config = FrameConfig(buffer_count=buffer_count, present_mode=mode)
    assert resolve_frame_config(config, _caps(min_count, max_count)).buffer_count == expected


def test_defaults_clamp_max_frame_latency_with_zero_buffer():
    config = FrameConfig(buffer_count=0, max_frame_latency=0)
    resolved = resolve_frame_config(config, _caps(2, 4))
    assert resolved.buffer_count == 2
    assert resolved.max_frame_latency == 1


def test_defaults_clamp_max_frame_latency_to_buffer_count():
    config = FrameConfig(buffer_count=0, present_mode=PresentMode.SMOOTH, max_frame_latency=5)
    resolved = resolve_frame_config(config, _caps(2, 4))
    assert resolved.buffer_count == 3
    assert resolved.max_frame_latency == 3


def test_defaults_clamp_max_frame_latency_with_explicit_buffer():
    config = FrameConfig(buffer_count=2, max_frame_latency=5)
    resolved = resolve_frame_config(config, _caps(2, 4))
    assert resolved.buffer_count == 2
    assert resolved.max_frame_latency == 2


def test_resolve_does_not_mutate_input():
    config = FrameConfig(buffer_count=0, max_frame_latency=0)
    resolve_frame_config(config, _caps(2, 4))
    assert config.buffer_count == 0
    assert config.max_frame_latency == 0


def test_effective_buffer_count_clamps():
    caps = _caps(2, 3)
    assert effective_buffer_count(FrameConfig(buffer_count=1), caps) == 2
    assert effective_buffer_count(FrameConfig(buffer_count=5), caps) == 3
    assert effective_buffer_count(FrameConfig(buffer_count=3), caps) == 3
    assert effective_buffer_count(FrameConfig(buffer_count=7), _caps(0, 0)) == 7


def test_mask_helpers():
    present = (1 << PresentMode.LOW_LATENCY) | (1 << PresentMode.SMOOTH)
    assert mask_has(present, PresentMode.LOW_LATENCY)
    assert mask_has(present, PresentMode.SMOOTH)
    assert not mask_has(present, PresentMode.UNCAPPED)

    formats = 1 << ColorFormat.B8G8R8A8_UNORM
    assert mask_has(formats, ColorFormat.B8G8R8A8_UNORM)
    assert not mask_has(formats, 1)


def test_mask_has_works_with_multiple_bits():
    present = (1 << PresentMode.LOW_LATENCY) | (1 << PresentMode.UNCAPPED)
    assert mask_has(present, PresentMode.LOW_LATENCY)
    assert not mask_has(present, PresentMode.SMOOTH)
    assert mask_has(present, PresentMode.UNCAPPED)
    assert mask_has(1 << ColorFormat.B8G8R8A8_UNORM, ColorFormat.B8G8R8A8_UNORM)


def _validation_caps(vsync_toggle=False, tearing=False):
    return SurfaceCapabilities(
        supports_vsync_toggle=vsync_toggle,
        supports_tearing=tearing,
        min_buffer_count=2,
        max_buffer_count=3,
        present_modes=1 << PresentMode.LOW_LATENCY,
        color_formats=1 << ColorFormat.B8G8R8A8_UNORM,
    )


def _base_config(**changes):
    config = FrameConfig(
        present_mode=PresentMode.LOW_LATENCY,
        color_format=ColorFormat.B8G8R8A8_UNORM,
        buffer_count=2,
        vsync=True,
        allow_tearing=False,
        max_frame_latency=1,
        frame_policy=FramePolicy.EVENT_DRIVEN,
        frame_interval=None,
    )
    return dataclasses.replace(config, **changes)


def test_validation_accepts_base_config():
    config = _base_config()
    assert validate_frame_config(config, _validation_caps()) is config


@pytest.mark.parametrize(
    "changes",
    [
        {"buffer_count": 4},
        {"buffer_count": 4, "max_frame_latency": 0},
        {"present_mode": PresentMode.SMOOTH},
        {"color_format": 1},
        {"vsync": False},
        {"allow_tearing": True},
        {
            "frame_policy": FramePolicy.CAPPED,
            "frame_pacing_source": FramePacingSource.HOST_LIMITER,
            "frame_interval": None,
        },
        {"frame_interval": 0},
        {"frame_interval": 1 * MS, "buffer_count": 4},
        {"max_frame_latency": 4},
        {
            "frame_policy": FramePolicy.CAPPED,
            "frame_pacing_source": FramePacingSource.HOST_LIMITER,
            "frame_interval": 0,
        },
        {"frame_policy": FramePolicy.CONTINUOUS, "frame_interval": 0},
        {
            "frame_policy": FramePolicy.CAPPED,
            "frame_pacing_source": FramePacingSource.HOST_LIMITER,
            "frame_interval": -1,
        },
        {
            "frame_policy": FramePolicy.CAPPED,
            "frame_pacing_source": FramePacingSource.PLATFORM,
            "frame_interval": 0,
        },
    ],
)
def test_validation_rejects_invalid_settings(changes):
    with pytest.raises(HostError) as info:
        validate_frame_config(_base_config(**changes), _validation_caps())
    assert info.value.code == HostErrorCode.INVALID_CONFIG


@pytest.mark.parametrize(
    "changes",
    [
        {
            "frame_policy": FramePolicy.CAPPED,
            "frame_pacing_source": FramePacingSource.PLATFORM,
            "frame_interval": None,
        },
        {"buffer_count": 0, "max_frame_latency": 0},
        {"buffer_count": 0, "max_frame_latency": 2},
        {
            "frame_policy": FramePolicy.CAPPED,
            "frame_pacing_source": FramePacingSource.HOST_LIMITER,
            "frame_interval": 16 * MS,
        },
    ],
)
def test_validation_accepts_valid_settings(changes):
    config = _base_config(**changes)
    assert validate_frame_config(config, _validation_caps()) is config


def test_allows_tearing_when_supported():
    config = _base_config(vsync=False, allow_tearing=True)
    assert validate_frame_config(config, _validation_caps(True, True)) is config


def test_allows_tearing_with_vsync_when_supported():
    config = _base_config(vsync=True, allow_tearing=True)
    assert validate_frame_config(config, _validation_caps(True, True)) is config


def test_allows_vsync_toggle_when_supported():
    config = _base_config(vsync=False, allow_tearing=False)
    assert validate_frame_config(config, _validation_caps(True, False)) is config


def test_rejects_vsync_toggle_when_unsupported_even_with_tearing():
    config = _base_config(vsync=False, allow_tearing=True)
    with pytest.raises(HostError) as info:
        validate_frame_config(config, _validation_caps(False, True))
    assert info.value.code == HostErrorCode.INVALID_CONFIG