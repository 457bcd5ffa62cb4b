"""Core value types, enumerations and events shared by the host interfaces.

Durations and time points are integer nanoseconds. Time points count from an
arbitrary monotonic epoch (see :func:`time.monotonic_ns`), and 0 means "unset".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import Callable, Optional, Sequence, Tuple, Union

PRIME_HOST_VERSION = 1


class HostErrorCode(IntEnum):
    UNKNOWN = 0
    INVALID_SURFACE = 1
    INVALID_DEVICE = 2
    INVALID_DISPLAY = 3
    INVALID_CONFIG = 4
    UNSUPPORTED = 5
    BUFFER_TOO_SMALL = 6
    DEVICE_UNAVAILABLE = 7
    OUT_OF_MEMORY = 8
    PLATFORM_FAILURE = 9


class HostError(Exception):
    """Raised when a host operation fails; ``code`` tells why."""

    def __init__(self, code: HostErrorCode = HostErrorCode.UNKNOWN, message: str = "") -> None:
        self.code = HostErrorCode(code)
        super().__init__(message or self.code.name.lower())


@dataclass(frozen=True)
class SurfaceId:
    value: int = 0

    def is_valid(self) -> bool:
        return self.value != 0


class PresentMode(IntEnum):
    LOW_LATENCY = 0
    SMOOTH = 1
    UNCAPPED = 2


class FramePacingSource(IntEnum):
    PLATFORM = 0
    HOST_LIMITER = 1


class FramePolicy(IntEnum):
    EVENT_DRIVEN = 0
    CONTINUOUS = 1
    CAPPED = 2


class ColorFormat(IntEnum):
    B8G8R8A8_UNORM = 0


class CursorShape(IntEnum):
    ARROW = 0
    I_BEAM = 1
    CROSSHAIR = 2
    HAND = 3
    RESIZE_LEFT_RIGHT = 4
    RESIZE_UP_DOWN = 5
    RESIZE_DIAGONAL = 6
    RESIZE_DIAGONAL_REVERSE = 7
    NOT_ALLOWED = 8


class DeviceType(IntEnum):
    MOUSE = 0
    TOUCH = 1
    PEN = 2
    KEYBOARD = 3
    GAMEPAD = 4


class ThermalState(IntEnum):
    UNKNOWN = 0
    NOMINAL = 1
    FAIR = 2
    SERIOUS = 3
    CRITICAL = 4


class KeyModifier(IntFlag):
    SHIFT = 1 << 0
    CONTROL = 1 << 1
    ALT = 1 << 2
    SUPER = 1 << 3
    CAPS_LOCK = 1 << 4
    NUM_LOCK = 1 << 5


class LogLevel(IntEnum):
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass
class HostCapabilities:
    supports_clipboard: bool = False
    supports_file_dialogs: bool = False
    supports_relative_pointer: bool = False
    supports_ime: bool = False
    supports_haptics: bool = False
    supports_headless: bool = False


class PermissionType(IntEnum):
    CAMERA = 0
    MICROPHONE = 1
    LOCATION = 2
    PHOTOS = 3
    NOTIFICATIONS = 4
    CLIPBOARD_READ = 5


class PermissionStatus(IntEnum):
    UNKNOWN = 0
    GRANTED = 1
    DENIED = 2
    RESTRICTED = 3


class AppPathType(IntEnum):
    USER_DATA = 0
    CACHE = 1
    CONFIG = 2
    LOGS = 3
    TEMP = 4


class FileDialogMode(IntEnum):
    OPEN_FILE = 0
    OPEN_DIRECTORY = 1
    OPEN = 2
    SAVE_FILE = 3


class ScreenshotScope(IntEnum):
    SURFACE = 0
    WINDOW = 1


@dataclass
class SurfaceCapabilities:
    supports_vsync_toggle: bool = False
    supports_tearing: bool = False
    min_buffer_count: int = 2
    max_buffer_count: int = 2
    present_modes: int = 0
    color_formats: int = 0


@dataclass
class DeviceCapabilities:
    type: DeviceType = DeviceType.MOUSE
    has_pressure: bool = False
    has_tilt: bool = False
    has_twist: bool = False
    has_distance: bool = False
    has_rumble: bool = False
    has_analog_buttons: bool = False
    max_touches: int = 0


@dataclass
class DeviceInfo:
    device_id: int = 0
    type: DeviceType = DeviceType.MOUSE
    vendor_id: int = 0
    product_id: int = 0
    name: str = ""


@dataclass
class LocaleInfo:
    language_tag: str = ""
    region_tag: str = ""


@dataclass
class DisplayInfo:
    display_id: int = 0
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    scale: float = 1.0
    refresh_rate: float = 0.0
    is_primary: bool = False


@dataclass
class DisplayHdrInfo:
    supports_hdr: bool = False
    max_edr: float = 1.0
    max_edr_potential: float = 1.0


@dataclass
class FrameTiming:
    time: int = 0
    delta: int = 0
    frame_index: int = 0


@dataclass
class FrameDiagnostics:
    target_interval: int = 0
    actual_interval: int = 0
    missed_deadline: bool = False
    was_throttled: bool = False
    dropped_frames: int = 0


@dataclass
class FrameConfig:
    present_mode: PresentMode = PresentMode.LOW_LATENCY
    frame_policy: FramePolicy = FramePolicy.EVENT_DRIVEN
    frame_pacing_source: FramePacingSource = FramePacingSource.PLATFORM
    color_format: ColorFormat = ColorFormat.B8G8R8A8_UNORM
    vsync: bool = True
    allow_tearing: bool = False
    max_frame_latency: int = 1
    buffer_count: int = 2
    frame_interval: Optional[int] = None


@dataclass
class SurfaceConfig:
    width: int = 0
    height: int = 0
    resizable: bool = True
    headless: bool = False
    title: Optional[str] = None


@dataclass
class SurfaceSize:
    width: int = 0
    height: int = 0


@dataclass
class SurfacePoint:
    x: int = 0
    y: int = 0


@dataclass
class SafeAreaInsets:
    top: float = 0.0
    left: float = 0.0
    right: float = 0.0
    bottom: float = 0.0


@dataclass
class CursorImage:
    width: int = 0
    height: int = 0
    hot_x: int = 0
    hot_y: int = 0
    pixels: bytes = b""


@dataclass
class ImageSize:
    width: int = 0
    height: int = 0


@dataclass
class ImageData:
    size: ImageSize = field(default_factory=ImageSize)
    pixels: bytes = b""


@dataclass
class FrameBuffer:
    size: ImageSize = field(default_factory=ImageSize)
    stride: int = 0
    color_format: ColorFormat = ColorFormat.B8G8R8A8_UNORM
    scale: float = 1.0
    buffer_index: int = 0
    pixels: bytearray = field(default_factory=bytearray)


@dataclass
class IconImage:
    size: ImageSize = field(default_factory=ImageSize)
    pixels: bytes = b""


@dataclass
class WindowIcon:
    images: Sequence[IconImage] = ()


@dataclass
class FileDialogConfig:
    mode: FileDialogMode = FileDialogMode.OPEN_FILE
    title: Optional[str] = None
    default_path: Optional[str] = None
    default_name: Optional[str] = None
    allowed_extensions: Sequence[str] = ()
    allowed_content_types: Sequence[str] = ()
    can_create_directories: bool = True
    can_select_hidden_files: bool = False
    allow_files: Optional[bool] = None
    allow_directories: Optional[bool] = None
    default_directory_only: bool = False


def directory_dialog_config(default_path: str = "") -> FileDialogConfig:
    """Dialog config that picks a directory, optionally starting at ``default_path``."""
    config = FileDialogConfig(mode=FileDialogMode.OPEN_DIRECTORY)
    if default_path:
        config.default_path = default_path
        config.default_directory_only = True
    return config


def open_file_dialog_config(default_path: str = "") -> FileDialogConfig:
    """Dialog config that opens a single file."""
    config = FileDialogConfig(mode=FileDialogMode.OPEN_FILE)
    if default_path:
        config.default_path = default_path
    return config


def save_file_dialog_config(default_path: str = "", default_name: str = "") -> FileDialogConfig:
    """Dialog config that chooses a file to save."""
    config = FileDialogConfig(mode=FileDialogMode.SAVE_FILE)
    if default_path:
        config.default_path = default_path
    if default_name:
        config.default_name = default_name
    return config


def open_mixed_dialog_config(default_path: str = "") -> FileDialogConfig:
    """Dialog config that opens files or directories."""
    config = FileDialogConfig(mode=FileDialogMode.OPEN, allow_files=True, allow_directories=True)
    if default_path:
        config.default_path = default_path
    return config


@dataclass
class FileDialogResult:
    accepted: bool = False
    path: str = ""


@dataclass
class TextSpan:
    offset: int = 0
    length: int = 0


@dataclass
class ClipboardPathsResult:
    available: bool = False
    paths: Sequence[TextSpan] = ()


@dataclass
class ClipboardImageResult:
    available: bool = False
    size: ImageSize = field(default_factory=ImageSize)
    pixels: bytes = b""


@dataclass
class ScreenshotConfig:
    scope: ScreenshotScope = ScreenshotScope.SURFACE
    include_hidden: bool = False


class PointerPhase(IntEnum):
    DOWN = 0
    MOVE = 1
    UP = 2
    CANCEL = 3


class PointerDeviceType(IntEnum):
    MOUSE = 0
    TOUCH = 1
    PEN = 2


@dataclass
class PointerEvent:
    device_id: int = 0
    pointer_id: int = 0
    device_type: PointerDeviceType = PointerDeviceType.MOUSE
    phase: PointerPhase = PointerPhase.MOVE
    x: int = 0
    y: int = 0
    delta_x: Optional[int] = None
    delta_y: Optional[int] = None
    pressure: Optional[float] = None
    tilt_x: Optional[float] = None
    tilt_y: Optional[float] = None
    twist: Optional[float] = None
    distance: Optional[float] = None
    button_mask: int = 0
    is_primary: bool = True


@dataclass
class KeyEvent:
    device_id: int = 0
    key_code: int = 0
    modifiers: KeyModifier = KeyModifier(0)
    pressed: bool = False
    repeat: bool = False


@dataclass
class TextEvent:
    device_id: int = 0
    text: TextSpan = field(default_factory=TextSpan)


@dataclass
class ScrollEvent:
    device_id: int = 0
    delta_x: float = 0.0
    delta_y: float = 0.0
    is_lines: bool = False


class GamepadButtonId(IntEnum):
    SOUTH = 0
    EAST = 1
    WEST = 2
    NORTH = 3
    LEFT_BUMPER = 4
    RIGHT_BUMPER = 5
    BACK = 6
    START = 7
    GUIDE = 8
    LEFT_STICK = 9
    RIGHT_STICK = 10
    DPAD_UP = 11
    DPAD_DOWN = 12
    DPAD_LEFT = 13
    DPAD_RIGHT = 14
    MISC = 15


class GamepadAxisId(IntEnum):
    LEFT_X = 0
    LEFT_Y = 1
    RIGHT_X = 2
    RIGHT_Y = 3
    LEFT_TRIGGER = 4
    RIGHT_TRIGGER = 5


@dataclass
class GamepadButtonEvent:
    device_id: int = 0
    control_id: int = 0
    pressed: bool = False
    value: Optional[float] = None


@dataclass
class GamepadAxisEvent:
    device_id: int = 0
    control_id: int = 0
    value: float = 0.0


@dataclass
class GamepadRumble:
    device_id: int = 0
    low_frequency: float = 0.0
    high_frequency: float = 0.0
    duration_ms: int = 0


@dataclass
class DeviceEvent:
    device_id: int = 0
    device_type: DeviceType = DeviceType.MOUSE
    connected: bool = True


InputEvent = Union[
    PointerEvent,
    KeyEvent,
    TextEvent,
    ScrollEvent,
    GamepadButtonEvent,
    GamepadAxisEvent,
    DeviceEvent,
]


@dataclass
class ResizeEvent:
    width: int = 0
    height: int = 0
    scale: float = 1.0


@dataclass
class DropEvent:
    count: int = 0
    paths: TextSpan = field(default_factory=TextSpan)


@dataclass
class FocusEvent:
    focused: bool = False


@dataclass
class PowerEvent:
    low_power_mode_enabled: Optional[bool] = None


@dataclass
class ThermalEvent:
    state: ThermalState = ThermalState.UNKNOWN


class LifecyclePhase(IntEnum):
    CREATED = 0
    SUSPENDED = 1
    RESUMED = 2
    BACKGROUNDED = 3
    FOREGROUNDED = 4
    DESTROYED = 5


@dataclass
class LifecycleEvent:
    phase: LifecyclePhase = LifecyclePhase.CREATED


class EventScope(IntEnum):
    SURFACE = 0
    GLOBAL = 1


EventPayload = Union[
    InputEvent,
    ResizeEvent,
    DropEvent,
    FocusEvent,
    PowerEvent,
    ThermalEvent,
    LifecycleEvent,
]

INPUT_EVENT_TYPES: Tuple[type, ...] = (
    PointerEvent,
    KeyEvent,
    TextEvent,
    ScrollEvent,
    GamepadButtonEvent,
    GamepadAxisEvent,
    DeviceEvent,
)


@dataclass
class Event:
    scope: EventScope = EventScope.SURFACE
    surface_id: Optional[SurfaceId] = None
    time: int = 0
    payload: EventPayload = field(default_factory=PointerEvent)


@dataclass
class EventBatch:
    events: Sequence[Event] = ()
    text_bytes: bytes = b""


@dataclass
class Callbacks:
    on_events: Optional[Callable[[EventBatch], None]] = None
    on_frame: Optional[Callable[[SurfaceId, FrameTiming, FrameDiagnostics], None]] = None