"""Windowing-independent input types: keys, mouse buttons, events and sizes."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, FrozenSet, Optional, Tuple

_U32_MAX = 0xFFFFFFFF


def pixel_ratio(scale_factor: float) -> float:
    """Ratio between screen coordinates and pixels for a given content scale.

    On macOS screen coordinates do not map 1:1 to pixels, so the ratio is the
    scale factor itself; elsewhere a screen coordinate is always one pixel.
    """
    if sys.platform == "darwin":
        return scale_factor
    return 1.0


def _round_u32(value: float) -> int:
    """Round half away from zero and saturate to the unsigned 32-bit range."""
    if math.isnan(value):
        return 0
    rounded = math.copysign(math.floor(abs(value) + 0.5), value)
    if math.isinf(rounded):
        return _U32_MAX if rounded > 0 else 0
    return int(min(max(rounded, 0), _U32_MAX))


class GraphicsContext(Enum):
    """Kind of graphics context a window is created with."""

    NONE = "none"
    GL = "gl"


@dataclass(frozen=True)
class WindowHint:
    """A hint given when creating a window: ``resizable`` or ``visible``."""

    kind: str
    value: bool

    KINDS: ClassVar[FrozenSet[str]] = frozenset({"resizable", "visible"})

    def __post_init__(self) -> None:
        if self.kind not in self.KINDS:
            raise ValueError(f"unknown window hint: {self.kind!r}")


class WindowEventKind(Enum):
    """The kinds of event a window can report."""

    RESIZED = "resized"
    MOVED = "moved"
    MINIMIZED = "minimized"
    RESTORED = "restored"
    CLOSE_REQUESTED = "close-requested"
    DESTROYED = "destroyed"
    RECEIVED_CHARACTER = "received-character"
    FOCUSED = "focused"
    KEYBOARD_INPUT = "keyboard-input"
    CURSOR_MOVED = "cursor-moved"
    CURSOR_ENTERED = "cursor-entered"
    CURSOR_LEFT = "cursor-left"
    MOUSE_INPUT = "mouse-input"
    MOUSE_WHEEL = "mouse-wheel"
    REDRAW_REQUESTED = "redraw-requested"
    READY = "ready"
    SCALE_FACTOR_CHANGED = "scale-factor-changed"
    NOOP = "noop"


_INPUT_KINDS = frozenset(
    {
        WindowEventKind.RESIZED,
        WindowEventKind.MOVED,
        WindowEventKind.MINIMIZED,
        WindowEventKind.RESTORED,
        WindowEventKind.CLOSE_REQUESTED,
        WindowEventKind.DESTROYED,
        WindowEventKind.RECEIVED_CHARACTER,
        WindowEventKind.FOCUSED,
        WindowEventKind.KEYBOARD_INPUT,
        WindowEventKind.CURSOR_MOVED,
        WindowEventKind.CURSOR_ENTERED,
        WindowEventKind.CURSOR_LEFT,
        WindowEventKind.MOUSE_INPUT,
        WindowEventKind.SCALE_FACTOR_CHANGED,
    }
)


@dataclass(frozen=True)
class WindowEvent:
    """An event from a window, with whatever data its kind carries."""

    kind: WindowEventKind
    data: Any = None

    def is_input(self) -> bool:
        """Whether the event was triggered by user input."""
        return self.kind in _INPUT_KINDS


class InputState(Enum):
    """State of a key or button."""

    PRESSED = "pressed"
    RELEASED = "released"
    REPEATED = "repeated"


@dataclass(frozen=True)
class MouseButton:
    """A mouse button: ``left``, ``right``, ``middle`` or ``other`` with a number."""

    name: str
    number: Optional[int] = None

    LEFT: ClassVar["MouseButton"]
    RIGHT: ClassVar["MouseButton"]
    MIDDLE: ClassVar["MouseButton"]

    def __post_init__(self) -> None:
        if self.name in ("left", "right", "middle"):
            if self.number is not None:
                raise ValueError(f"mouse button {self.name!r} takes no number")
        elif self.name == "other":
            if not isinstance(self.number, int) or not 0 <= self.number <= 0xFF:
                raise ValueError(f"mouse button number must be in 0..255, got {self.number!r}")
        else:
            raise ValueError(f"unknown mouse button: {self.name!r}")


MouseButton.LEFT = MouseButton("left")
MouseButton.RIGHT = MouseButton("right")
MouseButton.MIDDLE = MouseButton("middle")


class Key(Enum):
    """Symbolic name of a keyboard key; the value is how the key is displayed."""

    NUM1 = "1"
    NUM2 = "2"
    NUM3 = "3"
    NUM4 = "4"
    NUM5 = "5"
    NUM6 = "6"
    NUM7 = "7"
    NUM8 = "8"
    NUM9 = "9"
    NUM0 = "0"

    A = "a"
    B = "b"
    C = "c"
    D = "d"
    E = "e"
    F = "f"
    G = "g"
    H = "h"
    I = "i"  # noqa: E741
    J = "j"
    K = "k"
    L = "l"
    M = "m"
    N = "n"
    O = "o"  # noqa: E741
    P = "p"
    Q = "q"
    R = "r"
    S = "s"
    T = "t"
    U = "u"
    V = "v"
    W = "w"
    X = "x"
    Y = "y"
    Z = "z"

    LEFT = "<left>"
    UP = "<up>"
    RIGHT = "<right>"
    DOWN = "<down>"

    BACKSPACE = "<backspace>"
    RETURN = "<return>"
    SPACE = "<space>"
    TAB = "<tab>"
    ESCAPE = "<esc>"
    INSERT = "<insert>"
    HOME = "<home>"
    DELETE = "<delete>"
    END = "<end>"
    PAGE_DOWN = "<pgdown>"
    PAGE_UP = "<pgup>"

    APOSTROPHE = "'"
    GRAVE = "`"
    CARET = "^"
    COMMA = ","
    PERIOD = "."
    COLON = ":"
    SEMICOLON = ";"
    LBRACKET = "["
    RBRACKET = "]"
    SLASH = "/"
    BACKSLASH = "\\"

    ALT = "<alt>"
    CONTROL = "<ctrl>"
    SHIFT = "<shift>"

    EQUAL = "="
    MINUS = "-"

    UNKNOWN = "???"

    @classmethod
    def from_char(cls, c: str) -> "Key":
        """The key that types ``c``, or ``UNKNOWN``."""
        return _CHAR_KEYS.get(c, cls.UNKNOWN)

    def __str__(self) -> str:
        return self.value

    def is_modifier(self) -> bool:
        return self in (Key.ALT, Key.CONTROL, Key.SHIFT)


_CHAR_KEYS = {
    **{k.value: k for k in Key if len(k.value) == 1 and (k.value.isalnum())},
    "/": Key.SLASH,
    "[": Key.LBRACKET,
    "]": Key.RBRACKET,
    "`": Key.GRAVE,
    ",": Key.COMMA,
    ".": Key.PERIOD,
    "=": Key.EQUAL,
    "-": Key.MINUS,
    "'": Key.APOSTROPHE,
    ";": Key.SEMICOLON,
    ":": Key.COLON,
    " ": Key.SPACE,
    "\\": Key.BACKSLASH,
}


@dataclass(frozen=True)
class ModifiersState:
    """Which keyboard modifiers are held; ``meta`` is the Windows or Command key."""

    shift: bool = False
    ctrl: bool = False
    alt: bool = False
    meta: bool = False

    def __str__(self) -> str:
        parts = (
            ("<ctrl>", self.ctrl),
            ("<alt>", self.alt),
            ("<meta>", self.meta),
            ("<shift>", self.shift),
        )
        return "".join(text for text, held in parts if held)


@dataclass(frozen=True)
class KeyboardInput:
    """A keyboard input event."""

    state: InputState
    key: Optional[Key]
    modifiers: ModifiersState = ModifiersState()


@dataclass(frozen=True)
class LogicalDelta:
    """A delta in logical pixels."""

    x: float
    y: float


@dataclass(frozen=True)
class LogicalPosition:
    """A position in logical pixels."""

    x: float
    y: float

    @classmethod
    def from_physical(cls, physical: "PhysicalPosition", scale_factor: float) -> "LogicalPosition":
        return physical.to_logical(pixel_ratio(scale_factor))

    def to_physical(self, scale_factor: float) -> "PhysicalPosition":
        ratio = pixel_ratio(scale_factor)
        return PhysicalPosition(self.x * ratio, self.y * ratio)


@dataclass(frozen=True)
class PhysicalPosition:
    """A position in physical pixels."""

    x: float
    y: float

    @classmethod
    def from_logical(cls, logical: LogicalPosition, scale_factor: float) -> "PhysicalPosition":
        return logical.to_physical(pixel_ratio(scale_factor))

    def to_logical(self, scale_factor: float) -> LogicalPosition:
        ratio = pixel_ratio(scale_factor)
        return LogicalPosition(self.x / ratio, self.y / ratio)


@dataclass(frozen=True)
class LogicalSize:
    """A size in logical pixels."""

    width: float
    height: float

    @classmethod
    def from_physical(cls, physical: "PhysicalSize", scale_factor: float) -> "LogicalSize":
        return physical.to_logical(pixel_ratio(scale_factor))

    def to_physical(self, scale_factor: float) -> "PhysicalSize":
        ratio = pixel_ratio(scale_factor)
        return PhysicalSize(self.width * ratio, self.height * ratio)

    def is_zero(self) -> bool:
        """Whether either side is smaller than one pixel."""
        return self.width < 1.0 or self.height < 1.0

    def to_u32(self) -> Tuple[int, int]:
        """The size as whole pixels, rounded rather than truncated."""
        return _round_u32(self.width), _round_u32(self.height)


@dataclass(frozen=True)
class PhysicalSize:
    """A size in physical pixels."""

    width: float
    height: float

    @classmethod
    def from_logical(cls, logical: LogicalSize, scale_factor: float) -> "PhysicalSize":
        return logical.to_physical(pixel_ratio(scale_factor))

    def to_logical(self, scale_factor: float) -> LogicalSize:
        ratio = pixel_ratio(scale_factor)
        return LogicalSize(self.width / ratio, self.height / ratio)

    def to_u32(self) -> Tuple[int, int]:
        """The size as whole pixels, rounded rather than truncated."""
        return _round_u32(self.width), _round_u32(self.height)