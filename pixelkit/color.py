"""Colour types: 8-bit RGBA, 8-bit RGB and normalised floating-point RGBA."""

from __future__ import annotations

import math
import string
import struct
from dataclasses import dataclass
from itertools import chain
from typing import ClassVar, Iterable, List

_HEX_DIGITS = frozenset(string.hexdigits)


def _check_channel(name: str, value: int) -> None:
    if not isinstance(value, int) or not 0 <= value <= 0xFF:
        raise ValueError(f"channel {name} must be an integer in 0..255, got {value!r}")


def _unit_to_u8(value: float) -> int:
    """Scale a unit float to a byte, rounding half away from zero and saturating."""
    if math.isnan(value):
        return 0
    scaled = value * 255.0
    rounded = math.copysign(math.floor(abs(scaled) + 0.5), scaled)
    return int(min(max(rounded, 0), 0xFF))


def _parse_byte(text: str) -> int:
    if len(text) != 2 or not set(text) <= _HEX_DIGITS:
        raise ValueError(f"invalid hex byte {text!r}")
    return int(text, 16)


@dataclass(frozen=True, order=True)
class Rgba8:
    """RGBA colour with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    TRANSPARENT: ClassVar["Rgba8"]
    WHITE: ClassVar["Rgba8"]
    BLACK: ClassVar["Rgba8"]
    RED: ClassVar["Rgba8"]
    GREEN: ClassVar["Rgba8"]
    BLUE: ClassVar["Rgba8"]

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            _check_channel(name, getattr(self, name))

    def invert(self) -> "Rgba8":
        """Return the colour with its RGB channels inverted; alpha is kept."""
        return Rgba8(0xFF - self.r, 0xFF - self.g, 0xFF - self.b, self.a)

    def alpha(self, a: int) -> "Rgba8":
        """Return the colour with a different alpha."""
        return Rgba8(self.r, self.g, self.b, a)

    @classmethod
    def from_hex(cls, hex_code: str) -> "Rgba8":
        """Parse a colour code of the form ``#rrggbb``; alpha is always 0xff."""
        if len(hex_code) < 7:
            raise ValueError(f"{hex_code!r} is not a valid color value")
        return cls(
            _parse_byte(hex_code[1:3]),
            _parse_byte(hex_code[3:5]),
            _parse_byte(hex_code[5:7]),
            0xFF,
        )

    @classmethod
    def from_u32(cls, value: int) -> "Rgba8":
        """Build a colour from a 32-bit value laid out as little-endian RGBA bytes."""
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"{value!r} does not fit in 32 bits")
        r, g, b, a = value.to_bytes(4, "little")
        return cls(r, g, b, a)

    @classmethod
    def from_rgba(cls, rgba: "Rgba") -> "Rgba8":
        """Convert a normalised colour to 8-bit channels."""
        return cls(
            _unit_to_u8(rgba.r),
            _unit_to_u8(rgba.g),
            _unit_to_u8(rgba.b),
            _unit_to_u8(rgba.a),
        )

    def __str__(self) -> str:
        text = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        if self.a != 0xFF:
            text += f"{self.a:02x}"
        return text


Rgba8.TRANSPARENT = Rgba8(0, 0, 0, 0)
Rgba8.WHITE = Rgba8(0xFF, 0xFF, 0xFF, 0xFF)
Rgba8.BLACK = Rgba8(0, 0, 0, 0xFF)
Rgba8.RED = Rgba8(0xFF, 0, 0, 0xFF)
Rgba8.GREEN = Rgba8(0, 0xFF, 0, 0xFF)
Rgba8.BLUE = Rgba8(0, 0, 0xFF, 0xFF)


@dataclass(frozen=True)
class Rgb8:
    """An 8-bit RGB colour, for when alpha is not used."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            _check_channel(name, getattr(self, name))

    @classmethod
    def from_rgba8(cls, rgba: Rgba8) -> "Rgb8":
        """Drop the alpha channel of an RGBA colour."""
        return cls(rgba.r, rgba.g, rgba.b)

    def __str__(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


@dataclass(frozen=True)
class Rgba:
    """A normalised RGBA colour with channels in 0.0..1.0."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    RED: ClassVar["Rgba"]
    GREEN: ClassVar["Rgba"]
    BLUE: ClassVar["Rgba"]
    WHITE: ClassVar["Rgba"]
    BLACK: ClassVar["Rgba"]
    TRANSPARENT: ClassVar["Rgba"]

    def invert(self) -> "Rgba":
        """Return the colour with its RGB channels inverted; alpha is kept."""
        return Rgba(1.0 - self.r, 1.0 - self.g, 1.0 - self.b, self.a)

    @classmethod
    def from_rgba8(cls, rgba8: Rgba8) -> "Rgba":
        """Convert an 8-bit colour to normalised channels."""
        return cls(rgba8.r / 255.0, rgba8.g / 255.0, rgba8.b / 255.0, rgba8.a / 255.0)


Rgba.RED = Rgba(1.0, 0.0, 0.0, 1.0)
Rgba.GREEN = Rgba(0.0, 1.0, 0.0, 1.0)
Rgba.BLUE = Rgba(0.0, 0.0, 1.0, 1.0)
Rgba.WHITE = Rgba(1.0, 1.0, 1.0, 1.0)
Rgba.BLACK = Rgba(0.0, 0.0, 0.0, 1.0)
Rgba.TRANSPARENT = Rgba(0.0, 0.0, 0.0, 0.0)


def align(data: bytes) -> List[Rgba8]:
    """Interpret a byte buffer as consecutive RGBA pixels."""
    raw = bytes(data)
    if len(raw) % 4:
        raise ValueError("input is not a valid Rgba8 buffer")
    return [Rgba8(r, g, b, a) for r, g, b, a in struct.iter_unpack("4B", raw)]


def to_bytes(pixels: Iterable[Rgba8]) -> bytes:
    """Pack pixels into a flat RGBA byte buffer."""
    return bytes(chain.from_iterable((p.r, p.g, p.b, p.a) for p in pixels))