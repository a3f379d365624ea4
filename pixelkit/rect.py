"""Axis-aligned rectangles described by two corner coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union

from pixelkit.algebra import Point2, Vector2

Number = Union[int, float]


def _half(value: Number) -> Number:
    """Halve a value, truncating towards zero for integers."""
    if isinstance(value, int):
        return value // 2 if value >= 0 else -((-value) // 2)
    return value / 2


@dataclass(frozen=True)
class Rect:
    """A rectangle with bottom-left ``(x1, y1)`` and top-right ``(x2, y2)`` coordinates."""

    x1: Number
    y1: Number
    x2: Number
    y2: Number

    @classmethod
    def sized(cls, x1: Number, y1: Number, w: Number, h: Number) -> "Rect":
        """A rectangle at ``(x1, y1)`` with the given width and height."""
        return cls(x1, y1, x1 + w, y1 + h)

    @classmethod
    def zero(cls) -> "Rect":
        return cls(0, 0, 0, 0)

    @classmethod
    def origin(cls, w: Number, h: Number) -> "Rect":
        """A rectangle from the origin to ``(w, h)``."""
        return cls(0, 0, w, h)

    def map(self, f: Callable[[Number], Number]) -> "Rect":
        return Rect(f(self.x1), f(self.y1), f(self.x2), f(self.y2))

    def scale(self, x: Number, y: Number) -> "Rect":
        """Scale the second corner, keeping the first in place."""
        return Rect(self.x1, self.y1, self.x2 * x, self.y2 * y)

    def with_origin(self, x: Number, y: Number) -> "Rect":
        """Return the rectangle moved so that its first corner is at ``(x, y)``."""
        return Rect(x, y, x + (self.x2 - self.x1), y + (self.y2 - self.y1))

    def with_size(self, w: Number, h: Number) -> "Rect":
        """Return the rectangle with a different size."""
        return Rect(self.x1, self.y1, self.x1 + w, self.y1 + h)

    def expand(self, x1: Number, y1: Number, x2: Number, y2: Number) -> "Rect":
        """Return the rectangle grown outwards by the given amounts."""
        if self.x2 > self.x1:
            nx1, nx2 = self.x1 - x1, self.x2 + x2
        else:
            nx1, nx2 = self.x1 + x1, self.x2 - x2
        if self.y2 > self.y1:
            ny1, ny2 = self.y1 - y1, self.y2 + y2
        else:
            ny1, ny2 = self.y1 + y1, self.y2 - y2
        return Rect(nx1, ny1, nx2, ny2)

    def flip_y(self) -> "Rect":
        """Return the rectangle flipped in the Y axis."""
        return Rect(self.x1, self.y2, self.x2, self.y1)

    def flip_x(self) -> "Rect":
        """Return the rectangle flipped in the X axis."""
        return Rect(self.x2, self.y1, self.x1, self.y2)

    def area(self) -> Number:
        return self.width() * self.height()

    def is_empty(self) -> bool:
        return self.x1 == self.x2 and self.y1 == self.y2

    def is_zero(self) -> bool:
        return self.x1 == 0 and self.x2 == 0 and self.y1 == 0 and self.y2 == 0

    def width(self) -> Number:
        return self.x2 - self.x1 if self.x1 < self.x2 else self.x1 - self.x2

    def height(self) -> Number:
        return self.y2 - self.y1 if self.y1 < self.y2 else self.y1 - self.y2

    def min(self) -> Point2:
        """The corner with the smallest coordinates."""
        return Point2(min(self.x1, self.x2), min(self.y1, self.y2))

    def max(self) -> Point2:
        """The corner with the largest coordinates."""
        return Point2(max(self.x1, self.x2), max(self.y1, self.y2))

    def center(self) -> Point2:
        r = self.abs()
        return Point2(r.x1 + _half(r.width()), r.y1 + _half(r.height()))

    def radius(self) -> Number:
        """Half of the larger side."""
        w = self.width()
        h = self.height()
        return _half(w) if w > h else _half(h)

    def contains(self, p: Point2) -> bool:
        """Whether the point lies inside; the maximum edges are excluded."""
        lo = self.min()
        hi = self.max()
        return lo.x <= p.x < hi.x and lo.y <= p.y < hi.y

    def intersects(self, other: "Rect") -> bool:
        return (
            self.y2 > other.y1
            and self.y1 < other.y2
            and self.x1 < other.x2
            and self.x2 > other.x1
        )

    def abs(self) -> "Rect":
        """Return the rectangle with its corners ordered."""
        return Rect(
            min(self.x1, self.x2),
            min(self.y1, self.y2),
            max(self.x1, self.x2),
            max(self.y1, self.y2),
        )

    def intersection(self, other: "Rect") -> "Rect":
        x1 = max(self.x1, other.x1)
        y1 = max(self.y1, other.y1)
        x2 = min(self.x2, other.x2)
        y2 = min(self.y2, other.y2)
        return Rect(x1, y1, max(x1, x2), max(y1, y2))

    def __add__(self, vec: Vector2) -> "Rect":
        if not isinstance(vec, Vector2):
            return NotImplemented
        return Rect(self.x1 + vec.x, self.y1 + vec.y, self.x2 + vec.x, self.y2 + vec.y)

    def __sub__(self, vec: Vector2) -> "Rect":
        if not isinstance(vec, Vector2):
            return NotImplemented
        return Rect(self.x1 - vec.x, self.y1 - vec.y, self.x2 - vec.x, self.y2 - vec.y)

    def __mul__(self, s: Number) -> "Rect":
        if not isinstance(s, (int, float)):
            return NotImplemented
        return Rect(self.x1 * s, self.y1 * s, self.x2 * s, self.y2 * s)