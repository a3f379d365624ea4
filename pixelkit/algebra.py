"""Linear algebra types: vectors, points, 4x4 matrices and orthographic projections."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Union

Number = Union[int, float]


class Origin(Enum):
    """View origin."""

    BOTTOM_LEFT = "bottom-left"
    TOP_LEFT = "top-left"


@dataclass(frozen=True)
class Vector2:
    """2D vector."""

    x: Number
    y: Number

    def normalize(self) -> "Vector2":
        """Return a unit vector with the same direction; a zero vector yields NaN."""
        m = self.magnitude()
        if m == 0:
            return Vector2(math.nan, math.nan)
        return self * (1.0 / m)

    def magnitude(self) -> float:
        """The length of the vector."""
        return math.sqrt(self.dot(self))

    def dot(self, other: "Vector2") -> Number:
        """Dot product of two vectors."""
        return self.x * other.x + self.y * other.y

    def distance(self, other: "Vector2") -> float:
        """Distance between two vectors."""
        return (other - self).magnitude()

    def extend(self, z: Number) -> "Vector3":
        """Extend the vector to three dimensions."""
        return Vector3(self.x, self.y, z)

    def map(self, f: Callable[[Number], Number]) -> "Vector2":
        return Vector2(f(self.x), f(self.y))

    @classmethod
    def zero(cls) -> "Vector2":
        return cls(0, 0)

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def __add__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, s: Number) -> "Vector2":
        if not isinstance(s, (int, float)):
            return NotImplemented
        return Vector2(self.x * s, self.y * s)


@dataclass(frozen=True)
class Vector3:
    """3D vector."""

    x: Number
    y: Number
    z: Number

    def extend(self, w: Number) -> "Vector4":
        """Extend the vector to four dimensions."""
        return Vector4(self.x, self.y, self.z, w)


@dataclass(frozen=True)
class Vector4:
    """4D vector."""

    x: Number
    y: Number
    z: Number
    w: Number

    def __mul__(self, other: Union["Vector4", Number]):
        """Dot product with another vector, or scaling by a number."""
        if isinstance(other, Vector4):
            return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w
        if isinstance(other, (int, float)):
            return Vector4(self.x * other, self.y * other, self.z * other, self.w * other)
        return NotImplemented

    def __add__(self, other: "Vector4") -> "Vector4":
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def to_list(self) -> List[Number]:
        return [self.x, self.y, self.z, self.w]


@dataclass(frozen=True)
class Point2:
    """2D point."""

    x: Number
    y: Number

    def map(self, f: Callable[[Number], Number]) -> "Point2":
        return Point2(f(self.x), f(self.y))

    def __truediv__(self, s: Number) -> "Point2":
        if not isinstance(s, (int, float)):
            return NotImplemented
        return Point2(self.x / s, self.y / s)

    def __mul__(self, s: Number) -> "Point2":
        if not isinstance(s, (int, float)):
            return NotImplemented
        return Point2(self.x * s, self.y * s)

    def __add__(self, other: Vector2) -> "Point2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Point2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Union["Point2", Vector2]):
        """Point minus point is a vector; point minus vector is a point."""
        if isinstance(other, Point2):
            return Vector2(self.x - other.x, self.y - other.y)
        if isinstance(other, Vector2):
            return Point2(self.x - other.x, self.y - other.y)
        return NotImplemented


@dataclass(frozen=True)
class Matrix4:
    """A 4x4 column-major matrix; ``x``, ``y``, ``z`` and ``w`` are its columns."""

    x: Vector4
    y: Vector4
    z: Vector4
    w: Vector4

    @classmethod
    def _from_values(cls, *values: Number) -> "Matrix4":
        columns = [Vector4(*values[i : i + 4]) for i in range(0, 16, 4)]
        return cls(*columns)

    @classmethod
    def identity(cls) -> "Matrix4":
        return cls.from_nonuniform_scale(1, 1, 1)

    @classmethod
    def from_translation(cls, v: Vector3) -> "Matrix4":
        """Homogeneous transformation matrix from a translation vector."""
        return cls._from_values(
            1, 0, 0, 0,
            0, 1, 0, 0,
            0, 0, 1, 0,
            v.x, v.y, v.z, 1,
        )

    def row(self, n: int) -> Vector4:
        if n not in range(4):
            raise IndexError(f"invalid row number: {n}")
        attr = "xyzw"[n]
        return Vector4(*(getattr(col, attr) for col in (self.x, self.y, self.z, self.w)))

    @classmethod
    def from_scale(cls, value: Number) -> "Matrix4":
        """Homogeneous transformation matrix from a uniform scale."""
        return cls.from_nonuniform_scale(value, value, value)

    @classmethod
    def from_nonuniform_scale(cls, x: Number, y: Number, z: Number) -> "Matrix4":
        """Homogeneous transformation matrix from per-axis scales."""
        return cls._from_values(
            x, 0, 0, 0,
            0, y, 0, 0,
            0, 0, z, 0,
            0, 0, 0, 1,
        )

    @classmethod
    def ortho(cls, w: int, h: int, origin: Origin) -> "Matrix4":
        """Orthographic projection of a ``w`` by ``h`` area."""
        if origin is Origin.BOTTOM_LEFT:
            top, bottom = float(h), 0.0
        else:
            top, bottom = 0.0, float(h)
        return Ortho(
            left=0.0, right=float(w), bottom=bottom, top=top, near=-1.0, far=1.0
        ).to_matrix()

    def __mul__(self, other):
        if isinstance(other, Matrix4):
            a, b, c, d = self.x, self.y, self.z, self.w

            def column(v: Vector4) -> Vector4:
                return a * v.x + b * v.y + c * v.z + d * v.w

            return Matrix4(column(other.x), column(other.y), column(other.z), column(other.w))
        if isinstance(other, Vector4):
            return Vector4(*(self.row(n) * other for n in range(4)))
        if isinstance(other, Vector3):
            vec = other.extend(1.0)
            return Vector3(*(self.row(n) * vec for n in range(3)))
        if isinstance(other, Point2):
            vec = Vector4(other.x, other.y, 0.0, 1.0)
            return Point2(self.row(0) * vec, self.row(1) * vec)
        return NotImplemented

    def to_list(self) -> List[List[Number]]:
        """The matrix as a list of columns."""
        return [col.to_list() for col in (self.x, self.y, self.z, self.w)]


@dataclass(frozen=True)
class Ortho:
    """An orthographic projection with arbitrary left/right/bottom/top distances."""

    left: float
    right: float
    bottom: float
    top: float
    near: float
    far: float

    def to_matrix(self) -> Matrix4:
        width = self.right - self.left
        height = self.top - self.bottom
        depth = self.far - self.near
        return Matrix4._from_values(
            2.0 / width, 0.0, 0.0, 0.0,
            0.0, 2.0 / height, 0.0, 0.0,
            0.0, 0.0, -2.0 / depth, 0.0,
            -(self.right + self.left) / width,
            -(self.top + self.bottom) / height,
            -(self.far + self.near) / depth,
            1.0,
        )