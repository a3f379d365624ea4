"""Two-dimensional shapes and their triangulation into coloured vertices."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import ClassVar, List, Optional, Sequence, Union

from pixelkit.algebra import Matrix4, Point2, Vector2, Vector3, Vector4
from pixelkit.color import Rgba, Rgba8
from pixelkit.rect import Rect

PointLike = Union[Point2, Vector2, Sequence[float]]
ColorLike = Union[Rgba, Rgba8]


def _point(p: PointLike) -> Point2:
    if isinstance(p, Point2):
        return p
    if isinstance(p, Vector2):
        return Point2(p.x, p.y)
    x, y = p
    return Point2(x, y)


def _rgba(color: ColorLike) -> Rgba:
    if isinstance(color, Rgba):
        return color
    if isinstance(color, Rgba8):
        return Rgba.from_rgba8(color)
    raise TypeError(f"expected a colour, got {color!r}")


@dataclass(frozen=True)
class Vertex:
    """A shape vertex: position, rotation angle and centre, and colour."""

    position: Vector3
    angle: float
    center: Vector2
    color: Rgba8


def _vertex(x: float, y: float, z: float, angle: float, center: Point2, color: Rgba8) -> Vertex:
    return Vertex(Vector3(x, y, z), angle, Vector2(center.x, center.y), color)


@dataclass(frozen=True)
class Stroke:
    """Outline width and colour."""

    width: float = 1.0
    color: Rgba = field(default_factory=Rgba)

    NONE: ClassVar["Stroke"]


Stroke.NONE = Stroke(0.0, Rgba.TRANSPARENT)


@dataclass(frozen=True)
class Fill:
    """Interior of a shape: empty when ``color`` is ``None``, solid otherwise."""

    color: Optional[Rgba] = None

    EMPTY: ClassVar["Fill"]

    @classmethod
    def solid(cls, color: ColorLike) -> "Fill":
        return cls(_rgba(color))

    @property
    def is_solid(self) -> bool:
        return self.color is not None


Fill.EMPTY = Fill()


@dataclass(frozen=True)
class Rotation:
    """A rotation angle around a centre point."""

    angle: float = 0.0
    center: Point2 = Point2(0.0, 0.0)

    ZERO: ClassVar["Rotation"]


Rotation.ZERO = Rotation()


@dataclass(frozen=True)
class Line:
    """A line segment between two points."""

    p1: Point2
    p2: Point2

    def __post_init__(self) -> None:
        object.__setattr__(self, "p1", _point(self.p1))
        object.__setattr__(self, "p2", _point(self.p2))

    def transform(self, m: Matrix4) -> "Line":
        """Apply a transformation matrix to both end points."""
        v1 = m * Vector4(self.p1.x, self.p1.y, 0.0, 1.0)
        v2 = m * Vector4(self.p2.x, self.p2.y, 0.0, 1.0)
        return Line(Point2(v1.x, v1.y), Point2(v2.x, v2.y))

    def __mul__(self, n: float) -> "Line":
        if not isinstance(n, (int, float)):
            return NotImplemented
        return Line(self.p1 * n, self.p2 * n)

    def __add__(self, vec: Vector2) -> "Line":
        if not isinstance(vec, Vector2):
            return NotImplemented
        return Line(self.p1 + vec, self.p2 + vec)


@dataclass(frozen=True)
class Circle:
    """A circle approximated by a polygon with ``sides`` sides."""

    position: Point2
    radius: float
    sides: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _point(self.position))
        if self.sides < 1:
            raise ValueError(f"a circle needs at least one side, got {self.sides}")


def _circle_points(position: Point2, radius: float, sides: int) -> List[Point2]:
    step = (2.0 * math.pi) / sides
    return [
        Point2(position.x + radius * math.cos(i * step), position.y + radius * math.sin(i * step))
        for i in range(sides + 1)
    ]


@dataclass(frozen=True)
class Shape:
    """A line, rectangle or circle together with its depth, rotation, stroke and fill."""

    geometry: Union[Line, Rect, Circle]
    z: float = 0.0
    rot: Rotation = Rotation()
    stroke_style: Stroke = field(default_factory=Stroke)
    fill_style: Fill = Fill()

    @classmethod
    def circle(cls, position: PointLike, radius: float, sides: int) -> "Shape":
        return cls(Circle(_point(position), radius, sides))

    @classmethod
    def line(cls, p1: PointLike, p2: PointLike) -> "Shape":
        return cls(Line(_point(p1), _point(p2)))

    @classmethod
    def rect(cls, p1: PointLike, p2: PointLike) -> "Shape":
        a, b = _point(p1), _point(p2)
        return cls(Rect(a.x, a.y, b.x, b.y))

    def zdepth(self, z: float) -> "Shape":
        return replace(self, z=float(z))

    def rotation(self, angle: float, center: PointLike) -> "Shape":
        """Set the rotation; circles are not rotated."""
        if isinstance(self.geometry, Circle):
            return self
        return replace(self, rot=Rotation(angle, _point(center)))

    def fill(self, f: Fill) -> "Shape":
        """Set the fill; lines have none."""
        if isinstance(self.geometry, Line):
            return self
        return replace(self, fill_style=f)

    def stroke(self, width: float, color: ColorLike) -> "Shape":
        return replace(self, stroke_style=Stroke(width, _rgba(color)))

    def triangulate(self) -> List[Vertex]:
        """Break the shape down into triangles, three vertices each."""
        geometry = self.geometry
        if isinstance(geometry, Line):
            return self._triangulate_line(geometry)
        if isinstance(geometry, Rect):
            return self._triangulate_rect(geometry)
        return self._triangulate_circle(geometry)

    def _triangulate_line(self, line: Line) -> List[Vertex]:
        z, angle, center = self.z, self.rot.angle, self.rot.center
        v = (line.p2 - line.p1).normalize()
        half = self.stroke_style.width / 2.0
        wx, wy = half * v.y, half * v.x
        color = Rgba8.from_rgba(self.stroke_style.color)
        p1, p2 = line.p1, line.p2
        corners = [
            (p1.x - wx, p1.y + wy),
            (p1.x + wx, p1.y - wy),
            (p2.x - wx, p2.y + wy),
            (p2.x - wx, p2.y + wy),
            (p1.x + wx, p1.y - wy),
            (p2.x + wx, p2.y - wy),
        ]
        return [_vertex(x, y, z, angle, center, color) for x, y in corners]

    def _triangulate_rect(self, outer: Rect) -> List[Vertex]:
        z, angle, center = self.z, self.rot.angle, self.rot.center
        stroke = self.stroke_style
        w = stroke.width
        inner = Rect(outer.x1 + w, outer.y1 + w, outer.x2 - w, outer.y2 - w)
        corners = []
        if stroke != Stroke.NONE:
            stroke_color = Rgba8.from_rgba(stroke.color)
            outline = [
                # Bottom
                (outer.x1, outer.y1), (outer.x2, outer.y1), (inner.x1, inner.y1),
                (inner.x1, inner.y1), (outer.x2, outer.y1), (inner.x2, inner.y1),
                # Left
                (outer.x1, outer.y1), (inner.x1, inner.y1), (outer.x1, outer.y2),
                (outer.x1, outer.y2), (inner.x1, inner.y1), (inner.x1, inner.y2),
                # Right
                (inner.x2, inner.y1), (outer.x2, outer.y1), (outer.x2, outer.y2),
                (inner.x2, inner.y1), (inner.x2, inner.y2), (outer.x2, outer.y2),
                # Top
                (outer.x1, outer.y2), (outer.x2, outer.y2), (inner.x1, inner.y2),
                (inner.x1, inner.y2), (outer.x2, outer.y2), (inner.x2, inner.y2),
            ]
            corners.extend((x, y, stroke_color) for x, y in outline)
        if self.fill_style.is_solid:
            fill_color = Rgba8.from_rgba(self.fill_style.color)
            body = [
                (inner.x1, inner.y1), (inner.x2, inner.y1), (inner.x2, inner.y2),
                (inner.x1, inner.y1), (inner.x1, inner.y2), (inner.x2, inner.y2),
            ]
            corners.extend((x, y, fill_color) for x, y in body)
        return [_vertex(x, y, z, angle, center, c) for x, y, c in corners]

    def _triangulate_circle(self, circle: Circle) -> List[Vertex]:
        z = self.z
        origin = Point2(0.0, 0.0)
        stroke = self.stroke_style
        inner = _circle_points(circle.position, circle.radius - stroke.width, circle.sides)
        verts: List[Vertex] = []

        if stroke != Stroke.NONE:
            outer = _circle_points(circle.position, circle.radius, circle.sides)
            color = Rgba8.from_rgba(stroke.color)
            for (i0, i1), (o0, o1) in zip(zip(inner, inner[1:]), zip(outer, outer[1:])):
                verts.extend(
                    _vertex(p.x, p.y, z, 0.0, origin, color)
                    for p in (i0, o0, o1, i0, o1, i1)
                )

        if self.fill_style.is_solid:
            color = Rgba8.from_rgba(self.fill_style.color)
            center = _vertex(circle.position.x, circle.position.y, z, 0.0, origin, color)
            ring = [_vertex(p.x, p.y, z, 0.0, origin, color) for p in inner]
            for a, b in zip(ring, ring[1:]):
                verts.extend((center, a, b))
            verts.extend((center, ring[-1], ring[0]))
        return verts


class Batch:
    """A collection of shapes rendered together."""

    def __init__(self) -> None:
        self.items: List[Shape] = []

    def add(self, shape: Shape) -> None:
        self.items.append(shape)

    def vertices(self) -> List[Vertex]:
        return [v for shape in self.items for v in shape.triangulate()]

    def is_empty(self) -> bool:
        return not self.items

    def clear(self) -> None:
        self.items.clear()