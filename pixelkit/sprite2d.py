"""Textured sprites and their conversion into vertices."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Union

from pixelkit.algebra import Vector2, Vector3
from pixelkit.color import Rgba, Rgba8
from pixelkit.rect import Rect

ColorLike = Union[Rgba, Rgba8]


def _rgba(color: ColorLike) -> Rgba:
    if isinstance(color, Rgba):
        return color
    if isinstance(color, Rgba8):
        return Rgba.from_rgba8(color)
    raise TypeError(f"expected a colour, got {color!r}")


@dataclass(frozen=True)
class Repeat:
    """Texture repetition factors along each axis."""

    x: float = 1.0
    y: float = 1.0


@dataclass(frozen=True)
class Vertex:
    """A sprite vertex: position, texture coordinates, colour and opacity."""

    position: Vector3
    uv: Vector2
    color: Rgba8
    opacity: float


@dataclass(frozen=True)
class Sprite:
    """A rectangle of a texture (``src``) drawn to a rectangle on screen (``dst``)."""

    src: Rect
    dst: Rect
    z: float = 0.0
    rgba: Rgba = field(default_factory=Rgba)
    opacity: float = 0.0
    tiling: Repeat = Repeat()

    def color(self, color: ColorLike) -> "Sprite":
        return replace(self, rgba=_rgba(color))

    def alpha(self, alpha: float) -> "Sprite":
        return replace(self, opacity=alpha)

    def zdepth(self, zdepth: float) -> "Sprite":
        return replace(self, z=float(zdepth))

    def repeat(self, x: float, y: float) -> "Sprite":
        return replace(self, tiling=Repeat(x, y))


class Batch:
    """Sprites sharing one ``w`` by ``h`` texture."""

    def __init__(self, w: int, h: int) -> None:
        self.w = w
        self.h = h
        self.size = 0
        self.items: List[Sprite] = []

    @classmethod
    def singleton(
        cls,
        w: int,
        h: int,
        src: Rect,
        dst: Rect,
        zdepth: float,
        rgba: ColorLike,
        alpha: float,
        repeat: Repeat,
    ) -> "Batch":
        """A batch holding a single sprite."""
        batch = cls(w, h)
        batch.push(
            Sprite(src, dst).zdepth(zdepth).color(rgba).alpha(alpha).repeat(repeat.x, repeat.y)
        )
        return batch

    def push(self, sprite: Sprite) -> None:
        """Append a sprite without counting it in ``size``."""
        self.items.append(sprite)

    def add(
        self,
        src: Rect,
        dst: Rect,
        depth: float,
        rgba: ColorLike,
        alpha: float,
        repeat: Repeat,
    ) -> None:
        """Append a sprite; texture repeat requires the whole texture as source."""
        if repeat != Repeat() and src != Rect.origin(float(self.w), float(self.h)):
            raise ValueError(
                "using texture repeat is only valid when using the entire "
                f"{self.w}x{self.h} texture"
            )
        self.items.append(
            Sprite(src, dst).zdepth(depth).color(rgba).alpha(alpha).repeat(repeat.x, repeat.y)
        )
        self.size += 1

    def vertices(self) -> List[Vertex]:
        """Two triangles per sprite."""
        verts: List[Vertex] = []
        for sprite in self.items:
            src, dst, re = sprite.src, sprite.dst, sprite.tiling
            rx1 = src.x1 / self.w
            ry1 = src.y1 / self.h
            rx2 = src.x2 / self.w
            ry2 = src.y2 / self.h
            color = Rgba8.from_rgba(sprite.rgba)
            corners = [
                (dst.x1, dst.y1, rx1, ry2),
                (dst.x2, dst.y1, rx2, ry2),
                (dst.x2, dst.y2, rx2, ry1),
                (dst.x1, dst.y1, rx1, ry2),
                (dst.x1, dst.y2, rx1, ry1),
                (dst.x2, dst.y2, rx2, ry1),
            ]
            verts.extend(
                Vertex(
                    Vector3(x, y, sprite.z),
                    Vector2(u * re.x, v * re.y),
                    color,
                    sprite.opacity,
                )
                for x, y, u, v in corners
            )
        return verts

    def clear(self) -> None:
        self.items.clear()
        self.size = 0

    def offset(self, x: float, y: float) -> None:
        """Move every sprite's destination by ``(x, y)``."""
        shift = Vector2(x, y)
        self.items = [replace(s, dst=s.dst + shift) for s in self.items]

    def is_empty(self) -> bool:
        return not self.items