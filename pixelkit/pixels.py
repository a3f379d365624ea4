"""Pixel buffer views and nearest-neighbour scaling."""

from __future__ import annotations

from typing import Generic, List, Optional, Sequence, TypeVar

T = TypeVar("T")


class Pixels(Generic[T]):
    """A read-only view into a row-major pixel buffer."""

    def __init__(self, pixels: Sequence[T], width: int, height: int) -> None:
        self.pixels = pixels
        self.width = width
        self.height = height

    def get(self, x: int, y: int) -> Optional[T]:
        """The pixel at ``(x, y)``, or ``None`` when it falls outside the buffer."""
        index = self.width * y + x
        if 0 <= index < len(self.pixels):
            return self.pixels[index]
        return None


def scale(image: Sequence[T], width: int, height: int, factor: int) -> List[T]:
    """Scale an image by an integer factor using nearest-neighbour sampling."""
    if len(image) != width * height:
        raise ValueError(
            f"image has {len(image)} pixels, expected {width}x{height}={width * height}"
        )
    source = Pixels(image, width, height)
    out_w = width * factor
    out_h = height * factor
    return [
        source.get(x // factor, y // factor)
        for y in range(out_h)
        for x in range(out_w)
    ]