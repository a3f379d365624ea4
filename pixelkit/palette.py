"""The colour palette shown next to the canvas."""

from __future__ import annotations

import math
from typing import List, Optional

from pixelkit.color import Rgba8

MAX_COLORS = 256


def _blend(start: int, end: int, coef: float) -> int:
    value = start * (1.0 - coef) + end * coef
    if math.isnan(value):
        return 0
    rounded = math.copysign(math.floor(abs(value) + 0.5), value)
    return int(min(max(rounded, 0), 0xFF))


class Palette:
    """A column-wise grid of up to 256 colours, with the colour under the cursor."""

    def __init__(self, cellsize: float, height: int) -> None:
        self.colors: List[Rgba8] = []
        self.hover: Optional[Rgba8] = None
        self.cellsize = cellsize
        self.height = height
        self.x = 0.0
        self.y = 0.0

    def _push(self, color: Rgba8) -> None:
        if len(self.colors) >= MAX_COLORS:
            raise OverflowError(f"palette is full ({MAX_COLORS} colors)")
        self.colors.append(color)

    def add(self, color: Rgba8) -> None:
        """Add a colour unless it is already present."""
        if color not in self.colors:
            self._push(color)

    def gradient(self, colorstart: Rgba8, colorend: Rgba8, number: int) -> None:
        """Append ``number`` colours blending from ``colorstart`` to ``colorend``."""
        if number < 1:
            raise ValueError(f"a gradient needs at least one color, got {number}")
        step = 1.0 / (number - 1) if number > 1 else math.nan
        for i in range(number):
            coef = i * step
            self._push(
                Rgba8(
                    _blend(colorstart.r, colorend.r, coef),
                    _blend(colorstart.g, colorend.g, coef),
                    _blend(colorstart.b, colorend.b, coef),
                    _blend(colorstart.a, colorend.a, coef),
                )
            )

    def clear(self) -> None:
        self.colors.clear()

    def size(self) -> int:
        return len(self.colors)

    def handle_cursor_moved(self, p) -> None:
        """Update ``hover`` for a cursor at ``p`` (anything with ``x`` and ``y``)."""
        x = int(p.x) - int(self.x)
        y = int(p.y) - int(self.y)
        cellsize = int(self.cellsize)
        size = self.size()
        rows = int(self.height)
        columns = math.ceil(size / rows)

        width = cellsize * columns if size > rows else cellsize
        height = min(size, rows) * cellsize

        if x >= width or y >= height or x < 0 or y < 0:
            self.hover = None
            return

        x //= cellsize
        y //= cellsize
        index = y + x * (height // cellsize)

        # The palette is displayed reversed, since the Y axis points up while
        # the palette is laid out from the top down.
        self.hover = self.colors[size - index - 1] if index < size else None