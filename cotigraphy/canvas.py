"""An RGBA pixel canvas that renders the calendar grid and the worm."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import require
from .grid import Color, Grid
from .worm import Worm

BYTES_PER_PIXEL = 4
_OPAQUE = 0xFF

Rect = tuple[int, int, int, int]


@dataclass(frozen=True)
class CanvasLayout:
    """Canvas size in pixels, plus the side length of a cell and the gap between cells."""

    width: int
    height: int
    cell_size: int
    cell_margin: int


class GridCanvas:
    """A row-major RGBA8888 buffer onto which grid cells and worm segments are drawn."""

    def __init__(self, layout: CanvasLayout) -> None:
        require(layout.width > 0, "canvas width must be positive")
        require(layout.height > 0, "canvas height must be positive")
        require(layout.cell_size > 0, "cell size must be positive")
        require(layout.cell_margin > 0, "cell margin must be positive")
        self.layout = layout
        self._buffer = bytearray(layout.width * layout.height * BYTES_PER_PIXEL)

    @property
    def buffer(self) -> bytes:
        """A copy of the pixel data, RGBA, row by row."""
        return bytes(self._buffer)

    def clear(self, color: Color) -> None:
        """Fill the whole canvas with an opaque ``color``."""
        r, g, b = color
        pixel_count = self.layout.width * self.layout.height
        self._buffer[:] = bytes((r, g, b, _OPAQUE)) * pixel_count

    def draw_grid(self, grid: Grid) -> None:
        """Draw every cell of ``grid`` at full size in its own colour."""
        for cell in grid:
            self.draw_cell(cell.week, cell.day, cell.color)

    def draw_worm(self, worm: Worm) -> None:
        """Draw each segment of ``worm`` at its scale and colour."""
        for segment in worm.segments:
            week, day = segment.point
            self.draw_cell(week, day, segment.color, segment.scale)

    def draw_cell(self, week: int, day: int, color: Color, scale: float = 1.0) -> None:
        """Fill the cell at (``week``, ``day``), shrunk by ``scale``, clipped to the canvas."""
        left, top, right, bottom = self.cell_rect(week, day, scale)
        width, height = self.layout.width, self.layout.height
        left, top = max(0, left), max(0, top)
        right, bottom = min(width, right), min(height, bottom)
        if right <= left or bottom <= top:
            return

        r, g, b = color
        row = bytes((r, g, b, _OPAQUE)) * (right - left)
        for y in range(top, bottom):
            start = (y * width + left) * BYTES_PER_PIXEL
            self._buffer[start:start + len(row)] = row

    def cell_rect(self, week: int, day: int, scale: float = 1.0) -> Rect:
        """Pixel rectangle (left, top, right, bottom) of a cell scaled about its centre."""
        require(0 <= week < self.layout.width, "week index out of range")
        require(0 <= day < self.layout.height, "day index out of range")
        require(0.0 < scale <= 1.0, "scale must be in (0, 1]")

        size = self.layout.cell_size
        margin = self.layout.cell_margin
        left_base = week * size + week * margin
        top_base = day * size + day * margin

        center_x = (2 * left_base + size) * 0.5
        center_y = (2 * top_base + size) * 0.5
        half = size * scale * 0.5

        return (
            int(center_x - half),
            int(center_y - half),
            int(center_x + half),
            int(center_y + half),
        )

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """The (r, g, b, a) value at pixel column ``x`` and row ``y``."""
        require(
            0 <= x < self.layout.width and 0 <= y < self.layout.height,
            f"pixel ({x}, {y}) is outside the canvas",
        )
        start = (y * self.layout.width + x) * BYTES_PER_PIXEL
        r, g, b, a = self._buffer[start:start + BYTES_PER_PIXEL]
        return r, g, b, a