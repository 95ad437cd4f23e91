"""Isometric projection of a height grid and wireframe rasterisation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from .mapfile import Grid

WINDOW_WIDTH = 1920
WINDOW_HEIGHT = 1080
FLAT_COLOR = 0xFFFFFF
RAISED_COLOR = 0xCC1100


@dataclass
class View:
    """Viewing parameters: scale, height boost, rotation and screen offset."""

    zoom: int = 30
    height: int = 0
    angle: float = 0.6
    offset_x: int = 900
    offset_y: int = 300


class Canvas:
    """A 32-bit-per-pixel image stored row by row, little-endian."""

    _BYTES_PER_PIXEL = 4

    def __init__(self, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas dimensions must be positive")
        self.width = width
        self.height = height
        self._pixels = bytearray(width * height * self._BYTES_PER_PIXEL)

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _index(self, x: int, y: int) -> int:
        return (y * self.width + x) * self._BYTES_PER_PIXEL

    def put_pixel(self, x: int, y: int, color: int) -> bool:
        """Set a pixel; points outside the canvas are ignored.

        Returns whether the pixel was inside the canvas.
        """
        if not self._contains(x, y):
            return False
        start = self._index(x, y)
        self._pixels[start:start + self._BYTES_PER_PIXEL] = (
            color & 0xFFFFFFFF
        ).to_bytes(self._BYTES_PER_PIXEL, "little")
        return True

    def get_pixel(self, x: int, y: int) -> int:
        """Colour stored at (*x*, *y*)."""
        if not self._contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) lies outside the canvas")
        start = self._index(x, y)
        return int.from_bytes(self._pixels[start:start + self._BYTES_PER_PIXEL], "little")

    def to_bytes(self) -> bytes:
        """The raw pixel data."""
        return bytes(self._pixels)


def _elevation(grid: Grid, view: View, x: int, y: int) -> int:
    z = grid.height_at(x, y)
    return z + view.height if z != 0 else z


def project(grid: Grid, view: View, x: int, y: int) -> tuple[int, int]:
    """Screen position of grid point (*x*, *y*), offset included.

    Intermediate results are truncated toward zero, and the vertical
    coordinate is computed from the already rotated horizontal one.
    """
    z = _elevation(grid, view, x, y)
    scaled_x = x * view.zoom
    scaled_y = y * view.zoom
    screen_x = int((scaled_x - scaled_y) * math.cos(view.angle))
    screen_y = int((screen_x + scaled_y) * math.sin(view.angle)) - z
    return screen_x + view.offset_x, screen_y + view.offset_y


def line_points(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    """Bresenham points from (*x0*, *y0*) toward (*x1*, *y1*), end excluded."""
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    step_x = 1 if x0 < x1 else -1
    step_y = 1 if y0 < y1 else -1
    error = dx - dy
    x, y = x0, y0
    while (x, y) != (x1, y1):
        yield x, y
        doubled = 2 * error
        if doubled > -dy:
            error -= dy
            x += step_x
        if doubled < dx:
            error += dx
            y += step_y


def draw_segment(
    canvas: Canvas,
    grid: Grid,
    view: View,
    start: tuple[int, int],
    end: tuple[int, int],
) -> int:
    """Draw the edge between two grid points; return the pixels set.

    The edge is coloured by its start point: raised if that point's
    height is not zero, flat otherwise.
    """
    color = RAISED_COLOR if grid.height_at(*start) != 0 else FLAT_COLOR
    x0, y0 = project(grid, view, *start)
    x1, y1 = project(grid, view, *end)
    return sum(canvas.put_pixel(x, y, color) for x, y in line_points(x0, y0, x1, y1))


def draw_wireframe(canvas: Canvas, grid: Grid, view: View) -> None:
    """Draw every horizontal and vertical edge of the grid."""
    for y in range(grid.length):
        for x in range(grid.width):
            if x < grid.width - 1:
                draw_segment(canvas, grid, view, (x, y), (x + 1, y))
            if y < grid.length - 1:
                draw_segment(canvas, grid, view, (x, y), (x, y + 1))