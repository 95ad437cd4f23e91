"""Reading height maps: rows of whitespace-separated integers."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Iterable

from .chars import atoi
from .linereader import LineReader
from .textops import split


class MapError(Exception):
    """Raised when a map file cannot be read or does not fit its width."""


@dataclass(frozen=True)
class Grid:
    """A rectangular grid of heights, indexed as ``rows[y][x]``."""

    width: int
    rows: tuple[tuple[int, ...], ...]

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError("width must not be negative")
        for number, row in enumerate(self.rows):
            if len(row) != self.width:
                raise ValueError(
                    f"row {number} holds {len(row)} values, expected {self.width}"
                )

    @property
    def length(self) -> int:
        """Number of rows."""
        return len(self.rows)

    def height_at(self, x: int, y: int) -> int:
        """Height stored at column *x* of row *y*."""
        if not (0 <= y < self.length and 0 <= x < self.width):
            raise IndexError(f"point ({x}, {y}) lies outside the grid")
        return self.rows[y][x]


def count_width(line: str) -> int:
    """Number of columns a map line declares.

    Every space counts as a separator, and a line whose last character
    is not a space counts one more column for its final value.
    """
    trailing = 1 if line and line[-1] != " " else 0
    return line.count(" ") + trailing


def parse_map(lines: Iterable[str]) -> Grid:
    """Build a grid from map lines.

    The width comes from the last line that is neither empty nor a bare
    newline. Every line is a row; short rows are padded with zeros and a
    row with more values than the width is an error.
    """
    lines = list(lines)
    width = next(
        (count_width(line) for line in reversed(lines) if line and line[0] != "\n"),
        0,
    )
    rows = []
    for number, line in enumerate(lines, start=1):
        values = [atoi(word) for word in split(line, " ")]
        if len(values) > width:
            raise MapError(
                f"line {number} holds {len(values)} values, the map is {width} wide"
            )
        values.extend([0] * (width - len(values)))
        rows.append(tuple(values))
    return Grid(width, tuple(rows))


def read_map(path: str | PathLike[str]) -> Grid:
    """Read and parse the map file at *path*."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            lines = list(LineReader(handle))
    except OSError as exc:
        raise MapError(f"Open failed: {path}: {exc.strerror or exc}") from exc
    except UnicodeDecodeError as exc:
        raise MapError(f"cannot decode {path}: {exc}") from exc
    return parse_map(lines)