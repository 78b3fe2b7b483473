"""Reading height-map files and turning them into grid points."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable

from .textutil import color_token, parse_hex, parse_int, split_fields

_FIELD_SEPARATOR = " "


class MapError(Exception):
    """Raised when a map file cannot be opened or holds no usable grid."""


@dataclass
class Point:
    """One vertex of the wireframe grid.

    ``x``, ``y`` and ``height`` are the current, possibly transformed,
    coordinates; the ``base_`` fields keep the grid position the
    projection starts from.
    """

    x: float
    y: float
    height: float
    color: int
    line: int
    column: int
    base_x: float = 0.0
    base_y: float = 0.0
    base_height: float = 0.0

    def remember_base(self) -> None:
        """Store the current coordinates as the projection's starting point."""
        self.base_x = self.x
        self.base_y = self.y
        self.base_height = self.height


@dataclass
class HeightMap:
    """Heights and optional colour tokens, one row per line of the file."""

    rows: list[list[int]] = field(default_factory=list)
    colors: list[list[str | None]] = field(default_factory=list)

    @property
    def height(self) -> int:
        """Number of rows in the map."""
        return len(self.rows)

    @property
    def max_width(self) -> int:
        """Number of fields in the widest row."""
        return max((len(row) for row in self.rows), default=0)


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Return the lines of ``path``, each keeping its trailing newline."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            content = handle.read()
    except OSError as exc:
        raise MapError(f"OPEN ERROR: {path}") from exc
    return content.splitlines(keepends=True) if "\n" in content or content else []


def _split_keeping_newlines(content_lines: Iterable[str]) -> list[str]:
    # splitlines also breaks on \r and other separators; only \n ends a line.
    joined = "".join(content_lines)
    if not joined:
        return []
    pieces = joined.split("\n")
    lines = [piece + "\n" for piece in pieces[:-1]]
    if pieces[-1]:
        lines.append(pieces[-1])
    return lines


def parse_height_map(lines: Iterable[str]) -> HeightMap:
    """Build a height map from text lines of space-separated fields."""
    text_lines = _split_keeping_newlines(lines)
    if not text_lines:
        raise MapError("error first line: the map is empty")
    height_map = HeightMap()
    for line in text_lines:
        fields = split_fields(line, _FIELD_SEPARATOR)
        height_map.rows.append([parse_int(item) for item in fields])
        height_map.colors.append([color_token(item) for item in fields])
    if not height_map.rows[0]:
        raise MapError("error first line: the first row holds no value")
    return height_map


def load_height_map(path: str | os.PathLike[str]) -> HeightMap:
    """Read and parse the map file at ``path``."""
    return parse_height_map(read_lines(path))


def build_points(height_map: HeightMap, scale: float) -> list[Point]:
    """Return the grid points of ``height_map`` in row-major order.

    Each point sits at ``(column + scale, line + scale)``; a colour token
    becomes its colour, otherwise the colour is 0.
    """
    if height_map.height == 0 or not height_map.rows[0]:
        raise MapError("the map holds no point")
    points: list[Point] = []
    for line, (row, colors) in enumerate(zip(height_map.rows, height_map.colors)):
        for column, (value, token) in enumerate(zip(row, colors)):
            point = Point(
                x=float(column + scale),
                y=float(line + scale),
                height=float(value),
                color=parse_hex(token) if token else 0,
                line=line,
                column=column,
            )
            point.remember_base()
            points.append(point)
    return points