"""Line segments and the pixel canvas they are drawn on."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .mapfile import Point

PEAK_COLOR = 0xFF0000
RAISED_COLOR = 0xE77272
FLAT_COLOR = 0xFFFFFF
_UINT_MASK = 0xFFFFFFFF


@dataclass(frozen=True)
class Segment:
    """A line between two projected points, in whole pixels."""

    x0: int
    y0: int
    x1: int
    y1: int
    height0: int
    height1: int
    color: int


def segment_between(a: Point, b: Point) -> Segment:
    """Build the segment from ``a`` to ``b``.

    Coordinates and heights are truncated toward zero. The colour is the
    one of the higher end, ``a``'s when they are level.
    """
    color = b.color if b.height > a.height else a.color
    return Segment(
        x0=int(a.x),
        y0=int(a.y),
        x1=int(b.x),
        y1=int(b.y),
        height0=int(a.height),
        height1=int(b.height),
        color=color,
    )


def segment_color(segment: Segment, max_height: float) -> int:
    """Choose the colour a segment is drawn with.

    An explicit colour wins; otherwise a segment ending on the highest
    point is red, one touching a raised point is pink, and the rest white.
    """
    if segment.color != 0:
        return segment.color
    if segment.height1 == max_height:
        return PEAK_COLOR
    if segment.height0 > 0 or segment.height1 > 0:
        return RAISED_COLOR
    return FLAT_COLOR


def line_pixels(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    """Yield the pixels of the line from ``(x0, y0)`` to ``(x1, y1)``.

    Both ends are included; consecutive pixels touch.
    """
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    x, y = x0, y0
    while True:
        yield x, y
        if x == x1 and y == y1:
            return
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy


@dataclass
class Canvas:
    """A width by height grid of 32-bit colours, all black at first."""

    width: int
    height: int
    pixels: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("canvas dimensions must not be negative")
        self.pixels = [0] * (self.width * self.height)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; pixels on the top and left border or outside are ignored."""
        if 0 < x < self.width and 0 < y < self.height:
            self.pixels[y * self.width + x] = color & _UINT_MASK

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour at ``(x, y)``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return self.pixels[y * self.width + x]

    def clear(self) -> None:
        """Paint every pixel black."""
        self.pixels = [0] * (self.width * self.height)

    def draw_segment(self, segment: Segment, max_height: float) -> None:
        """Draw ``segment`` in the colour chosen for it."""
        color = segment_color(segment, max_height)
        for x, y in line_pixels(segment.x0, segment.y0, segment.x1, segment.y1):
            self.put_pixel(x, y, color)