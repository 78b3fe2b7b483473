"""The projected wireframe and the view changes the keys trigger."""

from __future__ import annotations

import math
import sys
from typing import Iterator

from .keys import Key
from .mapfile import HeightMap, MapError, Point, build_points
from .raster import Canvas, Segment, segment_between

WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 900
DEFAULT_SCALE = 200.0
DEFAULT_ANGLE = 1.65
DEFAULT_THETA = 0.782993
INITIAL_MAX_HEIGHT = -214748393.0
HEIGHT_LIMIT = 40.0
TILT_OFFSET = 0.1
MOVE_STEP = 10
ZOOM_FACTOR = 1.008
HEIGHT_STEP = 0.5
THETA_STEP = 0.05
ANGLE_STEP = 0.001
ANGLE_MIN = 1.5
ANGLE_MAX = 1.65
MAX_HEIGHT_MESSAGE = "You've reached max height.\n"


class View:
    """Grid points of a height map together with the projection settings."""

    def __init__(
        self,
        height_map: HeightMap,
        win_width: int = WINDOW_WIDTH,
        win_height: int = WINDOW_HEIGHT,
    ) -> None:
        self.win_width = win_width
        self.win_height = win_height
        self.line_count = height_map.height
        self.max_width = height_map.max_width
        self.scale = DEFAULT_SCALE
        self.angle = DEFAULT_ANGLE
        self.theta = DEFAULT_THETA
        self.points: list[Point] = build_points(height_map, self.scale)
        self.max_height = INITIAL_MAX_HEIGHT
        self.multiplicator = self._default_multiplicator()
        self.height_coef = self._default_height_coef()

    def _default_multiplicator(self) -> float:
        return float(500 // (self.line_count + self.max_width) + 1)

    def _default_height_coef(self) -> float:
        if self.points[0].color != 0:
            return 0.0
        return self.multiplicator + 1

    def _project_point(self, point: Point) -> None:
        x = (point.base_x - self.scale) * self.multiplicator + self.scale
        y = (point.base_y - self.scale) * self.multiplicator + self.scale
        cos_t, sin_t = math.cos(self.theta), math.sin(self.theta)
        px = x * cos_t - y * sin_t
        py = x * sin_t + y * cos_t
        py -= point.height * self.height_coef
        self.max_height = max(self.max_height, point.height)
        point.x = px / math.cos(self.angle) * math.cos(self.angle + TILT_OFFSET)
        point.y = py / math.sin(self.angle) * math.sin(self.angle + TILT_OFFSET)

    def project(self) -> None:
        """Recompute every point from its grid position and the settings."""
        if abs(self.height_coef) > HEIGHT_LIMIT:
            self.height_coef = math.copysign(HEIGHT_LIMIT, self.height_coef)
            sys.stdout.write(MAX_HEIGHT_MESSAGE)
        for point in self.points:
            self._project_point(point)

    def _shift(self, dx: float, dy: float) -> None:
        for point in self.points:
            point.x -= dx
            point.y -= dy

    def center(self) -> None:
        """Move the wireframe so the middle grid point sits mid-window."""
        column = self.max_width // 2
        line = self.line_count // 2
        target = next(
            (p for p in self.points if p.column == column and p.line == line), None
        )
        if target is None:
            raise MapError(f"no grid point at line {line}, column {column}")
        dx = int(target.x - self.win_width // 2)
        dy = int(target.y - self.win_height // 2)
        self._shift(dx, dy)

    def move(self, key: int) -> None:
        """Shift the wireframe ten pixels in the direction of an arrow key."""
        offsets = {
            Key.UP_ARROW: (0, MOVE_STEP),
            Key.LEFT_ARROW: (MOVE_STEP, 0),
            Key.DOWN_ARROW: (0, -MOVE_STEP),
            Key.RIGHT_ARROW: (-MOVE_STEP, 0),
        }
        offset = offsets.get(Key.from_code(key))
        if offset is not None:
            self._shift(*offset)

    def zoom(self, key: int) -> None:
        """Scale the wireframe up on PLUS or down on MINUS, then recenter."""
        if key == Key.PLUS:
            for point in self.points:
                point.x *= ZOOM_FACTOR
                point.y *= ZOOM_FACTOR
        if key == Key.MINUS:
            for point in self.points:
                point.x /= ZOOM_FACTOR
                point.y /= ZOOM_FACTOR
        self.center()

    def change_height(self, key: int) -> None:
        """Raise (U) or lower (D) the height exaggeration and reproject."""
        first = self.points[0]
        old_x = first.x
        old_y = int(first.y)
        if key == Key.U:
            self.height_coef += HEIGHT_STEP
        if key == Key.D:
            self.height_coef -= HEIGHT_STEP
        self.project()
        self._shift(first.x - old_x, int(first.y - old_y))
        self.center()

    def translate_z(self, key: int) -> None:
        """Turn the grid around the vertical axis on P or M."""
        if key == Key.P:
            self.theta += THETA_STEP
        if key == Key.M:
            self.theta -= THETA_STEP
        self.project()
        self.center()

    def two_dim(self) -> None:
        """Switch to a flat top-down view."""
        self.theta = 0.0
        self.angle = 1.0
        self.height_coef = 0.0
        self.project()

    def reset(self) -> None:
        """Restore the initial projection settings, reproject and recenter."""
        self.multiplicator = self._default_multiplicator()
        self.scale = DEFAULT_SCALE
        self.theta = DEFAULT_THETA
        self.height_coef = self._default_height_coef()
        self.angle = DEFAULT_ANGLE
        self.project()
        self.center()

    def _tilt(self, step: float) -> None:
        new_angle = self.angle + step
        for point in self.points:
            point.x = point.x / math.cos(self.angle) * math.cos(new_angle)
            point.y = point.y / math.sin(self.angle) * math.sin(new_angle)
        self.angle = new_angle
        self.center()

    def rotate_y(self) -> None:
        """Tilt forward a little; past the upper bound, jump back to the lower."""
        if self.angle > ANGLE_MAX:
            self.angle = ANGLE_MIN
        else:
            self._tilt(ANGLE_STEP)

    def rotate_y_neg(self) -> None:
        """Tilt backward a little; past the lower bound, jump to the upper."""
        if self.angle < ANGLE_MIN:
            self.angle = ANGLE_MAX
        else:
            self._tilt(-ANGLE_STEP)

    def segments(self) -> Iterator[Segment]:
        """Yield the row segments, then the column segments, of the grid."""
        for point, following in zip(self.points, self.points[1:]):
            if point.line == following.line:
                yield segment_between(point, following)
        for index, point in enumerate(self.points[:-1]):
            below = next(
                (p for p in self.points[index + 1 :] if p.column == point.column),
                None,
            )
            if below is not None:
                yield segment_between(point, below)

    def render(self, canvas: Canvas) -> None:
        """Draw every segment of the wireframe onto ``canvas``."""
        for segment in self.segments():
            canvas.draw_segment(segment, self.max_height)