import pytest

from wireframe.keys import Key
from wireframe.mapfile import HeightMap, MapError
from wireframe.raster import FLAT_COLOR, PEAK_COLOR, RAISED_COLOR, Canvas
from wireframe.scene import (
    ANGLE_MAX,
    ANGLE_MIN,
    DEFAULT_ANGLE,
    DEFAULT_THETA,
    HEIGHT_LIMIT,
    MOVE_STEP,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    ZOOM_FACTOR,
    View,
)


def _map(rows, colors=None):
    if colors is None:
        colors = [[None] * len(row) for row in rows]
    return HeightMap(rows=rows, colors=colors)


def _pyramid():
    return _map([[0, 0, 0], [0, 10, 0], [0, 0, 0]])


def _ready_view(height_map=None):
    view = View(height_map or _pyramid())
    view.project()
    view.center()
    return view


def _center_point(view):
    return next(p for p in view.points if p.line == 1 and p.column == 1)


def _positions(view):
    return [(p.x, p.y) for p in view.points]


def test_initial_settings():
    view = View(_pyramid())
    assert view.theta == DEFAULT_THETA
    assert view.angle == DEFAULT_ANGLE
    assert (view.win_width, view.win_height) == (WINDOW_WIDTH, WINDOW_HEIGHT)
    assert view.height_coef == view.multiplicator + 1
    assert view.multiplicator == float(int(view.multiplicator))


def test_colored_first_point_flattens_heights():
    colors = [["ff0000", None], [None, None]]
    view = View(_map([[1, 2], [3, 4]], colors))
    assert view.height_coef == 0


def test_project_tracks_max_height():
    view = View(_pyramid())
    view.project()
    assert view.max_height == 10


def test_project_clamps_height_coef(capsys):
    view = View(_pyramid())
    view.height_coef = 100
    view.project()
    assert view.height_coef == HEIGHT_LIMIT
    assert "You've reached max height." in capsys.readouterr().out
    view.height_coef = -100
    view.project()
    assert view.height_coef == -HEIGHT_LIMIT


def test_center_puts_middle_point_mid_window():
    view = _ready_view()
    middle = _center_point(view)
    assert WINDOW_WIDTH // 2 <= middle.x < WINDOW_WIDTH // 2 + 1
    assert WINDOW_HEIGHT // 2 <= middle.y < WINDOW_HEIGHT // 2 + 1


def test_center_missing_point_raises():
    view = View(_map([[1, 2, 3, 4], [1]]))
    view.project()
    with pytest.raises(MapError):
        view.center()


@pytest.mark.parametrize(
    "key,dx,dy",
    [
        (Key.UP_ARROW, 0, -MOVE_STEP),
        (Key.DOWN_ARROW, 0, MOVE_STEP),
        (Key.LEFT_ARROW, -MOVE_STEP, 0),
        (Key.RIGHT_ARROW, MOVE_STEP, 0),
    ],
)
def test_move(key, dx, dy):
    view = _ready_view()
    before = _positions(view)
    view.move(int(key))
    for (bx, by), (ax, ay) in zip(before, _positions(view)):
        assert ax == pytest.approx(bx + dx)
        assert ay == pytest.approx(by + dy)


def test_move_ignores_other_keys():
    view = _ready_view()
    before = _positions(view)
    view.move(Key.F)
    assert _positions(view) == before


def test_zoom_scales_distances():
    view = _ready_view()
    a, b = view.points[0], view.points[-1]
    dx, dy = b.x - a.x, b.y - a.y
    view.zoom(Key.PLUS)
    assert b.x - a.x == pytest.approx(dx * ZOOM_FACTOR)
    assert b.y - a.y == pytest.approx(dy * ZOOM_FACTOR)
    view.zoom(Key.MINUS)
    assert b.x - a.x == pytest.approx(dx)
    assert b.y - a.y == pytest.approx(dy)


def test_zoom_keeps_center():
    view = _ready_view()
    view.zoom(Key.PLUS)
    assert WINDOW_WIDTH // 2 <= _center_point(view).x < WINDOW_WIDTH // 2 + 1


def test_translate_z_round_trip():
    view = _ready_view()
    before = _positions(view)
    view.translate_z(Key.P)
    assert view.theta > DEFAULT_THETA
    view.translate_z(Key.M)
    assert view.theta == pytest.approx(DEFAULT_THETA)
    for (bx, by), (ax, ay) in zip(before, _positions(view)):
        assert ax == pytest.approx(bx, abs=1e-6)
        assert ay == pytest.approx(by, abs=1e-6)


def test_change_height_steps():
    view = _ready_view()
    start = view.height_coef
    view.change_height(Key.D)
    assert view.height_coef == start - 0.5
    view.change_height(Key.U)
    view.change_height(Key.U)
    assert view.height_coef == start + 0.5


def test_two_dim_aligns_rows_and_columns():
    view = _ready_view()
    view.two_dim()
    assert (view.theta, view.angle, view.height_coef) == (0.0, 1.0, 0.0)
    for p in view.points:
        same_column = [q.x for q in view.points if q.column == p.column]
        same_line = [q.y for q in view.points if q.line == p.line]
        assert all(x == pytest.approx(p.x) for x in same_column)
        assert all(y == pytest.approx(p.y) for y in same_line)


def test_reset_restores_settings():
    view = _ready_view()
    before = _positions(view)
    height_coef = view.height_coef
    view.two_dim()
    view.reset()
    assert (view.theta, view.angle, view.height_coef) == (
        DEFAULT_THETA,
        DEFAULT_ANGLE,
        height_coef,
    )
    for (bx, by), (ax, ay) in zip(before, _positions(view)):
        assert ax == pytest.approx(bx)
        assert ay == pytest.approx(by)


def test_rotate_y_steps_and_wraps():
    view = _ready_view()
    view.angle = 1.6
    view.rotate_y()
    assert view.angle == pytest.approx(1.601)
    view.angle = 1.7
    view.rotate_y()
    assert view.angle == ANGLE_MIN


def test_rotate_y_neg_steps_and_wraps():
    view = _ready_view()
    view.rotate_y_neg()
    assert view.angle == pytest.approx(DEFAULT_ANGLE - 0.001)
    view.angle = 1.4
    view.rotate_y_neg()
    assert view.angle == ANGLE_MAX


def test_segments_full_grid():
    segments = list(_ready_view().segments())
    horizontal = [s for s in segments if abs(s.y1 - s.y0) < abs(s.x1 - s.x0) or True]
    assert len(horizontal) == len(segments)
    assert len(segments) == 12


def test_segments_jagged_grid_links_matching_columns():
    view = View(_map([[1, 2, 3], [4]]))
    view.project()
    segments = list(view.segments())
    assert len(segments) == 3
    assert {(s.height0, s.height1) for s in segments} == {(1, 2), (2, 3), (1, 4)}


def test_render_uses_known_colors():
    view = _ready_view()
    canvas = Canvas(WINDOW_WIDTH, WINDOW_HEIGHT)
    view.render(canvas)
    painted = {value for value in canvas.pixels if value}
    assert painted
    assert painted <= {FLAT_COLOR, PEAK_COLOR, RAISED_COLOR}
    middle = _center_point(view)
    assert canvas.get_pixel(int(middle.x), int(middle.y)) in {PEAK_COLOR, RAISED_COLOR}