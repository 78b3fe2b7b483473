"""Command-line entry point, key handling and the interactive window."""

from __future__ import annotations

import os
import sys
from array import array
from typing import Callable, Optional

from .keys import Key
from .mapfile import MapError, load_height_map
from .raster import Canvas
from .scene import View

MAP_DIRECTORY = "files/test_maps/"
DEFAULT_MAP = "arbesa.fdf"
PATH_LIMIT = 100
CHOICE_LIMIT = 10
WINDOW_TITLE = "wireframe"
BAD_INPUT_MESSAGE = "Bad imput\n"
FILE_PROMPT = "Enter file name here : "
ESC_MESSAGE = "esc was pressed\n"

# (text the answer must start with, characters compared, map file name)
_MAP_CHOICES: tuple[tuple[str, int, str], ...] = (
    ("10-70", 5, "10-70.fdf"),
    ("20-60", 5, "20-60.fdf"),
    ("arbesa", 6, "arbesa.fdf"),
    ("42", 2, "42.fdf"),
    ("50-4", 4, "50-4.fdf"),
    ("100-6", 5, "100-6.fdf"),
    ("basictest", 9, "basictest.fdf"),
    ("elem-col", 8, "elem-col.fdf"),
    ("elem-fract", 10, "elem-fract.fdf"),
    ("elem\n", 5, "elem.fdf"),
    ("elem2\n", 6, "elem2.fdf"),
    ("julia", 5, "julia.fdf"),
    ("mars", 4, "mars.fdf"),
    ("penteneg", 8, "pentenegpos.fdf"),
    ("plat", 4, "plat.fdf"),
    ("pnp_flat", 8, "pnp_flat.fdf"),
    ("pylone", 6, "pylone.fdf"),
    ("pyra\n", 4, "pyra.fdf"),
    ("pyramide", 8, "pyramide.fdf"),
    ("t1\n", 2, "t1.fdf"),
    ("t2\n", 4, "t2.fdf"),
)

AskFile = Callable[[], Optional[str]]


def _prefix_matches(expected: str, given: str, count: int) -> bool:
    left = expected[:count].ljust(count, "\0")
    right = given[:count].ljust(count, "\0")
    return left == right


def map_path_for(argument: str | None) -> str:
    """Return the map path for a command-line argument, or the default map.

    The path is cut to 99 characters, as the map path buffer holds 100.
    """
    name = DEFAULT_MAP if argument is None else argument
    return (MAP_DIRECTORY + name)[: PATH_LIMIT - 1]


def resolve_map_choice(text: str) -> str | None:
    """Return the map path chosen by a typed answer, or None if none matches.

    Only the first ten characters of the answer count; choices are tried in
    a fixed order, so a shorter pattern listed first wins.
    """
    answer = text[:CHOICE_LIMIT]
    for pattern, count, file_name in _MAP_CHOICES:
        if _prefix_matches(pattern, answer, count):
            return MAP_DIRECTORY + file_name
    return None


def load_view(path: str | os.PathLike[str]) -> View:
    """Load the map at ``path`` and return it projected and centred."""
    view = View(load_height_map(path))
    view.project()
    view.center()
    return view


def _change_file(view: View, ask_file: AskFile) -> View:
    sys.stdout.write(FILE_PROMPT)
    sys.stdout.flush()
    answer = ask_file()
    if answer is None:
        return view
    path = resolve_map_choice(answer)
    if path is None:
        sys.stdout.write(BAD_INPUT_MESSAGE)
        view.reset()
        return view
    new_view = View(load_height_map(path), view.win_width, view.win_height)
    new_view.max_height = view.max_height
    new_view.reset()
    return new_view


def handle_key(view: View, key: int, ask_file: AskFile) -> View | None:
    """Apply the action bound to ``key`` and return the view to show next.

    ESC gives None, meaning the viewer should close. The file-change keys
    call ``ask_file`` for the name of the map to open and may return a new
    view; every other key changes ``view`` in place and returns it.
    """
    if key == Key.ESC:
        sys.stdout.write(ESC_MESSAGE)
        return None
    if key in (Key.GRAVE, Key.SQUARED):
        return _change_file(view, ask_file)
    if key in (Key.UP_ARROW, Key.DOWN_ARROW, Key.LEFT_ARROW, Key.RIGHT_ARROW):
        view.move(key)
    elif key == Key.F:
        view.rotate_y()
    elif key in (Key.PLUS, Key.MINUS):
        view.zoom(key)
    elif key in (Key.U, Key.D):
        view.change_height(key)
    elif key == Key.SPACE:
        view.reset()
    elif key == Key.TWO_DIM:
        view.two_dim()
    elif key == Key.C:
        view.center()
    elif key in (Key.P, Key.M):
        view.translate_z(key)
    elif key == Key.G:
        view.rotate_y_neg()
    return view


def _ask_file_from_stdin() -> str | None:
    try:
        return sys.stdin.readline()
    except OSError:
        return None


def _canvas_bytes(canvas: Canvas) -> tuple[bytes, str]:
    data = array("I", (pixel | 0xFF000000 for pixel in canvas.pixels))
    layout = "BGRA" if sys.byteorder == "little" else "ARGB"
    return data.tobytes(), layout


def _run_window(view: View, title: str) -> None:
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    special_keys = {
        pygame.K_ESCAPE: Key.ESC,
        pygame.K_UP: Key.UP_ARROW,
        pygame.K_DOWN: Key.DOWN_ARROW,
        pygame.K_LEFT: Key.LEFT_ARROW,
        pygame.K_RIGHT: Key.RIGHT_ARROW,
    }
    pygame.init()
    try:
        screen = pygame.display.set_mode((view.win_width, view.win_height))
        pygame.display.set_caption(title)
        canvas = Canvas(view.win_width, view.win_height)

        def redraw(current: View) -> None:
            canvas.clear()
            current.render(canvas)
            data, layout = _canvas_bytes(canvas)
            image = pygame.image.frombuffer(data, (canvas.width, canvas.height), layout)
            screen.blit(image, (0, 0))
            pygame.display.flip()

        redraw(view)
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return
            if event.type != pygame.KEYDOWN:
                continue
            code = int(special_keys.get(event.key, event.key))
            next_view = handle_key(view, code, _ask_file_from_stdin)
            if next_view is None:
                return
            view = next_view
            redraw(view)
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Open the map named on the command line (or the default one) in a window."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) > 1:
        sys.stderr.write("Too many args\n")
        return 1
    argument = args[0] if args else None
    try:
        view = load_view(map_path_for(argument))
        _run_window(view, argument or WINDOW_TITLE)
    except MapError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())