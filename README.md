# wireframe

A viewer that draws a height map as an isometric wireframe in a pygame window.

A map file is plain text. Each line is a row of the grid. Each field on a line
is the height at that spot, and fields are separated by spaces. A field may
carry its own colour after a comma, written as lowercase hex, as in
`10,0xff00ff`. A line segment takes the colour of its higher end. When neither
end has a colour, the segment is drawn as follows:

- red if it ends on a point at the greatest height in the map,
- pink if either end is above zero,
- white otherwise.

When the first point of the map has a colour, heights start out flat. Press
`u` to raise them.

## Installing

```
pip install .
```

## Running

```
wireframe            # opens files/test_maps/arbesa.fdf
wireframe 42.fdf     # opens files/test_maps/42.fdf
```

The argument names a file inside `files/test_maps/`, relative to the current
directory. The full path is cut to 99 characters. More than one argument prints
`Too many args` and exits with status 1. A map that cannot be opened, or whose
first line holds no value, prints an error and exits with status 1. Closing the
window or pressing Esc ends the program.

## Keys

| Key               | Action                                           |
|-------------------|--------------------------------------------------|
| Esc               | quit                                             |
| arrow keys        | move the picture by 10 pixels                    |
| `=` / `-`         | zoom in / out, then centre                       |
| `u` / `d`         | raise / lower the height scale by 0.5            |
| `p` / `m`         | rotate about the vertical axis                   |
| `f` / `g`         | tilt the view                                    |
| `c`               | centre the picture                               |
| space             | reset the view                                   |
| `é`               | flat top-down view                               |
| `` ` `` or `²`    | load another map by name, typed on the terminal  |

The height scale is held between -40 and 40. The message
`You've reached max height.` is printed when it is clamped.

To load another map, type one of these names on the terminal after the prompt
`Enter file name here :`, then press Enter:

`10-70`, `20-60`, `arbesa`, `42`, `50-4`, `100-6`, `basictest`, `elem-col`,
`elem-fract`, `elem`, `elem2`, `julia`, `mars`, `penteneg`, `plat`,
`pnp_flat`, `pylone`, `pyra`, `pyramide`, `t1`, `t2`

The map then opens from `files/test_maps/`. Any other answer prints
`Bad imput` and resets the current view. The window does not respond while it
waits for the answer.

## Using it from Python

```python
from wireframe.app import load_view
from wireframe.raster import Canvas

view = load_view("files/test_maps/42.fdf")
canvas = Canvas(view.win_width, view.win_height)
view.render(canvas)
print(canvas.get_pixel(600, 450))
```

The modules:

- `wireframe.mapfile` reads maps.
  - `load_height_map` reads a map file into a `HeightMap`.
  - `parse_height_map` does the same from text lines.
  - `build_points` turns a `HeightMap` into the list of `Point`s.
  - Errors raise `MapError`.
- `wireframe.scene.View` holds the points and the projection settings.
  - `project`, `center`, `move`, `zoom`, `change_height`, `translate_z`,
    `two_dim`, `reset`, `rotate_y` and `rotate_y_neg` change the view.
  - `segments` yields the lines of the grid.
  - `render` draws them onto a `Canvas`.
- `wireframe.raster` provides:
  - `Canvas`, a grid of 32-bit colours;
  - `Segment` and `segment_between`;
  - `segment_color`;
  - `line_pixels`, a pixel-line generator.
- `wireframe.app` provides:
  - `handle_key`, which applies a key code to a view;
  - `resolve_map_choice` and `map_path_for`, which map names to paths;
  - `main`, the command.
- `wireframe.keys.Key` lists the key codes.

## What it does not do

No map files come with the package. They must be present under
`files/test_maps/` in the directory the command is run from. The picture is
drawn only in a window; it cannot be saved as an image file.