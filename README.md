# wirefdf

Draws a height-map file as an isometric wireframe in a 1920×1080 window.

## Map files

A map is a plain text file with one row of integer heights per line, separated
by spaces:

```
0 0 0 0
0 5 5 0
0 5 5 0
0 0 0 0
```

Each number is the height of one grid point. Neighbouring points in a row and
in a column are joined by lines. An edge is drawn in red (`0xCC1100`) when its
starting point has a non-zero height, and in white otherwise.

The width of the map is taken from its last line that is not empty: every
space counts as a column separator, plus one column when the line does not end
in a space. Shorter rows are padded with zeros; a row with more values than
the width is an error. Only the leading integer of each value is used, so a
suffix such as `,0xFF` is ignored, and a value that does not start with a
number counts as 0.

## Installing

```
pip install .
```

## Running

```
wirefdf path/to/map.fdf
wirefdf --interactive path/to/map.fdf
```

The command takes exactly one map file. With no file or more than one it
writes `Invalid input` to standard error and exits. A map that cannot be
opened, decoded as UTF-8 or parsed is reported on standard error as well.

### Controls

Escape or closing the window ends the program. With `--interactive` these
controls are also active:

| Input            | Effect                                    |
|------------------|-------------------------------------------|
| `+` / `-`        | zoom in / out by one step                 |
| keypad `+` / `-` | raise / lower every non-flat point by one |
| arrow keys       | move the picture by 10 pixels             |
| mouse wheel      | change the projection angle by 0.1        |
| middle button    | set the projection angle to zero          |

The view starts with zoom 30, angle 0.6 and an offset of (900, 300).

## Using it as a library

```python
from wirefdf.mapfile import read_map
from wirefdf.render import Canvas, View, draw_wireframe

grid = read_map("map.fdf")
canvas = Canvas(1920, 1080)
draw_wireframe(canvas, grid, View())
pixels = canvas.to_bytes()   # 4 bytes per pixel, little-endian 0xRRGGBB
```

- `wirefdf.mapfile`: `read_map(path)`, `parse_map(lines)`, `count_width(line)`,
  the `Grid` class and `MapError`.
- `wirefdf.render`: `View`, `Canvas` (`put_pixel`, `get_pixel`, `to_bytes`),
  `project`, `line_points` (Bresenham, end point excluded), `draw_segment`
  and `draw_wireframe`.
- `wirefdf.app`: `render(grid, view)` draws onto a fresh 1920×1080 canvas;
  `apply_key(view, key)` and `apply_button(view, button)` update a `View` the
  way the interactive controls do; `run(grid, interactive)` opens the window.
- `wirefdf.linereader.LineReader` reads a text or binary stream line by line
  in fixed-size chunks.
- `wirefdf.chars`, `wirefdf.textops`, `wirefdf.memory` and `wirefdf.output`
  hold small character, string, byte-buffer and printf-style formatting
  helpers.

## Limitations

The picture is only shown on screen; there is no option to save it as an
image file. Colours given in the map file are not used.

## Running the tests

```
pip install .[test]
pytest
```