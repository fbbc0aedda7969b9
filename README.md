# fdfview

A wire-frame viewer for height-map (`.fdf`) files. The map is drawn as a grid
of antialiased lines whose colours blend from point to point. The default view
is isometric. You can rotate, pan and zoom it with the keyboard and the mouse.
The window is a pygame window.

## Installation

```
pip install .
```

## Usage

```
fdfview MAP_FILE
```

If you give anything other than exactly one argument, it prints
`Usage: fdfview MAP_FILE` to standard error and exits with status 1. If the map
cannot be opened or is malformed, it prints the error and also exits with
status 1.

### Map format

A map is a text file. Each line is one row of the grid. Values are separated by
spaces, and every row must have the same number of values. A value is an integer
height. It may be followed by a comma and a `0x`-prefixed hexadecimal colour:

```
0 0 0 0
0 10,0xFF0000 10 0
0 0 0 0
```

If any line of the file contains a comma, the colours from the map are used.
Otherwise each point is coloured from a built-in gradient, chosen by its scaled
height. The following are errors (`MapError`):

- rows of different lengths
- a first row with no values
- a file that cannot be opened

### Window size and zoom

The window size depends on the map:

| Map size                                  | Window      |
|-------------------------------------------|-------------|
| up to 200 columns and fewer than 100 rows | 800×600     |
| up to 200 columns and 100–189 rows        | 1024×768    |
| up to 200 columns and 190 rows or more    | 1920×1080   |
| more than 200 columns                     | 1920×1080   |

The starting zoom and the height scale are both fitted to the window.

### Controls

| Input                                | Action                                              |
|--------------------------------------|-----------------------------------------------------|
| Arrow keys                           | Pan by 5 pixels                                     |
| `1` / `9` (main row or keypad)       | Rotate around the X axis                            |
| `2` / `8` (main row or keypad)       | Rotate around the Y axis                            |
| `3` / `7` (main row or keypad)       | Rotate around the Z axis                            |
| `I` / `O`                            | Zoom in / out                                       |
| `F`                                  | Reset rotation and toggle between isometric and flat view |
| `A`                                  | Switch to the next window size and refit the zoom   |
| Left drag                            | Rotate around the X and Y axes                      |
| Right drag                           | Rotate around the Z axis                            |
| Scroll wheel                         | Scale heights                                       |
| Scroll wheel with right button held  | Zoom                                                |
| `Esc` or closing the window          | Quit                                                |

## Library use

Everything except the window itself works without a display:

- `fdfview.mapfile`:
  - `load_map(path)` and `parse_map(lines)` return a `HeightMap`.
  - `HeightMap` has `width`, `height`, `z_min`, `z_max` and `map_color`, plus `z_at(x, y)` and `color_at(x, y)`. `color_at` returns -1 where the map gives no colour.
  - Errors are raised as `MapError`.
- `fdfview.projection`:
  - `project(point, camera, map_width, map_height, win_width, win_height)` maps a grid `Point` to screen coordinates for a `Camera`.
  - `zoom_init(camera, heightmap, win_width, win_height)` fits the camera's zoom to the window.
- `fdfview.raster`:
  - `Canvas(width, height)` is a 32-bit BGRA pixel buffer, with `plot_pixel`, `pixel` and `clear`.
  - `plot_line(canvas, p0, p1)` draws an antialiased line whose colour blends from `p0` to `p1`.
- `fdfview.color`:
  - `palettes()` builds the default height gradient.
  - `Rgb`, `int_to_rgb`, `get_color` and `apply_brightness` handle colour arithmetic.
- `fdfview.viewer`:
  - `Viewer(heightmap)` holds the view state.
  - `draw()` renders the map and returns the `Canvas`.
  - `handle_key`, `mouse_press`, `mouse_release` and `mouse_move` take the key codes in `Key` and the buttons in `MouseButton`.

```python
from fdfview.mapfile import parse_map
from fdfview.viewer import Viewer

viewer = Viewer(parse_map(["0 0 0", "0 5 0", "0 0 0"]))
viewer.fit_zoom()
canvas = viewer.draw()
print(hex(canvas.pixel(400, 300)))
```

## Tests

```
pip install .[test]
pytest
```