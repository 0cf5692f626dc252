# fdfview

`fdfview` loads `.fdf` height maps and renders them as coloured wireframes
into in-memory images. It needs nothing outside the standard library.

An `.fdf` file is a grid of integers separated by spaces. Each integer is the
height of one point. A point can also carry a colour, written as
`height,0xRRGGBB`. Points without a colour are white:

```
0 0 0 0
0 10,0xFF0000 10 0
0 0 0 0
```

Every line must have the same number of entries.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Loading a map

```python
from fdfview.heightmap import load_map, check_map_path

path = check_map_path("maps/42.fdf")  # MapError for a directory or a name not ending in .fdf
hmap = load_map(path)                 # parses the file and scales heights into [-0.5, 0.5]
print(hmap.width, hmap.height)
print(hmap.point(0, 0))
```

`parse_map(lines)` builds a `HeightMap` from any iterable of text lines. It
leaves the heights as they were read. `load_map` raises `MapError` in three
cases: the file cannot be opened, the file is empty, or a line is shorter or
longer than the first one.

## Rendering

`Viewer` holds the map, the camera, the orientation cube, the menu widgets and
the three image panes: main, cube and menu. Each call to `render()` draws one
frame and returns the `Layout`:

```python
from fdfview.viewer import Viewer, Key

viewer = Viewer(hmap)
viewer.key_down(Key.D)                  # rotate about the X axis
viewer.mouse_down(Key.SCROLL_UP, 0, 0)  # zoom in
layout = viewer.render()
with open("frame.ppm", "wb") as out:
    out.write(layout.main.to_ppm())
```

To animate towards a view, call `viewer.step_animation()` once per frame. Each
call moves the camera one step. `viewer.changed()` tells you whether the
camera or the colours changed since the last call.

You can also use the lower-level modules on their own:

- `fdfview.camera`: `Camera`, `Option`, `View`, `default_camera()`,
  `camera_of_view()`, and `Camera.step_towards()` / `Camera.project()`.
- `fdfview.geometry`: `Point`, `rotate_xyz`, `scale_point`, `distance`, and
  the angle and offset step helpers.
- `fdfview.image`: `Image` with pixels, lines (dotted when `fact > 1`),
  borders, rectangles, circles, filled squares and binary PPM export. It also
  has `Rect`, `Layout` and `make_layout()`.
- `fdfview.color`: packed 0xTTRRGGBB colours, with `parse_color`,
  `next_color` (hue stepping) and `lerp_color`.
- `fdfview.widgets`: `ColorPicker`, `ColorOption`, `FieldPanel` (one numeric
  text field per camera option) and `panel_labels()`. `panel_labels()` returns
  the menu captions as `(x, y, text)` triples.
- `fdfview.cube`: `CubeView`. Clicking one of its faces selects the top, front
  or side view.
- `fdfview.textutil`: `atoi`, `split`, `iter_lines` and related helpers.
- `fdfview.printf`: `format_printf()` and `print_formatted()`. These form a
  printf-style formatter for `%c %s %p %d %i %u %x %X %%`, with flags, width
  and precision.

## Controls

`Viewer` reacts to these inputs. Key values are the `Key` members, which are
X11-style key symbols and mouse button numbers:

| Input              | Effect                              |
|--------------------|-------------------------------------|
| A / D              | rotate about X                      |
| W / S              | rotate about Y                      |
| Q / E              | rotate about Z                      |
| arrow keys         | move the view                       |
| = / -              | scale heights                       |
| mouse wheel        | zoom                                |
| SPACE              | animate back to the default view    |
| click a cube face  | animate to the top, front or side view |
| click a field      | type a number, Enter to apply       |
| click a colour box | edit the low or high point colour with the picker |
| ESC                | sets `viewer.closed`                |

## What it does not do

`fdfview` does not open a window, read the keyboard or mouse, or draw text.
There is no command to run. Your own program must:

- feed events into `key_down`, `mouse_down`, `mouse_up` and `mouse_move`;
- show the images that `render()` returns, for example by writing them out
  with `Image.to_ppm()`;
- place the captions from `panel_labels()` on the menu itself.