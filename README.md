# cubcaster

A small first-person raycaster. It reads a `.cub` scene file giving wall
textures, floor and ceiling colours and a grid map, then draws the scene in a
1920×1080 window that you can walk around in with the keyboard.

## Installing

```
pip install .
```

## Running

```
cubcaster path/to/scene.cub
```

The command takes exactly one argument. If the scene file cannot be opened
or holds a malformed colour line, it prints `Failed to parse the .cub file`
to standard error and exits with status 1. A missing texture entry or an
image that cannot be loaded is reported the same way, with exit status 1.

The window first shows "Press any Key"; the view is drawn after the first
key press.

### Controls

| Key         | Action                 |
|-------------|------------------------|
| W / S       | move forward / back    |
| A / D       | strafe left / right    |
| Left/Right  | turn                   |
| Esc         | quit                   |

Closing the window quits as well. Movement is checked against the map one
axis at a time, so you slide along walls rather than stopping dead.

## Scene files

A scene file is read line by line. Leading spaces and tabs are ignored, and
blank lines are skipped.

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png
F 220,100,0
C 225,30,0
1111111111111111111
1000000000000000001
1000000000000000001
1111111111111111111
```

- `NO`, `SO`, `WE`, `EA` give the texture image for each wall face. Any
  image format pygame can load will do. Texture heights should be a power of
  two (64×64 is typical), since texture rows are wrapped with a bit mask.
- `F` and `C` give the floor and ceiling colour as `R,G,B`. Components past
  the third are ignored; fewer than three is an error.
- Any other non-empty line is a row of the map. `0` is open floor; any
  character above `0` is a wall. Rays that leave the map stop at its edge.

## What it does not do

- The map is not validated: it does not check that the map is closed by
  walls or that it holds only known characters.
- The player start is not read from the map. The command always starts the
  player at (10.5, 10.5), facing west, and treats the map as 19 columns wide.

## Using it as a library

```python
from cubcaster.scene import parse_file
from cubcaster.raycast import Camera, Grid, cast_ray

config = parse_file("scene.cub")
grid = Grid(config.map, 19)
camera = Camera()
camera.set_direction("W")
hit = cast_ray(camera, grid, 0.0)
print(hit.distance, hit.texture_index)
```

Modules:

- `cubcaster.scene`: `parse_file`, `parse_lines` (any iterable of lines),
  `parse_color`, `ltrim`, the `SceneConfig` dataclass (with `process_line`
  and `texture_paths`) and `SceneError`.
- `cubcaster.raycast`: `Grid`, `Camera` (`set_direction`, `move`, `rotate`,
  `apply`), the `Action` enum, `RayHit`, `cast_ray`, and `render_frame`,
  which renders a frame into a numpy array of packed `0xRRGGBB` pixels
  without opening a window.
- `cubcaster.app`: `main`, `load_textures` and `action_for_key`.
- `cubcaster.lines`: `LineReader` and `read_lines`, which read lines from a
  text or binary stream in fixed-size chunks.
- `cubcaster.strutil`: string helpers with C-library behaviour (`atoi`,
  `itoa`, `split`, `strtrim`, `substr`, `strnstr`, `strncmp`, `strchr`,
  `strrchr`).
- `cubcaster.chars`: ASCII classification and case conversion.
- `cubcaster.printf`: `format_printf` and `print_formatted`, a printf-style
  formatter for the `c s p d i u x X %` conversions, raising `FormatError`
  on malformed directives.

## Tests

```
pip install .[test]
pytest
```