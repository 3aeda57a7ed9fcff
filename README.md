# cubmap

Reads and checks `.cub` map files for a first-person raycaster, and loads XPM
textures into in-memory pixel buffers.

## The `.cub` format

A `.cub` file opens with six instructions, then the map grid:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0

111111
100001
10N001
111111
```

- The first six non-empty lines must be the instructions `NO`, `SO`, `WE`,
  `EA`, `F` and `C`.
- Each texture path (the second word of a `NO`/`SO`/`WE`/`EA` line) must name
  a file that can be opened.
- Floor (`F`) and ceiling (`C`) colours are comma-separated values; the first
  three must lie between 0 and 255.
- The grid rows may hold `0`, `1`, spaces, and `N`, `S`, `E` or `W` for the
  player's start. The first and last rows may hold only walls and spaces,
  every other row must begin (after leading spaces) and end with `1`, and
  where neighbouring rows differ in length the overhanging part must be walls
  or spaces.
- The file name must end in `.cub`.

Every failed check raises `cubmap.mapfile.MapError` with a message saying
what is wrong.

## Installation

```
pip install .
```

## Command line

```
cubmap path/to/level.cub
```

The command prints the map rows, the textures and colours it found, and
`Map is valid` when the file passes every check. If the file is missing, the
argument count is wrong, or a check fails, it prints `Error: <reason>` and
exits with status 1.

## Library use

```python
from cubmap.game import load_game, end_message
from cubmap.mapfile import read_map, MapError
from cubmap.validate import check_map

cub_map = read_map("level.cub")      # rows and configuration, unchecked
try:
    check_map(cub_map)
except MapError as exc:
    print("invalid map:", exc)

game = load_game("level.cub")        # read, validate, place the player
print(game.player.x, game.player.y)  # first N/S/E/W in the grid, else (0, 0)
print(end_message(game.player, success=True))
```

`cubmap.validate` also offers the individual checks: `check_extension`,
`check_walls` and `check_line_sizes`.

### XPM textures

```python
from cubmap.xpm import xpm_file_to_image, XpmError

image = xpm_file_to_image("textures/north.xpm")
print(image.width, image.height, hex(image.get_pixel(0, 0)))
```

`xpm_file_to_image` ignores C comments outside quoted strings; `xpm_to_image`
takes the XPM strings directly. Images are 32 bits per pixel, little-endian,
with pixels set and read through `Image.set_pixel` and `Image.get_pixel`.
Colours given as `None` are stored as `0xFF000000`; unknown colour names give
0. Malformed data raises `XpmError`.

### Colours

`cubmap.colornames.lookup_color` gives the RGB value of a named colour,
ignoring case; for example `lookup_color("navy blue")` returns `0x000080`.
`cubmap.pixelformat.get_color_value` converts a `0xRRGGBB` colour to a pixel
value for a visual of lower depth, using the channel positions worked out by
`mask_shifts` from its red, green and blue masks.

## What it does not do

The package does not open a window, draw anything or run a game loop: it
loads and validates maps and textures, and the command only reports on a map
file.

## Tests

```
pip install .[test]
pytest
```