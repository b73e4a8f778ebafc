# meowlong

A small top-down puzzle game. A cat walks around a walled map and eats every
meal on it. Then it leaves through the exit box, which opens only after the
last meal has been eaten.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
meowlong path/to/level.ber
```

The game loads its textures from a `textures/` directory under the current
working directory, at these paths:

```
textures/player/meow-right.png
textures/player/meow-left.png
textures/player/meow-up.png
textures/player/meow-down.png
textures/collectible/meal.png
textures/exit/exit_box_closed.png
textures/exit/exit_box_open.png
textures/space/space-pink.png
textures/wall/scratcher.png
```

Controls:

- `W` / `↑`: move up
- `A` / `←`: move left
- `S` / `↓`: move down
- `D` / `→`: move right
- `Esc`, or closing the window: quit, which prints `Exit game!`

Each step that succeeds prints `Number of move: N`. Walls block movement,
and a blocked key press does not count as a move. When the cat reaches the
open exit, the game prints `You win!` and ends.

The window can be resized. The tiles are rescaled to fit it.

If the command is not given exactly one argument, it prints `Error` and a
usage line, then exits with status 1. It does the same, with its own
message, when the map cannot be used or a texture fails to load.

## Map files

A map is a plain text file whose name ends in `.ber`. Each line is one row
of tiles:

| Char | Meaning            |
|------|--------------------|
| `1`  | wall               |
| `0`  | floor              |
| `C`  | meal (collectible) |
| `E`  | exit               |
| `P`  | player start       |

A map is rejected with an `Error` message when any of these checks fails:

- the file name does not end in `.ber`, or the file cannot be opened;
- the file is empty;
- the rows are not all the same length, or a row is empty;
- the map is larger than 120 rows or 120 columns;
- the map is not enclosed by walls;
- the map holds a character other than those listed above;
- the map does not have exactly one `P` and one `E`, or has no `C`;
- the player cannot reach every meal and the exit.

Example:

```
1111111
1P0C0E1
1111111
```

## Using it as a library

```python
from meowlong.mapfile import load_map
from meowlong.game import Game, Direction, MoveOutcome

game_map = load_map("level.ber")
game = Game(game_map)
outcome = game.move(Direction.RIGHT)
if outcome is MoveOutcome.WON:
    print("You win!")
```

- `meowlong.mapfile` reads and validates maps. `read_map`, `parse_map`,
  `check_map` and `load_map` raise `MapError` when a map is not valid.
  `flood_fill` returns the cells reachable from a point. A validated map is
  a `GameMap` with `grid`, `start`, `exit`, `collectibles`, `rows`, `cols`
  and `tile(point)`. Cells are `Point(x, y)` values.
- `meowlong.game` holds the game state and the movement rules, and does no
  drawing. `Game.move(direction)` returns a `MoveOutcome`: `BLOCKED`,
  `MOVED`, `COLLECTED` or `WON`. `Game.exit_open()` tells whether every meal
  has been eaten, and `Game.is_collected(point)` whether one meal has.
- `meowlong.render` opens the pygame window and runs the loop with
  `run(game, base_dir)`. It also offers `initial_window_size`, `tile_size`,
  `direction_for_key` and `TextureSet.load`.
- `meowlong.cli` holds `validate_file` and the `main` entry point.

The `meowlong.libft` sub-package holds small standalone helpers:

- `chars`: ASCII classification and case conversion;
- `convert`: `atoi` and `itoa`;
- `memory`: byte-buffer functions such as `memset`, `memcpy`, `memmove`,
  `memchr`, `memcmp` and `calloc`;
- `strings`: string functions with C-library behaviour, such as `strchr`,
  `strncmp`, `strlcpy`, `substr`, `strtrim` and `split`;
- `printf`: `render_format` and `printf`, for the `%c %s %p %d %i %u %x %X %%`
  conversions;
- `lines`: `LineReader` and `iter_lines`, which read a stream line by line
  through a fixed-size buffer;
- `output`: `put_char`, `put_str`, `put_endl` and `put_nbr`.

## What is not included

The package ships no texture images. You must supply the PNG files listed
above under `textures/` before the game can open its window. Without them,
the command reports that a texture failed to load.