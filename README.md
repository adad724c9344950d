# snakepilot

A snake game that plays itself. On every step the pilot in
`snakepilot.ai.find_path` decides where the snake goes next:

1. **Food**: find a shortest path to the food with A*, but take it only if
   the snake could still reach its own tail after eating.
2. **Tail**: otherwise, follow a path towards the tail, which keeps the
   snake's loop open.
3. **Space-Fill**: if the tail cannot be reached either, pick the safe move
   that leaves the most reachable free cells.
4. **Trapped Fallback**: if no move is safe, keep the current direction.

The current strategy, the food position, the snake's length, the score, the
speed and whether each path was found are drawn on screen while the game
runs.

## Installation

```
pip install .
```

This installs the `snakepilot` command and the `pygame` dependency.

## Running

```
snakepilot
```

The game opens an 800×600 window titled "Snake AI".

Options:

- `-s`, `--speed N`: initial speed, default 5, at least 1. A step happens
  every `200 // N` milliseconds.
- `--cell-size PIXELS`: size of each grid cell in pixels, default 20.0, at
  least 1. The grid size is the window size divided by the cell size.
- `--version`: print the version and exit.

Run `snakepilot --help` to see all options.

## Controls

| Key       | Action                                      |
|-----------|---------------------------------------------|
| Page Up   | Increase speed while held (at most 1000)    |
| Page Down | Decrease speed while held (at least 1)      |
| Space     | Start a new game after game over            |
| Q         | Quit (closing the window also quits)        |

A new game keeps the speed and cell size given on the command line.

## Using the engine from code

The rules in `snakepilot.game` and the pilot in `snakepilot.ai` do not
depend on the display:

```python
import random

from snakepilot.ai import find_path
from snakepilot.game import GameState

state = GameState(32, 24, random.Random(1))
for _ in range(500):
    if state.game_over:
        break
    state.change_direction(find_path(state))
    state.update()

print(state.score, state.ai_strategy)
```

`GameState` holds the snake, the food, the score and the pilot's diagnostic
flags; `update()` plays one tick and `change_direction()` queues a turn,
refusing one that would reverse the snake. Food is placed at random at
least two cells away from the border; the board must leave room for that.

`snakepilot.ai` also exposes `astar`, `direction_between` and
`count_reachable_space` for use on their own, and `snakepilot.graphics`
provides `draw_game`, `status_line` and `debug_flags` for rendering a state
onto a pygame surface.

## Limitations

- The window size is fixed; it cannot be set from the command line.
- Scores are not saved between games.
- There is no manual mode: the snake is always steered by the pilot.

## Tests

```
pip install .[test]
pytest
```