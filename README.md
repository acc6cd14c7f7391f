# snakestage

A snake game for the terminal, played on a 21 × 31 board across four
walled stages. It runs on the standard library's `curses` module.

## Playing

Install the package, then start the game:

    snakestage

Pick **Play Snake Game** from the menu with the arrow keys and Enter, or
**Exit Game** to leave. Steer with the arrow keys; press `q` to go back
to the menu. Pressing the key opposite to the snake's heading ends the
game.

## Rules

- The snake starts three cells long. Running into a wall or into itself
  ends the game, as does shrinking below three cells.
- One to three items appear on free cells and are replaced every three
  seconds:
  - green grows the snake by one cell and counts one growth item,
  - white grows the snake by one cell and counts two growth items,
  - magenta (poison) shrinks the snake by one cell and counts one poison
    item.
- Once the snake is five cells long, a pair of gates opens in the walls,
  and a new pair replaces it every seven seconds unless the snake is
  passing through one. Entering one gate brings the snake out of the
  other. At the board's edge it heads away from the edge; inside the
  board it keeps its heading if the cell ahead is free, otherwise it
  tries the opposite heading and then turns clockwise. Immune walls
  (the corners of wall runs) never become gates.
- The score board shows the body length (`B`), growth items eaten (`+`),
  poison items eaten (`-`) and gates passed (`G`).
- Each stage has a mission board listing the targets for those four
  counts; a target that has been reached is marked `(V)`. Meeting all
  four announces the next stage, which starts when you press `n`.
  Clearing the fourth stage ends the game and returns to the menu.

## Using the game logic

The game state lives in `snakestage.snake.Snake`, which takes a stage
number, a random number generator (anything with `choice` and
`randrange`) and a clock returning seconds, so it can be driven without
a terminal:

```python
import random
from snakestage.snake import Snake
from snakestage.models import Direction

snake = Snake(1, random.Random(0), lambda: 0.0)
snake.turn(Direction.DOWN)
snake.move()
print(snake.body, snake.score, snake.collided)
```

Other pieces:

- `snakestage.models` holds `Direction`, `CellType`, `Point`, `Cell`,
  `Item` and the board size and timing constants.
- `snakestage.stage.stage_walls(stage)` returns the wall cells of a stage.
- `snakestage.rules` holds `random_free_point`, `random_gate_point`,
  `random_score`, `direction_diff`, `mission_for` and `mission_clear`.
- `snakestage.ui` holds the curses screens (`show_menu`,
  `classic_game`, `draw_board`, `draw_score`, `draw_mission`, …) and
  `main`, the entry point of the `snakestage` command.

## Limitations

Scores are not saved between sessions, and there is no high-score table.
The game needs a terminal that `curses` supports.

## Development

    pip install -e .[test]
    pytest