# filrouge

Game logic for two small puzzle games, with no engine attached:

- **Mastermind** (`filrouge.mastermind`): a game that holds a secret code of four colour numbers, each from 0 to 5. It scores guesses and sends each score to every subscribed listener. It also has clickable spheres and a row that submits them as one guess.
- **Memory** (`filrouge.memory`): cards that flip over, and a game object that keeps a score and tests whether two card values make a pair.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Mastermind

```python
import random

from filrouge.mastermind import MasterMindGame

game = MasterMindGame(rng=random.Random(42))   # draws a secret code
game.create_solution(random.Random(7))         # draws a new one

game.subscribe(lambda good, wrong: print(f"good={good} wrong={wrong}"))

solved = game.check_answer([0, 1, 2, 3])
print("solved" if solved else "try again")

print(game.get_color(0))   # LinearColor for colour number 0 (red)
print(game.get_color(99))  # numbers outside the palette give black
```

`MasterMindGame` takes an optional `solution`, an optional `colors` palette and an optional `rng`. If you give no `solution`, it draws one when it is created. `solution` and `colors` are plain lists.

`check_answer(answer)` returns `True` only when all four colours are in their right places. Before it returns, it calls every listener with `(good_places, wrong_places)`:

- `good_places` starts at 4, and each colour in its right place adds one to it. So a complete match reports 8, and a guess with no exact matches reports 4.
- `wrong_places` counts the colours that appear in the code but sit in the wrong position. Each colour of the code is counted at most once.

`check_answer` raises `ValueError` if the answer has fewer than four colours. It raises `RuntimeError` if the game has no solution.

`LinearColor` is a frozen RGBA colour. It has the constants `RED`, `YELLOW`, `GREEN`, `BLUE`, `GRAY`, `WHITE` and `BLACK`.

### Spheres and rows

```python
from filrouge.mastermind import MasterMindGame, MastermindRow, MastermindSphere

game = MasterMindGame(solution=[1, 1, 1, 1])
spheres = [MastermindSphere(manager=game) for _ in range(4)]
row = MastermindRow(game, spheres)

for sphere in spheres:
    sphere.clicked()          # colour number 0 -> 1

print(row.clicked())          # True
print(row.last_result)        # (8, 0)
```

`MastermindSphere` has these fields:

- `color_number` starts at 0.
- `color` starts as `blocked_color`, which is black by default.

Each `clicked()` adds one to `color_number` and goes back to 0 after 5. If the sphere has a `manager`, it then takes that colour from the manager's palette. `change_color(new_color)` sets `color` directly.

`MastermindRow` subscribes to its game when it is created. Its `clicked()` sends the colour numbers of its first four spheres to `check_answer` and returns the result. It raises `ValueError` if the row has fewer than four spheres. `apply_solution` stores each score in `last_result`.

## Memory

```python
from filrouge.memory import MemoryCard, MemoryGame

card = MemoryCard()
card.turn_card()   # returns 180.0 and makes the card not clickable
card.turn_card()   # returns 0.0 and makes it clickable again

game = MemoryGame()
if game.test_pair(3, 3):
    game.update_score(1)   # returns the new score
```

`MemoryCard` has these fields:

- `is_clickable`, which starts as `True`.
- `rotation`, in degrees.

When the rotation is 0, `turn_card()` sets it to 180. From any other rotation, it sets it to 0. Each turn also toggles `is_clickable`.

`MemoryGame` has a `score` and a `previous_card` field. The game logic does not use `previous_card`; it is there for callers to keep track of the last card turned.

## What this package does not do

It contains only game state and rules. It draws nothing and reads no mouse or keyboard input. It has no command-line program and saves nothing to disk. To play either game, you have to drive these objects from your own front end.