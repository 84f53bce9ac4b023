# richman

A small hot-seat board game for the terminal. Up to four players take turns
rolling a die, moving around a ring-shaped board, buying properties, upgrading
them and collecting fines from anyone who lands on what they own. A player
whose money drops below zero goes bankrupt and their properties return to the
bank. Play continues while more than one player is still in the game.

## Installing

```
pip install .
```

## Playing

The board is read from a file called `map.dat` in the current directory.
Start a game with:

```
richman
```

If `map.dat` cannot be opened, the command prints `Failed to open map.dat`
and exits with status 1.

You are asked how many players will take part. A number is clamped to
between 1 and 4; an answer that is not a number starts a one-player game.
Each player is then asked for a name, and pressing Enter keeps the default:
A-Tu, Little-Mei, King-Baby and Mrs.Money.

Every player starts with $30000 on square 0. On each turn choose `1` (or just
press Enter) to roll the die, or `2` to end the game; the end of input ends
the game too. Passing the start square pays $2000. Landing on an unowned
square with a price offers it for sale if you can afford it; landing on your
own upgradable square offers an upgrade to the next level. The board and each
player's money and number of units are shown between turns, with `=>` marking
whose turn it is.

## The map file

Each line of `map.dat` describes one square, in board order. A line starts
with a one-letter type and a single-word name, followed by whole numbers:

| Type | Numbers after the name | Behaviour |
|------|------------------------|-----------|
| `U`  | price, upgrade price, five fines | Upgradable from level 1 up to level 5; visitors pay the fine for the current level. |
| `C`  | price, fine per unit | Collectable; visitors pay the fine times the number of collectable squares the owner holds. |
| `R`  | price, fine per point | Random cost; visitors roll a die and pay the roll times the fine per point. |
| `J`  | none | Jail; a player landing here misses their next turn. |

Example:

```
J Start
U Taipei 1000 500 100 200 400 800 1600
C Station 2000 300
R Casino 1500 200
```

Blank lines and lines with any other type letter are ignored. A line with too
few numbers, or with a field that is not a whole number, raises `ValueError`.

## Using it as a library

The game is split into three modules:

- `richman.player` — `Player`, `PlayerStatus` and `Roster` (the numbered list
  of players).
- `richman.board` — the square types `UpgradableUnit`, `CollectableUnit`,
  `RandomCostUnit` and `JailUnit`, the `WorldMap` that holds them, and
  `parse_map` for reading map lines.
- `richman.game` — `Game`, `render_board`, `render_status`, `unit_details`,
  `read_player_names`, `roll_dice` and the `main` command.

`Game` takes the map, the roster, a function that reads a line of input, a
text stream for output, a random generator and a screen-clearing function, so
a whole game can be scripted:

```python
import io
import random

from richman.board import WorldMap, parse_map
from richman.game import Game, render_board
from richman.player import Roster

rng = random.Random(7)
lines = [
    "J Start",
    "U Taipei 1000 500 100 200 400 800 1600",
    "C Station 2000 300",
    "R Casino 1500 200",
]
world_map = WorldMap(parse_map(lines, rng))
players = Roster(["A-Tu", "Little-Mei"])
print(render_board(world_map, players))

answers = iter(["1", "", "", "1", "", "", "2"])

def read_line():
    try:
        return next(answers)
    except StopIteration:
        raise EOFError

out = io.StringIO()
Game(world_map, players, read_line, out, rng, lambda: None).run()
```

`WorldMap.from_file(path, rng)` loads a board from a file instead. `Game`
raises `ValueError` if the board has no squares.

## What it does not do

The game does not announce a winner when it ends, and there is no way to save
or resume a game.

## Running the tests

```
pip install .[test]
pytest
```