# seeschlacht

Battleship ("Schiffe versenken") for two players who share one terminal.
The prompts and messages are in German.

## Installation

```
pip install .
```

## Playing

```
seeschlacht
```

The command asks each player for a name and uses the first word of each
answer. You can also give both names on the command line:

```
seeschlacht Anna Bernd
```

A coin toss decides who starts. Each board is 10 × 10 and holds ten ships,
placed at random so that none overlap:

- 1 dreadnought, 5 parts (shown as `5`)
- 2 cruisers, 4 parts (`4`)
- 3 destroyers, 3 parts (`3`)
- 4 submarines, 2 parts (`2`)

On each turn the active player sees two boards. The first is their own
board. On it `.` is water, `O` is a miss by the opponent, `X` is a damaged
ship and `S` is a sunk ship. The second is the notes board for the opponent's
waters. On it `.` is a square not yet fired at, `X` is a hit and `O` is a miss.

To fire, enter a row and a column, each from 1 to 10, separated by
whitespace. For example, `3 7`. If the input is not a number, the rest of the
line is discarded and the player is asked again. Numbers outside 1 to 10 are
also rejected. Play passes back and forth until one side has lost every ship.
The game then names the winner, shows how many games each player has won and
lost, and asks whether to play another round (`y` for yes, `n` for no).

The command exits with status 0 when the players stop playing. It exits with
status 1 if the input ends early or the game is interrupted with Ctrl-C.

## Using the library

The game logic can be used without the terminal:

```python
import random

from seeschlacht.gameboard import GameBoard

board = GameBoard(random.Random(42))  # ships placed at random, reproducibly
was_hit = board.hit(0, 0)             # the enemy fires at row 0, column 0
board.mark(0, 0, was_hit)             # record the shot on the notes board
print(board.render_board())
print(board.render_enemy_board())
print(board.all_ships_sunk())
```

Rows and columns in the library count from 0 to 9. `hit` and `mark` raise
`IndexError` for cells outside the board. `GameBoard` has these attributes:

- `ships`: the list of `Ship` objects
- `own_board`: the own board as a 10 × 10 list of characters
- `enemy_board`: the notes board as a 10 × 10 list of characters

`random_place_ships()` places a new fleet.

The other building blocks are these:

- `seeschlacht.ship.Ship` and `Direction`. A ship is a straight line of
  parts that starts at its aft cell and runs toward `NORTH`, `EAST`, `SOUTH`
  or `WEST`. If the requested position would leave the board, a new random
  position is drawn. It has the methods `has_part_in`, `get_part_in` (this
  damages the part), `is_damaged` and `is_sunk`, and the property `cells`.
- `seeschlacht.part.Part` is one segment with `row`, `col` and `damaged`.
- `seeschlacht.player.Player` is a name with `games_won`, `games_lost` and
  `games_played`.
- `seeschlacht.dice.get_random(lower, upper, rng=None)` returns an integer
  in the closed range. Without `rng` it uses the system's entropy source.

`seeschlacht.game.Battleship(name1, name2, stdin=..., stdout=..., rng=...)`
runs a whole interactive match when you call `play()`. It reads from and
writes to the given text streams, or to the console if none are given.

## What it does not do

- It keeps win and loss counts only for the current session. Nothing is
  saved.
- There is no computer opponent and no network play. Both players use the
  same terminal and can see the screen.

## Tests

```
pip install .[test]
pytest
```