"""One player's boards: the own fleet and the record of shots at the enemy."""

from __future__ import annotations

import random
from itertools import product

from .dice import get_random
from .ship import Direction, Ship

BOARD_SIZE = 10
FLEET_LENGTHS = (5, 4, 4, 3, 3, 3, 2, 2, 2, 2)

WATER = "."
MISS = "O"
HIT = "X"
SUNK = "S"


def _empty_grid() -> list[list[str]]:
    return [[WATER] * BOARD_SIZE for _ in range(BOARD_SIZE)]


def _check_cell(row: int, col: int) -> None:
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise IndexError(f"cell ({row}, {col}) is outside the {BOARD_SIZE}x{BOARD_SIZE} board")


def _render(grid: list[list[str]]) -> str:
    lines = [f"{index:02d}|" + "".join(f"{cell} " for cell in row) for index, row in enumerate(grid, 1)]
    lines.append("   " + "--" * len(grid))
    lines.append("   " + "".join(str(n) if n > 9 else f"{n} " for n in range(1, len(grid) + 1)))
    return "\n".join(lines)


class GameBoard:
    """Everything a single player needs: the own fleet and the 'cheat sheet'.

    ``own_board`` shows the player's ships: '.' for water, the ship's length
    for an intact part, 'X' for a hit on a floating ship, 'S' for a sunk ship
    and 'O' for a shot into open water. ``enemy_board`` records this player's
    shots at the opponent: '.' untried, 'X' hit, 'O' miss.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng
        self.ships: list[Ship] = []
        self.random_place_ships()
        self.own_board = _empty_grid()
        for row, col in product(range(BOARD_SIZE), repeat=2):
            for ship in self.ships:
                if ship.has_part_in(row, col):
                    self.own_board[row][col] = str(len(ship))
                    break
        self.enemy_board = _empty_grid()

    def _new_ship(self, length: int) -> Ship:
        rng = self._rng
        return Ship(
            get_random(0, 9, rng),
            get_random(0, 9, rng),
            length,
            Direction(get_random(0, 3, rng)),
            rng,
        )

    def random_place_ships(self) -> None:
        """Place the fleet at random so that no two ships share a cell."""
        self.ships = [self._new_ship(length) for length in FLEET_LENGTHS]
        overlap = True
        while overlap:
            overlap = False
            for index in range(1, len(self.ships)):
                for other_index, other in enumerate(self.ships):
                    if other_index == index:
                        continue
                    if set(self.ships[index].cells) & set(other.cells):
                        self.ships[index] = self._new_ship(FLEET_LENGTHS[index])
                        overlap = True

    def render_board(self) -> str:
        """Return the player's own board as printable text."""
        return _render(self.own_board) + "\n\n\n"

    def render_enemy_board(self) -> str:
        """Return the 'cheat sheet' of shots at the enemy as printable text."""
        return _render(self.enemy_board)

    def hit(self, row: int, col: int) -> bool:
        """Take an enemy shot at the given cell; return True if a ship was hit."""
        _check_cell(row, col)
        if self.own_board[row][col] in (WATER, MISS):
            self.own_board[row][col] = MISS
            return False
        for ship in self.ships:
            if not ship.has_part_in(row, col):
                continue
            ship.get_part_in(row, col)
            if ship.is_sunk():
                for ship_row, ship_col in ship.cells:
                    self.own_board[ship_row][ship_col] = SUNK
            else:
                self.own_board[row][col] = HIT
        return True

    def mark(self, row: int, col: int, was_hit: bool) -> None:
        """Record on the cheat sheet whether our shot at the cell hit."""
        _check_cell(row, col)
        self.enemy_board[row][col] = HIT if was_hit else MISS

    def all_ships_sunk(self) -> bool:
        """Return True once every ship of the fleet is sunk."""
        return all(ship.is_sunk() for ship in self.ships)