"""Ships made up of parts, placed on the 10 x 10 grid."""

from __future__ import annotations

import random
from enum import IntEnum

from .dice import get_random
from .part import Part

_MAX_LENGTH = 9


class Direction(IntEnum):
    """The way a ship points from its aft part."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


_STEPS = {
    Direction.NORTH: (-1, 0),
    Direction.EAST: (0, 1),
    Direction.SOUTH: (1, 0),
    Direction.WEST: (0, -1),
}


def _fits(row: int, col: int, length: int, direction: Direction) -> bool:
    if direction is Direction.NORTH:
        return row - length >= 0
    if direction is Direction.EAST:
        return col + length <= 9
    if direction is Direction.SOUTH:
        return row + length <= 9
    return col - length >= 0


class Ship:
    """A collection of parts laid out in a straight line.

    The aft part sits at ``(row, col)`` and the remaining parts follow in
    ``direction``. If the requested placement would leave the board, a new
    position and direction are drawn at random until the ship fits.
    """

    def __init__(
        self,
        row: int,
        col: int,
        length: int,
        direction: Direction | int,
        rng: random.Random | None = None,
    ) -> None:
        direction = Direction(direction)
        if not 1 <= length <= _MAX_LENGTH:
            raise ValueError(f"ship length must be between 1 and {_MAX_LENGTH}, got {length}")
        while not _fits(row, col, length, direction):
            direction = Direction(get_random(0, 3, rng))
            col = get_random(0, 9, rng)
            row = get_random(0, 9, rng)
        d_row, d_col = _STEPS[direction]
        self.direction = direction
        self.parts = [Part(row + d_row * i, col + d_col * i) for i in range(length)]

    def __repr__(self) -> str:
        return f"Ship(cells={self.cells!r}, direction={self.direction.name})"

    def __len__(self) -> int:
        return len(self.parts)

    @property
    def cells(self) -> tuple[tuple[int, int], ...]:
        """Grid positions occupied by this ship, aft first."""
        return tuple((part.row, part.col) for part in self.parts)

    def has_part_in(self, row: int, col: int) -> bool:
        """Return True if this ship occupies the given cell."""
        return any(part.row == row and part.col == col for part in self.parts)

    def get_part_in(self, row: int, col: int) -> Part:
        """Damage and return the part at the given cell.

        Raises ValueError if the ship has no part there.
        """
        for part in self.parts:
            if part.row == row and part.col == col:
                part.set_damaged()
                return part
        raise ValueError(f"ship has no part at ({row}, {col})")

    def is_damaged(self) -> bool:
        """Return True if at least one part has been hit."""
        return any(part.damaged for part in self.parts)

    def is_sunk(self) -> bool:
        """Return True if every part has been hit."""
        return all(part.damaged for part in self.parts)