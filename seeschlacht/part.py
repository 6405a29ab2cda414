"""A single segment of a ship on the grid."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Part:
    """One piece of a ship at a fixed grid position.

    A part knows only where it sits and whether it has been hit; it does not
    know which ship it belongs to or whether that ship is sunk.
    """

    row: int
    col: int
    damaged: bool = False

    def set_damaged(self) -> None:
        """Mark this part as hit."""
        self.damaged = True