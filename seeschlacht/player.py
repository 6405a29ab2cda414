"""Player name and win/loss record."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Player:
    """A named player with a running tally of won and lost games."""

    name: str
    games_won: int = 0
    games_lost: int = 0

    @property
    def games_played(self) -> int:
        """Total number of finished games."""
        return self.games_won + self.games_lost

    def add_game_won(self) -> None:
        """Record one more won game."""
        self.games_won += 1

    def add_game_lost(self) -> None:
        """Record one more lost game."""
        self.games_lost += 1