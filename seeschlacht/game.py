"""The two-player game loop: alternating shots until one fleet is sunk."""

from __future__ import annotations

import random
import re
import sys
from typing import TextIO

from .dice import get_random
from .gameboard import BOARD_SIZE, GameBoard
from .player import Player

_INT = re.compile(r"[+-]?\d+")


class _Scanner:
    """Whitespace-separated reading of integers and characters from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buffer = ""

    def _skip_whitespace(self) -> None:
        while True:
            stripped = self._buffer.lstrip()
            if stripped:
                self._buffer = stripped
                return
            line = self._stream.readline()
            if not line:
                self._buffer = ""
                raise EOFError("input ended")
            self._buffer = line

    def read_int(self) -> int | None:
        """Return the next integer, or None (consuming nothing) if none is there."""
        self._skip_whitespace()
        match = _INT.match(self._buffer)
        if match is None:
            return None
        self._buffer = self._buffer[match.end():]
        return int(match.group())

    def read_char(self) -> str:
        """Return the next non-whitespace character."""
        self._skip_whitespace()
        char, self._buffer = self._buffer[0], self._buffer[1:]
        return char

    def discard_line(self) -> None:
        """Drop whatever is left of the current input line."""
        self._buffer = ""


class Battleship:
    """A game of Battleship between two named players on one console.

    Each round gets fresh, randomly populated boards; a coin toss decides who
    shoots first. Rounds repeat for as long as the players answer 'y'.
    """

    def __init__(
        self,
        player1_name: str,
        player2_name: str,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.players = [Player(player1_name), Player(player2_name)]
        self.boards: list[GameBoard] = []
        self._stdin = stdin
        self._stdout = stdout
        self._rng = rng

    def _write(self, text: str) -> None:
        (self._stdout or sys.stdout).write(text)

    def _say(self, text: str = "") -> None:
        self._write(text + "\n")

    def _ask_coordinates(self, scanner: _Scanner) -> tuple[int, int]:
        while True:
            self._say()
            self._say()
            self._say("Geben Sie die Koordinaten ein")
            row = scanner.read_int()
            col = scanner.read_int() if row is not None else None
            if row is None or col is None:
                scanner.discard_line()
                self._say("Ungültige Eingabe. Bitte geben Sie gültige Koordinaten ein.")
                self._say()
                continue
            row -= 1
            col -= 1
            if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
                self._say(
                    "Ungültige Eingabe. Bitte geben Sie Koordinaten im Bereich von 1 bis 10 ein."
                )
                self._say()
                continue
            return row, col

    def _ask_replay(self, scanner: _Scanner) -> str:
        while True:
            self._say("Wollen Sie nochmal spielen?")
            self._say("y für Ja")
            self._say("n für Nein")
            self._say()
            self._write("Eingabe: ")
            answer = scanner.read_char()
            if answer in ("y", "n"):
                return answer
            self._say("Falsche Eingabe. Versuchen Sie es erneut....")

    def _report(self) -> None:
        for player in self.players:
            self._say(player.name)
            self._say(f"Gewonnen Spiele: {player.games_won}")
            self._say(f"Verlorene Spiele: {player.games_lost}")
            self._say()
        self._say()
        self._say(f"Anzahl der Spiele: {self.players[0].games_played}")
        self._say()

    def play(self) -> None:
        """Play rounds until the players decline another one.

        Raises EOFError if the input ends before the players are done.
        """
        scanner = _Scanner(self._stdin or sys.stdin)
        while True:
            self.boards = [GameBoard(self._rng), GameBoard(self._rng)]
            active = get_random(0, len(self.players) - 1, self._rng)
            self._say(f"{self.players[active].name} fängt an...")

            while not any(board.all_ships_sunk() for board in self.boards):
                own, enemy = self.boards[active], self.boards[1 - active]
                self._write(own.render_board())
                self._write(own.render_enemy_board())
                row, col = self._ask_coordinates(scanner)
                own.mark(row, col, enemy.hit(row, col))
                active = 1 - active

            loser = 0 if self.boards[0].all_ships_sunk() else 1
            winner = 1 - loser
            self.players[loser].add_game_lost()
            self.players[winner].add_game_won()
            self._say(f"{self.players[winner].name} hat gewonnen")
            self._report()

            if self._ask_replay(scanner) != "y":
                break
        self._say("Spiel wird beendet...")