"""Command-line entry point: ask for two names and start the game."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from .game import Battleship


def _read_name(stream: TextIO) -> str:
    while True:
        line = stream.readline()
        if not line:
            raise EOFError("input ended")
        words = line.split()
        if words:
            return words[0]


def main(argv: list[str] | None = None) -> int:
    """Run the game on the console; return the exit status."""
    parser = argparse.ArgumentParser(prog="seeschlacht", description="Battleship for two players.")
    parser.add_argument("player1", nargs="?", help="name of the first player")
    parser.add_argument("player2", nargs="?", help="name of the second player")
    args = parser.parse_args(argv)

    stdin, stdout = sys.stdin, sys.stdout
    names = [args.player1, args.player2]
    try:
        for number, name in enumerate(names, 1):
            if name is None:
                print(f"Spieler {number}: Geben Sie ihren Namen ein", file=stdout)
                names[number - 1] = _read_name(stdin)
                print(file=stdout)
        Battleship(names[0], names[1], stdin=stdin, stdout=stdout).play()
    except (EOFError, KeyboardInterrupt):
        print(file=stdout)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())