"""Two-player Battleship for the terminal: parts, ships, boards, players and the game loop."""

__version__ = "1.0.0"