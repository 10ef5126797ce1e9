"""A two-player Tic Tac Toe game with a start menu and turn overlays, drawn with pygame."""

__version__ = "1.0.0"