"""Tic-tac-toe game, minimax opponent and fitness evaluation for network players."""

__version__ = "0.1.0"