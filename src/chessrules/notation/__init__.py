"""Notation package: position text import and export."""

from chessrules.notation.fen import STARTING_FEN, game_from_fen, game_to_fen

__all__ = [
    "STARTING_FEN",
    "game_from_fen",
    "game_to_fen",
]
