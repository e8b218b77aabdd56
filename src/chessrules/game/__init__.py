"""Game layer — the move executor, its history and event hooks.

Quick start::

    from chessrules.game import Game

    game = Game.new()
    game.make_move("e2", "e4")
"""

from chessrules.game.game import Game, GameEvents, MoveRecord

__all__ = [
    "Game",
    "GameEvents",
    "MoveRecord",
]
