"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, MoveGenerator, Position

    board = Board.initial()
    gen = MoveGenerator(board)
    print(gen.legal_destinations(Position.from_name("g1")))
"""

from chessrules.core.board import Board
from chessrules.core.enums import (
    CastlingRights,
    Color,
    DrawReason,
    MoveResult,
    PieceType,
)
from chessrules.core.move_generator import CastlingPlan, MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.state import (
    AwaitingPromotion,
    Check,
    Checkmate,
    Draw,
    GameState,
    Normal,
)
from chessrules.core.types import Position, backward, forward, step, walk

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "DrawReason",
    "MoveResult",
    "PieceType",
    # Coordinates / stepping
    "Position",
    "backward",
    "forward",
    "step",
    "walk",
    # Game states
    "AwaitingPromotion",
    "Check",
    "Checkmate",
    "Draw",
    "GameState",
    "Normal",
    # Domain objects
    "Board",
    "CastlingPlan",
    "MoveGenerator",
    "Piece",
    "Rules",
]
