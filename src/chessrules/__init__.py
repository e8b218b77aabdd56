"""chessrules — a chess rules oracle.

Decides whether a move is legal, applies it, and classifies the resulting
position (normal, check, checkmate, draw, awaiting promotion).

Quick start::

    from chessrules import MoveResult, load_position, make_move

    game = load_position("k7/8/1Q6/8/8/8/8/K7 b - - 0 1")
    print(game.state)  # Draw(reason=<DrawReason.STALEMATE: 1>)
"""

from chessrules.api import (
    export_position,
    get_legal_moves,
    get_square,
    load_position,
    make_move,
    new_game,
    promote,
)
from chessrules.config import RulesConfig
from chessrules.core import (
    AwaitingPromotion,
    Board,
    CastlingRights,
    Check,
    Checkmate,
    Color,
    Draw,
    DrawReason,
    GameState,
    MoveResult,
    Normal,
    Piece,
    PieceType,
    Position,
)
from chessrules.exceptions import (
    ChessRulesError,
    InvalidPositionError,
    PositionImportError,
)
from chessrules.game import Game, GameEvents, MoveRecord
from chessrules.notation import STARTING_FEN

__all__ = [
    # Operations
    "export_position",
    "get_legal_moves",
    "get_square",
    "load_position",
    "make_move",
    "new_game",
    "promote",
    # Configuration / errors
    "ChessRulesError",
    "InvalidPositionError",
    "PositionImportError",
    "RulesConfig",
    # Domain objects
    "Board",
    "CastlingRights",
    "Color",
    "Game",
    "GameEvents",
    "MoveRecord",
    "MoveResult",
    "Piece",
    "PieceType",
    "Position",
    "STARTING_FEN",
    # Game states
    "AwaitingPromotion",
    "Check",
    "Checkmate",
    "Draw",
    "DrawReason",
    "GameState",
    "Normal",
]
