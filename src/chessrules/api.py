"""Function-style entry points over :class:`~chessrules.game.Game`."""

from __future__ import annotations

from chessrules.config import RulesConfig
from chessrules.core.enums import MoveResult, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Position
from chessrules.game.game import Game
from chessrules.notation.fen import game_from_fen, game_to_fen


def new_game(config: RulesConfig | None = None) -> Game:
    """Standard starting position, White to move, all castling rights."""
    return Game.new(config)


def load_position(text: str, config: RulesConfig | None = None) -> Game:
    """Build a new game from position text; raises ``PositionImportError``."""
    return game_from_fen(text, config)


def export_position(game: Game) -> str:
    return game_to_fen(game)


def make_move(game: Game, origin: Position | str, target: Position | str) -> MoveResult:
    return game.make_move(origin, target)


def promote(game: Game, piece_type: PieceType) -> MoveResult:
    return game.promote(piece_type)


def get_legal_moves(game: Game, origin: Position | str) -> list[Position]:
    return game.get_legal_moves(origin)


def get_square(game: Game, position: Position | str) -> Piece | None:
    return game.get_square(position)
