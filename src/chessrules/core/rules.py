"""High-level chess rules: check, checkmate, stalemate and draw detection."""

from __future__ import annotations

from chessrules.config import RulesConfig
from chessrules.core.board import Board
from chessrules.core.enums import Color, DrawReason, PieceType
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.state import Check, Checkmate, Draw, GameState, Normal
from chessrules.core.types import Position


class Rules:
    """Static rule-checker that operates on a board and its move counters."""

    # Product policy:
    # - Fifty-move draw counts plies since the last capture and is automatic.
    # - Threefold repetition is not tracked.

    @staticmethod
    def is_fifty_move_draw(
        moves_since_capture: int, config: RulesConfig | None = None
    ) -> bool:
        limit = (config or RulesConfig()).fifty_move_limit
        return moves_since_capture >= limit

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def is_checkmate(
        board: Board, color: Color, en_passant: Position | None = None
    ) -> bool:
        gen = MoveGenerator(board, en_passant)
        return gen.is_in_check(color) and not gen.has_mobility(color)

    @staticmethod
    def is_stalemate(
        board: Board, color: Color, en_passant: Position | None = None
    ) -> bool:
        gen = MoveGenerator(board, en_passant)
        return not gen.is_in_check(color) and not gen.has_mobility(color)

    @staticmethod
    def classify(
        board: Board,
        side_to_move: Color,
        moves_since_capture: int = 0,
        en_passant: Position | None = None,
        config: RulesConfig | None = None,
    ) -> GameState:
        """Derive the game state of a committed position."""
        if Rules.is_fifty_move_draw(moves_since_capture, config):
            return Draw(DrawReason.FIFTY_MOVE)

        gen = MoveGenerator(board, en_passant)
        attacked = gen.check_status(side_to_move)
        if attacked is not None:
            # The en passant target only ever belongs to the side to move.
            mover_gen = gen if attacked == side_to_move else MoveGenerator(board)
            if not mover_gen.has_mobility(attacked):
                return Checkmate(attacked)
            return Check(attacked)

        if not gen.has_mobility(side_to_move):
            return Draw(DrawReason.STALEMATE)
        return Normal()

    @staticmethod
    def find_promotion_square(board: Board) -> Position | None:
        """First pawn standing on its promotion rank (White checked first)."""
        for color in Color:
            for file in range(8):
                pos = Position(file, color.promotion_rank)
                piece = board[pos]
                if (
                    piece is not None
                    and piece.color == color
                    and piece.piece_type == PieceType.PAWN
                ):
                    return pos
        return None
