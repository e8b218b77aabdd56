"""Core enumerations and flags for the rules engine."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Rank direction of this side's pawns: +1 for White, -1 for Black."""
        return 1 if self is Color.WHITE else -1

    @property
    def home_rank(self) -> int:
        """Rank index of the back rank this side starts on."""
        return 0 if self is Color.WHITE else 7

    @property
    def pawn_rank(self) -> int:
        """Rank index this side's pawns start on."""
        return self.home_rank + self.forward

    @property
    def promotion_rank(self) -> int:
        """Rank index where this side's pawns promote."""
        return self.opposite.home_rank

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class CastlingRights(IntFlag):
    """Four independent castling flags."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH

    @classmethod
    def both(cls, color: Color) -> CastlingRights:
        return cls.WHITE_BOTH if color == Color.WHITE else cls.BLACK_BOTH


class DrawReason(IntEnum):
    """Why a game was classified as drawn."""

    STALEMATE = auto()
    FIFTY_MOVE = auto()


class MoveResult(IntEnum):
    """Outcome of a move or promotion request."""

    ALLOWED = auto()
    DISALLOWED = auto()

    def __bool__(self) -> bool:
        return self is MoveResult.ALLOWED
