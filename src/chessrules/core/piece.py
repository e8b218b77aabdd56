"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color, PieceType

_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}
_TYPES_BY_LETTER: dict[str, PieceType] = {v: k for k, v in _LETTERS.items()}

# White symbols; black ones follow six code points later.
_WHITE_SYMBOLS: dict[PieceType, str] = {
    PieceType.KING: "♔",
    PieceType.QUEEN: "♕",
    PieceType.ROOK: "♖",
    PieceType.BISHOP: "♗",
    PieceType.KNIGHT: "♘",
    PieceType.PAWN: "♙",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable piece; replaced wholesale when a pawn promotes."""

    piece_type: PieceType
    color: Color

    def __str__(self) -> str:
        """Position-text letter (uppercase = white, lowercase = black)."""
        letter = _LETTERS[self.piece_type]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from its letter, e.g. 'N' → white knight."""
        piece_type = _TYPES_BY_LETTER.get(char.lower()) if len(char) == 1 else None
        if piece_type is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(piece_type, Color.WHITE if char.isupper() else Color.BLACK)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        white = _WHITE_SYMBOLS[self.piece_type]
        return white if self.color == Color.WHITE else chr(ord(white) + 6)

    def is_enemy_of(self, other: Piece | None) -> bool:
        return other is not None and other.color != self.color

    def promoted(self, piece_type: PieceType) -> Piece:
        return Piece(piece_type, self.color)
