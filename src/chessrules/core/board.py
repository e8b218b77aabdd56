"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Position

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square board addressed by :class:`Position`.

    The board only stores pieces; it knows nothing about turns or rules.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    # -- Element access -----------------------------------------------------

    def __getitem__(self, pos: Position) -> Piece | None:
        return self._squares[pos.index]

    def __setitem__(self, pos: Position, piece: Piece | None) -> None:
        self._squares[pos.index] = piece

    def is_empty(self, pos: Position) -> bool:
        return self._squares[pos.index] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self, color: Color | None = None) -> Iterator[tuple[Position, Piece]]:
        """Yield ``(position, piece)`` for every occupied square, a1 first."""
        for index, piece in enumerate(self._squares):
            if piece is not None and (color is None or piece.color == color):
                yield Position.from_index(index), piece

    def find_king(self, color: Color) -> Position | None:
        """Square of *color*'s king, or ``None`` if it is not on the board."""
        for pos, piece in self.occupied(color):
            if piece.piece_type == PieceType.KING:
                return pos
        return None

    def count(self, color: Color, piece_type: PieceType) -> int:
        return sum(1 for _, p in self.occupied(color) if p.piece_type == piece_type)

    # -- Mutation / copying -------------------------------------------------

    def move_piece(self, origin: Position, target: Position) -> Piece | None:
        """Move whatever stands on *origin* to *target*; return the piece replaced."""
        captured = self[target]
        self[target] = self[origin]
        self[origin] = None
        return captured

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * 64

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for color in Color:
            for file, piece_type in enumerate(_BACK_RANK):
                b[Position(file, color.home_rank)] = Piece(piece_type, color)
                b[Position(file, color.pawn_rank)] = Piece(PieceType.PAWN, color)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[Position(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
