"""Pseudo-legal move generation, attack detection and the legality filter.

Everything here reduces to one primitive, :meth:`MoveGenerator.pseudo_legal_destinations`.
A square is *attacked* when it is a pseudo-legal destination of an enemy
piece, and a move is *legal* when it is pseudo-legal and, played on a copy
of the board, does not leave the mover's king attacked.
"""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Delta, Position, backward, forward, step

KNIGHT_OFFSETS: tuple[Delta, ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[Delta, ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[Delta, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[Delta, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[Delta, ...] = BISHOP_DIRS + ROOK_DIRS

# Color-relative: "one rank forward, one file aside".
_PAWN_CAPTURES: tuple[Delta, ...] = ((-1, 1), (1, 1))

_SLIDING_DIRS: dict[PieceType, tuple[Delta, ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}
_LEAPER_OFFSETS: dict[PieceType, tuple[Delta, ...]] = {
    PieceType.KNIGHT: KNIGHT_OFFSETS,
    PieceType.KING: KING_OFFSETS,
}


# -- Castling geometry -------------------------------------------------------


@dataclass(frozen=True, slots=True)
class CastlingPlan:
    """Rook relocation that accompanies a validated castling king move."""

    right: CastlingRights
    rook_from: Position
    rook_to: Position


@dataclass(frozen=True, slots=True)
class _CastlingLayout:
    right: CastlingRights
    king_from: Position
    king_to: Position
    rook_from: Position
    rook_to: Position
    between: tuple[Position, ...]  # must be empty
    crossing: tuple[Position, ...]  # must not be attacked


def _build_castling_layouts() -> dict[tuple[Color, int], _CastlingLayout]:
    layouts: dict[tuple[Color, int], _CastlingLayout] = {}
    for color in Color:
        r = color.home_rank
        kingside, queenside = (
            (CastlingRights.WHITE_KINGSIDE, CastlingRights.WHITE_QUEENSIDE)
            if color == Color.WHITE
            else (CastlingRights.BLACK_KINGSIDE, CastlingRights.BLACK_QUEENSIDE)
        )
        layouts[(color, 2)] = _CastlingLayout(
            right=kingside,
            king_from=Position(4, r),
            king_to=Position(6, r),
            rook_from=Position(7, r),
            rook_to=Position(5, r),
            between=(Position(5, r), Position(6, r)),
            crossing=(Position(5, r),),
        )
        layouts[(color, -2)] = _CastlingLayout(
            right=queenside,
            king_from=Position(4, r),
            king_to=Position(2, r),
            rook_from=Position(0, r),
            rook_to=Position(3, r),
            between=(Position(1, r), Position(2, r), Position(3, r)),
            crossing=(Position(3, r),),
        )
    return layouts


_CASTLING_LAYOUTS = _build_castling_layouts()

ROOK_CORNERS: dict[Position, CastlingRights] = {
    layout.rook_from: layout.right for layout in _CASTLING_LAYOUTS.values()
}


def is_castling_attempt(piece: Piece, origin: Position, target: Position) -> bool:
    """A king stepping exactly two files along its rank."""
    return (
        piece.piece_type == PieceType.KING
        and origin.rank == target.rank
        and abs(target.file - origin.file) == 2
    )


class MoveGenerator:
    """Move generation and legality checks over a :class:`Board`.

    The generator never mutates the board it was given; hypothetical moves
    are played on copies (see :meth:`simulate`).
    """

    __slots__ = ("_board", "_en_passant")

    def __init__(self, board: Board, en_passant: Position | None = None) -> None:
        self._board = board
        self._en_passant = en_passant

    @property
    def board(self) -> Board:
        return self._board

    # -- Pseudo-legal generation --------------------------------------------

    def pseudo_legal_destinations(self, origin: Position) -> list[Position]:
        """Destinations allowed by the piece's geometry and occupancy rules."""
        piece = self._board[origin]
        if piece is None:
            return []

        moves: list[Position] = []
        if piece.piece_type == PieceType.PAWN:
            self._gen_pawn(origin, piece, moves)
        elif piece.piece_type in _LEAPER_OFFSETS:
            self._gen_leaper(origin, piece, _LEAPER_OFFSETS[piece.piece_type], moves)
        else:
            self._gen_sliding(origin, piece, _SLIDING_DIRS[piece.piece_type], moves)
        return moves

    def _gen_pawn(self, origin: Position, piece: Piece, moves: list[Position]) -> None:
        board = self._board
        color = piece.color

        one_step = forward(origin, color)
        if one_step is not None and board.is_empty(one_step):
            moves.append(one_step)
            if origin.rank == color.pawn_rank:
                two_step = forward(origin, color, 2)
                if two_step is not None and board.is_empty(two_step):
                    moves.append(two_step)

        for delta in _PAWN_CAPTURES:
            target = step(origin, delta, color)
            if target is None:
                continue
            occupant = board[target]
            if occupant is not None:
                if piece.is_enemy_of(occupant):
                    moves.append(target)
            elif self._is_en_passant_target(target, color):
                moves.append(target)

    def _is_en_passant_target(self, target: Position, color: Color) -> bool:
        if target != self._en_passant:
            return False
        victim_sq = backward(target, color)
        if victim_sq is None:
            return False
        victim = self._board[victim_sq]
        return (
            victim is not None
            and victim.color != color
            and victim.piece_type == PieceType.PAWN
        )

    def _gen_leaper(
        self,
        origin: Position,
        piece: Piece,
        offsets: tuple[Delta, ...],
        moves: list[Position],
    ) -> None:
        board = self._board
        for delta in offsets:
            target = step(origin, delta)
            if target is None:
                continue
            occupant = board[target]
            if occupant is None or piece.is_enemy_of(occupant):
                moves.append(target)

    def _gen_sliding(
        self,
        origin: Position,
        piece: Piece,
        directions: tuple[Delta, ...],
        moves: list[Position],
    ) -> None:
        board = self._board
        for delta in directions:
            target = step(origin, delta)
            while target is not None:
                occupant = board[target]
                if occupant is None:
                    moves.append(target)
                    target = step(target, delta)
                    continue
                if piece.is_enemy_of(occupant):
                    moves.append(target)
                break

    # -- Attack detection ---------------------------------------------------

    def is_square_attacked(self, target: Position, by_color: Color) -> bool:
        """Is *target* attacked by any *by_color* piece?

        A piece attacks its pseudo-legal destinations, except that a pawn
        attacks its two forward diagonals and never the squares it pushes
        to.  For an occupied enemy square (a king) both readings agree.
        """
        for origin, piece in self._board.occupied(by_color):
            if piece.piece_type == PieceType.PAWN:
                if any(
                    step(origin, delta, by_color) == target for delta in _PAWN_CAPTURES
                ):
                    return True
            elif target in self.pseudo_legal_destinations(origin):
                return True
        return False

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked?  A missing king is never in check."""
        king = self._board.find_king(color)
        return king is not None and self.is_square_attacked(king, color.opposite)

    def check_status(self, side_to_move: Color) -> Color | None:
        """The color currently in check, if any.

        Both kings attacked at once cannot come out of legal play; the side
        to move is reported in that case.
        """
        white = self.is_in_check(Color.WHITE)
        black = self.is_in_check(Color.BLACK)
        if white and black:
            return side_to_move
        if white:
            return Color.WHITE
        if black:
            return Color.BLACK
        return None

    # -- Legality filter ----------------------------------------------------

    def is_en_passant_capture(self, origin: Position, target: Position) -> bool:
        """A pawn moving diagonally onto an empty square."""
        piece = self._board[origin]
        return (
            piece is not None
            and piece.piece_type == PieceType.PAWN
            and origin.file != target.file
            and self._board.is_empty(target)
        )

    def simulate(
        self,
        origin: Position,
        target: Position,
        castling: CastlingPlan | None = None,
    ) -> Board:
        """Play a move on a copy of the board and return the copy."""
        board = self._board.copy()
        piece = board[origin]
        if piece is not None and self.is_en_passant_capture(origin, target):
            victim_sq = backward(target, piece.color)
            if victim_sq is not None:
                board[victim_sq] = None
        board.move_piece(origin, target)
        if castling is not None:
            board.move_piece(castling.rook_from, castling.rook_to)
        return board

    def _king_safe_after(self, color: Color, board: Board) -> bool:
        return not MoveGenerator(board).is_in_check(color)

    def is_legal(self, origin: Position, target: Position) -> bool:
        """Pseudo-legal and does not leave the mover's king attacked."""
        piece = self._board[origin]
        if piece is None or target not in self.pseudo_legal_destinations(origin):
            return False
        return self._king_safe_after(piece.color, self.simulate(origin, target))

    def legal_destinations(self, origin: Position) -> list[Position]:
        piece = self._board[origin]
        if piece is None:
            return []
        return [
            target
            for target in self.pseudo_legal_destinations(origin)
            if self._king_safe_after(piece.color, self.simulate(origin, target))
        ]

    def has_mobility(self, color: Color) -> bool:
        """Does *color* have at least one legal move?"""
        for origin, _ in self._board.occupied(color):
            for target in self.pseudo_legal_destinations(origin):
                if self._king_safe_after(color, self.simulate(origin, target)):
                    return True
        return False

    # -- Castling -----------------------------------------------------------

    def castling_plan(
        self,
        origin: Position,
        target: Position,
        rights: CastlingRights,
        check_path: bool = True,
    ) -> CastlingPlan | None:
        """Validate castling from *origin* to *target*; ``None`` if not allowed.

        Without *check_path* only the rights flag, the home squares of king
        and rook, the two landing squares and the king's final safety are
        verified.
        """
        board = self._board
        king = board[origin]
        if king is None or king.piece_type != PieceType.KING:
            return None

        layout = _CASTLING_LAYOUTS.get((king.color, target.file - origin.file))
        if layout is None or origin != layout.king_from or target != layout.king_to:
            return None
        if not rights & layout.right:
            return None
        if board[layout.rook_from] != Piece(PieceType.ROOK, king.color):
            return None
        # Castling never captures: both landing squares must be free.
        if not board.is_empty(layout.king_to) or not board.is_empty(layout.rook_to):
            return None

        if check_path:
            if any(not board.is_empty(sq) for sq in layout.between):
                return None
            opponent = king.color.opposite
            if self.is_square_attacked(origin, opponent):
                return None
            if any(self.is_square_attacked(sq, opponent) for sq in layout.crossing):
                return None

        plan = CastlingPlan(layout.right, layout.rook_from, layout.rook_to)
        if not self._king_safe_after(king.color, self.simulate(origin, target, plan)):
            return None
        return plan

    def castling_destinations(
        self, origin: Position, rights: CastlingRights, check_path: bool = True
    ) -> list[Position]:
        """King destinations reachable by castling from *origin*."""
        king = self._board[origin]
        if king is None or king.piece_type != PieceType.KING:
            return []
        return [
            layout.king_to
            for (color, _), layout in _CASTLING_LAYOUTS.items()
            if color == king.color
            and self.castling_plan(origin, layout.king_to, rights, check_path)
            is not None
        ]
