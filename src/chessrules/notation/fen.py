"""Position text (FEN) import and export."""

from __future__ import annotations

from chessrules.config import RulesConfig
from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color
from chessrules.core.piece import Piece
from chessrules.core.types import Position
from chessrules.exceptions import InvalidPositionError, PositionImportError
from chessrules.game.game import Game

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}
_EMPTY_RUNS = "12345678"


def _parse_board(placement: str, fen: str) -> Board:
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise PositionImportError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch in _EMPTY_RUNS:
                file += int(ch)
            else:
                if file >= 8:
                    raise PositionImportError(f"Invalid FEN rank width: {fen!r}")
                try:
                    board[Position(file, rank)] = Piece.from_char(ch)
                except ValueError as exc:
                    raise PositionImportError(
                        f"Invalid FEN piece {ch!r}: {fen!r}"
                    ) from exc
                file += 1
            if file > 8:
                raise PositionImportError(f"Invalid FEN rank width: {fen!r}")
        if file != 8:
            raise PositionImportError(f"Invalid FEN rank width: {fen!r}")
    return board


def _parse_castling(field: str) -> CastlingRights:
    castling = CastlingRights.NONE
    if field == "-":
        return castling
    seen: set[str] = set()
    for ch in field:
        right = _CASTLING_CHARS.get(ch)
        if right is None or ch in seen:
            raise PositionImportError(f"Invalid FEN castling field: {field!r}")
        seen.add(ch)
        castling |= right
    return castling


def _parse_en_passant(field: str, side: Color) -> Position | None:
    if field == "-":
        return None
    try:
        ep = Position.from_name(field)
    except InvalidPositionError as exc:
        raise PositionImportError(f"Invalid FEN en-passant square: {field!r}") from exc
    # The skipped square sits behind a pawn of the side that just moved.
    if ep.rank != side.opposite.pawn_rank + side.opposite.forward:
        raise PositionImportError(
            f"Invalid FEN en-passant square for side-to-move: {field!r}"
        )
    return ep


def _parse_counter(field: str, name: str, minimum: int) -> int:
    # ASCII digits only.
    if not (field.isascii() and field.isdigit()):
        raise PositionImportError(f"Invalid FEN {name}: {field!r}")
    value = int(field)
    if value < minimum:
        raise PositionImportError(f"Invalid FEN {name}: {field!r}")
    return value


def game_from_fen(fen: str, config: RulesConfig | None = None) -> Game:
    """Parse a six-field FEN string into a freshly classified :class:`Game`.

    Raises:
        PositionImportError: if any field is malformed.  Nothing is built
            from a partial parse.
    """
    parts = fen.split(" ")
    if len(parts) != 6:
        raise PositionImportError(f"Invalid FEN (need 6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part, halfmove_part, fullmove_part = parts

    board = _parse_board(placement, fen)

    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise PositionImportError(f"Invalid FEN side-to-move field: {side_part!r}")

    castling = _parse_castling(castling_part)
    ep = _parse_en_passant(ep_part, side)
    halfmove = _parse_counter(halfmove_part, "halfmove clock", 0)
    fullmove = _parse_counter(fullmove_part, "fullmove number", 1)

    return Game(
        board=board,
        turn=side,
        castling=castling,
        en_passant=ep,
        moves_since_capture=halfmove,
        fullmove_number=fullmove,
        config=config,
    )


def game_to_fen(game: Game) -> str:
    """Serialise a :class:`Game` to FEN."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = game.board[Position(file, rank)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    side_str = "w" if game.turn == Color.WHITE else "b"

    castling_str = "".join(
        ch for ch, right in _CASTLING_CHARS.items() if game.castling & right
    )
    if not castling_str:
        castling_str = "-"

    ep_str = game.en_passant.name if game.en_passant is not None else "-"

    return (
        f"{board_str} {side_str} {castling_str} {ep_str} "
        f"{game.moves_since_capture} {game.fullmove_number}"
    )
