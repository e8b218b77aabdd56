"""Game — the move executor.

A :class:`Game` owns a board plus the metadata the rules need (turn,
castling rights, en passant target, capture counter) and is mutated only
through :meth:`Game.make_move` and :meth:`Game.promote`.  A rejected request
returns ``MoveResult.DISALLOWED`` and leaves every field untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace

from chessrules.config import RulesConfig
from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, MoveResult, PieceType
from chessrules.core.move_generator import (
    ROOK_CORNERS,
    CastlingPlan,
    MoveGenerator,
    is_castling_attempt,
)
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.state import (
    AwaitingPromotion,
    GameState,
    Normal,
    accepts_moves,
    describe,
    is_terminal,
)
from chessrules.core.types import Position, as_position, backward, forward

_LOGGER = logging.getLogger(__name__)

_PROMOTION_TYPES = frozenset(
    {PieceType.KNIGHT, PieceType.BISHOP, PieceType.ROOK, PieceType.QUEEN}
)


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    origin: Position
    target: Position
    piece: Piece
    captured: Piece | None = None
    en_passant: bool = False
    castling: CastlingPlan | None = None
    promotion: PieceType | None = None
    state_after: GameState = field(default_factory=Normal)


# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, "Game"], None]
StateCallback = Callable[[GameState], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_state_changed: list[StateCallback] = field(default_factory=list)


# ── Game ─────────────────────────────────────────────────────────────────────


class Game:
    """Full game: board + side to move + castling + en passant + counters."""

    __slots__ = (
        "board",
        "turn",
        "castling",
        "en_passant",
        "moves_since_capture",
        "fullmove_number",
        "state",
        "history",
        "config",
        "events",
    )

    def __init__(
        self,
        board: Board | None = None,
        turn: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Position | None = None,
        moves_since_capture: int = 0,
        fullmove_number: int = 1,
        config: RulesConfig | None = None,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.turn = turn
        self.castling = castling
        self.en_passant = en_passant
        self.moves_since_capture = moves_since_capture
        self.fullmove_number = fullmove_number
        self.config = config if config is not None else RulesConfig()
        self.history: list[MoveRecord] = []
        self.events = GameEvents()

        for color in Color:
            if self.board.find_king(color) is None:
                _LOGGER.warning("Position has no %s king", color)
        self.state: GameState = self._classify()

    @classmethod
    def new(cls, config: RulesConfig | None = None) -> Game:
        """Standard starting position, White to move, all castling rights."""
        return cls(config=config)

    # ── Queries ──────────────────────────────────────────────────────────

    def get_square(self, pos: Position | str) -> Piece | None:
        return self.board[as_position(pos)]

    def get_legal_moves(self, origin: Position | str) -> list[Position]:
        """Destinations of the piece on *origin* that pass the legality filter."""
        gen = MoveGenerator(self.board, self.en_passant)
        return gen.legal_destinations(as_position(origin))

    def castling_moves(self, origin: Position | str) -> list[Position]:
        """King destinations on *origin* currently reachable by castling."""
        gen = MoveGenerator(self.board, self.en_passant)
        return gen.castling_destinations(
            as_position(origin), self.castling, self.config.castling_path_check
        )

    def has_castling_right(self, right: CastlingRights) -> bool:
        return bool(self.castling & right)

    @property
    def ply_count(self) -> int:
        """Number of half-moves played in this game object."""
        return len(self.history)

    @property
    def is_over(self) -> bool:
        return is_terminal(self.state)

    # ── Move execution ───────────────────────────────────────────────────

    def make_move(self, origin: Position | str, target: Position | str) -> MoveResult:
        """Validate and apply a move for the side to move."""
        origin = as_position(origin)
        target = as_position(target)

        if not accepts_moves(self.state):
            return self._reject(origin, target, f"game is {describe(self.state)}")
        if origin == target:
            return self._reject(origin, target, "origin equals target")

        piece = self.board[origin]
        if piece is None:
            return self._reject(origin, target, "source square is empty")
        if piece.color != self.turn:
            return self._reject(origin, target, f"it is {self.turn!s}'s turn")
        occupant = self.board[target]
        if occupant is not None and occupant.color == piece.color:
            return self._reject(origin, target, "target holds own piece")

        gen = MoveGenerator(self.board, self.en_passant)
        castling: CastlingPlan | None = None
        if is_castling_attempt(piece, origin, target):
            castling = gen.castling_plan(
                origin, target, self.castling, self.config.castling_path_check
            )
            if castling is None:
                return self._reject(origin, target, "castling not allowed")
        elif not gen.is_legal(origin, target):
            return self._reject(origin, target, "illegal move")

        self._apply(gen, piece, origin, target, castling)
        return MoveResult.ALLOWED

    def _apply(
        self,
        gen: MoveGenerator,
        piece: Piece,
        origin: Position,
        target: Position,
        castling: CastlingPlan | None,
    ) -> None:
        board = self.board
        previous_state = self.state
        captured: Piece | None = None

        # En passant: the captured pawn sits behind the target square
        en_passant = gen.is_en_passant_capture(origin, target)
        if en_passant:
            victim_sq = backward(target, piece.color)
            assert victim_sq is not None
            captured = board[victim_sq]
            board[victim_sq] = None

        # Slide the rook for castling
        if castling is not None:
            assert board[castling.rook_from] is not None
            board.move_piece(castling.rook_from, castling.rook_to)

        self._update_castling(piece, origin, target)

        replaced = board.move_piece(origin, target)
        if replaced is not None:
            captured = replaced

        if captured is not None:
            self.moves_since_capture = 0
        else:
            self.moves_since_capture += 1

        if self.turn == Color.BLACK:
            self.fullmove_number += 1
        self.turn = self.turn.opposite

        # En passant target for the opponent
        self.en_passant = None
        if piece.piece_type == PieceType.PAWN and abs(target.rank - origin.rank) == 2:
            self.en_passant = forward(origin, piece.color)

        self.state = self._classify()
        promotion_sq = Rules.find_promotion_square(board)
        if promotion_sq is not None:
            self.state = AwaitingPromotion(promotion_sq)

        record = MoveRecord(
            origin=origin,
            target=target,
            piece=piece,
            captured=captured,
            en_passant=en_passant,
            castling=castling,
            state_after=self.state,
        )
        self.history.append(record)
        _LOGGER.debug("Played %s%s-%s: %s", piece, origin, target, describe(self.state))
        if is_terminal(self.state):
            _LOGGER.info("Game over after %s-%s: %s", origin, target, describe(self.state))

        self._emit_move(record)
        self._emit_state(previous_state)

    def promote(self, piece_type: PieceType) -> MoveResult:
        """Replace the pawn awaiting promotion with a *piece_type* piece."""
        state = self.state
        if not isinstance(state, AwaitingPromotion):
            _LOGGER.debug("Rejected promotion: game is %s", describe(state))
            return MoveResult.DISALLOWED

        pawn = self.board[state.position]
        if pawn is None or pawn.piece_type != PieceType.PAWN:
            _LOGGER.debug("Rejected promotion: no pawn on %s", state.position)
            return MoveResult.DISALLOWED
        if piece_type not in _PROMOTION_TYPES:
            _LOGGER.debug("Rejected promotion to %r", piece_type)
            return MoveResult.DISALLOWED

        self.board[state.position] = pawn.promoted(piece_type)
        self.state = self._classify()
        if self.history:
            last = self.history[-1]
            last.promotion = piece_type
            last.state_after = self.state

        _LOGGER.info(
            "Promoted %s pawn on %s to %s: %s",
            pawn.color,
            state.position,
            piece_type.name.lower(),
            describe(self.state),
        )
        self._emit_state(state)
        return MoveResult.ALLOWED

    # ── Castling bookkeeping ─────────────────────────────────────────────

    def _update_castling(self, piece: Piece, origin: Position, target: Position) -> None:
        next_castling = self.castling
        if piece.piece_type == PieceType.KING:
            next_castling &= ~CastlingRights.both(piece.color)

        # A rook leaving its corner, or being captured on it
        for sq in (origin, target):
            if sq in ROOK_CORNERS:
                next_castling &= ~ROOK_CORNERS[sq]

        self.castling = next_castling

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Game:
        """Independent copy with history but without event listeners.

        The state is carried over as is; the position is not reclassified.
        """
        game = Game.__new__(Game)
        game.board = self.board.copy()
        game.turn = self.turn
        game.castling = self.castling
        game.en_passant = self.en_passant
        game.moves_since_capture = self.moves_since_capture
        game.fullmove_number = self.fullmove_number
        game.config = self.config
        game.state = self.state
        game.history = [replace(r) for r in self.history]
        game.events = GameEvents()
        return game

    def _classify(self) -> GameState:
        return Rules.classify(
            self.board,
            self.turn,
            self.moves_since_capture,
            self.en_passant,
            self.config,
        )

    def _reject(self, origin: Position, target: Position, reason: str) -> MoveResult:
        _LOGGER.debug("Rejected %s-%s: %s", origin, target, reason)
        return MoveResult.DISALLOWED

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self)

    def _emit_state(self, previous: GameState) -> None:
        if self.state == previous:
            return
        for cb in self.events.on_state_changed:
            cb(self.state)

    def __repr__(self) -> str:
        return f"Game(turn={self.turn!s}, state={describe(self.state)})\n{self.board!r}"
