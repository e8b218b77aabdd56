"""Tests for the GameState union helpers."""

import pytest

from chessrules.core.enums import Color, DrawReason
from chessrules.core.state import (
    AwaitingPromotion,
    Check,
    Checkmate,
    Draw,
    GameState,
    Normal,
    accepts_moves,
    describe,
    is_terminal,
)
from chessrules.core.types import E8


@pytest.mark.parametrize(
    "state, accepts, terminal",
    [
        (Normal(), True, False),
        (Check(Color.WHITE), True, False),
        (Draw(DrawReason.STALEMATE), True, True),
        (Draw(DrawReason.FIFTY_MOVE), True, True),
        (Checkmate(Color.BLACK), False, True),
        (AwaitingPromotion(E8), False, False),
    ],
)
def test_state_flags(state: GameState, accepts: bool, terminal: bool) -> None:
    assert accepts_moves(state) is accepts
    assert is_terminal(state) is terminal


def test_describe() -> None:
    assert describe(Normal()) == "normal"
    assert describe(Check(Color.BLACK)) == "black in check"
    assert describe(Checkmate(Color.WHITE)) == "white checkmated"
    assert describe(Draw(DrawReason.FIFTY_MOVE)) == "draw (fifty_move)"
    assert describe(AwaitingPromotion(E8)) == "awaiting promotion on e8"


def test_states_are_values() -> None:
    assert Check(Color.WHITE) == Check(Color.WHITE)
    assert Check(Color.WHITE) != Checkmate(Color.WHITE)
    assert Normal() == Normal()
    assert len({Draw(DrawReason.STALEMATE), Draw(DrawReason.STALEMATE)}) == 1
