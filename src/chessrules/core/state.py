"""Classified game states.

``GameState`` is a closed union of small frozen dataclasses.  Code that
consumes it matches every variant and ends with ``assert_never`` so a new
variant cannot slip through unhandled.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias, assert_never

from chessrules.core.enums import Color, DrawReason
from chessrules.core.types import Position


@dataclass(frozen=True, slots=True)
class Normal:
    """Play continues; nobody is in check."""


@dataclass(frozen=True, slots=True)
class Check:
    color: Color  # side whose king is attacked


@dataclass(frozen=True, slots=True)
class Checkmate:
    color: Color  # side that has been mated


@dataclass(frozen=True, slots=True)
class Draw:
    reason: DrawReason


@dataclass(frozen=True, slots=True)
class AwaitingPromotion:
    position: Position  # square of the pawn that must be promoted


GameState: TypeAlias = Normal | Check | Checkmate | Draw | AwaitingPromotion


def accepts_moves(state: GameState) -> bool:
    """Whether :meth:`Game.make_move` may be attempted in *state*."""
    match state:
        case Normal() | Check() | Draw():
            return True
        case Checkmate() | AwaitingPromotion():
            return False
        case _:
            assert_never(state)


def is_terminal(state: GameState) -> bool:
    match state:
        case Checkmate() | Draw():
            return True
        case Normal() | Check() | AwaitingPromotion():
            return False
        case _:
            assert_never(state)


def describe(state: GameState) -> str:
    """Short human-readable label, used in log records."""
    match state:
        case Normal():
            return "normal"
        case Check(color=color):
            return f"{color!s} in check"
        case Checkmate(color=color):
            return f"{color!s} checkmated"
        case Draw(reason=reason):
            return f"draw ({reason.name.lower()})"
        case AwaitingPromotion(position=pos):
            return f"awaiting promotion on {pos}"
        case _:
            assert_never(state)
