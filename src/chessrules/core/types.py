"""Board coordinates and the step primitives every piece rule is built on.

Board layout (Little-Endian Rank-File mapping):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63

Steps are expressed as ``(delta_file, delta_rank)`` pairs.  The rank
component is relative to a color: for White it points up the board, for
Black down.  Stepping off the board yields ``None``, and every step chained
after that stays ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from chessrules.core.enums import Color
from chessrules.exceptions import InvalidPositionError

Delta: TypeAlias = tuple[int, int]

_FILES = "abcdefgh"
_RANKS = "12345678"


def _on_board(file: int, rank: int) -> bool:
    return 0 <= file < 8 and 0 <= rank < 8


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A square coordinate: file 0-7 (a-h), rank 0-7 (1-8)."""

    file: int
    rank: int

    def __post_init__(self) -> None:
        if (
            type(self.file) is not int
            or type(self.rank) is not int
            or not _on_board(self.file, self.rank)
        ):
            raise InvalidPositionError(
                f"Position out of range: file={self.file!r}, rank={self.rank!r}"
            )

    @property
    def index(self) -> int:
        """Linear square index 0-63."""
        return self.rank * 8 + self.file

    @property
    def name(self) -> str:
        """Human-readable name, e.g. ``Position(4, 3).name == 'e4'``."""
        return _FILES[self.file] + _RANKS[self.rank]

    @classmethod
    def from_index(cls, index: int) -> Position:
        if type(index) is not int or not 0 <= index < 64:
            raise InvalidPositionError(f"Invalid square index: {index!r}")
        return cls(index & 7, index >> 3)

    @classmethod
    def from_name(cls, name: str) -> Position:
        """Parse square name, e.g. 'e4'."""
        if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
            raise InvalidPositionError(f"Invalid square name: {name!r}")
        return cls(_FILES.index(name[0]), _RANKS.index(name[1]))

    def __str__(self) -> str:
        return self.name


def as_position(value: Position | str) -> Position:
    """Accept either a :class:`Position` or a square name."""
    if isinstance(value, Position):
        return value
    if isinstance(value, str):
        return Position.from_name(value)
    raise InvalidPositionError(f"Not a board position: {value!r}")


# ── Step generator ───────────────────────────────────────────────────────────


def step(
    origin: Position | None, delta: Delta, color: Color = Color.WHITE
) -> Position | None:
    """Single step from *origin*; ``None`` if it leaves the board."""
    if origin is None:
        return None
    delta_file, delta_rank = delta
    file = origin.file + delta_file
    rank = origin.rank + delta_rank * color.forward
    if not _on_board(file, rank):
        return None
    return Position(file, rank)


def walk(
    origin: Position | None, *deltas: Delta, color: Color = Color.WHITE
) -> Position | None:
    """Chain several steps left to right, short-circuiting off-board."""
    pos = origin
    for delta in deltas:
        pos = step(pos, delta, color)
        if pos is None:
            return None
    return pos


def forward(origin: Position | None, color: Color, amount: int = 1) -> Position | None:
    return step(origin, (0, amount), color)


def backward(origin: Position | None, color: Color, amount: int = 1) -> Position | None:
    return step(origin, (0, -amount), color)


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Position(f, 0) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Position(f, 1) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Position(f, 2) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Position(f, 3) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Position(f, 4) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Position(f, 5) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Position(f, 6) for f in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Position(f, 7) for f in range(8))
