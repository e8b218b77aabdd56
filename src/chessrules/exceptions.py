"""Exception hierarchy for the rules engine.

Illegal moves are *not* exceptions: they come back as
``MoveResult.DISALLOWED``.  Exceptions are reserved for values that cannot
be constructed at all (bad coordinates, malformed position text).
"""

from __future__ import annotations


class ChessRulesError(Exception):
    """Base class for all errors raised by :mod:`chessrules`."""


class InvalidPositionError(ChessRulesError, ValueError):
    """A board coordinate or square name is outside the 8x8 board."""


class PositionImportError(ChessRulesError, ValueError):
    """Position text could not be parsed into a game.

    Raised instead of returning a default or partially built game; the
    underlying parse error, if any, is available as ``__cause__``.
    """
