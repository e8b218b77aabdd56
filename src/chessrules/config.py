"""Rule-set configuration shared by every :class:`~chessrules.game.Game`."""

from __future__ import annotations


class RulesConfig:
    """Immutable rule options.

    Args:
        fifty_move_limit: Plies without a capture after which the game is
            classified as a draw.
        castling_path_check: Validate that castling does not jump over
            pieces, start from check, or cross an attacked square.  When
            disabled only the rights flag, home squares and the king's
            final square are checked.
    """

    __slots__ = ("_fifty_move_limit", "_castling_path_check")

    def __init__(
        self, fifty_move_limit: int = 50, castling_path_check: bool = True
    ) -> None:
        if fifty_move_limit < 1:
            raise ValueError(f"fifty_move_limit must be positive: {fifty_move_limit!r}")
        self._fifty_move_limit = fifty_move_limit
        self._castling_path_check = castling_path_check

    @property
    def fifty_move_limit(self) -> int:
        return self._fifty_move_limit

    @property
    def castling_path_check(self) -> bool:
        return self._castling_path_check

    # Presets
    @classmethod
    def standard(cls) -> RulesConfig:
        return cls()

    @classmethod
    def rights_only_castling(cls) -> RulesConfig:
        """Castling gated by the rights flag alone (no path validation)."""
        return cls(castling_path_check=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RulesConfig):
            return NotImplemented
        return (
            self._fifty_move_limit == other._fifty_move_limit
            and self._castling_path_check == other._castling_path_check
        )

    def __hash__(self) -> int:
        return hash((self._fifty_move_limit, self._castling_path_check))

    def __repr__(self) -> str:
        return (
            f"RulesConfig(fifty_move_limit={self._fifty_move_limit}, "
            f"castling_path_check={self._castling_path_check})"
        )
