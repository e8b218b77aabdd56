"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessrules import Game, RulesConfig, new_game


@pytest.fixture
def start() -> Game:
    """A fresh game in the standard starting position."""
    return new_game()


@pytest.fixture
def rights_only() -> RulesConfig:
    """Rules that gate castling on the rights flag alone."""
    return RulesConfig.rights_only_castling()
