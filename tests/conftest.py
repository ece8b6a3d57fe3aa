"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterable

import pytest

from chessfold.core.board import Board
from chessfold.core.move import GameMove
from chessfold.core.scenarios import castling_state, en_passant_state
from chessfold.core.state import GameState


@pytest.fixture
def initial() -> GameState:
    return GameState.initial()


@pytest.fixture
def castling() -> GameState:
    return castling_state()


@pytest.fixture
def en_passant() -> GameState:
    return en_passant_state()


@pytest.fixture
def make_state() -> Callable[..., GameState]:
    """Build a state from placement characters and an optional history.

    The history is only consulted for turn order and move-derived rights;
    it is not replayed onto the board.
    """

    def _make(
        placement: dict[str, str], moves: Iterable[GameMove] = ()
    ) -> GameState:
        return GameState(tuple(moves), Board.from_placement(placement))

    return _make
