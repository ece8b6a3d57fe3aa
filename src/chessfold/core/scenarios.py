"""Named seed positions for play and testing."""

from __future__ import annotations

from collections.abc import Callable

from chessfold.core.board import Board
from chessfold.core.enums import Color
from chessfold.core.move import GameMove, Move
from chessfold.core.state import GameState


def standard_state() -> GameState:
    """Standard 32-piece starting position."""
    return GameState.initial()


def castling_state() -> GameState:
    """Kings and rooks only, none of them moved, white to move."""
    board = Board.from_placement(
        {"a1": "R", "e1": "K", "h1": "R", "a8": "r", "e8": "k", "h8": "r"}
    )
    return GameState((), board)


def en_passant_state() -> GameState:
    """White pawn on f5 beside two unmoved black pawns, black to move.

    After ...g7-g5 or ...e7-e5, white may capture en passant.
    """
    board = Board.from_placement({"f5": "P", "g7": "p", "e7": "p"})
    return GameState((GameMove(Color.WHITE, Move("f4", "f5")),), board)


SCENARIOS: dict[str, Callable[[], GameState]] = {
    "standard": standard_state,
    "castling": castling_state,
    "en_passant": en_passant_state,
}


def scenario_state(name: str) -> GameState:
    """Fresh state for the scenario called *name*."""
    try:
        factory = SCENARIOS[name]
    except KeyError:
        raise ValueError(
            f"Unknown scenario: {name!r} (expected one of {', '.join(SCENARIOS)})"
        ) from None
    return factory()
