"""Game progression: validate a move and produce the next state."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import NoReturn

from chessfold.core.exceptions import IllegalMove
from chessfold.core.move import GameMove, Move
from chessfold.core.move_generator import attacked_squares
from chessfold.core.queries import color_to_move
from chessfold.core.rules import Rules
from chessfold.core.state import GameState

_LOGGER = logging.getLogger(__name__)


def _reject(move: Move, reason: str) -> NoReturn:
    _LOGGER.debug("Rejected %s: %s", move, reason)
    raise IllegalMove(move.from_sq, move.to_sq, reason)


def progress(state: GameState, move: Move) -> GameState:
    """Return the state after *move*; raise :class:`IllegalMove` otherwise.

    The input state is never modified. All board edits for the move
    (primary displacement plus any castling, promotion or en passant
    transform) happen on a clone that is only returned on success.
    """
    color = color_to_move(state)
    piece = state.board[move.from_sq]
    if piece is None:
        _reject(move, f"no piece on {move.from_sq}")
    if piece.color != color:
        _reject(move, f"{color!s} to move")

    attacked = attacked_squares(state, color.opposite)
    candidate = next(
        (
            c
            for c in Rules.legal_candidates(state, move.from_sq, color, attacked)
            if c.to_sq == move.to_sq
        ),
        None,
    )
    if candidate is None:
        _reject(move, f"{move.to_sq} is not reachable")

    game_move = GameMove(color, move, candidate.transform)
    after = state.with_move(game_move)
    if Rules.is_king_attacked(after, color):
        _reject(move, "king left under attack")

    _LOGGER.debug("Applied %s (ply %d)", game_move, after.ply_count)
    return after


def play(state: GameState, moves: Iterable[Move]) -> GameState:
    """Fold :func:`progress` over *moves*, stopping at the first illegal one."""
    for move in moves:
        state = progress(state, move)
    return state
