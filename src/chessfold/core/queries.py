"""Board query layer: facts derived from a :class:`GameState`."""

from __future__ import annotations

from chessfold.core.board import INITIAL_PLACEMENT
from chessfold.core.enums import Color
from chessfold.core.piece import Piece
from chessfold.core.state import GameState
from chessfold.core.types import Square

_INITIAL_PIECES: dict[Square, Piece] = {
    sq: Piece.from_char(ch) for sq, ch in INITIAL_PLACEMENT.items()
}


def piece_at(state: GameState, sq: Square) -> Piece | None:
    return state.board[sq]


def color_to_move(state: GameState) -> Color:
    """Opposite of the last recorded mover; white on an empty history."""
    last = state.last_move
    return last.mover.opposite if last is not None else Color.WHITE


def has_moved(state: GameState, sq: Square) -> bool:
    """Whether *sq* has been involved in the game so far.

    True if the occupant differs from the standard setup's occupant, or any
    recorded move starts or ends on *sq*. A piece landing on a square whose
    original occupant never moved has itself moved there, so the square
    counts as moved either way.
    """
    if state.board[sq] != _INITIAL_PIECES.get(sq):
        return True
    return any(gm.move.from_sq == sq or gm.move.to_sq == sq for gm in state.moves)


def is_selectable(state: GameState, sq: Square) -> bool:
    """Whether *sq* holds a piece belonging to the side to move."""
    piece = state.board[sq]
    return piece is not None and piece.color == color_to_move(state)
