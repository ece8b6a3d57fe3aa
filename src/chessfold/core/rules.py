"""Legality filter: king safety by simulate-and-check."""

from __future__ import annotations

from chessfold.core.enums import Color
from chessfold.core.move import GameMove, Move, PseudoMove
from chessfold.core.move_generator import attacked_squares, piece_moves
from chessfold.core.queries import color_to_move
from chessfold.core.state import GameState
from chessfold.core.types import Square


class Rules:
    """Static rule-checker that operates on a :class:`GameState`."""

    @staticmethod
    def is_king_attacked(
        state: GameState, color: Color, attacked: frozenset[Square] | None = None
    ) -> bool:
        """Whether *color*'s king stands on a square the opponent attacks.

        A missing king is never attacked.
        """
        king_sq = state.board.king_square(color)
        if king_sq is None:
            return False
        if attacked is None:
            attacked = attacked_squares(state, color.opposite)
        return king_sq in attacked

    @staticmethod
    def is_in_check(state: GameState, color: Color | None = None) -> bool:
        if color is None:
            color = color_to_move(state)
        return Rules.is_king_attacked(state, color)

    @staticmethod
    def legal_candidates(
        state: GameState,
        sq: Square,
        color: Color | None = None,
        attacked: frozenset[Square] | None = None,
    ) -> list[PseudoMove]:
        """Candidates for the piece on *sq* that keep its own king safe.

        Each candidate is played on a clone and dropped if the opponent then
        attacks the mover's king; this covers pins and discovered checks.
        *attacked* may be passed in when the caller already computed the
        opponent's attacked set for *state*.
        """
        if color is None:
            color = color_to_move(state)
        if attacked is None:
            attacked = attacked_squares(state, color.opposite)

        legal: list[PseudoMove] = []
        for candidate in piece_moves(state, sq, color, attacked):
            after = state.with_move(
                GameMove(color, Move(sq, candidate.to_sq), candidate.transform)
            )
            if not Rules.is_king_attacked(after, color):
                legal.append(candidate)
        return legal

    @staticmethod
    def legal_destinations(
        state: GameState, sq: Square, color: Color | None = None
    ) -> list[Square]:
        """Squares the piece on *sq* may legally move to, in generation order."""
        return [c.to_sq for c in Rules.legal_candidates(state, sq, color)]

    @staticmethod
    def legal_moves(state: GameState) -> list[Move]:
        """Every legal move for the side to move."""
        color = color_to_move(state)
        attacked = attacked_squares(state, color.opposite)
        return [
            Move(sq, candidate.to_sq)
            for sq in state.board.pieces(color)
            for candidate in Rules.legal_candidates(state, sq, color, attacked)
        ]

    @staticmethod
    def attacked_squares(state: GameState, by_color: Color) -> frozenset[Square]:
        return attacked_squares(state, by_color)
