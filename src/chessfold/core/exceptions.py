"""Exceptions raised by the rules engine."""

from __future__ import annotations

from chessfold.core.types import Square


class IllegalMove(ValueError):
    """A requested move is not legal for the side to move.

    Always recoverable: the state the move was attempted on is untouched.
    """

    def __init__(self, from_sq: Square, to_sq: Square, reason: str = "") -> None:
        super().__init__(f"[{from_sq}, {to_sq}] is not a valid move")
        self.from_sq = from_sq
        self.to_sq = to_sq
        self.reason = reason
