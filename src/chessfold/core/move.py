"""Move, transform and history-entry value objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from chessfold.core.enums import Color
from chessfold.core.piece import Piece
from chessfold.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """Primary displacement of a piece from one square to another.

    Also used as the secondary displacement of a castling rook.
    """

    from_sq: Square
    to_sq: Square

    def __str__(self) -> str:
        return f"{self.from_sq}{self.to_sq}"


@dataclass(frozen=True, slots=True)
class Replace:
    """Replace-effect: remove *piece_from* at *square*, optionally place *piece_to*.

    Promotion swaps the pawn in place; en passant removes the captured pawn
    from a square that is not the move's destination.
    """

    square: Square
    piece_from: Piece
    piece_to: Piece | None = None


Transform: TypeAlias = Move | Replace


@dataclass(frozen=True, slots=True)
class GameMove:
    """A single immutable entry in the move history."""

    mover: Color
    move: Move
    transform: Transform | None = None

    def __str__(self) -> str:
        return f"{self.mover!s}:{self.move}"


@dataclass(frozen=True, slots=True)
class PseudoMove:
    """Candidate destination produced by a piece generator.

    ``attacks`` is false for destinations that never threaten the square
    they land on (pawn pushes, en passant, castling).
    """

    to_sq: Square
    transform: Transform | None = None
    attacks: bool = True
