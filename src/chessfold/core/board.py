"""Board - sparse piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from chessfold.core.enums import Color, PieceType
from chessfold.core.move import GameMove, Move
from chessfold.core.piece import Piece
from chessfold.core.types import COLUMNS, ROWS, Square, is_valid_square

INITIAL_PLACEMENT: dict[Square, str] = {
    **{f"{c}2": "P" for c in COLUMNS},
    **{f"{c}7": "p" for c in COLUMNS},
    **{f"{c}1": ch for c, ch in zip(COLUMNS, "RNBQKBNR")},
    **{f"{c}8": ch for c, ch in zip(COLUMNS, "rnbqkbnr")},
}


class Board:
    """Mutable square -> piece mapping; absent entries are empty squares."""

    __slots__ = ("_pieces",)

    def __init__(self, pieces: Mapping[Square, Piece] | None = None) -> None:
        self._pieces: dict[Square, Piece] = dict(pieces) if pieces else {}

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._pieces.get(sq)

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        if piece is None:
            self._pieces.pop(sq, None)
            return
        if not is_valid_square(sq):
            raise ValueError(f"Invalid square name: {sq!r}")
        self._pieces[sq] = piece

    def __contains__(self, sq: object) -> bool:
        return sq in self._pieces

    def __iter__(self) -> Iterator[Square]:
        return iter(self._pieces)

    def __len__(self) -> int:
        return len(self._pieces)

    def is_empty(self, sq: Square) -> bool:
        return sq not in self._pieces

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color, piece_type: PieceType | None = None) -> list[Square]:
        """Squares occupied by *color* (optionally only its *piece_type*)."""
        return [
            sq
            for sq, piece in self._pieces.items()
            if piece.color == color
            and (piece_type is None or piece.piece_type == piece_type)
        ]

    def king_square(self, color: Color) -> Square | None:
        """The king square for *color*, or ``None`` if it has no king."""
        for sq, piece in self._pieces.items():
            if piece.color == color and piece.piece_type == PieceType.KING:
                return sq
        return None

    # -- Mutation / copying -------------------------------------------------

    def move_piece(self, move: Move) -> None:
        """Relocate whatever stands on ``move.from_sq``, capturing on ``to_sq``."""
        piece = self._pieces.pop(move.from_sq, None)
        if piece is None:
            self._pieces.pop(move.to_sq, None)
        else:
            self._pieces[move.to_sq] = piece

    def apply(self, game_move: GameMove) -> None:
        """Apply the primary move, then its transform (if any)."""
        self.move_piece(game_move.move)
        transform = game_move.transform
        if transform is None:
            return
        if isinstance(transform, Move):
            self.move_piece(transform)
        else:
            self[transform.square] = transform.piece_to

    def copy(self) -> Board:
        return Board(self._pieces)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def from_placement(cls, placement: Mapping[Square, str]) -> Board:
        """Build a board from placement characters, e.g. ``{"e1": "K"}``."""
        b = cls()
        for sq, char in placement.items():
            b[sq] = Piece.from_char(char)
        return b

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        return cls.from_placement(INITIAL_PLACEMENT)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._pieces == other._pieces

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in reversed(ROWS):
            cells = []
            for column in COLUMNS:
                p = self[column + row]
                cells.append(str(p) if p else ".")
            rows.append(f"{row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
