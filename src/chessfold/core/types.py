"""Square type alias and coordinate helpers.

Squares are carried around as their two-character names ("a1" .. "h8").
Arithmetic happens on ``(column, row)`` pairs, both 0-7:

    "a1" -> (0, 0), "h1" -> (7, 0), "e4" -> (4, 3), "h8" -> (7, 7)
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = str  # "a1" .. "h8"
Coord: TypeAlias = tuple[int, int]  # (column, row), 0-7 each

COLUMNS = "abcdefgh"
ROWS = "12345678"


def is_valid_square(name: str) -> bool:
    """Check whether *name* is a well-formed square name."""
    return len(name) == 2 and name[0] in COLUMNS and name[1] in ROWS


def parse_square(name: Square) -> Coord:
    """Parse square name, e.g. 'e4' -> (4, 3)."""
    if not is_valid_square(name):
        raise ValueError(f"Invalid square name: {name!r}")
    return COLUMNS.index(name[0]), ROWS.index(name[1])


def square_name(coord: Coord) -> Square:
    """Human-readable name, e.g. (4, 3) -> 'e4'."""
    column, row = coord
    if not (0 <= column < 8 and 0 <= row < 8):
        raise ValueError(f"Coordinate off the board: {coord!r}")
    return COLUMNS[column] + ROWS[row]


def translate(sq: Square, delta: Coord) -> Square | None:
    """Shift *sq* by ``(dcol, drow)``; ``None`` when the result leaves the board."""
    column, row = parse_square(sq)
    column += delta[0]
    row += delta[1]
    if not (0 <= column < 8 and 0 <= row < 8):
        return None
    return COLUMNS[column] + ROWS[row]


ALL_SQUARES: tuple[Square, ...] = tuple(c + r for r in ROWS for c in COLUMNS)
