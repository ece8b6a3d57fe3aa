"""Core domain layer - pure chess rules with zero external dependencies.

Quick start::

    from chessfold.core import GameState, Move, Rules, progress

    state = GameState.initial()
    print(Rules.legal_destinations(state, "e2"))  # ['e3', 'e4']
    state = progress(state, Move("e2", "e4"))
"""

from chessfold.core.board import INITIAL_PLACEMENT, Board
from chessfold.core.enums import Color, PieceType
from chessfold.core.exceptions import IllegalMove
from chessfold.core.move import GameMove, Move, PseudoMove, Replace, Transform
from chessfold.core.move_generator import attacked_squares, piece_moves
from chessfold.core.piece import Piece
from chessfold.core.progression import play, progress
from chessfold.core.queries import color_to_move, has_moved, is_selectable, piece_at
from chessfold.core.rules import Rules
from chessfold.core.scenarios import SCENARIOS, scenario_state
from chessfold.core.state import GameState
from chessfold.core.types import (
    Coord,
    Square,
    is_valid_square,
    parse_square,
    square_name,
    translate,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "Coord",
    "Square",
    "is_valid_square",
    "parse_square",
    "square_name",
    "translate",
    # Domain objects
    "Board",
    "GameMove",
    "GameState",
    "INITIAL_PLACEMENT",
    "Move",
    "Piece",
    "PseudoMove",
    "Replace",
    "Rules",
    "Transform",
    # Queries
    "color_to_move",
    "has_moved",
    "is_selectable",
    "piece_at",
    # Generation / progression
    "attacked_squares",
    "piece_moves",
    "play",
    "progress",
    # Scenarios
    "SCENARIOS",
    "scenario_state",
    # Errors
    "IllegalMove",
]
