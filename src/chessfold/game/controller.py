"""GameController - session orchestration over immutable game states.

Keeps every snapshot so undo is a pop, turns :class:`IllegalMove` into a
``False`` return plus a notification, and emits events via simple callbacks
so a presentation layer / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessfold.core.enums import Color
from chessfold.core.exceptions import IllegalMove
from chessfold.core.move import GameMove, Move
from chessfold.core.progression import progress
from chessfold.core.queries import color_to_move, is_selectable
from chessfold.core.rules import Rules
from chessfold.core.scenarios import scenario_state
from chessfold.core.state import GameState
from chessfold.core.types import Square

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[GameMove, GameState], None]  # appended move, new state
IllegalMoveCallback = Callable[[IllegalMove], None]
ResetCallback = Callable[[GameState], None]
UndoCallback = Callable[[GameState], None]  # restored state


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_illegal_move: list[IllegalMoveCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)
    on_undo: list[UndoCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Holds the current game state and its history of snapshots.

    Methods are meant to be called from a single thread.
    """

    __slots__ = ("_snapshots", "_scenario", "events")

    def __init__(self, scenario: str = "standard") -> None:
        self._scenario = scenario
        self._snapshots: list[GameState] = [scenario_state(scenario)]
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._snapshots[-1]

    @property
    def scenario(self) -> str:
        return self._scenario

    @property
    def side_to_move(self) -> Color:
        return color_to_move(self.state)

    @property
    def snapshots(self) -> tuple[GameState, ...]:
        return tuple(self._snapshots)

    # ── Queries for the presentation layer ───────────────────────────────

    def is_selectable(self, sq: Square) -> bool:
        return is_selectable(self.state, sq)

    def legal_destinations(self, sq: Square) -> list[Square]:
        return Rules.legal_destinations(self.state, sq)

    def attacked_squares(self, by_color: Color | None = None) -> frozenset[Square]:
        """Squares attacked by *by_color* (default: the side not to move)."""
        if by_color is None:
            by_color = self.side_to_move.opposite
        return Rules.attacked_squares(self.state, by_color)

    def is_in_check(self) -> bool:
        return Rules.is_in_check(self.state)

    # ── Commands ─────────────────────────────────────────────────────────

    def new_game(self, scenario: str | None = None) -> None:
        """Reseed from *scenario* (default: the current one)."""
        if scenario is not None:
            self._scenario = scenario
        self._snapshots = [scenario_state(self._scenario)]
        _LOGGER.debug("New game from scenario %r", self._scenario)
        self._emit_reset()

    def submit_move(self, move: Move) -> bool:
        """Try *move*; on success record the new snapshot and notify."""
        try:
            new_state = progress(self.state, move)
        except IllegalMove as exc:
            _LOGGER.info("Illegal move %s: %s", move, exc.reason)
            self._emit_illegal(exc)
            return False

        self._snapshots.append(new_state)
        self._emit_move(new_state.moves[-1])
        return True

    def undo_move(self) -> bool:
        """Drop the latest snapshot. Returns ``False`` at the seed position."""
        if len(self._snapshots) == 1:
            return False
        undone = self._snapshots.pop()
        _LOGGER.debug("Undid %s", undone.last_move)
        self._emit_undo()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, game_move: GameMove) -> None:
        for cb in self.events.on_move:
            cb(game_move, self.state)

    def _emit_illegal(self, exc: IllegalMove) -> None:
        for cb in self.events.on_illegal_move:
            cb(exc)

    def _emit_reset(self) -> None:
        for cb in self.events.on_reset:
            cb(self.state)

    def _emit_undo(self) -> None:
        for cb in self.events.on_undo:
            cb(self.state)
