"""GameState - immutable move history plus the board it folds to."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessfold.core.board import Board
from chessfold.core.move import GameMove


@dataclass(frozen=True, slots=True)
class GameState:
    """Ordered move history and the board derived from it.

    The board is a cache of applying ``moves`` to the starting board and is
    carried explicitly for constant-time lookups. States are values: every
    transition goes through :meth:`with_move`, which edits a clone and leaves
    ``self`` untouched. Callers must not mutate ``board`` in place.

    Equality compares history and board; the hash covers the history only,
    since equal states always share it.
    """

    moves: tuple[GameMove, ...] = ()
    board: Board = field(default_factory=Board.initial, hash=False)

    @classmethod
    def initial(cls) -> GameState:
        """Standard 32-piece starting position with an empty history."""
        return cls()

    def copy(self) -> GameState:
        """Structural clone; the history tuple is shared, the board is not."""
        return GameState(self.moves, self.board.copy())

    def with_move(self, game_move: GameMove) -> GameState:
        """New state with *game_move* applied to the board and appended."""
        board = self.board.copy()
        board.apply(game_move)
        return GameState((*self.moves, game_move), board)

    def replayed(self, start: Board | None = None) -> GameState:
        """Re-fold the history onto *start* (standard position by default)."""
        board = start.copy() if start is not None else Board.initial()
        for game_move in self.moves:
            board.apply(game_move)
        return GameState(self.moves, board)

    @property
    def last_move(self) -> GameMove | None:
        return self.moves[-1] if self.moves else None

    @property
    def ply_count(self) -> int:
        """Number of half-moves recorded."""
        return len(self.moves)
