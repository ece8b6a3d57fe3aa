"""Game session layer - snapshot history, undo and event callbacks.

Quick start::

    from chessfold.core import Move
    from chessfold.game import GameController

    ctrl = GameController()
    ctrl.events.on_illegal_move.append(lambda exc: print(exc))
    ctrl.submit_move(Move("e2", "e4"))
"""

from chessfold.game.controller import GameController, GameEvents

__all__ = [
    "GameController",
    "GameEvents",
]
