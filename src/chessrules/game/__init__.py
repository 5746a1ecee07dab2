"""Game management layer — game state, functional API, controller.

Quick start::

    from chessrules.game import GameController

    ctrl = GameController()
    ctrl.click(Square(6, 4))   # select the e-pawn
    ctrl.click(Square(4, 4))   # push it two squares
"""

from chessrules.game.api import apply_move, legal_moves, new_game, reset, status
from chessrules.game.controller import GameController, GameEvents
from chessrules.game.state import GameState

__all__ = [
    # Functional API
    "apply_move",
    "legal_moves",
    "new_game",
    "reset",
    "status",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
]
