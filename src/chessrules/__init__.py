"""chessrules — a rules engine for standard chess.

Quick start::

    from chessrules import Square, apply_move, legal_moves, new_game, status

    state = new_game()
    moves = legal_moves(state, Square(6, 4))
    apply_move(state, Square(6, 4), Square(4, 4))
    print(status(state))
"""

from chessrules.core import (
    Board,
    Color,
    GameStatus,
    HasMoved,
    Move,
    MoveFlag,
    MoveGenerator,
    Outcome,
    Piece,
    PieceType,
    Position,
    Rules,
    Square,
    in_bounds,
)
from chessrules.game import (
    GameController,
    GameEvents,
    GameState,
    apply_move,
    legal_moves,
    new_game,
    reset,
    status,
)

__all__ = [
    "Board",
    "Color",
    "GameController",
    "GameEvents",
    "GameState",
    "GameStatus",
    "HasMoved",
    "Move",
    "MoveFlag",
    "MoveGenerator",
    "Outcome",
    "Piece",
    "PieceType",
    "Position",
    "Rules",
    "Square",
    "apply_move",
    "in_bounds",
    "legal_moves",
    "new_game",
    "reset",
    "status",
]
