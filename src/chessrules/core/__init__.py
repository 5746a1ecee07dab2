"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Position, Square

    pos = Position()
    for move in pos.generator.legal_moves(Square(7, 6)):
        print(move)
"""

from chessrules.core.board import Board
from chessrules.core.enums import (
    Color,
    GameStatus,
    HasMoved,
    MoveFlag,
    Outcome,
    PieceType,
)
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.rules import Rules
from chessrules.core.types import Square, in_bounds

__all__ = [
    # Enums / flags
    "Color",
    "GameStatus",
    "HasMoved",
    "MoveFlag",
    "Outcome",
    "PieceType",
    # Types / helpers
    "Square",
    "in_bounds",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
]
