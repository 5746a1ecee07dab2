"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessrules.core.board import Board
from chessrules.core.position import Position
from chessrules.game.state import GameState

# Both sides with only kings and rooks on the back rank, pawns in front.
CASTLING_DIAGRAM = (
    "r...k..r",
    "pppppppp",
    "........",
    "........",
    "........",
    "........",
    "PPPPPPPP",
    "R...K..R",
)


@pytest.fixture
def state() -> GameState:
    """A fresh game in the standard starting position."""
    return GameState.new()


@pytest.fixture
def start_position() -> Position:
    return Position()


@pytest.fixture
def castling_board() -> Board:
    return Board.from_diagram(CASTLING_DIAGRAM)
