"""Functional facade over :class:`GameState` for presentation layers."""

from __future__ import annotations

from chessrules.core.enums import GameStatus
from chessrules.core.move import Move
from chessrules.core.types import Square
from chessrules.game.state import GameState


def new_game() -> GameState:
    """Standard initial position, White to move, no history."""
    return GameState.new()


def legal_moves(state: GameState, square: Square) -> set[Move]:
    """Legal moves from *square*; empty for an empty or opposing square."""
    return state.legal_moves(square)


def apply_move(
    state: GameState, from_sq: Square, to_sq: Square, move: Move | None = None
) -> GameState:
    """Apply a move in place and return *state*.

    An unrequested move leaves *state* unchanged; use
    :meth:`GameState.apply_move` to learn whether it was applied.
    """
    state.apply_move(from_sq, to_sq, move)
    return state


def status(state: GameState) -> GameStatus:
    return state.status()


def reset(state: GameState) -> None:
    state.reset()
