"""GameController — selection-driven play on top of :class:`GameState`.

Turns a stream of square clicks (from any front end) into move
submissions and emits events via simple callbacks so the UI / tests
can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessrules.core.enums import Color, GameStatus, Outcome
from chessrules.core.move import Move
from chessrules.core.types import Square
from chessrules.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, GameState], None]
StatusCallback = Callable[[GameStatus], None]
GameOverCallback = Callable[[Outcome, Color | None], None]  # outcome, winner


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_status: list[StatusCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Tracks the selected square and its legal moves for one game.

    Thread-safety: methods are designed to be called from a single thread.
    """

    __slots__ = ("_state", "_selected", "_targets", "events")

    def __init__(self, state: GameState | None = None) -> None:
        self._state = state if state is not None else GameState.new()
        self._selected: Square | None = None
        self._targets: dict[Square, Move] = {}
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def selected(self) -> Square | None:
        return self._selected

    @property
    def highlighted(self) -> frozenset[Square]:
        """Destinations of the selected piece."""
        return frozenset(self._targets)

    # ── Commands ─────────────────────────────────────────────────────────

    def new_game(self) -> None:
        self._state.reset()
        self.clear_selection()
        self._emit_status(self._state.status())

    def click(self, sq: Square) -> Move | None:
        """Handle a click on *sq*; returns the move it played, if any."""
        if self._state.is_game_over:
            return None
        sq = Square(*sq)

        if self._selected is not None:
            move = self._targets.get(sq)
            if move is not None:
                self.clear_selection()
                return move if self.submit_move(move) else None
            if self._owns(sq):
                self.select(sq)
            else:
                self.clear_selection()
            return None

        if self._owns(sq):
            self.select(sq)
        return None

    def select(self, sq: Square) -> set[Move]:
        """Select *sq* and cache its legal moves."""
        sq = Square(*sq)
        moves = self._state.legal_moves(sq)
        self._selected = sq
        self._targets = {move.to_sq: move for move in moves}
        _LOGGER.debug("Selected %s with %d legal moves", tuple(sq), len(moves))
        return moves

    def clear_selection(self) -> None:
        self._selected = None
        self._targets = {}

    def submit_move(self, move: Move) -> bool:
        """Submit a move. Returns True if legal and applied."""
        if not self._state.apply_move(move.from_sq, move.to_sq, move):
            return False

        self.clear_selection()
        self._emit_move(move)
        status = self._state.status()
        self._emit_status(status)
        if self._state.is_game_over:
            self._emit_game_over(self._state.outcome, self._state.winner)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _owns(self, sq: Square) -> bool:
        piece = self._state.position.board[sq]
        return piece is not None and piece.color == self._state.side_to_move

    def _emit_move(self, move: Move) -> None:
        for cb in self.events.on_move:
            cb(move, self._state)

    def _emit_status(self, status: GameStatus) -> None:
        for cb in self.events.on_status:
            cb(status)

    def _emit_game_over(self, outcome: Outcome, winner: Color | None) -> None:
        _LOGGER.info("Game over: %s (winner: %s)", outcome.name, winner)
        for cb in self.events.on_game_over:
            cb(outcome, winner)
