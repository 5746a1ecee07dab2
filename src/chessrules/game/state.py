"""Game state — a position plus its terminal marker."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameStatus, Outcome, PieceType
from chessrules.core.move import Move
from chessrules.core.position import Position
from chessrules.core.rules import Rules
from chessrules.core.types import Square

_LOGGER = logging.getLogger(__name__)


@dataclass
class GameState:
    """Manages one game: position, status and terminal outcome.

    This is a pure data/logic class — no threading, no UI. Once the
    outcome is terminal every move is rejected until :meth:`reset`.
    """

    position: Position = field(default_factory=Position)
    outcome: Outcome = field(default=Outcome.NONE)
    _status: GameStatus = field(default=GameStatus.ONGOING, init=False, repr=False)

    # ── Initialisation ───────────────────────────────────────────────────

    @classmethod
    def new(cls) -> GameState:
        """Standard initial position, White to move."""
        state = cls()
        state.setup()
        return state

    def setup(
        self, board: Board | None = None, side_to_move: Color = Color.WHITE
    ) -> None:
        """Initialise (or reset) the game, optionally from a custom *board*."""
        self.position = Position(
            board=board.copy() if board is not None else None,
            side_to_move=side_to_move,
        )
        self.outcome = Outcome.NONE
        self._evaluate()

    def reset(self) -> None:
        """Restore the standard initial position."""
        self.setup()
        _LOGGER.info("Game reset")

    # ── Queries ──────────────────────────────────────────────────────────

    def legal_moves(self, sq: Square) -> set[Move]:
        """Legal moves of the side to move's piece on *sq*."""
        if self.is_game_over:
            return set()
        piece = self.position.board[sq]
        if piece is None or piece.color != self.side_to_move:
            return set()
        return self.position.generator.legal_moves(sq)

    def status(self) -> GameStatus:
        return self._status

    def captured(self, color: Color) -> list[PieceType]:
        """Kinds of *color*'s pieces captured so far, oldest first."""
        return list(self.position.captured[color])

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.outcome != Outcome.NONE

    @property
    def winner(self) -> Color | None:
        """The mating side, or ``None`` while playing or after stalemate."""
        if self.outcome == Outcome.CHECKMATE:
            return self.side_to_move.opposite
        return None

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(
        self, from_sq: Square, to_sq: Square, move: Move | None = None
    ) -> bool:
        """Apply the legal move from *from_sq* to *to_sq*.

        Returns ``False`` and leaves the game untouched when no such legal
        move exists, or when *move* does not match it.
        """
        candidate = next(
            (m for m in self.legal_moves(from_sq) if m.to_sq == to_sq), None
        )
        if candidate is None or (move is not None and move != candidate):
            _LOGGER.warning("Rejected move %s -> %s", tuple(from_sq), tuple(to_sq))
            return False

        self.position.apply_move(candidate)
        self._evaluate()
        return True

    # ── Internal ─────────────────────────────────────────────────────────

    def _evaluate(self) -> None:
        self._status = Rules.status(self.position)
        self.outcome = Rules.outcome(self._status)
        if self.outcome != Outcome.NONE:
            _LOGGER.info(
                "Game over: %s, %s to move", self.outcome.name, self.side_to_move
            )
