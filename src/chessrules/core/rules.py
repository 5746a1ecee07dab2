"""High-level chess rules: check, checkmate, stalemate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import GameStatus, Outcome

if TYPE_CHECKING:
    from chessrules.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`.

    Every query concerns the side to move.
    """

    @staticmethod
    def is_in_check(position: Position) -> bool:
        return position.generator.is_in_check(position.side_to_move)

    @staticmethod
    def has_legal_move(position: Position) -> bool:
        return position.generator.has_legal_move(position.side_to_move)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        if not Rules.is_in_check(position):
            return False
        return not Rules.has_legal_move(position)

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        if Rules.is_in_check(position):
            return False
        return not Rules.has_legal_move(position)

    @staticmethod
    def status(position: Position) -> GameStatus:
        """Classify the position for the side to move."""
        gen = position.generator
        color = position.side_to_move
        in_check = gen.is_in_check(color)

        if not gen.has_legal_move(color):
            return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE
        return GameStatus.CHECK if in_check else GameStatus.ONGOING

    @staticmethod
    def outcome(status: GameStatus) -> Outcome:
        """Terminal marker matching *status*."""
        if status == GameStatus.CHECKMATE:
            return Outcome.CHECKMATE
        if status == GameStatus.STALEMATE:
            return Outcome.STALEMATE
        return Outcome.NONE
