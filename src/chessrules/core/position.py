"""Position — board plus the side-to-move, castling history and captures."""

from __future__ import annotations

import logging
from typing import Final

from chessrules.core.board import Board
from chessrules.core.enums import Color, HasMoved, PieceType
from chessrules.core.move import Move
from chessrules.core.move_generator import ROOK_DESTINATION_COL, MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.types import Square

_LOGGER = logging.getLogger(__name__)

PROMOTION_PIECE: Final = PieceType.QUEEN
# Indexed by Color: the row a pawn promotes on.
PROMOTION_ROW: Final = (0, 7)


class Position:
    """Mutable game position.

    :meth:`apply_move` commits a move that was produced by the move
    generator; it does not check legality itself.
    """

    __slots__ = ("board", "side_to_move", "has_moved", "captured")

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        has_moved: HasMoved = HasMoved.NONE,
        captured: dict[Color, list[PieceType]] | None = None,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.has_moved = has_moved
        self.captured: dict[Color, list[PieceType]] = (
            captured if captured is not None else {Color.WHITE: [], Color.BLACK: []}
        )

    @property
    def generator(self) -> MoveGenerator:
        """A move generator bound to the current board and history."""
        return MoveGenerator(self.board, self.has_moved)

    # ── Core move operation ──────────────────────────────────────────────

    def apply_move(self, move: Move) -> None:
        """Commit *move* and hand the turn to the opponent."""
        board = self.board
        piece = board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")

        if move.is_castling:
            self._castle(move, piece)
        else:
            captured = board[move.to_sq]
            if captured is not None:
                self.captured[captured.color].append(captured.piece_type)
                _LOGGER.debug("%s captures %s on %s", piece, captured, move.to_sq)

            board[move.to_sq] = piece
            board[move.from_sq] = None

            if (
                piece.piece_type == PieceType.PAWN
                and move.to_sq.row == PROMOTION_ROW[int(piece.color)]
            ):
                board[move.to_sq] = Piece(piece.color, PROMOTION_PIECE)
                _LOGGER.debug("Pawn promoted on %s", move.to_sq)

        self._update_history(move, piece)
        self.side_to_move = self.side_to_move.opposite
        _LOGGER.debug("Applied %s; %s to move", move, self.side_to_move)

    def _castle(self, move: Move, king: Piece) -> None:
        board = self.board
        row = move.to_sq.row
        rook_from = Square(row, move.rook_from_col)
        rook_to = Square(row, ROOK_DESTINATION_COL[move.to_sq.col])
        rook = board[rook_from]

        board[move.to_sq] = king
        board[move.from_sq] = None
        board[rook_to] = rook
        board[rook_from] = None
        _LOGGER.debug("%s castles, rook %s -> %s", king.color, rook_from, rook_to)

    # ── Castling bookkeeping ─────────────────────────────────────────────

    def _update_history(self, move: Move, piece: Piece) -> None:
        if piece.piece_type == PieceType.KING:
            self.has_moved |= HasMoved.king(piece.color)
        elif piece.piece_type == PieceType.ROOK:
            self.has_moved |= HasMoved.rook(piece.color, move.from_sq.col)

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Deep copy of board, history flags and capture lists."""
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            has_moved=self.has_moved,
            captured={color: kinds.copy() for color, kinds in self.captured.items()},
        )
