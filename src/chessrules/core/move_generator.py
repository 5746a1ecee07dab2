"""Legal and pseudo-legal move generation + attack detection.

Two generator entry points exist on purpose:

* :meth:`MoveGenerator.pseudo_legal_moves` — full per-piece geometry,
  castling included. Feeds the legality filter.
* :meth:`MoveGenerator.attack_targets` — the same destinations with plain
  king adjacency instead of castling and no self-check filter.
  Used exclusively by the check analyzer, so attack detection never
  re-enters castling generation.
"""

from __future__ import annotations

from typing import Final, NamedTuple

from chessrules.core.board import Board
from chessrules.core.enums import Color, HasMoved, MoveFlag, PieceType
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import ALL_SQUARES, Square, in_bounds

# (d_row, d_col) offsets
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

# Indexed by Color: White advances toward row 0, Black toward row 7.
PAWN_DIRECTION: Final = (-1, 1)
PAWN_START_ROW: Final = (6, 1)
HOME_ROW: Final = (7, 0)
KING_HOME_COL: Final = 4


class CastlingSide(NamedTuple):
    rook_col: int
    king_to_col: int
    rook_to_col: int
    between_cols: tuple[int, ...]
    king_path_cols: tuple[int, ...]


KINGSIDE: Final = CastlingSide(7, 6, 5, (5, 6), (5, 6))
QUEENSIDE: Final = CastlingSide(0, 2, 3, (1, 2, 3), (3, 2))
CASTLING_SIDES: Final = (KINGSIDE, QUEENSIDE)

# King destination column -> rook destination column.
ROOK_DESTINATION_COL: Final = {
    side.king_to_col: side.rook_to_col for side in CASTLING_SIDES
}


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in ALL_SQUARES:
        moves: list[Square] = []
        for dr, dc in offsets:
            if in_bounds(sq.row + dr, sq.col + dc):
                moves.append(sq.offset(dr, dc))
        targets.append(tuple(moves))
    return tuple(targets)


def _build_pawn_attacks() -> tuple[tuple[tuple[Square, ...], ...], ...]:
    per_color: list[tuple[tuple[Square, ...], ...]] = []
    for direction in PAWN_DIRECTION:
        per_color.append(_build_targets(((direction, -1), (direction, 1))))
    return tuple(per_color)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in directions:
            row = sq.row + dr
            col = sq.col + dc
            ray: list[Square] = []
            while in_bounds(row, col):
                ray.append(Square(row, col))
                row += dr
                col += dc
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)
_PAWN_ATTACKS = _build_pawn_attacks()

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)

_SLIDER_RAYS: dict[PieceType, tuple[tuple[tuple[Square, ...], ...], ...]] = {
    PieceType.BISHOP: _BISHOP_RAYS,
    PieceType.ROOK: _ROOK_RAYS,
    PieceType.QUEEN: _QUEEN_RAYS,
}


class MoveGenerator:
    """Generates moves and answers attack queries for a :class:`Board`.

    The legality filter mutates the board to simulate each candidate but
    always restores it before returning.
    """

    __slots__ = ("_board", "_has_moved")

    def __init__(self, board: Board, has_moved: HasMoved = HasMoved.NONE) -> None:
        self._board = board
        self._has_moved = has_moved

    # -- Public API ---------------------------------------------------------

    def legal_moves(self, sq: Square) -> set[Move]:
        """Strictly legal moves of the piece on *sq* (empty if none)."""
        piece = self._board[sq]
        if piece is None:
            return set()
        return {
            move
            for move in self.pseudo_legal_moves(sq)
            if not self._leaves_king_in_check(move, piece.color)
        }

    def all_legal_moves(self, color: Color) -> list[Move]:
        """Legal moves of every piece belonging to *color*."""
        moves: list[Move] = []
        for sq in self._board.pieces(color):
            moves.extend(self.legal_moves(sq))
        return moves

    def has_legal_move(self, color: Color) -> bool:
        return any(self.legal_moves(sq) for sq in self._board.pieces(color))

    def pseudo_legal_moves(self, sq: Square) -> list[Move]:
        """Moves of the piece on *sq* that may leave its own king in check."""
        sq = Square(*sq)
        piece = self._board[sq]
        if piece is None:
            return []

        color = piece.color
        ptype = piece.piece_type
        moves: list[Move] = []
        if ptype == PieceType.PAWN:
            self._gen_pawn(sq, color, moves)
        elif ptype == PieceType.KNIGHT:
            targets = self._step_targets(_KNIGHT_TARGETS, sq, color)
            moves.extend(Move(sq, to_sq) for to_sq in targets)
        elif ptype == PieceType.KING:
            targets = self._step_targets(_KING_TARGETS, sq, color)
            moves.extend(Move(sq, to_sq) for to_sq in targets)
            self._gen_castling(sq, color, moves)
        else:
            targets = self._ray_targets(_SLIDER_RAYS[ptype], sq, color)
            moves.extend(Move(sq, to_sq) for to_sq in targets)
        return moves

    def attack_targets(self, sq: Square) -> list[Square]:
        """Squares attacked by the piece on *sq*.

        Pawns reach their push and capture destinations, kings only their
        neighbours; no castling and no self-check filtering happen here.
        """
        sq = Square(*sq)
        piece = self._board[sq]
        if piece is None:
            return []

        color = piece.color
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            moves: list[Move] = []
            self._gen_pawn(sq, color, moves)
            return [move.to_sq for move in moves]
        if ptype == PieceType.KNIGHT:
            return self._step_targets(_KNIGHT_TARGETS, sq, color)
        if ptype == PieceType.KING:
            return self._step_targets(_KING_TARGETS, sq, color)
        return self._ray_targets(_SLIDER_RAYS[ptype], sq, color)

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?

        A board without a king of *color* is never in check.
        """
        king_sq = self._board.king_square(color)
        if king_sq is None:
            return False
        return self.is_square_attacked(king_sq, color)

    def is_square_attacked(self, sq: Square, color: Color) -> bool:
        """Can any opponent of *color* reach *sq*?"""
        for from_sq, piece in self._board.occupied():
            if piece.color != color and sq in self.attack_targets(from_sq):
                return True
        return False

    # -- Legality filter ----------------------------------------------------

    def _leaves_king_in_check(self, move: Move, color: Color) -> bool:
        # Only the moving piece is relocated; castling rooks stay put.
        board = self._board
        piece = board[move.from_sq]
        captured = board[move.to_sq]
        board[move.to_sq] = piece
        board[move.from_sq] = None
        try:
            return self.is_in_check(color)
        finally:
            board[move.from_sq] = piece
            board[move.to_sq] = captured

    # -- Piece-specific generators (private) -------------------------------

    def _step_targets(
        self,
        table: tuple[tuple[Square, ...], ...],
        sq: Square,
        color: Color,
    ) -> list[Square]:
        board = self._board
        targets: list[Square] = []
        for to_sq in table[sq.flat_index]:
            target = board[to_sq]
            if target is None or target.color != color:
                targets.append(to_sq)
        return targets

    def _ray_targets(
        self,
        rays: tuple[tuple[tuple[Square, ...], ...], ...],
        sq: Square,
        color: Color,
    ) -> list[Square]:
        board = self._board
        targets: list[Square] = []
        for ray in rays[sq.flat_index]:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    targets.append(to_sq)
                    continue
                if target.color != color:
                    targets.append(to_sq)
                break
        return targets

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Move]) -> None:
        board = self._board
        direction = PAWN_DIRECTION[int(color)]

        if in_bounds(sq.row + direction, sq.col):
            one_step = sq.offset(direction, 0)
            if board.is_empty(one_step):
                moves.append(Move(sq, one_step))
                if sq.row == PAWN_START_ROW[int(color)]:
                    two_step = sq.offset(2 * direction, 0)
                    if board.is_empty(two_step):
                        moves.append(Move(sq, two_step))

        for cap_sq in _PAWN_ATTACKS[int(color)][sq.flat_index]:
            target = board[cap_sq]
            if target is not None and target.color != color:
                moves.append(Move(sq, cap_sq))

    def _gen_castling(self, king_sq: Square, color: Color, moves: list[Move]) -> None:
        home_row = HOME_ROW[int(color)]
        if king_sq != Square(home_row, KING_HOME_COL):
            return
        if self._has_moved & HasMoved.king(color):
            return
        if self.is_in_check(color):
            return

        board = self._board
        rook = Piece(color, PieceType.ROOK)
        for side in CASTLING_SIDES:
            if self._has_moved & HasMoved.rook(color, side.rook_col):
                continue
            if board[Square(home_row, side.rook_col)] != rook:
                continue
            if any(not board.is_empty(Square(home_row, c)) for c in side.between_cols):
                continue
            if any(
                self.is_square_attacked(Square(home_row, c), color)
                for c in side.king_path_cols
            ):
                continue
            moves.append(
                Move(
                    king_sq,
                    Square(home_row, side.king_to_col),
                    MoveFlag.CASTLING,
                    side.rook_col,
                )
            )
