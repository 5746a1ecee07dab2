"""Square type and coordinate helpers.

Board layout (row-major, as seen from White):
    row 0 = Black's back rank, row 7 = White's back rank
    col 0 = queenside (a-file), col 7 = kingside (h-file)
"""

from __future__ import annotations

from typing import Final, NamedTuple

BOARD_SIZE: Final = 8


class Square(NamedTuple):
    """A (row, col) board coordinate."""

    row: int
    col: int

    @property
    def flat_index(self) -> int:
        """Flat 0–63 index, row-major."""
        return self.row * BOARD_SIZE + self.col

    def offset(self, d_row: int, d_col: int) -> Square:
        return Square(self.row + d_row, self.col + d_col)


def in_bounds(row: int, col: int) -> bool:
    """Whether (*row*, *col*) lies on the board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def square_from_index(index: int) -> Square:
    return Square(index // BOARD_SIZE, index % BOARD_SIZE)


ALL_SQUARES: Final = tuple(square_from_index(i) for i in range(BOARD_SIZE**2))
