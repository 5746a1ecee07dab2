"""Core enumerations and flags for chess domain."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class MoveFlag(IntEnum):
    """Special move classification."""

    NORMAL = 0
    CASTLING = 1


class HasMoved(IntFlag):
    """Movement history of the pieces that take part in castling.

    A set bit means the piece has left its home square at least once.
    Bits are only ever added during a game.
    """

    NONE = 0
    WHITE_KING = auto()
    WHITE_ROOK_LEFT = auto()
    WHITE_ROOK_RIGHT = auto()
    BLACK_KING = auto()
    BLACK_ROOK_LEFT = auto()
    BLACK_ROOK_RIGHT = auto()

    @classmethod
    def king(cls, color: Color) -> HasMoved:
        return cls.WHITE_KING if color == Color.WHITE else cls.BLACK_KING

    @classmethod
    def rook(cls, color: Color, col: int) -> HasMoved:
        """Flag for *color*'s rook starting on column 0 (left) or 7 (right)."""
        if col == 0:
            return cls.WHITE_ROOK_LEFT if color == Color.WHITE else cls.BLACK_ROOK_LEFT
        if col == 7:
            return (
                cls.WHITE_ROOK_RIGHT if color == Color.WHITE else cls.BLACK_ROOK_RIGHT
            )
        return cls.NONE


class Outcome(IntEnum):
    """Terminal marker of a game."""

    NONE = 0
    CHECKMATE = 1
    STALEMATE = 2


class GameStatus(IntEnum):
    """Classification of the position for the side to move."""

    ONGOING = 0
    CHECK = 1
    CHECKMATE = 2
    STALEMATE = 3

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.CHECKMATE, GameStatus.STALEMATE)
