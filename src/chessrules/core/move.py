"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import MoveFlag
from chessrules.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move.

    Castling moves carry the origin column of the rook that moves with
    the king; every other move leaves ``rook_from_col`` unset.
    """

    from_sq: Square
    to_sq: Square
    flag: MoveFlag = MoveFlag.NORMAL
    rook_from_col: int | None = None

    @property
    def is_castling(self) -> bool:
        return self.flag == MoveFlag.CASTLING

    def __str__(self) -> str:
        (fr, fc), (tr, tc) = self.from_sq, self.to_sq
        base = f"({fr},{fc})->({tr},{tc})"
        if self.is_castling:
            base += " castling"
        return base
