"""Move value object: the intended transition of the piece on a source tile."""

from __future__ import annotations

from dataclasses import dataclass

from termchess.core.enums import PieceType
from termchess.core.types import Coordinate


@dataclass(frozen=True, slots=True)
class Move:
    """Regular move to *to*, or a promotion to *to* when *promotion* is set.

    The source tile is not part of the move; rules receive it separately.
    """

    to: Coordinate
    promotion: PieceType | None = None

    @classmethod
    def regular(cls, to: Coordinate) -> Move:
        return cls(to)

    @classmethod
    def promote(cls, to: Coordinate, piece_type: PieceType) -> Move:
        return cls(to, piece_type)

    @property
    def is_promotion(self) -> bool:
        return self.promotion is not None

    def __str__(self) -> str:
        if self.promotion is None:
            return self.to.field_name
        return f"{self.to.field_name}={self.promotion.letter}"
