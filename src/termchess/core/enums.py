"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Player(IntEnum):
    """Side to move. White always moves first."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Player:
        return Player(1 - self.value)

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece kinds."""

    KING = 1
    QUEEN = 2
    ROOK = 3
    BISHOP = 4
    KNIGHT = 5
    PAWN = 6

    @property
    def letter(self) -> str:
        return _LETTERS[self]

    @classmethod
    def from_letter(cls, letter: str) -> PieceType:
        """Uppercase piece letter, e.g. 'N' → KNIGHT."""
        try:
            return _FROM_LETTER[letter]
        except KeyError:
            raise ValueError(f"Invalid piece letter: {letter!r}") from None


class FieldColor(IntEnum):
    """Colour of a board tile (light or dark)."""

    WHITE = 0
    BLACK = 1


_LETTERS: dict[PieceType, str] = {
    PieceType.KING: "K",
    PieceType.QUEEN: "Q",
    PieceType.ROOK: "R",
    PieceType.BISHOP: "B",
    PieceType.KNIGHT: "N",
    PieceType.PAWN: "P",
}
_FROM_LETTER: dict[str, PieceType] = {v: k for k, v in _LETTERS.items()}

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
)
