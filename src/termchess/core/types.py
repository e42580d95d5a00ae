"""Board coordinate value object and field-name helpers.

Board layout (row 0 is the far side from White)::

    y=0  A8 B8 C8 D8 E8 F8 G8 H8
    y=1  A7 ...
    ...
    y=7  A1 B1 C1 D1 E1 F1 G1 H1

so ``x`` maps to the column letter and ``y`` to the row number ``8 - y``.
"""

from __future__ import annotations

from dataclasses import dataclass

from termchess.core.enums import FieldColor

BOARD_SIZE = 8
BOARD_MAX_AXIS = BOARD_SIZE - 1

_COLUMNS = "ABCDEFGH"


def column_to_name(x: int) -> str:
    """Column letter, e.g. 0 → 'A'."""
    return _COLUMNS[x]


def row_to_name(y: int) -> str:
    """Row number as text, e.g. 0 → '8', 7 → '1'."""
    return str(BOARD_SIZE - y)


def name_to_column(letter: str) -> int:
    """Inverse of :func:`column_to_name`, case-insensitive."""
    upper = letter.upper()
    if len(upper) != 1 or upper not in _COLUMNS:
        raise ValueError(f"Invalid column: {letter!r}")
    return _COLUMNS.index(upper)


def name_to_row(digit: str) -> int:
    """Inverse of :func:`row_to_name`."""
    if len(digit) != 1 or digit not in "12345678":
        raise ValueError(f"Invalid row: {digit!r}")
    return BOARD_SIZE - int(digit)


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Immutable board coordinate, both axes in ``[0, 7]``."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if not (0 <= self.x < BOARD_SIZE and 0 <= self.y < BOARD_SIZE):
            raise ValueError(f"Coordinate out of range: ({self.x}, {self.y})")

    # ── Construction helpers ─────────────────────────────────────────────

    @classmethod
    def parse(cls, name: str) -> Coordinate:
        """Parse a field name, e.g. 'E2' → Coordinate(4, 6)."""
        if len(name) != 2:
            raise ValueError(f"Invalid field name: {name!r}")
        return cls(name_to_column(name[0]), name_to_row(name[1]))

    @staticmethod
    def is_valid(x: int, y: int) -> bool:
        return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE

    def offset(self, dx: int, dy: int) -> Coordinate | None:
        """Neighbouring coordinate, or ``None`` when it falls off the board."""
        x = self.x + dx
        y = self.y + dy
        if not self.is_valid(x, y):
            return None
        return Coordinate(x, y)

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def field_name(self) -> str:
        return column_to_name(self.x) + row_to_name(self.y)

    @property
    def field_color(self) -> FieldColor:
        return FieldColor.WHITE if (self.x + self.y) % 2 == 0 else FieldColor.BLACK

    def __str__(self) -> str:
        return self.field_name


def all_coordinates() -> list[Coordinate]:
    """Every tile of the board, row by row."""
    return [Coordinate(x, y) for y in range(BOARD_SIZE) for x in range(BOARD_SIZE)]


# ── Named field constants ───────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = (Coordinate(x, 0) for x in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Coordinate(x, 1) for x in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Coordinate(x, 2) for x in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Coordinate(x, 3) for x in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Coordinate(x, 4) for x in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Coordinate(x, 5) for x in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Coordinate(x, 6) for x in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = (Coordinate(x, 7) for x in range(8))
