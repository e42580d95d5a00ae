"""Plain-text board rendering with optional ANSI colouring."""

from __future__ import annotations

from collections.abc import Mapping
from enum import IntEnum, auto

from termchess.core.board import Board
from termchess.core.enums import FieldColor
from termchess.core.types import BOARD_SIZE, Coordinate, column_to_name, row_to_name
from termchess.ui.config import TerminalConfig

_RESET = "\x1b[0m"

_FIELD_BACKGROUNDS: dict[FieldColor, str] = {
    FieldColor.WHITE: "\x1b[47m",
    FieldColor.BLACK: "\x1b[100m",
}


class BoardHighlight(IntEnum):
    """Marker painted over a tile while a move is being typed."""

    PRIMARY = auto()  # valid source
    SECONDARY = auto()  # valid destination
    ERROR = auto()

    @property
    def background(self) -> str:
        return _HIGHLIGHT_BACKGROUNDS[self]

    @property
    def foreground(self) -> str:
        return _HIGHLIGHT_FOREGROUNDS[self]

    @property
    def marker(self) -> str:
        """ASCII bracket pair used when colour is disabled."""
        return _HIGHLIGHT_MARKERS[self]


_HIGHLIGHT_BACKGROUNDS: dict[BoardHighlight, str] = {
    BoardHighlight.PRIMARY: "\x1b[42m",
    BoardHighlight.SECONDARY: "\x1b[44m",
    BoardHighlight.ERROR: "\x1b[41m",
}
_HIGHLIGHT_FOREGROUNDS: dict[BoardHighlight, str] = {
    BoardHighlight.PRIMARY: "\x1b[32m",
    BoardHighlight.SECONDARY: "\x1b[34m",
    BoardHighlight.ERROR: "\x1b[31m",
}
_HIGHLIGHT_MARKERS: dict[BoardHighlight, str] = {
    BoardHighlight.PRIMARY: "()",
    BoardHighlight.SECONDARY: "<>",
    BoardHighlight.ERROR: "!!",
}

Highlights = Mapping[Coordinate, BoardHighlight]


def paint(text: str, highlight: BoardHighlight, config: TerminalConfig) -> str:
    """Colour *text* like *highlight* (no-op without colour)."""
    if not config.color:
        return text
    return f"{highlight.foreground}{text}{_RESET}"


def _tile_label(board: Board, coord: Coordinate, config: TerminalConfig) -> str:
    piece = board.get_tile(coord)
    if piece is None:
        return " " if config.color else "."
    if config.unicode_pieces:
        return piece.symbol
    return str(piece)


def _render_tile(
    board: Board,
    coord: Coordinate,
    config: TerminalConfig,
    highlight: BoardHighlight | None,
) -> str:
    label = _tile_label(board, coord, config)
    if config.color:
        background = (
            highlight.background
            if highlight is not None
            else _FIELD_BACKGROUNDS[coord.field_color]
        )
        return f"{background} {label} {_RESET}"
    if highlight is None:
        return f" {label} "
    left, right = highlight.marker
    return f"{left}{label}{right}"


def render_board(
    board: Board,
    config: TerminalConfig,
    highlights: Highlights | None = None,
) -> str:
    """Board as text: row numbers on both sides, column letters above and below.

    White pieces are uppercase letters, Black lowercase (or Unicode glyphs
    when ``config.unicode_pieces``).
    """
    marks = highlights or {}
    columns = "   " + "".join(f" {column_to_name(x)} " for x in range(BOARD_SIZE))
    lines = [columns]
    for y in range(BOARD_SIZE):
        row_name = row_to_name(y)
        tiles = "".join(
            _render_tile(board, Coordinate(x, y), config, marks.get(Coordinate(x, y)))
            for x in range(BOARD_SIZE)
        )
        lines.append(f" {row_name} {tiles} {row_name}")
    lines.append(columns)
    return "\n".join(lines)
