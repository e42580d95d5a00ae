"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from termchess.core.board import Board
from termchess.core.enums import Player
from termchess.core.types import D5, E4

# Row ``y=0`` (rank 8) first; '.' is an empty tile.
MIXED_ROWS = (
    "........",
    ".p..P.B.",
    "..b.....",
    "P...p...",
    "..k..p..",
    "...K...p",
    ".PPP.PPP",
    "........",
)

CASTLING_ROWS = (
    "r...k..r",
    "pppppppp",
    "........",
    "........",
    "........",
    "........",
    "PPPPPPPP",
    "R...K..R",
)

# White pawn on E5 next to the black pawn that just double-stepped to D5.
EN_PASSANT_ROWS = (
    "....k...",
    "........",
    "........",
    "...pP...",
    "........",
    "........",
    "........",
    "....K...",
)


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()


@pytest.fixture
def mixed_board() -> Board:
    return Board.from_rows(MIXED_ROWS)


@pytest.fixture
def castling_board() -> Board:
    return Board.from_rows(CASTLING_ROWS)


@pytest.fixture
def en_passant_board() -> Board:
    return Board.from_rows(EN_PASSANT_ROWS, turn=Player.WHITE, en_passant=D5)


# Black pawn on D4 next to the white pawn that just double-stepped to E4.
BLACK_EN_PASSANT_ROWS = (
    "....k...",
    "........",
    "........",
    "........",
    "...pP...",
    "........",
    "........",
    "....K...",
)

# Pawns of both colours one step from promotion, with blockers and victims.
PROMOTION_ROWS = (
    ".n..k...",
    "P.P....P",
    "........",
    "........",
    "........",
    "........",
    "p....pp.",
    "....K.N.",
)


def _sample_boards() -> dict[str, Board]:
    return {
        "initial-white": Board.initial(),
        "initial-black": Board.initial().turned(),
        "mixed-white": Board.from_rows(MIXED_ROWS),
        "mixed-black": Board.from_rows(MIXED_ROWS, turn=Player.BLACK),
        "castling-white": Board.from_rows(CASTLING_ROWS),
        "castling-black": Board.from_rows(CASTLING_ROWS, turn=Player.BLACK),
        "en-passant-white": Board.from_rows(EN_PASSANT_ROWS, en_passant=D5),
        "en-passant-black": Board.from_rows(
            BLACK_EN_PASSANT_ROWS, turn=Player.BLACK, en_passant=E4
        ),
        "promotion-white": Board.from_rows(PROMOTION_ROWS),
        "promotion-black": Board.from_rows(PROMOTION_ROWS, turn=Player.BLACK),
    }


@pytest.fixture(params=sorted(_sample_boards()))
def sample_board(request: pytest.FixtureRequest) -> Board:
    """Every sample position, each with both colours to move."""
    return _sample_boards()[request.param]
