"""Rook: four orthogonal rays."""

from __future__ import annotations

from typing import TYPE_CHECKING

from termchess.core.pieces.rays import ROOK_DIRS, slide, walk_rays

if TYPE_CHECKING:
    from termchess.core.board import Board
    from termchess.core.move import Move
    from termchess.core.types import Coordinate


def legal_destinations(board: Board, from_: Coordinate) -> list[Coordinate]:
    return walk_rays(board, from_, ROOK_DIRS)


def try_move(board: Board, from_: Coordinate, move: Move) -> Board:
    return slide(board, from_, move, ROOK_DIRS)
