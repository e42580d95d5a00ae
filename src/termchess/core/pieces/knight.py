"""Knight: eight fixed leaps, jumping over anything in between."""

from __future__ import annotations

from typing import TYPE_CHECKING

from termchess.core.errors import IllegalMoveError
from termchess.core.pieces.common import plain_move, regular_target

if TYPE_CHECKING:
    from termchess.core.board import Board
    from termchess.core.move import Move
    from termchess.core.types import Coordinate


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


def legal_destinations(board: Board, from_: Coordinate) -> list[Coordinate]:
    destinations: list[Coordinate] = []
    for dx, dy in KNIGHT_OFFSETS:
        to = from_.offset(dx, dy)
        if to is not None and not board.is_friendly(to):
            destinations.append(to)
    return destinations


def try_move(board: Board, from_: Coordinate, move: Move) -> Board:
    to = regular_target(from_, move)
    if (to.x - from_.x, to.y - from_.y) not in KNIGHT_OFFSETS:
        raise IllegalMoveError(f"Knight cannot leap from {from_} to {to}")
    if board.is_friendly(to):
        raise IllegalMoveError(f"Cannot capture own piece on {to}")
    return plain_move(board, from_, to)
