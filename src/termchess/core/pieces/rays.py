"""Ray walking shared by the sliding pieces (bishop, rook, queen)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from termchess.core.errors import IllegalMoveError
from termchess.core.pieces.common import plain_move, regular_target

if TYPE_CHECKING:
    from termchess.core.board import Board
    from termchess.core.move import Move
    from termchess.core.types import Coordinate

Direction = tuple[int, int]

BISHOP_DIRS: tuple[Direction, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[Direction, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[Direction, ...] = BISHOP_DIRS + ROOK_DIRS


def walk_rays(
    board: Board,
    from_: Coordinate,
    directions: tuple[Direction, ...],
) -> list[Coordinate]:
    """Tiles reachable along *directions* up to the first occupied tile.

    The blocking tile is included only when it holds an enemy piece.
    """
    destinations: list[Coordinate] = []
    for dx, dy in directions:
        to = from_.offset(dx, dy)
        while to is not None:
            if board.is_empty(to):
                destinations.append(to)
                to = to.offset(dx, dy)
                continue
            if board.is_enemy(to):
                destinations.append(to)
            break
    return destinations


def direction_between(from_: Coordinate, to: Coordinate) -> Direction | None:
    """Unit step from *from_* towards *to* when both share a line or diagonal."""
    dx = to.x - from_.x
    dy = to.y - from_.y
    if dx == 0 and dy == 0:
        return None
    if dx != 0 and dy != 0 and abs(dx) != abs(dy):
        return None
    return ((dx > 0) - (dx < 0), (dy > 0) - (dy < 0))


def is_path_clear(board: Board, from_: Coordinate, to: Coordinate) -> bool:
    """No piece stands strictly between *from_* and *to* (same ray assumed)."""
    step = direction_between(from_, to)
    if step is None:
        return False
    tile = from_.offset(*step)
    while tile is not None and tile != to:
        if not board.is_empty(tile):
            return False
        tile = tile.offset(*step)
    return True


def slide(
    board: Board,
    from_: Coordinate,
    move: Move,
    directions: tuple[Direction, ...],
) -> Board:
    """Execute a sliding move along one of *directions*."""
    to = regular_target(from_, move)
    if board.is_friendly(to):
        raise IllegalMoveError(f"Cannot capture own piece on {to}")
    if direction_between(from_, to) not in directions:
        raise IllegalMoveError(f"{to} is not on a ray from {from_}")
    if not is_path_clear(board, from_, to):
        raise IllegalMoveError(f"Path from {from_} to {to} is blocked")
    return plain_move(board, from_, to)
