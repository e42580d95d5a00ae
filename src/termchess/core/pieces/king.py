"""King: one step in any direction, plus castling along its home row."""

from __future__ import annotations

from typing import TYPE_CHECKING

from termchess.core.enums import PieceType
from termchess.core.errors import IllegalMoveError
from termchess.core.pieces.common import plain_move, regular_target
from termchess.core.types import BOARD_MAX_AXIS, Coordinate

if TYPE_CHECKING:
    from termchess.core.board import Board
    from termchess.core.move import Move


KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

# Castling side → x of the rook it pairs with.
_ROOK_COLUMNS: dict[int, int] = {-1: 0, 1: BOARD_MAX_AXIS}


def legal_destinations(board: Board, from_: Coordinate) -> list[Coordinate]:
    destinations: list[Coordinate] = []
    for dx, dy in KING_OFFSETS:
        to = from_.offset(dx, dy)
        if to is not None and not board.is_friendly(to):
            destinations.append(to)

    destinations.extend(_castling_destinations(board, from_).values())
    return destinations


def try_move(board: Board, from_: Coordinate, move: Move) -> Board:
    to = regular_target(from_, move)
    if board.is_friendly(to):
        raise IllegalMoveError(f"Cannot capture own piece on {to}")

    if abs(to.x - from_.x) <= 1 and abs(to.y - from_.y) <= 1:
        return plain_move(board, from_, to)

    for side, destination in _castling_destinations(board, from_).items():
        if destination == to:
            return _castle(board, from_, side)

    raise IllegalMoveError(f"King cannot move from {from_} to {to}")


def _castling_rook(board: Board, king: Coordinate, side: int) -> Coordinate | None:
    """Unmoved own rook in the corner on *side*, with only empty tiles between."""
    rook_coord = Coordinate(_ROOK_COLUMNS[side], king.y)
    rook = board[rook_coord]
    if (
        rook is None
        or rook.piece_type != PieceType.ROOK
        or rook.player != board.turn
        or rook.has_moved
    ):
        return None

    x = king.x + side
    while x != rook_coord.x:
        if not board.is_empty(Coordinate(x, king.y)):
            return None
        x += side
    return rook_coord


def _castling_destinations(board: Board, king: Coordinate) -> dict[int, Coordinate]:
    """Castling side (-1 left, +1 right) → king destination."""
    piece = board[king]
    if piece is None or piece.has_moved:
        return {}

    destinations: dict[int, Coordinate] = {}
    for side in _ROOK_COLUMNS:
        rook_coord = _castling_rook(board, king, side)
        # The king must land strictly between its tile and the rook.
        if rook_coord is None or abs(rook_coord.x - king.x) <= 2:
            continue
        destinations[side] = Coordinate(king.x + 2 * side, king.y)
    return destinations


def _castle(board: Board, king: Coordinate, side: int) -> Board:
    """Move king two tiles towards *side* and jump the rook over it."""
    rook_coord = _castling_rook(board, king, side)
    if rook_coord is None:
        raise IllegalMoveError(f"Cannot castle from {king}")

    new_board = board.turned()
    new_board.move_tile(king, Coordinate(king.x + 2 * side, king.y))
    new_board.move_tile(rook_coord, Coordinate(king.x + side, king.y))
    return new_board
