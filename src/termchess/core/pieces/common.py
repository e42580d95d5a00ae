"""Helpers shared by the per-kind rule modules."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from termchess.core.errors import IllegalMoveError

if TYPE_CHECKING:
    from termchess.core.board import Board
    from termchess.core.move import Move
    from termchess.core.types import Coordinate

DestinationsFn = Callable[["Board", "Coordinate"], "list[Coordinate]"]
TryMoveFn = Callable[["Board", "Coordinate", "Move"], "Board"]


@dataclass(frozen=True, slots=True)
class PieceRules:
    """Destination generator and move executor of one piece kind."""

    legal_destinations: DestinationsFn
    try_move: TryMoveFn


def regular_target(from_: Coordinate, move: Move) -> Coordinate:
    """Destination of a non-pawn move, rejecting promotions and null moves."""
    if move.is_promotion:
        raise IllegalMoveError(f"Only pawns can promote ({from_} → {move})")
    if move.to == from_:
        raise IllegalMoveError(f"Piece on {from_} must leave its tile")
    return move.to


def plain_move(board: Board, from_: Coordinate, to: Coordinate) -> Board:
    """Successor board with the piece on *from_* moved (or capturing) onto *to*."""
    new_board = board.turned()
    new_board.move_tile(from_, to)
    return new_board
