"""Pawn: single and double steps, diagonal and en-passant captures, promotion.

"Forward" is derived from ``board.turn`` so both colours share one
mirrored implementation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from termchess.core.board import home_row, pawn_row
from termchess.core.enums import PROMOTION_TYPES, PieceType, Player
from termchess.core.errors import IllegalMoveError, PromotionRequired
from termchess.core.pieces.common import plain_move

if TYPE_CHECKING:
    from termchess.core.board import Board
    from termchess.core.move import Move
    from termchess.core.types import Coordinate


def forward(player: Player) -> int:
    """Row delta of one step ahead for *player*."""
    return -1 if player == Player.WHITE else 1


def last_row(player: Player) -> int:
    """Row on which *player*'s pawns promote."""
    return home_row(player.opposite)


def _ahead(player: Player, coord: Coordinate, steps: int = 1) -> Coordinate | None:
    return coord.offset(0, forward(player) * steps)


def _is_en_passant(board: Board, to: Coordinate) -> bool:
    """Is *to* the tile skipped by the enemy pawn that just double-stepped?"""
    target = board.en_passant
    if target is None or not board.is_empty(to):
        return False
    victim = board[target]
    if victim is None or victim.player == board.turn or victim.piece_type != PieceType.PAWN:
        return False
    return _ahead(board.turn, target) == to


def legal_destinations(board: Board, from_: Coordinate) -> list[Coordinate]:
    destinations: list[Coordinate] = []
    one_step = _ahead(board.turn, from_)
    if one_step is None:
        return destinations

    # Regular and double step
    if board.is_empty(one_step):
        destinations.append(one_step)
        if from_.y == pawn_row(board.turn):
            two_step = _ahead(board.turn, from_, 2)
            if two_step is not None and board.is_empty(two_step):
                destinations.append(two_step)

    # Regular capture / en passant
    for dx in (-1, 1):
        diagonal = one_step.offset(dx, 0)
        if diagonal is None:
            continue
        if board.is_enemy(diagonal) or _is_en_passant(board, diagonal):
            destinations.append(diagonal)

    return destinations


def try_move(board: Board, from_: Coordinate, move: Move) -> Board:
    to = move.to
    new_board = _execute(board, from_, to)

    if to.y != last_row(board.turn):
        if move.is_promotion:
            raise IllegalMoveError(f"Pawn cannot promote on {to}")
        return new_board

    if move.promotion is None:
        raise PromotionRequired(f"Pawn reaching {to} must promote")
    if move.promotion not in PROMOTION_TYPES:
        raise IllegalMoveError(f"Cannot promote to {move.promotion.name.lower()}")

    landed = new_board[to]
    assert landed is not None
    new_board.set_tile(to, landed.promoted(move.promotion))
    return new_board


def _execute(board: Board, from_: Coordinate, to: Coordinate) -> Board:
    """Geometry and occupancy check, then the resulting board (no promotion)."""
    one_step = _ahead(board.turn, from_)
    if one_step is None:
        raise IllegalMoveError(f"Pawn on {from_} cannot advance")

    # Move
    if to.x == from_.x:
        if not board.is_empty(to):
            raise IllegalMoveError(f"Pawn cannot capture straight ahead on {to}")

        # - Regular move
        if to == one_step:
            return plain_move(board, from_, to)

        # - Double move
        is_double_move = (
            # On starting row
            from_.y == pawn_row(board.turn)
            # No piece in between
            and board.is_empty(one_step)
            # Move is actually a double move
            and _ahead(board.turn, from_, 2) == to
        )
        if is_double_move:
            new_board = plain_move(board, from_, to)
            new_board.en_passant = to
            return new_board

        raise IllegalMoveError(f"Pawn cannot move from {from_} to {to}")

    # Capture
    if abs(to.x - from_.x) == 1 and to.y == one_step.y:
        # - Regular capture
        if board.is_enemy(to):
            return plain_move(board, from_, to)

        # - En passant
        if _is_en_passant(board, to):
            assert board.en_passant is not None
            new_board = plain_move(board, from_, to)
            new_board.clear_tile(board.en_passant)
            return new_board

    raise IllegalMoveError(f"Pawn cannot move from {from_} to {to}")
