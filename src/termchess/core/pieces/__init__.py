"""Per-kind move rules and the dispatcher over the piece on a tile.

Each kind module exposes the same two pure functions:

``legal_destinations(board, from_)``
    Every destination the piece could reach by geometry and occupancy.
    Own-king safety is *not* checked here; :class:`termchess.game.Game`
    applies that filter once for every kind.

``try_move(board, from_, move)``
    The resulting :class:`~termchess.core.board.Board` (turn flipped), or
    :class:`~termchess.core.errors.IllegalMoveError`.  Pawns additionally
    raise :class:`~termchess.core.errors.PromotionRequired`.

The destinations from the first are exactly those accepted by the second.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from termchess.core.enums import PieceType
from termchess.core.errors import IllegalMoveError
from termchess.core.pieces import bishop, king, knight, pawn, queen, rook
from termchess.core.pieces.common import PieceRules

if TYPE_CHECKING:
    from termchess.core.board import Board
    from termchess.core.move import Move
    from termchess.core.piece import Piece
    from termchess.core.types import Coordinate


RULES: dict[PieceType, PieceRules] = {
    PieceType.KING: PieceRules(king.legal_destinations, king.try_move),
    PieceType.QUEEN: PieceRules(queen.legal_destinations, queen.try_move),
    PieceType.ROOK: PieceRules(rook.legal_destinations, rook.try_move),
    PieceType.BISHOP: PieceRules(bishop.legal_destinations, bishop.try_move),
    PieceType.KNIGHT: PieceRules(knight.legal_destinations, knight.try_move),
    PieceType.PAWN: PieceRules(pawn.legal_destinations, pawn.try_move),
}


def rules_for(piece_type: PieceType) -> PieceRules:
    return RULES[piece_type]


def legal_destinations(board: Board, from_: Coordinate) -> list[Coordinate]:
    """Pseudo-legal destinations of the piece on *from_*.

    Empty for an empty tile or a piece of the player not to move.
    """
    piece = board[from_]
    if piece is None or piece.player != board.turn:
        return []
    return RULES[piece.piece_type].legal_destinations(board, from_)


def try_move(board: Board, from_: Coordinate, move: Move) -> Board:
    """Validate and execute *move* for the piece on *from_*."""
    piece = _mover(board, from_)
    return RULES[piece.piece_type].try_move(board, from_, move)


def _mover(board: Board, from_: Coordinate) -> Piece:
    piece = board[from_]
    if piece is None:
        raise IllegalMoveError(f"No piece on {from_}")
    if piece.player != board.turn:
        raise IllegalMoveError(f"Piece on {from_} belongs to {piece.player.label}")
    return piece


__all__ = [
    "RULES",
    "PieceRules",
    "legal_destinations",
    "rules_for",
    "try_move",
]
