"""Core domain layer - pure chess rules with zero external dependencies.

Quick start::

    from termchess.core import Board, Move, E2, E4, pieces

    board = Board.initial()
    print(pieces.legal_destinations(board, E2))   # [E3, E4]
    board = pieces.try_move(board, E2, Move(E4))
"""

from termchess.core import pieces
from termchess.core.board import Board
from termchess.core.enums import PROMOTION_TYPES, FieldColor, PieceType, Player
from termchess.core.errors import (
    ChessError,
    IllegalMoveError,
    InvalidCommandError,
    IsCheckError,
    PromotionRequired,
)
from termchess.core.move import Move
from termchess.core.piece import Piece
from termchess.core.types import (
    A1, A2, A3, A4, A5, A6, A7, A8,
    B1, B2, B3, B4, B5, B6, B7, B8,
    BOARD_SIZE,
    C1, C2, C3, C4, C5, C6, C7, C8,
    D1, D2, D3, D4, D5, D6, D7, D8,
    E1, E2, E3, E4, E5, E6, E7, E8,
    F1, F2, F3, F4, F5, F6, F7, F8,
    G1, G2, G3, G4, G5, G6, G7, G8,
    H1, H2, H3, H4, H5, H6, H7, H8,
    Coordinate,
    all_coordinates,
)

__all__ = [
    # Enums
    "FieldColor",
    "PieceType",
    "Player",
    "PROMOTION_TYPES",
    # Types / helpers
    "BOARD_SIZE",
    "Coordinate",
    "all_coordinates",
    # Domain objects
    "Board",
    "Move",
    "Piece",
    "pieces",
    # Errors
    "ChessError",
    "IllegalMoveError",
    "InvalidCommandError",
    "IsCheckError",
    "PromotionRequired",
]
