"""Game management layer - the state machine over a single Board.

Quick start::

    from termchess.core import E2, E4
    from termchess.game import Game

    game = Game()
    game.move_piece(E2, E4)
"""

from termchess.game.controller import Game, GameEvents
from termchess.game.state import (
    Checkmate,
    GameState,
    SelectingPromotionType,
    WaitingForMove,
)

__all__ = [
    "Checkmate",
    "Game",
    "GameEvents",
    "GameState",
    "SelectingPromotionType",
    "WaitingForMove",
]
