"""Game state machine states.

Exactly one state is active at a time::

    WaitingForMove(in_check) ──move_piece──▶ WaitingForMove / Checkmate
            │                                        ▲
            └─pawn reaches far row─▶ SelectingPromotionType(from_, to)
                                               │
                                               └──select_promotion──┘

``Checkmate`` is terminal.
"""

from __future__ import annotations

from dataclasses import dataclass

from termchess.core.types import Coordinate


@dataclass(frozen=True, slots=True)
class WaitingForMove:
    """The player to move may issue a move; *in_check* is their check flag."""

    in_check: bool = False


@dataclass(frozen=True, slots=True)
class SelectingPromotionType:
    """A pawn move from *from_* to *to* awaits its promotion kind."""

    from_: Coordinate
    to: Coordinate


@dataclass(frozen=True, slots=True)
class Checkmate:
    """The player to move is checkmated; no further moves are accepted."""


GameState = WaitingForMove | SelectingPromotionType | Checkmate
