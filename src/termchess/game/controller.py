"""Game - owns the live Board and GameState and keeps them consistent.

All commands are synchronous: each query or move runs to completion,
including the check/checkmate re-evaluation, before returning.
Emits events via simple callbacks so a front end / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from termchess.core import pieces
from termchess.core.board import Board
from termchess.core.enums import PROMOTION_TYPES, PieceType, Player
from termchess.core.errors import (
    ChessError,
    IllegalMoveError,
    InvalidCommandError,
    IsCheckError,
    PromotionRequired,
)
from termchess.core.move import Move
from termchess.core.piece import Piece
from termchess.core.types import Coordinate
from termchess.game.state import (
    Checkmate,
    GameState,
    SelectingPromotionType,
    WaitingForMove,
)

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Coordinate, Coordinate, Board], None]  # from, to, board
StateCallback = Callable[[GameState], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_state_changed: list[StateCallback] = field(default_factory=list)


# ── Game ─────────────────────────────────────────────────────────────────────


class Game:
    """Command/query surface of a single chess game.

    The board is replaced wholesale by every committed move and is never
    mutated in place, so a reference obtained from :attr:`board` stays a
    valid snapshot of that moment.
    """

    __slots__ = ("_board", "_state", "events")

    def __init__(self, board: Board | None = None) -> None:
        self._board = board if board is not None else Board.initial()
        self._state: GameState = self._derive_state(self._board)
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def turn(self) -> Player:
        return self._board.turn

    @property
    def is_over(self) -> bool:
        return isinstance(self._state, Checkmate)

    def get_tile(self, coord: Coordinate) -> Piece | None:
        return self._board.get_tile(coord)

    # ── Queries ──────────────────────────────────────────────────────────

    def can_move_from(self, coord: Coordinate) -> bool:
        """Tile holds a piece of the player to move."""
        piece = self._board.get_tile(coord)
        return piece is not None and piece.player == self._board.turn

    def can_move(self, from_: Coordinate, to: Coordinate) -> bool:
        """Would ``move_piece(from_, to)`` be accepted right now?"""
        if not isinstance(self._state, WaitingForMove):
            return False
        if not self.can_move_from(from_):
            return False
        try:
            self._simulate(from_, Move.regular(to))
        except PromotionRequired:
            return self._any_promotion_safe(from_, to)
        except ChessError:
            return False
        return True

    def legal_destinations(self, from_: Coordinate) -> list[Coordinate]:
        """Destinations of the piece on *from_* that keep its king safe."""
        return [
            to
            for to in pieces.legal_destinations(self._board, from_)
            if self.can_move(from_, to)
        ]

    # ── Commands ─────────────────────────────────────────────────────────

    def move_piece(self, from_: Coordinate, to: Coordinate) -> GameState:
        """Attempt a regular move; returns the new state.

        Raises :class:`IllegalMoveError`, :class:`IsCheckError` or
        :class:`InvalidCommandError`; the game is unchanged on error.
        A pawn reaching the far row switches to
        :class:`SelectingPromotionType` without touching the board.
        """
        if isinstance(self._state, Checkmate):
            raise InvalidCommandError("Game is over")
        if isinstance(self._state, SelectingPromotionType):
            raise InvalidCommandError("A promotion type must be selected first")

        try:
            new_board = self._simulate(from_, Move.regular(to))
        except PromotionRequired:
            if not self._any_promotion_safe(from_, to):
                _LOGGER.debug(
                    "Rejected move %s-%s: no promotion keeps the king safe", from_, to
                )
                raise IsCheckError(
                    f"Moving {from_} to {to} leaves the king in check"
                ) from None
            self._set_state(SelectingPromotionType(from_, to))
            return self._state
        except ChessError as exc:
            _LOGGER.debug("Rejected move %s-%s: %s", from_, to, exc)
            raise

        self._commit(from_, to, new_board)
        return self._state

    def select_promotion(self, piece_type: PieceType) -> GameState:
        """Complete a pending promotion with *piece_type*; returns the new state."""
        state = self._state
        if not isinstance(state, SelectingPromotionType):
            raise InvalidCommandError("Not in promotion state")
        if piece_type not in PROMOTION_TYPES:
            raise IllegalMoveError(
                f"Cannot promote to {piece_type.name.lower()}"
            )

        new_board = self._simulate(state.from_, Move.promote(state.to, piece_type))
        self._commit(state.from_, state.to, new_board)
        return self._state

    # ── Internal helpers ─────────────────────────────────────────────────

    def _simulate(self, from_: Coordinate, move: Move) -> Board:
        """Resulting board of *move*, rejecting moves that expose the mover."""
        mover = self._board.turn
        new_board = pieces.try_move(self._board, from_, move)
        if new_board.is_player_on_check(mover):
            raise IsCheckError(f"Moving {from_} to {move.to} leaves the king in check")
        return new_board

    def _any_promotion_safe(self, from_: Coordinate, to: Coordinate) -> bool:
        # The promoted kind never changes whether the own king is attacked.
        try:
            self._simulate(from_, Move.promote(to, PieceType.QUEEN))
        except ChessError:
            return False
        return True

    def _commit(self, from_: Coordinate, to: Coordinate, new_board: Board) -> None:
        self._board = new_board
        _LOGGER.debug("%s moved %s-%s", new_board.turn.opposite.label, from_, to)
        for cb in self.events.on_move:
            cb(from_, to, new_board)
        self._set_state(self._derive_state(new_board))

    @staticmethod
    def _derive_state(board: Board) -> GameState:
        in_check = board.is_player_on_check(board.turn)
        if in_check and board.is_current_player_checkmate():
            return Checkmate()
        return WaitingForMove(in_check)

    def _set_state(self, state: GameState) -> None:
        self._state = state
        _LOGGER.debug("Game state: %s", state)
        for cb in self.events.on_state_changed:
            cb(state)
