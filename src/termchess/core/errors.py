"""Exceptions raised by the rules engine and the game state machine."""

from __future__ import annotations


class ChessError(Exception):
    """Base class for every move or command rejection."""


class IllegalMoveError(ChessError):
    """The move breaks the piece's geometry or occupancy rule."""


class IsCheckError(ChessError):
    """The move is otherwise legal but leaves the mover's own king in check."""


class PromotionRequired(ChessError):
    """A pawn reached the far row without a promotion kind.

    Not a user-facing failure: the game switches to promotion selection.
    """


class InvalidCommandError(ChessError):
    """The command does not match the active game state."""
