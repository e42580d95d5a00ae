"""Parsing of (possibly partial) command lines into intents.

The front end re-parses the line after every edit so partially typed
moves can already be highlighted:

    ""        → EmptyIntent
    "E"       → MoveIntent(PartialCoordinate(x=4), None)
    "E2E4"    → MoveIntent(E2, E4)
    "sur"     → SurrenderIntent
    "Q"       → PromotionIntent(QUEEN)    (only while promoting)
"""

from __future__ import annotations

from dataclasses import dataclass

from termchess.core.enums import PROMOTION_TYPES, PieceType
from termchess.core.types import Coordinate, name_to_column, name_to_row
from termchess.game.state import GameState, SelectingPromotionType

SURRENDER_COMMAND = "surrender"

_IGNORED = " -"


@dataclass(frozen=True, slots=True)
class PartialCoordinate:
    """Coordinate whose axes may still be missing while typing."""

    x: int | None = None
    y: int | None = None

    def to_complete(self) -> Coordinate | None:
        if self.x is None or self.y is None:
            return None
        return Coordinate(self.x, self.y)


@dataclass(frozen=True, slots=True)
class MoveIntent:
    from_: PartialCoordinate
    to: PartialCoordinate | None = None

    def complete(self) -> tuple[Coordinate, Coordinate] | None:
        """Both coordinates, when fully typed."""
        from_ = self.from_.to_complete()
        to = self.to.to_complete() if self.to is not None else None
        if from_ is None or to is None:
            return None
        return from_, to


@dataclass(frozen=True, slots=True)
class PromotionIntent:
    piece_type: PieceType


@dataclass(frozen=True, slots=True)
class SurrenderIntent:
    pass


@dataclass(frozen=True, slots=True)
class EmptyIntent:
    pass


@dataclass(frozen=True, slots=True)
class InvalidIntent:
    pass


Intent = MoveIntent | PromotionIntent | SurrenderIntent | EmptyIntent | InvalidIntent


def parse_intent(line: str, state: GameState | None = None) -> Intent:
    """Interpret *line* in the context of the current game *state*."""
    command = line.strip()
    if not command:
        return EmptyIntent()

    if isinstance(state, SelectingPromotionType):
        promotion = _parse_promotion(command)
        if promotion is not None:
            return promotion

    try:
        move = _parse_move(command)
    except ValueError:
        move = None
    if move is not None:
        return move

    if SURRENDER_COMMAND.startswith(command.lower()):
        return SurrenderIntent()

    return InvalidIntent()


def _parse_promotion(command: str) -> PromotionIntent | None:
    if len(command) != 1:
        return None
    try:
        piece_type = PieceType.from_letter(command.upper())
    except ValueError:
        return None
    if piece_type not in PROMOTION_TYPES:
        return None
    return PromotionIntent(piece_type)


def _parse_move(command: str) -> MoveIntent | None:
    """Move intent, ``None`` when *command* does not start like a move.

    Raises ``ValueError`` for text that starts like a move but is malformed.
    """
    chars = [ch for ch in command if ch not in _IGNORED]
    if not chars:
        return None

    try:
        name_to_column(chars[0])
    except ValueError:
        return None

    first, rest = _take_coordinate(chars)
    if not rest:
        return MoveIntent(first)
    if first.y is None:
        raise ValueError(f"Incomplete source field in {command!r}")

    second, rest = _take_coordinate(rest)
    if rest:
        raise ValueError(f"Trailing characters in {command!r}")
    return MoveIntent(first, second)


def _take_coordinate(chars: list[str]) -> tuple[PartialCoordinate, list[str]]:
    x = name_to_column(chars[0])
    if len(chars) == 1:
        return PartialCoordinate(x), []
    return PartialCoordinate(x, name_to_row(chars[1])), chars[2:]
