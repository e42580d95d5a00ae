"""Tests for command-line intent parsing."""

import pytest

from termchess.core.enums import PieceType
from termchess.core.types import A7, A8, E2, E4
from termchess.game.state import SelectingPromotionType, WaitingForMove
from termchess.ui.intent import (
    EmptyIntent,
    InvalidIntent,
    MoveIntent,
    PartialCoordinate,
    PromotionIntent,
    SurrenderIntent,
    parse_intent,
)

PROMOTING = SelectingPromotionType(A7, A8)


class TestMoves:
    @pytest.mark.parametrize("line", ["", "   ", "\t"])
    def test_empty(self, line: str) -> None:
        assert parse_intent(line) == EmptyIntent()

    def test_column_only(self) -> None:
        assert parse_intent("E") == MoveIntent(PartialCoordinate(4))

    def test_source_only(self) -> None:
        intent = parse_intent("e2")
        assert intent == MoveIntent(PartialCoordinate(4, 6))
        assert intent.complete() is None

    def test_partial_target(self) -> None:
        intent = parse_intent("E2E")
        assert intent == MoveIntent(PartialCoordinate(4, 6), PartialCoordinate(4))
        assert intent.complete() is None

    @pytest.mark.parametrize("line", ["E2E4", "e2e4", "e2-e4", " E2 E4 "])
    def test_full_move(self, line: str) -> None:
        intent = parse_intent(line, WaitingForMove())
        assert isinstance(intent, MoveIntent)
        assert intent.complete() == (E2, E4)

    @pytest.mark.parametrize("line", ["E9", "E2E4E5", "EE4", "E2X4", "xyz", "K"])
    def test_invalid(self, line: str) -> None:
        assert parse_intent(line) == InvalidIntent()


class TestSurrender:
    @pytest.mark.parametrize("line", ["s", "sur", "SURRENDER", "Surrender"])
    def test_prefixes(self, line: str) -> None:
        assert parse_intent(line) == SurrenderIntent()

    def test_too_long(self) -> None:
        assert parse_intent("surrendered") == InvalidIntent()


class TestPromotion:
    @pytest.mark.parametrize(
        "line,kind",
        [
            ("Q", PieceType.QUEEN),
            ("r", PieceType.ROOK),
            ("N", PieceType.KNIGHT),
            ("b", PieceType.BISHOP),
        ],
    )
    def test_letters(self, line: str, kind: PieceType) -> None:
        assert parse_intent(line, PROMOTING) == PromotionIntent(kind)

    def test_only_while_promoting(self) -> None:
        assert parse_intent("Q") == InvalidIntent()
        assert parse_intent("b") == MoveIntent(PartialCoordinate(1))

    @pytest.mark.parametrize("line", ["K", "P"])
    def test_not_a_promotion_kind(self, line: str) -> None:
        assert parse_intent(line, PROMOTING) == InvalidIntent()

    def test_moves_still_parse(self) -> None:
        intent = parse_intent("E2E4", PROMOTING)
        assert isinstance(intent, MoveIntent)
