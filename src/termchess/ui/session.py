"""Line-based terminal session driving a :class:`~termchess.game.Game`.

The session translates intents into game commands and game errors into
messages; it never touches the board directly.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from termchess.core.enums import Player
from termchess.core.errors import (
    IllegalMoveError,
    InvalidCommandError,
    IsCheckError,
)
from termchess.game.controller import Game
from termchess.game.state import Checkmate, SelectingPromotionType, WaitingForMove
from termchess.ui.board_render import BoardHighlight, Highlights, paint, render_board
from termchess.ui.config import TerminalConfig
from termchess.ui.intent import (
    EmptyIntent,
    Intent,
    InvalidIntent,
    MoveIntent,
    PromotionIntent,
    SurrenderIntent,
    parse_intent,
)
from termchess.ui.text import t

_LOGGER = logging.getLogger(__name__)

ReadLine = Callable[[str], str]
WriteText = Callable[[str], None]


class TerminalSession:
    """One game played from a terminal.

    ``message`` holds the reply to the last command; when it is empty the
    status line describes the game state instead.
    """

    __slots__ = ("game", "config", "message", "pending_line", "finished", "winner")

    def __init__(
        self, game: Game | None = None, config: TerminalConfig | None = None
    ) -> None:
        self.game = game if game is not None else Game()
        self.config = config if config is not None else TerminalConfig()
        self.message = ""
        self.pending_line = ""
        self.finished = self.game.is_over
        self.winner: Player | None = (
            self.game.turn.opposite if self.game.is_over else None
        )

    # ── Intent handling ──────────────────────────────────────────────────

    def submit(self, line: str) -> None:
        """Handle one entered line.

        A line that completes the pending partial move is joined to it, so
        "E2" followed by "E4" plays E2-E4.
        """
        intent = parse_intent(line, self.game.state)
        if self.pending_line and line.strip():
            joined = self.pending_line + line
            continued = parse_intent(joined, self.game.state)
            if isinstance(continued, MoveIntent):
                line, intent = joined, continued

        if isinstance(intent, MoveIntent) and intent.complete() is None:
            # Partial move: keep it on screen as highlights only.
            self.pending_line = line
            _, self.message = self.evaluate(intent)
            return

        self.pending_line = ""
        self.message = self.execute(intent)

    def execute(self, intent: Intent) -> str:
        """Run *intent* against the game; returns the message to display."""
        strings = t()
        if isinstance(intent, EmptyIntent):
            return ""
        if isinstance(intent, SurrenderIntent):
            return self._surrender()
        if isinstance(intent, InvalidIntent):
            return strings.invalid_command

        try:
            if isinstance(intent, PromotionIntent):
                self.game.select_promotion(intent.piece_type)
            else:
                coords = intent.complete()
                if coords is None:
                    return strings.invalid_command
                self.game.move_piece(*coords)
        except IsCheckError as exc:
            _LOGGER.info("Rejected %s: %s", intent, exc)
            return strings.move_error_check
        except IllegalMoveError as exc:
            _LOGGER.info("Rejected %s: %s", intent, exc)
            return strings.illegal_move
        except InvalidCommandError as exc:
            _LOGGER.info("Rejected %s: %s", intent, exc)
            if isinstance(intent, PromotionIntent):
                return strings.not_in_promotion_state
            return strings.invalid_command

        if self.game.is_over:
            self.finished = True
            self.winner = self.game.turn.opposite
        return ""

    def evaluate(self, intent: Intent) -> tuple[Highlights, str]:
        """Highlights and hint for a (possibly partial) move intent."""
        if not isinstance(intent, MoveIntent):
            return {}, ""
        strings = t()
        source = intent.from_.to_complete()
        if source is None:
            return {}, ""

        if not self.game.can_move_from(source):
            return {source: BoardHighlight.ERROR}, strings.cannot_move_from_field(
                source.field_name
            )

        highlights = {source: BoardHighlight.PRIMARY}
        target = intent.to.to_complete() if intent.to is not None else None
        if target is None:
            for to in self.game.legal_destinations(source):
                highlights[to] = BoardHighlight.SECONDARY
            return highlights, ""

        if self.game.can_move(source, target):
            highlights[target] = BoardHighlight.SECONDARY
            return highlights, strings.enter_move
        highlights[target] = BoardHighlight.ERROR
        return highlights, strings.cannot_move_between(
            source.field_name, target.field_name
        )

    # ── Display ──────────────────────────────────────────────────────────

    def status_text(self) -> str:
        strings = t()
        if self.message:
            return self.message
        state = self.game.state
        player = self.game.turn.label
        if isinstance(state, Checkmate):
            return strings.checkmate_for(self.game.turn.opposite.label)
        if isinstance(state, SelectingPromotionType):
            return strings.hint_promote
        if isinstance(state, WaitingForMove) and state.in_check:
            return paint(
                strings.turn_in_check(player), BoardHighlight.ERROR, self.config
            )
        return strings.turn(player)

    def render(self) -> str:
        intent = parse_intent(self.pending_line, self.game.state)
        highlights, _ = self.evaluate(intent)
        board = render_board(self.game.board, self.config, highlights)
        return f"{board}\n\n{self.status_text()}"

    # ── Loop ─────────────────────────────────────────────────────────────

    def run(
        self,
        read_line: ReadLine | None = None,
        write: WriteText | None = None,
    ) -> Player | None:
        """Play until checkmate, surrender or end of input; returns the winner.

        Reads with :func:`input` and writes with :func:`print` by default.
        """
        read_line = read_line or input
        write = write or print
        while not self.finished:
            write(self.render())
            try:
                line = read_line(t().prompt_for(self.game.turn.label))
            except (EOFError, KeyboardInterrupt):
                _LOGGER.info("Input closed, leaving the game")
                break
            self.submit(line)
        write(self.render())
        return self.winner

    # ── Internal helpers ─────────────────────────────────────────────────

    def _surrender(self) -> str:
        loser = self.game.turn
        self.finished = True
        self.winner = loser.opposite
        _LOGGER.info("%s surrendered", loser.label)
        return t().surrendered_by(loser.label, loser.opposite.label)
