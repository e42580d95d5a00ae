"""User-facing strings for the terminal front end.

Usage::

    from termchess.ui.text import t

    print(t().turn("White"))
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Status line ──────────────────────────────────────────────────────
    turn_full: str  # "It is {player}'s turn. ..."
    turn_short: str  # "{player} to move."
    state_check: str
    checkmate: str  # "Checkmate! {winner} wins."
    surrendered: str  # "{loser} surrendered. {winner} wins."
    hint_promote: str
    game_left: str
    enter_move: str

    # ── Errors ───────────────────────────────────────────────────────────
    illegal_move: str
    move_error_check: str
    invalid_command: str
    not_in_promotion_state: str
    cannot_move_from: str  # "You cannot move from {field}"
    cannot_move_full: str  # "You cannot move from {from_} to {to}"

    # ── Labels ───────────────────────────────────────────────────────────
    prompt: str  # "{player}> "

    def turn(self, player: str) -> str:
        return self.turn_full.format(player=player)

    def turn_in_check(self, player: str) -> str:
        return f"{self.state_check} {self.turn_short.format(player=player)}"

    def checkmate_for(self, winner: str) -> str:
        return self.checkmate.format(winner=winner)

    def surrendered_by(self, loser: str, winner: str) -> str:
        return self.surrendered.format(loser=loser, winner=winner)

    def cannot_move_from_field(self, field: str) -> str:
        return self.cannot_move_from.format(field=field)

    def cannot_move_between(self, from_: str, to: str) -> str:
        return self.cannot_move_full.format(from_=from_, to=to)

    def prompt_for(self, player: str) -> str:
        return self.prompt.format(player=player)


ENGLISH = Strings(
    turn_full=(
        "It is {player}'s turn.  Enter D2D3 to move from D2 to D3, "
        "surrender to give up, ^C to exit."
    ),
    turn_short="{player} to move.",
    state_check="Check!",
    checkmate="Checkmate! {winner} wins.",
    surrendered="{loser} surrendered. {winner} wins.",
    hint_promote="Promote the pawn: enter Q, R, B or N.",
    game_left="Game left unfinished.",
    enter_move="Press enter to move",
    illegal_move="Illegal move",
    move_error_check="That move leaves your king in check",
    invalid_command="Invalid command",
    not_in_promotion_state="Not in promotion state",
    cannot_move_from="You cannot move from {field}",
    cannot_move_full="You cannot move from {from_} to {to}",
    prompt="{player}> ",
)

_current: Strings = ENGLISH


def t() -> Strings:
    """Active string table."""
    return _current
