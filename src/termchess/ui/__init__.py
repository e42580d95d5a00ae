"""Line-based terminal front end: intent parsing, rendering, session loop."""

from termchess.ui.board_render import BoardHighlight, render_board
from termchess.ui.config import TerminalConfig
from termchess.ui.intent import parse_intent
from termchess.ui.session import TerminalSession

__all__ = [
    "BoardHighlight",
    "TerminalConfig",
    "TerminalSession",
    "parse_intent",
    "render_board",
]
