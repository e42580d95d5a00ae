"""Terminal front-end configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class TerminalConfig:
    """Immutable rendering and logging options.

    Args:
        color: Paint tiles and highlights with ANSI escapes.
        unicode_pieces: Draw ♔-style glyphs instead of letters.
        log_level: Name of the :mod:`logging` level for stderr output.
    """

    color: bool = True
    unicode_pieces: bool = False
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.log_level!r}")

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None, **overrides: object
    ) -> TerminalConfig:
        """Defaults adjusted by the environment (``NO_COLOR`` disables colour)."""
        env = os.environ if environ is None else environ
        values: dict[str, object] = {"color": "NO_COLOR" not in env}
        values.update(overrides)
        return cls(**values)  # type: ignore[arg-type]
