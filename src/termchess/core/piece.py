"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from termchess.core.enums import PieceType, Player

_UNICODE: dict[tuple[Player, PieceType], str] = {
    (Player.WHITE, PieceType.KING): "♔",
    (Player.WHITE, PieceType.QUEEN): "♕",
    (Player.WHITE, PieceType.ROOK): "♖",
    (Player.WHITE, PieceType.BISHOP): "♗",
    (Player.WHITE, PieceType.KNIGHT): "♘",
    (Player.WHITE, PieceType.PAWN): "♙",
    (Player.BLACK, PieceType.KING): "♚",
    (Player.BLACK, PieceType.QUEEN): "♛",
    (Player.BLACK, PieceType.ROOK): "♜",
    (Player.BLACK, PieceType.BISHOP): "♝",
    (Player.BLACK, PieceType.KNIGHT): "♞",
    (Player.BLACK, PieceType.PAWN): "♟",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece on a tile."""

    player: Player
    piece_type: PieceType
    has_moved: bool = False

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Piece letter (uppercase = white, lowercase = black)."""
        letter = self.piece_type.letter
        return letter if self.player == Player.WHITE else letter.lower()

    @classmethod
    def from_char(cls, char: str, has_moved: bool = False) -> Piece:
        """Create piece from a letter, e.g. 'N' → white knight, 'q' → black queen."""
        if len(char) != 1 or not char.isalpha():
            raise ValueError(f"Invalid piece character: {char!r}")
        player = Player.WHITE if char.isupper() else Player.BLACK
        try:
            piece_type = PieceType.from_letter(char.upper())
        except ValueError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(player, piece_type, has_moved)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.player, self.piece_type)]

    # ── Derived pieces ───────────────────────────────────────────────────

    def moved(self) -> Piece:
        """Same piece with the moved flag set."""
        if self.has_moved:
            return self
        return replace(self, has_moved=True)

    def promoted(self, piece_type: PieceType) -> Piece:
        """Same player and moved flag, new kind."""
        return replace(self, piece_type=piece_type)
