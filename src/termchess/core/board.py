"""Board - tile contents on an 8x8 grid plus turn and en-passant target."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from termchess.core.enums import PieceType, Player
from termchess.core.piece import Piece
from termchess.core.types import (
    BOARD_MAX_AXIS,
    BOARD_SIZE,
    Coordinate,
    column_to_name,
    row_to_name,
)

Tiles = list[list[Piece | None]]

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def home_row(player: Player) -> int:
    """Row holding *player*'s king and rooks at the start."""
    return BOARD_MAX_AXIS if player == Player.WHITE else 0


def pawn_row(player: Player) -> int:
    """Row holding *player*'s pawns at the start."""
    return BOARD_MAX_AXIS - 1 if player == Player.WHITE else 1


def _is_home_square(piece: Piece, coord: Coordinate) -> bool:
    if piece.piece_type == PieceType.PAWN:
        return coord.y == pawn_row(piece.player)
    if piece.piece_type == PieceType.KING:
        return coord.y == home_row(piece.player) and coord.x == 4
    if piece.piece_type == PieceType.ROOK:
        return coord.y == home_row(piece.player) and coord.x in (0, BOARD_MAX_AXIS)
    return True


class Board:
    """Tile grid, the player to move and the en-passant target.

    The board supplies low-level tile mutators and whole-board check
    predicates; per-piece legality lives in :mod:`termchess.core.pieces`.
    Rules never mutate the board they receive: they call :meth:`turned`
    and write to the fresh copy.

    ``en_passant`` is the tile a pawn landed on after a double step made
    on the immediately preceding turn.
    """

    __slots__ = ("_tiles", "turn", "en_passant")

    def __init__(
        self,
        tiles: Tiles | None = None,
        turn: Player = Player.WHITE,
        en_passant: Coordinate | None = None,
    ) -> None:
        if tiles is None:
            tiles = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        self._tiles: Tiles = tiles
        self.turn = turn
        self.en_passant = en_passant

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, White to move."""
        b = cls()
        for x, pt in enumerate(_BACK_RANK):
            b._tiles[home_row(Player.BLACK)][x] = Piece(Player.BLACK, pt)
            b._tiles[pawn_row(Player.BLACK)][x] = Piece(Player.BLACK, PieceType.PAWN)
            b._tiles[pawn_row(Player.WHITE)][x] = Piece(Player.WHITE, PieceType.PAWN)
            b._tiles[home_row(Player.WHITE)][x] = Piece(Player.WHITE, pt)
        return b

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[str],
        turn: Player = Player.WHITE,
        en_passant: Coordinate | None = None,
    ) -> Board:
        """Build a board from eight 8-character rows, row ``y=0`` first.

        Uppercase letters are White, lowercase Black, ``' '`` or ``'.'`` is
        an empty tile.  Kings, rooks and pawns standing away from their
        starting squares are marked as moved.
        """
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Board needs {BOARD_SIZE} rows, got {len(rows)}")
        b = cls(turn=turn, en_passant=en_passant)
        for y, row in enumerate(rows):
            if len(row) != BOARD_SIZE:
                raise ValueError(f"Invalid row width at row {y}: {row!r}")
            for x, ch in enumerate(row):
                if ch in " .":
                    continue
                coord = Coordinate(x, y)
                piece = Piece.from_char(ch)
                if not _is_home_square(piece, coord):
                    piece = piece.moved()
                b._tiles[y][x] = piece
        return b

    # -- Element access -----------------------------------------------------

    def get_tile(self, coord: Coordinate) -> Piece | None:
        return self._tiles[coord.y][coord.x]

    def __getitem__(self, coord: Coordinate) -> Piece | None:
        return self._tiles[coord.y][coord.x]

    def is_empty(self, coord: Coordinate) -> bool:
        return self._tiles[coord.y][coord.x] is None

    def is_enemy(self, coord: Coordinate) -> bool:
        """Tile holds a piece of the player not to move."""
        piece = self._tiles[coord.y][coord.x]
        return piece is not None and piece.player != self.turn

    def is_friendly(self, coord: Coordinate) -> bool:
        """Tile holds a piece of the player to move."""
        piece = self._tiles[coord.y][coord.x]
        return piece is not None and piece.player == self.turn

    # -- Mutation -----------------------------------------------------------

    def set_tile(self, coord: Coordinate, piece: Piece | None) -> None:
        self._tiles[coord.y][coord.x] = piece

    def clear_tile(self, coord: Coordinate) -> None:
        self._tiles[coord.y][coord.x] = None

    def move_tile(self, from_: Coordinate, to: Coordinate) -> None:
        """Relocate the occupant of *from_* onto *to*, marking it as moved."""
        piece = self._tiles[from_.y][from_.x]
        if piece is None:
            raise ValueError(f"No piece on {from_}")
        self._tiles[from_.y][from_.x] = None
        self._tiles[to.y][to.x] = piece.moved()

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        return Board([row.copy() for row in self._tiles], self.turn, self.en_passant)

    def turned(self) -> Board:
        """Independent successor: turn flipped, en-passant target cleared."""
        return Board([row.copy() for row in self._tiles], self.turn.opposite, None)

    # -- Query helpers ------------------------------------------------------

    def pieces(self, player: Player) -> Iterator[tuple[Coordinate, Piece]]:
        """Every ``(coordinate, piece)`` pair belonging to *player*."""
        for y, row in enumerate(self._tiles):
            for x, piece in enumerate(row):
                if piece is not None and piece.player == player:
                    yield Coordinate(x, y), piece

    def king_coordinate(self, player: Player) -> Coordinate:
        """Return the single king tile of *player*."""
        for coord, piece in self.pieces(player):
            if piece.piece_type == PieceType.KING:
                return coord
        raise ValueError(f"No {player.name} king on board")

    # -- Check detection ----------------------------------------------------

    def is_player_on_check(self, player: Player) -> bool:
        """Can any opposing piece reach *player*'s king by geometry alone?

        Uses pseudo-legal destinations only; filtering those by check
        safety would recurse back into this method.
        """
        from termchess.core import pieces as rules

        king = self.king_coordinate(player)
        attacker_view = self.copy()
        attacker_view.turn = player.opposite
        for coord, _piece in attacker_view.pieces(player.opposite):
            if king in rules.legal_destinations(attacker_view, coord):
                return True
        return False

    def is_current_player_checkmate(self) -> bool:
        """Does every candidate move of the player to move leave them in check?

        Tries each pseudo-legal destination on a fresh board.  Pawn moves
        onto the far row are tried as queen promotions; the promoted kind
        cannot affect the safety of the mover's own king.
        """
        from termchess.core import pieces as rules
        from termchess.core.errors import PromotionRequired
        from termchess.core.move import Move

        mover = self.turn
        for coord, _piece in list(self.pieces(mover)):
            for to in rules.legal_destinations(self, coord):
                try:
                    result = rules.try_move(self, coord, Move.regular(to))
                except PromotionRequired:
                    result = rules.try_move(
                        self, coord, Move.promote(to, PieceType.QUEEN)
                    )
                if not result.is_player_on_check(mover):
                    return False
        return True

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._tiles == other._tiles
            and self.turn == other.turn
            and self.en_passant == other.en_passant
        )

    def __repr__(self) -> str:
        rows: list[str] = []
        for y, tiles in enumerate(self._tiles):
            row = [str(p) if p else "." for p in tiles]
            rows.append(f"{row_to_name(y)} {' '.join(row)}")
        rows.append("  " + " ".join(column_to_name(x) for x in range(BOARD_SIZE)))
        return "\n".join(rows)
