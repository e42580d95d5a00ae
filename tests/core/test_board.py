"""Tests for Board construction, tile access and check detection."""

import pytest

from termchess.core.board import Board, home_row, pawn_row
from termchess.core.enums import PieceType, Player
from termchess.core.piece import Piece
from termchess.core.types import (
    A1,
    A8,
    D1,
    D2,
    D8,
    E1,
    E2,
    E4,
    E8,
    H8,
    all_coordinates,
)


class TestInitial:
    def test_piece_count(self, initial_board: Board) -> None:
        assert len(list(initial_board.pieces(Player.WHITE))) == 16
        assert len(list(initial_board.pieces(Player.BLACK))) == 16

    def test_back_ranks(self, initial_board: Board) -> None:
        assert initial_board[A1] == Piece(Player.WHITE, PieceType.ROOK)
        assert initial_board[D1] == Piece(Player.WHITE, PieceType.QUEEN)
        assert initial_board[E1] == Piece(Player.WHITE, PieceType.KING)
        assert initial_board[D8] == Piece(Player.BLACK, PieceType.QUEEN)
        assert initial_board[E8] == Piece(Player.BLACK, PieceType.KING)
        assert initial_board[H8] == Piece(Player.BLACK, PieceType.ROOK)

    def test_nothing_has_moved(self, initial_board: Board) -> None:
        for player in Player:
            assert all(not p.has_moved for _, p in initial_board.pieces(player))

    def test_white_to_move(self, initial_board: Board) -> None:
        assert initial_board.turn == Player.WHITE
        assert initial_board.en_passant is None

    def test_rows(self) -> None:
        assert home_row(Player.WHITE) == 7
        assert home_row(Player.BLACK) == 0
        assert pawn_row(Player.WHITE) == 6
        assert pawn_row(Player.BLACK) == 1


class TestFromRows:
    def test_matches_initial(self, initial_board: Board) -> None:
        rows = (
            "rnbqkbnr",
            "pppppppp",
            "        ",
            "        ",
            "        ",
            "        ",
            "PPPPPPPP",
            "RNBQKBNR",
        )
        assert Board.from_rows(rows) == initial_board

    def test_off_home_pieces_are_moved(self) -> None:
        rows = ("k.......", "........", "........", "........",
                "....P...", "........", "........", "R...K...")
        board = Board.from_rows(rows)
        assert board[E4] == Piece(Player.WHITE, PieceType.PAWN, has_moved=True)
        assert board[A8] == Piece(Player.BLACK, PieceType.KING, has_moved=True)
        assert not board[E1].has_moved
        assert not board[A1].has_moved

    def test_wrong_row_count(self) -> None:
        with pytest.raises(ValueError):
            Board.from_rows(("........",) * 7)

    def test_wrong_row_width(self) -> None:
        with pytest.raises(ValueError):
            Board.from_rows(("........",) * 7 + (".......",))

    def test_unknown_letter(self) -> None:
        with pytest.raises(ValueError):
            Board.from_rows(("........",) * 7 + ("...X....",))


class TestTiles:
    def test_friendly_and_enemy_follow_turn(self, initial_board: Board) -> None:
        assert initial_board.is_friendly(E2)
        assert initial_board.is_enemy(E8)
        black = initial_board.turned()
        assert black.is_enemy(E2)
        assert black.is_friendly(E8)
        assert not black.is_enemy(E4)
        assert black.is_empty(E4)

    def test_move_tile_marks_moved(self, initial_board: Board) -> None:
        board = initial_board.copy()
        board.move_tile(E2, E4)
        assert board.is_empty(E2)
        assert board[E4] == Piece(Player.WHITE, PieceType.PAWN, has_moved=True)

    def test_move_tile_from_empty(self, initial_board: Board) -> None:
        with pytest.raises(ValueError):
            initial_board.copy().move_tile(E4, E2)

    def test_copy_is_independent(self, initial_board: Board) -> None:
        board = initial_board.copy()
        board.clear_tile(D2)
        assert initial_board[D2] is not None
        assert board != initial_board

    def test_turned(self) -> None:
        board = Board.initial()
        board.en_passant = E4
        turned = board.turned()
        assert turned.turn == Player.BLACK
        assert turned.en_passant is None
        assert board.turn == Player.WHITE
        assert board.en_passant == E4

    def test_king_coordinate(self, initial_board: Board) -> None:
        assert initial_board.king_coordinate(Player.WHITE) == E1
        assert initial_board.king_coordinate(Player.BLACK) == E8

    def test_king_coordinate_missing(self) -> None:
        with pytest.raises(ValueError):
            Board().king_coordinate(Player.WHITE)

    def test_repr_lists_every_row(self, initial_board: Board) -> None:
        text = repr(initial_board)
        assert text.splitlines()[0] == "8 r n b q k b n r"
        assert text.splitlines()[-1] == "  A B C D E F G H"


class TestCheck:
    def test_initial_not_in_check(self, initial_board: Board) -> None:
        assert not initial_board.is_player_on_check(Player.WHITE)
        assert not initial_board.is_player_on_check(Player.BLACK)

    def test_rook_gives_check_regardless_of_turn(self) -> None:
        rows = ("....k...", "........", "........", "........",
                "........", "........", "........", "K...R...")
        for turn in Player:
            board = Board.from_rows(rows, turn=turn)
            assert board.is_player_on_check(Player.BLACK)
            assert not board.is_player_on_check(Player.WHITE)

    def test_blocked_ray_is_no_check(self) -> None:
        rows = ("....k...", "....n...", "........", "........",
                "........", "........", "........", "K...R...")
        board = Board.from_rows(rows, turn=Player.BLACK)
        assert not board.is_player_on_check(Player.BLACK)

    def test_pawn_attacks_diagonally(self) -> None:
        rows = ("........", "........", "........", "...k....",
                "....P...", "...P....", "........", "K.......")
        board = Board.from_rows(rows, turn=Player.BLACK)
        assert board.is_player_on_check(Player.BLACK)

    def test_back_rank_mate(self) -> None:
        rows = ("R..k....", "........", "...K....", "........",
                "........", "........", "........", "........")
        board = Board.from_rows(rows, turn=Player.BLACK)
        assert board.is_player_on_check(Player.BLACK)
        assert board.is_current_player_checkmate()

    def test_check_with_escape_is_not_mate(self) -> None:
        rows = ("R...k...", "........", "........", "........",
                "........", "........", "........", "....K...")
        board = Board.from_rows(rows, turn=Player.BLACK)
        assert board.is_player_on_check(Player.BLACK)
        assert not board.is_current_player_checkmate()

    def test_initial_is_not_mate(self, initial_board: Board) -> None:
        assert not initial_board.is_current_player_checkmate()
        assert not initial_board.turned().is_current_player_checkmate()

    def test_stalemate_has_no_safe_move(self) -> None:
        rows = (".......k", "........", ".....KQ.", "........",
                "........", "........", "........", "........")
        board = Board.from_rows(rows, turn=Player.BLACK)
        assert not board.is_player_on_check(Player.BLACK)
        assert board.is_current_player_checkmate()

    def test_mate_search_leaves_board_untouched(self) -> None:
        rows = ("R..k....", "........", "...K....", "........",
                "........", "........", "........", "........")
        board = Board.from_rows(rows, turn=Player.BLACK)
        snapshot = board.copy()
        board.is_current_player_checkmate()
        assert board == snapshot

    def test_initial_occupancy(self, initial_board: Board) -> None:
        assert sum(1 for c in all_coordinates() if initial_board[c]) == 32
