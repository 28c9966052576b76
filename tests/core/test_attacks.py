"""Tests for attack and check detection."""

from collections.abc import Callable

from chesscore.core.attacks import attackers, is_in_check, is_square_attacked
from chesscore.core.board import Board
from chesscore.core.enums import Color
from chesscore.core.types import parse_square

BoardFactory = Callable[..., Board]


class TestSquareAttacked:
    def test_pawn_attacks_diagonally_only(self, board_with: BoardFactory) -> None:
        board = board_with(e4="P")
        assert is_square_attacked(parse_square("d5"), Color.WHITE, board)
        assert is_square_attacked(parse_square("f5"), Color.WHITE, board)
        assert not is_square_attacked(parse_square("e5"), Color.WHITE, board)

    def test_black_pawn_attacks_downward(self, board_with: BoardFactory) -> None:
        board = board_with(e5="p")
        assert is_square_attacked(parse_square("d4"), Color.BLACK, board)
        assert not is_square_attacked(parse_square("d6"), Color.BLACK, board)

    def test_knight(self, board_with: BoardFactory) -> None:
        board = board_with(g1="N")
        assert is_square_attacked(parse_square("f3"), Color.WHITE, board)
        assert not is_square_attacked(parse_square("g3"), Color.WHITE, board)

    def test_slider_blocked(self, board_with: BoardFactory) -> None:
        board = board_with(a1="R", a4="p")
        assert is_square_attacked(parse_square("a4"), Color.WHITE, board)
        assert not is_square_attacked(parse_square("a5"), Color.WHITE, board)

    def test_queen_diagonal(self, board_with: BoardFactory) -> None:
        board = board_with(d1="q")
        assert is_square_attacked(parse_square("h5"), Color.BLACK, board)

    def test_king_adjacent(self, board_with: BoardFactory) -> None:
        board = board_with(e8="k")
        assert is_square_attacked(parse_square("d7"), Color.BLACK, board)
        assert not is_square_attacked(parse_square("e6"), Color.BLACK, board)

    def test_color_matters(self, board_with: BoardFactory) -> None:
        board = board_with(a1="R")
        assert not is_square_attacked(parse_square("a5"), Color.BLACK, board)

    def test_attackers_lists_every_source(self, board_with: BoardFactory) -> None:
        board = board_with(e4="p", c3="N", e1="R", a8="B", f4="P")
        found = attackers(parse_square("e4"), Color.WHITE, board)
        assert sorted(found) == sorted(
            [parse_square("c3"), parse_square("e1"), parse_square("a8")]
        )


class TestInCheck:
    def test_rook_check(self, board_with: BoardFactory) -> None:
        board = board_with(e1="K", e8="r")
        assert is_in_check(board, Color.WHITE)
        assert not is_in_check(board, Color.BLACK)

    def test_blocked_check(self, board_with: BoardFactory) -> None:
        board = board_with(e1="K", e4="P", e8="r")
        assert not is_in_check(board, Color.WHITE)

    def test_no_king_never_in_check(self, board_with: BoardFactory) -> None:
        board = board_with(e8="r")
        assert not is_in_check(board, Color.WHITE)

    def test_starting_position(self) -> None:
        board = Board.initial()
        assert not is_in_check(board, Color.WHITE)
        assert not is_in_check(board, Color.BLACK)
