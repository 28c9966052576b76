"""Tests for square coordinates and offsets."""

import pytest

from chesscore.core.errors import FormatError
from chesscore.core.types import (
    A1,
    A8,
    B3,
    E4,
    H1,
    H8,
    Offset,
    file_of,
    is_light_square,
    make_square,
    offset_square,
    parse_square,
    rank_of,
    square_name,
)


class TestSquareIndex:
    def test_corners(self) -> None:
        assert A1 == 0
        assert H1 == 7
        assert A8 == 56
        assert H8 == 63

    def test_file_and_rank(self) -> None:
        assert file_of(E4) == 4
        assert rank_of(E4) == 3
        assert make_square(4, 3) == E4

    def test_name_round_trip(self) -> None:
        for sq in range(64):
            assert parse_square(square_name(sq)) == sq

    def test_parse(self) -> None:
        assert parse_square("e4") == E4
        assert square_name(E4) == "e4"

    @pytest.mark.parametrize("text", ["", "e", "e44", "i1", "a0", "a9", "z9", "4e"])
    def test_parse_rejects_malformed(self, text: str) -> None:
        with pytest.raises(FormatError):
            parse_square(text)

    def test_format_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_square("j3")


class TestSquareColor:
    def test_a1_is_dark(self) -> None:
        assert not is_light_square(A1)

    def test_h1_and_a8_are_light(self) -> None:
        assert is_light_square(H1)
        assert is_light_square(A8)


class TestOffset:
    def test_knight_jump(self) -> None:
        assert offset_square(A1, Offset(1, 2)) == B3

    def test_off_the_edge(self) -> None:
        assert offset_square(H1, Offset(1, 0)) is None
        assert offset_square(A1, Offset(0, -1)) is None
        assert offset_square(H8, Offset(0, 1)) is None

    def test_no_file_wrap(self) -> None:
        # h4 + one file must not wrap to a5
        assert offset_square(parse_square("h4"), Offset(1, 0)) is None
