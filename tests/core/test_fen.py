"""Tests for FEN parsing and serialization."""

import pytest

from chesscore.core.enums import CastlingRights, Color, PieceType
from chesscore.core.errors import FenErrorReason, FormatError, InvalidFenError
from chesscore.core.notation.fen import STARTING_FEN, parse_fen, to_fen
from chesscore.core.piece import Piece
from chesscore.core.types import E1, E3, E8


class TestFenParsing:
    def test_starting_side(self) -> None:
        _, state = parse_fen(STARTING_FEN)
        assert state.current_player == Color.WHITE

    def test_starting_castling(self) -> None:
        _, state = parse_fen(STARTING_FEN)
        assert state.castling == CastlingRights.ALL

    def test_starting_en_passant(self) -> None:
        _, state = parse_fen(STARTING_FEN)
        assert state.en_passant is None

    def test_starting_clocks(self) -> None:
        _, state = parse_fen(STARTING_FEN)
        assert state.halfmove_clock == 0
        assert state.fullmove_number == 1

    def test_starting_kings(self) -> None:
        board, _ = parse_fen(STARTING_FEN)
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)
        assert board.count() == 32

    def test_en_passant_square(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        _, state = parse_fen(fen)
        assert state.en_passant == E3
        assert state.current_player == Color.BLACK

    def test_no_castling(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w - - 0 1"
        _, state = parse_fen(fen)
        assert state.castling == CastlingRights.NONE

    def test_partial_castling(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w Kq - 0 1"
        _, state = parse_fen(fen)
        assert state.castling == (
            CastlingRights.WHITE_KINGSIDE | CastlingRights.BLACK_QUEENSIDE
        )


ROUND_TRIP_FENS = [
    STARTING_FEN,
    "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1",
    "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1",
    "8/2p5/3p4/KP5r/1R3p1k/8/4P1P1/8 w - - 0 1",
    "rnbq1k1r/pp1Pbppp/2p5/8/2B5/8/PPP1NnPP/RNBQK2R w KQ - 1 8",
    "rnbqkbnr/ppp1p1pp/8/3pPp2/8/8/PPPP1PPP/RNBQKBNR w KQkq f6 0 3",
    "8/8/8/8/8/8/8/K6k b - - 99 250",
    "r3k3/8/8/8/8/8/8/4K2R w Kq - 12 40",
]


class TestFenRoundTrip:
    @pytest.mark.parametrize("fen", ROUND_TRIP_FENS)
    def test_round_trip(self, fen: str) -> None:
        assert to_fen(*parse_fen(fen)) == fen


class TestFenRejection:
    @pytest.mark.parametrize(
        ("fen", "reason"),
        [
            ("", FenErrorReason.FIELD_COUNT),
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq -", FenErrorReason.FIELD_COUNT),
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0", FenErrorReason.FIELD_COUNT),
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1 x", FenErrorReason.FIELD_COUNT),
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR  w KQkq - 0 1", FenErrorReason.FIELD_COUNT),
            ("rnbqkbnx/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1", FenErrorReason.PIECE_CHAR),
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP w KQkq - 0 1", FenErrorReason.BOARD_LAYOUT),
            ("rnbqkbnr/pppppppp/8/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1", FenErrorReason.BOARD_LAYOUT),
            ("rnbqkbnr/ppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1", FenErrorReason.BOARD_LAYOUT),
            ("rnbqkbnr/ppppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1", FenErrorReason.BOARD_LAYOUT),
            ("rnbqkbnr/pppppppp/44/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1", FenErrorReason.BOARD_LAYOUT),
            ("rnbqkbnr/pppppppp/9/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1", FenErrorReason.BOARD_LAYOUT),
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR x KQkq - 0 1", FenErrorReason.SIDE_TO_MOVE),
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w QK - 0 1", FenErrorReason.CASTLING),
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkqK - 0 1", FenErrorReason.CASTLING),
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w X - 0 1", FenErrorReason.CASTLING),
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq z9 0 1", FenErrorReason.EN_PASSANT_TOKEN),
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq e4 0 1", FenErrorReason.EN_PASSANT_TOKEN),
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq e3 0 1", FenErrorReason.EN_PASSANT_TOKEN),
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - -1 1", FenErrorReason.CLOCK),
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 0", FenErrorReason.CLOCK),
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 01 1", FenErrorReason.CLOCK),
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - a 1", FenErrorReason.CLOCK),
            ("rnbq1bnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQ - 0 1", FenErrorReason.KING_COUNT),
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKKNR w kq - 0 1", FenErrorReason.KING_COUNT),
            ("8/8/8/8/8/8/8/8 w - - 0 1", FenErrorReason.KING_COUNT),
        ],
    )
    def test_reason(self, fen: str, reason: FenErrorReason) -> None:
        with pytest.raises(InvalidFenError) as exc_info:
            parse_fen(fen)
        assert exc_info.value.reason == reason
        assert exc_info.value.fen == fen

    def test_message_names_the_problem(self) -> None:
        with pytest.raises(InvalidFenError, match="^Invalid FEN piece char"):
            parse_fen("rnbqkbnx/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1")

    def test_is_a_format_error(self) -> None:
        with pytest.raises(FormatError):
            parse_fen("not a fen")
        with pytest.raises(ValueError):
            parse_fen("not a fen")
