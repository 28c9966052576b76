"""FEN parsing and serialization."""

from __future__ import annotations

import re

from chesscore.core.board import Board
from chesscore.core.enums import CastlingRights, Color, PieceType
from chesscore.core.errors import FenErrorReason, FormatError, InvalidFenError
from chesscore.core.piece import Piece
from chesscore.core.state import GameState
from chesscore.core.types import Square, make_square, parse_square, rank_of, square_name

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_ORDER: tuple[tuple[str, CastlingRights], ...] = (
    ("K", CastlingRights.WHITE_KINGSIDE),
    ("Q", CastlingRights.WHITE_QUEENSIDE),
    ("k", CastlingRights.BLACK_KINGSIDE),
    ("q", CastlingRights.BLACK_QUEENSIDE),
)
_CASTLING_RE = re.compile(r"K?Q?k?q?")
# Canonical decimal only, so that parse → serialize reproduces the text.
_CLOCK_RE = re.compile(r"0|[1-9][0-9]*")


def parse_fen(fen: str) -> tuple[Board, GameState]:
    """Parse a FEN string into a board and game state.

    Raises :class:`InvalidFenError` naming the violated rule; nothing is
    returned on failure.
    """
    parts = fen.split(" ")
    if len(parts) != 6:
        raise InvalidFenError(
            FenErrorReason.FIELD_COUNT, f"need 6 fields, got {len(parts)}", fen
        )

    placement, side_part, castling_part, ep_part, half_part, full_part = parts

    board = _parse_placement(placement, fen)

    # Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise InvalidFenError(FenErrorReason.SIDE_TO_MOVE, repr(side_part), fen)

    # Castling
    castling = CastlingRights.NONE
    if castling_part != "-":
        if not castling_part or not _CASTLING_RE.fullmatch(castling_part):
            raise InvalidFenError(FenErrorReason.CASTLING, repr(castling_part), fen)
        for ch, right in _CASTLING_ORDER:
            if ch in castling_part:
                castling |= right

    # En passant
    ep: Square | None = None
    if ep_part != "-":
        try:
            ep = parse_square(ep_part)
        except FormatError:
            raise InvalidFenError(
                FenErrorReason.EN_PASSANT_TOKEN, repr(ep_part), fen
            ) from None
        expected_rank = 5 if side == Color.WHITE else 2
        if rank_of(ep) != expected_rank:
            raise InvalidFenError(
                FenErrorReason.EN_PASSANT_TOKEN,
                f"{ep_part!r} is not on the rank behind a double push",
                fen,
            )

    # Clocks
    if not _CLOCK_RE.fullmatch(half_part):
        raise InvalidFenError(FenErrorReason.CLOCK, f"halfmove {half_part!r}", fen)
    if not _CLOCK_RE.fullmatch(full_part) or int(full_part) < 1:
        raise InvalidFenError(FenErrorReason.CLOCK, f"fullmove {full_part!r}", fen)

    state = GameState(
        current_player=side,
        castling=castling,
        en_passant=ep,
        halfmove_clock=int(half_part),
        fullmove_number=int(full_part),
    )
    return board, state


def _parse_placement(placement: str, fen: str) -> Board:
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise InvalidFenError(
            FenErrorReason.BOARD_LAYOUT, f"need 8 ranks, got {len(ranks)}", fen
        )

    board = Board()
    kings = {Color.WHITE: 0, Color.BLACK: 0}
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        previous_digit = False
        for ch in rank_text:
            if ch in "0123456789":
                step = int(ch)
                if not (1 <= step <= 8) or previous_digit:
                    raise InvalidFenError(
                        FenErrorReason.BOARD_LAYOUT, f"bad empty-run {ch!r}", fen
                    )
                file += step
                previous_digit = True
            else:
                try:
                    piece = Piece.from_char(ch)
                except FormatError:
                    raise InvalidFenError(
                        FenErrorReason.PIECE_CHAR, repr(ch), fen
                    ) from None
                if file >= 8:
                    raise InvalidFenError(
                        FenErrorReason.BOARD_LAYOUT, f"rank {rank + 1} too wide", fen
                    )
                board[make_square(file, rank)] = piece
                if piece.piece_type == PieceType.KING:
                    kings[piece.color] += 1
                file += 1
                previous_digit = False
            if file > 8:
                raise InvalidFenError(
                    FenErrorReason.BOARD_LAYOUT, f"rank {rank + 1} too wide", fen
                )
        if file != 8:
            raise InvalidFenError(
                FenErrorReason.BOARD_LAYOUT, f"rank {rank + 1} too narrow", fen
            )

    for color, count in kings.items():
        if count != 1:
            raise InvalidFenError(
                FenErrorReason.KING_COUNT, f"{count} {color.name} kings", fen
            )
    return board


def to_fen(board: Board, state: GameState) -> str:
    """Serialise a board and game state to FEN."""
    # 1. Board
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = board[make_square(file, rank)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if state.current_player == Color.WHITE else "b"

    # 3. Castling
    castling_str = "".join(ch for ch, right in _CASTLING_ORDER if state.castling & right)
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep_str = square_name(state.en_passant) if state.en_passant is not None else "-"

    return (
        f"{board_str} {side_str} {castling_str} {ep_str} "
        f"{state.halfmove_clock} {state.fullmove_number}"
    )
