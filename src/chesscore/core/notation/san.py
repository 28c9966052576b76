"""SAN (Standard Algebraic Notation) conversion and parsing."""

from __future__ import annotations

import re

from chesscore.core.attacks import is_in_check
from chesscore.core.board import Board
from chesscore.core.enums import PieceType
from chesscore.core.errors import AmbiguousMoveError, FormatError, IllegalMoveError
from chesscore.core.legality import legal_moves
from chesscore.core.move import Move
from chesscore.core.position import make_move
from chesscore.core.state import GameState
from chesscore.core.types import file_of, parse_square, rank_of, square_name

_SAN_PIECE: dict[PieceType, str] = {
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
_SAN_PIECE_REV: dict[str, PieceType] = {v: k for k, v in _SAN_PIECE.items()}

_SAN_RE = re.compile(
    r"(?P<piece>[NBRQK])?"
    r"(?P<file>[a-h])?(?P<rank>[1-8])?"
    r"(?P<capture>x)?"
    r"(?P<to>[a-h][1-8])"
    r"(?:=?(?P<promotion>[NBRQ]))?"
)


def move_to_san(board: Board, state: GameState, move: Move) -> str:
    """Convert a legal *move* to SAN given the position before the move."""
    piece = board[move.from_sq]
    if piece is None:
        raise ValueError(f"No piece on {square_name(move.from_sq)}")

    legal = legal_moves(board, state)

    if move.is_kingside_castle:
        san = "O-O"
    elif move.is_queenside_castle:
        san = "O-O-O"
    else:
        san = ""
        is_capture = board[move.to_sq] is not None or move.is_en_passant

        if piece.piece_type == PieceType.PAWN:
            if is_capture:
                san += chr(ord("a") + file_of(move.from_sq))
        else:
            san += _SAN_PIECE[piece.piece_type]

            # Disambiguation among same-kind pieces reaching the same square
            ambiguous = [
                m
                for m in legal
                if m.to_sq == move.to_sq
                and m.from_sq != move.from_sq
                and board[m.from_sq] == piece
            ]
            if ambiguous:
                same_file = any(
                    file_of(m.from_sq) == file_of(move.from_sq) for m in ambiguous
                )
                same_rank = any(
                    rank_of(m.from_sq) == rank_of(move.from_sq) for m in ambiguous
                )
                if not same_file:
                    san += chr(ord("a") + file_of(move.from_sq))
                elif not same_rank:
                    san += str(rank_of(move.from_sq) + 1)
                else:
                    san += square_name(move.from_sq)

        if is_capture:
            san += "x"

        san += square_name(move.to_sq)

        if move.promotion is not None:
            san += "=" + _SAN_PIECE[move.promotion]

    # Check / checkmate suffix, judged on a scratch copy
    generated = next((m for m in legal if m == move), move)
    scratch = board.copy()
    after = make_move(scratch, state, generated)
    if is_in_check(scratch, after.current_player):
        san += "#" if not legal_moves(scratch, after) else "+"

    return san


def parse_san(board: Board, state: GameState, san: str) -> Move:
    """Parse a SAN string into the matching legal :class:`Move`.

    Raises :class:`FormatError` for text that is not SAN at all,
    :class:`IllegalMoveError` when no legal move matches and
    :class:`AmbiguousMoveError` when several do.
    """
    clean = san.strip().rstrip("+#!?")
    if clean.endswith("e.p."):
        clean = clean[:-4].rstrip()

    legal = legal_moves(board, state)

    # Castling
    if clean in ("O-O", "0-0"):
        for m in legal:
            if m.is_kingside_castle:
                return m
        raise IllegalMoveError(f"Illegal move: {san}")

    if clean in ("O-O-O", "0-0-0"):
        for m in legal:
            if m.is_queenside_castle:
                return m
        raise IllegalMoveError(f"Illegal move: {san}")

    match = _SAN_RE.fullmatch(clean)
    if match is None:
        raise FormatError(f"Invalid SAN: {san!r}")

    piece_type = _SAN_PIECE_REV.get(match["piece"] or "", PieceType.PAWN)
    to_sq = parse_square(match["to"])
    from_file = ord(match["file"]) - ord("a") if match["file"] else None
    from_rank = int(match["rank"]) - 1 if match["rank"] else None
    promotion = _SAN_PIECE_REV[match["promotion"]] if match["promotion"] else None

    # Castling is only ever written O-O or O-O-O.
    candidates: list[Move] = []
    for m in legal:
        if m.is_castling:
            continue
        if match["capture"] and not m.is_capture:
            continue
        p = board[m.from_sq]
        if p is None or p.piece_type != piece_type:
            continue
        if m.to_sq != to_sq:
            continue
        if m.promotion != promotion:
            continue
        if from_file is not None and file_of(m.from_sq) != from_file:
            continue
        if from_rank is not None and rank_of(m.from_sq) != from_rank:
            continue
        candidates.append(m)

    if len(candidates) == 1:
        return candidates[0]
    if not candidates:
        raise IllegalMoveError(f"Illegal move: {san}")
    raise AmbiguousMoveError(
        f"Ambiguous move: {san} → {', '.join(str(m) for m in candidates)}"
    )
