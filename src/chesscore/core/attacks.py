"""Attack detection: is a square attacked, is a king in check."""

from __future__ import annotations

from chesscore.core.board import Board
from chesscore.core.enums import Color, PieceType
from chesscore.core.generators import (
    BISHOP_DIRECTIONS,
    KING_TARGETS,
    KNIGHT_TARGETS,
    ROOK_DIRECTIONS,
)
from chesscore.core.types import Offset, Square, offset_square

_DIAGONAL_ATTACKERS = (PieceType.BISHOP, PieceType.QUEEN)
_ORTHOGONAL_ATTACKERS = (PieceType.ROOK, PieceType.QUEEN)


def _pawn_sources(sq: Square, by_color: Color) -> list[Square]:
    # A pawn attacks one rank forward, so its attackers sit one rank behind.
    behind = -1 if by_color == Color.WHITE else 1
    sources: list[Square] = []
    for file_delta in (-1, 1):
        src = offset_square(sq, Offset(file_delta, behind))
        if src is not None:
            sources.append(src)
    return sources


def _first_blocker(board: Board, sq: Square, direction: Offset) -> Square | None:
    to_sq = offset_square(sq, direction)
    while to_sq is not None:
        if board[to_sq] is not None:
            return to_sq
        to_sq = offset_square(to_sq, direction)
    return None


def attackers(sq: Square, by_color: Color, board: Board) -> list[Square]:
    """Squares of *by_color* pieces that attack *sq*."""
    found: list[Square] = []

    for src in _pawn_sources(sq, by_color):
        piece = board[src]
        if piece is not None and piece.color == by_color and piece.piece_type == PieceType.PAWN:
            found.append(src)

    for targets, kind in (
        (KNIGHT_TARGETS[sq], PieceType.KNIGHT),
        (KING_TARGETS[sq], PieceType.KING),
    ):
        for src in targets:
            piece = board[src]
            if piece is not None and piece.color == by_color and piece.piece_type == kind:
                found.append(src)

    for directions, kinds in (
        (BISHOP_DIRECTIONS, _DIAGONAL_ATTACKERS),
        (ROOK_DIRECTIONS, _ORTHOGONAL_ATTACKERS),
    ):
        for direction in directions:
            src = _first_blocker(board, sq, direction)
            if src is None:
                continue
            piece = board[src]
            assert piece is not None
            if piece.color == by_color and piece.piece_type in kinds:
                found.append(src)

    return found


def is_square_attacked(sq: Square, by_color: Color, board: Board) -> bool:
    """Is *sq* attacked by any piece of *by_color*?

    Occupancy of *sq* itself is irrelevant: a defended piece and an empty
    square are attacked alike.
    """
    for src in _pawn_sources(sq, by_color):
        piece = board[src]
        if piece is not None and piece.color == by_color and piece.piece_type == PieceType.PAWN:
            return True

    for src in KNIGHT_TARGETS[sq]:
        piece = board[src]
        if piece is not None and piece.color == by_color and piece.piece_type == PieceType.KNIGHT:
            return True

    for src in KING_TARGETS[sq]:
        piece = board[src]
        if piece is not None and piece.color == by_color and piece.piece_type == PieceType.KING:
            return True

    for direction in BISHOP_DIRECTIONS:
        src = _first_blocker(board, sq, direction)
        if src is not None:
            piece = board[src]
            if piece.color == by_color and piece.piece_type in _DIAGONAL_ATTACKERS:  # type: ignore[union-attr]
                return True

    for direction in ROOK_DIRECTIONS:
        src = _first_blocker(board, sq, direction)
        if src is not None:
            piece = board[src]
            if piece.color == by_color and piece.piece_type in _ORTHOGONAL_ATTACKERS:  # type: ignore[union-attr]
                return True

    return False


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked?  A side without a king is never in check."""
    king_sq = board.find_king(color)
    if king_sq is None:
        return False
    return is_square_attacked(king_sq, color.opposite, board)
