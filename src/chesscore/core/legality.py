"""Pseudo-legal → legal filtering by simulate-and-check."""

from __future__ import annotations

from collections.abc import Iterable

from chesscore.core.attacks import is_in_check, is_square_attacked
from chesscore.core.board import Board
from chesscore.core.enums import PieceType
from chesscore.core.generators import pseudo_legal_moves
from chesscore.core.move import Move
from chesscore.core.piece import Piece
from chesscore.core.state import GameState
from chesscore.core.types import file_of, make_square, rank_of, square_name


def apply_move_to_board(board: Board, move: Move) -> Piece | None:
    """Perform the board side effects of *move* in place.

    Handles capture removal (including the en passant pawn, which does not
    stand on the destination), promotion substitution and the castling rook
    slide.  Returns the captured piece, if any.  Game-state bookkeeping is
    left to the caller.
    """
    piece = board[move.from_sq]
    if piece is None:
        raise ValueError(f"No piece on {square_name(move.from_sq)}")

    if move.is_en_passant:
        captured = board.remove(make_square(file_of(move.to_sq), rank_of(move.from_sq)))
    else:
        captured = board.remove(move.to_sq)

    board.remove(move.from_sq)
    if move.promotion is not None:
        board[move.to_sq] = Piece(piece.color, move.promotion)
    else:
        board[move.to_sq] = piece

    if move.is_castling:
        rank = rank_of(move.from_sq)
        if move.is_kingside_castle:
            rook_from, rook_to = make_square(7, rank), make_square(5, rank)
        else:
            rook_from, rook_to = make_square(0, rank), make_square(3, rank)
        rook = board.remove(rook_from)
        if rook is None or rook.piece_type != PieceType.ROOK:
            raise ValueError(f"No rook on {square_name(rook_from)} to castle with")
        board[rook_to] = rook

    return captured


def _castling_path_is_safe(board: Board, move: Move) -> bool:
    """King's origin, transit and destination squares must all be unattacked."""
    king = board[move.from_sq]
    assert king is not None
    opponent = king.color.opposite
    step = 1 if move.to_sq > move.from_sq else -1
    return not any(
        is_square_attacked(sq, opponent, board)
        for sq in range(move.from_sq, move.to_sq + step, step)
    )


def is_legal_move(board: Board, move: Move) -> bool:
    """Would playing pseudo-legal *move* keep the mover's king safe?"""
    piece = board[move.from_sq]
    if piece is None:
        return False
    if move.is_castling and not _castling_path_is_safe(board, move):
        return False
    scratch = board.copy()
    apply_move_to_board(scratch, move)
    return not is_in_check(scratch, piece.color)


def filter_legal_moves(
    moves: Iterable[Move], board: Board, state: GameState
) -> list[Move]:
    """Keep only moves that do not leave the mover's king attacked.

    Input order is preserved.  *board* is never mutated: each candidate is
    played on its own copy.
    """
    return [move for move in moves if is_legal_move(board, move)]


def legal_moves(board: Board, state: GameState) -> list[Move]:
    """All strictly legal moves for the side to move."""
    return filter_legal_moves(pseudo_legal_moves(board, state), board, state)
