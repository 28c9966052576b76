"""Position transitions: play a move on a board and derive the next state."""

from __future__ import annotations

from chesscore.core.board import Board
from chesscore.core.enums import CastlingRights, Color, PieceType
from chesscore.core.legality import apply_move_to_board, legal_moves
from chesscore.core.move import Move
from chesscore.core.piece import Piece
from chesscore.core.state import GameState
from chesscore.core.types import Square, file_of, make_square, rank_of

# Moving from or landing on a corner kills the right tied to it.
_ROOK_CORNERS: dict[Square, CastlingRights] = {
    make_square(0, 0): CastlingRights.WHITE_QUEENSIDE,
    make_square(7, 0): CastlingRights.WHITE_KINGSIDE,
    make_square(0, 7): CastlingRights.BLACK_QUEENSIDE,
    make_square(7, 7): CastlingRights.BLACK_KINGSIDE,
}


def next_state(
    state: GameState, move: Move, piece: Piece, captured: Piece | None
) -> GameState:
    """Game state after *piece* played *move*, capturing *captured*."""
    castling = state.castling
    if piece.piece_type == PieceType.KING:
        castling &= ~CastlingRights.both(piece.color)
    for sq in (move.from_sq, move.to_sq):
        if sq in _ROOK_CORNERS:
            castling &= ~_ROOK_CORNERS[sq]

    en_passant: Square | None = None
    if move.is_double_push:
        en_passant = make_square(
            file_of(move.from_sq),
            (rank_of(move.from_sq) + rank_of(move.to_sq)) // 2,
        )

    if piece.piece_type == PieceType.PAWN or captured is not None:
        halfmove_clock = 0
    else:
        halfmove_clock = state.halfmove_clock + 1

    fullmove_number = state.fullmove_number
    if piece.color == Color.BLACK:
        fullmove_number += 1

    return GameState(
        current_player=state.current_player.opposite,
        castling=castling,
        en_passant=en_passant,
        halfmove_clock=halfmove_clock,
        fullmove_number=fullmove_number,
    )


def make_move(board: Board, state: GameState, move: Move) -> GameState:
    """Play *move* on *board* in place and return the following state.

    *move* must be a generated legal move: its flags drive the side effects.
    """
    piece = board[move.from_sq]
    if piece is None:
        raise ValueError(f"No piece on {move.from_sq}")
    captured = apply_move_to_board(board, move)
    return next_state(state, move, piece, captured)


def perft(board: Board, state: GameState, depth: int) -> int:
    """Count leaf nodes of the legal-move tree at *depth*."""
    if depth == 0:
        return 1
    moves = legal_moves(board, state)
    if depth == 1:
        return len(moves)
    nodes = 0
    for move in moves:
        child = board.copy()
        nodes += perft(child, make_move(child, state, move), depth - 1)
    return nodes
