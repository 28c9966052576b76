"""Pseudo-legal move generation, one pure function per piece kind.

Generators only know about piece movement and occupancy.  Whether the
mover's king ends up attacked (including castling out of, through or into
check) is decided by :mod:`chesscore.core.legality`.
"""

from __future__ import annotations

from collections.abc import Callable

from chesscore.core.board import Board
from chesscore.core.enums import Color, MoveFlag, PieceType
from chesscore.core.move import Move
from chesscore.core.piece import Piece
from chesscore.core.state import GameState
from chesscore.core.types import (
    Offset,
    Square,
    file_of,
    make_square,
    offset_square,
    rank_of,
    square_name,
)

MoveGeneratorFn = Callable[[Piece, Square, Board, GameState], list[Move]]

KNIGHT_OFFSETS: tuple[Offset, ...] = (
    Offset(-2, -1),
    Offset(-2, 1),
    Offset(-1, -2),
    Offset(-1, 2),
    Offset(1, -2),
    Offset(1, 2),
    Offset(2, -1),
    Offset(2, 1),
)

KING_OFFSETS: tuple[Offset, ...] = (
    Offset(-1, -1),
    Offset(-1, 0),
    Offset(-1, 1),
    Offset(0, -1),
    Offset(0, 1),
    Offset(1, -1),
    Offset(1, 0),
    Offset(1, 1),
)

BISHOP_DIRECTIONS: tuple[Offset, ...] = (
    Offset(-1, -1),
    Offset(-1, 1),
    Offset(1, -1),
    Offset(1, 1),
)
ROOK_DIRECTIONS: tuple[Offset, ...] = (
    Offset(-1, 0),
    Offset(1, 0),
    Offset(0, -1),
    Offset(0, 1),
)
QUEEN_DIRECTIONS: tuple[Offset, ...] = BISHOP_DIRECTIONS + ROOK_DIRECTIONS

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

# Home squares used by castling, per color.
KING_HOME: dict[Color, Square] = {
    Color.WHITE: make_square(4, 0),
    Color.BLACK: make_square(4, 7),
}


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(offsets: tuple[Offset, ...]) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(64):
        moves: list[Square] = []
        for offset in offsets:
            to_sq = offset_square(sq, offset)
            if to_sq is not None:
                moves.append(to_sq)
        targets.append(tuple(moves))
    return tuple(targets)


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)


# -- Helpers ----------------------------------------------------------------


def _require(piece: Piece, from_sq: Square, board: Board, kind: PieceType) -> None:
    if piece.piece_type != kind:
        raise ValueError(f"{kind.name} generator called with {piece.piece_type.name}")
    if board[from_sq] != piece:
        raise ValueError(f"{piece!s} does not stand on {square_name(from_sq)}")


def _step_moves(
    piece: Piece,
    from_sq: Square,
    board: Board,
    targets: tuple[Square, ...],
) -> list[Move]:
    moves: list[Move] = []
    for to_sq in targets:
        target = board[to_sq]
        if target is None:
            moves.append(Move(from_sq, to_sq))
        elif target.color != piece.color:
            moves.append(Move(from_sq, to_sq, is_capture=True))
    return moves


def slide(
    piece: Piece,
    from_sq: Square,
    board: Board,
    directions: tuple[Offset, ...],
) -> list[Move]:
    """Walk each direction until the edge or the first blocker.

    A friendly blocker is excluded, an enemy blocker is included as a capture.
    """
    moves: list[Move] = []
    for direction in directions:
        to_sq = offset_square(from_sq, direction)
        while to_sq is not None:
            target = board[to_sq]
            if target is None:
                moves.append(Move(from_sq, to_sq))
            else:
                if target.color != piece.color:
                    moves.append(Move(from_sq, to_sq, is_capture=True))
                break
            to_sq = offset_square(to_sq, direction)
    return moves


# -- Per-piece generators ---------------------------------------------------


def _append_pawn_advance(
    moves: list[Move],
    from_sq: Square,
    to_sq: Square,
    promotion_rank: int,
    is_capture: bool,
) -> None:
    if rank_of(to_sq) == promotion_rank:
        for pt in PROMOTION_TYPES:
            moves.append(Move(from_sq, to_sq, pt, MoveFlag.PROMOTION, is_capture))
    else:
        moves.append(Move(from_sq, to_sq, is_capture=is_capture))


def pawn_moves(
    piece: Piece, from_sq: Square, board: Board, state: GameState
) -> list[Move]:
    _require(piece, from_sq, board, PieceType.PAWN)
    color = piece.color
    forward = 1 if color == Color.WHITE else -1
    start_rank = 1 if color == Color.WHITE else 6
    promotion_rank = 7 if color == Color.WHITE else 0
    moves: list[Move] = []

    one_step = offset_square(from_sq, Offset(0, forward))
    if one_step is not None and board.is_empty(one_step):
        _append_pawn_advance(moves, from_sq, one_step, promotion_rank, False)
        if rank_of(from_sq) == start_rank:
            two_step = make_square(file_of(from_sq), start_rank + 2 * forward)
            if board.is_empty(two_step):
                moves.append(Move(from_sq, two_step, flag=MoveFlag.DOUBLE_PAWN))

    for file_delta in (-1, 1):
        cap_sq = offset_square(from_sq, Offset(file_delta, forward))
        if cap_sq is None:
            continue
        target = board[cap_sq]
        if target is not None:
            if target.color != color:
                _append_pawn_advance(moves, from_sq, cap_sq, promotion_rank, True)
        elif cap_sq == state.en_passant:
            # The double-pushed pawn sits beside us, behind the target square.
            victim_sq = make_square(file_of(cap_sq), rank_of(from_sq))
            if board[victim_sq] == Piece(color.opposite, PieceType.PAWN):
                moves.append(
                    Move(from_sq, cap_sq, flag=MoveFlag.EN_PASSANT, is_capture=True)
                )
    return moves


def knight_moves(
    piece: Piece, from_sq: Square, board: Board, state: GameState
) -> list[Move]:
    _require(piece, from_sq, board, PieceType.KNIGHT)
    return _step_moves(piece, from_sq, board, KNIGHT_TARGETS[from_sq])


def bishop_moves(
    piece: Piece, from_sq: Square, board: Board, state: GameState
) -> list[Move]:
    _require(piece, from_sq, board, PieceType.BISHOP)
    return slide(piece, from_sq, board, BISHOP_DIRECTIONS)


def rook_moves(
    piece: Piece, from_sq: Square, board: Board, state: GameState
) -> list[Move]:
    _require(piece, from_sq, board, PieceType.ROOK)
    return slide(piece, from_sq, board, ROOK_DIRECTIONS)


def queen_moves(
    piece: Piece, from_sq: Square, board: Board, state: GameState
) -> list[Move]:
    _require(piece, from_sq, board, PieceType.QUEEN)
    return slide(piece, from_sq, board, QUEEN_DIRECTIONS)


def king_moves(
    piece: Piece, from_sq: Square, board: Board, state: GameState
) -> list[Move]:
    """Adjacent steps plus castling moves allowed by rights and empty squares."""
    _require(piece, from_sq, board, PieceType.KING)
    moves = _step_moves(piece, from_sq, board, KING_TARGETS[from_sq])
    moves.extend(_castling_moves(piece, from_sq, board, state))
    return moves


def _castling_moves(
    piece: Piece, from_sq: Square, board: Board, state: GameState
) -> list[Move]:
    color = piece.color
    if from_sq != KING_HOME[color]:
        return []

    back_rank = rank_of(from_sq)
    rook = Piece(color, PieceType.ROOK)
    moves: list[Move] = []

    if state.can_castle(color, kingside=True):
        between = (make_square(5, back_rank), make_square(6, back_rank))
        if board[make_square(7, back_rank)] == rook and all(
            board.is_empty(sq) for sq in between
        ):
            moves.append(
                Move(from_sq, make_square(6, back_rank), flag=MoveFlag.CASTLE_KINGSIDE)
            )

    if state.can_castle(color, kingside=False):
        between = (
            make_square(1, back_rank),
            make_square(2, back_rank),
            make_square(3, back_rank),
        )
        if board[make_square(0, back_rank)] == rook and all(
            board.is_empty(sq) for sq in between
        ):
            moves.append(
                Move(from_sq, make_square(2, back_rank), flag=MoveFlag.CASTLE_QUEENSIDE)
            )
    return moves


GENERATORS: dict[PieceType, MoveGeneratorFn] = {
    PieceType.PAWN: pawn_moves,
    PieceType.KNIGHT: knight_moves,
    PieceType.BISHOP: bishop_moves,
    PieceType.ROOK: rook_moves,
    PieceType.QUEEN: queen_moves,
    PieceType.KING: king_moves,
}


def generate_piece_moves(
    piece: Piece, from_sq: Square, board: Board, state: GameState
) -> list[Move]:
    """Pseudo-legal moves of the piece on *from_sq*."""
    return GENERATORS[piece.piece_type](piece, from_sq, board, state)


def pseudo_legal_moves(board: Board, state: GameState) -> list[Move]:
    """All pseudo-legal moves for the side to move (may leave own king in check)."""
    color = state.current_player
    moves: list[Move] = []
    for sq, piece in board.occupied():
        if piece.color == color:
            moves.extend(GENERATORS[piece.piece_type](piece, sq, board, state))
    return moves
