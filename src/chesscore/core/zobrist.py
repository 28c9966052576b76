"""Zobrist keys identifying a position for repetition counting."""

from __future__ import annotations

from typing import Final

from chesscore.core.board import Board
from chesscore.core.enums import Color
from chesscore.core.state import GameState

_SEED: Final = 0xA5B3C7D9E1F23412
_MASK_64: Final = 0xFFFFFFFFFFFFFFFF


def _splitmix64(state: int) -> int:
    """Deterministic 64-bit bit-mixer suitable for static key generation."""
    z = (state + 0x9E3779B97F4A7C15) & _MASK_64
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK_64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK_64
    return z ^ (z >> 31)


# [color][piece_type - 1][square], then side, 16 castling masks, 64 ep squares.
_PIECE_KEYS: Final = tuple(
    tuple(
        tuple(_splitmix64(_SEED + color * 384 + ptype * 64 + sq) for sq in range(64))
        for ptype in range(6)
    )
    for color in range(2)
)
_BLACK_TO_MOVE_KEY: Final = _splitmix64(_SEED + 768)
_CASTLING_KEYS: Final = tuple(_splitmix64(_SEED + 769 + idx) for idx in range(16))
_EN_PASSANT_KEYS: Final = tuple(_splitmix64(_SEED + 785 + idx) for idx in range(64))


def position_key(board: Board, state: GameState) -> int:
    """Key over placement, side to move, castling rights and en passant square.

    Clocks are excluded: positions differing only in move counters repeat.
    """
    key = _CASTLING_KEYS[int(state.castling) & 0xF]
    if state.current_player == Color.BLACK:
        key ^= _BLACK_TO_MOVE_KEY
    if state.en_passant is not None:
        key ^= _EN_PASSANT_KEYS[state.en_passant]
    for sq, piece in board.occupied():
        key ^= _PIECE_KEYS[piece.color][piece.piece_type - 1][sq]
    return key
