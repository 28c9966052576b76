"""Squares and offsets.

A square is an ``int`` from 0 to 63 counted rank by rank from White's side:
``a1=0``, ``h1=7``, ``a2=8`` ... ``h8=63``.  ``sq >> 3`` is the rank index
and ``sq & 7`` the file index.
"""

from __future__ import annotations

from typing import NamedTuple, TypeAlias

from chesscore.core.errors import FormatError

Square: TypeAlias = int

FILES = "abcdefgh"
RANKS = "12345678"

SQUARE_NAMES: tuple[str, ...] = tuple(f + r for r in RANKS for f in FILES)


class Offset(NamedTuple):
    """A (file, rank) step such as a knight jump or a sliding direction."""

    file_delta: int
    rank_delta: int


def file_of(sq: Square) -> int:
    return sq & 7


def rank_of(sq: Square) -> int:
    return sq >> 3


def make_square(file: int, rank: int) -> Square:
    return (rank << 3) | file


def square_name(sq: Square) -> str:
    """Algebraic name of *sq*, e.g. ``28`` is ``'e4'``."""
    return SQUARE_NAMES[sq]


def parse_square(name: str) -> Square:
    """Square for a lowercase algebraic name.

    Raises :class:`FormatError` unless *name* is a file letter followed by
    a rank digit.
    """
    if len(name) != 2 or name[0] not in FILES or name[1] not in RANKS:
        raise FormatError(f"Invalid square name: {name!r}")
    return make_square(FILES.index(name[0]), RANKS.index(name[1]))


def is_valid_square(sq: int) -> bool:
    return 0 <= sq < 64


def is_light_square(sq: Square) -> bool:
    """Square color; a1 is dark."""
    return (file_of(sq) ^ rank_of(sq)) & 1 == 1


def offset_square(sq: Square, offset: Offset) -> Square | None:
    """Square one *offset* step away, or ``None`` off the edge (files never wrap)."""
    file = file_of(sq) + offset.file_delta
    rank = rank_of(sq) + offset.rank_delta
    if 0 <= file < 8 and 0 <= rank < 8:
        return make_square(file, rank)
    return None


# ── Named squares ───────────────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = range(0, 8)
A2, B2, C2, D2, E2, F2, G2, H2 = range(8, 16)
A3, B3, C3, D3, E3, F3, G3, H3 = range(16, 24)
A4, B4, C4, D4, E4, F4, G4, H4 = range(24, 32)
A5, B5, C5, D5, E5, F5, G5, H5 = range(32, 40)
A6, B6, C6, D6, E6, F6, G6, H6 = range(40, 48)
A7, B7, C7, D7, E7, F7, G7, H7 = range(48, 56)
A8, B8, C8, D8, E8, F8, G8, H8 = range(56, 64)
