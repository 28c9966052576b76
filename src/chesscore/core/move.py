"""Move value object (UCI-style representation)."""

from __future__ import annotations

from dataclasses import dataclass, field

from chesscore.core.enums import MoveFlag, PieceType
from chesscore.core.errors import FormatError
from chesscore.core.types import Square, parse_square, square_name

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}
_PROMO_TYPES: dict[str, PieceType] = {v: k for k, v in _PROMO_CHARS.items()}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move.

    Identity is ``(from_sq, to_sq, promotion)``.  ``flag`` and ``is_capture``
    are derived by the move generator and take no part in equality, so a bare
    ``Move(E2, E4)`` typed in by a caller matches the generated double push.
    """

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None
    flag: MoveFlag = field(default=MoveFlag.NORMAL, compare=False)
    is_capture: bool = field(default=False, compare=False)

    # ── Derived classification ───────────────────────────────────────────

    @property
    def is_en_passant(self) -> bool:
        return self.flag == MoveFlag.EN_PASSANT

    @property
    def is_kingside_castle(self) -> bool:
        return self.flag == MoveFlag.CASTLE_KINGSIDE

    @property
    def is_queenside_castle(self) -> bool:
        return self.flag == MoveFlag.CASTLE_QUEENSIDE

    @property
    def is_castling(self) -> bool:
        return self.flag in (MoveFlag.CASTLE_KINGSIDE, MoveFlag.CASTLE_QUEENSIDE)

    @property
    def is_double_push(self) -> bool:
        return self.flag == MoveFlag.DOUBLE_PAWN

    @property
    def is_promotion(self) -> bool:
        return self.promotion is not None

    # ── UCI long algebraic ───────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)

    @classmethod
    def from_uci(cls, text: str) -> Move:
        """Parse ``e2e4`` / ``e7e8q`` into a flag-less move.

        The result compares equal to the generated legal move, which carries
        the flags; look it up in the legal move list before trusting them.
        """
        if len(text) not in (4, 5):
            raise FormatError(f"Invalid UCI move: {text!r}")
        from_sq = parse_square(text[0:2])
        to_sq = parse_square(text[2:4])
        promotion = promotion_type(text[4]) if len(text) == 5 else None
        if from_sq == to_sq:
            raise FormatError(f"Null UCI move: {text!r}")
        return cls(from_sq, to_sq, promotion)


def promotion_type(char: str) -> PieceType:
    """Map a promotion character (``q``, ``R`` …) to its piece type."""
    try:
        return _PROMO_TYPES[char.lower()]
    except KeyError:
        raise FormatError(f"Invalid promotion character: {char!r}") from None
