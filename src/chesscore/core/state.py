"""GameState: the non-board half of a position."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, NamedTuple

from chesscore.core.enums import CastlingRights, Color
from chesscore.core.types import Square, is_valid_square


class CastlingAvailability(NamedTuple):
    """Castling rights of one color."""

    kingside: bool
    queenside: bool


@dataclass(frozen=True, slots=True)
class GameState:
    """Side to move, castling rights, en passant target and move clocks.

    Immutable: every transition builds a new value via :meth:`replace`,
    so a previous state can be kept around for inspection without copying.
    """

    current_player: Color = Color.WHITE
    castling: CastlingRights = CastlingRights.ALL
    en_passant: Square | None = None
    halfmove_clock: int = 0
    fullmove_number: int = 1

    def __post_init__(self) -> None:
        if self.halfmove_clock < 0:
            raise ValueError(f"Halfmove clock must be >= 0, got {self.halfmove_clock}")
        if self.fullmove_number < 1:
            raise ValueError(
                f"Fullmove number must be >= 1, got {self.fullmove_number}"
            )
        if self.en_passant is not None and not is_valid_square(self.en_passant):
            raise ValueError(f"Invalid en passant square: {self.en_passant}")

    @classmethod
    def initial(cls) -> GameState:
        return cls()

    # ── Castling views ───────────────────────────────────────────────────

    def can_castle(self, color: Color, kingside: bool) -> bool:
        return bool(self.castling & CastlingRights.side(color, kingside))

    def castling_availability(self, color: Color) -> CastlingAvailability:
        return CastlingAvailability(
            kingside=self.can_castle(color, kingside=True),
            queenside=self.can_castle(color, kingside=False),
        )

    # ── Transitions ──────────────────────────────────────────────────────

    def replace(self, **changes: Any) -> GameState:
        """Copy with *changes* applied."""
        return dataclasses.replace(self, **changes)
