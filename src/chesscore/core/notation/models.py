"""Notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class PgnMove:
    """One mainline move of a PGN game, with its trailing comment."""

    san: str
    comment: str = ""


@dataclass(slots=True)
class ParsedPgn:
    """Headers, mainline moves and result token of one PGN game."""

    headers: dict[str, str] = field(default_factory=dict)
    moves: list[PgnMove] = field(default_factory=list)
    result_token: str = "*"

    @property
    def sans(self) -> list[str]:
        return [move.san for move in self.moves]

    @property
    def start_fen(self) -> str | None:
        """Starting position from the ``FEN`` tag, if the game declares one."""
        return self.headers.get("FEN")
