"""Shared engine search models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move request.

    ``movetime_ms`` takes precedence over ``depth`` when both are set.
    """

    depth: int | None = 15
    movetime_ms: int | None = None

    def __post_init__(self) -> None:
        if self.depth is not None and self.depth < 1:
            raise ValueError(f"Search depth must be >= 1, got {self.depth}")
        if self.movetime_ms is not None and self.movetime_ms < 1:
            raise ValueError(f"Move time must be >= 1 ms, got {self.movetime_ms}")
        if self.depth is None and self.movetime_ms is None:
            raise ValueError("Search limits need a depth or a move time")


class IEngine(Protocol):
    """An external move source speaking FEN in and long algebraic out."""

    def best_move(self, fen: str, limits: SearchLimits) -> str | None:
        """Best move for *fen* in UCI notation, ``None`` when there is none."""
        ...
