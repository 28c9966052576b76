"""Game participants: where the next move comes from."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable

from chesscore.core.enums import Color
from chesscore.core.errors import ChessError
from chesscore.core.move import Move
from chesscore.core.notation.san import parse_san
from chesscore.engine.bridge import resolve_engine_move
from chesscore.engine.search import IEngine, SearchLimits
from chesscore.game.controller import ChessGame

_LOGGER = logging.getLogger(__name__)

QUIT_COMMANDS = frozenset({"quit", "exit", "resign"})
DRAW_COMMAND = "draw"


class IPlayer(ABC):
    """Interface for a game participant (human or engine)."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def choose_move(self, game: ChessGame) -> Move | None:
        """Pick a legal move for *game*; ``None`` means the player stops."""


class HumanPlayer(IPlayer):
    """A human typing SAN moves.

    Args:
        color: Side the human plays.
        read_input: ``(prompt) -> str`` returning one line of input.
        report: ``(message) -> None`` used to explain rejected input.
        name: Display name.
    """

    __slots__ = ("_color", "_name", "_read_input", "_report")

    def __init__(
        self,
        color: Color,
        read_input: Callable[[str], str],
        report: Callable[[str], None],
        name: str = "",
    ) -> None:
        self._color = color
        self._name = name or f"Player ({color})"
        self._read_input = read_input
        self._report = report

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def choose_move(self, game: ChessGame) -> Move | None:
        """Prompt until a legal SAN move is entered.

        Returns ``None`` on a quit command, or after ``draw`` when the claim
        succeeded (the game is then over).
        """
        while True:
            text = self._read_input(f"{self._name} to move: ").strip()
            if text.lower() in QUIT_COMMANDS:
                return None
            if text.lower() == DRAW_COMMAND:
                if game.claim_draw():
                    return None
                self._report("No draw to claim in this position")
                continue
            if not text:
                continue
            try:
                return parse_san(game.board, game.state, text)
            except ChessError as exc:
                self._report(str(exc))


class EnginePlayer(IPlayer):
    """An external engine answering with long algebraic moves."""

    __slots__ = ("_color", "_name", "_engine", "_limits")

    def __init__(
        self,
        color: Color,
        engine: IEngine,
        limits: SearchLimits | None = None,
        name: str = "Engine",
    ) -> None:
        self._color = color
        self._name = name
        self._engine = engine
        self._limits = limits or SearchLimits()

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    def choose_move(self, game: ChessGame) -> Move | None:
        """The engine's move for *game*.

        Raises :class:`EngineMoveRejectedError` when the suggestion is not
        legal in the current position.
        """
        move_text = self._engine.best_move(game.fen(), self._limits)
        if move_text is None:
            return None
        _LOGGER.debug("%s suggests %s", self._name, move_text)
        return resolve_engine_move(game, move_text)
