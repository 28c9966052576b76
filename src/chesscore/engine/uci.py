"""UCI engine client built on ``chess.engine``.

Communication uses FEN strings (position) and long algebraic strings
(moves), so the engine never sees this package's types.
"""

from __future__ import annotations

import asyncio
import logging
import shlex
import threading
from types import TracebackType

import chess
import chess.engine

from chesscore.core.errors import EngineError
from chesscore.engine.search import SearchLimits

_LOGGER = logging.getLogger(__name__)


def _to_limit(limits: SearchLimits) -> chess.engine.Limit:
    if limits.movetime_ms is not None:
        return chess.engine.Limit(time=limits.movetime_ms / 1000)
    return chess.engine.Limit(depth=limits.depth)


class UciEngine:
    """One external UCI engine process.

    Requests are serialised by an internal lock.  Every search runs under a
    wall-clock budget; a timeout or any protocol failure shuts the process
    down and the next request starts a fresh one.

    Args:
        command: Executable path or a shell-style command line.
        timeout: Seconds to wait for the handshake and, on top of the move
            time, for a timed search.
        search_timeout: Seconds a depth-limited search may take.
    """

    __slots__ = ("_command", "_timeout", "_search_timeout", "_engine", "_game", "_lock")

    def __init__(
        self,
        command: str | list[str],
        timeout: float = 10.0,
        search_timeout: float = 60.0,
    ) -> None:
        self._command = shlex.split(command) if isinstance(command, str) else list(command)
        self._timeout = timeout
        self._search_timeout = search_timeout
        self._engine: chess.engine.SimpleEngine | None = None
        self._game = object()
        self._lock = threading.Lock()

    # ── Lifecycle ────────────────────────────────────────────────────────

    @property
    def is_running(self) -> bool:
        return self._engine is not None

    def start(self) -> None:
        """Launch the process and complete the ``uci`` handshake."""
        if self._engine is not None:
            return
        try:
            self._engine = chess.engine.SimpleEngine.popen_uci(
                self._command, timeout=self._timeout
            )
        except OSError as exc:
            raise EngineError(f"Cannot start engine {self._command!r}: {exc}") from exc
        except (chess.engine.EngineError, TimeoutError) as exc:
            raise EngineError(f"Engine {self._command!r} failed the handshake: {exc}") from exc
        _LOGGER.info("Started engine %s", self._engine.id.get("name", self._command[0]))

    def stop(self) -> None:
        """Send ``quit`` and reap the process."""
        engine = self._engine
        if engine is None:
            return
        self._engine = None
        try:
            engine.quit()
        except (chess.engine.EngineError, TimeoutError):
            _LOGGER.warning("Engine did not quit cleanly, closing it")
            engine.close()
        _LOGGER.info("Stopped engine %s", self._command[0])

    def __enter__(self) -> UciEngine:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()

    # ── IEngine impl ─────────────────────────────────────────────────────

    def new_game(self) -> None:
        """Announce a new game; ``ucinewgame`` goes out with the next search."""
        self._game = object()

    def best_move(self, fen: str, limits: SearchLimits) -> str | None:
        """Search *fen* and return the engine's ``bestmove``.

        ``None`` when the engine answers ``(none)`` or ``0000``, i.e. the
        side to move has no legal moves.
        """
        with self._lock:
            if self._engine is None:
                self.start()
            assert self._engine is not None
            _LOGGER.debug("Searching %s (%s)", fen, limits)
            try:
                result = self._play(self._engine, chess.Board(fen), limits)
            except TimeoutError as exc:
                self.stop()
                raise EngineError(f"Timed out waiting for bestmove on {fen!r}") from exc
            except chess.engine.EngineError as exc:
                self.stop()
                raise EngineError(f"Engine failed on {fen!r}: {exc}") from exc

        if not result.move:
            return None
        return result.move.uci()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _budget(self, limits: SearchLimits) -> float:
        if limits.movetime_ms is not None:
            return self._timeout + limits.movetime_ms / 1000
        return self._search_timeout

    def _play(
        self,
        engine: chess.engine.SimpleEngine,
        board: chess.Board,
        limits: SearchLimits,
    ) -> chess.engine.PlayResult:
        # SimpleEngine.play only bounds searches that carry a time limit.
        protocol = engine.protocol
        search = asyncio.wait_for(
            protocol.play(board, _to_limit(limits), game=self._game),
            self._budget(limits),
        )
        return asyncio.run_coroutine_threadsafe(search, protocol.loop).result()
