"""Tests for the UCI engine client, run against a scripted engine process."""

from collections.abc import Callable
from pathlib import Path

import pytest

from chesscore.core.errors import EngineError
from chesscore.core.notation.fen import STARTING_FEN
from chesscore.engine.search import SearchLimits
from chesscore.engine.uci import UciEngine

FakeEngine = Callable[[str], tuple[list[str], Path]]

AFTER_NF3 = "rnbqkbnr/pppppppp/8/8/8/5N2/PPPPPPPP/RNBQKB1R b KQkq - 1 1"


def _log_lines(log: Path, prefix: str) -> list[str]:
    return [
        line
        for line in log.read_text(encoding="utf-8").splitlines()
        if line.startswith(prefix)
    ]


class TestLifecycle:
    def test_context_manager(self, fake_engine: FakeEngine) -> None:
        command, _ = fake_engine("e2e4")
        with UciEngine(command) as engine:
            assert engine.is_running
        assert not engine.is_running

    def test_stop_is_idempotent(self, fake_engine: FakeEngine) -> None:
        command, _ = fake_engine("e2e4")
        engine = UciEngine(command)
        engine.start()
        engine.stop()
        engine.stop()
        assert not engine.is_running

    def test_missing_executable(self, tmp_path: Path) -> None:
        engine = UciEngine([str(tmp_path / "no-such-engine")])
        with pytest.raises(EngineError, match="Cannot start engine"):
            engine.start()
        assert not engine.is_running

    def test_string_command(self, fake_engine: FakeEngine) -> None:
        command, _ = fake_engine("e2e4")
        with UciEngine(" ".join(f'"{part}"' for part in command)) as engine:
            assert engine.is_running


class TestBestMove:
    def test_sends_position_and_returns_move(self, fake_engine: FakeEngine) -> None:
        command, log = fake_engine("g8f6")
        with UciEngine(command) as engine:
            assert engine.best_move(AFTER_NF3, SearchLimits(depth=3)) == "g8f6"
        assert _log_lines(log, "position") == [f"position fen {AFTER_NF3}"]
        assert _log_lines(log, "go") == ["go depth 3"]

    def test_movetime_limit(self, fake_engine: FakeEngine) -> None:
        command, log = fake_engine("e2e4")
        with UciEngine(command) as engine:
            engine.best_move(STARTING_FEN, SearchLimits(depth=3, movetime_ms=250))
        assert _log_lines(log, "go") == ["go movetime 250"]

    def test_new_game(self, fake_engine: FakeEngine) -> None:
        command, log = fake_engine("e2e4")
        limits = SearchLimits(depth=1)
        with UciEngine(command) as engine:
            engine.best_move(STARTING_FEN, limits)
            engine.best_move(STARTING_FEN, limits)
            engine.new_game()
            engine.best_move(STARTING_FEN, limits)
        assert len(_log_lines(log, "ucinewgame")) == 2

    def test_starts_on_demand(self, fake_engine: FakeEngine) -> None:
        command, _ = fake_engine("g1f3")
        engine = UciEngine(command)
        try:
            assert engine.best_move(STARTING_FEN, SearchLimits(movetime_ms=10)) == "g1f3"
            assert engine.is_running
        finally:
            engine.stop()

    @pytest.mark.parametrize("reply", ["(none)", "0000"])
    def test_no_move(self, fake_engine: FakeEngine, reply: str) -> None:
        command, _ = fake_engine(reply)
        with UciEngine(command) as engine:
            assert engine.best_move(STARTING_FEN, SearchLimits(depth=1)) is None

    def test_illegal_reply(self, fake_engine: FakeEngine) -> None:
        command, _ = fake_engine("e7e5")
        with UciEngine(command) as engine:
            with pytest.raises(EngineError):
                engine.best_move(STARTING_FEN, SearchLimits(depth=1))
            assert not engine.is_running

    def test_timeout(self, fake_engine: FakeEngine) -> None:
        command, _ = fake_engine("silent")
        with UciEngine(command, timeout=1.0) as engine:
            with pytest.raises(EngineError, match="Timed out"):
                engine.best_move(STARTING_FEN, SearchLimits(movetime_ms=10))
            assert not engine.is_running

    def test_depth_search_timeout(self, fake_engine: FakeEngine) -> None:
        command, _ = fake_engine("silent")
        with UciEngine(command, timeout=1.0, search_timeout=1.0) as engine:
            with pytest.raises(EngineError, match="Timed out"):
                engine.best_move(STARTING_FEN, SearchLimits(depth=15))
            assert not engine.is_running

    def test_restarts_after_timeout(self, fake_engine: FakeEngine) -> None:
        command, _ = fake_engine("silent")
        engine = UciEngine(command, timeout=1.0, search_timeout=0.5)
        try:
            for _ in range(2):
                with pytest.raises(EngineError):
                    engine.best_move(STARTING_FEN, SearchLimits(depth=1))
        finally:
            engine.stop()
        assert not engine.is_running
