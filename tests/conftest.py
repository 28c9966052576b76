"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import sys
import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

from chesscore.core.board import Board
from chesscore.core.enums import Color, PieceType
from chesscore.core.piece import Piece
from chesscore.core.types import parse_square
from chesscore.game.controller import ChessGame

# A scripted UCI engine.  argv[1] is the reply to "go" (or "silent" to never
# answer); every "ucinewgame", "position" and "go" line is appended to the
# file named by argv[2].
_FAKE_ENGINE = textwrap.dedent(
    """
    import sys

    reply = sys.argv[1]
    log_path = sys.argv[2]
    for raw in sys.stdin:
        line = raw.strip()
        if line == "uci":
            print("id name FakeFish")
            print("uciok", flush=True)
        elif line == "isready":
            print("readyok", flush=True)
        elif line.startswith(("ucinewgame", "position", "go")):
            with open(log_path, "a", encoding="utf-8") as log:
                log.write(line + "\\n")
        if line.startswith("go"):
            if reply != "silent":
                print("info depth 1 score cp 12")
                print("bestmove " + reply, flush=True)
        elif line == "quit":
            break
    """
)


@pytest.fixture
def game() -> ChessGame:
    """A game at the standard starting position."""
    return ChessGame()


@pytest.fixture
def board_with() -> Callable[..., Board]:
    """Build a board from ``square=FEN char`` pairs, e.g. ``e1="K"``."""

    def build(**placement: str) -> Board:
        board = Board()
        for name, char in placement.items():
            board[parse_square(name)] = Piece.from_char(char)
        return board

    return build


@pytest.fixture
def fake_engine(tmp_path: Path) -> Callable[[str], tuple[list[str], Path]]:
    """Return a factory ``(reply) -> (command, position_log)``."""
    script = tmp_path / "fake_engine.py"
    script.write_text(_FAKE_ENGINE, encoding="utf-8")

    def make(reply: str) -> tuple[list[str], Path]:
        log_path = tmp_path / f"positions-{reply.replace('(', '').replace(')', '')}.log"
        return [sys.executable, str(script), reply, str(log_path)], log_path

    return make

