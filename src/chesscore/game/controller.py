"""ChessGame: the game-state machine over one board and state.

Owns the board, the current :class:`GameState` and the repetition table;
accepts moves, derives the next state and classifies termination.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from chesscore.core.attacks import is_in_check
from chesscore.core.board import Board
from chesscore.core.enums import Color, GameResult, GameStatus
from chesscore.core.errors import FormatError, IllegalMoveError
from chesscore.core.legality import legal_moves
from chesscore.core.move import Move
from chesscore.core.notation.fen import STARTING_FEN, parse_fen, to_fen
from chesscore.core.notation.models import ParsedPgn
from chesscore.core.notation.san import move_to_san, parse_san
from chesscore.core.piece import Piece
from chesscore.core.position import make_move
from chesscore.core.rules import THREEFOLD, Rules
from chesscore.core.state import GameState
from chesscore.core.types import Square
from chesscore.core.zobrist import position_key

_LOGGER = logging.getLogger(__name__)


class ChessGame:
    """A single game of chess from a starting position to its end.

    The game works on its own copy of the board given to it, mutated in
    place by accepted moves; the state is replaced.  ``board`` is exposed
    for reading only.
    """

    __slots__ = ("_board", "_state", "_status", "_repetitions")

    def __init__(self, board: Board | None = None, state: GameState | None = None) -> None:
        self._board = board.copy() if board is not None else Board.initial()
        self._state = state or GameState.initial()
        self._repetitions: dict[int, int] = {}
        self._record_position()
        self._status = Rules.status(
            self._board, self._state, repetitions=self.repetition_count()
        )

    @classmethod
    def from_fen(cls, fen: str) -> ChessGame:
        """Start from *fen*.  Raises :class:`InvalidFenError` when malformed."""
        board, state = parse_fen(fen)
        return cls(board, state)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def current_player(self) -> Color:
        return self._state.current_player

    @property
    def status(self) -> GameStatus:
        return self._status

    def piece_at(self, sq: Square) -> Piece | None:
        return self._board[sq]

    # ── Queries ──────────────────────────────────────────────────────────

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move, recomputed on every call."""
        return legal_moves(self._board, self._state)

    def is_legal(self, move: Move) -> bool:
        return move in self.legal_moves()

    def is_check(self) -> bool:
        return is_in_check(self._board, self._state.current_player)

    def is_game_over(self) -> bool:
        return self._status.is_terminal

    def result(self) -> GameResult:
        return Rules.result(self._status, self._state.current_player)

    def repetition_count(self) -> int:
        """How many times the current position has occurred."""
        return self._repetitions.get(position_key(self._board, self._state), 0)

    def fen(self) -> str:
        return to_fen(self._board, self._state)

    def san(self, move: Move) -> str:
        """SAN of legal *move* in the current position."""
        return move_to_san(self._board, self._state, move)

    # ── Mutation ─────────────────────────────────────────────────────────

    def apply_move(self, move: Move) -> bool:
        """Play *move* if it is legal.

        Moves compare by from/to/promotion, so a move built without flags is
        accepted and replaced by the generated one.  Returns ``False`` and
        leaves the game untouched when the move is illegal or the game is over.
        """
        if self._status.is_terminal:
            _LOGGER.debug("Rejected %s: game is over (%s)", move, self._status.name)
            return False

        generated = next((m for m in self.legal_moves() if m == move), None)
        if generated is None:
            _LOGGER.debug("Rejected illegal move %s in %s", move, self.fen())
            return False

        self._state = make_move(self._board, self._state, generated)
        self._record_position()
        self._status = Rules.status(
            self._board, self._state, repetitions=self.repetition_count()
        )
        _LOGGER.debug("Applied %s", generated)
        if self._status.is_terminal:
            _LOGGER.info("Game over: %s (%s)", self._status.name, self.result().name)
        return True

    def apply_san(self, text: str) -> Move:
        """Parse SAN *text* and play it; returns the move played.

        Raises :class:`FormatError`, :class:`IllegalMoveError` or
        :class:`AmbiguousMoveError`; the game is untouched on failure.
        """
        if self._status.is_terminal:
            raise IllegalMoveError(f"Illegal move: {text} (game is over)")
        move = parse_san(self._board, self._state, text)
        self.apply_move(move)
        return move

    def apply_uci(self, text: str) -> bool:
        """Parse long algebraic *text* and submit it to :meth:`apply_move`."""
        return self.apply_move(Move.from_uci(text))

    def can_claim_draw(self) -> bool:
        """Threefold repetition may be claimed by the side to move."""
        return not self._status.is_terminal and self.repetition_count() >= THREEFOLD

    def claim_draw(self) -> bool:
        """End the game by threefold repetition when claimable."""
        if not self.can_claim_draw():
            _LOGGER.warning(
                "Draw claim refused: position occurred %d time(s)",
                self.repetition_count(),
            )
            return False
        self._status = GameStatus.THREEFOLD_REPETITION
        _LOGGER.info("Game over: %s (DRAW)", self._status.name)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _record_position(self) -> None:
        key = position_key(self._board, self._state)
        self._repetitions[key] = self._repetitions.get(key, 0) + 1

    def __repr__(self) -> str:
        return f"ChessGame({self.fen()!r}, status={self._status.name})"


def replay(sans: Iterable[str], start_fen: str = STARTING_FEN) -> ChessGame:
    """Play *sans* from *start_fen*; raises on the first rejected move."""
    game = ChessGame.from_fen(start_fen)
    for ply, san in enumerate(sans, start=1):
        try:
            game.apply_san(san)
        except (FormatError, IllegalMoveError) as exc:
            raise type(exc)(f"Ply {ply}: {exc}") from exc
    return game


def replay_pgn(parsed: ParsedPgn) -> ChessGame:
    """Replay the mainline of a parsed PGN game, honouring its ``FEN`` tag."""
    return replay(parsed.sans, parsed.start_fen or STARTING_FEN)

