"""Submitting engine suggestions to a game.

An engine only ever sees FEN and answers in long algebraic notation; the
answer is resolved against the game's legal moves before it is applied.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chesscore.core.errors import EngineMoveRejectedError, FormatError
from chesscore.core.move import Move
from chesscore.engine.search import IEngine, SearchLimits

if TYPE_CHECKING:
    from chesscore.game.controller import ChessGame

_LOGGER = logging.getLogger(__name__)


def resolve_engine_move(game: ChessGame, move_text: str) -> Move:
    """The legal move of *game* matching engine output *move_text*.

    Raises :class:`EngineMoveRejectedError` when the text is malformed or
    names a move that is not legal here (for example because the engine
    analysed a stale position).
    """
    try:
        candidate = Move.from_uci(move_text)
    except FormatError:
        candidate = None
    if candidate is not None:
        for move in game.legal_moves():
            if move == candidate:
                return move
    fen = game.fen()
    _LOGGER.error("Engine suggested illegal move %s in %s", move_text, fen)
    raise EngineMoveRejectedError(move_text, fen)


def play_engine_move(
    game: ChessGame, engine: IEngine, limits: SearchLimits
) -> Move | None:
    """Ask *engine* for a move in *game*'s position and play it.

    Returns the move played, or ``None`` when the engine has no move
    to offer (the side to move is mated or stalemated).
    """
    fen = game.fen()
    move_text = engine.best_move(fen, limits)
    if move_text is None:
        _LOGGER.debug("Engine has no move in %s", fen)
        return None
    move = resolve_engine_move(game, move_text)
    if not game.apply_move(move):
        # Legal but refused: the game already ended.
        _LOGGER.error("Engine move %s refused in %s", move_text, fen)
        raise EngineMoveRejectedError(move_text, fen)
    return move
