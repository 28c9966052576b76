"""Game layer: the rules state machine, players and replay helpers.

Quick start::

    from chesscore.game import ChessGame

    game = ChessGame()
    game.apply_san("e4")
    print(game.fen())
"""

from chesscore.game.controller import ChessGame, replay, replay_pgn
from chesscore.game.player import EnginePlayer, HumanPlayer, IPlayer

__all__ = [
    "ChessGame",
    "EnginePlayer",
    "HumanPlayer",
    "IPlayer",
    "replay",
    "replay_pgn",
]
