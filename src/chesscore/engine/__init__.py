"""External engine package: UCI process client and game bridge."""

from chesscore.engine.bridge import play_engine_move, resolve_engine_move
from chesscore.engine.search import IEngine, SearchLimits
from chesscore.engine.uci import UciEngine

__all__ = [
    "IEngine",
    "SearchLimits",
    "UciEngine",
    "play_engine_move",
    "resolve_engine_move",
]
