"""chess-core: a chess rules engine with FEN/SAN/PGN codecs and a UCI client."""

from chesscore.core import (
    STARTING_FEN,
    Board,
    Color,
    GameResult,
    GameState,
    GameStatus,
    Move,
    Piece,
    PieceType,
)
from chesscore.game import ChessGame

__version__ = "0.1.0"

__all__ = [
    "STARTING_FEN",
    "Board",
    "ChessGame",
    "Color",
    "GameResult",
    "GameState",
    "GameStatus",
    "Move",
    "Piece",
    "PieceType",
    "__version__",
]
