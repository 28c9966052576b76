"""Core rules layer: board, state, move generation and legality.

Quick start::

    from chesscore.core import legal_moves, parse_fen, STARTING_FEN

    board, state = parse_fen(STARTING_FEN)
    for move in legal_moves(board, state):
        print(move)
"""

from chesscore.core.attacks import attackers, is_in_check, is_square_attacked
from chesscore.core.board import Board
from chesscore.core.enums import (
    CastlingRights,
    Color,
    GameResult,
    GameStatus,
    MoveFlag,
    PieceType,
)
from chesscore.core.errors import (
    AmbiguousMoveError,
    ChessError,
    EngineError,
    EngineMoveRejectedError,
    FenErrorReason,
    FormatError,
    IllegalMoveError,
    InvalidFenError,
)
from chesscore.core.generators import (
    GENERATORS,
    generate_piece_moves,
    pseudo_legal_moves,
)
from chesscore.core.legality import apply_move_to_board, filter_legal_moves, legal_moves
from chesscore.core.move import Move
from chesscore.core.notation import (
    STARTING_FEN,
    move_to_san,
    parse_fen,
    parse_san,
    to_fen,
)
from chesscore.core.piece import Piece
from chesscore.core.position import make_move, perft
from chesscore.core.rules import Rules
from chesscore.core.state import CastlingAvailability, GameState
from chesscore.core.types import (
    Offset,
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameResult",
    "GameStatus",
    "MoveFlag",
    "PieceType",
    # Errors
    "AmbiguousMoveError",
    "ChessError",
    "EngineError",
    "EngineMoveRejectedError",
    "FenErrorReason",
    "FormatError",
    "IllegalMoveError",
    "InvalidFenError",
    # Types / helpers
    "Offset",
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "CastlingAvailability",
    "GameState",
    "Move",
    "Piece",
    "Rules",
    # Generation / legality
    "GENERATORS",
    "apply_move_to_board",
    "attackers",
    "filter_legal_moves",
    "generate_piece_moves",
    "is_in_check",
    "is_square_attacked",
    "legal_moves",
    "make_move",
    "perft",
    "pseudo_legal_moves",
    # Notation
    "STARTING_FEN",
    "move_to_san",
    "parse_fen",
    "parse_san",
    "to_fen",
]
