"""Notation package: FEN / SAN / PGN parsing and serialization."""

from chesscore.core.notation.fen import STARTING_FEN, parse_fen, to_fen
from chesscore.core.notation.models import ParsedPgn, PgnMove
from chesscore.core.notation.pgn import (
    build_pgn,
    game_result_from_pgn,
    parse_movetext,
    parse_pgn_game,
    parse_pgn_games,
    pgn_movetext,
    pgn_result_token,
    split_pgn_games,
)
from chesscore.core.notation.san import move_to_san, parse_san

__all__ = [
    "STARTING_FEN",
    "PgnMove",
    "ParsedPgn",
    "parse_fen",
    "to_fen",
    "move_to_san",
    "parse_san",
    "pgn_result_token",
    "game_result_from_pgn",
    "pgn_movetext",
    "build_pgn",
    "parse_movetext",
    "parse_pgn_game",
    "parse_pgn_games",
    "split_pgn_games",
]
