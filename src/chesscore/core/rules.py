"""High-level chess rules: checkmate, stalemate, draw detection."""

from __future__ import annotations

from chesscore.core.attacks import is_in_check
from chesscore.core.board import Board
from chesscore.core.enums import Color, GameResult, GameStatus, PieceType
from chesscore.core.legality import legal_moves
from chesscore.core.move import Move
from chesscore.core.state import GameState
from chesscore.core.types import is_light_square

FIFTY_MOVE_HALFMOVES = 100  # 100 half-moves = 50 full moves
THREEFOLD = 3
FIVEFOLD = 5

_MINOR_PIECES = (PieceType.KNIGHT, PieceType.BISHOP)


class Rules:
    """Static rule-checker over a board and game state.

    Policy:
    - Automatic draws: fifty-move rule, insufficient material, fivefold repetition.
    - Claim-based draws: threefold repetition.
    """

    @staticmethod
    def is_in_check(board: Board, state: GameState) -> bool:
        return is_in_check(board, state.current_player)

    @staticmethod
    def is_checkmate(board: Board, state: GameState) -> bool:
        if not Rules.is_in_check(board, state):
            return False
        return not legal_moves(board, state)

    @staticmethod
    def is_stalemate(board: Board, state: GameState) -> bool:
        if Rules.is_in_check(board, state):
            return False
        return not legal_moves(board, state)

    @staticmethod
    def is_insufficient_material(board: Board) -> bool:
        """K vs K, K+B vs K, K+N vs K, K+B vs K+B (same-color bishops)."""
        others = [
            (sq, piece)
            for sq, piece in board.occupied()
            if piece.piece_type != PieceType.KING
        ]

        # K vs K
        if not others:
            return True

        # K+minor vs K
        if len(others) == 1:
            return others[0][1].piece_type in _MINOR_PIECES

        # K+B vs K+B with same-colour bishops
        if len(others) == 2:
            (sq_a, a), (sq_b, b) = others
            return (
                a.piece_type == PieceType.BISHOP
                and b.piece_type == PieceType.BISHOP
                and a.color != b.color
                and is_light_square(sq_a) == is_light_square(sq_b)
            )

        return False

    @staticmethod
    def is_fifty_move_rule(state: GameState) -> bool:
        return state.halfmove_clock >= FIFTY_MOVE_HALFMOVES

    @staticmethod
    def status(
        board: Board,
        state: GameState,
        moves: list[Move] | None = None,
        repetitions: int = 1,
    ) -> GameStatus:
        """Classify the position; *moves* may pass precomputed legal moves."""
        if moves is None:
            moves = legal_moves(board, state)

        if not moves:
            if is_in_check(board, state.current_player):
                return GameStatus.CHECKMATE
            return GameStatus.STALEMATE

        if Rules.is_fifty_move_rule(state):
            return GameStatus.FIFTY_MOVE_RULE
        if Rules.is_insufficient_material(board):
            return GameStatus.INSUFFICIENT_MATERIAL
        if repetitions >= FIVEFOLD:
            return GameStatus.FIVEFOLD_REPETITION
        return GameStatus.ONGOING

    @staticmethod
    def result(status: GameStatus, side_to_move: Color) -> GameResult:
        """Map a status to a result; a checkmated side to move loses."""
        if status == GameStatus.ONGOING:
            return GameResult.IN_PROGRESS
        if status == GameStatus.CHECKMATE:
            return GameResult.win_for(side_to_move.opposite)
        return GameResult.DRAW
