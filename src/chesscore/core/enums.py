"""Core enumerations and flags for the chess domain."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class MoveFlag(IntEnum):
    """Special move classification."""

    NORMAL = 0
    DOUBLE_PAWN = 1
    EN_PASSANT = 2
    CASTLE_KINGSIDE = 3
    CASTLE_QUEENSIDE = 4
    PROMOTION = 5


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH

    @staticmethod
    def side(color: Color, kingside: bool) -> CastlingRights:
        """The single right for *color* on the given wing."""
        if color == Color.WHITE:
            return (
                CastlingRights.WHITE_KINGSIDE
                if kingside
                else CastlingRights.WHITE_QUEENSIDE
            )
        return (
            CastlingRights.BLACK_KINGSIDE if kingside else CastlingRights.BLACK_QUEENSIDE
        )

    @staticmethod
    def both(color: Color) -> CastlingRights:
        """Both rights of *color*."""
        return (
            CastlingRights.WHITE_BOTH
            if color == Color.WHITE
            else CastlingRights.BLACK_BOTH
        )


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3

    @property
    def winner(self) -> Color | None:
        if self == GameResult.WHITE_WINS:
            return Color.WHITE
        if self == GameResult.BLACK_WINS:
            return Color.BLACK
        return None

    @staticmethod
    def win_for(color: Color) -> GameResult:
        return GameResult.WHITE_WINS if color == Color.WHITE else GameResult.BLACK_WINS


class GameStatus(IntEnum):
    """Termination state of a game; everything but ONGOING is final."""

    ONGOING = 0
    CHECKMATE = 1
    STALEMATE = 2
    FIFTY_MOVE_RULE = 3
    INSUFFICIENT_MATERIAL = 4
    FIVEFOLD_REPETITION = 5
    THREEFOLD_REPETITION = 6

    @property
    def is_terminal(self) -> bool:
        return self != GameStatus.ONGOING

    @property
    def is_draw(self) -> bool:
        return self not in (GameStatus.ONGOING, GameStatus.CHECKMATE)
