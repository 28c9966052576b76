"""Exception taxonomy shared by the core, the notation layer and the engine bridge."""

from __future__ import annotations

from enum import Enum


class ChessError(Exception):
    """Base class for every error raised by this package."""


class FormatError(ChessError, ValueError):
    """Malformed square, piece, move or notation text."""


class FenErrorReason(Enum):
    """Which FEN rule was violated."""

    FIELD_COUNT = "field count"
    BOARD_LAYOUT = "board layout"
    PIECE_CHAR = "piece char"
    SIDE_TO_MOVE = "side to move"
    CASTLING = "castling"
    EN_PASSANT_TOKEN = "en passant square"
    CLOCK = "clock"
    KING_COUNT = "king count"


class InvalidFenError(FormatError):
    """A FEN string that cannot be turned into a board and game state."""

    def __init__(self, reason: FenErrorReason, detail: str, fen: str) -> None:
        super().__init__(f"Invalid FEN {reason.value}: {detail} in {fen!r}")
        self.reason = reason
        self.fen = fen


class IllegalMoveError(ChessError, ValueError):
    """Well-formed move text that matches no legal move."""


class AmbiguousMoveError(IllegalMoveError):
    """Move text that matches more than one legal move."""


class EngineError(ChessError):
    """The external analysis engine could not be started or stopped answering."""


class EngineMoveRejectedError(ChessError):
    """A collaborator suggested a move the current position does not allow.

    Usually means the engine analysed a stale position.
    """

    def __init__(self, move_text: str, fen: str) -> None:
        super().__init__(f"Engine suggested illegal move {move_text!r} for {fen!r}")
        self.move_text = move_text
        self.fen = fen
