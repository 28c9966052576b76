"""PGN reading and writing helpers.

Only the mainline is kept: variations, NAGs and move numbers are skipped,
comments are attached to the move they follow.
"""

from __future__ import annotations

import re

from chesscore.core.enums import GameResult
from chesscore.core.errors import FormatError
from chesscore.core.notation.models import ParsedPgn, PgnMove

_HEADER_RE = re.compile(r'^\[(\w+)\s+"((?:[^"\\]|\\.)*)"\]\s*$')
_RESULT_TOKENS = {
    "1-0": GameResult.WHITE_WINS,
    "0-1": GameResult.BLACK_WINS,
    "1/2-1/2": GameResult.DRAW,
    "*": GameResult.IN_PROGRESS,
}
_MOVE_NUMBER_RE = re.compile(r"\d+\.*")
_MOVE_NUMBER_PREFIX_RE = re.compile(r"^\d+\.+")
_NAG_RE = re.compile(r"\$\d+")
_MOVETEXT_TOKEN_RE = re.compile(
    r"\{(?P<brace>[^}]*)\}?"
    r"|;(?P<line>[^\n]*)"
    r"|(?P<open>\()"
    r"|(?P<close>\))"
    r"|(?P<word>[^\s{}();]+)"
)


def pgn_result_token(result: GameResult) -> str:
    """PGN result token for *result*."""
    for token, value in _RESULT_TOKENS.items():
        if value == result:
            return token
    return "*"


def game_result_from_pgn(token: str) -> GameResult:
    """:class:`GameResult` for a PGN result token; unknown tokens are ``*``."""
    return _RESULT_TOKENS.get(token, GameResult.IN_PROGRESS)


def pgn_movetext(moves: list[PgnMove], result_token: str, first_ply: int = 0) -> str:
    """Render mainline *moves* as movetext ending in *result_token*.

    *first_ply* is the ply index of the first move (1 when Black starts).
    """
    parts: list[str] = []
    for ply, move in enumerate(moves, start=first_ply):
        move_no = ply // 2 + 1
        if ply % 2 == 0:
            parts.append(f"{move_no}.")
        elif ply == first_ply or moves[ply - first_ply - 1].comment:
            parts.append(f"{move_no}...")
        parts.append(move.san)
        if move.comment:
            # A closing brace would end the comment early.
            parts.append("{" + move.comment.replace("}", "]") + "}")
    parts.append(result_token)
    return " ".join(parts)


def build_pgn(
    headers: dict[str, str],
    sans: list[str],
    result_token: str,
    first_ply: int = 0,
) -> str:
    """Render a single-game PGN document."""
    lines = []
    for key, value in headers.items():
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        lines.append(f'[{key} "{escaped}"]')
    lines.append("")
    lines.append(pgn_movetext([PgnMove(san) for san in sans], result_token, first_ply))
    lines.append("")
    return "\n".join(lines)


def _attach_comment(moves: list[PgnMove], text: str) -> None:
    clean = " ".join(text.split())
    if not clean or not moves:
        return
    last = moves[-1]
    last.comment = f"{last.comment} {clean}" if last.comment else clean


def parse_movetext(movetext: str) -> tuple[list[PgnMove], str]:
    """Split movetext into mainline moves and the result token."""
    moves: list[PgnMove] = []
    result_token = "*"
    depth = 0

    for match in _MOVETEXT_TOKEN_RE.finditer(movetext):
        kind = match.lastgroup
        if kind == "open":
            depth += 1
            continue
        if kind == "close":
            depth = max(0, depth - 1)
            continue
        if depth > 0:
            continue
        if kind in ("brace", "line"):
            _attach_comment(moves, match.group(kind))
            continue

        token = match.group("word")
        if token in _RESULT_TOKENS:
            result_token = token
            continue
        if _MOVE_NUMBER_RE.fullmatch(token) or _NAG_RE.fullmatch(token):
            continue
        # "12.e4" and "12...Nf6" glue the number to the move.
        token = _MOVE_NUMBER_PREFIX_RE.sub("", token)
        if token:
            moves.append(PgnMove(san=token))

    return moves, result_token


def parse_pgn_game(pgn_text: str) -> ParsedPgn:
    """Parse one PGN game.  Raises :class:`FormatError` on a bad tag line."""
    headers: dict[str, str] = {}
    movetext: list[str] = []
    in_headers = True

    for raw_line in pgn_text.splitlines():
        line = raw_line.strip()
        if not line:
            if headers:
                in_headers = False
            continue
        if line.startswith("%"):
            continue
        if in_headers and line.startswith("["):
            match = _HEADER_RE.match(line)
            if match is None:
                raise FormatError(f"Invalid PGN header line: {line}")
            key, raw_value = match.groups()
            headers[key] = raw_value.replace('\\"', '"').replace("\\\\", "\\")
            continue
        in_headers = False
        movetext.append(line)

    moves, result_token = parse_movetext("\n".join(movetext))
    if result_token == "*" and headers.get("Result") in _RESULT_TOKENS:
        result_token = headers["Result"]
    return ParsedPgn(headers=headers, moves=moves, result_token=result_token)


def split_pgn_games(pgn_text: str) -> list[str]:
    """Cut a multi-game PGN database into per-game chunks.

    A new game starts at a tag line that follows movetext.
    """
    games: list[list[str]] = []
    current: list[str] = []
    seen_movetext = False

    for raw_line in pgn_text.splitlines():
        line = raw_line.strip()
        if line.startswith("[") and seen_movetext:
            games.append(current)
            current = []
            seen_movetext = False
        if line and not line.startswith(("[", "%")):
            seen_movetext = True
        current.append(raw_line)

    if any(line.strip() for line in current):
        games.append(current)
    return ["\n".join(lines) for lines in games]


def parse_pgn_games(pgn_text: str) -> list[ParsedPgn]:
    """Parse every game of a PGN database."""
    return [parse_pgn_game(chunk) for chunk in split_pgn_games(pgn_text)]
