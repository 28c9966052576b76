"""chess-core command line interface."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from chesscore import __version__
from chesscore.config import settings
from chesscore.core.enums import Color
from chesscore.core.errors import ChessError, EngineError, EngineMoveRejectedError
from chesscore.core.notation.fen import STARTING_FEN, parse_fen
from chesscore.core.notation.pgn import parse_pgn_games
from chesscore.core.position import perft as count_leaves
from chesscore.engine.search import SearchLimits
from chesscore.engine.uci import UciEngine
from chesscore.game.controller import ChessGame, replay_pgn
from chesscore.game.player import EnginePlayer, HumanPlayer, IPlayer

_LOGGER = logging.getLogger(__name__)

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _load_game(fen: str) -> ChessGame:
    try:
        return ChessGame.from_fen(fen)
    except ChessError as exc:
        raise click.BadParameter(str(exc), param_hint="--fen") from exc


def _show_position(game: ChessGame) -> None:
    click.echo(game.board.render(unicode=True))
    click.echo(f"FEN: {game.fen()}")
    if game.is_check():
        click.echo("Check!")


def _prompt(text: str) -> str:
    return click.prompt(text, default="", show_default=False, prompt_suffix="")


def _report(message: str) -> None:
    click.echo(message, err=True)


@click.group()
@click.version_option(version=__version__, prog_name="chess-core")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=settings.log_level,
    show_default=True,
    help="Logging verbosity.",
)
def cli(log_level: str) -> None:
    """Chess rules engine: play, list moves, count perft, replay PGN."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.option("--fen", default=STARTING_FEN, help="Starting position.")
@click.option("--engine", "engine_path", default=settings.engine_path, show_default=True,
              help="UCI engine command.")
@click.option("--depth", type=click.IntRange(min=1), default=settings.engine_depth,
              show_default=True, help="Engine search depth.")
@click.option("--movetime", type=click.IntRange(min=1), default=settings.engine_movetime_ms,
              help="Engine think time in ms (overrides --depth).")
@click.option("--color", type=click.Choice(["white", "black"]), default="white",
              show_default=True, help="Side you play.")
def play(fen: str, engine_path: str, depth: int, movetime: int | None, color: str) -> None:
    """Play against an external UCI engine, entering moves in SAN."""
    game = _load_game(fen)
    human_color = Color.WHITE if color == "white" else Color.BLACK
    limits = SearchLimits(depth=depth, movetime_ms=movetime)

    try:
        with UciEngine(
            engine_path,
            timeout=settings.engine_timeout,
            search_timeout=settings.engine_search_timeout,
        ) as engine:
            engine.new_game()
            players: dict[Color, IPlayer] = {
                human_color: HumanPlayer(human_color, _prompt, _report, name="You"),
                human_color.opposite: EnginePlayer(human_color.opposite, engine, limits),
            }
            while not game.is_game_over():
                player = players[game.current_player]
                if player.is_human:
                    _show_position(game)
                    click.echo("Legal: " + " ".join(game.san(m) for m in game.legal_moves()))
                    if game.can_claim_draw():
                        click.echo("Threefold repetition: type 'draw' to claim.")
                try:
                    move = player.choose_move(game)
                except EngineMoveRejectedError as exc:
                    raise click.ClickException(str(exc)) from exc
                if move is None:
                    break
                san = game.san(move)
                game.apply_move(move)
                click.echo(f"{player.name}: {san}")
    except EngineError as exc:
        raise click.ClickException(f"Engine failure: {exc}") from exc

    _show_position(game)
    click.echo(f"Status: {game.status.name}  Result: {game.result().name}")


@cli.command()
@click.option("--fen", default=STARTING_FEN, help="Position to inspect.")
def moves(fen: str) -> None:
    """List the legal moves of a position in SAN and UCI."""
    game = _load_game(fen)
    for move in game.legal_moves():
        click.echo(f"{game.san(move)}\t{move.uci}")
    click.echo(f"{len(game.legal_moves())} moves, status {game.status.name}")


@cli.command()
@click.option("--fen", default=STARTING_FEN, help="Root position.")
@click.argument("depth", type=click.IntRange(min=0))
def perft(fen: str, depth: int) -> None:
    """Count leaf nodes of the legal-move tree."""
    try:
        board, state = parse_fen(fen)
    except ChessError as exc:
        raise click.BadParameter(str(exc), param_hint="--fen") from exc
    click.echo(str(count_leaves(board, state, depth)))


@cli.command()
@click.argument("pgn_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def replay(pgn_file: Path) -> None:
    """Replay every game of a PGN file and print its final position."""
    games = parse_pgn_games(pgn_file.read_text(encoding="utf-8"))
    failures = 0
    for number, parsed in enumerate(games, start=1):
        label = parsed.headers.get("White", "?") + " - " + parsed.headers.get("Black", "?")
        try:
            game = replay_pgn(parsed)
        except ChessError as exc:
            failures += 1
            click.echo(f"#{number} {label}: FAILED {exc}")
            continue
        click.echo(f"#{number} {label}: {game.fen()} [{game.status.name}]")
    _LOGGER.info("Replayed %d game(s), %d failed", len(games), failures)
    if failures:
        raise click.ClickException(f"{failures} of {len(games)} game(s) failed to replay")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
