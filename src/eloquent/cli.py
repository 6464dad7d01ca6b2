"""CLI for Eloquent."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import structlog
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from eloquent import __version__
from eloquent.core.config import SessionConfig, load_config, load_ideas_file
from eloquent.core.errors import ConfigurationError
from eloquent.models.idea import Idea
from eloquent.ranking.preference import Preference, parse_preference
from eloquent.session import RankingSession

YAML_SUFFIXES = {".yaml", ".yml"}
QUIT_ANSWERS = {"q", "quit"}
MIN_IDEAS = 2

# Configure structlog
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

app = typer.Typer(
    name="eloquent",
    help="Eloquent - Rank ideas by pairwise comparison with Elo ratings",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"eloquent v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
) -> None:
    """Eloquent CLI."""


def _build_session(source: Path, config_path: Path | None) -> RankingSession:
    """Build a session from a YAML config or a plain text ideas file."""
    if source.suffix.lower() in YAML_SUFFIXES:
        config = load_config(source)
    else:
        config = load_config(config_path) if config_path else SessionConfig()
        config.ideas.extend(load_ideas_file(source))

    if len(config.ideas) < MIN_IDEAS:
        raise ConfigurationError(
            f"Need at least {MIN_IDEAS} ideas to rank, found {len(config.ideas)}",
            "List more ideas in the config or ideas file.",
        )
    return RankingSession.from_config(config)


def _ask_preference(first: Idea, second: Idea) -> Preference | None:
    """Ask which idea is preferred. Returns None if the user wants to stop."""
    console.print(f"\n  [bold cyan]1[/bold cyan]  {escape(first.name)}")
    console.print(f"  [bold magenta]2[/bold magenta]  {escape(second.name)}")
    while True:
        try:
            answer = console.input("Prefer [1/2], 0 for no preference, q to stop: ")
        except EOFError:
            return None
        if answer.strip().lower() in QUIT_ANSWERS:
            return None
        try:
            return parse_preference(answer)
        except ValueError:
            console.print(f"[yellow]Not understood:[/yellow] {escape(repr(answer))}")


def _render_leaderboard(session: RankingSession) -> Table:
    table = Table(title="Ranking")
    table.add_column("#", justify="right")
    table.add_column("Idea")
    table.add_column("Elo", justify="right")
    table.add_column("Comparisons", justify="right")
    table.add_column("Cost", justify="right")

    for position, idea in enumerate(session.leaderboard(), start=1):
        cost = "" if idea.cost is None else f"{idea.cost:g}"
        table.add_row(
            str(position), escape(idea.name), f"{idea.elo:.1f}", str(idea.comparisons), cost
        )
    return table


def _run_rounds(session: RankingSession, rounds: int) -> None:
    for round_num in range(1, rounds + 1):
        console.print(f"\n[bold green]Round {round_num}/{rounds}[/bold green]")
        for first, second in session.next_round(round_num):
            preference = _ask_preference(first, second)
            if preference is None:
                console.print("[yellow]Stopping early.[/yellow]")
                return
            session.record(first, second, preference)


@app.command()
def rank(
    source: Annotated[
        Path, typer.Argument(help="YAML session config or text file with one idea per line")
    ],
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="YAML config for ranking settings"),
    ] = None,
    rounds: Annotated[int | None, typer.Option("--rounds", help="Number of rounds")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-V", help="Verbose output")] = False,
) -> None:
    """Rank ideas interactively by choosing between pairs.

    Args:
        source: YAML session config, or a text file listing ideas.
        config_path: YAML config providing ranking settings for a text ideas file.
        rounds: Override number of rounds.
        verbose: Enable verbose logging.
    """
    log_level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )

    try:
        session = _build_session(source, config_path)
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e
    except ConfigurationError as e:
        console.print(f"[red]{escape(str(e))}")
        raise typer.Exit(1) from e
    except Exception as e:
        console.print(f"[red]Invalid input:[/red] {escape(str(e))}")
        if verbose:
            console.print_exception()
        raise typer.Exit(1) from e

    total_rounds = rounds if rounds is not None else session.rounds
    console.print(f"[bold]Ranking {len(session.ideas)} ideas[/bold] over {total_rounds} rounds")

    _run_rounds(session, total_rounds)

    console.print(f"\n{session.total_comparisons} comparisons made.")
    console.print(_render_leaderboard(session))


@app.command()
def validate(
    config_path: Annotated[Path, typer.Argument(help="Path to config YAML file")],
) -> None:
    """Validate a configuration file without running.

    Args:
        config_path: Path to YAML configuration file.
    """
    try:
        config = load_config(config_path)
        console.print("[green]Configuration is valid![/green]")
        console.print(f"  Ideas: {len(config.ideas)}")
        console.print(f"  K-factor: {config.ranking.k_factor:g}")
        console.print(f"  Initial Elo: {config.ranking.initial_elo:g}")
        console.print(f"  Rounds: {config.resolve_rounds()}")
        console.print(f"  Seed: {config.seed}")

    except FileNotFoundError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e
    except ConfigurationError as e:
        console.print(f"[red]{escape(str(e))}")
        raise typer.Exit(1) from e
    except Exception as e:
        console.print(f"[red]Validation error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e


if __name__ == "__main__":
    app()
