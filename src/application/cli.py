"""Command line entry point."""

import asyncio
import sys
from collections.abc import Coroutine
from pathlib import Path
from typing import Any

import click
from dotenv import load_dotenv
from loguru import logger
from pydantic import ValidationError

from application.logging_config import setup_logging
from application.orchestrator import CommandOrchestrator
from application.settings import ENV_PREFIX, Settings
from domain.exceptions import SolutionsBenchError
from services.report import print_rankings


def _run(coro: Coroutine[Any, Any, Any]) -> Any:
    try:
        return asyncio.run(coro)
    except (SolutionsBenchError, OSError) as e:
        logger.error(f"run error: {e}")
        sys.exit(1)


@click.group()
@click.option("--exercise", required=True, help="Exercise name")
@click.option("--track", default="go", show_default=True, help="Language track")
@click.option(
    "--download-dir",
    default="./solutions",
    show_default=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory for downloaded solutions",
)
@click.option(
    "--concurrency/--no-concurrency",
    default=True,
    show_default=True,
    help="Run tasks on a pool of workers instead of one at a time",
)
@click.option("--workers", type=int, default=None, help="Pool size (default: number of CPUs)")
@click.option(
    "--fetch-timeout", type=float, default=5.0, show_default=True, help="HTTP timeout in seconds"
)
@click.option(
    "--bench-timeout",
    type=float,
    default=600.0,
    show_default=True,
    help="Benchmark run timeout per solution in seconds",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug output")
@click.pass_context
def cli(
    ctx: click.Context,
    exercise: str,
    track: str,
    download_dir: Path,
    concurrency: bool,
    workers: int | None,
    fetch_timeout: float,
    bench_timeout: float,
    verbose: bool,
) -> None:
    """Discover, download and benchmark published solutions of an exercise."""
    try:
        settings = Settings(
            exercise=exercise,
            track=track,
            download_dir=download_dir,
            concurrency=concurrency,
            workers=workers,
            fetch_timeout=fetch_timeout,
            bench_timeout=bench_timeout,
            log_level="DEBUG" if verbose else "INFO",
        )
    except ValidationError as e:
        raise click.UsageError(str(e)) from e

    setup_logging(settings.log_level)
    ctx.obj = CommandOrchestrator(settings)


@cli.command()
@click.pass_obj
def total(orchestrator: CommandOrchestrator) -> None:
    """Calculate total number of published solutions."""
    count = _run(orchestrator.total())
    click.echo(count)


@cli.command()
@click.pass_obj
def download(orchestrator: CommandOrchestrator) -> None:
    """Download published solutions."""
    _run(orchestrator.download())


@cli.command()
@click.option(
    "--json",
    "json_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also save rankings to this JSON file",
)
@click.pass_obj
def bench(orchestrator: CommandOrchestrator, json_path: Path | None) -> None:
    """Bench downloaded solutions."""
    report = _run(orchestrator.bench(json_path))
    print_rankings(report)


@cli.command()
@click.pass_obj
def clean(orchestrator: CommandOrchestrator) -> None:
    """Remove downloaded solutions."""
    _run(orchestrator.clean())


def main() -> None:
    load_dotenv()
    cli(auto_envvar_prefix=ENV_PREFIX)


if __name__ == "__main__":
    main()
