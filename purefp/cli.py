"""Command-line entry point: print the FizzBuzz overlay or a mapped range of squares."""

from __future__ import annotations

import json
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from purefp.board import evaluate_boards, square
from purefp.config import Settings
from purefp.core.contracts import validate_fizzbuzz_report, validate_mapping_report
from purefp.core.domain import FizzBuzzReport, MappingReport
from purefp.fizzbuzz import DEFAULT_COUNT, fizzbuzz_lines
from purefp.logger import get_logger, setup_logger
from purefp.parallel import ExecutorKind, MapperError, MapStrategy, resolve_chunk_size

app = typer.Typer(
    no_args_is_help=True,
    help="Pure-function demonstrations: parallel mapping and monoidal FizzBuzz.",
)

logger = get_logger(__name__)


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Override LOG_LEVEL (DEBUG, INFO, WARNING, ...)."
    ),
) -> None:
    try:
        settings = Settings()
    except ValidationError as exc:
        typer.echo(f"error: invalid environment settings\n{exc}", err=True)
        raise typer.Exit(code=2)
    setup_logger(level=log_level or settings.log_level)
    ctx.obj = settings


@app.command("fizzbuzz")
def fizzbuzz_command(
    count: int = typer.Option(DEFAULT_COUNT, "--count", "-n", min=0, help="Number of lines."),
    as_json: bool = typer.Option(False, "--json", help="Emit a fizzbuzz_report JSON document."),
) -> None:
    """Print the FizzBuzz overlay sequence, one element per line."""

    lines = fizzbuzz_lines(count)
    if as_json:
        data = FizzBuzzReport(count=count, lines=lines).model_dump(mode="json")
        validate_fizzbuzz_report(data)
        typer.echo(json.dumps(data))
        return
    for line in lines:
        typer.echo(line)


@app.command("squares")
def squares_command(
    ctx: typer.Context,
    upto: int = typer.Option(10, "--upto", "-n", min=0, help="Map over 1..N."),
    strategy: MapStrategy = typer.Option(
        MapStrategy.SEQUENTIAL, "--strategy", case_sensitive=False, help="Execution strategy."
    ),
    chunk_size: Optional[int] = typer.Option(None, "--chunk-size", min=1, help="Elements per chunk."),
    workers: Optional[int] = typer.Option(None, "--workers", min=1, help="Worker pool size."),
    executor: Optional[ExecutorKind] = typer.Option(
        None, "--executor", case_sensitive=False, help="Worker pool kind (parallel only)."
    ),
    table: bool = typer.Option(False, "--table", help="Render input/value pairs as a table."),
    as_json: bool = typer.Option(False, "--json", help="Emit a mapping_report JSON document."),
) -> None:
    """Square 1..N with the chosen strategy and print the ordered results."""

    settings: Settings = ctx.obj
    config = settings.mapper_config(
        max_workers=workers, chunk_size=chunk_size, executor=executor
    )
    boards = range(1, upto + 1)

    try:
        pairs = evaluate_boards(boards, square, strategy=strategy, config=config)
    except MapperError as exc:
        logger.error("squares failed: %s", exc)
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1)

    if as_json:
        parallel = strategy == MapStrategy.PARALLEL
        report = MappingReport(
            function=getattr(square, "__name__", "square"),
            strategy=strategy,
            executor=config.executor if parallel else None,
            max_workers=config.resolved_workers() if parallel else None,
            chunk_size=(
                resolve_chunk_size(len(pairs), config.resolved_workers(), config.chunk_size)
                if parallel
                else None
            ),
            count=len(pairs),
            inputs=[pair.board for pair in pairs],
            outputs=[pair.value for pair in pairs],
        )
        data = report.model_dump(mode="json")
        validate_mapping_report(data)
        typer.echo(json.dumps(data))
        return

    if table:
        view = Table(title=f"square over 1..{upto} ({strategy.value})")
        view.add_column("Input", style="bright_green", justify="right")
        view.add_column("Value", style="white", justify="right")
        for pair in pairs:
            view.add_row(str(pair.board), str(pair.value))
        Console().print(view)
        return

    for pair in pairs:
        typer.echo(str(pair.value))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
