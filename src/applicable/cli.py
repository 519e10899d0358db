"""Command-line entry point for running the documented usage scenarios."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import load_app_config
from .demo import run_scenarios
from .utils.logging import CallLogger, setup_logging

app = typer.Typer(add_completion=False)
console = Console()


@app.command()
def demo(
    config: Optional[Path] = typer.Option(None, help="Path to a YAML config"),
    log_level: Optional[str] = typer.Option(None, help="Override the configured log level"),
) -> None:
    """Run each scenario and compare it with the manually built value."""

    cfg = load_app_config(config)
    setup_logging(level=log_level or cfg.logging.level, rich_tracebacks=cfg.logging.rich_tracebacks)

    results = run_scenarios(cfg.demo, CallLogger())

    table = Table(title="apply scenarios")
    table.add_column("scenario")
    table.add_column("result")
    table.add_column("expected")
    table.add_column("calls", justify="right")
    table.add_column("status")
    for res in results:
        table.add_row(
            res.name,
            repr(res.result),
            repr(res.expected),
            str(res.calls),
            "[green]ok[/green]" if res.ok else "[red]mismatch[/red]",
        )
    console.print(table)

    if not all(res.ok for res in results):
        raise typer.Exit(code=1)


@app.command()
def version() -> None:
    """Print the installed version."""

    console.print(__version__)


if __name__ == "__main__":
    app()
