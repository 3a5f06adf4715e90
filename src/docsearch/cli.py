"""Command line interface for docsearch."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from docsearch.config import AppConfig
from docsearch.index.indexer import Indexer
from docsearch.index.search import Inspector
from docsearch.index.storage import SnapshotError, SnapshotStore


console = Console()
err_console = Console(stderr=True)
app = typer.Typer(help="docsearch - term-frequency indexing for markup documents")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]ERROR:[/red] {escape(message)}", highlight=False, soft_wrap=True)
    raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Index a directory of markup files or inspect a saved index."""
    if ctx.invoked_subcommand is None:
        _fail("no subcommand is provided")


@app.command()
def index(
    directory: Path = typer.Argument(..., help="Directory of markup documents to index."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Index snapshot path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Index every document under DIRECTORY."""
    _setup_logging(verbose)
    config = AppConfig(index_path=output)
    resolved = config.resolve_index_path(Path.cwd())

    indexer = Indexer(SnapshotStore(resolved), top_n=config.top_n)
    try:
        stats = indexer.index(directory)
    except OSError as exc:
        _fail(str(exc))

    console.print(
        f"Indexed: {stats.indexed}, failed: {stats.failed}, "
        f"skipped directories: {stats.skipped_dirs}"
    )
    console.print(f"Saved index to [bold]{escape(str(resolved))}[/bold]", soft_wrap=True)


@app.command()
def search(
    snapshot: Path = typer.Argument(..., help="Index snapshot to inspect."),
    top: int = typer.Option(0, "--top", help="Show the N most frequent terms"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Report statistics for a saved index."""
    _setup_logging(verbose)
    inspector = Inspector(SnapshotStore(snapshot), top_n=max(top, 0))
    try:
        summary = inspector.inspect()
    except SnapshotError as exc:
        _fail(str(exc))

    console.print(
        f"{escape(str(snapshot))} contains {summary.documents} documents",
        highlight=False,
        soft_wrap=True,
    )
    console.print(
        f"Unique terms: {summary.unique_terms}, total terms: {summary.total_terms}"
    )
    if not summary.top_terms:
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Term")
    table.add_column("Count", justify="right")
    for term, count in summary.top_terms:
        table.add_row(escape(term), str(count))

    console.print(table)
