"""
Common utilities for PyScholar CLI commands.
"""

import asyncio
import json

import typer
from rich.console import Console
from rich.table import Table

from pyscholar.fetcher import ScholarFetcher
from pyscholar.logger import get_logger

logger = get_logger("cli")

# Global state - will be set by main CLI
_debug_mode = False

_RICH_CONSOLE = Console()


def set_global_state(debug_mode: bool) -> None:
    """Set global state from the main CLI callback."""
    global _debug_mode
    _debug_mode = debug_mode


def get_fetcher() -> ScholarFetcher:
    """Create the fetcher used by a command invocation."""
    return ScholarFetcher()


def run(coro):
    """Run a fetcher coroutine to completion."""
    return asyncio.run(coro)


def _debug_print(message: str, level: str = "INFO"):
    """Print colored debug messages when debug mode is enabled."""
    if not _debug_mode:
        return

    console = Console(stderr=True)
    color_map = {
        "ERROR": "red",
        "WARNING": "yellow",
        "INFO": "blue",
        "SUCCESS": "green",
    }
    color = color_map.get(level.upper(), "white")
    console.print(f"[{level}] {message}", style=color)


def _handle_cli_exception(e: Exception) -> None:
    """
    Report an exception with a type-specific message and exit with status 1.

    Args:
        e: Exception to handle

    Raises:
        typer.Exit: Always, with exit code 1
    """
    from pyscholar.exceptions import InvalidRequestError
    from pyscholar.exceptions import NotFoundError
    from pyscholar.exceptions import ParseError
    from pyscholar.exceptions import PyScholarException
    from pyscholar.exceptions import TransportError

    if _debug_mode:
        logger.debug("Full traceback:", exc_info=True)

    if isinstance(e, TransportError):
        typer.echo(f"❌ Network Error: {e.message}", err=True)
        if e.status_code:
            typer.echo(f"   Status Code: {e.status_code}", err=True)
        if e.url:
            typer.echo(f"   URL: {e.url}", err=True)
        typer.echo("   The request can be retried later.", err=True)
    elif isinstance(e, InvalidRequestError):
        typer.echo(f"❌ Invalid Request: {e.message}", err=True)
        if e.field:
            typer.echo(f"   Field: {e.field}", err=True)
        if e.value:
            typer.echo(f"   Invalid value: {e.value}", err=True)
    elif isinstance(e, ParseError):
        typer.echo(f"❌ Parse Error: {e.message}", err=True)
        if e.page:
            typer.echo(f"   Page: {e.page}", err=True)
        typer.echo("   The page layout may have changed.", err=True)
    elif isinstance(e, NotFoundError):
        typer.echo(f"❌ Not Found: {e.message}", err=True)
        if e.resource:
            typer.echo(f"   Resource: {e.resource}", err=True)
    elif isinstance(e, PyScholarException):
        typer.echo(f"❌ Error: {e.message}", err=True)
        if e.details:
            typer.echo(f"   {e.details}", err=True)
    else:
        typer.echo(f"❌ Unexpected Error: {str(e)}", err=True)

    if isinstance(e, PyScholarException) and e.context:
        ctx = ", ".join(f"{k}={v}" for k, v in e.context.items())
        typer.echo(f"   Context: {ctx}", err=True)

    raise typer.Exit(code=1)


def _to_records(results):
    if isinstance(results, (list, tuple)):
        return [item.to_dict() for item in results]
    return results.to_dict()


def _output_results(results, json_path: str | None = None) -> None:
    """Write results as JSON to stdout or to ``json_path``."""
    payload = json.dumps(_to_records(results), indent=2, ensure_ascii=False)
    if json_path and json_path != "-":
        with open(json_path, "w", encoding="utf-8") as f:
            f.write(payload + "\n")
        count = len(results) if isinstance(results, (list, tuple)) else 1
        typer.echo(f"Saved {count} record(s) to {json_path}", err=True)
    else:
        typer.echo(payload)


def _output_table(results, columns: list[tuple[str, str]], title: str | None = None):
    """Render records as a rich table.

    Args:
        results: A record or a list of records
        columns: (attribute, header) pairs
        title: Optional table title
    """
    if not isinstance(results, (list, tuple)):
        results = [results]
    table = Table(title=title)
    for _, header in columns:
        table.add_column(header)
    for item in results:
        cells = []
        for attr, _ in columns:
            value = getattr(item, attr, "")
            if isinstance(value, (list, tuple)):
                value = ", ".join(str(v) for v in value)
            cells.append("" if value is None else str(value))
        table.add_row(*cells)
    _RICH_CONSOLE.print(table)
