"""CLI entry point: locate, show, snapshot, restore."""

import json
import logging
from pathlib import Path
from typing import Optional

import typer

from esqldiag import __version__
from esqldiag.diagnostics import EntitySqlError, ErrorContext
from esqldiag.errors import EntityError
from esqldiag.normalizer import normalize
from esqldiag.position import resolve
from esqldiag.resources import load_strings, set_strings
from esqldiag.state import DiagnosticSnapshot

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="esqldiag",
    help="Locate errors in query text and format compiler error messages.",
)


def _load_source(path: Path) -> str:
    if not path.exists():
        typer.echo(f"Error: file not found: {path}", err=True)
        raise typer.Exit(1)
    # newline="" keeps CR LF pairs so offsets match the raw text.
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def _build_error(
    file: Path, offset: int, description: str, label: str, resource_key: bool
) -> EntitySqlError:
    source = _load_source(file)
    ctx = ErrorContext(source, offset, label, resource_key)
    try:
        return EntitySqlError.from_context(ctx, description)
    except (ValueError, EntityError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("locate")
def locate_cmd(
    file: Path = typer.Argument(..., help="Query text file"),
    offset: int = typer.Option(..., "--offset", "-o", help="0-based character offset of the error"),
    description: str = typer.Option("Syntax error", "--description", "-d", help="Error description"),
    label: str = typer.Option("", "--label", "-l", help="Context label"),
    resource_key: bool = typer.Option(False, "--resource-key", help="Treat --label as a resource key"),
):
    """Print the formatted error message and its line/column."""
    error = _build_error(file, offset, description, label, resource_key)
    typer.echo(error.message)
    typer.echo(f"line: {error.line}")
    typer.echo(f"column: {error.column}")


@app.command("show")
def show_cmd(
    file: Path = typer.Argument(..., help="Query text file"),
    offset: int = typer.Option(..., "--offset", "-o", help="0-based character offset of the error"),
):
    """Print the offending line of the normalized query with a caret under the error."""
    source = _load_source(file)
    text = normalize(source)
    try:
        position = resolve(text, offset, text_length=len(source))
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    lines = text.split("\n")
    current = lines[position.line - 1] if position.line <= len(lines) else ""
    prefix = f"{position.line} | "
    typer.echo(f"{prefix}{current}")
    typer.echo(" " * (len(prefix) + position.column - 1) + "^")


@app.command("snapshot")
def snapshot_cmd(
    file: Path = typer.Argument(..., help="Query text file"),
    offset: int = typer.Option(..., "--offset", "-o", help="0-based character offset of the error"),
    description: str = typer.Option("Syntax error", "--description", "-d", help="Error description"),
    label: str = typer.Option("", "--label", "-l", help="Context label"),
    resource_key: bool = typer.Option(False, "--resource-key", help="Treat --label as a resource key"),
):
    """Emit the error's diagnostic snapshot as JSON."""
    error = _build_error(file, offset, description, label, resource_key)
    typer.echo(json.dumps(error.snapshot().to_dict(), indent=2, ensure_ascii=False))


@app.command("restore")
def restore_cmd(file: Path = typer.Argument(..., help="Snapshot JSON file")):
    """Rebuild an error from a snapshot and print its fields."""
    raw = _load_source(file)
    try:
        snapshot = DiagnosticSnapshot.from_dict(json.loads(raw))
    except (ValueError, AttributeError) as e:
        typer.echo(f"Error: invalid snapshot: {e}", err=True)
        raise typer.Exit(1)
    error = EntitySqlError.from_snapshot(snapshot)
    typer.echo(error.message)
    typer.echo(f"description: {error.description}")
    typer.echo(f"context: {error.context}")
    typer.echo(f"line: {error.line}")
    typer.echo(f"column: {error.column}")


def _version_callback(value: bool):
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main(
    locale: Optional[str] = typer.Option(None, "--locale", help="Locale of the message strings"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version"
    ),
):
    """esqldiag: query error locations and messages."""
    if verbose:
        logging.basicConfig(
            format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S %z",
            level=logging.DEBUG,
        )
    try:
        set_strings(load_strings(locale))
    except EntityError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    logger.debug("Using %s message strings", locale or "default")


if __name__ == "__main__":
    app()
