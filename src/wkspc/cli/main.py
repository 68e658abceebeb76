"""CLI commands for wkspc."""

from __future__ import annotations

import logging

import typer
from rich.console import Console

from wkspc.cli.formatting import (
    _bootstrap_lines,
    _format_state_with_color,
    _paths_table,
    _settings_table,
)
from wkspc.core.exceptions import WkspcError
from wkspc.core.models import Visibility


app = typer.Typer(
    name="wkspc",
    help="Locate and bootstrap project workspaces.",
    no_args_is_help=True,
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _fail(error: WkspcError) -> typer.Exit:
    """Report a library error with its hint and return the exit to raise."""
    typer.echo(f"Error: {error}", err=True)
    if error.recovery_hint:
        typer.echo(f"Hint: {error.recovery_hint}", err=True)
    return typer.Exit(1)


@app.callback()
def configure(
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase log output (-v for INFO, -vv for DEBUG).",
    ),
) -> None:
    """Locate and bootstrap project workspaces."""
    from wkspc.config import LOG_LEVEL_KEY, default_store

    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        name = default_store().get_string(LOG_LEVEL_KEY).upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            typer.echo(f"Error: unknown log level '{name}'", err=True)
            raise typer.Exit(1)

    logging.basicConfig(format=LOG_FORMAT, level=level)
    logging.getLogger("wkspc").setLevel(level)


@app.command()
def init(
    directory: str | None = typer.Argument(
        None,
        help="Workspace root to initialize. Defaults to current directory.",
    ),
) -> None:
    """Set the workspace root and create its metadata layout."""
    from wkspc import Workspace
    from wkspc.core.resolver import resolve_start

    ws = Workspace.default()
    try:
        result = ws.bootstrap(resolve_start(directory))
    except WkspcError as e:
        raise _fail(e) from None

    console = Console()
    for state, path in _bootstrap_lines(result):
        line = _format_state_with_color(state)
        line.pad_left(7 - len(state))
        line.append(f"  {path}")
        console.print(line, soft_wrap=True)

    try:
        result.raise_for_failure()
    except WkspcError as e:
        raise _fail(e) from None

    typer.echo(f"Workspace ready: {result.root}")


@app.command()
def root(
    start: str | None = typer.Option(
        None,
        "--from",
        "-f",
        help="Directory to search from. Defaults to current directory.",
    ),
) -> None:
    """Print the root of the enclosing workspace."""
    from wkspc import Workspace

    try:
        found = Workspace.default().root(start)
    except WkspcError as e:
        raise _fail(e) from None

    if found is None:
        typer.echo("No workspace found. Run 'wkspc init' to create one.")
        raise typer.Exit(1)
    typer.echo(str(found))


@app.command()
def paths(
    start: str | None = typer.Option(
        None,
        "--from",
        "-f",
        help="Directory to search from. Defaults to current directory.",
    ),
) -> None:
    """Show the workspace root and the paths derived from it."""
    from wkspc import Workspace

    ws = Workspace.default()
    try:
        ws.root(start)
        context = ws.context()
    except WkspcError as e:
        raise _fail(e) from None

    if not context.exists:
        typer.echo("No workspace found. Run 'wkspc init' to create one.")
        raise typer.Exit(1)

    console = Console(force_terminal=True)
    console.print(_paths_table(context))


@app.command()
def settings(
    show_all: bool = typer.Option(
        False,
        "--all",
        "-a",
        help="Include internal settings.",
    ),
) -> None:
    """List registered settings and their effective values."""
    from wkspc.config import default_store

    store = default_store()
    visible = None if show_all else (Visibility.NORMAL_USE, Visibility.EXPERT_USE)
    registered = list(store.settings(visible))
    values = {s.key: store.get_string(s.key) for s in registered}

    console = Console(force_terminal=True)
    console.print(_settings_table(registered, values))


def main() -> None:
    """Entry point for the CLI."""
    app()
