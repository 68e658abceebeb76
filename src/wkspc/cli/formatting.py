"""Shared formatting helpers for CLI commands."""

from __future__ import annotations

from dataclasses import fields
from typing import TYPE_CHECKING

from rich.table import Table
from rich.text import Text


if TYPE_CHECKING:
    from collections.abc import Iterable

    from wkspc.core.models import BootstrapResult, Setting, WorkspaceContext


_STATE_COLORS = {
    "created": "green",
    "ok": "",
    "failed": "red",
}


def _format_state_with_color(state: str) -> Text:
    """Format a bootstrap state ("created", "ok" or "failed") with color."""
    color = _STATE_COLORS.get(state, "")
    return Text(state, style=color) if color else Text(state)


def _bootstrap_lines(result: BootstrapResult) -> list[tuple[str, str]]:
    """Return (state, path) pairs for each step of a bootstrap run.

    Mirrors the order steps ran in; a failed step is listed last.
    """
    lines = [
        ("created" if outcome.created else "ok", str(outcome.path))
        for outcome in result.completed
    ]
    if result.failed_step is not None:
        lines.append(("failed", str(result.failed_path)))
    return lines


def _paths_table(context: WorkspaceContext) -> Table:
    """Build a table of the workspace root and derived paths."""
    table = Table()
    table.add_column("Name", no_wrap=True)
    table.add_column("Path")
    for f in fields(context):
        value = getattr(context, f.name)
        table.add_row(f.name, str(value) if value is not None else "")
    return table


def _settings_table(settings: Iterable[Setting], values: dict[str, str]) -> Table:
    """Build a table of settings with their effective values."""
    table = Table()
    table.add_column("Key", no_wrap=True)
    table.add_column("Value")
    table.add_column("Class")
    table.add_column("Description")
    for setting in settings:
        table.add_row(
            str(setting.key),
            values.get(setting.key, ""),
            setting.mutability.value,
            setting.description,
        )
    return table
