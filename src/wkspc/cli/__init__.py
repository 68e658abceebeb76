"""CLI for wkspc."""

from wkspc.cli.main import app, main


__all__ = ["app", "main"]
