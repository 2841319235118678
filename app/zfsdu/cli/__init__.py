"""CLI package for zfsdu.

This package contains the Typer application and its subcommands.
"""

from zfsdu.cli.main import app

__all__ = ["app"]
