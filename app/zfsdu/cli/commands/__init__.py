"""CLI commands for zfsdu.

This package contains the subcommand implementations.
"""

from zfsdu.cli.commands import preview

__all__ = ["preview"]
