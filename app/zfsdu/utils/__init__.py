"""Utility modules for zfsdu.

This module exports commonly used utility functions.
"""

from zfsdu.utils.formatting import (
    console,
    err_console,
    format_size,
    print_error,
    print_info,
    print_success,
    print_warning,
    size_style,
)
from zfsdu.utils.shell import CommandResult, command_exists, run_command, run_filter

__all__ = [
    "CommandResult",
    "command_exists",
    "console",
    "err_console",
    "format_size",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
    "run_filter",
    "size_style",
]
