"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich, plus the
human-readable size formatter shared by the list view and previews.
"""

from __future__ import annotations

import sys

from rich.console import Console

from zfsdu.core.theme import get_theme

# IEC units, largest last
_SIZE_UNITS: tuple[str, ...] = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB")

# Size tier thresholds in bytes
SIZE_MEDIUM = 50 * 1024**3
SIZE_LARGE = 200 * 1024**3
SIZE_HUGE = 1024**4


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def set_color_enabled(enabled: bool) -> None:
    """Enable or disable color output on the shared consoles.

    Args:
        enabled: False strips all colors from subsequent output.
    """
    console.no_color = not enabled
    err_console.no_color = not enabled


def format_size(size_bytes: int) -> str:
    """Format a byte count using binary (IEC) units.

    Always renders one decimal place, so 0 becomes ``"0.0 B"`` and
    1536 becomes ``"1.5 KiB"``.

    Args:
        size_bytes: Non-negative number of bytes.

    Returns:
        Human-readable size string.
    """
    size = float(size_bytes)
    index = 0
    while size >= 1024 and index < len(_SIZE_UNITS) - 1:
        size /= 1024
        index += 1
    return f"{size:.1f} {_SIZE_UNITS[index]}"


def size_style(size_bytes: int) -> str:
    """Return the theme style name for a size tier.

    Args:
        size_bytes: Number of bytes.

    Returns:
        One of ``size_huge``, ``size_large``, ``size_medium`` or ``size_small``.
    """
    if size_bytes >= SIZE_HUGE:
        return "size_huge"
    if size_bytes >= SIZE_LARGE:
        return "size_large"
    if size_bytes >= SIZE_MEDIUM:
        return "size_medium"
    return "size_small"


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
