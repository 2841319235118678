"""Main CLI application entry point.

Defines the Typer application. Without a subcommand it starts the
interactive browser.
"""

import logging
import shlex
import sys
from typing import Annotated

import typer
from rich.logging import RichHandler

from zfsdu import __version__
from zfsdu.cli.commands import preview
from zfsdu.cli.prompts import TyperPrompter
from zfsdu.cli.types import ModeChoice
from zfsdu.core.listing import ListBuilder
from zfsdu.core.navigation import SessionContext
from zfsdu.core.planner import DeletionPlanner
from zfsdu.core.session import Session
from zfsdu.operators.zfs import ZfsOperator
from zfsdu.picker.base import Picker
from zfsdu.picker.fzf import FzfPicker
from zfsdu.picker.render import RowRenderer
from zfsdu.scanners.base import Scanner
from zfsdu.scanners.zfs import ZfsScanner
from zfsdu.utils.formatting import err_console, print_error, set_color_enabled

app = typer.Typer(
    name="zfsdu",
    help="ncdu-like browser for ZFS filesystems, volumes and snapshots.",
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"zfsdu version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route log records to stderr through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def preview_command(color: bool) -> str:
    """Build the fzf preview command that calls ``zfsdu preview``."""
    color_flag = "--color" if color else "--no-color"
    return f"{shlex.quote(sys.executable)} -m zfsdu preview {color_flag} {{2}} {{3}}"


def build_session(
    context: SessionContext,
    *,
    color: bool = True,
    dry_run: bool = False,
) -> Session:
    """Wire the ZFS adapters, fzf picker and prompts into a session."""
    prompter = TyperPrompter()
    picker = FzfPicker(
        renderer=RowRenderer(color=color),
        preview_command=preview_command(color),
    )
    return Session(
        context=context,
        builder=ListBuilder(ZfsScanner()),
        picker=picker,
        planner=DeletionPlanner(ZfsOperator(dry_run=dry_run), prompter),
        prompter=prompter,
    )


def _require_tools() -> None:
    """Exit if the zfs or fzf command is missing."""
    adapters: dict[str, Scanner | Picker] = {"zfs": ZfsScanner(), "fzf": FzfPicker()}
    missing = [tool for tool, adapter in adapters.items() if not adapter.is_available()]
    if missing:
        print_error(f"Missing required command(s): {', '.join(missing)}")
        raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    dataset: Annotated[
        str | None,
        typer.Option(
            "--dataset",
            "-d",
            help="Focus on DATASET (shows it and its level-1 filesystems).",
        ),
    ] = None,
    mode: Annotated[
        ModeChoice,
        typer.Option(
            "--mode",
            "-m",
            help="Snapshot size shown and sorted on.",
            case_sensitive=False,
        ),
    ] = ModeChoice.USED,
    hide_zero: Annotated[
        bool,
        typer.Option(
            "--hide-zero/--show-zero",
            help="Hide snapshots using 0 B (only with --mode used).",
        ),
    ] = False,
    color: Annotated[
        bool,
        typer.Option("--color/--no-color", help="Colorize the output."),
    ] = True,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Simulate deletions with 'zfs destroy -n'.",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
) -> None:
    """zfsdu - browse ZFS space usage and clean up snapshots.

    [bold]Keys:[/bold] Enter/→ open or close, Backspace/← go back, Space mark,
    d delete marked rows (the cursor row if none), r toggle used/referenced,
    z toggle 0 B snapshots, q/Esc quit.
    """
    configure_logging(verbose)
    set_color_enabled(color)

    if ctx.invoked_subcommand is not None:
        return

    _require_tools()

    context = SessionContext.start(
        focus=dataset,
        size_metric=mode.metric,
        hide_zero_snapshots=hide_zero,
    )
    session = build_session(context, color=color, dry_run=dry_run)

    try:
        session.run()
    except KeyboardInterrupt:
        raise typer.Exit(code=130) from None


app.command("preview", hidden=True)(preview.preview)


if __name__ == "__main__":
    app()
