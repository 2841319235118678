"""Terminal prompts for the deletion protocol.

Implements the Prompter interface with Typer prompts and the Rich
display helpers. Ctrl-C or end of input at a prompt counts as "no".
"""

import typer

from zfsdu.cli.display import print_deletion_plan, print_deletion_report
from zfsdu.core.planner import DeletionPlan, DeletionReport, Prompter
from zfsdu.utils.formatting import print_info

# Answers accepted as yes; everything else declines
YES_ANSWERS: frozenset[str] = frozenset({"y", "yes"})


class TyperPrompter(Prompter):
    """Prompter reading answers from the terminal."""

    def show_plan(self, plan: DeletionPlan, dry_run: bool) -> None:
        """Print the deletion preview."""
        print_deletion_plan(plan, dry_run)

    def confirm(self, message: str) -> bool:
        """Ask a yes/no question defaulting to no.

        A single line is read. Anything but ``y`` or ``yes`` is a no;
        the question is never asked again.
        """
        try:
            answer = typer.prompt(f"\n{message} [y/N]", default="", show_default=False)
        except typer.Abort:
            return False
        return str(answer).strip().lower() in YES_ANSWERS

    def ask(self, message: str) -> str:
        """Ask for a line of text."""
        try:
            return str(typer.prompt(message, default="", show_default=False))
        except typer.Abort:
            return ""

    def show_report(self, report: DeletionReport) -> None:
        """Print per-call results and the summary."""
        print_deletion_report(report)

    def notify(self, message: str) -> None:
        """Print an informational message."""
        print_info(message)

    def pause(self) -> None:
        """Wait for Enter before the browser takes over the screen again."""
        try:
            typer.prompt("Press Enter to continue", default="", show_default=False)
        except typer.Abort:
            pass
