"""Shared Rich display functions for deletion plans and results.

Provides the preview shown before a delete is confirmed and the
per-call results table shown afterwards.
"""

from rich.table import Table

from zfsdu.core.planner import PREVIEW_LIMIT, DeletionPlan, DeletionReport, PlanGroup
from zfsdu.models.dataset import DatasetKind
from zfsdu.utils.formatting import console, print_success, print_warning

_GROUP_TITLES: dict[DatasetKind, str] = {
    DatasetKind.SNAPSHOT: "Snapshots",
    DatasetKind.VOLUME: "Volumes",
    DatasetKind.FILESYSTEM: "Filesystems",
}

_GROUP_NOTES: dict[DatasetKind, str] = {
    DatasetKind.SNAPSHOT: "",
    DatasetKind.VOLUME: "[recursive]recursive: including its snapshots[/recursive]",
    DatasetKind.FILESYSTEM: (
        "[recursive]recursive: including ALL child filesystems, volumes and snapshots[/recursive]"
    ),
}


def _group_lines(group: PlanGroup) -> list[str]:
    """Return the preview lines of one group."""
    lines = [f"[{group.kind.value}]{name}[/{group.kind.value}]" for name in group.examples()]
    if group.has_more():
        lines.append(f"[muted]... and {group.count - PREVIEW_LIMIT} more[/muted]")
    return lines


def create_plan_table(plan: DeletionPlan, dry_run: bool = False) -> Table:
    """Create a Rich table previewing a deletion plan.

    One row per non-empty group with its count, up to five example
    names, and the recursion warning for volumes and filesystems.

    Args:
        plan: Plan to preview.
        dry_run: Whether destroys will only be simulated.

    Returns:
        Rich Table configured for the preview.
    """
    title = "Planned Deletions (Dry Run)" if dry_run else "Planned Deletions"
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        show_lines=True,
    )
    table.add_column("Kind", no_wrap=True)
    table.add_column("Count", justify="right", width=6)
    table.add_column("Entries")
    table.add_column("Note")

    for group in plan.groups():
        table.add_row(
            _GROUP_TITLES[group.kind],
            str(group.count),
            "\n".join(_group_lines(group)),
            _GROUP_NOTES[group.kind],
        )

    return table


def print_deletion_plan(plan: DeletionPlan, dry_run: bool = False) -> None:
    """Print the deletion preview and the recursion warning if any."""
    console.print()
    console.print(create_plan_table(plan, dry_run))
    if plan.needs_escalation:
        console.print(
            "[warning]Volumes and filesystems are removed with 'zfs destroy -r'.[/warning]"
        )


def create_results_table(report: DeletionReport) -> Table:
    """Create a Rich table with one row per destroy call.

    Args:
        report: Executed plan results.

    Returns:
        Rich Table configured for results display.
    """
    table = Table(
        title="Results",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=8, justify="center")
    table.add_column("Call", width=10)
    table.add_column("Target", overflow="fold")
    table.add_column("Details", overflow="fold")

    for result in report.results:
        if result.dry_run and result.success:
            status = "[info]DRY[/info]"
            details = result.message or ""
        elif result.success:
            status = "[success]OK[/success]"
            details = result.message or ""
        else:
            status = "[error]FAIL[/error]"
            details = result.error or "Unknown error"

        table.add_row(
            status,
            result.action.action_type.value,
            result.action.spec,
            f"[muted]{details}[/muted]",
        )

    return table


def print_deletion_report(report: DeletionReport) -> None:
    """Print per-call results followed by the aggregate outcome."""
    console.print(create_results_table(report))

    if report.success:
        print_success(f"Deletion finished: all {len(report.results)} call(s) succeeded.")
    else:
        print_warning(
            f"{report.failed_count} of {len(report.results)} call(s) failed. "
            "See the details above."
        )
