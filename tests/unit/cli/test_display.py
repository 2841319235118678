"""Unit tests for deletion plan and result display."""

import io
from unittest.mock import patch

from rich.console import Console
from rich.table import Table
from zfsdu.cli.display import (
    create_plan_table,
    create_results_table,
    print_deletion_plan,
    print_deletion_report,
)
from zfsdu.core.planner import DeletionPlan, DeletionReport
from zfsdu.core.theme import ThemeColors, get_rich_theme
from zfsdu.models.action import DestroyResult, create_recursive_action


def _render(table: Table) -> str:
    out = Console(
        theme=get_rich_theme(ThemeColors()),
        file=io.StringIO(),
        width=200,
        record=True,
    )
    out.print(table)
    return out.export_text()


class TestPlanTable:
    """Tests for create_plan_table."""

    def test_one_row_per_group(self) -> None:
        """Each non-empty kind gets one row."""
        plan = DeletionPlan(snapshots=("tank@a",), filesystems=("tank/fs",))

        table = create_plan_table(plan)

        assert table.row_count == 2
        assert table.title == "Planned Deletions"

    def test_dry_run_title(self) -> None:
        """Dry runs are labelled in the title."""
        table = create_plan_table(DeletionPlan(volumes=("tank/v",)), dry_run=True)
        assert table.title == "Planned Deletions (Dry Run)"

    def test_examples_are_truncated(self) -> None:
        """At most five names are listed, the rest is counted."""
        plan = DeletionPlan(snapshots=tuple(f"tank@s{i}" for i in range(7)))

        text = _render(create_plan_table(plan))

        assert "tank@s4" in text
        assert "tank@s5" not in text
        assert "... and 2 more" in text

    def test_recursive_warning(self) -> None:
        """Filesystems warn that children are removed too."""
        text = _render(create_plan_table(DeletionPlan(filesystems=("tank/fs",))))
        assert "ALL child filesystems" in text

    def test_print_plan_warns_about_recursion(self) -> None:
        """The -r warning is printed only for recursive plans."""
        with patch("zfsdu.cli.display.console") as mock_console:
            print_deletion_plan(DeletionPlan(volumes=("tank/v",)))
        printed = [str(c.args[0]) for c in mock_console.print.call_args_list if c.args]
        assert any("zfs destroy -r" in p for p in printed)

        with patch("zfsdu.cli.display.console") as mock_console:
            print_deletion_plan(DeletionPlan(snapshots=("tank@a",)))
        printed = [str(c.args[0]) for c in mock_console.print.call_args_list if c.args]
        assert not any("zfs destroy -r" in p for p in printed)


class TestResultsTable:
    """Tests for the results table and summary."""

    def _report(self) -> DeletionReport:
        return DeletionReport(
            results=(
                DestroyResult(action=create_recursive_action("tank/a"), success=True),
                DestroyResult(
                    action=create_recursive_action("tank/b"),
                    success=False,
                    error="dataset is busy",
                ),
            )
        )

    def test_rows_show_status_and_error(self) -> None:
        """Each call is listed with its status."""
        text = _render(create_results_table(self._report()))

        assert "OK" in text
        assert "FAIL" in text
        assert "dataset is busy" in text

    def test_dry_run_status(self) -> None:
        """Simulated calls are marked DRY."""
        report = DeletionReport(
            results=(
                DestroyResult(
                    action=create_recursive_action("tank/a"),
                    success=True,
                    dry_run=True,
                ),
            )
        )
        assert "DRY" in _render(create_results_table(report))

    def test_summary_on_failure(self) -> None:
        """A failed call produces a warning summary."""
        with (
            patch("zfsdu.cli.display.console"),
            patch("zfsdu.cli.display.print_warning") as mock_warning,
            patch("zfsdu.cli.display.print_success") as mock_success,
        ):
            print_deletion_report(self._report())

        mock_success.assert_not_called()
        assert "1 of 2 call(s) failed" in mock_warning.call_args.args[0]

    def test_summary_on_success(self) -> None:
        """All calls succeeding produces a success summary."""
        report = DeletionReport(
            results=(DestroyResult(action=create_recursive_action("tank/a"), success=True),)
        )
        with (
            patch("zfsdu.cli.display.console"),
            patch("zfsdu.cli.display.print_success") as mock_success,
        ):
            print_deletion_report(report)

        assert "all 1 call(s) succeeded" in mock_success.call_args.args[0]
