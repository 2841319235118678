"""Deletion planning and execution.

Turns the marked rows of one picker cycle into grouped destroy calls:

1. partition the selection into snapshots, volumes and filesystems
2. show a preview and ask for confirmation
3. ask for a typed confirmation word when anything recursive is selected
4. destroy snapshots per parent in batches, then volumes, then filesystems
5. report one aggregate outcome

A failing destroy call never stops the remaining calls.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from zfsdu.models.action import (
    DestroyAction,
    DestroyResult,
    create_recursive_action,
    create_snapshot_batch_action,
)
from zfsdu.models.dataset import DatasetKind, split_snapshot_name
from zfsdu.models.row import Row
from zfsdu.operators.base import Operator

logger = logging.getLogger(__name__)

# Upper bound of snapshot labels per zfs destroy call
MAX_SNAPSHOT_BATCH = 128

# Example names shown per group in the preview
PREVIEW_LIMIT = 5

# Word that must be typed to confirm recursive destroys
ESCALATION_WORD = "DELETE"


@dataclass(frozen=True, slots=True)
class SnapshotBatch:
    """Snapshot labels of one parent destroyed in a single call."""

    parent: str
    labels: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class PlanGroup:
    """One kind of selected entries, for the preview.

    Attributes:
        kind: Dataset kind of the group.
        names: Selected identities in selection order.
        recursive: Whether destroying them also removes descendants.
    """

    kind: DatasetKind
    names: tuple[str, ...]
    recursive: bool

    @property
    def count(self) -> int:
        """Number of selected entries."""
        return len(self.names)

    def examples(self, limit: int = PREVIEW_LIMIT) -> tuple[str, ...]:
        """Return at most ``limit`` names to show."""
        return self.names[:limit]

    def has_more(self, limit: int = PREVIEW_LIMIT) -> bool:
        """Check if names were left out of the examples."""
        return self.count > limit


@dataclass(frozen=True, slots=True)
class DeletionPlan:
    """A marked selection partitioned by dataset kind.

    Each tuple is de-duplicated and keeps the selection order.
    """

    snapshots: tuple[str, ...] = ()
    volumes: tuple[str, ...] = ()
    filesystems: tuple[str, ...] = ()

    @classmethod
    def from_rows(cls, rows: Iterable[Row]) -> DeletionPlan:
        """Partition marked rows by kind."""
        groups: dict[DatasetKind, dict[str, None]] = {kind: {} for kind in DatasetKind}
        for row in rows:
            groups[row.kind][row.name] = None
        return cls(
            snapshots=tuple(groups[DatasetKind.SNAPSHOT]),
            volumes=tuple(groups[DatasetKind.VOLUME]),
            filesystems=tuple(groups[DatasetKind.FILESYSTEM]),
        )

    @property
    def is_empty(self) -> bool:
        """Check if nothing was selected."""
        return not (self.snapshots or self.volumes or self.filesystems)

    @property
    def needs_escalation(self) -> bool:
        """Check if the plan contains recursive destroys."""
        return bool(self.volumes or self.filesystems)

    def groups(self) -> list[PlanGroup]:
        """Return the non-empty groups in execution order."""
        candidates = [
            PlanGroup(DatasetKind.SNAPSHOT, self.snapshots, recursive=False),
            PlanGroup(DatasetKind.VOLUME, self.volumes, recursive=True),
            PlanGroup(DatasetKind.FILESYSTEM, self.filesystems, recursive=True),
        ]
        return [g for g in candidates if g.names]

    def snapshot_batches(self, max_batch: int = MAX_SNAPSHOT_BATCH) -> list[SnapshotBatch]:
        """Group snapshot labels by parent and split them into batches.

        Args:
            max_batch: Maximum labels per batch.

        Returns:
            Batches in order of first appearance of each parent.
        """
        if max_batch < 1:
            msg = f"max_batch must be positive, got {max_batch}"
            raise ValueError(msg)

        by_parent: dict[str, list[str]] = {}
        for name in self.snapshots:
            parent, label = split_snapshot_name(name)
            by_parent.setdefault(parent, []).append(label)

        batches: list[SnapshotBatch] = []
        for parent, labels in by_parent.items():
            for start in range(0, len(labels), max_batch):
                batches.append(SnapshotBatch(parent, tuple(labels[start : start + max_batch])))
        return batches

    def actions(self, max_batch: int = MAX_SNAPSHOT_BATCH) -> list[DestroyAction]:
        """Return every destroy call of the plan in execution order."""
        actions = [
            create_snapshot_batch_action(batch.parent, list(batch.labels))
            for batch in self.snapshot_batches(max_batch)
        ]
        actions.extend(create_recursive_action(name) for name in self.volumes)
        actions.extend(create_recursive_action(name) for name in self.filesystems)
        return actions


@dataclass(frozen=True, slots=True)
class DeletionReport:
    """Per-call results of an executed plan."""

    results: tuple[DestroyResult, ...]

    @property
    def success(self) -> bool:
        """True only if every call succeeded."""
        return all(r.success for r in self.results)

    @property
    def failed_count(self) -> int:
        """Number of failed calls."""
        return sum(1 for r in self.results if r.failed)


class DeletionStatus(Enum):
    """Final state of one delete action."""

    NOTHING_SELECTED = "nothing_selected"
    ABORTED = "aborted"
    COMPLETED = "completed"
    PARTIAL_FAILURE = "partial_failure"


@dataclass(frozen=True, slots=True)
class DeletionOutcome:
    """What happened when the planner ran.

    Attributes:
        status: Final state.
        plan: The partitioned selection.
        report: Call results, None when nothing was executed.
    """

    status: DeletionStatus
    plan: DeletionPlan
    report: DeletionReport | None = None

    @property
    def executed(self) -> bool:
        """Check if any destroy call was issued."""
        return self.report is not None


class Prompter(ABC):
    """Operator interaction used by the planner and the session."""

    @abstractmethod
    def show_plan(self, plan: DeletionPlan, dry_run: bool) -> None:
        """Present the planned deletions."""

    @abstractmethod
    def confirm(self, message: str) -> bool:
        """Ask a yes/no question; anything but an explicit yes is no."""

    @abstractmethod
    def ask(self, message: str) -> str:
        """Ask for free text input."""

    @abstractmethod
    def show_report(self, report: DeletionReport) -> None:
        """Present per-call results and the aggregate outcome."""

    @abstractmethod
    def notify(self, message: str) -> None:
        """Show a short informational message."""

    @abstractmethod
    def pause(self) -> None:
        """Wait until the operator is ready to continue."""


def execute_plan(plan: DeletionPlan, operator: Operator) -> DeletionReport:
    """Issue every destroy call of a plan and collect the results."""
    results = operator.execute(plan.actions())
    return DeletionReport(results=tuple(results))


class DeletionPlanner:
    """Runs the confirm-then-destroy protocol for one selection."""

    def __init__(self, operator: Operator, prompter: Prompter) -> None:
        self._operator = operator
        self._prompter = prompter

    def run(self, rows: Iterable[Row]) -> DeletionOutcome:
        """Plan, confirm and execute the deletion of marked rows.

        Args:
            rows: Rows marked in the current picker cycle.

        Returns:
            DeletionOutcome describing what happened.
        """
        plan = DeletionPlan.from_rows(rows)

        if plan.is_empty:
            self._prompter.notify("Nothing selected for deletion.")
            return DeletionOutcome(DeletionStatus.NOTHING_SELECTED, plan)

        self._prompter.show_plan(plan, self._operator.dry_run)

        if not self._prompter.confirm("Really destroy the selected entries?"):
            self._prompter.notify("Aborted.")
            return DeletionOutcome(DeletionStatus.ABORTED, plan)

        if plan.needs_escalation:
            answer = self._prompter.ask(
                f"Volumes/filesystems are destroyed recursively. Type {ESCALATION_WORD} to continue"
            )
            # A typo counts as a decline
            if answer != ESCALATION_WORD:
                self._prompter.notify("Aborted.")
                return DeletionOutcome(DeletionStatus.ABORTED, plan)

        logger.info(
            "Destroying %d snapshot(s), %d volume(s), %d filesystem(s)",
            len(plan.snapshots),
            len(plan.volumes),
            len(plan.filesystems),
        )
        report = execute_plan(plan, self._operator)
        self._prompter.show_report(report)

        status = DeletionStatus.COMPLETED if report.success else DeletionStatus.PARTIAL_FAILURE
        return DeletionOutcome(status, plan, report)
