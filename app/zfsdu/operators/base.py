"""Abstract base class for destroy operators.

This module defines the Operator interface used by the deletion
planner to issue destructive calls against the storage system.
"""

from abc import ABC, abstractmethod

from zfsdu.models.action import DestroyAction, DestroyActionType, DestroyResult


class Operator(ABC):
    """Abstract base class for all destroy operators.

    Every call is independent: a failing call is reported through its
    DestroyResult and never prevents the following calls.

    Attributes:
        dry_run: If True, only simulate destroys without executing them.

    Example:
        >>> operator = ZfsOperator(dry_run=True)
        >>> result = operator.destroy_snapshots("tank/data", ["daily-01"])
        >>> print(result.success)
    """

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the operator.

        Args:
            dry_run: If True, only simulate destroys without executing them.
        """
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        """Check if operator is in dry-run mode."""
        return self._dry_run

    @abstractmethod
    def destroy_snapshots(self, parent: str, labels: list[str]) -> DestroyResult:
        """Destroy several snapshots of one dataset in a single call.

        Args:
            parent: Filesystem or volume owning the snapshots.
            labels: Snapshot labels (without ``@``), at least one.

        Returns:
            DestroyResult for the whole batch.
        """

    @abstractmethod
    def destroy_recursive(self, target: str) -> DestroyResult:
        """Destroy a dataset together with all of its descendants.

        Args:
            target: Filesystem or volume path.

        Returns:
            DestroyResult for the call.
        """

    def execute(self, actions: list[DestroyAction]) -> list[DestroyResult]:
        """Execute destroy actions in order, collecting every result.

        Failures, including a missing zfs binary, never stop the
        remaining actions.

        Args:
            actions: Actions to execute.

        Returns:
            One DestroyResult per action, in the same order.
        """
        results: list[DestroyResult] = []
        for action in actions:
            if action.action_type == DestroyActionType.SNAPSHOTS:
                results.append(self.destroy_snapshots(action.target, list(action.labels)))
            else:
                results.append(self.destroy_recursive(action.target))
        return results
