"""Destroy action models.

This module defines data structures for representing destroy calls
issued against ZFS and their execution results.
"""

from dataclasses import dataclass
from enum import Enum


class DestroyActionType(Enum):
    """Type of destroy call.

    Attributes:
        SNAPSHOTS: Destroy a batch of snapshots of one dataset in one call.
        RECURSIVE: Destroy a dataset together with everything beneath it.
    """

    SNAPSHOTS = "snapshots"
    RECURSIVE = "recursive"


@dataclass(frozen=True, slots=True)
class DestroyAction:
    """Represents a single destroy call to be executed.

    Attributes:
        action_type: Snapshot batch or recursive destroy.
        target: Dataset the call operates on. For snapshot batches this is
            the parent filesystem or volume.
        labels: Snapshot labels of a batch (empty for recursive destroys).
    """

    action_type: DestroyActionType
    target: str
    labels: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate action data after initialization."""
        if not self.target:
            msg = "Destroy target cannot be empty"
            raise ValueError(msg)
        if self.action_type == DestroyActionType.SNAPSHOTS and not self.labels:
            msg = f"Snapshot batch for {self.target} has no labels"
            raise ValueError(msg)
        if self.action_type == DestroyActionType.RECURSIVE and self.labels:
            msg = "Recursive destroy does not take snapshot labels"
            raise ValueError(msg)

    @property
    def is_recursive(self) -> bool:
        """Check if this is a recursive destroy."""
        return self.action_type == DestroyActionType.RECURSIVE

    @property
    def spec(self) -> str:
        """Return the ZFS argument for this call.

        Snapshot batches use the comma form ``pool/fs@a,b,c``.
        """
        if self.action_type == DestroyActionType.SNAPSHOTS:
            return f"{self.target}@{','.join(self.labels)}"
        return self.target


@dataclass(frozen=True, slots=True)
class DestroyResult:
    """Result of executing one destroy call.

    Attributes:
        action: The action that was executed.
        success: Whether the call completed successfully.
        message: Optional output or additional information.
        error: Optional error message if the call failed.
        dry_run: Whether the call was only simulated.
    """

    action: DestroyAction
    success: bool
    message: str | None = None
    error: str | None = None
    dry_run: bool = False

    @property
    def failed(self) -> bool:
        """Check if the call failed."""
        return not self.success


def create_snapshot_batch_action(parent: str, labels: list[str]) -> DestroyAction:
    """Create a batched snapshot destroy action.

    Args:
        parent: Filesystem or volume owning the snapshots.
        labels: Snapshot labels (without ``@``).

    Returns:
        DestroyAction for one ``zfs destroy parent@l1,l2,...`` call.
    """
    return DestroyAction(
        action_type=DestroyActionType.SNAPSHOTS,
        target=parent,
        labels=tuple(labels),
    )


def create_recursive_action(target: str) -> DestroyAction:
    """Create a recursive destroy action.

    Args:
        target: Filesystem or volume to destroy with all descendants.

    Returns:
        DestroyAction for one ``zfs destroy -r target`` call.
    """
    return DestroyAction(action_type=DestroyActionType.RECURSIVE, target=target)
