"""Dataset models for the ZFS namespace.

This module defines the data structures for the three kinds of entries
the browser shows: filesystems, volumes, and snapshots. Snapshot
identities are split into parent dataset and label once, when the
dataset is created from query output.
"""

from dataclasses import dataclass, field
from enum import Enum


class DatasetKind(str, Enum):
    """Kind of ZFS namespace entry.

    Attributes:
        FILESYSTEM: Mountable dataset holding files.
        VOLUME: Block device dataset (zvol).
        SNAPSHOT: Read-only point-in-time copy of a filesystem or volume.
    """

    FILESYSTEM = "filesystem"
    VOLUME = "volume"
    SNAPSHOT = "snapshot"


def parent_path(name: str) -> str:
    """Return the parent dataset of a dataset path.

    A top-level name (a pool root) is its own parent.

    Args:
        name: Dataset path such as ``tank/vm/disk0``.

    Returns:
        Path with the last segment removed, e.g. ``tank/vm``.
    """
    head, sep, _ = name.rpartition("/")
    return head if sep else name


def split_snapshot_name(name: str) -> tuple[str, str]:
    """Split a full snapshot name into dataset and label.

    Args:
        name: Snapshot name such as ``tank/data@daily-01``.

    Returns:
        Tuple of (dataset, label).

    Raises:
        ValueError: If the name has no ``@`` separator or an empty part.
    """
    dataset, sep, label = name.partition("@")
    if not sep or not dataset or not label:
        msg = f"Not a snapshot name: {name!r}"
        raise ValueError(msg)
    return dataset, label


@dataclass(frozen=True, slots=True)
class Dataset:
    """A single entry returned by the dataset query adapter.

    Attributes:
        name: Full ZFS name (``pool/fs``, ``pool/vol`` or ``pool/fs@label``).
        kind: Filesystem, volume, or snapshot.
        used: Bytes freed if this dataset were destroyed.
        referenced: Bytes reachable through this dataset (possibly shared).
        parent: Owning dataset. For snapshots this is the snapshotted
            filesystem or volume; otherwise the path minus its last segment.
        label: Snapshot label without the ``@`` (empty for non-snapshots).
    """

    name: str
    kind: DatasetKind
    used: int
    referenced: int = 0
    parent: str = field(init=False)
    label: str = field(init=False)

    def __post_init__(self) -> None:
        """Validate the dataset and derive its structured identity."""
        if not self.name:
            msg = "Dataset name cannot be empty"
            raise ValueError(msg)
        if self.used < 0 or self.referenced < 0:
            msg = f"Sizes must be non-negative for {self.name}"
            raise ValueError(msg)

        if self.kind == DatasetKind.SNAPSHOT:
            parent, label = split_snapshot_name(self.name)
        else:
            parent, label = parent_path(self.name), ""
        # frozen + slots: assign derived fields through object.__setattr__
        object.__setattr__(self, "parent", parent)
        object.__setattr__(self, "label", label)

    @property
    def is_snapshot(self) -> bool:
        """Check if this dataset is a snapshot."""
        return self.kind == DatasetKind.SNAPSHOT

    @property
    def short_name(self) -> str:
        """Return the display name relative to the parent.

        Snapshots render as ``@label``; other datasets keep their full path.
        """
        if self.is_snapshot:
            return f"@{self.label}"
        return self.name
