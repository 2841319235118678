"""Abstract base class for dataset scanners.

This module defines the Scanner interface the list builder uses to
query the storage namespace. Scanners never cache: every call goes to
the underlying system.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from zfsdu.models.dataset import Dataset


class QueryError(RuntimeError):
    """Raised when a namespace query cannot be answered."""


@dataclass(frozen=True, slots=True)
class DatasetProperty:
    """One property of a dataset as reported by the storage system.

    Attributes:
        name: Property name (e.g. ``used``).
        value: Raw value; numeric sizes are plain byte counts.
        source: Where the value comes from (``local``, ``default``, ``-``...).
    """

    name: str
    value: str
    source: str

    @property
    def is_numeric(self) -> bool:
        """Check if the value is a plain integer."""
        return self.value.isdigit()


class Scanner(ABC):
    """Abstract base class for all dataset scanners.

    Example:
        >>> scanner = ZfsScanner()
        >>> if scanner.is_available():
        ...     for fs in scanner.list_filesystems():
        ...         print(f"{fs.name}: {fs.used}")
    """

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the storage tooling is available on the system.

        Returns:
            True if the scanner can be used, False otherwise.
        """

    @abstractmethod
    def list_filesystems(self, scope: str | None = None) -> list[Dataset]:
        """List filesystems.

        Args:
            scope: Optional focus dataset. When set, only the dataset itself
                and its direct child filesystems are returned.

        Returns:
            Filesystem datasets in the order reported by the system.

        Raises:
            QueryError: If the query fails.
        """

    @abstractmethod
    def list_volumes(self, parent: str) -> list[Dataset]:
        """List volumes directly below a filesystem (depth 1).

        Args:
            parent: Filesystem path.

        Returns:
            Volume datasets in the order reported by the system.

        Raises:
            QueryError: If the query fails.
        """

    @abstractmethod
    def list_snapshots(self, parent: str) -> list[Dataset]:
        """List snapshots that belong directly to a filesystem or volume.

        Args:
            parent: Filesystem or volume path.

        Returns:
            Snapshot datasets in the order reported by the system.

        Raises:
            QueryError: If the query fails.
        """

    @abstractmethod
    def get_properties(self, name: str, properties: list[str]) -> list[DatasetProperty]:
        """Read selected properties of one dataset.

        Args:
            name: Dataset or snapshot name.
            properties: Property names to fetch.

        Returns:
            One DatasetProperty per reported property.

        Raises:
            QueryError: If the query fails.
        """
