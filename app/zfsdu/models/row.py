"""Row model for the browser list.

A Row is one visible line of the list for a single render cycle. Rows
are rebuilt from scratch on every cycle and are never stored.
"""

from dataclasses import dataclass

from zfsdu.models.dataset import DatasetKind
from zfsdu.utils.formatting import format_size

# Column widths shared by the plain and the styled rendering
SIZE_WIDTH = 10
KIND_WIDTH = 10

# Leading text per depth and kind
_VOLUME_PREFIX = "  ↳ "  # two spaces + "↳ "
_INDENT = "    "


@dataclass(frozen=True, slots=True)
class Row:
    """A single visible entry of the browser list.

    Attributes:
        kind: Dataset kind shown by the row.
        name: Full dataset identity (used for navigation and deletion).
        label: Text shown in the name column (``@label`` for snapshots).
        size: Byte count shown in the size column.
        depth: Indentation level (0 = filesystem, 1 = child, 2 = grandchild).
        expanded: Whether the row's dataset is currently opened.
    """

    kind: DatasetKind
    name: str
    label: str
    size: int
    depth: int = 0
    expanded: bool = False

    def __post_init__(self) -> None:
        """Validate row data after initialization."""
        if not self.name:
            msg = "Row name cannot be empty"
            raise ValueError(msg)
        if self.depth not in (0, 1, 2):
            msg = f"Row depth must be 0, 1 or 2, got {self.depth}"
            raise ValueError(msg)

    @property
    def key(self) -> tuple[DatasetKind, str]:
        """Return the row identity as (kind, name)."""
        return (self.kind, self.name)

    @property
    def prefix(self) -> str:
        """Return the indentation text in front of the size column."""
        if self.depth == 0:
            return ""
        if self.kind == DatasetKind.VOLUME:
            return _VOLUME_PREFIX
        return _INDENT * self.depth

    @property
    def size_text(self) -> str:
        """Return the right-aligned, human-readable size column."""
        return format_size(self.size).rjust(SIZE_WIDTH)

    @property
    def kind_text(self) -> str:
        """Return the left-aligned kind column."""
        return self.kind.value.ljust(KIND_WIDTH)

    @property
    def display_text(self) -> str:
        """Return the uncolored line shown in the picker."""
        return f"{self.prefix}{self.size_text}  {self.kind_text}  {self.label}"
