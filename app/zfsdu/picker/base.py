"""Abstract base class for row pickers.

A picker shows the rows of one render cycle, lets the operator move
and mark rows, and returns which key ended the interaction together
with the rows it applies to. Marks are part of the returned value and
are gone once the next cycle starts.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from zfsdu.models.row import Row


class PickerKey(Enum):
    """Action requested by the key that ended a picker cycle.

    Attributes:
        ACTIVATE: Open or close the current row (Enter, Right).
        COLLAPSE: Close the innermost open level (Backspace, Left).
        TOGGLE_METRIC: Switch snapshot sizes between used and referenced (r).
        TOGGLE_ZERO: Show or hide 0 B snapshots (z).
        DELETE: Delete the marked rows (d).
        EXIT: Leave the browser (q, Esc, Ctrl-C).
    """

    ACTIVATE = "activate"
    COLLAPSE = "collapse"
    TOGGLE_METRIC = "toggle_metric"
    TOGGLE_ZERO = "toggle_zero"
    DELETE = "delete"
    EXIT = "exit"


@dataclass(frozen=True, slots=True)
class PickerResult:
    """Outcome of one picker cycle.

    Attributes:
        key: Requested action.
        rows: Marked rows. When nothing is marked fzf returns the row under
            the cursor, so DELETE then targets that single row; the deletion
            preview and confirmation still gate it.
    """

    key: PickerKey
    rows: tuple[Row, ...] = ()

    @property
    def current(self) -> Row | None:
        """Return the row an activate action applies to."""
        return self.rows[0] if self.rows else None


class Picker(ABC):
    """Abstract base class for interactive row pickers."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the picker can run on this system."""

    @abstractmethod
    def present(self, rows: Sequence[Row], header: str) -> PickerResult:
        """Show rows and block until the operator ends the cycle.

        Args:
            rows: Rows of the current render.
            header: Help and status text shown above the list.

        Returns:
            PickerResult with the key and the affected rows. An aborted
            picker returns PickerKey.EXIT.
        """
