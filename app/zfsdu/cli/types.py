"""Shared types for CLI options."""

from enum import Enum

from zfsdu.core.navigation import SizeMetric


class ModeChoice(str, Enum):
    """Snapshot size mode accepted by ``--mode``.

    ``refer`` is the short ZFS property name for ``referenced``.
    """

    USED = "used"
    REFER = "refer"
    REFERENCED = "referenced"

    @property
    def metric(self) -> SizeMetric:
        """Return the size metric this choice selects."""
        if self == ModeChoice.USED:
            return SizeMetric.USED
        return SizeMetric.REFERENCED
