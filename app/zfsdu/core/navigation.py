"""Navigation state and display mode for the browser session.

All values here are immutable. Every transition returns a new value, so
the session loop only ever holds one consistent SessionContext.

Navigation states:
- collapsed: nothing open
- filesystem open: one filesystem shows its volumes and snapshots
- filesystem + volume open: additionally one volume shows its snapshots
"""

from dataclasses import dataclass, field, replace
from enum import Enum

from zfsdu.models.dataset import Dataset, DatasetKind, parent_path
from zfsdu.models.row import Row


class SizeMetric(str, Enum):
    """Snapshot size shown and sorted on."""

    USED = "used"
    REFERENCED = "referenced"


@dataclass(frozen=True, slots=True)
class DisplayMode:
    """Snapshot display settings.

    Attributes:
        size_metric: Field used to label and sort snapshots.
        hide_zero_snapshots: Drop snapshots with 0 bytes used. Only applies
            while size_metric is USED; the flag is kept otherwise.
    """

    size_metric: SizeMetric = SizeMetric.USED
    hide_zero_snapshots: bool = False

    @property
    def filters_zero(self) -> bool:
        """Check if zero-sized snapshots are currently dropped."""
        return self.size_metric == SizeMetric.USED and self.hide_zero_snapshots

    def snapshot_size(self, snapshot: Dataset) -> int:
        """Return the size of a snapshot under the current metric."""
        if self.size_metric == SizeMetric.REFERENCED:
            return snapshot.referenced
        return snapshot.used

    def toggle_metric(self) -> "DisplayMode":
        """Switch between used and referenced."""
        metric = SizeMetric.REFERENCED if self.size_metric == SizeMetric.USED else SizeMetric.USED
        return replace(self, size_metric=metric)

    def toggle_zero(self) -> "DisplayMode":
        """Flip zero-snapshot hiding."""
        return replace(self, hide_zero_snapshots=not self.hide_zero_snapshots)


@dataclass(frozen=True, slots=True)
class NavigationState:
    """Which filesystem and volume are currently expanded.

    Only the transition methods create states with a volume set, and they
    always open the volume's parent filesystem with it.

    Attributes:
        filesystem: Expanded filesystem, or None.
        volume: Expanded volume (child of ``filesystem``), or None.
    """

    filesystem: str | None = None
    volume: str | None = None

    @classmethod
    def collapsed(cls) -> "NavigationState":
        """Return the state with nothing expanded."""
        return cls()

    @classmethod
    def opened(cls, filesystem: str) -> "NavigationState":
        """Return the state with one filesystem expanded."""
        return cls(filesystem=filesystem)

    @property
    def is_collapsed(self) -> bool:
        """Check if nothing is expanded."""
        return self.filesystem is None

    @property
    def is_consistent(self) -> bool:
        """Check that an open volume always sits below the open filesystem."""
        if self.volume is None:
            return True
        return self.filesystem is not None and parent_path(self.volume) == self.filesystem

    def activate(self, row: Row) -> "NavigationState":
        """Apply the open/close action to a row.

        Snapshot rows cannot be opened and leave the state unchanged.
        """
        if row.kind == DatasetKind.FILESYSTEM:
            return self.activate_filesystem(row.name)
        if row.kind == DatasetKind.VOLUME:
            return self.activate_volume(row.name)
        return self

    def activate_filesystem(self, name: str) -> "NavigationState":
        """Toggle a filesystem; opening one closes any other."""
        if self.filesystem == name:
            return NavigationState.collapsed()
        return NavigationState.opened(name)

    def activate_volume(self, name: str) -> "NavigationState":
        """Toggle a volume, opening its parent filesystem if needed."""
        parent = parent_path(name)
        if self.filesystem == parent and self.volume == name:
            return NavigationState.opened(parent)
        return NavigationState(filesystem=parent, volume=name)

    def collapse(self) -> "NavigationState":
        """Close the innermost open level.

        The session exits instead of calling this on a collapsed state.
        """
        if self.volume is not None:
            return replace(self, volume=None)
        return NavigationState.collapsed()


@dataclass(frozen=True, slots=True)
class SessionContext:
    """Everything the list builder needs to produce one render.

    Attributes:
        navigation: Current expansion state.
        display: Snapshot display settings.
        focus: Optional dataset that scopes the filesystem list.
    """

    navigation: NavigationState = field(default_factory=NavigationState)
    display: DisplayMode = field(default_factory=DisplayMode)
    focus: str | None = None

    @classmethod
    def start(
        cls,
        *,
        focus: str | None = None,
        size_metric: SizeMetric = SizeMetric.USED,
        hide_zero_snapshots: bool = False,
    ) -> "SessionContext":
        """Create the initial context for a session.

        A focused session starts with the focus dataset opened.
        """
        navigation = NavigationState.opened(focus) if focus else NavigationState.collapsed()
        return cls(
            navigation=navigation,
            display=DisplayMode(size_metric=size_metric, hide_zero_snapshots=hide_zero_snapshots),
            focus=focus,
        )

    def with_navigation(self, navigation: NavigationState) -> "SessionContext":
        """Return a copy with a new navigation state."""
        return replace(self, navigation=navigation)

    def with_display(self, display: DisplayMode) -> "SessionContext":
        """Return a copy with new display settings."""
        return replace(self, display=display)
