"""List builder for the browser view.

Turns the session context and fresh scanner results into the ordered
rows shown by the picker. Nothing is cached between builds.

Row order for an expanded filesystem:
    filesystem
      volume            (each volume, largest first)
        @snapshot       (only below the expanded volume)
      @snapshot         (the filesystem's own snapshots, last)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from zfsdu.core.navigation import DisplayMode, SessionContext
from zfsdu.models.dataset import Dataset, DatasetKind
from zfsdu.models.row import Row
from zfsdu.scanners.base import QueryError, Scanner

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ListResult:
    """Rows of one render plus any non-fatal notices.

    Attributes:
        rows: Visible rows in display order.
        notices: Messages about branches that could not be listed.
    """

    rows: tuple[Row, ...]
    notices: tuple[str, ...] = ()


def sort_by_used(datasets: Iterable[Dataset]) -> list[Dataset]:
    """Sort datasets by used bytes, largest first (stable for ties)."""
    return sorted(datasets, key=lambda d: d.used, reverse=True)


def select_snapshots(snapshots: Iterable[Dataset], display: DisplayMode) -> list[Dataset]:
    """Apply the snapshot sort and zero filter of the display mode.

    Args:
        snapshots: Snapshots of one parent.
        display: Current display settings.

    Returns:
        Snapshots sorted by the selected metric, largest first, with
        zero-used snapshots removed when the filter is active.
    """
    visible = [s for s in snapshots if not (display.filters_zero and s.used == 0)]
    return sorted(visible, key=display.snapshot_size, reverse=True)


class ListBuilder:
    """Builds the visible row list from live scanner queries."""

    def __init__(self, scanner: Scanner) -> None:
        self._scanner = scanner

    def build(self, context: SessionContext) -> ListResult:
        """Build all rows for the given session context.

        A failing query only empties its own branch and adds a notice.

        Args:
            context: Navigation state, display mode and focus.

        Returns:
            ListResult with rows and notices.
        """
        notices: list[str] = []
        rows: list[Row] = []
        navigation = context.navigation

        filesystems = self._fetch(
            lambda: self._scanner.list_filesystems(context.focus),
            "filesystems",
            notices,
        )

        for fs in sort_by_used(filesystems):
            is_open = fs.name == navigation.filesystem
            rows.append(
                Row(
                    kind=DatasetKind.FILESYSTEM,
                    name=fs.name,
                    label=fs.name,
                    size=fs.used,
                    expanded=is_open,
                )
            )
            if is_open:
                rows.extend(self._expand_filesystem(fs.name, context, notices))

        return ListResult(rows=tuple(rows), notices=tuple(notices))

    def _expand_filesystem(
        self,
        name: str,
        context: SessionContext,
        notices: list[str],
    ) -> list[Row]:
        """Rows below an open filesystem: volumes, then own snapshots."""
        rows: list[Row] = []
        volumes = self._fetch(
            lambda: self._scanner.list_volumes(name),
            f"volumes of {name}",
            notices,
        )

        for vol in sort_by_used(volumes):
            is_open = vol.name == context.navigation.volume
            rows.append(
                Row(
                    kind=DatasetKind.VOLUME,
                    name=vol.name,
                    label=vol.name,
                    size=vol.used,
                    depth=1,
                    expanded=is_open,
                )
            )
            if is_open:
                rows.extend(self._snapshot_rows(vol.name, 2, context.display, notices))

        rows.extend(self._snapshot_rows(name, 1, context.display, notices))
        return rows

    def _snapshot_rows(
        self,
        parent: str,
        depth: int,
        display: DisplayMode,
        notices: list[str],
    ) -> list[Row]:
        """Rows for the direct snapshots of one filesystem or volume."""
        snapshots = self._fetch(
            lambda: self._scanner.list_snapshots(parent),
            f"snapshots of {parent}",
            notices,
        )
        return [
            Row(
                kind=DatasetKind.SNAPSHOT,
                name=snap.name,
                label=snap.short_name,
                size=display.snapshot_size(snap),
                depth=depth,
            )
            # Snapshots of a child dataset are never shown under this parent
            for snap in select_snapshots(snapshots, display)
            if snap.parent == parent
        ]

    def _fetch(
        self,
        query: Callable[[], list[Dataset]],
        what: str,
        notices: list[str],
    ) -> list[Dataset]:
        """Run one query, turning a failure into a notice and no datasets."""
        try:
            return query()
        except QueryError as e:
            logger.warning("Could not list %s: %s", what, e)
            notices.append(f"could not list {what}")
            return []
