"""Unit tests for the list builder."""

from fakes import FakeScanner, fs, snap
from zfsdu.core.listing import ListBuilder, ListResult, select_snapshots, sort_by_used
from zfsdu.core.navigation import DisplayMode, NavigationState, SessionContext, SizeMetric
from zfsdu.models.dataset import DatasetKind


def _names(result: ListResult) -> list[str]:
    return [row.name for row in result.rows]


class TestSortAndSelect:
    """Tests for the sorting and snapshot selection helpers."""

    def test_sort_by_used_descending(self) -> None:
        """Datasets are sorted largest first."""
        datasets = [fs("a", 1), fs("b", 30), fs("c", 20)]
        assert [d.name for d in sort_by_used(datasets)] == ["b", "c", "a"]

    def test_sort_by_used_is_stable(self) -> None:
        """Ties keep their query order."""
        datasets = [fs("a", 5), fs("b", 5), fs("c", 5)]
        assert [d.name for d in sort_by_used(datasets)] == ["a", "b", "c"]

    def test_hide_zero_example(self) -> None:
        """Used sizes [0, 5, 0, 12] with hiding on show [12, 5]."""
        snapshots = [snap("t@a", 0), snap("t@b", 5), snap("t@c", 0), snap("t@d", 12)]
        display = DisplayMode(hide_zero_snapshots=True)

        selected = select_snapshots(snapshots, display)

        assert [s.used for s in selected] == [12, 5]
        assert [s.used for s in select_snapshots(snapshots, DisplayMode())] == [12, 5, 0, 0]

    def test_zero_snapshots_kept_when_not_hidden(self) -> None:
        """Zero-used snapshots stay visible by default."""
        snapshots = [snap("t@a", 0), snap("t@b", 5)]
        assert len(select_snapshots(snapshots, DisplayMode())) == 2

    def test_referenced_mode_ignores_zero_filter(self) -> None:
        """Hiding has no effect while sizes show referenced bytes."""
        snapshots = [snap("t@a", 0, 40), snap("t@b", 5, 10)]
        display = DisplayMode(size_metric=SizeMetric.REFERENCED, hide_zero_snapshots=True)

        selected = select_snapshots(snapshots, display)

        assert [s.name for s in selected] == ["t@a", "t@b"]


class TestListBuilder:
    """Tests for ListBuilder.build."""

    def test_collapsed_shows_filesystems_only(self, scanner: FakeScanner) -> None:
        """Collapsed state lists filesystems by used size."""
        result = ListBuilder(scanner).build(SessionContext.start())

        assert _names(result) == ["tank", "backup"]
        assert all(row.depth == 0 for row in result.rows)
        assert result.notices == ()

    def test_open_filesystem_shows_volumes_then_snapshots(self, scanner: FakeScanner) -> None:
        """An open filesystem lists its volumes, then its own snapshots."""
        context = SessionContext.start().with_navigation(NavigationState.opened("tank"))

        result = ListBuilder(scanner).build(context)

        assert _names(result) == [
            "tank",
            "tank/disk0",
            "tank/disk1",
            "tank@b",
            "tank@a",
            "backup",
        ]
        tank = result.rows[0]
        assert tank.expanded is True
        assert [r.depth for r in result.rows[1:5]] == [1, 1, 1, 1]
        assert result.rows[3].label == "@b"

    def test_open_volume_shows_its_snapshots(self, scanner: FakeScanner) -> None:
        """An open volume lists its snapshots directly below it."""
        navigation = NavigationState(filesystem="tank", volume="tank/disk0")
        context = SessionContext.start().with_navigation(navigation)

        result = ListBuilder(scanner).build(context)

        assert _names(result) == [
            "tank",
            "tank/disk0",
            "tank/disk0@v2",
            "tank/disk0@v1",
            "tank/disk1",
            "tank@b",
            "tank@a",
            "backup",
        ]
        assert result.rows[1].expanded is True
        assert result.rows[2].depth == 2
        assert result.rows[2].kind == DatasetKind.SNAPSHOT

    def test_referenced_mode_sorts_and_labels_by_referenced(self, scanner: FakeScanner) -> None:
        """Snapshot sizes and order follow the referenced metric."""
        navigation = NavigationState(filesystem="tank", volume="tank/disk0")
        context = SessionContext.start(size_metric=SizeMetric.REFERENCED).with_navigation(
            navigation
        )

        result = ListBuilder(scanner).build(context)
        snapshots = [r for r in result.rows if r.kind == DatasetKind.SNAPSHOT]

        assert [r.name for r in snapshots] == [
            "tank/disk0@v1",
            "tank/disk0@v2",
            "tank@a",
            "tank@b",
        ]
        assert [r.size for r in snapshots] == [30, 10, 100, 50]

    def test_hide_zero_drops_zero_snapshots(self, scanner: FakeScanner) -> None:
        """Zero-used snapshots disappear when hidden."""
        context = SessionContext.start(hide_zero_snapshots=True).with_navigation(
            NavigationState.opened("tank")
        )

        result = ListBuilder(scanner).build(context)

        assert "tank@a" not in _names(result)
        assert "tank@b" in _names(result)

    def test_snapshots_of_children_are_not_shown(self, scanner: FakeScanner) -> None:
        """Only direct snapshots appear under a parent."""
        scanner.snapshots["tank"].append(snap("tank/child@x", 999))
        context = SessionContext.start().with_navigation(NavigationState.opened("tank"))

        result = ListBuilder(scanner).build(context)

        assert "tank/child@x" not in _names(result)

    def test_every_visible_row_is_contained_in_open_path(self, scanner: FakeScanner) -> None:
        """Non-root rows belong to the open filesystem or the open volume."""
        navigation = NavigationState(filesystem="tank", volume="tank/disk0")
        context = SessionContext.start().with_navigation(navigation)

        result = ListBuilder(scanner).build(context)

        for row in result.rows:
            if row.depth == 0:
                assert row.kind == DatasetKind.FILESYSTEM
            elif row.depth == 2:
                assert row.name.startswith("tank/disk0@")
            else:
                assert row.name.startswith(("tank/", "tank@"))

    def test_focus_limits_filesystems(self) -> None:
        """A focus dataset scopes the filesystem query."""
        scanner = FakeScanner(
            filesystems=[fs("tank", 10), fs("tank/data", 8), fs("backup", 3)],
        )
        context = SessionContext.start(focus="tank")

        result = ListBuilder(scanner).build(context)

        assert _names(result) == ["tank", "tank/data"]
        assert ("filesystems", "tank") in scanner.calls

    def test_failed_volume_query_keeps_other_rows(self, scanner: FakeScanner) -> None:
        """A failing branch query yields a notice and no rows for that branch."""
        scanner.failing.add("volumes:tank")
        context = SessionContext.start().with_navigation(NavigationState.opened("tank"))

        result = ListBuilder(scanner).build(context)

        assert _names(result) == ["tank", "tank@b", "tank@a", "backup"]
        assert result.notices == ("could not list volumes of tank",)

    def test_failed_filesystem_query_gives_empty_list(self, scanner: FakeScanner) -> None:
        """A failing filesystem query yields no rows and a notice."""
        scanner.failing.add("filesystems:None")

        result = ListBuilder(scanner).build(SessionContext.start())

        assert result.rows == ()
        assert result.notices == ("could not list filesystems",)

    def test_open_filesystem_missing_from_list(self, scanner: FakeScanner) -> None:
        """An open filesystem that no longer exists is simply not expanded."""
        context = SessionContext.start().with_navigation(NavigationState.opened("gone"))

        result = ListBuilder(scanner).build(context)

        assert _names(result) == ["tank", "backup"]

    def test_every_build_queries_again(self, scanner: FakeScanner) -> None:
        """Builds never reuse earlier query results."""
        builder = ListBuilder(scanner)
        context = SessionContext.start()

        builder.build(context)
        scanner.filesystems.pop()
        result = builder.build(context)

        assert _names(result) == ["backup"]
        assert scanner.calls.count(("filesystems", None)) == 2
