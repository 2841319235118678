"""ZFS dataset scanner implementation.

Queries datasets with ``zfs list -Hp`` (tab-separated, exact byte
values) and properties with ``zfs get -Hp``.
"""

import logging
import subprocess

from zfsdu.models.dataset import Dataset, DatasetKind
from zfsdu.scanners.base import DatasetProperty, QueryError, Scanner
from zfsdu.utils.shell import command_exists, run_command

logger = logging.getLogger(__name__)


class ZfsScanner(Scanner):
    """Scanner backed by the ``zfs`` command line tool."""

    # Timeout for a single zfs list/get call
    _ZFS_TIMEOUT: float = 60.0

    def is_available(self) -> bool:
        """Check if the zfs command is available."""
        return command_exists("zfs")

    def list_filesystems(self, scope: str | None = None) -> list[Dataset]:
        """List filesystems, optionally limited to a focus dataset.

        Args:
            scope: Focus dataset; returns it and its level-1 children.

        Returns:
            Filesystem datasets.

        Raises:
            QueryError: If zfs list fails.
        """
        args = ["zfs", "list", "-Hp", "-t", "filesystem", "-o", "name,used"]
        if scope:
            args[2:2] = ["-r", "-d", "1"]
            args.extend(["--", scope])
        return self._list(args, DatasetKind.FILESYSTEM)

    def list_volumes(self, parent: str) -> list[Dataset]:
        """List level-1 volumes below a filesystem.

        Raises:
            QueryError: If zfs list fails.
        """
        args = ["zfs", "list", "-Hp", "-r", "-d", "1", "-t", "volume", "-o", "name,used"]
        args.extend(["--", parent])
        return self._list(args, DatasetKind.VOLUME)

    def list_snapshots(self, parent: str) -> list[Dataset]:
        """List snapshots of exactly one filesystem or volume.

        Raises:
            QueryError: If zfs list fails.
        """
        args = [
            "zfs",
            "list",
            "-Hp",
            "-d",
            "1",
            "-t",
            "snapshot",
            "-o",
            "name,used,referenced",
            "--",
            parent,
        ]
        return self._list(args, DatasetKind.SNAPSHOT)

    def get_properties(self, name: str, properties: list[str]) -> list[DatasetProperty]:
        """Read properties with zfs get.

        Raises:
            QueryError: If zfs get fails.
        """
        args = ["zfs", "get", "-Hp", "-o", "property,value,source", ",".join(properties)]
        args.extend(["--", name])
        stdout = self._run(args)

        result: list[DatasetProperty] = []
        for line in stdout.splitlines():
            parts = line.split("\t")
            if len(parts) != 3:
                logger.debug("Skipping malformed zfs get line: %r", line[:100])
                continue
            result.append(DatasetProperty(name=parts[0], value=parts[1], source=parts[2]))
        return result

    def _run(self, args: list[str]) -> str:
        """Run a zfs query and return its stdout.

        Raises:
            QueryError: If the command is missing, times out, or fails.
        """
        try:
            result = run_command(args, timeout=self._ZFS_TIMEOUT)
        except (OSError, subprocess.TimeoutExpired) as e:
            msg = f"{' '.join(args[:3])} failed: {e}"
            raise QueryError(msg) from e

        if not result.success:
            msg = f"{' '.join(args[:3])} failed: {result.stderr.strip() or 'unknown error'}"
            raise QueryError(msg)
        return result.stdout

    def _list(self, args: list[str], kind: DatasetKind) -> list[Dataset]:
        """Run zfs list and parse every line into a Dataset."""
        stdout = self._run(args)
        datasets: list[Dataset] = []
        for line in stdout.splitlines():
            if not line.strip():
                continue
            dataset = self._parse_list_line(line, kind)
            if dataset is not None:
                datasets.append(dataset)
        return datasets

    def _parse_list_line(self, line: str, kind: DatasetKind) -> Dataset | None:
        """Parse a single line of zfs list output.

        Args:
            line: Tab-separated ``name, used[, referenced]`` line.
            kind: Dataset kind the query asked for.

        Returns:
            Dataset if parsing succeeds, None otherwise.
        """
        parts = line.split("\t")
        expected = 3 if kind == DatasetKind.SNAPSHOT else 2
        if len(parts) < expected:
            logger.debug("Skipping malformed zfs list line (parts=%d): %r", len(parts), line[:100])
            return None

        name = parts[0].strip()
        sizes = [p.strip() for p in parts[1:expected]]
        if not name or not all(s.isdigit() for s in sizes):
            logger.debug("Skipping zfs list line with invalid fields: %r", line[:100])
            return None

        used = int(sizes[0])
        referenced = int(sizes[1]) if kind == DatasetKind.SNAPSHOT else 0
        try:
            return Dataset(name=name, kind=kind, used=used, referenced=referenced)
        except ValueError as e:
            logger.debug("Skipping invalid dataset %r: %s", name, e)
            return None
