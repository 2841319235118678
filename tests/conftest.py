"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import pytest
from fakes import FakeOperator, FakePrompter, FakeScanner, fs, snap, vol


@pytest.fixture
def mock_fs_list_output() -> str:
    """Sample ``zfs list -Hp -t filesystem -o name,used`` output."""
    return """tank\t5368709120
tank/home\t1073741824
tank/vm\t3221225472
backup\t268435456000"""


@pytest.fixture
def mock_snapshot_list_output() -> str:
    """Sample ``zfs list -Hp -t snapshot -o name,used,referenced`` output."""
    return """tank/home@daily-01\t0\t1048576
tank/home@daily-02\t5242880\t2097152
tank/home@weekly-01\t12582912\t3145728"""


@pytest.fixture
def mock_malformed_output() -> str:
    """Malformed output for testing error handling."""
    return """tank
tank/home\tnot-a-number
\t\t"""


@pytest.fixture
def scanner() -> FakeScanner:
    """A small pool with volumes and snapshots at both levels.

    tank            10 GiB   volumes disk0 (4 GiB), disk1 (1 GiB); @a, @b
    backup           1 GiB   volume bvol (2 GiB); @old
    """
    gib = 1024**3
    return FakeScanner(
        filesystems=[fs("backup", 1 * gib), fs("tank", 10 * gib)],
        volumes={
            "tank": [vol("tank/disk1", 1 * gib), vol("tank/disk0", 4 * gib)],
            "backup": [vol("backup/bvol", 2 * gib)],
        },
        snapshots={
            "tank": [snap("tank@a", 0, 100), snap("tank@b", 500, 50)],
            "tank/disk0": [snap("tank/disk0@v1", 10, 30), snap("tank/disk0@v2", 20, 10)],
            "tank/disk1": [snap("tank/disk1@x", 7, 7)],
            "backup": [snap("backup@old", 99, 99)],
        },
    )


@pytest.fixture
def operator() -> FakeOperator:
    """Recording operator where every call succeeds."""
    return FakeOperator()


@pytest.fixture
def prompter() -> FakePrompter:
    """Prompter that confirms everything."""
    return FakePrompter()
