"""Data models for zfsdu.

This module exports the core data structures used throughout the application.
"""

from zfsdu.models.action import (
    DestroyAction,
    DestroyActionType,
    DestroyResult,
    create_recursive_action,
    create_snapshot_batch_action,
)
from zfsdu.models.dataset import Dataset, DatasetKind, parent_path, split_snapshot_name
from zfsdu.models.row import Row

__all__ = [
    "Dataset",
    "DatasetKind",
    "DestroyAction",
    "DestroyActionType",
    "DestroyResult",
    "Row",
    "create_recursive_action",
    "create_snapshot_batch_action",
    "parent_path",
    "split_snapshot_name",
]
