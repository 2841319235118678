"""Dataset scanners for the storage namespace.

This module exports the scanner classes for querying datasets.
"""

from zfsdu.scanners.base import DatasetProperty, QueryError, Scanner
from zfsdu.scanners.zfs import ZfsScanner

__all__ = ["DatasetProperty", "QueryError", "Scanner", "ZfsScanner"]
