"""Destroy operators for the storage namespace.

This module exports the operator classes for destructive calls.
"""

from zfsdu.operators.base import Operator
from zfsdu.operators.zfs import ZfsOperator

__all__ = ["Operator", "ZfsOperator"]
