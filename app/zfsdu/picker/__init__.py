"""Interactive row pickers.

This module exports the picker interface and the fzf implementation.
"""

from zfsdu.picker.base import Picker, PickerKey, PickerResult
from zfsdu.picker.fzf import FzfPicker
from zfsdu.picker.render import RowRenderer

__all__ = ["FzfPicker", "Picker", "PickerKey", "PickerResult", "RowRenderer"]
