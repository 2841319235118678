"""Interactive session loop.

One cycle: build rows, show them in the picker, apply the returned key.
Every cycle rebuilds the list from live queries.
"""

from __future__ import annotations

import logging

from zfsdu.core.listing import ListBuilder, ListResult
from zfsdu.core.navigation import SessionContext, SizeMetric
from zfsdu.core.planner import DeletionOutcome, DeletionPlanner, Prompter
from zfsdu.picker.base import Picker, PickerKey, PickerResult

logger = logging.getLogger(__name__)


def build_header(context: SessionContext, notices: tuple[str, ...] = ()) -> str:
    """Compose the key help and status shown above the list.

    Args:
        context: Current session context.
        notices: Non-fatal notices from the last list build.

    Returns:
        Header text, one notice per extra line.
    """
    display = context.display
    metric = "used" if display.size_metric == SizeMetric.USED else "referenced"
    zero = "hidden" if display.filters_zero else "shown"
    header = (
        "enter/→: open   bspace/←: back   space: mark   d: delete marked (or cursor row)   "
        f"r: used↔referenced (now: {metric})   z: 0 B snapshots {zero}   q/esc: quit"
    )
    if context.focus:
        header += f"\nfocus: {context.focus}"
    for notice in notices:
        header += f"\n! {notice}"
    return header


class Session:
    """Drives the render, interact, update cycle until the operator exits.

    Args:
        context: Initial session context.
        builder: List builder queried on every cycle.
        picker: Interactive row picker.
        planner: Deletion planner for the delete key.
        prompter: Operator interaction used after a delete.
    """

    def __init__(
        self,
        context: SessionContext,
        builder: ListBuilder,
        picker: Picker,
        planner: DeletionPlanner,
        prompter: Prompter,
    ) -> None:
        self._context = context
        self._builder = builder
        self._picker = picker
        self._planner = planner
        self._prompter = prompter
        self._last_outcome: DeletionOutcome | None = None

    @property
    def context(self) -> SessionContext:
        """Return the current session context."""
        return self._context

    @property
    def last_outcome(self) -> DeletionOutcome | None:
        """Return the outcome of the most recent delete action."""
        return self._last_outcome

    def run(self) -> SessionContext:
        """Run cycles until the operator exits.

        Returns:
            The final session context.
        """
        while self.step():
            pass
        logger.debug("Session finished")
        return self._context

    def step(self) -> bool:
        """Run a single cycle.

        Returns:
            False when the session should end.
        """
        listing: ListResult = self._builder.build(self._context)
        result = self._picker.present(listing.rows, build_header(self._context, listing.notices))
        return self.dispatch(result)

    def dispatch(self, result: PickerResult) -> bool:
        """Apply the key of one picker cycle.

        Args:
            result: Key and rows returned by the picker.

        Returns:
            False when the session should end.
        """
        key = result.key
        logger.debug("Dispatching %s with %d row(s)", key.value, len(result.rows))

        if key == PickerKey.EXIT:
            return False

        if key == PickerKey.COLLAPSE:
            navigation = self._context.navigation
            if navigation.is_collapsed:
                return False
            self._context = self._context.with_navigation(navigation.collapse())
        elif key == PickerKey.ACTIVATE:
            row = result.current
            if row is not None:
                self._context = self._context.with_navigation(
                    self._context.navigation.activate(row)
                )
        elif key == PickerKey.TOGGLE_METRIC:
            self._context = self._context.with_display(self._context.display.toggle_metric())
        elif key == PickerKey.TOGGLE_ZERO:
            self._context = self._context.with_display(self._context.display.toggle_zero())
        elif key == PickerKey.DELETE:
            self._last_outcome = self._planner.run(result.rows)
            self._prompter.pause()

        return True
