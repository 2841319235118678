"""ZFS destroy operator implementation.

Executes ``zfs destroy`` for snapshot batches and recursive dataset
removal.
"""

import logging

from zfsdu.models.action import (
    DestroyAction,
    DestroyResult,
    create_recursive_action,
    create_snapshot_batch_action,
)
from zfsdu.operators.base import Operator
from zfsdu.utils.shell import run_command

logger = logging.getLogger(__name__)


class ZfsOperator(Operator):
    """Operator issuing ``zfs destroy`` calls.

    Attributes:
        dry_run: If True, passes ``-n`` so zfs only reports what it would do.
    """

    def destroy_snapshots(self, parent: str, labels: list[str]) -> DestroyResult:
        """Destroy a batch of snapshots with ``zfs destroy -v parent@a,b``."""
        action = create_snapshot_batch_action(parent, labels)
        return self._destroy(action, recursive=False)

    def destroy_recursive(self, target: str) -> DestroyResult:
        """Destroy a dataset with ``zfs destroy -r -v target``."""
        action = create_recursive_action(target)
        return self._destroy(action, recursive=True)

    def _destroy(self, action: DestroyAction, *, recursive: bool) -> DestroyResult:
        """Run one zfs destroy call and wrap the outcome.

        The call has no timeout; once issued it runs to completion.

        Args:
            action: Action describing the call.
            recursive: Whether to pass ``-r``.

        Returns:
            DestroyResult for the call.
        """
        args = ["zfs", "destroy"]
        if recursive:
            args.append("-r")
        if self.dry_run:
            args.append("-n")
        args.extend(["-v", "--", action.spec])

        logger.info("Executing %s (dry_run=%s)", " ".join(args), self.dry_run)

        try:
            result = run_command(args, timeout=None)
        except OSError as e:
            logger.warning("zfs destroy could not be started for %s: %s", action.spec, e)
            return DestroyResult(action=action, success=False, error=str(e), dry_run=self.dry_run)

        if result.success:
            return DestroyResult(
                action=action,
                success=True,
                message=result.stdout.strip() or None,
                dry_run=self.dry_run,
            )

        error = result.stderr.strip() or "zfs destroy failed"
        logger.warning("zfs destroy failed for %s: %s", action.spec, error)
        return DestroyResult(action=action, success=False, error=error, dry_run=self.dry_run)
