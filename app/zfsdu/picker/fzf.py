"""fzf-based picker implementation.

Each row is written to fzf as ``<display>\\t<kind>\\t<name>``. Only the
first field is shown; the other two identify the row when fzf prints
the selection back.

fzf output with ``--expect``:
    line 1: name of the key that ended the cycle
    line 2+: marked lines, or the cursor line when nothing was marked
"""

import logging
from collections.abc import Sequence

from zfsdu.models.dataset import DatasetKind
from zfsdu.models.row import Row
from zfsdu.picker.base import Picker, PickerKey, PickerResult
from zfsdu.picker.render import RowRenderer
from zfsdu.utils.shell import command_exists, run_filter

logger = logging.getLogger(__name__)

# Dark, ncdu-like color scheme
FZF_COLORS = (
    "fg:-1,bg:-1,hl:36,fg+:15,bg+:24,hl+:45,info:36,prompt:36,"
    "pointer:34,marker:220,spinner:36,header:36,border:240"
)

# fzf key name -> action
KEY_BINDINGS: dict[str, PickerKey] = {
    "enter": PickerKey.ACTIVATE,
    "right": PickerKey.ACTIVATE,
    "left": PickerKey.COLLAPSE,
    "bspace": PickerKey.COLLAPSE,
    "r": PickerKey.TOGGLE_METRIC,
    "z": PickerKey.TOGGLE_ZERO,
    "d": PickerKey.DELETE,
    "esc": PickerKey.EXIT,
}

# fzf exit codes
_EXIT_NO_MATCH = 1
_EXIT_ABORTED = 130


class FzfPicker(Picker):
    """Picker running fzf as a full-screen selector.

    Args:
        renderer: Row renderer; its color setting also controls fzf colors.
        preview_command: Optional fzf ``--preview`` command. ``{2}`` and
            ``{3}`` expand to the row kind and name.
    """

    def __init__(
        self,
        *,
        renderer: RowRenderer | None = None,
        preview_command: str | None = None,
    ) -> None:
        self._renderer = renderer or RowRenderer()
        self._preview_command = preview_command

    def is_available(self) -> bool:
        """Check if fzf is available."""
        return command_exists("fzf")

    def build_args(self, header: str) -> list[str]:
        """Build the fzf command line for one cycle."""
        args = [
            "fzf",
            "--ansi",
            "--with-nth=1",
            "--delimiter=\t",
            "--prompt=zfsdu> ",
            "--border",
            "--height=100%",
            "--margin=0",
            "--reverse",
            "--multi",
            "--marker=* ",
            "--bind=space:toggle",
            f"--expect={','.join(KEY_BINDINGS)}",
            "--bind=q:abort,ctrl-c:abort",
            f"--header={header}",
        ]
        if self._preview_command:
            args.extend([f"--preview={self._preview_command}", "--preview-window=right,60%"])
        if self._renderer.color:
            args.append(f"--color={FZF_COLORS}")
        else:
            args.append("--no-color")
        return args

    def format_lines(self, rows: Sequence[Row]) -> str:
        """Serialize rows into fzf input lines."""
        return "".join(
            f"{self._renderer.render(row)}\t{row.kind.value}\t{row.name}\n" for row in rows
        )

    def present(self, rows: Sequence[Row], header: str) -> PickerResult:
        """Run fzf over the rows and translate its output.

        Raises:
            FileNotFoundError: If fzf is not installed.
        """
        result = run_filter(self.build_args(header), self.format_lines(rows))

        if result.returncode == _EXIT_ABORTED:
            return PickerResult(PickerKey.EXIT)
        if result.returncode not in (0, _EXIT_NO_MATCH):
            logger.warning("fzf exited with code %d, leaving", result.returncode)
            return PickerResult(PickerKey.EXIT)

        index = {row.key: row for row in rows}
        return self.parse_output(result.stdout, index)

    def parse_output(
        self,
        stdout: str,
        index: dict[tuple[DatasetKind, str], Row],
    ) -> PickerResult:
        """Parse fzf ``--expect`` output into a PickerResult.

        Args:
            stdout: Raw fzf output.
            index: Rows of the cycle keyed by (kind, name).

        Returns:
            PickerResult; unknown lines are skipped.
        """
        lines = stdout.splitlines()
        if not lines:
            return PickerResult(PickerKey.EXIT)

        key_name = lines[0].strip()
        if not key_name:
            key = PickerKey.ACTIVATE
        elif key_name in KEY_BINDINGS:
            key = KEY_BINDINGS[key_name]
        else:
            logger.warning("Unexpected fzf key %r, leaving", key_name)
            return PickerResult(PickerKey.EXIT)

        rows: list[Row] = []
        for line in lines[1:]:
            parts = line.rsplit("\t", 2)
            if len(parts) != 3:
                logger.debug("Skipping unparsable fzf line: %r", line[:100])
                continue
            try:
                row_key = (DatasetKind(parts[1]), parts[2])
            except ValueError:
                logger.debug("Skipping fzf line with unknown kind: %r", line[:100])
                continue
            row = index.get(row_key)
            if row is not None:
                rows.append(row)

        return PickerResult(key, tuple(rows))
