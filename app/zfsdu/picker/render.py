"""Styled rendering of list rows.

Rows are rendered to ANSI strings with a private Rich console so the
picker can show them with ``--ansi``. With color disabled the plain
``Row.display_text`` is used.
"""

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

from zfsdu.core.theme import get_theme
from zfsdu.models.dataset import DatasetKind
from zfsdu.models.row import Row
from zfsdu.utils.formatting import size_style


class RowRenderer:
    """Render rows as single-line strings.

    Args:
        color: Emit ANSI styles when True.
        theme: Rich theme to use; defaults to the loaded zfsdu theme.
    """

    def __init__(self, *, color: bool = True, theme: Theme | None = None) -> None:
        self._color = color
        self._console = Console(
            theme=theme or get_theme(),
            force_terminal=True,
            color_system="truecolor",
            width=10_000,
            highlight=False,
        )

    @property
    def color(self) -> bool:
        """Check if rows are rendered with colors."""
        return self._color

    def to_text(self, row: Row) -> Text:
        """Build the styled Rich Text for a row."""
        text = Text(no_wrap=True)
        text.append(row.prefix, style="arrow")
        text.append(row.size_text, style=size_style(row.size))
        text.append("  ")
        text.append(row.kind_text, style=row.kind.value)
        text.append("  ")
        open_fs = row.expanded and row.kind == DatasetKind.FILESYSTEM
        text.append(row.label, style="name_open" if open_fs else "name")
        return text

    def render(self, row: Row) -> str:
        """Render a row to a single line."""
        if not self._color:
            return row.display_text
        with self._console.capture() as capture:
            self._console.print(self.to_text(row), end="", soft_wrap=True)
        return capture.get()
