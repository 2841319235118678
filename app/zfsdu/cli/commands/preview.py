"""Preview command implementation.

Prints the key properties of one dataset. The browser runs this command
for the preview pane next to the list.
"""

from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from zfsdu.core.theme import get_theme
from zfsdu.models.dataset import DatasetKind
from zfsdu.scanners.base import DatasetProperty, QueryError
from zfsdu.scanners.zfs import ZfsScanner
from zfsdu.utils.formatting import format_size, print_error

# Properties shown per dataset kind
PREVIEW_PROPERTIES: dict[DatasetKind, list[str]] = {
    DatasetKind.FILESYSTEM: ["used", "referenced", "available", "mountpoint"],
    DatasetKind.VOLUME: ["type", "used", "referenced", "available", "volsize", "volblocksize"],
    DatasetKind.SNAPSHOT: ["referenced", "used", "creation"],
}

# Numeric properties that are not byte counts
_NON_SIZE_PROPERTIES = frozenset({"creation"})


def format_property(prop: DatasetProperty) -> str:
    """Format one property as a Rich markup line."""
    value = prop.value
    if prop.is_numeric and prop.name not in _NON_SIZE_PROPERTIES:
        value = format_size(int(prop.value))
    # Values come from zfs and may contain markup brackets
    value = escape(f"{value:<12}")
    return f"[property]{prop.name:<14}[/property]: {value} [muted]{escape(prop.source)}[/muted]"


def preview(
    kind: Annotated[DatasetKind, typer.Argument(help="Dataset kind.")],
    name: Annotated[str, typer.Argument(help="Full dataset or snapshot name.")],
    color: Annotated[
        bool,
        typer.Option("--color/--no-color", help="Colorize the output."),
    ] = True,
) -> None:
    """Show the key properties of a dataset."""
    out = Console(theme=get_theme(), force_terminal=color, no_color=not color, highlight=False)

    try:
        properties = ZfsScanner().get_properties(name, PREVIEW_PROPERTIES[kind])
    except QueryError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    for prop in properties:
        out.print(format_property(prop))
