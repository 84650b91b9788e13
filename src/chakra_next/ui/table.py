"""Table rendering for the family listing and export summary, using rich."""

from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from chakra_next.exporter import ExportResult


class TableColumn:
    """Configuration for a table column."""

    def __init__(self, name: str, style: str | None = None, no_wrap: bool = False):
        self.name = name
        self.style = style
        self.no_wrap = no_wrap


def build_table(
    title: str | None,
    columns: Sequence[TableColumn],
    rows: Iterable[Sequence[object]],
    show_lines: bool = False,
) -> Table:
    """Build a rich Table from column definitions and row values."""
    table = Table(title=title, show_lines=show_lines)
    for col in columns:
        table.add_column(col.name, style=col.style, no_wrap=col.no_wrap)
    for values in rows:
        table.add_row(*[str(v) for v in values])
    return table


def family_table(families: Mapping[str, Sequence[str]]) -> Table:
    """Table of every component family and its members."""
    columns = [
        TableColumn("Family", style="bold cyan", no_wrap=True),
        TableColumn("Components"),
    ]
    rows = [(key, ", ".join(members)) for key, members in families.items()]
    return build_table("Component families", columns, rows, show_lines=True)


def export_summary_table(results: Sequence["ExportResult"]) -> Table:
    """Table of the files written during a run (one ExportResult per row)."""
    columns = [
        TableColumn("Component", style="bold cyan", no_wrap=True),
        TableColumn("Exports", style="green"),
        TableColumn("File", style="dim"),
    ]
    rows = [(r.component, len(r.members), r.path) for r in results]
    return build_table("Exported components", columns, rows)


def render(table: Table, console: Console | None = None) -> None:
    """Print *table* to the console."""
    (console or Console()).print(table)


def to_string(table: Table) -> str:
    """Return the rendered table as a string (useful for testing)."""
    console = Console(width=120)
    with console.capture() as capture:
        console.print(table)
    return capture.get()
