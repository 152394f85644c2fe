"""Rich rendering of DataTable views."""

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from tools.data_table import (
    PaginationBar,
    SelectionState,
    SortIndicator,
    TableView,
)

SORT_MARKS = {
    SortIndicator.ASC: " ▲",
    SortIndicator.DESC: " ▼",
    SortIndicator.HOVER: " ↕",
    SortIndicator.NONE: "",
}

CHECKBOX_MARKS = {
    SelectionState.CHECKED: "☑",
    SelectionState.UNCHECKED: "☐",
    SelectionState.INDETERMINATE: "⊟",
}


def build_table(view: TableView, title: Optional[str] = None) -> Table:
    """Convert a TableView into a rich Table.

    Cell text is wrapped in Text so values are never parsed as markup.
    """
    table = Table(title=title, show_lines=False)

    if view.header_checkbox is not None:
        table.add_column(Text(CHECKBOX_MARKS[view.header_checkbox.state]), justify="center")
    for cell in view.header:
        table.add_column(
            Text(cell.title + SORT_MARKS[cell.sort_indicator]),
            justify=cell.align,
            width=int(cell.width) if cell.width and cell.width.isdigit() else None,
        )
    if view.actions_title is not None:
        table.add_column(Text(view.actions_title), justify="center")

    if view.placeholder is not None:
        message = Text(view.placeholder.message, style="dim")
        if view.placeholder.icon:
            message = Text(f"{view.placeholder.icon} ", style="dim") + message
        # rich has no colspan; the message goes in the first column
        table.add_row(message, *[""] * (view.colspan - 1))
        return table

    for row in view.rows:
        cells = []
        if row.checkbox is not None:
            cells.append(Text(CHECKBOX_MARKS[row.checkbox.state]))
        cells.extend(Text(str(cell.value)) for cell in row.cells)
        if view.actions_title is not None:
            cells.append(Text("" if row.actions is None else str(row.actions)))
        table.add_row(*cells, style="bold" if row.selected else None)

    return table


def format_pagination(bar: PaginationBar) -> str:
    """One-line paginator: summary, previous/next and page buttons."""
    buttons = []
    for button in bar.pages:
        if button.is_ellipsis:
            buttons.append("…")
        elif button.active:
            buttons.append(f"[{button.label}]")
        else:
            buttons.append(str(button.label))

    previous = f"({bar.previous.label})" if bar.previous.disabled else bar.previous.label
    following = f"({bar.next.label})" if bar.next.disabled else bar.next.label
    return f"{bar.summary}   {previous} {' '.join(buttons)} {following}"


def print_view(console: Console, view: TableView, title: Optional[str] = None) -> None:
    console.print(build_table(view, title))
    if view.pagination is not None:
        console.print(format_pagination(view.pagination), markup=False, highlight=False)
