"""Generic data table view model.

DataTable turns rows and column definitions into a TableView: header cells,
body rows, placeholder row, and paginator. It never fetches, sorts, or
stores anything. Clicks on the view call the callbacks the parent passed in;
the parent applies the change and renders again.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from functools import partial
from typing import Any, Callable, Dict, List, Optional, Union

from models.pagination import Pagination
from tools.pagination import ELLIPSIS, generate_pagination_numbers


@dataclass(frozen=True)
class TableLabels:
    """User-facing strings used by the table."""

    placeholder: str = "-"
    yes: str = "Yes"
    no: str = "No"
    loading: str = "Loading..."
    empty: str = "No data"
    previous: str = "Previous"
    next: str = "Next"
    summary: str = "Showing {start} to {end} of {total} results"
    actions: str = "Actions"
    column_name: str = "Name"
    column_slug: str = "Slug"
    column_articles: str = "Articles"
    column_status: str = "Status"
    active: str = "Active"
    inactive: str = "Inactive"
    articles_count: str = "{count} articles"


LABELS: Dict[str, TableLabels] = {
    "en": TableLabels(),
    "ar": TableLabels(
        yes="نعم",
        no="لا",
        loading="جاري التحميل...",
        empty="لا توجد بيانات",
        previous="السابق",
        next="التالي",
        summary="عرض {start} إلى {end} من {total} نتيجة",
        actions="الإجراءات",
        column_name="الاسم",
        column_slug="المعرف",
        column_articles="المقالات",
        column_status="الحالة",
        active="مفعل",
        inactive="معطل",
        articles_count="{count} مقال",
    ),
}


def get_labels(locale: str) -> TableLabels:
    """Labels for a locale, falling back to English."""
    return LABELS.get(locale, LABELS["en"])


class SelectionState(Enum):
    CHECKED = "checked"
    UNCHECKED = "unchecked"
    INDETERMINATE = "indeterminate"


class SortIndicator(Enum):
    NONE = "none"
    ASC = "asc"
    DESC = "desc"
    HOVER = "hover"


@dataclass
class TableColumn:
    """One table column.

    Attributes:
        key: Row field to show; dotted paths reach into nested values.
        title: Header text.
        sortable: Whether clicking the header requests a sort.
        width: Optional fixed width hint.
        align: "left", "center" or "right"; None renders as right.
        render: Optional ``(value, row) -> renderable`` replacing the
            default formatting.
    """

    key: str
    title: str
    sortable: bool = False
    width: Optional[str] = None
    align: Optional[str] = None
    render: Optional[Callable[[Any, Any], Any]] = None

    @property
    def alignment(self) -> str:
        return self.align or "right"


@dataclass
class Checkbox:
    state: SelectionState
    on_click: Callable[[], None]

    def click(self) -> None:
        self.on_click()


@dataclass
class HeaderCell:
    key: str
    title: str
    align: str
    width: Optional[str]
    sortable: bool
    sort_indicator: SortIndicator
    on_click: Optional[Callable[[], None]] = None

    def click(self) -> None:
        if self.on_click is not None:
            self.on_click()


@dataclass
class BodyCell:
    key: str
    value: Any
    align: str


@dataclass
class BodyRow:
    row: Any
    cells: List[BodyCell]
    selected: bool = False
    checkbox: Optional[Checkbox] = None
    actions: Any = None


@dataclass
class PlaceholderRow:
    """Single row spanning the whole table while loading or empty."""

    kind: str
    message: str
    colspan: int
    icon: Any = None


@dataclass
class PageButton:
    label: Union[int, str]
    page: Optional[int]
    active: bool = False
    disabled: bool = False
    on_click: Optional[Callable[[], None]] = None

    @property
    def is_ellipsis(self) -> bool:
        return self.page is None

    def click(self) -> None:
        if not self.disabled and self.on_click is not None:
            self.on_click()


@dataclass
class PaginationBar:
    summary: str
    previous: PageButton
    next: PageButton
    pages: List[PageButton] = field(default_factory=list)

    @property
    def page_numbers(self) -> List[int]:
        return [button.page for button in self.pages if not button.is_ellipsis]


@dataclass
class TableView:
    header: List[HeaderCell]
    rows: List[BodyRow]
    colspan: int
    header_checkbox: Optional[Checkbox] = None
    placeholder: Optional[PlaceholderRow] = None
    pagination: Optional[PaginationBar] = None
    actions_title: Optional[str] = None


def resolve_value(row: Any, key: str) -> Any:
    """Resolve a dotted key against a row.

    Each step looks up a mapping key, a sequence index, or an attribute. A
    missing step yields None.
    """
    value = row
    for part in key.split("."):
        if value is None:
            return None
        if isinstance(value, Mapping):
            value = value.get(part)
        elif isinstance(value, Sequence) and not isinstance(value, str):
            try:
                value = value[int(part)]
            except (ValueError, IndexError):
                return None
        else:
            value = getattr(value, part, None)
    return value


def format_cell(value: Any, labels: TableLabels = LABELS["en"]) -> Any:
    """Default formatting for a cell without a custom renderer."""
    if value is None:
        return labels.placeholder
    if isinstance(value, (list, tuple, set, frozenset)):
        return ", ".join(str(item) for item in value)
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return labels.yes if value else labels.no
    if isinstance(value, datetime):
        return value.strftime("%x %X")
    if isinstance(value, date):
        return value.strftime("%x")
    if isinstance(value, (str, int, float, Decimal)):
        return value
    return str(value)


def row_id(row: Any) -> Any:
    return resolve_value(row, "id")


def is_selected(row: Any, selected_rows: List[Any]) -> bool:
    """Whether a row is in the selection, matched by id."""
    target = row_id(row)
    return any(row_id(selected) == target for selected in selected_rows)


def header_selection_state(rows: List[Any], selected_rows: List[Any]) -> SelectionState:
    """Tri-state value of the select-all checkbox."""
    if rows and len(selected_rows) == len(rows):
        return SelectionState.CHECKED
    if 0 < len(selected_rows) < len(rows):
        return SelectionState.INDETERMINATE
    return SelectionState.UNCHECKED


def toggle_selection(selected_rows: List[Any], row: Any) -> List[Any]:
    """Return a new selection with ``row`` added or removed."""
    if is_selected(row, selected_rows):
        target = row_id(row)
        return [selected for selected in selected_rows if row_id(selected) != target]
    return list(selected_rows) + [row]


class DataTable:
    """Presentation-only table.

    Args:
        columns: Column definitions.
        on_sort: Called with a column key when a sortable header is clicked.
        on_page_change: Called with the requested page number.
        on_select_row: Called with the row whose checkbox was clicked.
        on_select_all: Called with the requested selection (all rows or []).
        labels: Strings to display.
        empty_message: Overrides the empty-state message.
        empty_icon: Optional icon shown in the empty state.
        row_actions: Optional ``row -> renderable`` for a trailing actions column.
    """

    def __init__(
        self,
        columns: List[TableColumn],
        on_sort: Optional[Callable[[str], None]] = None,
        on_page_change: Optional[Callable[[int], None]] = None,
        on_select_row: Optional[Callable[[Any], None]] = None,
        on_select_all: Optional[Callable[[List[Any]], None]] = None,
        labels: TableLabels = LABELS["en"],
        empty_message: Optional[str] = None,
        empty_icon: Any = None,
        row_actions: Optional[Callable[[Any], Any]] = None,
    ):
        self.columns = columns
        self.on_sort = on_sort
        self.on_page_change = on_page_change
        self.on_select_row = on_select_row
        self.on_select_all = on_select_all
        self.labels = labels
        self.empty_message = empty_message or labels.empty
        self.empty_icon = empty_icon
        self.row_actions = row_actions

    def render(
        self,
        rows: List[Any],
        loading: bool = False,
        pagination: Optional[Pagination] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
        selectable: bool = False,
        selected_rows: Optional[List[Any]] = None,
    ) -> TableView:
        """Build the view for the given props."""
        rows = list(rows or [])
        selected_rows = list(selected_rows or [])
        colspan = (
            len(self.columns)
            + (1 if selectable else 0)
            + (1 if self.row_actions else 0)
        )

        view = TableView(
            header=[self._header_cell(c, sort_by, sort_order) for c in self.columns],
            rows=[],
            colspan=colspan,
            actions_title=self.labels.actions if self.row_actions else None,
        )

        if selectable:
            state = header_selection_state(rows, selected_rows)
            request = [] if state is SelectionState.CHECKED else rows
            view.header_checkbox = Checkbox(
                state=state, on_click=lambda: self._select_all(request)
            )

        if loading:
            view.placeholder = PlaceholderRow(
                kind="loading", message=self.labels.loading, colspan=colspan
            )
        elif not rows:
            view.placeholder = PlaceholderRow(
                kind="empty",
                message=self.empty_message,
                colspan=colspan,
                icon=self.empty_icon,
            )
        else:
            view.rows = [self._body_row(row, selectable, selected_rows) for row in rows]

        if pagination is not None and pagination.last_page > 1:
            view.pagination = self._pagination_bar(pagination)

        return view

    def _header_cell(
        self, column: TableColumn, sort_by: Optional[str], sort_order: Optional[str]
    ) -> HeaderCell:
        indicator = SortIndicator.NONE
        on_click = None
        if column.sortable:
            if sort_by == column.key:
                indicator = SortIndicator.ASC if sort_order == "asc" else SortIndicator.DESC
            else:
                indicator = SortIndicator.HOVER
            on_click = partial(self._sort, column.key)
        return HeaderCell(
            key=column.key,
            title=column.title,
            align=column.alignment,
            width=column.width,
            sortable=column.sortable,
            sort_indicator=indicator,
            on_click=on_click,
        )

    def _body_row(self, row: Any, selectable: bool, selected_rows: List[Any]) -> BodyRow:
        cells = []
        for column in self.columns:
            value = resolve_value(row, column.key)
            if column.render is not None:
                rendered = column.render(value, row)
            else:
                rendered = format_cell(value, self.labels)
            cells.append(BodyCell(key=column.key, value=rendered, align=column.alignment))

        selected = is_selected(row, selected_rows) if selectable else False
        body_row = BodyRow(row=row, cells=cells, selected=selected)
        if selectable:
            body_row.checkbox = Checkbox(
                state=SelectionState.CHECKED if selected else SelectionState.UNCHECKED,
                on_click=lambda: self._select_row(row),
            )
        if self.row_actions:
            body_row.actions = self.row_actions(row)
        return body_row

    def _pagination_bar(self, pagination: Pagination) -> PaginationBar:
        current = pagination.current_page
        pages = []
        for number in generate_pagination_numbers(current, pagination.last_page):
            if number == ELLIPSIS:
                pages.append(PageButton(label=ELLIPSIS, page=None, disabled=True))
            else:
                pages.append(
                    PageButton(
                        label=number,
                        page=number,
                        active=number == current,
                        on_click=lambda page=number: self._change_page(page),
                    )
                )

        return PaginationBar(
            summary=self.labels.summary.format(
                start=pagination.display_from,
                end=pagination.display_to,
                total=pagination.total,
            ),
            previous=PageButton(
                label=self.labels.previous,
                page=current - 1,
                disabled=current == 1,
                on_click=lambda: self._change_page(current - 1),
            ),
            next=PageButton(
                label=self.labels.next,
                page=current + 1,
                disabled=current == pagination.last_page,
                on_click=lambda: self._change_page(current + 1),
            ),
            pages=pages,
        )

    def _sort(self, key: str) -> None:
        if self.on_sort is not None:
            self.on_sort(key)

    def _change_page(self, page: int) -> None:
        if self.on_page_change is not None:
            self.on_page_change(page)

    def _select_row(self, row: Any) -> None:
        if self.on_select_row is not None:
            self.on_select_row(row)

    def _select_all(self, rows: List[Any]) -> None:
        if self.on_select_all is not None:
            self.on_select_all(list(rows))
