"""Column definitions for the categories table."""

from typing import Any, List

from models.icons import icon_glyph
from tools.category_tree import record_field
from tools.data_table import LABELS, TableColumn, TableLabels

CHILD_MARKER = "↳"


def render_name(value: Any, row: Any, indent: int = 2) -> str:
    """Category name indented by depth, with its icon."""
    depth = record_field(row, "depth") or 0
    prefix = " " * (depth * indent)
    if depth > 0:
        prefix += CHILD_MARKER + " "
    glyph = icon_glyph(record_field(row, "icon"), record_field(row, "icon_image_url"))
    return f"{prefix}{glyph} {value or ''}".rstrip()


def category_columns(labels: TableLabels = LABELS["en"], indent: int = 2) -> List[TableColumn]:
    """Columns used by the categories screen.

    Args:
        labels: Table strings for titles, status, article counts, and the
            placeholder that stands in for missing slugs.
        indent: Spaces per tree level in the name column.
    """
    return [
        TableColumn(
            key="name",
            title=labels.column_name,
            sortable=True,
            render=lambda value, row: render_name(value, row, indent),
        ),
        TableColumn(
            key="slug",
            title=labels.column_slug,
            render=lambda value, row: value or labels.placeholder,
        ),
        TableColumn(
            key="news_count",
            title=labels.column_articles,
            sortable=True,
            align="center",
            render=lambda value, row: labels.articles_count.format(count=value or 0),
        ),
        TableColumn(
            key="is_active",
            title=labels.column_status,
            align="center",
            render=lambda value, row: labels.active if value else labels.inactive,
        ),
    ]
