"""Pagination state for page-based list responses."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Pagination:
    """Mirrors the pagination block of a REST list response.

    Attributes:
        current_page: 1-based page being displayed.
        last_page: Number of pages available.
        per_page: Page size.
        total: Total number of records across all pages.
        from_item: Optional 1-based index of the first record on the page.
        to_item: Optional 1-based index of the last record on the page.
    """

    current_page: int = 1
    last_page: int = 1
    per_page: int = 24
    total: int = 0
    from_item: Optional[int] = None
    to_item: Optional[int] = None

    @property
    def display_from(self) -> int:
        """Index of the first record shown, supplied or derived."""
        if self.from_item is not None:
            return self.from_item
        if self.total <= 0:
            return 0
        return (self.current_page - 1) * self.per_page + 1

    @property
    def display_to(self) -> int:
        """Index of the last record shown, supplied or derived."""
        if self.to_item is not None:
            return self.to_item
        if self.total <= 0:
            return 0
        return min(self.current_page * self.per_page, self.total)

    @classmethod
    def for_items(cls, total: int, page: int, per_page: int) -> "Pagination":
        """Build the state for showing ``page`` of ``total`` records."""
        last_page = max(1, -(-total // per_page)) if per_page > 0 else 1
        return cls(
            current_page=page,
            last_page=last_page,
            per_page=per_page,
            total=total,
        )
