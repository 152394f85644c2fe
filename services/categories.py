"""Category service for the categories screen."""

from dataclasses import replace
from typing import Dict, List, Optional, Tuple

from models.category import Category
from models.pagination import Pagination
from services.optimistic import Err, Ok, OptimisticList, Result
from tools.category_tree import CategoryStats, build_tree_rows, category_stats
from logger import get_logger

logger = get_logger()


class CategoryService:
    """Service for listing and updating categories per country."""

    def __init__(self, store, strict_tree: bool = False):
        """Initialize the category service.

        Args:
            store: DataStore used to load and persist listings.
            strict_tree: Raise on duplicate ids or parent cycles when
                building the tree.
        """
        self.store = store
        self.strict_tree = strict_tree
        self._listings: Dict[str, OptimisticList[Category]] = {}

    def _listing(self, country: str) -> OptimisticList[Category]:
        if country not in self._listings:
            self._listings[country] = OptimisticList(self.store.read_categories(country))
        return self._listings[country]

    def clear(self) -> None:
        """Drop cached listings so the next call reloads from the store."""
        self._listings.clear()

    def find_all(self, country: str) -> List[Category]:
        """Get all categories for a country, in stored order."""
        return list(self._listing(country).items)

    def find(self, country: str, category_id: int) -> Optional[Category]:
        """Get a single category by ID, or None if not found."""
        for category in self._listing(country).items:
            if category.id == category_id:
                return category
        return None

    def tree(self, country: str) -> List[Category]:
        """All categories flattened in tree order with depths."""
        return build_tree_rows(self.find_all(country), strict=self.strict_tree)

    def search(
        self,
        country: str,
        search: Optional[str] = None,
        is_active: Optional[bool] = None,
    ) -> List[Category]:
        """Filter categories by name/slug substring and status."""
        needle = (search or "").strip().lower()
        results = []
        for category in self.find_all(country):
            if is_active is not None and category.is_active != is_active:
                continue
            if needle and needle not in category.name.lower() and needle not in category.slug.lower():
                continue
            results.append(category)
        return results

    def listing(
        self,
        country: str,
        page: int = 1,
        per_page: int = 24,
        search: Optional[str] = None,
        is_active: Optional[bool] = None,
    ) -> Tuple[List[Category], Optional[Pagination]]:
        """Rows for the categories table.

        Without a search or status filter the whole tree is shown unpaginated.
        With one, the matching categories are paginated as a flat list.

        Returns:
            Tuple of (rows, pagination). Pagination is None for the tree view.
        """
        if not search and is_active is None:
            return self.tree(country), None

        matches = self.search(country, search, is_active)
        pagination = Pagination.for_items(len(matches), page, per_page)
        start = (page - 1) * per_page
        rows = matches[start : start + per_page] if start >= 0 else []
        pagination.from_item = start + 1 if rows else 0
        pagination.to_item = start + len(rows) if rows else 0
        return rows, pagination

    def stats(self, country: str) -> CategoryStats:
        """Summary counters for a country's categories."""
        return category_stats(self.find_all(country))

    def toggle(self, country: str, category_id: int) -> Result:
        """Flip a category's active flag.

        Returns:
            Ok with the updated Category, or Err if the category does not
            exist or could not be saved.
        """
        if self.find(country, category_id) is None:
            return Err(f"Category with ID {category_id} not found")

        def patch(items: List[Category]) -> List[Category]:
            return [
                replace(c, is_active=not c.is_active) if c.id == category_id else c
                for c in items
            ]

        result = self._listing(country).transact(patch, self._commit(country))
        if result.ok:
            return Ok(self.find(country, category_id))
        return result

    def delete(self, country: str, category_id: int) -> Result:
        """Delete a category.

        Children of the deleted category are kept; they show as roots until
        re-parented.

        Returns:
            Ok with the removed Category, or Err if it does not exist or
            could not be saved.
        """
        category = self.find(country, category_id)
        if category is None:
            return Err(f"Category with ID {category_id} not found")

        def patch(items: List[Category]) -> List[Category]:
            return [c for c in items if c.id != category_id]

        result = self._listing(country).transact(patch, self._commit(country))
        if result.ok:
            return Ok(category)
        return result

    def replace_all(self, country: str, categories: List[Category]) -> Result:
        """Store a freshly fetched listing for a country."""
        return self._listing(country).transact(
            lambda items: list(categories), self._commit(country)
        )

    def _commit(self, country: str):
        def commit(items: List[Category]) -> Result:
            try:
                self.store.write_categories(country, items)
            except OSError as e:
                logger.error(f"Failed to save categories for country {country}: {e}")
                return Err(str(e))
            return Ok(len(items))

        return commit
