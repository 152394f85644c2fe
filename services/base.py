"""Application state container, built once at startup and passed to commands."""

from typing import Any, List

from config import Config
from db.manager import DataStore
from models.country import COUNTRIES, Country, find_country
from tools.data_table import TableLabels, get_labels, toggle_selection


class Services:
    """Container for application state and services.

    This class provides a centralized way to access all services and makes
    it easy to inject a fake store for testing.

    Args:
        config: Application configuration object.
        store: Optional data store for testing. If None, creates a DataStore
            from config.
    """

    def __init__(self, config: Config, store=None):
        self.config = config
        self.store = store or DataStore(config)

        # Lazy import to avoid circular dependencies
        from services.categories import CategoryService

        self.categories = CategoryService(self.store, strict_tree=config.strict_tree)
        self.country: Country = find_country(config.default_country) or COUNTRIES[0]
        self.selected_rows: List[Any] = []

    @property
    def labels(self) -> TableLabels:
        return get_labels(self.config.locale)

    def select_country(self, value: str) -> Country:
        """Switch the active country; clears the row selection.

        Raises:
            ValueError: If no country matches ``value``.
        """
        country = find_country(value)
        if country is None:
            raise ValueError(f"Unknown country: {value}")
        self.country = country
        self.selected_rows = []
        return country

    def toggle_row(self, row: Any) -> None:
        self.selected_rows = toggle_selection(self.selected_rows, row)

    def select_rows(self, rows: List[Any]) -> None:
        self.selected_rows = list(rows)

    def teardown(self) -> None:
        """Release per-session state (selection and cached listings)."""
        self.selected_rows = []
        self.categories.clear()
