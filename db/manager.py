"""Data store for fetched category listings, kept as JSON files."""

import json
import os
import tempfile
from dataclasses import asdict
from pathlib import Path
from typing import List

from config import Config
from ingestion.categories import parse_records
from ingestion.listing import unwrap_list
from models.category import Category


class DataStore:
    """Reads and writes one listing file per country.

    Args:
        config: Application configuration object.
    """

    def __init__(self, config: Config):
        """Initialize the data store.

        Args:
            config: Config object containing the storage directory.
        """
        self.config = config

    def get_listing_path(self, country: str) -> Path:
        """Get the listing file for a country.

        Returns:
            Path: Path to the JSON listing file.
        """
        return self.config.data_dir / f"categories-{country}.json"

    def read_categories(self, country: str) -> List[Category]:
        """Load the stored categories for a country.

        Args:
            country: Country id.

        Returns:
            List of Category objects; empty if nothing has been stored yet.

        Raises:
            ValueError: If the listing file is not valid JSON.
        """
        path = self.get_listing_path(country)
        if not path.exists():
            return []

        with open(path, "r", encoding="utf-8") as f:
            try:
                payload = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Corrupt listing file {path}: {e}") from e

        records, _ = unwrap_list(payload)
        return parse_records(records)

    def write_categories(self, country: str, categories: List[Category]) -> None:
        """Replace the stored categories for a country.

        The file is written to a temporary sibling first and moved into place.

        Args:
            country: Country id.
            categories: Categories to store; depths are not persisted.

        Raises:
            OSError: If the file cannot be written.
        """
        path = self.get_listing_path(country)
        path.parent.mkdir(parents=True, exist_ok=True)

        records = []
        for category in categories:
            record = asdict(category)
            record.pop("depth", None)
            records.append(record)

        fd, tmp_name = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump({"data": records}, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
