import json

import pytest

from db.manager import DataStore
from models.category import Category


class TestDataStore:
    """Tests for DataStore."""

    def test_missing_listing_is_empty(self, test_config):
        """Test that reading before any write returns no categories."""
        assert DataStore(test_config).read_categories("1") == []

    def test_write_then_read(self, test_config, sample_categories):
        """Test that written categories read back unchanged."""
        store = DataStore(test_config)

        store.write_categories("1", sample_categories)

        assert store.read_categories("1") == sample_categories

    def test_depth_not_persisted(self, test_config):
        """Test that computed depths are left out of the file."""
        store = DataStore(test_config)

        store.write_categories("1", [Category(id=1, name="A", depth=3)])

        with open(store.get_listing_path("1"), encoding="utf-8") as f:
            payload = json.load(f)
        assert "depth" not in payload["data"][0]
        assert store.read_categories("1")[0].depth is None

    def test_listing_path_per_country(self, test_config):
        """Test that each country has its own file."""
        store = DataStore(test_config)

        assert store.get_listing_path("2") == test_config.data_dir / "categories-2.json"

    def test_no_temp_files_left(self, test_config, sample_categories):
        """Test that the temporary file is moved into place."""
        store = DataStore(test_config)

        store.write_categories("1", sample_categories)

        assert [p.name for p in test_config.data_dir.iterdir()] == ["categories-1.json"]

    def test_corrupt_file_raises(self, test_config):
        """Test that an unreadable listing raises ValueError."""
        store = DataStore(test_config)
        path = store.get_listing_path("1")
        path.parent.mkdir(parents=True)
        path.write_text("{oops", encoding="utf-8")

        with pytest.raises(ValueError, match="Corrupt listing file"):
            store.read_categories("1")

    def test_reads_raw_api_response(self, test_config):
        """Test that a saved API response can be used as a listing."""
        store = DataStore(test_config)
        path = store.get_listing_path("1")
        path.parent.mkdir(parents=True)
        path.write_text(
            json.dumps({"data": {"data": [{"id": 5, "name": "Art"}], "pagination": {}}}),
            encoding="utf-8",
        )

        assert [c.name for c in store.read_categories("1")] == ["Art"]
