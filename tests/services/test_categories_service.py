from services.categories import CategoryService
from tests.helpers import FailingStore, depths, ids


class TestCategoryService:
    """Tests for CategoryService."""

    def test_find_all_empty(self, services):
        """Test that a country with no stored listing has no categories."""
        assert services.categories.find_all("1") == []

    def test_find_all_keeps_stored_order(self, seeded_services):
        """Test that categories come back in stored order."""
        assert ids(seeded_services.categories.find_all("1")) == [1, 2, 3, 4, 5]

    def test_find(self, seeded_services):
        """Test finding a category by ID."""
        category = seeded_services.categories.find("1", 4)

        assert category is not None
        assert category.name == "Geometry"
        assert seeded_services.categories.find("1", 999) is None

    def test_countries_are_separate(self, seeded_services):
        """Test that listings are kept per country."""
        assert seeded_services.categories.find_all("2") == []

    def test_tree(self, seeded_services):
        """Test the flattened tree order and depths."""
        rows = seeded_services.categories.tree("1")

        assert ids(rows) == [1, 2, 4, 3, 5]
        assert depths(rows) == [0, 1, 1, 0, 1]

    def test_listing_without_filters_is_unpaginated_tree(self, seeded_services):
        """Test that the unfiltered listing is the whole tree."""
        rows, pagination = seeded_services.categories.listing("1", per_page=2)

        assert ids(rows) == [1, 2, 4, 3, 5]
        assert pagination is None

    def test_listing_search_paginates(self, seeded_services):
        """Test that a search returns one page with pagination state."""
        rows, pagination = seeded_services.categories.listing("1", page=1, per_page=1, search="e")

        assert ids(rows) == [1]
        assert pagination.total == 4
        assert pagination.last_page == 4
        assert (pagination.display_from, pagination.display_to) == (1, 1)

    def test_listing_search_second_page(self, seeded_services):
        """Test the range reported for a later page."""
        rows, pagination = seeded_services.categories.listing("1", page=2, per_page=3, search="e")

        assert ids(rows) == [4]
        assert pagination.current_page == 2
        assert (pagination.display_from, pagination.display_to) == (4, 4)

    def test_listing_status_filter(self, seeded_services):
        """Test filtering by status."""
        rows, pagination = seeded_services.categories.listing("1", is_active=False)

        assert ids(rows) == [3]
        assert pagination.total == 1

    def test_search_matches_slug_case_insensitively(self, seeded_services):
        """Test that search looks at names and slugs, ignoring case."""
        assert ids(seeded_services.categories.search("1", "ALGEB")) == [2]
        assert ids(seeded_services.categories.search("1", "physics")) == [5]

    def test_stats(self, seeded_services):
        """Test the summary counters."""
        stats = seeded_services.categories.stats("1")

        assert stats.total == 5
        assert stats.inactive == 1
        assert stats.roots == 2

    def test_toggle(self, seeded_services):
        """Test toggling persists the new status."""
        result = seeded_services.categories.toggle("1", 3)

        assert result.ok
        assert result.value.is_active is True
        assert seeded_services.store.read_categories("1")[2].is_active is True

    def test_toggle_not_found(self, seeded_services):
        """Test toggling an unknown category returns an error."""
        result = seeded_services.categories.toggle("1", 999)

        assert not result.ok
        assert result.error == "Category with ID 999 not found"

    def test_toggle_rolls_back_on_save_failure(self, seeded_services):
        """Test that a failed save restores the previous status."""
        service = CategoryService(FailingStore(seeded_services.store))

        result = service.toggle("1", 1)

        assert not result.ok
        assert "disk full" in result.error
        assert service.find("1", 1).is_active is True

    def test_delete(self, seeded_services):
        """Test deleting a category keeps its children as roots."""
        result = seeded_services.categories.delete("1", 1)

        assert result.ok
        assert result.value.name == "Mathematics"
        rows = seeded_services.categories.tree("1")
        assert ids(rows) == [2, 3, 5, 4]
        assert depths(rows) == [0, 0, 1, 0]
        assert len(seeded_services.store.read_categories("1")) == 4

    def test_delete_rolls_back_on_save_failure(self, seeded_services):
        """Test that a failed delete restores the category."""
        service = CategoryService(FailingStore(seeded_services.store))

        result = service.delete("1", 2)

        assert not result.ok
        assert service.find("1", 2) is not None

    def test_delete_not_found(self, seeded_services):
        """Test deleting an unknown category returns an error."""
        assert not seeded_services.categories.delete("1", 999).ok

    def test_replace_all(self, services, sample_categories):
        """Test storing a fresh listing."""
        result = services.categories.replace_all("3", sample_categories[:2])

        assert result.ok
        assert ids(services.store.read_categories("3")) == [1, 2]

    def test_clear_reloads_from_store(self, seeded_services, sample_categories):
        """Test that clearing the cache picks up store changes."""
        seeded_services.categories.find_all("1")
        seeded_services.store.write_categories("1", sample_categories[:1])

        seeded_services.categories.clear()

        assert ids(seeded_services.categories.find_all("1")) == [1]
