import pytest

from models.pagination import Pagination
from tools.pagination import ELLIPSIS, generate_pagination_numbers


class TestGeneratePaginationNumbers:
    """Tests for generate_pagination_numbers."""

    def test_small_page_count_shows_all(self):
        """Test that up to seven pages are all listed."""
        assert generate_pagination_numbers(1, 1) == [1]
        assert generate_pagination_numbers(4, 7) == [1, 2, 3, 4, 5, 6, 7]

    def test_middle_page(self):
        """Test the window with ellipses on both sides."""
        assert generate_pagination_numbers(10, 20) == [1, ELLIPSIS, 8, 9, 10, 11, 12, ELLIPSIS, 20]

    def test_first_page(self):
        """Test that the leading ellipsis is omitted near the start."""
        assert generate_pagination_numbers(1, 20) == [1, 2, 3, ELLIPSIS, 20]

    def test_last_page(self):
        """Test that the trailing ellipsis is omitted near the end."""
        assert generate_pagination_numbers(20, 20) == [1, ELLIPSIS, 18, 19, 20]

    def test_window_touching_first_page(self):
        """Test that no ellipsis is shown when the window reaches page 2."""
        assert generate_pagination_numbers(4, 10) == [1, 2, 3, 4, 5, 6, ELLIPSIS, 10]

    def test_window_touching_last_page(self):
        """Test that no ellipsis is shown when the window reaches the last page but one."""
        assert generate_pagination_numbers(7, 10) == [1, ELLIPSIS, 5, 6, 7, 8, 9, 10]

    def test_no_pages(self):
        """Test that zero pages give no buttons."""
        assert generate_pagination_numbers(1, 0) == []

    @pytest.mark.parametrize("last", [1, 2, 7, 8, 9, 50, 1000])
    def test_button_count_is_bounded(self, last):
        """Test that at most seven page numbers and two ellipses are shown."""
        for current in range(1, last + 1):
            pages = generate_pagination_numbers(current, last)
            numbers = [p for p in pages if p != ELLIPSIS]

            assert len(numbers) <= 7
            assert pages.count(ELLIPSIS) <= 2
            assert numbers == sorted(set(numbers))
            assert current in numbers
            assert numbers[0] == 1 and numbers[-1] == last


class TestPagination:
    """Tests for the Pagination model."""

    def test_derived_range(self):
        """Test that from/to are derived when not supplied."""
        pagination = Pagination(current_page=3, last_page=5, per_page=10, total=45)

        assert pagination.display_from == 21
        assert pagination.display_to == 30

    def test_derived_range_last_page(self):
        """Test that the derived end is capped at the total."""
        pagination = Pagination(current_page=5, last_page=5, per_page=10, total=45)

        assert pagination.display_to == 45

    def test_supplied_range_preferred(self):
        """Test that supplied from/to win over derived values."""
        pagination = Pagination(current_page=2, last_page=3, per_page=10, total=25, from_item=11, to_item=19)

        assert pagination.display_from == 11
        assert pagination.display_to == 19

    def test_empty_total(self):
        """Test that an empty result shows 0 to 0."""
        pagination = Pagination(total=0)

        assert pagination.display_from == 0
        assert pagination.display_to == 0

    def test_for_items(self):
        """Test building a state from a result count."""
        pagination = Pagination.for_items(total=45, page=2, per_page=10)

        assert pagination.last_page == 5
        assert pagination.current_page == 2
        assert Pagination.for_items(total=0, page=1, per_page=10).last_page == 1
