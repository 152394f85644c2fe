"""Shared pytest fixtures for all tests."""

import pytest

from config import Config
from models.category import Category
from services.base import Services


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing at a temporary directory.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "eduadmin",
        data_dir=tmp_path / "eduadmin" / "listings",
        log_level="DEBUG",
        log_dir=tmp_path / "eduadmin" / "logs",
        locale="en",
        per_page=2,
        indent=2,
        strict_tree=False,
        default_country="1",
    )


@pytest.fixture
def sample_categories():
    """A small two-level category listing, in API order."""
    return [
        Category(id=1, name="Mathematics", slug="math", news_count=4, icon="Calculator"),
        Category(id=2, name="Algebra", slug="algebra", parent_id=1, news_count=2),
        Category(id=3, name="Science", slug="science", is_active=False),
        Category(id=4, name="Geometry", slug="geometry", parent_id=1, news_count=1),
        Category(id=5, name="Physics", slug="physics", parent_id=3),
    ]


@pytest.fixture
def services(test_config):
    """Create a Services container backed by a temporary data store.

    Args:
        test_config: Test configuration fixture.

    Returns:
        Services: Services container for testing.
    """
    return Services(test_config)


@pytest.fixture
def seeded_services(services, sample_categories):
    """Services with the sample categories stored for country 1."""
    services.store.write_categories("1", sample_categories)
    return services
