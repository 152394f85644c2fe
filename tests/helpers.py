"""Helper utilities for tests."""

from typing import List

from tools.category_tree import ForestNode


def ids(rows) -> List[int]:
    """Ids of records or mappings, in order."""
    return [row["id"] if isinstance(row, dict) else row.id for row in rows]


def depths(rows) -> List[int]:
    """Depths of records or mappings, in order."""
    return [row["depth"] if isinstance(row, dict) else row.depth for row in rows]


class FailingStore:
    """Store whose writes always fail, wrapping a real store for reads."""

    def __init__(self, store):
        self.store = store

    def read_categories(self, country):
        return self.store.read_categories(country)

    def write_categories(self, country, categories):
        raise OSError("disk full")


def tree_shape(forest: List[ForestNode]):
    """Nested (id, children) tuples for a forest."""
    return [
        (node.record["id"] if isinstance(node.record, dict) else node.record.id,
         tree_shape(node.children))
        for node in forest
    ]
