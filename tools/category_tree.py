"""Category tree reconstruction.

Categories arrive as a flat list where each record points at its parent. The
categories screen shows them as an indented table, so the list is rebuilt into
a forest and flattened back in pre-order with a ``depth`` on every record.

Records may be ``Category`` dataclasses or plain mappings with ``id`` and
``parent_id`` keys.
"""

import copy
import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from logger import get_logger

logger = get_logger()


class TreeError(Exception):
    """Base class for category tree errors."""


class DuplicateCategoryId(TreeError):
    """Raised in strict mode when two records share an id."""

    def __init__(self, ids: List[Any]):
        self.ids = ids
        super().__init__(f"Duplicate category ids: {ids}")


class CycleDetected(TreeError):
    """Raised in strict mode when parent references form a cycle."""

    def __init__(self, ids: List[Any]):
        self.ids = ids
        super().__init__(f"Categories unreachable from any root (parent cycle): {ids}")


@dataclass
class ForestNode:
    """A record and its child nodes."""

    record: Any
    children: List["ForestNode"] = field(default_factory=list)


@dataclass
class CategoryStats:
    """Summary counters shown above the categories table."""

    total: int
    active: int
    inactive: int
    articles: int
    roots: int


def record_field(record: Any, name: str) -> Any:
    """Read a field from a mapping or an attribute-style record."""
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _with_depth(record: Any, depth: int) -> Any:
    if isinstance(record, Mapping):
        clone = dict(record)
        clone.pop("children", None)
        clone["depth"] = depth
        return clone
    if dataclasses.is_dataclass(record) and any(
        f.name == "depth" for f in dataclasses.fields(record)
    ):
        return dataclasses.replace(record, depth=depth)
    clone = copy.copy(record)
    setattr(clone, "depth", depth)
    return clone


def build_forest(records: List[Any], strict: bool = False) -> List[ForestNode]:
    """Build a forest from records carrying optional parent references.

    Roots keep their input order, as do siblings under a parent. Records whose
    parent is missing from the input become roots.

    Args:
        records: Records in any order.
        strict: Raise on duplicate ids and parent cycles instead of repairing.

    Returns:
        List of root nodes.

    Raises:
        DuplicateCategoryId: In strict mode, if an id appears more than once.
        CycleDetected: In strict mode, if some records cannot be reached
            from a root.
    """
    lookup: Dict[Any, ForestNode] = {}
    duplicates = []
    for record in records:
        record_id = record_field(record, "id")
        if record_id in lookup:
            duplicates.append(record_id)
        # Last write wins; dict order stays at the id's first appearance.
        lookup[record_id] = ForestNode(record=record)

    if duplicates:
        if strict:
            raise DuplicateCategoryId(duplicates)
        logger.warning(f"Duplicate category ids, keeping last record: {duplicates}")

    roots: List[ForestNode] = []
    parents: Dict[Any, ForestNode] = {}
    for record_id, node in lookup.items():
        parent_id = record_field(node.record, "parent_id")
        if parent_id and parent_id in lookup:
            lookup[parent_id].children.append(node)
            parents[record_id] = lookup[parent_id]
        else:
            roots.append(node)

    reachable = _reachable_ids(roots)
    if len(reachable) == len(lookup):
        return roots

    orphaned = [record_id for record_id in lookup if record_id not in reachable]
    if strict:
        raise CycleDetected(orphaned)
    logger.warning(f"Parent cycle detected, promoting categories to roots: {orphaned}")

    for record_id in orphaned:
        if record_id in reachable:
            continue
        node = lookup[record_id]
        parents[record_id].children.remove(node)
        roots.append(node)
        reachable.update(_reachable_ids([node]))

    return roots


def _reachable_ids(roots: List[ForestNode]) -> set:
    seen = set()
    stack = list(roots)
    while stack:
        node = stack.pop()
        record_id = record_field(node.record, "id")
        if record_id in seen:
            continue
        seen.add(record_id)
        stack.extend(node.children)
    return seen


def flatten(forest: List[ForestNode], start_depth: int = 0) -> List[Any]:
    """Flatten a forest in pre-order, tagging each record with its depth.

    Emitted records are copies; the forest is left untouched.

    Args:
        forest: Root nodes, as returned by build_forest.
        start_depth: Depth assigned to the roots.

    Returns:
        Records ordered so that every node is followed by its whole subtree
        before its next sibling.
    """
    flat = []
    stack = [(node, start_depth) for node in reversed(forest)]
    while stack:
        node, depth = stack.pop()
        flat.append(_with_depth(node.record, depth))
        stack.extend((child, depth + 1) for child in reversed(node.children))
    return flat


def build_tree_rows(records: List[Any], strict: bool = False) -> List[Any]:
    """Shortcut for flatten(build_forest(records))."""
    return flatten(build_forest(records, strict=strict))


def child_depth(parent_id: Optional[int], rows: List[Any]) -> int:
    """Depth a new child of ``parent_id`` would be shown at.

    Args:
        parent_id: Selected parent, or None for a top-level category.
        rows: Flattened rows carrying depths.
    """
    if not parent_id:
        return 0
    for row in rows:
        if record_field(row, "id") == parent_id:
            return (record_field(row, "depth") or 0) + 1
    return 0


def category_stats(categories: List[Any]) -> CategoryStats:
    """Count categories for the summary cards."""
    active = sum(1 for c in categories if record_field(c, "is_active"))
    return CategoryStats(
        total=len(categories),
        active=active,
        inactive=len(categories) - active,
        articles=sum(record_field(c, "news_count") or 0 for c in categories),
        roots=sum(1 for c in categories if not record_field(c, "parent_id")),
    )
