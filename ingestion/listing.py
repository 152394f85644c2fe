"""Helpers for REST list response envelopes."""

from typing import Any, List, Optional, Tuple


def _prop(obj: Any, key: str) -> Any:
    if isinstance(obj, dict):
        return obj.get(key)
    return None


def unwrap_list(payload: Any) -> Tuple[List[Any], Optional[dict]]:
    """Extract the record list and pagination block from a list response.

    Accepted shapes, checked in order:
    - ``{"data": {"data": [...], "pagination": {...}}}``
    - ``{"data": [...], "pagination": {...}}``
    - ``[...]``

    Args:
        payload: Deserialized JSON response.

    Returns:
        Tuple of (records, pagination). Records is empty when no list is
        found; pagination is None when absent or not an object.
    """
    data = _prop(payload, "data")
    nested = _prop(data, "data")
    if isinstance(nested, list):
        records = nested
    elif isinstance(data, list):
        records = data
    elif isinstance(payload, list):
        records = payload
    else:
        records = []

    meta = _prop(data, "pagination")
    if meta is None:
        meta = _prop(payload, "pagination")
    if not isinstance(meta, dict):
        meta = None
    return records, meta
