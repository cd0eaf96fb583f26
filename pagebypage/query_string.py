"""
Filter signature canonicalization.

A filter mapping is serialized into a query string that is used as the
first-level key of the pagination page index. Keys are sorted, so two
mappings with the same items always produce the same signature no matter
the order they were built in.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any
from urllib.parse import quote


def _to_query_value(value: Any) -> str:
    """Render a single filter value the way it appears in a query string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _pair(key: Any, value: Any) -> str:
    """A single ``key=value`` segment; ``None`` renders as the bare key."""
    encoded_key = quote(str(key), safe="")
    if value is None:
        return encoded_key
    return f"{encoded_key}={quote(_to_query_value(value), safe='')}"


def stringify(filters: Mapping[str, Any] | None) -> str:
    """
    Serialize a filter mapping into its canonical query string.

    - keys are emitted in sorted order
    - ``None`` values are emitted as the bare key, so ``{"author": None}``
      never shares a signature with ``{}``
    - list/tuple values repeat the key once per element, in element order
    - an empty (or missing) mapping yields ``""``

    E.g.: {"year": 1990, "category_id": 5} -> "category_id=5&year=1990"
    """
    if not filters:
        return ""

    segments: list[str] = []
    for key in sorted(filters, key=str):
        value = filters[key]
        if isinstance(value, (list, tuple)):
            segments.extend(_pair(key, item) for item in value)
        else:
            segments.append(_pair(key, value))

    return "&".join(segments)
