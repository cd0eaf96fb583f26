"""
State slices managed by a paginator.

Two independent slices live in the global state:

- the entity table: entity id -> most recently received item
- the pagination state: the page index (filter signature -> page number ->
  ordered entity ids) plus the metadata of the most recent response
"""

from collections.abc import Mapping
from typing import Any

from .exceptions import StateKeyError

# Filter signature -> page number -> ordered entity ids
PageIndex = dict[str, dict[int, list[Any]]]


def pagination_initial_state() -> dict[str, Any]:
    """Returns a fresh, empty pagination state."""
    return {
        "pages": {},
        "page": 1,
        "filters": {},
        "next": None,
        "previous": None,
        "count": 0,
    }


def entities_initial_state() -> dict[Any, Any]:
    """Returns a fresh, empty entity table."""
    return {}


def get_state_segment(state: Mapping[str, Any], segment: str) -> Any:
    """
    Resolve a named segment out of the global state.

    Raises:
        StateKeyError: If the segment does not exist. This means the reducers
            were registered under a different key than the paginator reads.
    """
    if segment not in state:
        raise StateKeyError(segment)
    return state[segment]


def lookup_page_ids(
    pages: Mapping[str, Mapping[int, list[Any]]] | None, filter_key: str, page: int
) -> list[Any] | None:
    """
    Look up the entity ids stored for a filter signature and page number.

    Returns None when either level is absent.
    """
    if not pages:
        return None
    filtered_pages = pages.get(filter_key)
    if filtered_pages is None:
        return None
    return filtered_pages.get(page)
