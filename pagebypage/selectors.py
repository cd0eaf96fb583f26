from collections.abc import Mapping
from typing import Any

from .config import PaginatorOptions
from .query_string import stringify
from .state import get_state_segment, lookup_page_ids, pagination_initial_state


class Selectors:
    """
    Read-only projections over the pagination and entity slices.

    Every selector takes the full global state. A missing slice raises
    StateKeyError; a missing field inside the pagination slice falls back
    to its initial value.
    """

    def __init__(self, options: PaginatorOptions) -> None:
        self.options = options

    def _paginator_state(self, state: Mapping[str, Any]) -> Mapping[str, Any]:
        return get_state_segment(state, self.options.paginators_key)

    def _entities_state(self, state: Mapping[str, Any]) -> Mapping[Any, Any]:
        return get_state_segment(state, self.options.entities_key)

    def _field(self, state: Mapping[str, Any], name: str) -> Any:
        segment = self._paginator_state(state)
        if name in segment:
            return segment[name]
        return pagination_initial_state()[name]

    def has_next(self, state: Mapping[str, Any]) -> bool:
        return self._field(state, "next") is not None

    def has_previous(self, state: Mapping[str, Any]) -> bool:
        return self._field(state, "previous") is not None

    def get_filters(self, state: Mapping[str, Any]) -> dict[str, Any]:
        return self._field(state, "filters")

    def get_filters_as_query_string(self, state: Mapping[str, Any]) -> str:
        """Canonical filter signature of the active filters."""
        return stringify(self.get_filters(state))

    def get_total_count(self, state: Mapping[str, Any]) -> int:
        return self._field(state, "count")

    def get_current_page_num(self, state: Mapping[str, Any]) -> int:
        return self._field(state, "page")

    def get_current_page_items(self, state: Mapping[str, Any]) -> list[Any]:
        """
        Materialize the entities on the current page for the active filters.

        Returns an empty list when nothing was received yet for this
        filter/page combination. Ids without an entity record yield None, so
        the list always lines up with the page index.
        """
        filter_key = self.get_filters_as_query_string(state)
        page = self.get_current_page_num(state)
        entities = self._entities_state(state)

        ids = lookup_page_ids(self._field(state, "pages"), filter_key, page)
        if ids is None:
            return []
        return [entities.get(entity_id) for entity_id in ids]
