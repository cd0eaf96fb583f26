"""
Pure state-transition functions for the pagination and entity slices.

Both reducers only react to RECEIVE_PAGE messages whose entity type matches
the paginator's. Anything else returns the prior state object unchanged.
Reducers never mutate the prior state: every change copies the containers
on the written path.
"""

from collections.abc import Mapping
from typing import Any

from .actions import RECEIVE_PAGE
from .config import PaginatorOptions
from .query_string import stringify
from .state import entities_initial_state, pagination_initial_state


def _read_action(action: Any) -> tuple[Any, Any, Mapping[str, Any]]:
    """
    Extract (type, payload, meta) from an Action or a mapping-shaped message.

    Messages from other modules may carry no meta at all.
    """
    if isinstance(action, Mapping):
        return action.get("type"), action.get("payload"), action.get("meta") or {}
    return (
        getattr(action, "type", None),
        getattr(action, "payload", None),
        getattr(action, "meta", None) or {},
    )


class _BaseReducer:
    initial_state: Any = None

    def __init__(self, entity_type: str, options: PaginatorOptions) -> None:
        self.entity_type = entity_type
        self.options = options

    def __call__(self, state: Any, action: Any) -> Any:
        if state is None:
            state = self.initial_state()

        action_type, payload, meta = _read_action(action)
        if meta.get("entity_type") != self.entity_type or action_type != RECEIVE_PAGE:
            return state
        return self.receive_page(state, payload or [], meta)

    def receive_page(self, state: Any, payload: list[Any], meta: Mapping[str, Any]) -> Any:
        raise NotImplementedError

    def _entity_id(self, item: Mapping[str, Any]) -> Any:
        return item[self.options.entity_id_key]


class EntitiesReducer(_BaseReducer):
    """Folds received items into the entity table, keyed by entity id."""

    initial_state = staticmethod(entities_initial_state)

    def receive_page(
        self, state: dict[Any, Any], payload: list[Any], meta: Mapping[str, Any]
    ) -> dict[Any, Any]:
        next_state = dict(state)
        for item in payload:
            next_state[self._entity_id(item)] = item
        return next_state


class PaginationReducer(_BaseReducer):
    """Folds received page metadata into the filter-keyed page index."""

    initial_state = staticmethod(pagination_initial_state)

    def receive_page(
        self, state: dict[str, Any], payload: list[Any], meta: Mapping[str, Any]
    ) -> dict[str, Any]:
        filter_key = stringify(meta.get("filters"))

        pages = dict(state.get("pages") or {})
        filtered_pages = dict(pages.get(filter_key) or {})
        filtered_pages[meta.get("page")] = [self._entity_id(item) for item in payload]
        pages[filter_key] = filtered_pages

        next_state = dict(state)
        next_state.update(meta)
        next_state["pages"] = pages
        return next_state
