from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .actions import ActionCreators
from .config import PaginatorOptions
from .navigation import ApiCall, Navigation
from .reducers import EntitiesReducer, PaginationReducer
from .selectors import Selectors


@dataclass(frozen=True)
class Paginator:
    """
    One configured paginator for a single entity type.

    Register ``pagination_reducer`` and ``entities_reducer`` in the state
    container under ``options.paginators_key`` and ``options.entities_key``
    (see ``reducers()``), read with ``selectors`` and fetch with
    ``navigation``.
    """

    entity_type: str
    options: PaginatorOptions
    selectors: Selectors
    action_creators: ActionCreators
    navigation: Navigation
    pagination_reducer: PaginationReducer
    entities_reducer: EntitiesReducer

    def reducers(self) -> dict[str, Any]:
        """Reducers keyed by the state segment each one owns."""
        return {
            self.options.paginators_key: self.pagination_reducer,
            self.options.entities_key: self.entities_reducer,
        }


def get_paginator(
    entity_type: str,
    api_call: ApiCall,
    options: Mapping[str, Any] | PaginatorOptions | None = None,
    **overrides: Any,
) -> Paginator:
    """
    Build a paginator for ``entity_type``.

    Args:
        entity_type: Tag identifying this paginator's messages
        api_call: Async callable taking the query params mapping and
            returning the raw API response
        options: Option mapping (snake_case or camelCase names) or a
            PaginatorOptions instance
        **overrides: Individual options applied on top of ``options``

    Raises:
        InvalidOptionsError: If the options fail validation

    Usage:
        books = get_paginator("books", api.list_books, entity_id_key="isbn")
        await books.navigation.fetch_page(state)()(store.dispatch)
    """
    opts = PaginatorOptions.build(options, **overrides)

    selectors = Selectors(opts)
    action_creators = ActionCreators(entity_type, opts)
    navigation = Navigation(entity_type, api_call, selectors, action_creators, opts)

    return Paginator(
        entity_type=entity_type,
        options=opts,
        selectors=selectors,
        action_creators=action_creators,
        navigation=navigation,
        pagination_reducer=PaginationReducer(entity_type, opts),
        entities_reducer=EntitiesReducer(entity_type, opts),
    )
