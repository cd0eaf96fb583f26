"""
Navigation and fetch orchestration.

Navigation works in three stages:

    operation = paginator.navigation.fetch_page(state)(page=2)
    await operation(store.dispatch)

1. ``fetch_page(state)`` captures a snapshot of the global state.
2. Calling the result with page/filter arguments decides *what* to fetch and
   returns a FetchOperation. Precondition errors are raised here.
3. Awaiting the operation with a dispatch function runs the
   request -> API call -> receive cycle.
"""

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ._logging import logger, redact_filters
from .exceptions import NoNextPageError, NoPreviousPageError, TransportError

if TYPE_CHECKING:
    from .actions import Action, ActionCreators
    from .config import PaginatorOptions
    from .selectors import Selectors

ApiCall = Callable[[dict[str, Any]], Awaitable[Mapping[str, Any]]]
Dispatch = Callable[["Action"], Any]


@dataclass(frozen=True, eq=False)
class FetchOperation:
    """
    A deferred page fetch, decided from a state snapshot.

    Awaiting it with a dispatch function dispatches REQUEST_PAGE, calls the
    API and, on success, dispatches RECEIVE_PAGE and returns whatever
    dispatch returned. A failed API call is reported and yields None.

    The operation can be awaited more than once; every run issues the same
    request. Each dispatched message gets its own copy of the filters.
    """

    page: int
    filters: dict[str, Any]
    entity_type: str
    api_call: ApiCall = field(repr=False)
    action_creators: "ActionCreators" = field(repr=False)
    options: "PaginatorOptions" = field(repr=False)

    @property
    def query_params(self) -> dict[str, Any]:
        """Parameters passed to the API call: the filters plus the page number."""
        return {**self.filters, self.options.page_key: self.page}

    async def __call__(self, dispatch: Dispatch) -> Any:
        log_extra = {
            "entity_type": self.entity_type,
            "page": self.page,
            "filters_hash": redact_filters(self.filters),
        }

        dispatch(self.action_creators.request_page(self.page, dict(self.filters)))
        logger.debug("Requesting page", extra=log_extra)

        try:
            response = await self.api_call(self.query_params)
            action = self.action_creators.receive_page(self.page, dict(self.filters), response)
        except Exception as e:
            self._report(e)
            return None

        logger.info("Page received", extra={**log_extra, "count": action.meta["count"]})
        return dispatch(action)

    def _report(self, error: Exception) -> None:
        failure = TransportError(
            entity_type=self.entity_type,
            page=self.page,
            filters=self.filters,
            original_error=error,
        )
        if self.options.on_error is not None:
            self.options.on_error(failure)
            return
        logger.error(
            "Page fetch failed",
            exc_info=error,
            extra={
                "entity_type": self.entity_type,
                "page": self.page,
                "filters_hash": redact_filters(self.filters),
            },
        )


class Navigation:
    """Builds FetchOperations for the first, next, previous or any page."""

    def __init__(
        self,
        entity_type: str,
        api_call: ApiCall,
        selectors: "Selectors",
        action_creators: "ActionCreators",
        options: "PaginatorOptions",
    ) -> None:
        self.entity_type = entity_type
        self.api_call = api_call
        self.selectors = selectors
        self.action_creators = action_creators
        self.options = options

    def fetch_page(
        self, state: Mapping[str, Any]
    ) -> Callable[..., FetchOperation]:
        """
        Bind a state snapshot; returns ``(page=1, override_filters=None)``.

        Non-empty override filters are merged over the current filters and
        reset the page to 1.
        """

        def with_params(
            page: int = 1, override_filters: Mapping[str, Any] | None = None
        ) -> FetchOperation:
            current_filters = dict(self.selectors.get_filters(state) or {})
            if override_filters:
                page = 1
                filters = {**current_filters, **override_filters}
            else:
                filters = dict(current_filters)
            return FetchOperation(
                page=page,
                filters=filters,
                entity_type=self.entity_type,
                api_call=self.api_call,
                action_creators=self.action_creators,
                options=self.options,
            )

        return with_params

    def fetch_next_page(
        self, state: Mapping[str, Any]
    ) -> Callable[..., FetchOperation]:
        """
        Bind a state snapshot; returns ``(override_filters=None)``.

        Raises:
            NoNextPageError: When called while the snapshot has no next page
        """

        def with_params(override_filters: Mapping[str, Any] | None = None) -> FetchOperation:
            if not self.selectors.has_next(state):
                raise NoNextPageError(self.entity_type)
            page = self.selectors.get_current_page_num(state) + 1
            return self.fetch_page(state)(page, override_filters)

        return with_params

    def fetch_previous_page(
        self, state: Mapping[str, Any]
    ) -> Callable[..., FetchOperation]:
        """
        Bind a state snapshot; returns ``(override_filters=None)``.

        Raises:
            NoPreviousPageError: When called while the snapshot has no previous page
        """

        def with_params(override_filters: Mapping[str, Any] | None = None) -> FetchOperation:
            if not self.selectors.has_previous(state):
                raise NoPreviousPageError(self.entity_type)
            page = self.selectors.get_current_page_num(state) - 1
            return self.fetch_page(state)(page, override_filters)

        return with_params
