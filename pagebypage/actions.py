"""
Messages exchanged between the fetch orchestrator and the reducers.

Both message types carry ``meta["entity_type"]`` so that reducers of one
paginator ignore messages meant for another.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .config import PaginatorOptions
from .exceptions import MalformedResponseError

REQUEST_PAGE = "@@page-by-page/REQUEST_PAGE"
RECEIVE_PAGE = "@@page-by-page/RECEIVE_PAGE"


@dataclass(frozen=True)
class Action:
    """
    A plain message dispatched to the state container.

    Attributes:
        type: Message type tag (e.g. REQUEST_PAGE)
        payload: Message body; the received items for RECEIVE_PAGE
        meta: Pagination metadata, always including ``entity_type``
    """

    type: str
    payload: Any = None
    meta: dict[str, Any] = field(default_factory=dict)


class ActionCreators:
    """Builds the request/receive messages for one entity type."""

    def __init__(self, entity_type: str, options: PaginatorOptions) -> None:
        self.entity_type = entity_type
        self.options = options

    def request_page(self, page: int, filters: dict[str, Any]) -> Action:
        return Action(
            type=REQUEST_PAGE,
            payload={},
            meta={"page": page, "filters": filters, "entity_type": self.entity_type},
        )

    def receive_page(
        self, page: int, filters: dict[str, Any], response: Mapping[str, Any]
    ) -> Action:
        """
        Normalize a raw API response into a RECEIVE_PAGE message.

        The response field names come from the options (``results_key``,
        ``count_key``, ``next_key``, ``previous_key``).

        Raises:
            MalformedResponseError: If the response lacks one of those fields
        """
        opts = self.options
        fields = {}
        for key in (opts.results_key, opts.count_key, opts.next_key, opts.previous_key):
            try:
                fields[key] = response[key]
            except (KeyError, TypeError) as e:
                raise MalformedResponseError(key, original_error=e) from e

        return Action(
            type=RECEIVE_PAGE,
            payload=fields[opts.results_key],
            meta={
                "entity_type": self.entity_type,
                "count": fields[opts.count_key],
                "next": fields[opts.next_key],
                "previous": fields[opts.previous_key],
                "page": page,
                "filters": filters,
                "paginated": True,
            },
        )
