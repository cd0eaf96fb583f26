from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .exceptions import handle_options_errors


class PaginatorOptions(BaseModel):
    """
    Options for a single paginator, validated once at construction.

    Accepts both snake_case field names and their camelCase aliases
    (``entityIdKey`` for ``entity_id_key``, etc.).

    Attributes:
        entities_key: Where the entity table lives in the global state
        paginators_key: Where the pagination state lives in the global state
        entity_id_key: Item field used as the entity identifier
        results_key: Response field holding the list of items
        count_key: Response field holding the total item count
        next_key: Response field holding the next-page token
        previous_key: Response field holding the previous-page token
        page_key: Request parameter carrying the page number
        on_error: Called with a TransportError when a fetch fails.
            Defaults to logging the failure.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    entities_key: str = Field(default="entities", min_length=1)
    paginators_key: str = Field(default="pagination", min_length=1)
    entity_id_key: str = Field(default="id", min_length=1)
    results_key: str = Field(default="results", min_length=1)
    count_key: str = Field(default="count", min_length=1)
    next_key: str = Field(default="next", min_length=1)
    previous_key: str = Field(default="previous", min_length=1)
    page_key: str = Field(default="page", min_length=1)
    on_error: Callable[..., Any] | None = None

    @classmethod
    def build(
        cls, options: "Mapping[str, Any] | PaginatorOptions | None" = None, **overrides: Any
    ) -> "PaginatorOptions":
        """
        Merge user-supplied options over the defaults.

        Args:
            options: Mapping of option names (snake_case or camelCase), an
                existing PaginatorOptions, or None for all defaults
            **overrides: Individual options applied on top of ``options``

        Raises:
            InvalidOptionsError: If an option is unknown or has an invalid value
        """
        if isinstance(options, PaginatorOptions):
            if not overrides:
                return options
            options = options.model_dump(exclude_unset=True)

        merged: dict[str, Any] = dict(options or {})
        merged.update(overrides)
        with handle_options_errors():
            return cls.model_validate(merged)
