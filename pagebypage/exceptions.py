from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from pydantic import ValidationError as PydanticValidationError


class PaginatorError(Exception):
    """Base exception for all pagebypage errors."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ConfigurationError(PaginatorError):
    """Raised when a paginator is wired or configured incorrectly."""


class StateKeyError(ConfigurationError, KeyError):
    """Raised when a state segment the paginator reads from is missing."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Key [{key}] does not exist in global state")
        self.key = key

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message


class InvalidOptionsError(ConfigurationError):
    """Raised when paginator options fail validation."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(f"Invalid paginator options: {message}", original_error)


class NavigationError(PaginatorError):
    """Raised when a navigation request cannot be satisfied by the current state."""


class NoNextPageError(NavigationError):
    """Raised when fetching the next page while no next page exists."""

    def __init__(self, entity_type: str) -> None:
        super().__init__(f"No next page for entity type '{entity_type}'")
        self.entity_type = entity_type


class NoPreviousPageError(NavigationError):
    """Raised when fetching the previous page while no previous page exists."""

    def __init__(self, entity_type: str) -> None:
        super().__init__(f"No previous page for entity type '{entity_type}'")
        self.entity_type = entity_type


class MalformedResponseError(PaginatorError):
    """Raised when an API response lacks one of the mapped fields."""

    def __init__(self, missing_key: str, original_error: Exception | None = None) -> None:
        super().__init__(f"API response is missing field '{missing_key}'", original_error)
        self.missing_key = missing_key


class TransportError(PaginatorError):
    """
    Wraps a failed page fetch.

    Never raised by the orchestrator itself: it is handed to the configured
    error handler (or logged) and the fetch is dropped.
    """

    def __init__(
        self,
        entity_type: str,
        page: int,
        filters: dict[str, Any],
        original_error: Exception | None = None,
    ) -> None:
        msg = f"Failed to fetch page {page} of '{entity_type}'"
        if original_error is not None:
            msg += f": {original_error!s}"
        super().__init__(msg, original_error)
        self.entity_type = entity_type
        self.page = page
        self.filters = filters


@contextmanager
def handle_options_errors() -> Generator[None, None, None]:
    """
    Context manager that catches pydantic validation errors raised while
    building options and raises InvalidOptionsError instead.

    Usage:
        with handle_options_errors():
            PaginatorOptions.model_validate(raw)
    """
    try:
        yield
    except PydanticValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        )
        raise InvalidOptionsError(details, original_error=e) from e
