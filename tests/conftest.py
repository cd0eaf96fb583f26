"""
Shared pytest fixtures and configuration for pagebypage tests.

This module provides common fixtures used across the unit tests,
including a mocked async API call, a default paginator and a store
wired with that paginator's reducers.
"""

from typing import Any
from unittest.mock import AsyncMock

import pytest

from pagebypage import Paginator, get_paginator
from tests.helpers.api import ENTITY_TYPE, make_response
from tests.helpers.store import Store


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")


@pytest.fixture
def api_call() -> AsyncMock:
    """
    Creates a mocked async API call.

    Resolves to a single-item first page unless a test overrides
    ``return_value`` or ``side_effect``.
    """
    return AsyncMock(return_value=make_response([{"id": "a"}]))


@pytest.fixture
def paginator(api_call: AsyncMock) -> Paginator:
    """Returns a paginator with default options for ENTITY_TYPE."""
    return get_paginator(ENTITY_TYPE, api_call)


@pytest.fixture
def store(paginator: Paginator) -> Store:
    """Returns a store with the paginator's reducers registered under the default keys."""
    return Store(paginator.reducers())


@pytest.fixture
def populated_state() -> dict[str, Any]:
    """
    Returns a global state holding page 2 of the unfiltered listing.

    Both next and previous pages exist.
    """
    return {
        "entities": {
            "a": {"id": "a", "title": "Dune"},
            "b": {"id": "b", "title": "Emma"},
            "c": {"id": "c", "title": "Ulysses"},
        },
        "pagination": {
            "pages": {"": {1: ["a"], 2: ["b", "c"]}},
            "page": 2,
            "filters": {},
            "next": "http://api.example.com/books?page=3",
            "previous": "http://api.example.com/books?page=1",
            "count": 5,
        },
    }
