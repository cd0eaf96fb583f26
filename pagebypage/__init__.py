from .actions import RECEIVE_PAGE, REQUEST_PAGE, Action, ActionCreators
from .config import PaginatorOptions
from .exceptions import (
    ConfigurationError,
    InvalidOptionsError,
    MalformedResponseError,
    NavigationError,
    NoNextPageError,
    NoPreviousPageError,
    PaginatorError,
    StateKeyError,
    TransportError,
)
from .navigation import FetchOperation, Navigation
from .paginator import Paginator, get_paginator
from .query_string import stringify
from .reducers import EntitiesReducer, PaginationReducer
from .selectors import Selectors
from .state import entities_initial_state, get_state_segment, pagination_initial_state

__all__ = [
    "get_paginator",
    "Paginator",
    "PaginatorOptions",
    # Messages
    "Action",
    "ActionCreators",
    "REQUEST_PAGE",
    "RECEIVE_PAGE",
    # Building blocks
    "Selectors",
    "Navigation",
    "FetchOperation",
    "PaginationReducer",
    "EntitiesReducer",
    "get_state_segment",
    "pagination_initial_state",
    "entities_initial_state",
    "stringify",
    # Exceptions
    "PaginatorError",
    "ConfigurationError",
    "StateKeyError",
    "InvalidOptionsError",
    "NavigationError",
    "NoNextPageError",
    "NoPreviousPageError",
    "MalformedResponseError",
    "TransportError",
]
