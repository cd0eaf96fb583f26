"""
Unit tests for the state slices and the key-path accessor.
"""

import pytest

from pagebypage.exceptions import ConfigurationError, StateKeyError
from pagebypage.state import (
    entities_initial_state,
    get_state_segment,
    lookup_page_ids,
    pagination_initial_state,
)


@pytest.mark.unit
class TestInitialState:
    def test_pagination_initial_state(self):
        assert pagination_initial_state() == {
            "pages": {},
            "page": 1,
            "filters": {},
            "next": None,
            "previous": None,
            "count": 0,
        }

    def test_entities_initial_state(self):
        assert entities_initial_state() == {}

    def test_initial_states_are_fresh_objects(self):
        """Mutating one initial state must not leak into the next one."""
        first = pagination_initial_state()
        first["pages"]["x"] = {1: ["a"]}
        first["filters"]["year"] = 1990

        second = pagination_initial_state()
        assert second["pages"] == {}
        assert second["filters"] == {}
        assert entities_initial_state() is not entities_initial_state()


@pytest.mark.unit
class TestGetStateSegment:
    def test_returns_segment(self):
        segment = {"page": 3}
        assert get_state_segment({"pagination": segment}, "pagination") is segment

    def test_returns_falsy_segment(self):
        """An empty segment is present, not missing."""
        assert get_state_segment({"entities": {}}, "entities") == {}

    def test_missing_segment_raises(self):
        with pytest.raises(StateKeyError, match=r"^Key \[pagination\] does not exist in global state$"):
            get_state_segment({}, "pagination")

    def test_missing_segment_error_is_configuration_and_key_error(self):
        with pytest.raises(StateKeyError) as exc_info:
            get_state_segment({"entities": {}}, "pagination")

        assert isinstance(exc_info.value, ConfigurationError)
        assert isinstance(exc_info.value, KeyError)
        assert exc_info.value.key == "pagination"


@pytest.mark.unit
class TestLookupPageIds:
    pages = {"": {1: ["a", "b"], 2: ["c"]}, "year=1990": {1: ["d"]}}

    def test_found(self):
        assert lookup_page_ids(self.pages, "", 2) == ["c"]
        assert lookup_page_ids(self.pages, "year=1990", 1) == ["d"]

    def test_missing_filter_key(self):
        assert lookup_page_ids(self.pages, "year=2000", 1) is None

    def test_missing_page(self):
        assert lookup_page_ids(self.pages, "", 7) is None

    def test_empty_or_missing_pages(self):
        assert lookup_page_ids({}, "", 1) is None
        assert lookup_page_ids(None, "", 1) is None

    def test_empty_page_is_not_missing(self):
        assert lookup_page_ids({"": {1: []}}, "", 1) == []
