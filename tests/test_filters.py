"""Tests for query filters."""

import httpx
import pytest

from redmine_sdk.filters import Filter, ProjectsFilter, ProjectStatus


class TestFilter:
    """Tests for the generic Filter."""

    def test_empty(self):
        """An empty filter renders to an empty query string."""
        f = Filter()
        assert len(f) == 0
        assert f.pairs() == []
        assert f.to_url_params() == ""

    def test_pairs_keep_insertion_order(self):
        """Pairs should come back in insertion order."""
        f = Filter()
        f.add_pair("tracker_id", "2")
        f.add_pair("assigned_to_id", "me")
        assert f.pairs() == [("tracker_id", "2"), ("assigned_to_id", "me")]
        assert list(f) == f.pairs()

    def test_add_pair_replaces_existing_key(self):
        """Adding a key twice should keep one pair with the latest value."""
        f = Filter()
        f.add_pair("status", "1")
        f.add_pair("cf_4", "x")
        f.add_pair("status", "5")
        assert f.pairs() == [("status", "5"), ("cf_4", "x")]

    def test_to_url_params_encodes_values(self):
        """Values should be URL encoded."""
        f = Filter({"subject": "a b&c"})
        params = httpx.QueryParams(f.to_url_params())
        assert params["subject"] == "a b&c"

    def test_copy_is_independent(self):
        """Mutating a copy should not affect the original."""
        f = ProjectsFilter()
        f.status(ProjectStatus.ACTIVE)
        clone = f.copy()
        clone.add_pair("extra", "1")
        assert isinstance(clone, ProjectsFilter)
        assert len(f) == 1
        assert len(clone) == 2

    def test_equality(self):
        """Filters with the same pairs should be equal."""
        assert Filter({"a": "1"}) == Filter({"a": "1"})
        assert Filter({"a": "1"}) != Filter({"a": "2"})


class TestProjectsFilter:
    """Tests for ProjectsFilter status helpers."""

    @pytest.mark.parametrize("value", ["1", "5", "9", "custom"])
    def test_status(self, value):
        """status() should add the value as-is."""
        f = ProjectsFilter()
        f.status(value)
        assert ("status", value) in f.pairs()

    @pytest.mark.parametrize("value", ["1", "5", "9", "custom"])
    def test_status_not(self, value):
        """status_not() should prefix the value with the negation marker."""
        f = ProjectsFilter()
        f.status_not(value)
        assert ("status", "!" + value) in f.pairs()

    def test_accepts_enum_members(self):
        """Enum members should be rendered by their value."""
        f = ProjectsFilter()
        f.status_not(ProjectStatus.ARCHIVED)
        assert f.pairs() == [("status", "!9")]


class TestProjectStatus:
    """Tests for the ProjectStatus values."""

    def test_values(self):
        """Should match the values Redmine uses."""
        assert ProjectStatus.ALL.value == ""
        assert ProjectStatus.ACTIVE.value == "1"
        assert ProjectStatus.CLOSED.value == "5"
        assert ProjectStatus.ARCHIVED.value == "9"
