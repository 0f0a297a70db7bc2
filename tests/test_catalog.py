"""Tests for the content catalog."""

import pytest

from webtutor.models import Tier
from webtutor.services.catalog import (
    NotFoundError,
    find_example,
    find_tutorial,
    get_advanced_tutorials,
    get_basic_tutorials,
    get_code_examples,
    get_intermediate_tutorials,
    get_restful_tutorials,
    get_tutorials,
)

TIER_ACCESSORS = [
    get_basic_tutorials,
    get_intermediate_tutorials,
    get_advanced_tutorials,
    get_restful_tutorials,
]


@pytest.mark.parametrize("accessor", TIER_ACCESSORS)
def test_tier_is_non_empty_and_stable(accessor):
    """Each tier returns the same non-empty sequence on every call."""
    first = accessor()
    second = accessor()

    assert len(first) > 0
    assert [t.id for t in first] == [t.id for t in second]
    assert first is second


@pytest.mark.parametrize("accessor", TIER_ACCESSORS)
def test_tutorials_have_id_and_title(accessor):
    for tutorial in accessor():
        assert tutorial.id
        assert tutorial.title


def test_tutorial_ids_unique_across_tiers():
    ids = [t.id for accessor in TIER_ACCESSORS for t in accessor()]
    assert len(ids) == len(set(ids))


def test_basic_tier_order():
    assert [t.id for t in get_basic_tutorials()] == [
        "hello-world",
        "serve-html",
        "handling-routes",
    ]


def test_get_tutorials_by_name_matches_accessor():
    assert get_tutorials("basic") is get_basic_tutorials()
    assert get_tutorials(Tier.RESTFUL) is get_restful_tutorials()


def test_get_tutorials_unknown_tier():
    with pytest.raises(NotFoundError):
        get_tutorials("expert")


def test_tutorials_are_immutable():
    tutorial = get_basic_tutorials()[0]
    with pytest.raises(Exception):
        tutorial.title = "Changed"


def test_example_filenames_distinct():
    filenames = [e.filename for e in get_code_examples()]
    assert len(filenames) == len(set(filenames))
    assert "simple_server.go" in filenames


def test_find_example():
    example = find_example("rest_api.go")
    assert example is not None
    assert example.title == "RESTful API Server"
    assert find_example("missing.go") is None


def test_find_tutorial():
    tutorial = find_tutorial("json-apis")
    assert tutorial is not None
    assert tutorial.title == "Building JSON APIs"
    assert find_tutorial("nope") is None


def test_example_code_is_go_source():
    for example in get_code_examples():
        assert example.code.startswith("package main")
        assert example.code.endswith("\n")
