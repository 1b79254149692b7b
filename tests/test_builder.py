"""Tests for request construction."""

import pytest

from headline_query.data import Category, Endpoint, FilterState, Language
from headline_query.query import DEFAULT_QUERY, build_request


@pytest.mark.parametrize("category", list(Category))
def test_category_only_targets_top_headlines(category: Category) -> None:
    """Category without language sends only category plus credential and paging."""
    request = build_request(FilterState(category=category), api_key="k")

    assert request.endpoint is Endpoint.TOP_HEADLINES
    assert request.params == {
        "category": category.value,
        "pageSize": 10,
        "page": 1,
        "apiKey": "k",
    }


def test_category_ignores_search_text() -> None:
    filters = FilterState(search_text="elections", category=Category.BUSINESS)
    request = build_request(filters, api_key="k")

    assert request.endpoint is Endpoint.TOP_HEADLINES
    assert "q" not in request.params


def test_category_and_language_stay_on_top_headlines() -> None:
    filters = FilterState(category=Category.TECHNOLOGY, language=Language.ENGLISH, page=1)
    request = build_request(filters, api_key="k")

    assert request.endpoint is Endpoint.TOP_HEADLINES
    assert request.params["category"] == "technology"
    assert request.params["language"] == "en"
    assert request.params["page"] == 1
    assert "q" not in request.params


def test_no_filters_uses_default_query() -> None:
    request = build_request(FilterState(), api_key="k")

    assert request.endpoint is Endpoint.EVERYTHING
    assert request.params["q"] == DEFAULT_QUERY == "latest"
    assert "language" not in request.params
    assert "category" not in request.params


def test_blank_search_text_uses_default_query() -> None:
    request = build_request(FilterState(search_text="   "), api_key="k")
    assert request.params["q"] == "latest"


def test_custom_default_query() -> None:
    request = build_request(FilterState(), api_key="k", default_query="world")
    assert request.params["q"] == "world"


def test_search_text_is_stripped() -> None:
    request = build_request(FilterState(search_text="  mars rover "), api_key="k")
    assert request.endpoint is Endpoint.EVERYTHING
    assert request.params["q"] == "mars rover"


def test_language_without_category_uses_everything() -> None:
    filters = FilterState(search_text="football", language=Language.SPANISH)
    request = build_request(filters, api_key="k")

    assert request.endpoint is Endpoint.EVERYTHING
    assert request.params["q"] == "football"
    assert request.params["language"] == "es"


def test_paging_params() -> None:
    request = build_request(FilterState(page=4), api_key="k", page_size=25)
    assert request.params["page"] == 4
    assert request.params["pageSize"] == 25


def test_page_size_is_capped() -> None:
    request = build_request(FilterState(), api_key="k", page_size=500)
    assert request.params["pageSize"] == 100


def test_api_key_always_included() -> None:
    for filters in (FilterState(), FilterState(category=Category.HEALTH)):
        assert build_request(filters, api_key="secret").params["apiKey"] == "secret"
