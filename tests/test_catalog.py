"""Tests for filter lookup tables."""

import pytest

from headline_query.catalog import CATEGORIES, LANGUAGE_NAMES, parse_category, parse_language
from headline_query.data import Category, Language


def test_tables_cover_every_enum_member() -> None:
    assert set(CATEGORIES) == set(Category)
    assert set(LANGUAGE_NAMES) == set(Language)


def test_language_names_are_read_only() -> None:
    with pytest.raises(TypeError):
        LANGUAGE_NAMES[Language.ENGLISH] = "Anglais"  # type: ignore[index]


def test_parse_category() -> None:
    assert parse_category("Technology") is Category.TECHNOLOGY
    assert parse_category(" sports ") is Category.SPORTS
    assert parse_category(None) is None
    assert parse_category("") is None


def test_parse_unknown_category() -> None:
    with pytest.raises(ValueError, match="Unknown category"):
        parse_category("weather")


def test_parse_language_by_code_or_name() -> None:
    assert parse_language("en") is Language.ENGLISH
    assert parse_language("German") is Language.GERMAN
    assert parse_language("ud") is Language.URDU
    assert parse_language("  ") is None


def test_parse_unknown_language() -> None:
    with pytest.raises(ValueError, match="Unknown language"):
        parse_language("klingon")
