"""Read-only lookup tables for filter choices."""

from types import MappingProxyType

from headline_query.data import Category, Language

CATEGORIES: tuple[Category, ...] = tuple(Category)

LANGUAGE_NAMES = MappingProxyType(
    {
        Language.ARABIC: "Arabic",
        Language.GERMAN: "German",
        Language.ENGLISH: "English",
        Language.SPANISH: "Spanish",
        Language.FRENCH: "French",
        Language.HEBREW: "Hebrew",
        Language.ITALIAN: "Italian",
        Language.DUTCH: "Dutch",
        Language.NORWEGIAN: "Norwegian",
        Language.PORTUGUESE: "Portuguese",
        Language.RUSSIAN: "Russian",
        Language.SWEDISH: "Swedish",
        Language.URDU: "Urdu",
        Language.CHINESE: "Chinese",
    }
)


def parse_category(value: str | None) -> Category | None:
    """Parse a category name, treating empty input as "no category".

    Raises:
        ValueError: If the value is not a known category.
    """
    if value is None or not value.strip():
        return None
    try:
        return Category(value.strip().lower())
    except ValueError:
        choices = ", ".join(CATEGORIES)
        raise ValueError(f"Unknown category {value!r}. Choose one of: {choices}") from None


def parse_language(value: str | None) -> Language | None:
    """Parse a language code or English name, treating empty input as "any language".

    Raises:
        ValueError: If the value matches no supported language.
    """
    if value is None or not value.strip():
        return None
    needle = value.strip().lower()
    for language, name in LANGUAGE_NAMES.items():
        if needle in (language.value, name.lower()):
            return language
    choices = ", ".join(LANGUAGE_NAMES)
    raise ValueError(f"Unknown language {value!r}. Choose one of: {choices}")
