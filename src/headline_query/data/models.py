"""Core data models for headline queries."""

from dataclasses import dataclass, field
from enum import StrEnum


class Category(StrEnum):
    """Categories accepted by the top-headlines endpoint."""

    BUSINESS = "business"
    ENTERTAINMENT = "entertainment"
    GENERAL = "general"
    HEALTH = "health"
    SCIENCE = "science"
    SPORTS = "sports"
    TECHNOLOGY = "technology"


class Language(StrEnum):
    """ISO 639-1 language codes supported by NewsAPI."""

    ARABIC = "ar"
    GERMAN = "de"
    ENGLISH = "en"
    SPANISH = "es"
    FRENCH = "fr"
    HEBREW = "he"
    ITALIAN = "it"
    DUTCH = "nl"
    NORWEGIAN = "no"
    PORTUGUESE = "pt"
    RUSSIAN = "ru"
    SWEDISH = "sv"
    URDU = "ud"
    CHINESE = "zh"


class Endpoint(StrEnum):
    """NewsAPI v2 endpoints."""

    TOP_HEADLINES = "top-headlines"
    EVERYTHING = "everything"

    @property
    def path(self) -> str:
        return f"/v2/{self.value}"


class ErrorKind(StrEnum):
    """Ways a headline fetch can fail."""

    NETWORK = "network"
    RATE_LIMITED = "rate_limited"
    HTTP_STATUS = "http_status"
    API_ERROR = "api_error"
    MALFORMED = "malformed"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class FilterState:
    """User-selected filters for a headline query.

    ``page`` is 1-based. An empty ``search_text`` means no free-text filter.
    """

    search_text: str = ""
    category: Category | None = None
    language: Language | None = None
    page: int = 1

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError(f"page must be a positive integer, got {self.page}")


@dataclass(frozen=True)
class NewsRequest:
    """An endpoint plus the query parameters to send to it."""

    endpoint: Endpoint
    params: dict[str, str | int] = field(default_factory=dict)

    @property
    def path(self) -> str:
        return self.endpoint.path


@dataclass(frozen=True)
class Article:
    """A headline returned by NewsAPI."""

    title: str
    url: str
    description: str | None = None
    url_to_image: str | None = None
    source: str = ""
    author: str | None = None
    published_at: str | None = None


@dataclass(frozen=True)
class QueryError:
    """A user-displayable fetch failure."""

    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class QueryResult:
    """Outcome of one fetch: either articles or an error, never both."""

    articles: tuple[Article, ...] = ()
    total_results: int = 0
    error: QueryError | None = None

    def __post_init__(self) -> None:
        if self.error is not None and self.articles:
            raise ValueError("QueryResult cannot carry both articles and an error")

    @classmethod
    def success(cls, articles: list[Article], total_results: int | None = None) -> "QueryResult":
        total = total_results if total_results is not None else len(articles)
        return cls(articles=tuple(articles), total_results=total)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "QueryResult":
        return cls(error=QueryError(kind=kind, message=message))

    @property
    def ok(self) -> bool:
        return self.error is None

    def total_pages(self, page_size: int) -> int:
        """Number of pages available for ``page_size`` results per page."""
        if page_size < 1:
            raise ValueError("page_size must be positive")
        if not self.ok or self.total_results <= 0:
            return 0
        return -(-self.total_results // page_size)
