"""Data models for headline queries."""

from headline_query.data.models import (
    Article,
    Category,
    Endpoint,
    ErrorKind,
    FilterState,
    Language,
    NewsRequest,
    QueryError,
    QueryResult,
)

__all__ = [
    "Article",
    "Category",
    "Endpoint",
    "ErrorKind",
    "FilterState",
    "Language",
    "NewsRequest",
    "QueryError",
    "QueryResult",
]
