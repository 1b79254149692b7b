"""Headline Query: filter-driven NewsAPI headline search with debounced input."""

from headline_query.catalog import CATEGORIES, LANGUAGE_NAMES, parse_category, parse_language
from headline_query.config import (
    HeadlineConfig,
    create_from_config,
    get_default_config_path,
    load_config,
)
from headline_query.data import (
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
from headline_query.debounce import DebounceTimer
from headline_query.query import DEFAULT_QUERY, RequestBuilder, build_request
from headline_query.search import REMOVED_MARKER, HeadlineQueryClient, HeadlineSearcher
from headline_query.session import HeadlineSession

__all__ = [
    # Models
    "Article",
    "Category",
    "Endpoint",
    "ErrorKind",
    "FilterState",
    "Language",
    "NewsRequest",
    "QueryError",
    "QueryResult",
    # Catalog
    "CATEGORIES",
    "LANGUAGE_NAMES",
    "parse_category",
    "parse_language",
    # Protocols
    "HeadlineSearcher",
    "RequestBuilder",
    # Request building
    "DEFAULT_QUERY",
    "build_request",
    # Client
    "HeadlineQueryClient",
    "REMOVED_MARKER",
    # Session
    "DebounceTimer",
    "HeadlineSession",
    # Config
    "HeadlineConfig",
    "create_from_config",
    "get_default_config_path",
    "load_config",
]
