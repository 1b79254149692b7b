from headline_query.query.base import RequestBuilder
from headline_query.query.builder import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_QUERY,
    MAX_PAGE_SIZE,
    build_request,
)

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_QUERY",
    "MAX_PAGE_SIZE",
    "RequestBuilder",
    "build_request",
]
