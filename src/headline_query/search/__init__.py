from headline_query.search.base import HeadlineSearcher
from headline_query.search.newsapi import NEWSAPI_BASE_URL, REMOVED_MARKER, HeadlineQueryClient

__all__ = [
    "HeadlineQueryClient",
    "HeadlineSearcher",
    "NEWSAPI_BASE_URL",
    "REMOVED_MARKER",
]
