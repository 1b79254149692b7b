"""Headline search against the NewsAPI v2 REST endpoints."""

import logging
import os
from typing import Any

import httpx

from headline_query.data import (
    Article,
    ErrorKind,
    FilterState,
    NewsRequest,
    QueryResult,
)
from headline_query.query import DEFAULT_PAGE_SIZE, DEFAULT_QUERY, build_request

NEWSAPI_BASE_URL = "https://newsapi.org"
REMOVED_MARKER = "[Removed]"

logger = logging.getLogger(__name__)


class HeadlineQueryClient:
    """Fetch headlines from NewsAPI for a given filter state.

    Every expected failure (transport errors, non-2xx statuses, an error
    status in the payload, an unexpected body) is returned as a failed
    ``QueryResult`` rather than raised. Nothing is retried or cached.

    Args:
        api_key: NewsAPI key (defaults to NEWS_API_KEY env var).
        base_url: API root, without the ``/v2`` path.
        page_size: Results per page sent as ``pageSize``.
        default_query: ``q`` term used when the search text is empty.
        timeout: Request timeout in seconds.
        http_client: Optional shared ``httpx.AsyncClient``. The caller keeps
            ownership and closes it. When omitted a short-lived client is
            opened per request.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        base_url: str = NEWSAPI_BASE_URL,
        page_size: int = DEFAULT_PAGE_SIZE,
        default_query: str = DEFAULT_QUERY,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = api_key or os.environ.get("NEWS_API_KEY")
        if not self._api_key:
            raise ValueError("NewsAPI key required. Pass api_key or set NEWS_API_KEY env var.")
        self._base_url = base_url.rstrip("/")
        self._page_size = page_size
        self._default_query = default_query
        self._timeout = timeout
        self._http_client = http_client

    @property
    def page_size(self) -> int:
        return self._page_size

    def build_request(self, filters: FilterState) -> NewsRequest:
        """Build the request for ``filters`` using this client's settings."""
        request = build_request(
            filters,
            api_key=self._api_key,  # type: ignore[arg-type]
            page_size=self._page_size,
            default_query=self._default_query,
        )
        logger.debug(
            "Built %s request for page %s (category=%s, language=%s)",
            request.endpoint,
            filters.page,
            filters.category,
            filters.language,
        )
        return request

    async def search(self, filters: FilterState) -> QueryResult:
        """Build and perform the request for ``filters``."""
        return await self.fetch_articles(self.build_request(filters))

    async def fetch_articles(self, request: NewsRequest) -> QueryResult:
        """Perform one GET and turn the response into a ``QueryResult``.

        Args:
            request: Endpoint and parameters to send.

        Returns:
            Articles with withdrawn entries removed, or the failure.
        """
        url = f"{self._base_url}{request.path}"
        try:
            if self._http_client is not None:
                response = await self._http_client.get(url, params=request.params)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.get(url, params=request.params)
        except httpx.HTTPError as e:
            logger.warning("NewsAPI request to %s failed. Error: %s", request.endpoint, e)
            return QueryResult.failure(ErrorKind.NETWORK, f"Network error: {e}")

        return _parse_response(response)


def _parse_response(response: httpx.Response) -> QueryResult:
    """Map an HTTP response onto a success or failure result."""
    try:
        data = response.json()
    except ValueError:
        data = None

    if response.status_code == 429:
        detail = _api_message(data) or "too many requests"
        logger.warning("NewsAPI rate limit hit: %s", detail)
        return QueryResult.failure(ErrorKind.RATE_LIMITED, f"Rate limit exceeded (HTTP 429): {detail}")

    if not response.is_success:
        detail = _api_message(data) or response.reason_phrase
        logger.warning("NewsAPI returned HTTP %s: %s", response.status_code, detail)
        return QueryResult.failure(
            ErrorKind.HTTP_STATUS, f"HTTP {response.status_code}: {detail}"
        )

    if not isinstance(data, dict):
        logger.warning("NewsAPI returned a non-JSON or non-object body")
        return QueryResult.failure(ErrorKind.MALFORMED, "Unexpected response: body is not a JSON object")

    if data.get("status", "ok") != "ok":
        code = data.get("code") or "unknown"
        detail = _api_message(data) or "no message"
        logger.warning("NewsAPI reported an error (%s): %s", code, detail)
        return QueryResult.failure(ErrorKind.API_ERROR, f"API error ({code}): {detail}")

    items = data.get("articles")
    if not isinstance(items, list):
        logger.warning("NewsAPI response is missing the articles list")
        return QueryResult.failure(ErrorKind.MALFORMED, "Unexpected response: no articles list")

    articles: list[Article] = []
    for item in items:
        if not isinstance(item, dict):
            logger.debug("Skipping non-object article entry: %r", item)
            continue
        if _is_removed(item):
            continue
        articles.append(_to_article(item))

    total = data.get("totalResults")
    return QueryResult.success(articles, total if isinstance(total, int) else None)


def _api_message(data: Any) -> str | None:
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return None


def _is_removed(item: dict[str, Any]) -> bool:
    """True if the title or description carries the withdrawn-content marker."""
    title = item.get("title") or ""
    description = item.get("description") or ""
    return REMOVED_MARKER in title or REMOVED_MARKER in description


def _to_article(item: dict[str, Any]) -> Article:
    source = item.get("source")
    source_name = source.get("name") if isinstance(source, dict) else None
    return Article(
        title=item.get("title") or "",
        url=item.get("url") or "",
        description=item.get("description"),
        url_to_image=item.get("urlToImage"),
        source=source_name or "Unknown",
        author=item.get("author"),
        published_at=item.get("publishedAt"),
    )
