"""Translate filter state into a NewsAPI request."""

from headline_query.data import Endpoint, FilterState, NewsRequest

DEFAULT_QUERY = "latest"
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100  # NewsAPI max


def build_request(
    filters: FilterState,
    *,
    api_key: str,
    page_size: int = DEFAULT_PAGE_SIZE,
    default_query: str = DEFAULT_QUERY,
) -> NewsRequest:
    """Decide the endpoint and parameters for the given filters.

    A selected category always targets ``top-headlines`` (with ``language``
    when one is chosen too); search text is not sent there. Without a
    category the ``everything`` endpoint is used, which requires a ``q``
    term, so empty search text falls back to ``default_query``.

    Args:
        filters: Current filter state.
        api_key: NewsAPI credential.
        page_size: Results per page (capped at 100).
        default_query: Query term used when the search text is empty.

    Returns:
        The request to issue.
    """
    params: dict[str, str | int] = {}
    if filters.category is not None:
        endpoint = Endpoint.TOP_HEADLINES
        params["category"] = filters.category.value
        if filters.language is not None:
            params["language"] = filters.language.value
    else:
        endpoint = Endpoint.EVERYTHING
        params["q"] = filters.search_text.strip() or default_query
        if filters.language is not None:
            params["language"] = filters.language.value

    params["pageSize"] = min(max(page_size, 1), MAX_PAGE_SIZE)
    params["page"] = filters.page
    params["apiKey"] = api_key
    return NewsRequest(endpoint=endpoint, params=params)
