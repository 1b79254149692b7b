from typing import Protocol

from headline_query.data import FilterState, NewsRequest, QueryResult


class HeadlineSearcher(Protocol):
    """Interface for fetching headlines for a filter state."""

    @property
    def page_size(self) -> int: ...

    def build_request(self, filters: FilterState) -> NewsRequest:
        """Decide the endpoint and parameters for ``filters``."""
        ...

    async def fetch_articles(self, request: NewsRequest) -> QueryResult:
        """Perform ``request`` and return its articles or error."""
        ...

    async def search(self, filters: FilterState) -> QueryResult:
        """Build and perform the request for ``filters``.

        Args:
            filters: Current filter state.

        Returns:
            The articles found, or the error that prevented fetching them.
        """
        ...
