from typing import Protocol

from headline_query.data import FilterState, NewsRequest


class RequestBuilder(Protocol):
    """Interface for turning filter state into an outbound request."""

    def build_request(self, filters: FilterState) -> NewsRequest: ...
