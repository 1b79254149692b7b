"""Factory functions to create components from configuration."""

from collections.abc import Callable

from headline_query.config.models import ClientConfig, HeadlineConfig, SessionConfig
from headline_query.data import FilterState, QueryResult
from headline_query.search.base import HeadlineSearcher
from headline_query.search.newsapi import HeadlineQueryClient
from headline_query.session import HeadlineSession


def create_client(config: ClientConfig, *, api_key: str | None = None) -> HeadlineQueryClient:
    """Create a headline client from config.

    Args:
        config: Client configuration.
        api_key: Explicit API key; falls back to the NEWS_API_KEY env var.
    """
    return HeadlineQueryClient(
        api_key=api_key,
        base_url=config.base_url,
        page_size=config.page_size,
        default_query=config.default_query,
        timeout=config.timeout,
    )


def create_session(
    config: SessionConfig,
    searcher: HeadlineSearcher,
    *,
    initial: FilterState | None = None,
    on_result: Callable[[QueryResult], None] | None = None,
) -> HeadlineSession:
    """Create a session driving ``searcher`` from config."""
    return HeadlineSession(
        searcher,
        debounce_seconds=config.debounce_seconds,
        initial=initial,
        on_result=on_result,
    )


def create_from_config(
    config: HeadlineConfig,
    *,
    api_key: str | None = None,
    initial: FilterState | None = None,
    on_result: Callable[[QueryResult], None] | None = None,
) -> tuple[HeadlineQueryClient, HeadlineSession]:
    """Create a client and a session bound to it from root config.

    Args:
        config: Root configuration.
        api_key: Explicit API key override.
        initial: Starting filters for the session.
        on_result: Callback for every result the session applies.

    Returns:
        Tuple of (client, session).
    """
    client = create_client(config.client, api_key=api_key)
    session = create_session(config.session, client, initial=initial, on_result=on_result)
    return (client, session)
