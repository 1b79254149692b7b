"""Filter state, re-fetch triggering and result ownership for one headline view."""

import asyncio
import dataclasses
import logging
from collections.abc import Callable

from headline_query.data import (
    Article,
    Category,
    ErrorKind,
    FilterState,
    Language,
    QueryResult,
)
from headline_query.debounce import DebounceTimer
from headline_query.search.base import HeadlineSearcher

logger = logging.getLogger(__name__)


class HeadlineSession:
    """Drive a headline searcher from user filter input.

    Search text is debounced; category, language and page changes apply
    at once. Any change to the settled filters issues a new fetch, and
    changing search text, category or language returns to page 1.

    Each fetch carries a sequence token. Only the response for the most
    recently issued token is applied, so a slow earlier response can never
    overwrite a newer one. A failed fetch replaces the current articles
    with the error.

    Args:
        searcher: Headline searcher used to build and perform requests.
        debounce_seconds: Quiet period before search text is used.
        initial: Starting filters (defaults to no filters, page 1).
        on_result: Optional callback invoked with every applied result.
    """

    def __init__(
        self,
        searcher: HeadlineSearcher,
        *,
        debounce_seconds: float = 0.5,
        initial: FilterState | None = None,
        on_result: Callable[[QueryResult], None] | None = None,
    ) -> None:
        self._searcher = searcher
        self._filters = initial or FilterState()
        self._search_input = self._filters.search_text
        self._debounce: DebounceTimer[str] = DebounceTimer(
            debounce_seconds,
            initial=self._filters.search_text,
            on_settle=self._on_search_settled,
        )
        self._on_result = on_result
        self._result: QueryResult | None = None
        self._issued = 0
        self._tasks: set[asyncio.Task[QueryResult]] = set()

    @property
    def filters(self) -> FilterState:
        """Filters the latest fetch was issued for (search text settled)."""
        return self._filters

    @property
    def search_input(self) -> str:
        """Raw search text as typed, possibly not yet settled."""
        return self._search_input

    @property
    def result(self) -> QueryResult | None:
        """The live result, or None before the first response."""
        return self._result

    @property
    def articles(self) -> tuple[Article, ...]:
        if self._result is None:
            return ()
        return self._result.articles

    @property
    def loading(self) -> bool:
        return bool(self._tasks)

    @property
    def issued(self) -> int:
        """Number of fetches issued so far (the latest sequence token)."""
        return self._issued

    @property
    def total_pages(self) -> int:
        if self._result is None:
            return 0
        return self._result.total_pages(self._searcher.page_size)

    # -- filter input --

    def set_search_text(self, text: str) -> None:
        """Record typed search text; it takes effect once it settles."""
        self._search_input = text
        self._debounce.push(text)

    def set_category(self, category: Category | None) -> None:
        if category != self._filters.category:
            self._update(category=category, page=1)

    def set_language(self, language: Language | None) -> None:
        if language != self._filters.language:
            self._update(language=language, page=1)

    def set_page(self, page: int) -> None:
        """Jump to ``page`` (1-based).

        Raises:
            ValueError: If ``page`` is not positive.
        """
        self._update(page=page)

    def next_page(self) -> None:
        self.set_page(self._filters.page + 1)

    def previous_page(self) -> None:
        if self._filters.page > 1:
            self.set_page(self._filters.page - 1)

    # -- fetching --

    async def refresh(self) -> QueryResult:
        """Fetch the current filters again and return that fetch's result.

        The result is applied only if no newer fetch was issued meanwhile.
        """
        return await self._issue()

    async def wait_idle(self) -> None:
        """Wait for pending search text to settle and all fetches to finish."""
        await self._debounce.wait()
        while self._tasks:
            await asyncio.wait(set(self._tasks))

    async def aclose(self) -> None:
        """Drop pending search text and cancel in-flight fetches."""
        self._debounce.cancel()
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    def _on_search_settled(self, text: str) -> None:
        if text != self._filters.search_text:
            self._update(search_text=text, page=1)

    def _update(self, **changes: object) -> None:
        new_filters = dataclasses.replace(self._filters, **changes)  # type: ignore[arg-type]
        if new_filters == self._filters:
            return
        self._filters = new_filters
        self._issue()

    def _issue(self) -> asyncio.Task[QueryResult]:
        self._issued += 1
        task = asyncio.get_running_loop().create_task(self._fetch(self._issued, self._filters))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _fetch(self, token: int, filters: FilterState) -> QueryResult:
        try:
            result = await self._searcher.search(filters)
        except Exception as e:
            logger.exception("Unexpected error fetching headlines")
            result = QueryResult.failure(ErrorKind.UNEXPECTED, f"Unexpected error: {e}")

        if token != self._issued:
            logger.debug("Discarding stale response %d (latest is %d)", token, self._issued)
            return result

        self._result = result
        if not result.ok:
            logger.debug("Applied failed result: %s", result.error)
        if self._on_result is not None:
            try:
                self._on_result(result)
            except Exception:
                logger.exception("Error in on_result listener")
        return result
