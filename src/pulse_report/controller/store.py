"""Feed state controller: runs fetches and folds their results into state."""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from pulse_report.controller.state import (
    CategoryCompleted,
    CategoryFailed,
    CategoryStarted,
    Event,
    FilterCleared,
    FirstPageFailed,
    FirstPageLoaded,
    InitialLoadSettled,
    InitialLoadStarted,
    LoadMoreStarted,
    NextPageFailed,
    NextPageLoaded,
    SearchCompleted,
    SearchFailed,
    SearchStarted,
    ViewState,
    reduce,
)
from pulse_report.data import Category, FeedKind, FetchResult
from pulse_report.errors import FetchError
from pulse_report.search.base import NewsFetcher
from pulse_report.session_logger import SessionLogger

logger = logging.getLogger(__name__)

Listener = Callable[[ViewState, Event], None]


@dataclass(frozen=True)
class FeedSettings:
    """Request parameters for the default feeds and category views."""

    national_page_size: int = 6
    international_page_size: int = 9
    international_region: str | None = None
    category_page_size: int = 9


class FeedController:
    """Owns the view state and exposes the actions the view binds to.

    State only changes through ``_dispatch``, which runs synchronously on
    the event loop, so transitions never interleave even while several
    fetches are outstanding.

    Args:
        fetcher: Source of feed pages.
        settings: Page sizes and region for the default feeds.
        session_logger: Optional SessionLogger recording every fetch.
    """

    def __init__(
        self,
        fetcher: NewsFetcher,
        settings: FeedSettings | None = None,
        session_logger: SessionLogger | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._settings = settings or FeedSettings()
        self._session_logger = session_logger
        self._state = ViewState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> ViewState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener(state, event)`` after every transition.

        Returns:
            A function that removes the listener.
        """
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def _dispatch(self, event: Event) -> None:
        self._state = reduce(self._state, event)
        for listener in list(self._listeners):
            listener(self._state, event)

    async def initial_load(self) -> None:
        """Load the first page of both feeds concurrently.

        Each feed is applied as soon as its own fetch settles; one failing
        feed does not discard the other.
        """
        self._dispatch(InitialLoadStarted())
        await asyncio.gather(
            self._load_first_page(FeedKind.NATIONAL),
            self._load_first_page(FeedKind.INTERNATIONAL),
        )
        self._dispatch(InitialLoadSettled())
        if self._state.error:
            logger.error(self._state.error)

    async def retry(self) -> None:
        """Re-run the initial load after a failure."""
        await self.initial_load()

    async def _load_first_page(self, feed: FeedKind) -> None:
        try:
            result = await self._fetch_feed_page(feed, 1)
        except Exception as e:
            logger.warning(f"Initial {feed.value} load failed: {_describe(e)}")
            self._dispatch(FirstPageFailed(feed=feed, error=_describe(e)))
            return
        self._dispatch(FirstPageLoaded(feed=feed, result=result))

    async def load_more(self, feed: FeedKind) -> bool:
        """Fetch and append the next page of ``feed``.

        Ignored in filtered mode, once the feed is exhausted, or while a
        fetch for the same feed is still in flight.

        Returns:
            True if a fetch was issued.
        """
        if not self._state.can_load_more(feed):
            logger.debug(f"Load more {feed.value} ignored")
            return False

        next_page = self._state.cursor(feed).page + 1
        self._dispatch(LoadMoreStarted(feed=feed))
        try:
            result = await self._fetch_feed_page(feed, next_page)
        except Exception as e:
            logger.warning(f"Load more {feed.value} failed: {_describe(e)}")
            self._dispatch(NextPageFailed(feed=feed, error=_describe(e)))
            return True
        self._dispatch(NextPageLoaded(feed=feed, page=next_page, result=result))
        return True

    async def search(self, query: str) -> None:
        """Search all sections, or the active one, and show the results.

        A blank query leaves filtered mode without fetching.
        """
        query = query.strip()
        if not query:
            self._dispatch(FilterCleared())
            return

        self._dispatch(SearchStarted(query=query))
        section = self._state.category.section
        try:
            result = await self._timed(
                "search_news",
                {"query": query, "category": section},
                self._fetcher.search_news(query, section),
            )
        except Exception as e:
            logger.warning(f"Search for {query!r} failed: {_describe(e)}")
            self._dispatch(SearchFailed(query=query, error=_describe(e)))
            return
        self._dispatch(SearchCompleted(query=query, result=result))

    async def select_category(self, category: Category | str) -> None:
        """Show one category, or return to the default feeds for ``all``.

        The stored search query is neither used nor cleared here, except by
        ``all`` which resets the view the same way a blank search does.
        """
        category = Category(category)
        if category is Category.ALL:
            self._dispatch(FilterCleared(category=category))
            return

        self._dispatch(CategoryStarted(category=category))
        try:
            if category is Category.LATEST:
                result = await self._timed(
                    "fetch_top_headlines",
                    {"region": self._settings.international_region},
                    self._fetcher.fetch_top_headlines(self._settings.international_region),
                )
            else:
                result = await self._timed(
                    "fetch_by_category",
                    {"category": category.value, "page": 1},
                    self._fetcher.fetch_by_category(
                        category.value, 1, self._settings.category_page_size
                    ),
                )
        except Exception as e:
            logger.warning(f"Category {category.value} failed: {_describe(e)}")
            self._dispatch(CategoryFailed(category=category, error=_describe(e)))
            return
        self._dispatch(CategoryCompleted(category=category, result=result))

    async def _fetch_feed_page(self, feed: FeedKind, page: int) -> FetchResult:
        settings = self._settings
        if feed is FeedKind.NATIONAL:
            return await self._timed(
                "fetch_regional_news",
                {"page": page},
                self._fetcher.fetch_regional_news(page, settings.national_page_size),
            )
        return await self._timed(
            "fetch_top_headlines",
            {"region": settings.international_region, "page": page},
            self._fetcher.fetch_top_headlines(
                settings.international_region, page, settings.international_page_size
            ),
        )

    async def _timed(
        self,
        operation: str,
        params: dict[str, Any],
        call: Awaitable[FetchResult],
    ) -> FetchResult:
        """Await a fetch and record it in the session log."""
        t0 = time.monotonic()
        try:
            result = await call
        except Exception as e:
            if self._session_logger:
                self._session_logger.log_fetch(
                    operation, params, None, time.monotonic() - t0, error=_describe(e)
                )
            raise
        if self._session_logger:
            self._session_logger.log_fetch(operation, params, result, time.monotonic() - t0)
        return result


def _describe(e: Exception) -> str:
    if isinstance(e, FetchError):
        return e.cause
    return f"{type(e).__name__}: {e}"
