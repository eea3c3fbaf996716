"""Feed fetcher backed by the Guardian content API."""

import logging
import os
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from pulse_report.data import Fallback, FallbackPolicy, FeedPage, FetchResult, Live
from pulse_report.errors import FetchError
from pulse_report.search.adapter import adapt_result
from pulse_report.search.fallback import static_fallback_page

GUARDIAN_API_BASE = "https://content.guardianapis.com"
SHOW_FIELDS = "thumbnail,trailText"

logger = logging.getLogger(__name__)

# Failures that turn a response into "no usable page"
_FETCH_ERRORS = (
    httpx.HTTPError,
    httpx.InvalidURL,
    httpx.StreamError,
    httpx.CookieConflict,
    ValueError,
    KeyError,
    TypeError,
    AttributeError,
)


class GuardianFetcher:
    """Fetch paginated news from the Guardian ``/search`` endpoint.

    Every operation issues a single GET, with no retries. Failures never
    escape unless the policy is ``RAISE``: they come back as a ``Fallback``
    result carrying the cause, shaped exactly like a live page.

    Args:
        api_key: Guardian API key (defaults to GUARDIAN_API_KEY env var).
        base_url: API root, without the trailing ``/search``.
        timeout: Request timeout in seconds, or None to wait indefinitely.
        fallback: Substitution policy for failed fetches.
        headline_section: Section id for the international headline feed.
        regional_query: Keyword query defining the national feed.
        search_page_size: Page size used by ``search_news``.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        base_url: str = GUARDIAN_API_BASE,
        timeout: float | None = 30.0,
        fallback: FallbackPolicy = FallbackPolicy.DELEGATE,
        headline_section: str = "world",
        regional_query: str = "Pakistan",
        search_page_size: int = 20,
    ) -> None:
        self._api_key = api_key or os.environ.get("GUARDIAN_API_KEY")
        if not self._api_key:
            raise ValueError(
                "Guardian API key required. Pass api_key or set GUARDIAN_API_KEY env var."
            )
        self._search_url = f"{base_url.rstrip('/')}/search"
        self._timeout = timeout
        self._policy = FallbackPolicy(fallback)
        self._headline_section = headline_section
        self._regional_query = regional_query
        self._search_page_size = search_page_size

    @property
    def policy(self) -> FallbackPolicy:
        return self._policy

    async def fetch_top_headlines(
        self, region: str | None = None, page: int = 1, page_size: int = 9
    ) -> FetchResult:
        """Fetch one page of the international headline feed.

        Args:
            region: Optional Guardian production office (e.g. "us", "uk").
            page: 1-based page number.
            page_size: Articles per page.
        """
        params: dict[str, str | int] = {"section": self._headline_section}
        if region:
            params["production-office"] = region
        return await self._fetch("fetch_top_headlines", params, page=page, page_size=page_size)

    async def fetch_regional_news(self, page: int = 1, page_size: int = 6) -> FetchResult:
        """Fetch one page of the national feed (a fixed keyword query)."""
        params: dict[str, str | int] = {"q": self._regional_query}
        return await self._fetch("fetch_regional_news", params, page=page, page_size=page_size)

    async def fetch_by_category(
        self, category: str, page: int = 1, page_size: int = 9
    ) -> FetchResult:
        """Fetch one page of a single section; falls back to the national feed."""
        params: dict[str, str | int] = {"section": category}
        return await self._fetch(
            "fetch_by_category",
            params,
            page=page,
            page_size=page_size,
            delegate=self.fetch_regional_news,
        )

    async def search_news(self, query: str, category: str | None = None) -> FetchResult:
        """Keyword search, scoped to ``category`` when given; falls back to headlines."""
        params: dict[str, str | int] = {"q": query}
        if category:
            params["section"] = category
        return await self._fetch(
            "search_news",
            params,
            page=1,
            page_size=self._search_page_size,
            delegate=self.fetch_top_headlines,
        )

    async def _fetch(
        self,
        operation: str,
        params: dict[str, str | int],
        *,
        page: int,
        page_size: int,
        delegate: Callable[[], Awaitable[FetchResult]] | None = None,
    ) -> FetchResult:
        """Execute one request and apply the fallback policy on failure."""
        params = {
            **params,
            "page": page,
            "page-size": page_size,
            "show-fields": SHOW_FIELDS,
            "api-key": self._api_key,  # type: ignore[dict-item]
        }
        try:
            feed_page = await self._get_page(params)
        except _FETCH_ERRORS as e:
            cause = f"{type(e).__name__}: {e}"
            logger.warning(f"Error in {operation}: {cause}")
            if self._policy is FallbackPolicy.RAISE:
                raise FetchError(operation, cause) from e
            if self._policy is FallbackPolicy.DELEGATE and delegate is not None:
                logger.info(f"Serving {operation} from {delegate.__name__}")
                substitute = await delegate()
                return Fallback(page=substitute.page, cause=cause)
            return Fallback(page=static_fallback_page(), cause=cause)

        logger.debug(f"{operation} page {page}: {len(feed_page)} articles")
        return Live(page=feed_page)

    async def _get_page(self, params: dict[str, Any]) -> FeedPage:
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            response = await client.get(self._search_url, params=params)
            response.raise_for_status()
            data = response.json()

        envelope = data["response"]
        articles = tuple(adapt_result(item) for item in envelope["results"])
        return FeedPage(
            articles=articles,
            total_results=int(envelope.get("total", len(articles))),
            status=envelope.get("status", "ok"),
        )
