from typing import Protocol

from pulse_report.data import FetchResult


class NewsFetcher(Protocol):
    """Interface for fetching pages of news from an upstream content API."""

    async def fetch_top_headlines(
        self, region: str | None = None, page: int = 1, page_size: int = 9
    ) -> FetchResult:
        """Fetch one page of the international headline feed."""
        ...

    async def fetch_regional_news(self, page: int = 1, page_size: int = 6) -> FetchResult:
        """Fetch one page of the national feed."""
        ...

    async def fetch_by_category(
        self, category: str, page: int = 1, page_size: int = 9
    ) -> FetchResult:
        """Fetch one page of a single upstream section."""
        ...

    async def search_news(self, query: str, category: str | None = None) -> FetchResult:
        """Run a keyword search, optionally scoped to one section."""
        ...
