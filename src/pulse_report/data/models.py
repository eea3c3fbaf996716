"""Core data models for Pulse Report."""

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar


class Category(StrEnum):
    """Fixed category vocabulary exposed to the view.

    ``ALL`` means no filter. ``LATEST`` is a client-side re-sort of the
    headline feed. Every other member is a Guardian section id.
    """

    ALL = "all"
    LATEST = "latest"
    WORLD = "world"
    BUSINESS = "business"
    TECHNOLOGY = "technology"
    SPORT = "sport"
    POLITICS = "politics"
    SCIENCE = "science"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]

    @property
    def section(self) -> str | None:
        """Upstream section id, or None for the client-side categories."""
        if self in (Category.ALL, Category.LATEST):
            return None
        return self.value


_CATEGORY_LABELS: dict[Category, str] = {
    Category.ALL: "All News",
    Category.LATEST: "Latest News",
    Category.WORLD: "World",
    Category.BUSINESS: "Business",
    Category.TECHNOLOGY: "Technology",
    Category.SPORT: "Sports",
    Category.POLITICS: "Politics",
    Category.SCIENCE: "Science",
}


class FeedKind(StrEnum):
    """The two independently paginated default feeds."""

    NATIONAL = "national"
    INTERNATIONAL = "international"


@dataclass(frozen=True)
class Article:
    """A normalized news article."""

    title: str
    description: str
    url: str
    image_url: str
    published_at: str
    author: str
    source: str
    category: str | None = None


@dataclass(frozen=True)
class FeedPage:
    """One page of articles as returned by a fetch."""

    articles: tuple[Article, ...] = ()
    total_results: int = 0
    status: str = "ok"

    def __len__(self) -> int:
        return len(self.articles)


@dataclass(frozen=True)
class Live:
    """A page served by the upstream API."""

    page: FeedPage
    degraded: ClassVar[bool] = False

    @property
    def articles(self) -> tuple[Article, ...]:
        return self.page.articles


@dataclass(frozen=True)
class Fallback:
    """A substitute page returned because the live fetch failed.

    Shaped like a live page so the view can render it unchanged; ``cause``
    names the failure that triggered the substitution.
    """

    page: FeedPage
    cause: str
    degraded: ClassVar[bool] = True

    @property
    def articles(self) -> tuple[Article, ...]:
        return self.page.articles


FetchResult = Live | Fallback


class FallbackPolicy(StrEnum):
    """What a fetcher substitutes when a live fetch fails.

    ``DELEGATE`` serves search failures from the headline feed and category
    failures from the national feed; headline and national failures get the
    static sample. ``STATIC`` always serves the static sample. ``RAISE``
    substitutes nothing and raises ``FetchError``.
    """

    DELEGATE = "delegate"
    STATIC = "static"
    RAISE = "raise"
