"""Immutable view state and the pure transitions that evolve it.

The controller never mutates state in place. It dispatches one of the
event types below and replaces its state with ``reduce(state, event)``,
so every property of the feeds can be checked without any I/O.
"""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from enum import StrEnum

from pulse_report.data import Article, Category, FeedKind, FetchResult

INITIAL_LOAD_ERROR = "Failed to load news articles"


class NoticeLevel(StrEnum):
    INFO = "info"
    ERROR = "error"


@dataclass(frozen=True)
class Notice:
    """A transient user-facing notification."""

    title: str
    description: str
    level: NoticeLevel = NoticeLevel.INFO


@dataclass(frozen=True)
class FeedCursor:
    """Pagination state of one default feed.

    ``page`` is the last page appended. ``has_more`` latches to False on the
    first empty page and only an initial load resets it. ``loading`` guards
    against a second fetch while one is in flight.
    """

    articles: tuple[Article, ...] = ()
    page: int = 1
    has_more: bool = True
    loading: bool = False
    degraded: bool = False
    error: str | None = None


@dataclass(frozen=True)
class ViewState:
    """Everything the presentation layer renders."""

    national: FeedCursor = field(default_factory=FeedCursor)
    international: FeedCursor = field(default_factory=FeedCursor)
    filtered: tuple[Article, ...] = ()
    filtered_mode: bool = False
    filtered_degraded: bool = False
    query: str = ""
    category: Category = Category.ALL
    loading: bool = False
    error: str | None = None
    notice: Notice | None = None

    def cursor(self, feed: FeedKind) -> FeedCursor:
        return self.national if feed is FeedKind.NATIONAL else self.international

    @property
    def show_error_page(self) -> bool:
        """Full-page error only when nothing at all is left to show."""
        return (
            self.error is not None
            and not self.national.articles
            and not self.international.articles
        )

    def can_load_more(self, feed: FeedKind) -> bool:
        cursor = self.cursor(feed)
        return not self.filtered_mode and cursor.has_more and not cursor.loading


# ============================================================
# Events
# ============================================================


@dataclass(frozen=True)
class InitialLoadStarted:
    pass


@dataclass(frozen=True)
class FirstPageLoaded:
    feed: FeedKind
    result: FetchResult


@dataclass(frozen=True)
class FirstPageFailed:
    feed: FeedKind
    error: str


@dataclass(frozen=True)
class InitialLoadSettled:
    pass


@dataclass(frozen=True)
class LoadMoreStarted:
    feed: FeedKind


@dataclass(frozen=True)
class NextPageLoaded:
    feed: FeedKind
    page: int
    result: FetchResult


@dataclass(frozen=True)
class NextPageFailed:
    feed: FeedKind
    error: str


@dataclass(frozen=True)
class FilterCleared:
    """Blank search or the ``all`` category: back to the dual-feed view."""

    category: Category | None = None


@dataclass(frozen=True)
class SearchStarted:
    query: str


@dataclass(frozen=True)
class SearchCompleted:
    query: str
    result: FetchResult


@dataclass(frozen=True)
class SearchFailed:
    query: str
    error: str


@dataclass(frozen=True)
class CategoryStarted:
    category: Category


@dataclass(frozen=True)
class CategoryCompleted:
    category: Category
    result: FetchResult


@dataclass(frozen=True)
class CategoryFailed:
    category: Category
    error: str


Event = (
    InitialLoadStarted
    | FirstPageLoaded
    | FirstPageFailed
    | InitialLoadSettled
    | LoadMoreStarted
    | NextPageLoaded
    | NextPageFailed
    | FilterCleared
    | SearchStarted
    | SearchCompleted
    | SearchFailed
    | CategoryStarted
    | CategoryCompleted
    | CategoryFailed
)


# ============================================================
# Transitions
# ============================================================


def sort_latest_first(articles: tuple[Article, ...]) -> tuple[Article, ...]:
    """Order by publication time, most recent first.

    Unparseable timestamps sort last; ties keep upstream order.
    """
    return tuple(sorted(articles, key=_published_key, reverse=True))


def _published_key(article: Article) -> datetime:
    try:
        published = datetime.fromisoformat(article.published_at.replace("Z", "+00:00"))
    except ValueError:
        return datetime.min.replace(tzinfo=UTC)
    if published.tzinfo is None:
        published = published.replace(tzinfo=UTC)
    return published


def _with_cursor(state: ViewState, feed: FeedKind, **changes: object) -> ViewState:
    cursor = replace(state.cursor(feed), **changes)
    if feed is FeedKind.NATIONAL:
        return replace(state, national=cursor)
    return replace(state, international=cursor)


def reduce(state: ViewState, event: Event) -> ViewState:
    """Return the state that results from applying ``event`` to ``state``."""
    if isinstance(event, InitialLoadStarted):
        return replace(
            state,
            loading=True,
            error=None,
            national=replace(state.national, loading=True, error=None),
            international=replace(state.international, loading=True, error=None),
        )

    if isinstance(event, FirstPageLoaded):
        articles = event.result.articles
        return _with_cursor(
            state,
            event.feed,
            articles=articles,
            page=1,
            has_more=len(articles) > 0,
            loading=False,
            degraded=event.result.degraded,
            error=None,
        )

    if isinstance(event, FirstPageFailed):
        return _with_cursor(state, event.feed, loading=False, error=event.error)

    if isinstance(event, InitialLoadSettled):
        if state.national.error is not None and state.international.error is not None:
            return replace(
                state,
                loading=False,
                error=INITIAL_LOAD_ERROR,
                notice=Notice(
                    "Error loading news",
                    "Please check your connection and try again.",
                    NoticeLevel.ERROR,
                ),
            )
        return replace(
            state,
            loading=False,
            notice=Notice("News loaded successfully", "Latest headlines are now available."),
        )

    if isinstance(event, LoadMoreStarted):
        return _with_cursor(state, event.feed, loading=True)

    if isinstance(event, NextPageLoaded):
        cursor = state.cursor(event.feed)
        if not event.result.articles:
            return _with_cursor(state, event.feed, has_more=False, loading=False)
        return _with_cursor(
            state,
            event.feed,
            articles=cursor.articles + event.result.articles,
            page=max(cursor.page, event.page),
            loading=False,
            degraded=cursor.degraded or event.result.degraded,
        )

    if isinstance(event, NextPageFailed):
        return replace(
            _with_cursor(state, event.feed, loading=False),
            notice=Notice(
                "Error loading more news",
                f"Could not load more {event.feed.value} news.",
                NoticeLevel.ERROR,
            ),
        )

    if isinstance(event, FilterCleared):
        state = replace(state, filtered_mode=False, query="")
        if event.category is not None:
            state = replace(state, category=event.category)
        return state

    if isinstance(event, SearchStarted):
        return replace(state, loading=True, query=event.query, filtered_mode=True)

    if isinstance(event, SearchCompleted):
        articles = event.result.articles
        return replace(
            state,
            loading=False,
            filtered=articles,
            filtered_degraded=event.result.degraded,
            notice=Notice(
                "Search completed",
                f'Found {len(articles)} articles for "{event.query}"',
            ),
        )

    if isinstance(event, SearchFailed):
        return replace(
            state,
            loading=False,
            notice=Notice(
                "Search failed",
                "Please try again with different keywords.",
                NoticeLevel.ERROR,
            ),
        )

    if isinstance(event, CategoryStarted):
        return replace(state, loading=True, category=event.category)

    if isinstance(event, CategoryCompleted):
        # Superseded by a later selection
        if state.category is not event.category:
            return replace(state, loading=False)
        articles = event.result.articles
        if event.category is Category.LATEST:
            articles = sort_latest_first(articles)
            label = Category.LATEST.label
        else:
            label = f"{event.category.value} news"
        return replace(
            state,
            loading=False,
            filtered=articles,
            filtered_mode=True,
            filtered_degraded=event.result.degraded,
            notice=Notice("Category filtered", f"Showing {label}"),
        )

    if isinstance(event, CategoryFailed):
        return replace(
            state,
            loading=False,
            notice=Notice(
                "Filter failed",
                "Unable to filter by category.",
                NoticeLevel.ERROR,
            ),
        )

    msg = f"Unknown event type: {type(event)}"
    raise ValueError(msg)
