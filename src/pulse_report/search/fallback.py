"""Static sample page served when a live fetch fails."""

from datetime import UTC, datetime, timedelta

from pulse_report.data import Article, FeedPage
from pulse_report.search.adapter import PLACEHOLDER_IMAGE

# (title, description, author, source, category, age in hours)
_SAMPLES: list[tuple[str, str, str, str, str, int]] = [
    (
        "Pakistan's Economic Recovery Shows Promising Signs",
        "Recent data indicates positive trends in Pakistan's economic indicators, "
        "with improved exports and industrial growth.",
        "News Reporter",
        "Pakistan Today",
        "Business",
        0,
    ),
    (
        "Karachi Development Project Launches New Phase",
        "Major infrastructure development initiative begins construction of modern "
        "transport system in Pakistan's largest city.",
        "City Reporter",
        "Dawn News",
        "Local",
        1,
    ),
    (
        "Pakistani Technology Startup Wins International Award",
        "Innovative fintech solution from Lahore-based company receives recognition "
        "at global technology summit.",
        "Tech Correspondent",
        "The News",
        "Technology",
        2,
    ),
]


def static_fallback_page(now: datetime | None = None) -> FeedPage:
    """Build the three-article sample page, timestamped relative to ``now``."""
    now = now or datetime.now(tz=UTC)
    articles = tuple(
        Article(
            title=title,
            description=description,
            url="#",
            image_url=PLACEHOLDER_IMAGE,
            published_at=(now - timedelta(hours=age)).isoformat(),
            author=author,
            source=source,
            category=category,
        )
        for title, description, author, source, category, age in _SAMPLES
    )
    return FeedPage(articles=articles, total_results=len(articles))
