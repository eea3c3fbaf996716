"""Data models for Pulse Report."""

from pulse_report.data.models import (
    Article,
    Category,
    FeedKind,
    FeedPage,
    Fallback,
    FallbackPolicy,
    FetchResult,
    Live,
)

__all__ = [
    "Article",
    "Category",
    "Fallback",
    "FallbackPolicy",
    "FeedKind",
    "FeedPage",
    "FetchResult",
    "Live",
]
