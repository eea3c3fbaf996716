"""Pulse Report: national and international headlines from the Guardian API."""

from pulse_report.config import PulseConfig, create_from_config, load_config
from pulse_report.controller import (
    FeedController,
    FeedCursor,
    FeedSettings,
    Notice,
    NoticeLevel,
    ViewState,
    reduce,
    sort_latest_first,
)
from pulse_report.data import (
    Article,
    Category,
    Fallback,
    FallbackPolicy,
    FeedKind,
    FeedPage,
    FetchResult,
    Live,
)
from pulse_report.errors import FetchError
from pulse_report.search import GuardianFetcher, NewsFetcher, adapt_result, static_fallback_page
from pulse_report.session_logger import SessionLogger
from pulse_report.view import render

__all__ = [
    # Models
    "Article",
    "Category",
    "Fallback",
    "FallbackPolicy",
    "FeedKind",
    "FeedPage",
    "FetchResult",
    "Live",
    # Errors
    "FetchError",
    # Fetchers
    "GuardianFetcher",
    "NewsFetcher",
    "adapt_result",
    "static_fallback_page",
    # State
    "FeedController",
    "FeedCursor",
    "FeedSettings",
    "Notice",
    "NoticeLevel",
    "ViewState",
    "reduce",
    "sort_latest_first",
    # View
    "render",
    # Logging
    "SessionLogger",
    # Config
    "PulseConfig",
    "create_from_config",
    "load_config",
]
