from pulse_report.controller.state import (
    FeedCursor,
    Notice,
    NoticeLevel,
    ViewState,
    reduce,
    sort_latest_first,
)
from pulse_report.controller.store import FeedController, FeedSettings

__all__ = [
    "FeedController",
    "FeedCursor",
    "FeedSettings",
    "Notice",
    "NoticeLevel",
    "ViewState",
    "reduce",
    "sort_latest_first",
]
