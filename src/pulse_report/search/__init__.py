from pulse_report.search.adapter import PLACEHOLDER_IMAGE, STAFF_AUTHOR, adapt_result
from pulse_report.search.base import NewsFetcher
from pulse_report.search.fallback import static_fallback_page
from pulse_report.search.guardian import GuardianFetcher

__all__ = [
    "GuardianFetcher",
    "NewsFetcher",
    "PLACEHOLDER_IMAGE",
    "STAFF_AUTHOR",
    "adapt_result",
    "static_fallback_page",
]
