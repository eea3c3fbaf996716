"""Map Guardian content items onto the local Article shape."""

from typing import Any

from pulse_report.data import Article

PLACEHOLDER_IMAGE = "/placeholder.svg"
STAFF_AUTHOR = "Guardian Staff"
SOURCE_NAME = "The Guardian"


def adapt_result(item: dict[str, Any]) -> Article:
    """Convert one raw ``response.results`` entry into an Article.

    Missing optional fields are substituted, never rejected: the summary
    falls back to the title, the thumbnail to a placeholder path, and every
    article is credited to the staff byline since the API carries no
    per-article author.

    Args:
        item: Raw result dict from the Guardian search endpoint.

    Returns:
        The adapted Article.
    """
    fields = item.get("fields") or {}
    title = item.get("webTitle") or ""
    return Article(
        title=title,
        description=fields.get("trailText") or title,
        url=item.get("webUrl") or "",
        image_url=fields.get("thumbnail") or PLACEHOLDER_IMAGE,
        published_at=item.get("webPublicationDate") or "",
        author=STAFF_AUTHOR,
        source=SOURCE_NAME,
        category=item.get("sectionName") or None,
    )
