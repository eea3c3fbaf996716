"""Plain-text rendering of the controller state."""

from pulse_report.controller.state import FeedCursor, NoticeLevel, ViewState
from pulse_report.data import Article, Category

TITLE = "Pulse Report"
TAGLINE = "Your trusted source for the latest national and international headlines"
NO_RESULTS = "No articles found. Try different keywords or category."


def render(
    state: ViewState,
    *,
    national_label: str = "Pakistan National News",
    international_label: str = "International News",
) -> str:
    """Render the whole page for ``state``.

    Exactly one of the filtered list or the two default feeds is rendered,
    chosen by ``state.filtered_mode``.
    """
    lines = [TITLE, TAGLINE, ""]
    if state.notice is not None:
        marker = "!" if state.notice.level is NoticeLevel.ERROR else "*"
        lines.append(f"{marker} {state.notice.title}: {state.notice.description}")
        lines.append("")

    if state.show_error_page:
        lines.append(state.error or "")
        lines.append("Run again to retry.")
        return "\n".join(lines)

    if state.filtered_mode:
        lines.extend(_render_filtered(state))
    else:
        lines.extend(
            _render_feed(
                national_label,
                "national",
                state.national,
                loading=state.loading,
            )
        )
        lines.append("")
        lines.extend(
            _render_feed(
                international_label,
                "international",
                state.international,
                loading=state.loading,
            )
        )
    return "\n".join(lines)


def filtered_heading(state: ViewState) -> str:
    if state.query:
        return f'Search Results for "{state.query}"'
    if state.category is Category.LATEST:
        return Category.LATEST.label
    return f"{state.category.value.capitalize()} News"


def _render_filtered(state: ViewState) -> list[str]:
    lines = [f"== {filtered_heading(state)} ({len(state.filtered)} articles) =="]
    if state.filtered_degraded:
        lines.append("(live results unavailable, showing fallback news)")
    if state.loading:
        lines.append("Loading...")
    elif state.filtered:
        lines.extend(_render_articles(state.filtered))
    else:
        lines.append(NO_RESULTS)
    return lines


def _render_feed(label: str, name: str, cursor: FeedCursor, *, loading: bool) -> list[str]:
    lines = [f"== {label} =="]
    if cursor.degraded:
        lines.append("(live results unavailable, showing fallback news)")
    if loading and not cursor.articles:
        lines.append("Loading...")
    elif cursor.articles:
        lines.extend(_render_articles(cursor.articles))
        if cursor.has_more:
            lines.append(f"[more {name} news available: --more {name}]")
    else:
        lines.append(f"Unable to load {name} news at this time.")
    if not cursor.has_more:
        lines.append(f"No more {name} news")
    return lines


def _render_articles(articles: tuple[Article, ...]) -> list[str]:
    lines: list[str] = []
    for i, article in enumerate(articles, 1):
        meta = [article.source, article.published_at]
        if article.category:
            meta.append(article.category)
        lines.append(f"{i}. {article.title}")
        if article.description != article.title:
            lines.append(f"   {article.description}")
        lines.append(f"   {' | '.join(m for m in meta if m)}")
        lines.append(f"   {article.url}")
    return lines
