"""Factory functions to create components from configuration."""

from pathlib import Path

from pulse_report.config.models import GuardianAPIConfig, PulseConfig
from pulse_report.controller.store import FeedController, FeedSettings
from pulse_report.search.guardian import GuardianFetcher
from pulse_report.session_logger import SessionLogger


def create_fetcher(config: PulseConfig) -> GuardianFetcher:
    """Create the Guardian fetcher from config."""
    api: GuardianAPIConfig = config.api
    return GuardianFetcher(
        api_key=api.api_key,
        base_url=api.base_url,
        timeout=api.timeout,
        fallback=api.fallback,
        headline_section=config.feeds.international.section,
        regional_query=config.feeds.national.query,
        search_page_size=config.feeds.search_page_size,
    )


def create_settings(config: PulseConfig) -> FeedSettings:
    feeds = config.feeds
    return FeedSettings(
        national_page_size=feeds.national.page_size,
        international_page_size=feeds.international.page_size,
        international_region=feeds.international.region,
        category_page_size=feeds.category_page_size,
    )


def create_from_config(
    config: PulseConfig,
    *,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
) -> tuple[FeedController, SessionLogger | None]:
    """Create a ready-to-use controller from root config.

    Args:
        config: Root configuration.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.

    Returns:
        Tuple of (controller, session_logger).
        session_logger is None if logging is disabled.
    """
    log_enabled = log_override if log_override is not None else config.logging.enabled
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)

    session_logger: SessionLogger | None = None
    if log_enabled:
        session_logger = SessionLogger(log_dir=log_dir, enabled=True)
        session_logger.start_session()

    controller = FeedController(
        create_fetcher(config),
        settings=create_settings(config),
        session_logger=session_logger,
    )
    return (controller, session_logger)
