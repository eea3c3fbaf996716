"""Pydantic configuration models for Pulse Report."""

from pydantic import BaseModel, Field

from pulse_report.data import FallbackPolicy

# ============================================================
# Upstream API Config
# ============================================================


class GuardianAPIConfig(BaseModel):
    """Configuration for the Guardian content API."""

    base_url: str = "https://content.guardianapis.com"
    api_key: str | None = None
    timeout: float | None = 30.0
    fallback: FallbackPolicy = FallbackPolicy.DELEGATE

    model_config = {"frozen": True}


# ============================================================
# Feed Configs
# ============================================================


class NationalFeedConfig(BaseModel):
    """The national feed: a keyword query against the search endpoint."""

    query: str = "Pakistan"
    page_size: int = Field(default=6, ge=1, le=50)
    label: str = "Pakistan National News"

    model_config = {"frozen": True}


class InternationalFeedConfig(BaseModel):
    """The international feed: one upstream section."""

    section: str = "world"
    region: str | None = None
    page_size: int = Field(default=9, ge=1, le=50)
    label: str = "International News"

    model_config = {"frozen": True}


class FeedsConfig(BaseModel):
    """Configuration for all feeds and filtered views."""

    national: NationalFeedConfig = Field(default_factory=NationalFeedConfig)
    international: InternationalFeedConfig = Field(default_factory=InternationalFeedConfig)
    category_page_size: int = Field(default=9, ge=1, le=50)
    search_page_size: int = Field(default=20, ge=1, le=50)

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for the JSON session log."""

    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class PulseConfig(BaseModel):
    """Root configuration for Pulse Report."""

    api: GuardianAPIConfig = Field(default_factory=GuardianAPIConfig)
    feeds: FeedsConfig = Field(default_factory=FeedsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
