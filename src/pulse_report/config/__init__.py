"""Configuration module for Pulse Report."""

from pulse_report.config.factory import create_fetcher, create_from_config, create_settings
from pulse_report.config.loader import get_default_config_path, load_config
from pulse_report.config.models import (
    FeedsConfig,
    GuardianAPIConfig,
    InternationalFeedConfig,
    LoggingConfig,
    NationalFeedConfig,
    PulseConfig,
)

__all__ = [
    "FeedsConfig",
    "GuardianAPIConfig",
    "InternationalFeedConfig",
    "LoggingConfig",
    "NationalFeedConfig",
    "PulseConfig",
    "create_fetcher",
    "create_from_config",
    "create_settings",
    "get_default_config_path",
    "load_config",
]
