"""Tests for configuration loading and factory functions."""

from __future__ import annotations

from pathlib import Path
from tempfile import NamedTemporaryFile

import pydantic
import pytest

from pulse_report.config import (
    FeedsConfig,
    GuardianAPIConfig,
    LoggingConfig,
    PulseConfig,
    create_fetcher,
    create_from_config,
    create_settings,
    get_default_config_path,
    load_config,
)
from pulse_report.controller import FeedController, FeedSettings
from pulse_report.data import FallbackPolicy
from pulse_report.search.guardian import GuardianFetcher
from pulse_report.session_logger import SessionLogger


class TestConfigModels:
    """Tests for Pydantic config models."""

    def test_api_config_defaults(self) -> None:
        config = GuardianAPIConfig()
        assert config.base_url == "https://content.guardianapis.com"
        assert config.api_key is None
        assert config.timeout == 30.0
        assert config.fallback is FallbackPolicy.DELEGATE

    def test_feeds_config_defaults(self) -> None:
        config = FeedsConfig()
        assert config.national.query == "Pakistan"
        assert config.national.page_size == 6
        assert config.international.section == "world"
        assert config.international.region is None
        assert config.international.page_size == 9
        assert config.category_page_size == 9
        assert config.search_page_size == 20

    def test_logging_config_defaults(self) -> None:
        config = LoggingConfig()
        assert config.enabled is False
        assert config.log_dir == "logs"

    def test_invalid_fallback_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            GuardianAPIConfig(fallback="retry")  # type: ignore[arg-type]

    def test_page_size_must_be_positive(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            FeedsConfig(category_page_size=0)

    def test_config_is_frozen(self) -> None:
        config = PulseConfig()
        with pytest.raises(pydantic.ValidationError):
            config.logging = LoggingConfig(enabled=True)  # type: ignore[misc]


class TestConfigLoader:
    """Tests for YAML config loading."""

    def test_load_config(self) -> None:
        yaml_content = """
api:
  api_key: yaml-key
  fallback: static
  timeout: null
feeds:
  national:
    query: Karachi
    page_size: 4
  international:
    region: uk
logging:
  enabled: true
  log_dir: out
"""
        with NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write(yaml_content)
            f.flush()
            config = load_config(Path(f.name))

        assert config.api.api_key == "yaml-key"
        assert config.api.fallback is FallbackPolicy.STATIC
        assert config.api.timeout is None
        assert config.feeds.national.query == "Karachi"
        assert config.feeds.national.page_size == 4
        assert config.feeds.international.region == "uk"
        assert config.feeds.international.section == "world"
        assert config.logging.enabled is True

    def test_load_empty_config(self) -> None:
        with NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write("")
            f.flush()
            config = load_config(Path(f.name))
        assert config == PulseConfig()

    def test_load_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_get_default_config_path(self) -> None:
        path = get_default_config_path()
        assert path.name == "default.yaml"
        assert "configs" in str(path)

    def test_load_default_config(self) -> None:
        path = get_default_config_path()
        if path.exists():
            config = load_config(path)
            assert config == PulseConfig()


class TestFactoryFunctions:
    """Tests for component factory functions."""

    def test_create_fetcher(self) -> None:
        config = PulseConfig(api=GuardianAPIConfig(api_key="k", fallback=FallbackPolicy.RAISE))
        fetcher = create_fetcher(config)
        assert isinstance(fetcher, GuardianFetcher)
        assert fetcher.policy is FallbackPolicy.RAISE

    def test_create_fetcher_uses_env_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GUARDIAN_API_KEY", "env-key")
        fetcher = create_fetcher(PulseConfig())
        assert fetcher._api_key == "env-key"

    def test_create_settings(self) -> None:
        settings = create_settings(PulseConfig())
        assert settings == FeedSettings()

    def test_create_from_config_without_logging(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GUARDIAN_API_KEY", "env-key")
        controller, session_logger = create_from_config(PulseConfig())
        assert isinstance(controller, FeedController)
        assert session_logger is None

    def test_create_from_config_log_override(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setenv("GUARDIAN_API_KEY", "env-key")
        controller, session_logger = create_from_config(
            PulseConfig(), log_override=True, log_dir_override=str(tmp_path)
        )
        assert isinstance(session_logger, SessionLogger)
        assert session_logger.enabled
        assert session_logger.record is not None
