#!/usr/bin/env python3
"""Tests for configuration loading."""

from pathlib import Path

import pytest

from csvsplit.core.config import DEFAULT_CSV_PATH, Config, Environment, get_config, reload_config
from csvsplit.core.errors import ConfigurationError


@pytest.mark.unit
class TestConfigFromEnvironment:
    """Test configuration built from environment variables."""

    def test_reads_token_and_environment(self):
        config = Config.from_environment()

        assert config.environment == Environment.TEST
        assert config.ynab.api_token == "test-token"
        assert config.ynab.base_url == "https://ynab.test/v1"
        assert config.ynab.timeout == 30

    def test_default_csv_path(self):
        config = Config.from_environment()

        assert config.csv_import.csv_path == Path(DEFAULT_CSV_PATH)

    def test_csv_path_override(self, monkeypatch):
        monkeypatch.setenv("CSVSPLIT_CSV_PATH", "exports/march.csv")

        assert Config.from_environment().csv_import.csv_path == Path("exports/march.csv")

    def test_base_url_trailing_slash_removed(self, monkeypatch):
        monkeypatch.setenv("YNAB_BASE_URL", "https://ynab.test/v1/")

        assert Config.from_environment().ynab.base_url == "https://ynab.test/v1"

    def test_missing_token_is_none(self, monkeypatch):
        monkeypatch.delenv("YNAB_ACCESS_TOKEN")

        assert Config.from_environment().ynab.api_token is None

    def test_require_api_token(self, monkeypatch):
        assert Config.from_environment().require_api_token() == "test-token"

        monkeypatch.setenv("YNAB_ACCESS_TOKEN", "")
        with pytest.raises(ConfigurationError, match="YNAB_ACCESS_TOKEN"):
            Config.from_environment().require_api_token()

    def test_unknown_environment(self, monkeypatch):
        monkeypatch.setenv("CSVSPLIT_ENV", "staging")

        with pytest.raises(ConfigurationError, match="CSVSPLIT_ENV"):
            Config.from_environment()

    def test_non_numeric_timeout(self, monkeypatch):
        monkeypatch.setenv("YNAB_TIMEOUT", "soon")

        with pytest.raises(ConfigurationError, match="YNAB_TIMEOUT"):
            Config.from_environment()


@pytest.mark.unit
class TestConfigValidation:
    """Test validation and global config access."""

    def test_valid_config_has_no_errors(self):
        assert Config.from_environment().validate() == []

    def test_invalid_values_reported(self, monkeypatch):
        monkeypatch.setenv("YNAB_TIMEOUT", "0")
        monkeypatch.setenv("YNAB_BASE_URL", "ftp://ynab.test")
        monkeypatch.setenv("LOG_LEVEL", "chatty")

        errors = Config.from_environment().validate()

        assert len(errors) == 3

    def test_get_config_raises_on_invalid(self, monkeypatch):
        monkeypatch.setenv("YNAB_TIMEOUT", "-5")

        with pytest.raises(ConfigurationError, match="validation failed"):
            get_config()

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_reload_config_picks_up_changes(self, monkeypatch):
        get_config()
        monkeypatch.setenv("YNAB_TIMEOUT", "45")

        assert reload_config().ynab.timeout == 45


@pytest.mark.unit
class TestConfigToDict:
    """Test configuration serialization."""

    def test_token_redacted_by_default(self):
        data = Config.from_environment().to_dict()

        assert data["ynab"]["api_token"] == "***REDACTED***"
        assert data["environment"] == "test"
        assert data["csv_import"]["csv_path"] == DEFAULT_CSV_PATH

    def test_token_included_on_request(self):
        data = Config.from_environment().to_dict(include_sensitive=True)

        assert data["ynab"]["api_token"] == "test-token"

    def test_missing_token_not_reported_as_present(self, monkeypatch):
        monkeypatch.delenv("YNAB_ACCESS_TOKEN")

        assert Config.from_environment().to_dict()["ynab"]["api_token"] is None
