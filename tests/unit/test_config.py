"""Unit tests for configuration."""

import pytest

from fmp_mcp.config import Settings, get_api_key
from fmp_mcp.errors import ConfigError


def test_settings_defaults(no_api_key, monkeypatch):
    """Defaults apply when nothing is configured."""
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)

    settings = Settings(_env_file=None)

    assert settings.fmp_api_key is None
    assert settings.log_level == "INFO"
    assert settings.log_format == "console"
    assert settings.service_name == "fmp-mcp-server"


def test_settings_from_env(monkeypatch):
    """Settings are read from environment variables."""
    monkeypatch.setenv("FMP_API_KEY", "abc123")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_FORMAT", "json")

    settings = Settings(_env_file=None)

    assert settings.fmp_api_key == "abc123"
    assert settings.log_level == "DEBUG"
    assert settings.log_format == "json"


def test_settings_from_env_file(no_api_key, tmp_path):
    """A .env file in the working directory is honoured."""
    (tmp_path / ".env").write_text("FMP_API_KEY=from-file\n")

    assert Settings().fmp_api_key == "from-file"


def test_get_api_key_missing(no_api_key):
    """A missing credential is a configuration error."""
    with pytest.raises(ConfigError, match="FMP_API_KEY environment variable is required"):
        get_api_key()


def test_get_api_key_empty(no_api_key, monkeypatch):
    """An empty credential counts as missing."""
    monkeypatch.setenv("FMP_API_KEY", "")

    with pytest.raises(ConfigError):
        get_api_key()


def test_get_api_key_is_read_on_every_call(no_api_key, monkeypatch):
    """A key supplied after the first failed lookup is picked up without restart."""
    with pytest.raises(ConfigError):
        get_api_key()

    monkeypatch.setenv("FMP_API_KEY", "late-key")

    assert get_api_key() == "late-key"
