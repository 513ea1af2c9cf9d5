"""Tests for settings loading and the JSON feed config."""

from __future__ import annotations

import json

import pytest

from news_mcp.config import (
    DEFAULT_FEED_URLS,
    GNEWS_API_BASE_URL,
    Settings,
    load_config,
    load_settings,
    require_api_key,
)
from news_mcp.messages import EN, JA, get_messages
from news_mcp.utils import ConfigurationError


def test_defaults():
    settings = load_settings()

    assert settings.mode == "rss"
    assert settings.locale == "en"
    assert settings.api_key is None
    assert settings.api_base_url == GNEWS_API_BASE_URL
    assert settings.timeout == 10
    assert settings.log_level == "INFO"
    assert settings.feed_urls == DEFAULT_FEED_URLS


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("NEWS_MCP_MODE", "GNEWS")
    monkeypatch.setenv("NEWS_MCP_LOCALE", "ja")
    monkeypatch.setenv("NEWS_MCP_TIMEOUT", "2.5")
    monkeypatch.setenv("NEWS_MCP_LOG_LEVEL", "debug")
    monkeypatch.setenv("GNEWS_API_KEY", "abc")

    settings = load_settings()

    assert settings.mode == "gnews"
    assert settings.locale == "ja"
    assert settings.timeout == 2.5
    assert settings.log_level == "DEBUG"
    assert settings.api_key == "abc"


def test_explicit_mode_wins_over_environment(monkeypatch):
    monkeypatch.setenv("NEWS_MCP_MODE", "gnews")

    assert load_settings("rss").mode == "rss"


def test_empty_api_key_is_unset(monkeypatch):
    monkeypatch.setenv("GNEWS_API_KEY", "")

    assert load_settings().api_key is None


@pytest.mark.parametrize(
    "name, value",
    [
        ("NEWS_MCP_MODE", "twitter"),
        ("NEWS_MCP_LOCALE", "fr"),
        ("NEWS_MCP_TIMEOUT", "soon"),
        ("NEWS_MCP_TIMEOUT", "0"),
        ("NEWS_MCP_TIMEOUT", "-3"),
        ("NEWS_MCP_LOG_LEVEL", "LOUD"),
    ],
)
def test_invalid_values_raise(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ConfigurationError):
        load_settings()


def test_feed_override_from_config(monkeypatch, tmp_path):
    path = tmp_path / "news_config.json"
    path.write_text(
        json.dumps({"feeds": {"it": "${IT_FEED_URL}", "weather": "https://example.com/w.xml"}}),
        encoding="utf-8",
    )
    monkeypatch.setenv("NEWS_MCP_CONFIG", str(path))
    monkeypatch.setenv("IT_FEED_URL", "https://feeds.example.com/it.xml")

    feeds = load_settings().feed_urls

    assert feeds["it"] == "https://feeds.example.com/it.xml"
    assert feeds["top"] == DEFAULT_FEED_URLS["top"]
    assert "weather" not in feeds


def test_malformed_config_is_ignored(monkeypatch, tmp_path):
    path = tmp_path / "news_config.json"
    path.write_text("{not json", encoding="utf-8")
    monkeypatch.setenv("NEWS_MCP_CONFIG", str(path))

    assert load_config() == {}
    assert load_settings().feed_urls == DEFAULT_FEED_URLS


def test_missing_config_file():
    assert load_config() == {}


def test_require_api_key():
    assert require_api_key(Settings(api_key="abc")) == "abc"
    with pytest.raises(ConfigurationError, match="GNEWS_API_KEY environment variable is required"):
        require_api_key(Settings())


def test_get_messages():
    assert get_messages("ja") is JA
    assert get_messages("en") is EN
    assert get_messages("xx") is EN


def test_package_modules_share_one_logger():
    from news_mcp import dispatcher, handlers, server
    from news_mcp.sources import gnews, rss

    names = {module.logger.name for module in (dispatcher, handlers, server, gnews, rss)}
    assert names == {"NEWS_MCP"}
