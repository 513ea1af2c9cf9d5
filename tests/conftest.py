from __future__ import annotations

import pytest

from news_fixtures import make_records

_ENV_VARS = (
    "NEWS_MCP_MODE",
    "NEWS_MCP_LOCALE",
    "NEWS_MCP_TIMEOUT",
    "NEWS_MCP_LOG_LEVEL",
    "GNEWS_API_KEY",
    "GNEWS_API_BASE_URL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from the developer's environment and .env file."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("NEWS_MCP_CONFIG", str(tmp_path / "missing_config.json"))


@pytest.fixture
def records():
    return make_records(7)
