"""Configuration loading for MCP News."""

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from .utils import ConfigurationError

# Auto-load environment variables from a .env file if present
# override=False ensures Docker/system env vars take precedence over .env file
load_dotenv(override=False)

logger = logging.getLogger("NEWS_MCP")

MODE_RSS = "rss"
MODE_GNEWS = "gnews"
SUPPORTED_MODES = (MODE_RSS, MODE_GNEWS)

SUPPORTED_LOCALES = ("en", "ja")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

GNEWS_API_BASE_URL = "https://gnews.io/api/v4"

# Yahoo! News Japan RSS feeds by category
DEFAULT_FEED_URLS: Dict[str, str] = {
    "top": "https://news.yahoo.co.jp/rss/topics/top-picks.xml",
    "domestic": "https://news.yahoo.co.jp/rss/categories/domestic.xml",
    "world": "https://news.yahoo.co.jp/rss/categories/world.xml",
    "business": "https://news.yahoo.co.jp/rss/categories/business.xml",
    "entertainment": "https://news.yahoo.co.jp/rss/categories/entertainment.xml",
    "sports": "https://news.yahoo.co.jp/rss/categories/sports.xml",
    "it": "https://news.yahoo.co.jp/rss/categories/it.xml",
    "science": "https://news.yahoo.co.jp/rss/categories/science.xml",
}

DEFAULT_TIMEOUT = 10  # seconds


@dataclass(frozen=True)
class Settings:
    """Process-wide settings, read once at startup."""

    mode: str = MODE_RSS
    locale: str = "en"
    api_key: Optional[str] = None
    api_base_url: str = GNEWS_API_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"
    feed_urls: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_FEED_URLS))


def get_config_path() -> str:
    """Get the path to the optional JSON config file.

    Returns:
        Path to the config file
    """
    return os.environ.get("NEWS_MCP_CONFIG") or os.path.join(os.getcwd(), "data", "news_config.json")


def load_config() -> Dict[str, Any]:
    """Load JSON config from $NEWS_MCP_CONFIG or ./data/news_config.json.

    Returns:
        Configuration dictionary or empty dict if not found/invalid
    """
    path = get_config_path()

    if not os.path.exists(path):
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
            # Expand environment variables using the ${VAR} or $VAR format
            expanded_content = os.path.expandvars(content)
            config = json.loads(expanded_content)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config {path}: {e}")
        return {}

    if not isinstance(config, dict):
        logger.warning(f"Ignoring config {path}: top level must be an object")
        return {}
    return config


def get_feed_urls(config: Dict[str, Any]) -> Dict[str, str]:
    """Merge feed URL overrides from config onto the default feeds.

    Only known categories can be overridden; the category set is part of
    the tool schema and does not change with configuration.
    """
    feeds = dict(DEFAULT_FEED_URLS)
    overrides = config.get("feeds") or {}
    if not isinstance(overrides, dict):
        logger.warning("Ignoring 'feeds' in config: expected an object")
        return feeds

    for category, url in overrides.items():
        if category not in feeds:
            logger.warning(f"Ignoring feed override for unknown category: {category}")
            continue
        feeds[category] = str(url)
    return feeds


def load_settings(mode: Optional[str] = None) -> Settings:
    """Build Settings from the environment and the optional JSON config.

    Args:
        mode: Explicit server mode; falls back to $NEWS_MCP_MODE, then "rss".

    Raises:
        ConfigurationError: If mode, locale or timeout is invalid
    """
    mode = (mode or os.environ.get("NEWS_MCP_MODE") or MODE_RSS).lower()
    if mode not in SUPPORTED_MODES:
        raise ConfigurationError(
            f"Unsupported mode: {mode} (expected one of {', '.join(SUPPORTED_MODES)})"
        )

    locale = (os.environ.get("NEWS_MCP_LOCALE") or "en").lower()
    if locale not in SUPPORTED_LOCALES:
        raise ConfigurationError(
            f"Unsupported locale: {locale} (expected one of {', '.join(SUPPORTED_LOCALES)})"
        )

    raw_timeout = os.environ.get("NEWS_MCP_TIMEOUT") or DEFAULT_TIMEOUT
    try:
        timeout = float(raw_timeout)
    except ValueError:
        raise ConfigurationError(f"NEWS_MCP_TIMEOUT must be a number, got {raw_timeout!r}") from None
    if not timeout > 0:
        raise ConfigurationError(f"NEWS_MCP_TIMEOUT must be positive, got {raw_timeout!r}")

    log_level = (os.environ.get("NEWS_MCP_LOG_LEVEL") or "INFO").upper()
    if log_level not in LOG_LEVELS:
        raise ConfigurationError(
            f"Unsupported log level: {log_level} (expected one of {', '.join(LOG_LEVELS)})"
        )

    return Settings(
        mode=mode,
        locale=locale,
        api_key=os.environ.get("GNEWS_API_KEY") or None,
        api_base_url=os.environ.get("GNEWS_API_BASE_URL") or GNEWS_API_BASE_URL,
        timeout=timeout,
        log_level=log_level,
        feed_urls=get_feed_urls(load_config()),
    )


def require_api_key(settings: Settings) -> str:
    """Return the GNews API key or fail the startup.

    Raises:
        ConfigurationError: If GNEWS_API_KEY is not set
    """
    if not settings.api_key:
        raise ConfigurationError("GNEWS_API_KEY environment variable is required")
    return settings.api_key
