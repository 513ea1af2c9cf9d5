"""GNews API source for keyword search and top headlines."""

import logging
from typing import Any, Dict, List

import requests

from ..config import DEFAULT_TIMEOUT, GNEWS_API_BASE_URL
from ..models import ArticleRecord
from ..utils import FetchError, QuotaExceeded

logger = logging.getLogger("NEWS_MCP")

# GNews answers 403 once the daily request quota is used up
QUOTA_STATUS_CODE = 403

QUOTA_MESSAGE = "API daily quota reached. Please try again tomorrow."


def article_to_record(article: Dict[str, Any]) -> ArticleRecord:
    """Map a GNews article object to an ArticleRecord."""
    source = article.get("source") or {}
    return ArticleRecord(
        title=article.get("title") or "",
        published_at=article.get("publishedAt") or "",
        link=article.get("url") or "",
        summary=article.get("description") or "",
        source=source.get("name") or None,
    )


class GNewsSource:
    """Client for the GNews REST API (v4).

    The API key must already be checked by the caller; the source never
    runs without one.
    """

    def __init__(self, api_key: str, base_url: str = GNEWS_API_BASE_URL, timeout: float = DEFAULT_TIMEOUT):
        if not api_key:
            raise ValueError("GNewsSource requires an API key")
        self._api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def search(self, keyword: str, lang: str = "ja", country: str = "jp", max: int = 5) -> List[ArticleRecord]:
        """Search articles by keyword."""
        logger.info(f'Searching with keyword "{keyword}"')
        return self._get("search", {"q": keyword, "lang": lang, "country": country, "max": max})

    def top_headlines(
        self,
        category: str = "general",
        lang: str = "ja",
        country: str = "jp",
        max: int = 5,
    ) -> List[ArticleRecord]:
        """Fetch top headlines for a category."""
        logger.info(f'Fetching top headlines for category "{category}"')
        return self._get(
            "top-headlines",
            {"category": category, "lang": lang, "country": country, "max": max},
        )

    def _get(self, endpoint: str, params: Dict[str, Any]) -> List[ArticleRecord]:
        url = f"{self.base_url}/{endpoint}"
        try:
            response = requests.get(
                url,
                params={**params, "apikey": self._api_key},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"GNews request to {endpoint} failed: {e}")
            raise FetchError(str(e)) from e

        if response.status_code == QUOTA_STATUS_CODE:
            logger.warning("GNews daily quota reached")
            raise QuotaExceeded(QUOTA_MESSAGE)

        try:
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            logger.error(f"GNews request to {endpoint} failed: {e}")
            raise FetchError(str(e)) from e
        except ValueError as e:
            logger.error(f"Invalid JSON from GNews {endpoint}: {e}")
            raise FetchError(f"Invalid response from news API: {e}") from e

        articles = [article_to_record(a) for a in data.get("articles") or []]
        logger.info(f"Found {len(articles)} articles")
        return articles
