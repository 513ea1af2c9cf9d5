"""RSS news source: Yahoo! News category feeds."""

import logging
from typing import Dict, List, Optional

import feedparser
import requests
from bs4 import BeautifulSoup

from ..config import DEFAULT_FEED_URLS, DEFAULT_TIMEOUT
from ..models import ArticleRecord
from ..utils import FetchError

logger = logging.getLogger("NEWS_MCP")


def html_to_text(fragment: Optional[str]) -> str:
    """Strip markup from an RSS description, returning plain text."""
    if not fragment:
        return ""
    soup = BeautifulSoup(fragment, "html.parser")
    return soup.get_text(" ", strip=True)


def entry_to_record(entry) -> ArticleRecord:
    """Map a feedparser entry to an ArticleRecord."""
    return ArticleRecord(
        title=entry.get("title", ""),
        published_at=entry.get("published", ""),
        link=entry.get("link", ""),
        summary=html_to_text(entry.get("summary") or entry.get("description")),
    )


class RssNewsSource:
    """Fetch articles from one RSS feed per category.

    Args:
        feed_urls: Category -> feed URL map; defaults to the Yahoo! News feeds.
        timeout: Request timeout in seconds.
    """

    def __init__(self, feed_urls: Optional[Dict[str, str]] = None, timeout: float = DEFAULT_TIMEOUT):
        self.feed_urls = dict(feed_urls or DEFAULT_FEED_URLS)
        self.timeout = timeout

    def fetch(self, category: str) -> List[ArticleRecord]:
        """Download and parse the feed for a category.

        Raises:
            FetchError: On network failure, HTTP error status or unparseable feed
        """
        url = self.feed_urls.get(category)
        if url is None:
            raise FetchError(f"No feed configured for category: {category}")

        logger.info(f"Fetching RSS feed for category: {category}")
        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Failed to fetch URL {url}: {e}")
            raise FetchError(str(e)) from e

        feed = feedparser.parse(response.content)
        if feed.bozo and not feed.entries:
            reason = feed.get("bozo_exception") or "invalid feed"
            logger.error(f"Failed to parse feed {url}: {reason}")
            raise FetchError(f"Failed to parse feed: {reason}")

        articles = [entry_to_record(entry) for entry in feed.entries]
        logger.info(f"Fetched {len(articles)} articles for category: {category}")
        return articles
