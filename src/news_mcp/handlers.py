"""Tool handlers: fetch articles, then filter and format them.

Each handler takes validated arguments and returns the result text.
Source failures are re-raised with a message naming the operation that
failed, in the configured language.
"""

import logging
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator

from .formatting import process
from .messages import EN, Messages
from .sources import GNewsSource, RssNewsSource
from .utils import FetchError, QuotaExceeded

logger = logging.getLogger("NEWS_MCP")

Handler = Callable[[Dict[str, Any]], str]


@contextmanager
def fetch_failure(template: str, messages: Messages) -> Iterator[None]:
    """Translate source errors into operation-level messages."""
    try:
        yield
    except QuotaExceeded as e:
        raise QuotaExceeded(messages.quota_exceeded) from e
    except FetchError as e:
        raise FetchError(template.format(reason=e)) from e


class RssHandlers:
    """get-news and search-news over category RSS feeds."""

    def __init__(self, source: RssNewsSource, messages: Messages = EN):
        self.source = source
        self.messages = messages

    def get_news(self, args: Dict[str, Any]) -> str:
        category, limit = args["category"], int(args["limit"])
        logger.info(f"Getting {limit} articles from category {category}")
        with fetch_failure(self.messages.fetch_failed, self.messages):
            records = self.source.fetch(category)
        return process(
            records,
            limit,
            header=self.messages.category_header.format(category=category),
            messages=self.messages,
        )

    def search_news(self, args: Dict[str, Any]) -> str:
        keyword, category = args["keyword"], args["category"]
        limit = int(args["limit"])
        logger.info(f'Searching "{keyword}" in category {category}')
        with fetch_failure(self.messages.search_failed, self.messages):
            records = self.source.fetch(category)
        return process(
            records,
            limit,
            header=self.messages.keyword_header.format(keyword=keyword),
            keyword=keyword,
            messages=self.messages,
        )

    def as_table(self) -> Dict[str, Handler]:
        return {"get-news": self.get_news, "search-news": self.search_news}


class GNewsHandlers:
    """search-news and get-top-headlines over the GNews API."""

    def __init__(self, source: GNewsSource, messages: Messages = EN):
        self.source = source
        self.messages = messages

    def search_news(self, args: Dict[str, Any]) -> str:
        keyword, count = args["keyword"], int(args["max"])
        with fetch_failure(self.messages.search_failed, self.messages):
            records = self.source.search(keyword, args["lang"], args["country"], count)
        # The API already matched the keyword, possibly in the article body
        return process(
            records,
            count,
            header=self.messages.keyword_header.format(keyword=keyword),
            messages=self.messages,
        )

    def get_top_headlines(self, args: Dict[str, Any]) -> str:
        category, count = args["category"], int(args["max"])
        with fetch_failure(self.messages.headlines_failed, self.messages):
            records = self.source.top_headlines(category, args["lang"], args["country"], count)
        return process(
            records,
            count,
            header=self.messages.headlines_header.format(category=category),
            messages=self.messages,
        )

    def as_table(self) -> Dict[str, Handler]:
        return {"search-news": self.search_news, "get-top-headlines": self.get_top_headlines}
