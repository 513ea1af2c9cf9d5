"""News sources backing the MCP tools.

- rss: Yahoo! News category RSS feeds
- gnews: GNews REST API (keyword search, top headlines)
"""

from .gnews import GNewsSource
from .rss import RssNewsSource

__all__ = ["GNewsSource", "RssNewsSource"]
