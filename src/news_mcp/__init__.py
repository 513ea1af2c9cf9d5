"""MCP News - news retrieval tools served over the Model Context Protocol.

Two servers share one implementation: an RSS server backed by Yahoo! News
category feeds and an API server backed by GNews.
"""

__version__ = "0.1.0"

from .main import main

__all__ = ["main", "__version__"]
