"""MCP Server for Yahoo! News RSS tools (get-news, search-news)."""

import os
import sys

# Add src to path for standalone execution
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from news_mcp.main import main_rss

# Start the server
if __name__ == "__main__":
    main_rss()
