"""MCP Server for GNews API tools (search-news, get-top-headlines).

Requires GNEWS_API_KEY in the environment or in a .env file.
"""

import os
import sys

# Add src to path for standalone execution
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from news_mcp.main import main_gnews

# Start the server
if __name__ == "__main__":
    main_gnews()
