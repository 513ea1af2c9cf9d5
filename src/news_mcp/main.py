"""Main entry point for MCP News."""

import asyncio
import logging
import signal
import sys
from typing import List, Optional

from .config import MODE_GNEWS, Settings, load_settings, require_api_key
from .dispatcher import Dispatcher
from .handlers import GNewsHandlers, RssHandlers
from .messages import get_messages
from .schemas import build_registry
from .server import SERVER_NAMES, create_server, run_stdio
from .sources import GNewsSource, RssNewsSource
from .utils import ConfigurationError, fix_windows_encoding, setup_logging

logger = setup_logging()


def signal_handler(sig: int, frame) -> None:
    """Handle interrupt signals.

    Args:
        sig: Signal number
        frame: Current stack frame
    """
    logger.info("Received interrupt signal, shutting down...")
    sys.exit(0)


def build_dispatcher(settings: Settings) -> Dispatcher:
    """Construct sources, handlers and the dispatcher for one server mode.

    In gnews mode the API key is checked before anything else is built, so
    a missing credential leaves no tool registered.

    Raises:
        ConfigurationError: If the GNews API key is missing
    """
    messages = get_messages(settings.locale)

    if settings.mode == MODE_GNEWS:
        api_key = require_api_key(settings)
        source = GNewsSource(api_key, base_url=settings.api_base_url, timeout=settings.timeout)
        handlers = GNewsHandlers(source, messages).as_table()
    else:
        source = RssNewsSource(settings.feed_urls, timeout=settings.timeout)
        handlers = RssHandlers(source, messages).as_table()

    return Dispatcher(build_registry(settings.mode), handlers, messages)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the news-mcp command.

    Usage:
        news-mcp [rss|gnews]
    """
    argv = sys.argv if argv is None else argv
    mode = argv[1] if len(argv) >= 2 else None

    signal.signal(signal.SIGINT, signal_handler)
    fix_windows_encoding()

    try:
        settings = load_settings(mode)
        dispatcher = build_dispatcher(settings)
    except ConfigurationError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    logging.getLogger().setLevel(settings.log_level)
    server = create_server(dispatcher, SERVER_NAMES[settings.mode])
    logger.info(
        f"Starting {server.name} with tools: "
        f"{', '.join(spec.name for spec in dispatcher.list_operations())}"
    )

    try:
        asyncio.run(run_stdio(server))
    except KeyboardInterrupt:
        logger.info("Program interrupted by user")
    except Exception as e:
        logger.error(f"Fatal error running server: {e}")
        sys.exit(1)


def main_rss() -> None:
    """Entry point for the yahoo-news-mcp command."""
    main([sys.argv[0], "rss"])


def main_gnews() -> None:
    """Entry point for the gnews-mcp command."""
    main([sys.argv[0], "gnews"])


if __name__ == "__main__":
    main()
