"""Shared utilities for MCP News."""

import io
import logging
import sys
from typing import Optional


class NewsError(Exception):
    """Base exception for news server errors."""

    pass


class ConfigurationError(NewsError):
    """Configuration-related errors. Fatal at startup."""

    pass


class UnknownOperation(NewsError):
    """Raised when a tool name is not in the registry."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name


class ValidationError(NewsError):
    """Tool arguments rejected by the operation schema.

    Attributes:
        kind: One of MISSING_REQUIRED, OUT_OF_RANGE, INVALID_ENUM, INVALID_TYPE.
        key: Name of the first offending parameter in declaration order.
    """

    MISSING_REQUIRED = "missingRequired"
    OUT_OF_RANGE = "outOfRange"
    INVALID_ENUM = "invalidEnum"
    INVALID_TYPE = "invalidType"

    def __init__(self, kind: str, key: str, message: str):
        super().__init__(message)
        self.kind = kind
        self.key = key


class FetchError(NewsError):
    """Network or parse failure while reading a news source."""

    pass


class QuotaExceeded(FetchError):
    """The news API refused the request because the daily quota is used up."""

    pass


def setup_logging(
    name: str = "NEWS_MCP",
    level: int = logging.INFO,
    fmt: Optional[str] = None,
) -> logging.Logger:
    """Configure and return a logger instance.

    Logs go to stderr; stdout is reserved for the stdio transport.

    Args:
        name: Logger name
        level: Logging level
        fmt: Optional format string

    Returns:
        Configured logger instance
    """
    if fmt is None:
        fmt = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(level=level, format=fmt, stream=sys.stderr)
    return logging.getLogger(name)


def fix_windows_encoding() -> None:
    """Fix UTF-8 encoding issues on Windows.

    Wraps stderr with UTF-8 encoding on Windows systems so Japanese
    headlines in log lines do not raise encoding errors. stdout is left
    alone because the stdio transport owns it.
    """
    if sys.platform == "win32":
        sys.stderr = io.TextIOWrapper(
            sys.stderr.buffer, encoding="utf-8", errors="replace"
        )
