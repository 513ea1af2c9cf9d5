"""Normalized article and tool result models."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class ArticleRecord(BaseModel):
    """A news item, independent of whether it came from RSS or the API."""

    model_config = ConfigDict(frozen=True)

    title: str
    published_at: str = ""
    link: str = ""
    summary: str = ""
    source: Optional[str] = None


class ToolResult(BaseModel):
    """Response envelope returned for every tool call."""

    model_config = ConfigDict(frozen=True)

    text: str
    is_error: bool = False

    @classmethod
    def success(cls, text: str) -> "ToolResult":
        return cls(text=text, is_error=False)

    @classmethod
    def error(cls, text: str) -> "ToolResult":
        return cls(text=text, is_error=True)

    def to_mcp(self) -> Dict[str, Any]:
        """Render in the MCP CallToolResult shape."""
        return {
            "content": [{"type": "text", "text": self.text}],
            "isError": self.is_error,
        }
