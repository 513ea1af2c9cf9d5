"""Tool call dispatch.

Every call returns a ToolResult. Unknown tools, invalid arguments and
source failures all become error results; nothing is raised to the
transport.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from .handlers import Handler
from .messages import EN, Messages
from .models import ToolResult
from .schemas import OperationRegistry, OperationSpec
from .utils import NewsError, UnknownOperation, ValidationError
from .validation import validate

logger = logging.getLogger("NEWS_MCP")


class Dispatcher:
    """Map tool names to handlers, validating arguments on the way in.

    Args:
        registry: Tool schemas exposed by this server
        handlers: Tool name -> handler; must cover every tool in the registry
        messages: Catalogue for error text
    """

    def __init__(
        self,
        registry: OperationRegistry,
        handlers: Dict[str, Handler],
        messages: Messages = EN,
    ):
        missing = [spec.name for spec in registry.list_specs() if spec.name not in handlers]
        if missing:
            raise ValueError(f"No handler registered for: {', '.join(missing)}")
        self.registry = registry
        self.handlers = dict(handlers)
        self.messages = messages

    def list_operations(self) -> List[OperationSpec]:
        return self.registry.list_specs()

    def _lookup(self, name: str) -> OperationSpec:
        spec = self.registry.get_spec(name)
        if spec is None:
            raise UnknownOperation(name)
        return spec

    def _error(self, exc: Exception) -> ToolResult:
        return ToolResult.error(self.messages.error_prefix.format(message=exc))

    def call(self, name: str, raw_args: Optional[Mapping[str, Any]] = None) -> ToolResult:
        """Validate arguments, run the tool and wrap the outcome.

        Args:
            name: Tool name from the tools/call request
            raw_args: Unvalidated arguments from the client

        Returns:
            ToolResult with is_error set on any failure
        """
        try:
            spec = self._lookup(name)
        except UnknownOperation as e:
            logger.warning(f"Unknown tool requested: {e.name}")
            return ToolResult.error(self.messages.unknown_tool.format(name=e.name))

        try:
            args = validate(spec, raw_args, self.messages)
        except ValidationError as e:
            logger.warning(f"[{name}] Invalid arguments ({e.kind}): {e}")
            return self._error(e)

        try:
            text = self.handlers[name](args)
        except NewsError as e:
            logger.error(f"[{name}] Tool execution error: {e}")
            return self._error(e)
        except Exception as e:
            logger.exception(f"[{name}] Unexpected error")
            return self._error(e)

        return ToolResult.success(text)
