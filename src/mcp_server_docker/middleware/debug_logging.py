"""Debug logging middleware for MCP protocol operations.

Logs incoming MCP requests and outgoing responses at DEBUG level when the
server runs with MCP_DEBUG_MODE=true.
"""

import json
from typing import Any

from fastmcp.server.middleware import CallNext, Middleware, MiddlewareContext

from mcp_server_docker.middleware.utils import get_operation_name
from mcp_server_docker.utils.logger import get_logger

logger = get_logger(__name__)

MAX_LOGGED_CHARS = 5000


def _truncate_if_needed(data: Any, max_length: int = MAX_LOGGED_CHARS) -> str:
    """Convert data to string and truncate if too long."""
    if isinstance(data, (dict, list)):
        try:
            data_str = json.dumps(data, indent=2)
        except (TypeError, ValueError):
            data_str = str(data)
    else:
        data_str = str(data)

    if len(data_str) > max_length:
        return data_str[:max_length] + f"\n... (truncated, {len(data_str)} total chars)"
    return data_str


class DebugLoggingMiddleware(Middleware):
    """Request/response logging for every MCP message."""

    def __init__(self, debug_enabled: bool = False) -> None:
        self._debug_enabled = debug_enabled
        if debug_enabled:
            logger.info("DebugLoggingMiddleware initialized (debug logging ENABLED)")

    async def on_message(
        self,
        context: MiddlewareContext[Any],
        call_next: CallNext[Any, Any],
    ) -> Any:
        """Log MCP request and response at DEBUG level."""
        if not self._debug_enabled:
            return await call_next(context)

        operation = get_operation_name(context)
        arguments = getattr(context.message, "arguments", None)

        logger.debug(f"MCP Request: {operation}")
        if arguments:
            logger.debug(f"Arguments:\n{_truncate_if_needed(arguments, max_length=2000)}")

        try:
            result = await call_next(context)
        except Exception as e:
            logger.debug(f"MCP Response: {operation} - ERROR: {type(e).__name__}: {e}")
            raise

        logger.debug(f"MCP Response: {operation} - SUCCESS")
        logger.debug(f"Result:\n{_truncate_if_needed(result)}")
        return result
