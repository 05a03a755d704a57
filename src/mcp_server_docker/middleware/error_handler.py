"""Error handling middleware for the MCP Docker server.

Engine failures are reported to the client unchanged. FastMCP's tool manager
wraps an exception escaping a tool in ``ToolError("Error calling tool ...")``
before middleware sees it; when the wrapped cause is one of ours, that prefix
is dropped so the client receives the engine's message as written.
"""

from typing import Any

from fastmcp.exceptions import ToolError
from fastmcp.server.middleware import CallNext, Middleware, MiddlewareContext

from mcp_server_docker.middleware.utils import get_operation_name
from mcp_server_docker.utils.errors import MCPDockerError
from mcp_server_docker.utils.logger import get_logger

logger = get_logger(__name__)


class ErrorHandlerMiddleware(Middleware):
    """Log failed tool calls and surface them as ``ToolError``."""

    async def on_call_tool(
        self,
        context: MiddlewareContext[Any],
        call_next: CallNext[Any, Any],
    ) -> Any:
        """Run the tool call, converting any failure into a ``ToolError``.

        Raises:
            ToolError: With the engine's own message for project errors,
                otherwise with the message of the original failure
        """
        try:
            return await call_next(context)
        except ToolError as e:
            cause = e.__cause__
            if isinstance(cause, MCPDockerError):
                logger.error(
                    f"Tool {get_operation_name(context)} failed: {type(cause).__name__}: {cause}"
                )
                raise ToolError(str(cause)) from cause
            logger.error(f"Tool {get_operation_name(context)} failed: {e}")
            raise
        except Exception as e:
            operation_name = get_operation_name(context)
            logger.error(f"Tool {operation_name} failed: {type(e).__name__}: {e}")
            raise ToolError(str(e)) from e
