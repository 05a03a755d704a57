"""FastMCP middleware for the MCP Docker server."""

from mcp_server_docker.middleware.debug_logging import DebugLoggingMiddleware
from mcp_server_docker.middleware.error_handler import ErrorHandlerMiddleware
from mcp_server_docker.middleware.utils import get_operation_name

__all__ = [
    "DebugLoggingMiddleware",
    "ErrorHandlerMiddleware",
    "get_operation_name",
]
