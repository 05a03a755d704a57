"""Utility functions for middleware operations."""

from typing import Any

from fastmcp.server.middleware import MiddlewareContext


def get_operation_name(context: MiddlewareContext[Any]) -> str:
    """Get a human-readable operation name from context.

    Examples:
        - Tool call: "list_containers"
        - MCP protocol: "tools/list", "resources/list"
    """
    tool_name = getattr(context.message, "name", None)
    if tool_name:
        return str(tool_name)

    method = getattr(context, "method", None)
    if method:
        return str(method)

    return type(context.message).__name__
