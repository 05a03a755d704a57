"""Helper functions for FastMCP integration."""

from fastmcp import FastMCP
from mcp.types import ToolAnnotations

from mcp_server_docker.utils.safety import OperationSafety
from mcp_server_docker.version import __version__


def create_fastmcp_app(name: str = "mcp-server-docker") -> FastMCP:
    """Create and configure a FastMCP application instance.

    Args:
        name: Application name

    Returns:
        Configured FastMCP instance
    """
    return FastMCP(
        name=name,
        version=__version__,
    )


def get_mcp_annotations(
    safety_level: OperationSafety,
    idempotent: bool,
    open_world: bool,
) -> ToolAnnotations:
    """Build MCP tool annotations from a tool's safety level.

    Example:
        >>> get_mcp_annotations(OperationSafety.SAFE, True, False).readOnlyHint
        True
    """
    return ToolAnnotations(
        readOnlyHint=safety_level == OperationSafety.SAFE,
        destructiveHint=safety_level == OperationSafety.DESTRUCTIVE,
        idempotentHint=idempotent,
        openWorldHint=open_world,
    )
