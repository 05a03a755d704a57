"""Tool registration for FastMCP.

This module handles registration of all tools with the application.
"""

from fastmcp import FastMCP

from mcp_server_docker.config import ToolsConfig
from mcp_server_docker.fastmcp_tools.containers import create_container_tools
from mcp_server_docker.fastmcp_tools.filters import register_tools_with_filtering
from mcp_server_docker.fastmcp_tools.images import create_image_tools
from mcp_server_docker.services.docker_operations import DockerOperations
from mcp_server_docker.utils.logger import get_logger

logger = get_logger(__name__)


def register_all_tools(
    app: FastMCP,
    operations: DockerOperations,
    tools_config: ToolsConfig | None = None,
) -> dict[str, list[str]]:
    """Register all tools with the application.

    Args:
        app: FastMCP application instance
        operations: Docker operations facade the tools delegate to
        tools_config: Allow/deny lists (None registers every tool)

    Returns:
        Dictionary mapping category to list of registered tool names

    Example:
        ```python
        config = Config()
        operations = DockerOperations(DockerEngine(config.docker))
        app = FastMCP("mcp-server-docker")

        registered = register_all_tools(app, operations, config.tools)
        ```
    """
    logger.info("Registering FastMCP tools...")

    registered: dict[str, list[str]] = {
        "container": register_tools_with_filtering(
            app, create_container_tools(operations), tools_config
        ),
        "image": register_tools_with_filtering(app, create_image_tools(operations), tools_config),
    }

    total_tools = sum(len(tools) for tools in registered.values())
    logger.info(
        f"Successfully registered {total_tools} FastMCP tools across {len(registered)} categories"
    )

    return registered
