"""FastMCP server for Docker container and image management.

This module wires configuration, the Docker engine, the operations facade,
middleware and tool registration into one FastMCP application.
"""

import asyncio

from fastmcp import FastMCP

from mcp_server_docker.config import Config
from mcp_server_docker.engine import ContainerEngine, DockerEngine
from mcp_server_docker.fastmcp_tools import register_all_tools
from mcp_server_docker.middleware import DebugLoggingMiddleware, ErrorHandlerMiddleware
from mcp_server_docker.services import DockerOperations
from mcp_server_docker.utils.fastmcp_helpers import create_fastmcp_app
from mcp_server_docker.utils.logger import get_logger

logger = get_logger(__name__)


class DockerMCPServer:
    """MCP server exposing Docker operations as tools."""

    def __init__(self, config: Config, engine: ContainerEngine | None = None) -> None:
        """Initialize the server.

        Args:
            config: Server configuration
            engine: Container engine to use (defaults to a DockerEngine built from config)
        """
        self.config = config
        self.engine = engine if engine is not None else DockerEngine(config.docker)
        self.operations = DockerOperations(self.engine)

        logger.info("Initializing MCP Docker server")

        self.app = create_fastmcp_app(name=config.server.server_name)

        # First added = outermost: debug logging sees errors after conversion
        self.app.add_middleware(DebugLoggingMiddleware(debug_enabled=config.server.debug_mode))
        self.app.add_middleware(ErrorHandlerMiddleware())

        self.registered_tools = register_all_tools(self.app, self.operations, config.tools)
        total_tools = sum(len(tools) for tools in self.registered_tools.values())
        logger.info(f"Registered {total_tools} tools")

    async def start(self) -> None:
        """Start the server, checking that the Docker daemon is reachable."""
        logger.info("Starting MCP Docker server")

        # An unreachable daemon is not fatal: tools report the error per call
        try:
            health_status = await asyncio.to_thread(self.engine.health_check)
            status = health_status.get("status", "unknown")
            if status == "healthy":
                logger.info("Docker daemon is healthy")
            else:
                logger.warning(f"Docker daemon health check failed: {status}")
        except Exception as e:
            logger.warning(f"Docker daemon health check failed: {e}")

    async def stop(self) -> None:
        """Stop the server and release the engine connection."""
        logger.info("Stopping MCP Docker server")
        await asyncio.to_thread(self.engine.close)

    def get_app(self) -> FastMCP:
        """Get the underlying FastMCP application."""
        return self.app
