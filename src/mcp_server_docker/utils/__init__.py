"""Utility modules for the MCP Docker server."""

from mcp_server_docker.utils.errors import (
    ContainerNotFound,
    DockerConflictError,
    DockerConnectionError,
    DockerHealthCheckError,
    DockerOperationError,
    ImageNotFound,
    MCPDockerError,
)
from mcp_server_docker.utils.logger import setup_logger

__all__ = [
    "ContainerNotFound",
    "DockerConflictError",
    "DockerConnectionError",
    "DockerHealthCheckError",
    "DockerOperationError",
    "ImageNotFound",
    "MCPDockerError",
    "setup_logger",
]
