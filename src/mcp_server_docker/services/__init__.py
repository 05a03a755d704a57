"""Service layer sitting between the MCP tools and the container engine."""

from mcp_server_docker.services.docker_operations import DockerOperations

__all__ = ["DockerOperations"]
