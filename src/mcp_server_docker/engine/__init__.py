"""Container engine boundary: the interface and its Docker implementation."""

from mcp_server_docker.engine.base import ContainerEngine
from mcp_server_docker.engine.docker_engine import DockerEngine

__all__ = ["ContainerEngine", "DockerEngine"]
