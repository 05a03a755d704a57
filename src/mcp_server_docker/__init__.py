"""MCP server exposing Docker container and image management as tools."""

from mcp_server_docker.version import __version__

__all__ = ["__version__"]
