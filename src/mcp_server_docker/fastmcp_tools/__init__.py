"""FastMCP tool implementations.

Organization:
- containers.py: container listing, logs, lifecycle, exec and stats tools
- images.py: image listing and removal tools
- filters.py: allow/deny filtering and annotation-aware registration
"""

from mcp_server_docker.fastmcp_tools.registration import register_all_tools

__all__ = ["register_all_tools"]
