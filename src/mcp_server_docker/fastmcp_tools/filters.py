"""Tool filtering and registration helpers.

Separated from registration.py to avoid circular imports.
"""

from collections.abc import Callable
from typing import Any

from fastmcp import FastMCP

from mcp_server_docker.config import ToolsConfig
from mcp_server_docker.utils.fastmcp_helpers import get_mcp_annotations
from mcp_server_docker.utils.logger import get_logger
from mcp_server_docker.utils.safety import OperationSafety

logger = get_logger(__name__)

# (name, description, safety_level, idempotent, open_world, function)
ToolSpec = tuple[str, str, OperationSafety, bool, bool, Callable[..., Any]]


def should_register_tool(tool_name: str, tools_config: ToolsConfig) -> bool:
    """Check if a tool should be registered based on allow/deny lists.

    Logic:
        1. If tool is in the deny list -> False (deny list takes precedence)
        2. If the allow list is not empty and tool is NOT in it -> False
        3. Otherwise -> True
    """
    if tools_config.denied and tool_name in tools_config.denied:
        logger.debug(f"Skipping tool {tool_name} (in deny list)")
        return False

    if tools_config.allowed and tool_name not in tools_config.allowed:
        logger.debug(f"Skipping tool {tool_name} (not in allow list)")
        return False

    return True


def register_tools_with_filtering(
    app: FastMCP,
    tools: list[ToolSpec],
    tools_config: ToolsConfig | None,
) -> list[str]:
    """Register tools with FastMCP, skipping those filtered out by config.

    Args:
        app: FastMCP application instance
        tools: Tool specs produced by the ``create_*_tool`` factories
        tools_config: Allow/deny configuration (None to register everything)

    Returns:
        List of registered tool names
    """
    registered_names = []

    for name, description, safety_level, idempotent, open_world, func in tools:
        if tools_config and not should_register_tool(name, tools_config):
            continue

        annotations = get_mcp_annotations(safety_level, idempotent, open_world)
        app.tool(name=name, description=description, annotations=annotations)(func)

        registered_names.append(name)
        logger.debug(f"Registered FastMCP tool: {name} (safety: {safety_level.value})")

    return registered_names
