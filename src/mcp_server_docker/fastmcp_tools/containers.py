"""FastMCP container tools.

Each ``create_*_tool`` factory closes over the operations facade and returns
a tool spec tuple; the tool functions render facade results as plain text.
"""

from pydantic import Field

from mcp_server_docker.fastmcp_tools.filters import ToolSpec
from mcp_server_docker.models import ContainerSummary, ResourceStats
from mcp_server_docker.services.docker_operations import DEFAULT_LOG_TAIL, DockerOperations
from mcp_server_docker.utils.messages import NO_CONTAINERS_FOUND, NO_LOGS, NO_OUTPUT
from mcp_server_docker.utils.safety import OperationSafety

# Common field descriptions
DESC_CONTAINER_ID = "Container ID or name"


def render_container_list(containers: list[ContainerSummary]) -> str:
    """Render containers as aligned text lines."""
    if not containers:
        return NO_CONTAINERS_FOUND
    return "\n".join(
        f"{c.id}  {c.name:<30}  {c.image:<30}  {c.state:<10}  {c.status}" for c in containers
    )


def render_stats(stats: ResourceStats) -> str:
    """Render a resource snapshot as three lines (CPU, memory, network)."""
    return "\n".join(
        [
            f"CPU:     {stats.cpu_percent}",
            f"Memory:  {stats.memory_usage} / {stats.memory_limit} ({stats.memory_percent})",
            f"Network: ↓ {stats.network_rx}  ↑ {stats.network_tx}",
        ]
    )


def create_list_containers_tool(operations: DockerOperations) -> ToolSpec:
    """Create the list_containers tool."""

    async def list_containers(
        all: bool = Field(default=False, description="Include stopped containers"),  # noqa: A002
    ) -> str:
        """List Docker containers."""
        return render_container_list(await operations.list_containers(include_stopped=all))

    return (
        "list_containers",
        "List Docker containers. Set all=true to include stopped containers.",
        OperationSafety.SAFE,
        True,  # idempotent
        False,  # not open_world
        list_containers,
    )


def create_container_logs_tool(operations: DockerOperations) -> ToolSpec:
    """Create the container_logs tool."""

    async def container_logs(
        id: str = Field(description=DESC_CONTAINER_ID),  # noqa: A002
        tail: int = Field(
            default=DEFAULT_LOG_TAIL, ge=0, description="Number of lines from the end"
        ),
    ) -> str:
        """Get logs from a Docker container."""
        return await operations.container_logs(id, tail) or NO_LOGS

    return (
        "container_logs",
        "Get logs from a Docker container.",
        OperationSafety.SAFE,
        True,  # idempotent
        False,  # not open_world
        container_logs,
    )


def create_start_container_tool(operations: DockerOperations) -> ToolSpec:
    """Create the start_container tool."""

    async def start_container(
        id: str = Field(description=DESC_CONTAINER_ID),  # noqa: A002
    ) -> str:
        return await operations.start_container(id)

    return (
        "start_container",
        "Start a stopped Docker container.",
        OperationSafety.MODERATE,
        False,  # the engine rejects starting a running container
        False,  # not open_world
        start_container,
    )


def create_stop_container_tool(operations: DockerOperations) -> ToolSpec:
    """Create the stop_container tool."""

    async def stop_container(
        id: str = Field(description=DESC_CONTAINER_ID),  # noqa: A002
    ) -> str:
        return await operations.stop_container(id)

    return (
        "stop_container",
        "Stop a running Docker container.",
        OperationSafety.MODERATE,
        False,
        False,
        stop_container,
    )


def create_restart_container_tool(operations: DockerOperations) -> ToolSpec:
    """Create the restart_container tool."""

    async def restart_container(
        id: str = Field(description=DESC_CONTAINER_ID),  # noqa: A002
    ) -> str:
        return await operations.restart_container(id)

    return (
        "restart_container",
        "Restart a Docker container.",
        OperationSafety.MODERATE,
        False,  # restarts the process every time
        False,
        restart_container,
    )


def create_remove_container_tool(operations: DockerOperations) -> ToolSpec:
    """Create the remove_container tool."""

    async def remove_container(
        id: str = Field(description=DESC_CONTAINER_ID),  # noqa: A002
        force: bool = Field(default=False, description="Force remove running container"),
    ) -> str:
        return await operations.remove_container(id, force=force)

    return (
        "remove_container",
        "Remove a Docker container. Use force=true to remove running containers.",
        OperationSafety.DESTRUCTIVE,
        False,  # container is gone after first removal
        False,
        remove_container,
    )


def create_exec_command_tool(operations: DockerOperations) -> ToolSpec:
    """Create the exec_command tool."""

    async def exec_command(
        id: str = Field(description=DESC_CONTAINER_ID),  # noqa: A002
        command: list[str] = Field(
            min_length=1,
            description="Command and arguments, e.g. ['ls', '-la']",
        ),
    ) -> str:
        """Execute a command inside a running Docker container."""
        return await operations.exec_command(id, command) or NO_OUTPUT

    return (
        "exec_command",
        "Execute a command inside a running Docker container.",
        OperationSafety.MODERATE,
        False,  # not idempotent (same command may have different effects)
        True,  # open_world (commands may access external networks/APIs)
        exec_command,
    )


def create_container_stats_tool(operations: DockerOperations) -> ToolSpec:
    """Create the container_stats tool."""

    async def container_stats(
        id: str = Field(description=DESC_CONTAINER_ID),  # noqa: A002
    ) -> str:
        return render_stats(await operations.container_stats(id))

    return (
        "container_stats",
        "Get CPU, memory, and network stats for a running Docker container.",
        OperationSafety.SAFE,
        False,  # usage changes between calls
        False,
        container_stats,
    )


def create_container_tools(operations: DockerOperations) -> list[ToolSpec]:
    """Create every container tool, in listing order."""
    return [
        create_list_containers_tool(operations),
        create_container_logs_tool(operations),
        create_start_container_tool(operations),
        create_stop_container_tool(operations),
        create_restart_container_tool(operations),
        create_remove_container_tool(operations),
        create_exec_command_tool(operations),
        create_container_stats_tool(operations),
    ]
