"""Unit tests for the FastMCP container and image tools."""

from unittest.mock import MagicMock, Mock

import pytest
from fastmcp import FastMCP

from mcp_server_docker.config import ToolsConfig
from mcp_server_docker.fastmcp_tools.containers import (
    create_container_logs_tool,
    create_container_stats_tool,
    create_container_tools,
    create_exec_command_tool,
    create_list_containers_tool,
    create_remove_container_tool,
    create_restart_container_tool,
    create_start_container_tool,
    create_stop_container_tool,
    render_container_list,
    render_stats,
)
from mcp_server_docker.fastmcp_tools.filters import (
    register_tools_with_filtering,
    should_register_tool,
)
from mcp_server_docker.fastmcp_tools.images import (
    create_image_tools,
    create_list_images_tool,
    create_remove_image_tool,
    render_image_list,
)
from mcp_server_docker.fastmcp_tools.registration import register_all_tools
from mcp_server_docker.models import ContainerSummary, ImageSummary, ResourceStats
from mcp_server_docker.services import DockerOperations
from mcp_server_docker.utils.errors import ContainerNotFound
from mcp_server_docker.utils.safety import OperationSafety

CONTAINER_TOOLS = [
    "list_containers",
    "container_logs",
    "start_container",
    "stop_container",
    "restart_container",
    "remove_container",
    "exec_command",
    "container_stats",
]
IMAGE_TOOLS = ["list_images", "remove_image"]


@pytest.fixture
def fastmcp_app() -> FastMCP:
    """Create a FastMCP application instance."""
    return FastMCP(name="test-mcp-server-docker", version="1.0.0")


class TestRenderers:
    """Tests for text rendering of facade results."""

    def test_container_list(self) -> None:
        """Test one aligned line per container."""
        container = ContainerSummary(
            id="abc123def456",
            name="web",
            image="nginx:latest",
            state="running",
            status="Up 2 hours",
            ports="8080->80/tcp",
            created="2023-11-14T22:13:20.000Z",
        )

        line = render_container_list([container])

        assert line == (
            f"abc123def456  {'web':<30}  {'nginx:latest':<30}  {'running':<10}  Up 2 hours"
        )

    def test_empty_container_list(self) -> None:
        """Test the placeholder for no containers."""
        assert render_container_list([]) == "No containers found."

    def test_image_list(self) -> None:
        """Test tags are comma-joined and padded."""
        image = ImageSummary(
            id="abc123def456",
            tags=["nginx:latest", "nginx:1.25"],
            size="135.4 MB",
            created="2023-11-14T22:13:20.000Z",
        )

        line = render_image_list([image])

        assert line.startswith("abc123def456  nginx:latest, nginx:1.25")
        assert line.endswith("135.4 MB    2023-11-14T22:13:20.000Z")

    def test_empty_image_list(self) -> None:
        """Test the placeholder for no images."""
        assert render_image_list([]) == "No images found."

    def test_stats(self) -> None:
        """Test the three-line stats layout."""
        stats = ResourceStats(
            cpu_percent="20.00%",
            memory_usage="50.0 MB",
            memory_limit="1.0 GB",
            memory_percent="4.88%",
            network_rx="1.0 KB",
            network_tx="2.0 KB",
        )

        assert render_stats(stats).splitlines() == [
            "CPU:     20.00%",
            "Memory:  50.0 MB / 1.0 GB (4.88%)",
            "Network: ↓ 1.0 KB  ↑ 2.0 KB",
        ]


class TestContainerTools:
    """Tests for container tool functions."""

    @pytest.mark.asyncio
    async def test_list_containers(
        self, operations: DockerOperations, mock_engine: MagicMock
    ) -> None:
        """Test the listing tool renders the facade result."""
        *_, list_containers = create_list_containers_tool(operations)

        result = await list_containers(all=True)

        mock_engine.list_containers.assert_called_once_with(True)
        assert result.startswith("abc123def456  my-container")

    @pytest.mark.asyncio
    async def test_list_containers_empty(
        self, operations: DockerOperations, mock_engine: MagicMock
    ) -> None:
        """Test the empty placeholder."""
        mock_engine.list_containers.return_value = []
        *_, list_containers = create_list_containers_tool(operations)

        assert await list_containers(all=False) == "No containers found."

    @pytest.mark.asyncio
    async def test_container_logs(
        self, operations: DockerOperations, mock_engine: MagicMock
    ) -> None:
        """Test logs are returned as text."""
        *_, container_logs = create_container_logs_tool(operations)

        result = await container_logs(id="web", tail=10)

        mock_engine.container_logs.assert_called_once_with("web", 10)
        assert result == "log line 1\nlog line 2"

    @pytest.mark.asyncio
    async def test_container_logs_empty(
        self, operations: DockerOperations, mock_engine: MagicMock
    ) -> None:
        """Test empty logs render a placeholder."""
        mock_engine.container_logs.return_value = b""
        *_, container_logs = create_container_logs_tool(operations)

        assert await container_logs(id="web", tail=100) == "(no logs)"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "factory,verb",
        [
            (create_start_container_tool, "started"),
            (create_stop_container_tool, "stopped"),
            (create_restart_container_tool, "restarted"),
        ],
    )
    async def test_lifecycle_tools(
        self, operations: DockerOperations, factory, verb: str
    ) -> None:
        """Test lifecycle tools return the confirmation text."""
        *_, tool = factory(operations)
        assert await tool(id="web") == f"Container web {verb}"

    @pytest.mark.asyncio
    async def test_remove_container(
        self, operations: DockerOperations, mock_engine: MagicMock
    ) -> None:
        """Test force is forwarded."""
        *_, remove_container = create_remove_container_tool(operations)

        assert await remove_container(id="web", force=True) == "Container web removed"
        mock_engine.remove_container.assert_called_once_with("web", True)

    @pytest.mark.asyncio
    async def test_exec_command(self, operations: DockerOperations) -> None:
        """Test exec output is returned."""
        *_, exec_command = create_exec_command_tool(operations)
        assert await exec_command(id="web", command=["echo", "hi"]) == "command output"

    @pytest.mark.asyncio
    async def test_exec_command_no_output(
        self, operations: DockerOperations, mock_engine: MagicMock
    ) -> None:
        """Test silent commands render a placeholder."""
        mock_engine.exec_command.return_value = b""
        *_, exec_command = create_exec_command_tool(operations)

        assert await exec_command(id="web", command=["true"]) == "(no output)"

    @pytest.mark.asyncio
    async def test_container_stats(self, operations: DockerOperations) -> None:
        """Test stats render as three lines."""
        *_, container_stats = create_container_stats_tool(operations)

        result = await container_stats(id="web")

        assert result.splitlines()[0] == "CPU:     20.00%"

    @pytest.mark.asyncio
    async def test_engine_errors_propagate(
        self, operations: DockerOperations, mock_engine: MagicMock
    ) -> None:
        """Test tool functions leave error conversion to the middleware."""
        mock_engine.stop_container.side_effect = ContainerNotFound("Container not found: ghost")
        *_, stop_container = create_stop_container_tool(operations)

        with pytest.raises(ContainerNotFound):
            await stop_container(id="ghost")

    def test_tool_specs(self, operations: DockerOperations) -> None:
        """Test names and safety classification of every container tool."""
        specs = {spec[0]: spec for spec in create_container_tools(operations)}

        assert list(specs) == CONTAINER_TOOLS
        assert specs["list_containers"][2] == OperationSafety.SAFE
        assert specs["container_stats"][2] == OperationSafety.SAFE
        assert specs["remove_container"][2] == OperationSafety.DESTRUCTIVE
        assert specs["exec_command"][2] == OperationSafety.MODERATE
        assert specs["exec_command"][4] is True  # open world


class TestImageTools:
    """Tests for image tool functions."""

    @pytest.mark.asyncio
    async def test_list_images(self, operations: DockerOperations) -> None:
        """Test the image listing tool."""
        *_, list_images = create_list_images_tool(operations)

        result = await list_images()

        assert result.startswith("abc123def456  nginx:latest")
        assert "135.4 MB" in result

    @pytest.mark.asyncio
    async def test_list_images_empty(
        self, operations: DockerOperations, mock_engine: MagicMock
    ) -> None:
        """Test the empty placeholder."""
        mock_engine.list_images.return_value = []
        *_, list_images = create_list_images_tool(operations)

        assert await list_images() == "No images found."

    @pytest.mark.asyncio
    async def test_remove_image(
        self, operations: DockerOperations, mock_engine: MagicMock
    ) -> None:
        """Test remove_image forwards force."""
        *_, remove_image = create_remove_image_tool(operations)

        assert await remove_image(id="nginx:latest", force=False) == "Image nginx:latest removed"
        mock_engine.remove_image.assert_called_once_with("nginx:latest", False)

    def test_tool_specs(self, operations: DockerOperations) -> None:
        """Test image tool names and safety levels."""
        specs = create_image_tools(operations)

        assert [spec[0] for spec in specs] == IMAGE_TOOLS
        assert specs[0][2] == OperationSafety.SAFE
        assert specs[1][2] == OperationSafety.DESTRUCTIVE


class TestToolFiltering:
    """Tests for allow/deny filtering."""

    @pytest.mark.parametrize(
        "allowed,denied,expected",
        [
            ([], [], True),
            (["list_containers"], [], True),
            (["list_images"], [], False),
            ([], ["list_containers"], False),
            (["list_containers"], ["list_containers"], False),
        ],
    )
    def test_should_register_tool(
        self, allowed: list[str], denied: list[str], expected: bool
    ) -> None:
        """Test the deny list takes precedence over the allow list."""
        config = ToolsConfig(allowed=allowed, denied=denied)
        assert should_register_tool("list_containers", config) is expected

    def test_register_with_annotations(self, operations: DockerOperations) -> None:
        """Test tools are registered with annotations derived from safety level."""
        app = Mock()
        decorator = Mock()
        app.tool.return_value = decorator

        names = register_tools_with_filtering(
            app, [create_remove_image_tool(operations)], tools_config=None
        )

        assert names == ["remove_image"]
        kwargs = app.tool.call_args.kwargs
        assert kwargs["name"] == "remove_image"
        assert kwargs["annotations"].destructiveHint is True
        assert kwargs["annotations"].readOnlyHint is False
        decorator.assert_called_once()

    def test_filtered_tools_not_registered(self, operations: DockerOperations) -> None:
        """Test denied tools never reach the app."""
        app = Mock()

        names = register_tools_with_filtering(
            app,
            create_image_tools(operations),
            ToolsConfig(allowed=[], denied=["remove_image"]),
        )

        assert names == ["list_images"]
        assert app.tool.call_count == 1


class TestRegisterAllTools:
    """Tests for register_all_tools."""

    def test_registers_every_tool(
        self, fastmcp_app: FastMCP, operations: DockerOperations
    ) -> None:
        """Test both categories are registered on a real FastMCP app."""
        registered = register_all_tools(fastmcp_app, operations)

        assert registered == {"container": CONTAINER_TOOLS, "image": IMAGE_TOOLS}

    def test_respects_tools_config(
        self, fastmcp_app: FastMCP, operations: DockerOperations
    ) -> None:
        """Test an allow list restricts registration."""
        config = ToolsConfig(allowed=["list_containers", "list_images"], denied=[])

        registered = register_all_tools(fastmcp_app, operations, config)

        assert registered == {"container": ["list_containers"], "image": ["list_images"]}
