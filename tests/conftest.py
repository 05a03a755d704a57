"""Pytest configuration and shared fixtures."""

from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
from docker import DockerClient

from mcp_server_docker.config import Config, DockerConfig, ServerConfig, ToolsConfig
from mcp_server_docker.engine import DockerEngine
from mcp_server_docker.services import DockerOperations

FULL_CONTAINER_ID = "abc123def456" + "7" * 52


@pytest.fixture
def docker_config() -> DockerConfig:
    """Create test Docker configuration (TCP, so no socket file is needed)."""
    return DockerConfig(base_url="tcp://127.0.0.1:2375", timeout=30)


@pytest.fixture
def tools_config() -> ToolsConfig:
    """Create tools configuration exposing every tool."""
    return ToolsConfig(allowed=[], denied=[])


@pytest.fixture
def server_config() -> ServerConfig:
    """Create test server configuration."""
    return ServerConfig(server_name="mcp-server-docker-test", log_level="DEBUG")


@pytest.fixture
def config(
    docker_config: DockerConfig,
    tools_config: ToolsConfig,
    server_config: ServerConfig,
) -> Config:
    """Create complete test configuration."""
    test_config = Config.__new__(Config)
    test_config.docker = docker_config
    test_config.tools = tools_config
    test_config.server = server_config
    return test_config


@pytest.fixture
def container_record() -> dict[str, Any]:
    """Raw container record as returned by GET /containers/json."""
    return {
        "Id": FULL_CONTAINER_ID,
        "Names": ["/my-container"],
        "Image": "nginx:latest",
        "State": "running",
        "Status": "Up 2 hours",
        "Ports": [{"PublicPort": 8080, "PrivatePort": 80, "Type": "tcp"}],
        "Created": 1700000000,
    }


@pytest.fixture
def image_record() -> dict[str, Any]:
    """Raw image record as returned by GET /images/json."""
    return {
        "Id": "sha256:abc123def456789",
        "RepoTags": ["nginx:latest"],
        "Size": 142000000,
        "Created": 1700000000,
    }


@pytest.fixture
def stats_payload() -> dict[str, Any]:
    """Non-streaming stats snapshot: 2 cores, 50 MB of 1 GB, one interface."""
    return {
        "cpu_stats": {
            "cpu_usage": {"total_usage": 200, "percpu_usage": [100, 100]},
            "system_cpu_usage": 10000,
        },
        "precpu_stats": {
            "cpu_usage": {"total_usage": 100},
            "system_cpu_usage": 9000,
        },
        "memory_stats": {"usage": 52428800, "limit": 1073741824},
        "networks": {"eth0": {"rx_bytes": 1024, "tx_bytes": 2048}},
    }


@pytest.fixture
def mock_engine(
    container_record: dict[str, Any],
    image_record: dict[str, Any],
    stats_payload: dict[str, Any],
) -> MagicMock:
    """Container engine double returning fixed raw records."""
    engine = MagicMock(spec=DockerEngine)
    engine.list_containers.return_value = [container_record]
    engine.container_logs.return_value = b"log line 1\nlog line 2"
    engine.start_container.return_value = None
    engine.stop_container.return_value = None
    engine.restart_container.return_value = None
    engine.remove_container.return_value = None
    engine.exec_command.return_value = b"command output"
    engine.container_stats.return_value = stats_payload
    engine.list_images.return_value = [image_record]
    engine.remove_image.return_value = None
    engine.health_check.return_value = {"status": "healthy"}
    return engine


@pytest.fixture
def operations(mock_engine: MagicMock) -> DockerOperations:
    """Operations facade over the engine double."""
    return DockerOperations(mock_engine)


@pytest.fixture
def mock_docker_client() -> MagicMock:
    """Create mock Docker SDK client."""
    mock_client = MagicMock(spec=DockerClient)
    mock_client.api = MagicMock()
    mock_client.ping.return_value = True
    mock_client.version.return_value = {
        "Version": "24.0.0",
        "ApiVersion": "1.43",
        "Os": "linux",
        "Arch": "amd64",
    }
    return mock_client


@pytest.fixture
def docker_engine(
    docker_config: DockerConfig,
    mock_docker_client: MagicMock,
    monkeypatch: pytest.MonkeyPatch,
) -> Generator[DockerEngine, None, None]:
    """Create a DockerEngine whose SDK client is mocked."""
    monkeypatch.setattr(
        "mcp_server_docker.engine.docker_engine.docker.DockerClient",
        lambda *args, **kwargs: mock_docker_client,
    )

    engine = DockerEngine(docker_config)
    yield engine
    engine.close()


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: Integration tests requiring Docker")
