"""Docker implementation of the container engine interface."""

from pathlib import Path
from typing import Any

import docker
from docker import DockerClient
from docker.errors import DockerException
from docker.tls import TLSConfig
from loguru import logger

from mcp_server_docker.config import DockerConfig
from mcp_server_docker.utils.docker_error_handler import handle_docker_errors
from mcp_server_docker.utils.errors import DockerConnectionError, DockerHealthCheckError


def _tls_config(config: DockerConfig) -> TLSConfig | None:
    """Build the SDK TLS settings, or None when verification is off."""
    if not config.tls_verify:
        return None

    client_cert = None
    if config.tls_client_cert and config.tls_client_key:
        client_cert = (str(config.tls_client_cert), str(config.tls_client_key))
    ca_cert = str(config.tls_ca_cert) if config.tls_ca_cert else None
    return TLSConfig(client_cert=client_cert, ca_cert=ca_cert, verify=True)


class DockerEngine:
    """Container engine backed by the Docker SDK.

    The SDK client is created on first use and pinged once. Operations go
    through its low-level API client so results keep the Engine API record
    shapes the operations facade formats.
    """

    def __init__(self, config: DockerConfig) -> None:
        self.config = config
        self._client: DockerClient | None = None
        logger.debug(f"DockerEngine configured for {config.base_url}")

    @property
    def client(self) -> DockerClient:
        """Docker SDK client, connected lazily.

        Raises:
            DockerConnectionError: If the daemon is unreachable

        """
        if self._client is None:
            self._client = self._open_client()
        return self._client

    def _open_client(self) -> DockerClient:
        base_url = self.config.base_url
        logger.info(f"Opening Docker connection: {base_url}")

        if base_url.startswith("unix://"):
            socket_path = Path(base_url.removeprefix("unix://"))
            if not socket_path.exists():
                logger.error(f"No Docker socket at {socket_path}")
                raise DockerConnectionError(f"Docker socket not found: {socket_path}")

        try:
            client = docker.DockerClient(
                base_url=base_url,
                timeout=self.config.timeout,
                tls=_tls_config(self.config),
            )
            client.ping()  # type: ignore[no-untyped-call]
        except DockerException as e:
            logger.error(f"Docker daemon at {base_url} did not answer: {e}")
            raise DockerConnectionError(f"Cannot connect to Docker daemon: {e}") from e

        logger.success(f"Connected to Docker daemon at {base_url}")
        return client

    # Containers

    @handle_docker_errors(resource="container", operation="list")
    def list_containers(self, all: bool = False) -> list[dict[str, Any]]:
        return self.client.api.containers(all=all)  # type: ignore[no-any-return]

    @handle_docker_errors(resource="container", operation="get logs of")
    def container_logs(self, container_id: str, tail: int) -> bytes:
        return self.client.api.logs(  # type: ignore[no-any-return]
            container_id,
            stdout=True,
            stderr=True,
            tail=tail,
            stream=False,
            follow=False,
        )

    @handle_docker_errors(resource="container", operation="start")
    def start_container(self, container_id: str) -> None:
        self.client.api.start(container_id)

    @handle_docker_errors(resource="container", operation="stop")
    def stop_container(self, container_id: str) -> None:
        self.client.api.stop(container_id)

    @handle_docker_errors(resource="container", operation="restart")
    def restart_container(self, container_id: str) -> None:
        self.client.api.restart(container_id)

    @handle_docker_errors(resource="container", operation="remove")
    def remove_container(self, container_id: str, force: bool = False) -> None:
        self.client.api.remove_container(container_id, force=force)

    @handle_docker_errors(resource="container", operation="exec in")
    def exec_command(self, container_id: str, command: list[str]) -> bytes:
        exec_instance = self.client.api.exec_create(
            container_id,
            command,
            stdout=True,
            stderr=True,
            stdin=False,
            tty=False,
        )
        # Read to the end inside the decorator: failures mid-stream are translated too
        stream = self.client.api.exec_start(exec_instance["Id"], stream=True)
        return b"".join(chunk for chunk in stream if chunk)

    @handle_docker_errors(resource="container", operation="get stats of")
    def container_stats(self, container_id: str) -> dict[str, Any]:
        return self.client.api.stats(container_id, stream=False)  # type: ignore[no-any-return]

    # Images

    @handle_docker_errors(resource="image", operation="list")
    def list_images(self) -> list[dict[str, Any]]:
        return self.client.api.images()  # type: ignore[no-any-return]

    @handle_docker_errors(resource="image", operation="remove", resource_id_param="image_id")
    def remove_image(self, image_id: str, force: bool = False) -> None:
        self.client.api.remove_image(image_id, force=force)

    # Lifecycle

    def health_check(self) -> dict[str, Any]:
        """Ping the daemon and report what it is running.

        Returns:
            ``{"status": "healthy", "daemon_info": {...}}``

        Raises:
            DockerConnectionError: If no connection can be opened
            DockerHealthCheckError: If the daemon answers with an error

        """
        try:
            self.client.ping()  # type: ignore[no-untyped-call]
            info = self.client.version()  # type: ignore[no-untyped-call]
        except DockerException as e:
            logger.error(f"Docker health check failed: {e}")
            raise DockerHealthCheckError(f"Health check failed: {e}") from e

        logger.debug(f"Docker daemon {info.get('Version')} is healthy")
        return {
            "status": "healthy",
            "daemon_info": {
                "server_version": info.get("Version"),
                "api_version": info.get("ApiVersion"),
                "os": info.get("Os"),
                "architecture": info.get("Arch"),
            },
        }

    def close(self) -> None:
        """Release the SDK client; the next call reconnects."""
        client, self._client = self._client, None
        if client is None:
            return
        try:
            client.close()  # type: ignore[no-untyped-call]
        except DockerException as e:
            logger.warning(f"Ignoring error while closing Docker client: {e}")
        else:
            logger.debug("Docker connection closed")

    def __enter__(self) -> "DockerEngine":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "connected" if self._client is not None else "disconnected"
        return f"DockerEngine(base_url={self.config.base_url}, status={state})"
