"""Interface between the operations facade and a container engine."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ContainerEngine(Protocol):
    """Blocking container-engine operations, returning raw Engine API records.

    ``DockerEngine`` implements this on top of the Docker SDK. Tests substitute
    a double returning fixed records, so nothing above this boundary needs a
    running daemon.
    """

    def list_containers(self, all: bool = False) -> list[dict[str, Any]]:
        """Return raw container records (``Id``, ``Names``, ``Ports``, ``Created``...)."""
        ...

    def container_logs(self, container_id: str, tail: int) -> bytes:
        """Return the last ``tail`` lines of combined stdout and stderr."""
        ...

    def start_container(self, container_id: str) -> None: ...

    def stop_container(self, container_id: str) -> None: ...

    def restart_container(self, container_id: str) -> None: ...

    def remove_container(self, container_id: str, force: bool = False) -> None: ...

    def exec_command(self, container_id: str, command: list[str]) -> bytes:
        """Run ``command`` in the container and return its combined stdout and stderr.

        Returns only after the command has exited and its output stream is exhausted.
        """
        ...

    def container_stats(self, container_id: str) -> dict[str, Any]:
        """Return one non-streaming stats snapshot (current and previous CPU samples)."""
        ...

    def list_images(self) -> list[dict[str, Any]]:
        """Return raw image records (``Id``, ``RepoTags``, ``Size``, ``Created``...)."""
        ...

    def remove_image(self, image_id: str, force: bool = False) -> None: ...

    def health_check(self) -> dict[str, Any]: ...

    def close(self) -> None: ...
