"""Custom exceptions for the MCP Docker server."""


class MCPDockerError(Exception):
    """Base exception for all MCP Docker errors."""


class DockerConnectionError(MCPDockerError):
    """Raised when unable to connect to Docker daemon."""


class DockerHealthCheckError(MCPDockerError):
    """Raised when Docker health check fails."""


class DockerOperationError(MCPDockerError):
    """Raised when a Docker operation fails."""


class DockerConflictError(DockerOperationError):
    """Raised when an operation conflicts with the current resource state.

    Examples are removing a running container without ``force`` or removing
    an image that is still used by a container.
    """


class ContainerNotFound(MCPDockerError):  # noqa: N818
    """Raised when a container is not found."""


class ImageNotFound(MCPDockerError):  # noqa: N818
    """Raised when an image is not found."""
