"""Docker error handling utilities.

This module provides a decorator that maps Docker SDK exceptions onto the
project's exception hierarchy, keeping the engine's explanation in the
message so callers see why the daemon refused a request.
"""

import functools
import inspect
from collections.abc import Callable
from http import HTTPStatus
from typing import Any, TypeVar

from docker.errors import APIError, DockerException
from docker.errors import NotFound as DockerNotFound
from requests.exceptions import ConnectionError as RequestsConnectionError
from requests.exceptions import Timeout as RequestsTimeout

from mcp_server_docker.utils.errors import (
    ContainerNotFound,
    DockerConflictError,
    DockerConnectionError,
    DockerOperationError,
    ImageNotFound,
    MCPDockerError,
)
from mcp_server_docker.utils.logger import get_logger
from mcp_server_docker.utils.messages import ERROR_CONTAINER_NOT_FOUND, ERROR_IMAGE_NOT_FOUND

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

_NOT_FOUND = {
    "container": (ContainerNotFound, ERROR_CONTAINER_NOT_FOUND),
    "image": (ImageNotFound, ERROR_IMAGE_NOT_FOUND),
}


def _explanation(error: DockerException) -> str:
    """Extract the daemon's message from a Docker SDK exception."""
    explanation = getattr(error, "explanation", None)
    return str(explanation) if explanation else str(error)


def _describe_target(
    func: Callable[..., Any], resource: str, param: str, args: Any, kwargs: Any
) -> tuple[str, str]:
    """Return (resource_id, "<resource> <id>") for messages; list calls have no id."""
    try:
        arguments = inspect.signature(func).bind_partial(*args, **kwargs).arguments
    except TypeError:
        arguments = {}
    if param not in arguments:
        return "unknown", f"{resource}s"
    resource_id = str(arguments[param])
    return resource_id, f"{resource} {resource_id}"


def handle_docker_errors(
    resource: str,
    operation: str,
    resource_id_param: str = "container_id",
) -> Callable[[F], F]:
    """Decorator that handles Docker SDK errors consistently.

    Args:
        resource: Type of resource ("container" or "image")
        operation: Operation being performed (for error messages)
        resource_id_param: Parameter name containing the resource ID

    Returns:
        Decorated function with error handling

    Example:
        @handle_docker_errors(resource="container", operation="start")
        def start_container(self, container_id: str) -> None:
            self.client.api.start(container_id)

    Raises:
        ContainerNotFound: If the container does not exist
        ImageNotFound: If the image does not exist
        DockerConflictError: If the daemon answers 409 Conflict
        DockerOperationError: For all other Docker API errors
        DockerOperationError: Also when the daemon stops answering mid-request
        DockerConnectionError: If the daemon cannot be reached
    """
    if resource not in _NOT_FOUND:
        raise ValueError(f"Unknown resource type: {resource}. Must be one of {list(_NOT_FOUND)}")

    not_found_exception, not_found_message = _NOT_FOUND[resource]

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except MCPDockerError:
                raise
            except DockerNotFound as e:
                resource_id, _ = _describe_target(func, resource, resource_id_param, args, kwargs)
                error_msg = f"{not_found_message.format(resource_id)} ({_explanation(e)})"
                logger.error(error_msg)
                raise not_found_exception(error_msg) from e
            except APIError as e:
                _, target = _describe_target(func, resource, resource_id_param, args, kwargs)
                error_msg = f"Failed to {operation} {target}: {_explanation(e)}"
                logger.error(error_msg)
                if e.status_code == HTTPStatus.CONFLICT:
                    raise DockerConflictError(error_msg) from e
                raise DockerOperationError(error_msg) from e
            except RequestsConnectionError as e:
                logger.error(f"Docker daemon unreachable during {operation}: {e}")
                raise DockerConnectionError(f"Cannot connect to Docker daemon: {e}") from e
            except (RequestsTimeout, TimeoutError) as e:
                _, target = _describe_target(func, resource, resource_id_param, args, kwargs)
                error_msg = f"Timed out trying to {operation} {target}: {e}"
                logger.error(error_msg)
                raise DockerOperationError(error_msg) from e
            except DockerException as e:
                _, target = _describe_target(func, resource, resource_id_param, args, kwargs)
                error_msg = f"Failed to {operation} {target}: {e}"
                logger.error(error_msg)
                raise DockerOperationError(error_msg) from e

        return wrapper  # type: ignore[return-value]

    return decorator


__all__ = ["handle_docker_errors"]
