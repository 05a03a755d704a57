"""FastMCP image tools."""

from pydantic import Field

from mcp_server_docker.fastmcp_tools.filters import ToolSpec
from mcp_server_docker.models import ImageSummary
from mcp_server_docker.services.docker_operations import DockerOperations
from mcp_server_docker.utils.messages import NO_IMAGES_FOUND
from mcp_server_docker.utils.safety import OperationSafety


def render_image_list(images: list[ImageSummary]) -> str:
    """Render images as aligned text lines."""
    if not images:
        return NO_IMAGES_FOUND
    return "\n".join(
        f"{img.id}  {', '.join(img.tags):<40}  {img.size:<10}  {img.created}" for img in images
    )


def create_list_images_tool(operations: DockerOperations) -> ToolSpec:
    """Create the list_images tool."""

    async def list_images() -> str:
        return render_image_list(await operations.list_images())

    return (
        "list_images",
        "List Docker images on the host.",
        OperationSafety.SAFE,
        True,  # idempotent
        False,  # not open_world
        list_images,
    )


def create_remove_image_tool(operations: DockerOperations) -> ToolSpec:
    """Create the remove_image tool."""

    async def remove_image(
        id: str = Field(description="Image ID or tag"),  # noqa: A002
        force: bool = Field(default=False, description="Force remove"),
    ) -> str:
        return await operations.remove_image(id, force=force)

    return (
        "remove_image",
        "Remove a Docker image. Use force=true to force removal.",
        OperationSafety.DESTRUCTIVE,
        False,  # not idempotent (image is gone after first removal)
        False,
        remove_image,
    )


def create_image_tools(operations: DockerOperations) -> list[ToolSpec]:
    """Create every image tool."""
    return [
        create_list_images_tool(operations),
        create_remove_image_tool(operations),
    ]
