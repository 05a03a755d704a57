"""Docker operations facade.

One coroutine per supported action. Each runs the blocking engine call in a
worker thread and reshapes the raw Engine API response into the view models
from :mod:`mcp_server_docker.models` or a confirmation string. Engine errors
propagate unchanged; nothing here retries or caches.
"""

import asyncio

from mcp_server_docker.engine.base import ContainerEngine
from mcp_server_docker.models import ContainerSummary, ImageSummary, ResourceStats
from mcp_server_docker.utils.formatting import decode_output
from mcp_server_docker.utils.logger import get_logger
from mcp_server_docker.utils.messages import CONTAINER_ACTION_DONE, IMAGE_REMOVED
from mcp_server_docker.utils.stats_formatter import calculate_resource_stats

logger = get_logger(__name__)

DEFAULT_LOG_TAIL = 100


class DockerOperations:
    """Container and image operations over an injectable :class:`ContainerEngine`."""

    def __init__(self, engine: ContainerEngine) -> None:
        self.engine = engine

    async def list_containers(self, include_stopped: bool = False) -> list[ContainerSummary]:
        """List containers, running only unless ``include_stopped`` is set."""
        logger.info(f"Listing containers (all={include_stopped})")
        records = await asyncio.to_thread(self.engine.list_containers, include_stopped)
        containers = [ContainerSummary.from_api(record) for record in records]
        logger.info(f"Found {len(containers)} containers")
        return containers

    async def container_logs(self, container_id: str, tail: int = DEFAULT_LOG_TAIL) -> str:
        """Return the last ``tail`` lines of stdout and stderr, control characters removed."""
        logger.info(f"Getting logs for container: {container_id} (tail={tail})")
        raw_logs = await asyncio.to_thread(self.engine.container_logs, container_id, tail)
        return decode_output(raw_logs)

    async def start_container(self, container_id: str) -> str:
        logger.info(f"Starting container: {container_id}")
        await asyncio.to_thread(self.engine.start_container, container_id)
        logger.info(f"Successfully started container: {container_id}")
        return CONTAINER_ACTION_DONE.format(container_id, "started")

    async def stop_container(self, container_id: str) -> str:
        logger.info(f"Stopping container: {container_id}")
        await asyncio.to_thread(self.engine.stop_container, container_id)
        logger.info(f"Successfully stopped container: {container_id}")
        return CONTAINER_ACTION_DONE.format(container_id, "stopped")

    async def restart_container(self, container_id: str) -> str:
        logger.info(f"Restarting container: {container_id}")
        await asyncio.to_thread(self.engine.restart_container, container_id)
        logger.info(f"Successfully restarted container: {container_id}")
        return CONTAINER_ACTION_DONE.format(container_id, "restarted")

    async def remove_container(self, container_id: str, force: bool = False) -> str:
        """Remove a container; a running one needs ``force``."""
        logger.info(f"Removing container: {container_id} (force={force})")
        await asyncio.to_thread(self.engine.remove_container, container_id, force)
        logger.info(f"Successfully removed container: {container_id}")
        return CONTAINER_ACTION_DONE.format(container_id, "removed")

    async def exec_command(self, container_id: str, command: list[str]) -> str:
        """Run ``command`` in a running container and return its combined output.

        Completes only after the command has exited.
        """
        logger.info(f"Executing command in container: {container_id}, command: {command}")
        output = await asyncio.to_thread(self.engine.exec_command, container_id, command)
        logger.info(f"Successfully executed command in container: {container_id}")
        return decode_output(output)

    async def container_stats(self, container_id: str) -> ResourceStats:
        """Take one stats snapshot and derive CPU, memory and network figures."""
        logger.info(f"Getting stats for container: {container_id}")
        raw_stats = await asyncio.to_thread(self.engine.container_stats, container_id)
        return calculate_resource_stats(raw_stats)

    async def list_images(self) -> list[ImageSummary]:
        logger.info("Listing images")
        records = await asyncio.to_thread(self.engine.list_images)
        images = [ImageSummary.from_api(record) for record in records]
        logger.info(f"Found {len(images)} images")
        return images

    async def remove_image(self, image_id: str, force: bool = False) -> str:
        """Remove an image; one used by a container needs ``force``."""
        logger.info(f"Removing image: {image_id} (force={force})")
        await asyncio.to_thread(self.engine.remove_image, image_id, force)
        logger.info(f"Successfully removed image: {image_id}")
        return IMAGE_REMOVED.format(image_id)
