"""Result types returned by the Docker operations facade.

These are view models: built fresh from the engine's raw API records for each
request and discarded once the response is rendered.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from mcp_server_docker.utils.formatting import (
    format_bytes,
    format_ports,
    format_timestamp,
    short_id,
)

UNTAGGED_IMAGE = "<none>"


class PortMapping(BaseModel):
    """A container port, optionally published on the host."""

    model_config = ConfigDict(frozen=True)

    private_port: int = Field(description="Port inside the container")
    public_port: int | None = Field(default=None, description="Host port, if published")
    type: str = Field(default="tcp", description="Protocol (tcp, udp, sctp)")

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "PortMapping":
        """Build a mapping from one entry of a container record's ``Ports`` list."""
        return cls(
            private_port=data["PrivatePort"],
            public_port=data.get("PublicPort"),
            type=data.get("Type", "tcp"),
        )


class ContainerSummary(BaseModel):
    """One row of the container listing."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="12-character container ID")
    name: str = Field(description="Container name without the leading slash")
    image: str = Field(description="Image reference the container was created from")
    state: str = Field(description="Lifecycle state, e.g. running or exited")
    status: str = Field(description="Human-readable status, e.g. 'Up 2 hours'")
    ports: str = Field(description="Formatted port mappings")
    created: str = Field(description="Creation time, ISO-8601 UTC")

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "ContainerSummary":
        """Build a summary from a raw ``GET /containers/json`` record."""
        names = data.get("Names") or []
        ports = [PortMapping.from_api(port) for port in data.get("Ports") or []]
        return cls(
            id=short_id(data["Id"]),
            name=names[0].removeprefix("/") if names else "",
            image=data.get("Image", ""),
            state=data.get("State", ""),
            status=data.get("Status", ""),
            ports=format_ports(ports),
            created=format_timestamp(data.get("Created", 0)),
        )


class ImageSummary(BaseModel):
    """One row of the image listing."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="12-character image ID without the sha256: prefix")
    tags: list[str] = Field(description="Repository tags, ['<none>'] when untagged")
    size: str = Field(description="Formatted image size")
    created: str = Field(description="Creation time, ISO-8601 UTC")

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "ImageSummary":
        """Build a summary from a raw ``GET /images/json`` record."""
        return cls(
            id=short_id(data["Id"]),
            tags=data.get("RepoTags") or [UNTAGGED_IMAGE],
            size=format_bytes(data.get("Size", 0)),
            created=format_timestamp(data.get("Created", 0)),
        )


class ResourceStats(BaseModel):
    """Point-in-time resource usage of a container, formatted for display."""

    model_config = ConfigDict(frozen=True)

    cpu_percent: str
    memory_usage: str
    memory_limit: str
    memory_percent: str
    network_rx: str
    network_tx: str
