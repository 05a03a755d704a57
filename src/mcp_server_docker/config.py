"""Configuration management for the MCP Docker server.

Every section is a pydantic-settings model reading its own environment prefix
(``DOCKER_``, ``TOOLS_``, ``MCP_``) and an optional ``.env`` file.
"""

import json
import platform
import warnings
from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def _settings(prefix: str) -> SettingsConfigDict:
    return SettingsConfigDict(
        env_prefix=prefix,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def _parse_name_list(value: str | list[str] | None) -> list[str]:
    """Normalize a list of names given as a list, a JSON array or a comma-separated string.

    >>> _parse_name_list("list_containers, container_logs")
    ['list_containers', 'container_logs']
    >>> _parse_name_list('["remove_image"]')
    ['remove_image']
    """
    if not value:
        return []
    if isinstance(value, list):
        return [name.strip() for name in value if name and name.strip()]

    text = value.strip()
    if text.startswith("[") and text.endswith("]"):
        try:
            decoded = json.loads(text)
        except json.JSONDecodeError:
            decoded = None
        if isinstance(decoded, list):
            return [str(name) for name in decoded]

    return [name.strip() for name in text.split(",") if name.strip()]


def _get_default_docker_socket() -> str:
    """Return the local daemon endpoint for this platform (named pipe on Windows)."""
    if platform.system().lower() == "windows":
        return "npipe:////./pipe/docker_engine"
    return "unix:///var/run/docker.sock"


class DockerConfig(BaseSettings):
    """How to reach the Docker daemon."""

    model_config = _settings("DOCKER_")

    base_url: str = Field(
        default_factory=_get_default_docker_socket,
        description="Daemon endpoint: unix://, npipe://, tcp:// or https:// URL",
    )
    timeout: int = Field(
        default=60,
        gt=0,
        description="Seconds to wait for a daemon response",
    )
    tls_verify: bool = Field(default=False, description="Verify the daemon's TLS certificate")
    tls_ca_cert: Path | None = Field(default=None, description="CA bundle for the daemon")
    tls_client_cert: Path | None = Field(default=None, description="Client certificate (PEM)")
    tls_client_key: Path | None = Field(default=None, description="Client private key (PEM)")

    @field_validator("base_url")
    @classmethod
    def check_daemon_url(cls, url: str) -> str:
        """Refuse plain HTTP endpoints and warn about unencrypted remote TCP ones."""
        if url.startswith("http://"):
            raise ValueError(
                "Insecure HTTP Docker socket not allowed. Use a unix socket or https:// with TLS."
            )
        if url.startswith("tcp://") and not url.startswith("tcp://127.0.0.1"):
            warnings.warn(
                f"Docker socket exposed on network: {url}. "
                "Anyone reaching it gets root on the host; prefer TLS or a unix socket.",
                UserWarning,
                stacklevel=2,
            )
        return url

    @field_validator("tls_ca_cert", "tls_client_cert", "tls_client_key")
    @classmethod
    def check_cert_exists(cls, path: Path | None) -> Path | None:
        if path is not None and not path.exists():
            raise ValueError(f"Certificate file not found: {path}")
        return path

    @model_validator(mode="after")
    def check_tls_consistency(self) -> "DockerConfig":
        """Certificates without ``tls_verify`` are ignored when connecting."""
        has_certs = any((self.tls_ca_cert, self.tls_client_cert, self.tls_client_key))
        if has_certs and not self.tls_verify:
            warnings.warn(
                "TLS certificates configured but tls_verify=False; they will not be used. "
                "Set DOCKER_TLS_VERIFY=true.",
                UserWarning,
                stacklevel=2,
            )
        return self


class ToolsConfig(BaseSettings):
    """Which tools get exposed to MCP clients."""

    model_config = _settings("TOOLS_")

    # str | list[str] keeps pydantic-settings from JSON-decoding empty env values;
    # the validator below normalizes to list[str].
    allowed: str | list[str] = Field(
        default=[],
        description="Only register these tools; empty registers all (TOOLS_ALLOWED=a,b)",
    )
    denied: str | list[str] = Field(
        default=[],
        description="Never register these tools; wins over the allow list (TOOLS_DENIED=a,b)",
    )

    @field_validator("allowed", "denied", mode="before")
    @classmethod
    def parse_tool_list(cls, value: str | list[str] | None) -> list[str]:
        return _parse_name_list(value)


class ServerConfig(BaseSettings):
    """MCP server identity and logging."""

    model_config = _settings("MCP_")

    server_name: str = Field(
        default="mcp-server-docker",
        description="Name announced to MCP clients",
    )
    log_level: str = Field(default="INFO", description=f"One of {', '.join(LOG_LEVELS)}")
    log_format: str = Field(default=DEFAULT_LOG_FORMAT, description="loguru format string")
    json_logging: bool = Field(default=False, description="Serialize log records as JSON")
    debug_mode: bool = Field(
        default=False,
        description="Log MCP requests/responses and variable values in tracebacks",
    )

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, level: str) -> str:
        normalized = level.upper()
        if normalized not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {level}. Expected one of {', '.join(LOG_LEVELS)}")
        return normalized


class Config:
    """All configuration sections, loaded together."""

    def __init__(self) -> None:
        self.docker = DockerConfig()
        self.tools = ToolsConfig()
        self.server = ServerConfig()

    def __repr__(self) -> str:
        return f"Config(docker={self.docker!r}, tools={self.tools!r}, server={self.server!r})"
