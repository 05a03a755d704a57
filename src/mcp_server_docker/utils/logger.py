"""Logging configuration using loguru."""

import sys
from pathlib import Path
from typing import Any

from loguru import logger

from mcp_server_docker.config import ServerConfig

LOG_ROTATION = "10 MB"
LOG_RETENTION = "7 days"


def setup_logger(config: ServerConfig, log_file: Path | None = None) -> None:
    """Replace loguru's default sink with the configured stderr and file sinks.

    Nothing is ever written to stdout: the stdio transport carries the MCP
    stream there.

    Args:
        config: Server configuration (level, format, JSON mode, debug mode)
        log_file: Optional path of a rotating log file

    """
    logger.remove()

    # diagnose prints local variable values: debug mode only
    common: dict[str, Any] = {
        "level": config.log_level,
        "backtrace": True,
        "diagnose": config.debug_mode and not config.json_logging,
    }
    if config.json_logging:
        common["serialize"] = True
    else:
        common["format"] = config.log_format

    logger.add(sys.stderr, colorize=not config.json_logging, **common)
    if log_file:
        logger.add(
            log_file,
            rotation=LOG_ROTATION,
            retention=LOG_RETENTION,
            compression="zip",
            **common,
        )

    logger.info(
        f"Logger initialized (level={config.log_level}, "
        f"json={'on' if config.json_logging else 'off'})"
    )
    if log_file:
        logger.info(f"Logging to file: {log_file}")


def get_logger(name: str | None = None) -> Any:  # noqa: ARG001
    """Return the shared loguru logger; ``name`` is accepted for call-site symmetry."""
    return logger
