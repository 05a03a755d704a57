"""MCP Docker server entry point."""

import asyncio
import os
from enum import Enum
from pathlib import Path
from typing import Any

import typer
from fastmcp import FastMCP

from mcp_server_docker.config import Config
from mcp_server_docker.server import DockerMCPServer
from mcp_server_docker.utils.logger import get_logger, setup_logger
from mcp_server_docker.version import __version__


class Transport(str, Enum):
    """How MCP clients reach the server."""

    stdio = "stdio"
    http = "http"


SHUTDOWN_COMPLETE_MSG = "MCP server shutdown complete"


def _run(
    logger: Any,
    docker_server: DockerMCPServer,
    fastmcp_app: FastMCP,
    **run_kwargs: Any,
) -> None:
    """Run startup, the transport loop, then shutdown even if the transport fails."""
    asyncio.run(docker_server.start())

    try:
        # FastMCP's run() is synchronous and manages its own event loop
        fastmcp_app.run(**run_kwargs)
    finally:
        asyncio.run(docker_server.stop())
        logger.info(SHUTDOWN_COMPLETE_MSG)


def run_stdio(logger: Any, docker_server: DockerMCPServer, fastmcp_app: FastMCP) -> None:
    """Serve MCP over stdin/stdout (the default for local agents)."""
    logger.info("Starting MCP server with stdio transport")
    _run(logger, docker_server, fastmcp_app, transport="stdio")


def run_http(
    host: str,
    port: int,
    logger: Any,
    docker_server: DockerMCPServer,
    fastmcp_app: FastMCP,
) -> None:
    """Serve MCP over streamable HTTP.

    The HTTP transport has no authentication. Bind it to localhost or put it
    behind a reverse proxy that handles TLS and access control.
    """
    logger.info(f"Starting MCP server with HTTP transport on http://{host}:{port}")

    if host not in ("127.0.0.1", "localhost", "::1"):
        logger.warning(
            "SECURITY WARNING: HTTP transport bound to a non-localhost address. "
            "Anyone who can reach it can control Docker on this host."
        )

    _run(logger, docker_server, fastmcp_app, transport="http", host=host, port=port)


app = typer.Typer(
    name="mcp-server-docker",
    help="MCP server for Docker container and image management",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Handle --version: print the installed version and stop."""
    if value:
        typer.echo(f"mcp-server-docker {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(  # noqa: B008
    transport: Transport = typer.Option(
        Transport.stdio,
        "--transport",
        help="Transport type",
    ),
    host: str = typer.Option(
        "127.0.0.1",
        "--host",
        help="Host to bind server (http transport)",
    ),
    port: int = typer.Option(
        8000,
        "--port",
        help="Port to bind server (http transport)",
    ),
    version: bool = typer.Option(  # noqa: ARG001
        False,
        "--version",
        "-v",
        help="Print the version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Serve Docker container and image tools over MCP."""
    config = Config()

    log_path = os.getenv("MCP_DOCKER_LOG_PATH")
    log_file = Path(log_path) if log_path else Path("mcp_server_docker.log")
    setup_logger(config.server, log_file)

    logger = get_logger(__name__)
    logger.info(f"MCP Docker Server v{__version__}")
    logger.debug(f"Loaded {config!r}")

    docker_server = DockerMCPServer(config)
    fastmcp_app = docker_server.get_app()

    try:
        if transport == Transport.stdio:
            run_stdio(logger, docker_server, fastmcp_app)
        else:
            run_http(host, port, logger, docker_server, fastmcp_app)
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception as e:
        logger.exception(f"Fatal server error: {e}")
        raise typer.Exit(code=1) from e


if __name__ == "__main__":
    app()
