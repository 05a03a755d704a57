"""Display formatting for raw Docker values (byte counts, ports, timestamps, output)."""

import re
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mcp_server_docker.models import PortMapping

BYTE_UNITS = ("B", "KB", "MB", "GB")
BYTE_BASE = 1024

# Stream multiplexing headers and other non-printable bytes in Docker output
_CONTROL_CHARS = re.compile(r"[\x00-\x08]")


def format_bytes(num_bytes: float) -> str:
    """Render a byte count with the largest unit that keeps the value >= 1.

    Units scale by 1024 and stop at GB: larger values keep the GB unit with a
    bigger multiplier.

    Examples:
        >>> format_bytes(0)
        '0 B'
        >>> format_bytes(1024)
        '1.0 KB'
        >>> format_bytes(52428800)
        '50.0 MB'
    """
    if num_bytes == 0:
        return "0 B"

    # Repeated division instead of log(): exact at powers of 1024
    value = float(num_bytes)
    index = 0
    while value >= BYTE_BASE and index < len(BYTE_UNITS) - 1:
        value /= BYTE_BASE
        index += 1

    if index == 0:
        return f"{int(num_bytes)} B"
    return f"{value:.1f} {BYTE_UNITS[index]}"


def format_ports(ports: Iterable["PortMapping"]) -> str:
    """Render port mappings as ``8080->80/tcp, 443/tcp``, in input order."""
    rendered = []
    for port in ports:
        if port.public_port:
            rendered.append(f"{port.public_port}->{port.private_port}/{port.type}")
        else:
            rendered.append(f"{port.private_port}/{port.type}")
    return ", ".join(rendered)


def format_timestamp(epoch_seconds: float) -> str:
    """Convert Unix epoch seconds to an ISO-8601 UTC string with millisecond precision."""
    created = datetime.fromtimestamp(epoch_seconds, tz=timezone.utc)
    return created.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def strip_control_chars(text: str) -> str:
    """Remove characters 0x00-0x08, keeping newlines, tabs and everything else."""
    return _CONTROL_CHARS.sub("", text)


def decode_output(data: bytes | str | None) -> str:
    """Decode container output as UTF-8 and strip control characters."""
    if data is None:
        return ""
    text = data.decode("utf-8", errors="replace") if isinstance(data, bytes) else str(data)
    return strip_control_chars(text)


def short_id(identifier: str) -> str:
    """Return the 12-character display form of a Docker ID, without algorithm prefix."""
    _, _, digest = identifier.rpartition(":")
    return digest[:12]
