"""Utilities for deriving container resource statistics from Docker stats."""

from typing import Any

from mcp_server_docker.models import ResourceStats
from mcp_server_docker.utils.formatting import format_bytes


def format_percent(value: float) -> str:
    """Render a percentage with exactly two decimals, e.g. ``4.88%``."""
    return f"{value:.2f}%"


def calculate_cpu_percent(stats: dict[str, Any]) -> float:
    """Calculate CPU utilization from the current and previous CPU samples.

    Docker returns both samples in one non-streaming stats response:
    ``cpu_stats`` (current) and ``precpu_stats`` (previous read).
    The result is scaled by the number of per-core counters reported, so a
    container saturating two cores reads 200%.

    Args:
        stats: Docker stats dictionary from the stats endpoint

    Returns:
        CPU usage percentage, 0 when the system delta is not positive

    """
    cpu_stats = stats.get("cpu_stats") or {}
    precpu_stats = stats.get("precpu_stats") or {}

    cpu_usage = cpu_stats.get("cpu_usage") or {}
    precpu_usage = precpu_stats.get("cpu_usage") or {}

    # Negative deltas (counter reset) are passed through unchanged
    cpu_delta = cpu_usage.get("total_usage", 0) - precpu_usage.get("total_usage", 0)
    system_delta = cpu_stats.get("system_cpu_usage", 0) - precpu_stats.get("system_cpu_usage", 0)
    core_count = len(cpu_usage.get("percpu_usage") or []) or 1

    if system_delta <= 0:
        return 0.0
    return (cpu_delta / system_delta) * core_count * 100


def calculate_memory_usage(stats: dict[str, Any]) -> dict[str, float]:
    """Calculate memory usage metrics from Docker stats.

    Args:
        stats: Docker stats dictionary from the stats endpoint

    Returns:
        Dict with usage_bytes, limit_bytes and percent

    """
    memory_stats = stats.get("memory_stats") or {}
    usage = memory_stats.get("usage", 0)
    limit = memory_stats.get("limit", 0)

    return {
        "usage_bytes": usage,
        "limit_bytes": limit,
        "percent": (usage / limit * 100) if limit > 0 else 0,
    }


def calculate_network_totals(stats: dict[str, Any]) -> tuple[int, int]:
    """Sum received and transmitted bytes over every network interface.

    Returns:
        Tuple of (rx_bytes, tx_bytes)

    """
    rx_bytes = 0
    tx_bytes = 0
    for interface in (stats.get("networks") or {}).values():
        rx_bytes += interface.get("rx_bytes", 0)
        tx_bytes += interface.get("tx_bytes", 0)
    return rx_bytes, tx_bytes


def calculate_resource_stats(stats: dict[str, Any]) -> ResourceStats:
    """Derive display-ready resource statistics from one Docker stats snapshot."""
    memory = calculate_memory_usage(stats)
    rx_bytes, tx_bytes = calculate_network_totals(stats)

    return ResourceStats(
        cpu_percent=format_percent(calculate_cpu_percent(stats)),
        memory_usage=format_bytes(memory["usage_bytes"]),
        memory_limit=format_bytes(memory["limit_bytes"]),
        memory_percent=format_percent(memory["percent"]),
        network_rx=format_bytes(rx_bytes),
        network_tx=format_bytes(tx_bytes),
    )
