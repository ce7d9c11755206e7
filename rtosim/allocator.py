"""Simulated NUMA-aware memory allocation."""

from __future__ import annotations

from .logger import get_logger


def allocate(size: int, numa_node: int = 0) -> bytearray:
    """Allocate a zeroed buffer of ``size`` bytes on a simulated NUMA node."""
    if size < 0:
        raise ValueError("allocation size must not be negative")
    get_logger().info(f"Allocating {size} bytes on NUMA node {numa_node}")
    return bytearray(size)


def deallocate(buffer: bytearray, size: int) -> None:
    """Release a buffer obtained from :func:`allocate`."""
    get_logger().info(f"Deallocating {size} bytes.")
    buffer.clear()