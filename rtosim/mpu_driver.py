"""Simulated memory protection unit driver."""

from __future__ import annotations

from .logger import get_logger


class MPUDriver:
    """Configures and enforces simulated memory protection regions."""

    def __init__(self) -> None:
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> bool:
        """Bring the MPU up; always succeeds."""
        self._initialized = True
        get_logger().info("MPU Initialized successfully.")
        return self._initialized

    def configure_region(self, base_address: int, size: int, permissions: int) -> bool:
        """Configure a region; returns False if the MPU is not initialized."""
        if not self._initialized:
            get_logger().error("MPU is not initialized.")
            return False
        get_logger().info(
            f"Configured MPU region: Base=0x{base_address:x}, Size={size}, "
            f"Permissions=0x{permissions:x}"
        )
        return True

    def enforce_memory_protection(self) -> None:
        """Enforce isolation; logs an error if the MPU is not initialized."""
        if not self._initialized:
            get_logger().error("MPU is not initialized.")
            return
        get_logger().info("Enforcing hardware-level memory isolation.")