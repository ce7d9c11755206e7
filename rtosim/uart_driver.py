"""Simulated UART driver."""

from __future__ import annotations

from .logger import get_logger

SIMULATED_DATA = "UARTDriver: Received simulated data."


class UARTDriver:
    """Writes and reads simulated serial data."""

    def initialize(self) -> bool:
        """Bring the UART up; always succeeds."""
        get_logger().info("UARTDriver: Initialized.")
        return True

    def write(self, data: str) -> None:
        """Simulate transmitting ``data``."""
        get_logger().info(f"UARTDriver: Sending data: {data}")

    def read(self) -> str:
        """Return simulated received data."""
        get_logger().info(SIMULATED_DATA)
        return SIMULATED_DATA