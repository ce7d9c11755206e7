"""Simulated network interface driver."""

from __future__ import annotations

from .logger import get_logger

SIMULATED_PACKET = "NetworkDriver: Received simulated packet."


class NetworkDriver:
    """Sends and receives simulated network packets."""

    def initialize(self) -> bool:
        """Bring the interface up; always succeeds."""
        get_logger().info("NetworkDriver: Initialized network interface.")
        return True

    def send_packet(self, packet: str) -> None:
        """Simulate transmitting ``packet``."""
        get_logger().info(f"NetworkDriver: Sending packet: {packet}")

    def receive_packet(self) -> str:
        """Return a simulated incoming packet."""
        get_logger().info(SIMULATED_PACKET)
        return SIMULATED_PACKET