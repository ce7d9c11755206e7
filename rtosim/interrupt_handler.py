"""Simulated interrupt registration and dispatch."""

from __future__ import annotations

import threading
from typing import Callable

from .logger import get_logger

InterruptFunction = Callable[[], None]


class InterruptHandler:
    """Maps interrupt numbers to callbacks and dispatches them."""

    def __init__(self) -> None:
        self._interrupts: dict[int, InterruptFunction] = {}
        self._lock = threading.Lock()

    def register_interrupt(self, interrupt_number: int, callback: InterruptFunction) -> None:
        """Register ``callback`` for ``interrupt_number``, replacing any previous one."""
        with self._lock:
            self._interrupts[interrupt_number] = callback
            get_logger().debug(f"Registered interrupt {interrupt_number}")

    def unregister_interrupt(self, interrupt_number: int) -> None:
        """Remove the callback for ``interrupt_number`` if there is one."""
        with self._lock:
            self._interrupts.pop(interrupt_number, None)
            get_logger().debug(f"Unregistered interrupt {interrupt_number}")

    def trigger_interrupt(self, interrupt_number: int) -> None:
        """Run the callback for ``interrupt_number``; log an error if none is registered."""
        with self._lock:
            callback = self._interrupts.get(interrupt_number)
        if callback is None:
            get_logger().error(f"No interrupt registered for: {interrupt_number}")
            return
        get_logger().info(f"Triggering interrupt: {interrupt_number}")
        callback()