"""Simulated periodic hardware timer."""

from __future__ import annotations

import threading
from typing import Callable

from .logger import get_logger

TimerCallback = Callable[[], None]


class TimerDriver:
    """Calls a callback periodically on a background thread."""

    def __init__(self) -> None:
        self._running = False
        self._interval_ms = 0
        self._callback: TimerCallback | None = None
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    def initialize(self) -> bool:
        """Prepare the timer; always succeeds."""
        get_logger().info("TimerDriver: Initialized.")
        return True

    def start(self, interval_ms: int, callback: TimerCallback) -> None:
        """Call ``callback`` every ``interval_ms`` milliseconds; ignored if already running."""
        if self._running:
            return
        if interval_ms < 0:
            raise ValueError("timer interval must not be negative")
        self._running = True
        self._interval_ms = interval_ms
        self._callback = callback
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._timer_loop, daemon=True)
        self._thread.start()
        get_logger().info(f"TimerDriver: Timer started with interval {interval_ms} ms.")

    def stop(self) -> None:
        """Stop the timer and wait for its thread to finish."""
        if not self._running:
            return
        self._running = False
        self._stop_event.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join()
        self._thread = None
        get_logger().info("TimerDriver: Timer stopped.")

    @property
    def running(self) -> bool:
        """Whether the timer is running."""
        return self._running

    def _timer_loop(self) -> None:
        interval = self._interval_ms / 1000.0
        while not self._stop_event.wait(interval):
            if self._callback is not None:
                self._callback()