"""Priority-based task scheduler running on a background thread."""

from __future__ import annotations

import dataclasses
import heapq
import itertools
import threading
import time
from dataclasses import dataclass
from typing import Callable

from .logger import get_logger

TaskFunction = Callable[[], None]


@dataclass
class Task:
    """A unit of work; a higher priority value runs first."""

    id: int
    name: str
    base_priority: int
    current_priority: int | None = None
    task_function: TaskFunction | None = None

    def __post_init__(self) -> None:
        if self.current_priority is None:
            self.current_priority = self.base_priority


class Scheduler:
    """Runs queued tasks one at a time, highest current priority first.

    Tasks of equal priority run in order of ascending id.
    """

    def __init__(self) -> None:
        self._queue: list[tuple[int, int, int, Task]] = []
        self._sequence = itertools.count()
        self._condition = threading.Condition()
        self._running = False
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        """Whether the scheduler loop is active."""
        return self._running

    @property
    def pending(self) -> int:
        """Number of tasks waiting to run."""
        with self._condition:
            return len(self._queue)

    def add_task(self, task: Task) -> None:
        """Queue a copy of ``task``."""
        queued = dataclasses.replace(task)
        with self._condition:
            heapq.heappush(
                self._queue,
                (-queued.current_priority, queued.id, next(self._sequence), queued),
            )
            get_logger().debug(
                f"Task [{queued.name}] added with priority {queued.current_priority}"
            )
            self._condition.notify()

    def start(self) -> None:
        """Start the scheduler loop on its own thread."""
        with self._condition:
            if self._running:
                raise RuntimeError("scheduler is already running")
            self._running = True
        get_logger().info("Scheduler starting.")
        self._thread = threading.Thread(target=self._scheduler_loop, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop the loop and wait for the running task, if any, to finish."""
        with self._condition:
            self._running = False
            self._condition.notify_all()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        self._thread = None
        get_logger().info("Scheduler stopped.")

    def apply_priority_inheritance(self, blocked_task: Task, blocking_task_priority: int) -> None:
        """Raise ``blocked_task`` to ``blocking_task_priority`` if that is higher."""
        if blocking_task_priority > blocked_task.current_priority:
            blocked_task.current_priority = blocking_task_priority
            get_logger().warn(
                f"Priority inheritance applied: Task [{blocked_task.name}] "
                f"elevated to priority {blocked_task.current_priority}"
            )

    def __enter__(self) -> "Scheduler":
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()

    def _scheduler_loop(self) -> None:
        while True:
            with self._condition:
                self._condition.wait_for(lambda: bool(self._queue) or not self._running)
                if not self._running:
                    break
                task = heapq.heappop(self._queue)[3]
            self._execute(task)

    @staticmethod
    def _execute(task: Task) -> None:
        logger = get_logger()
        start = time.perf_counter()
        if task.task_function is not None:
            logger.info(f"Executing Task [{task.name}].")
            try:
                task.task_function()
            except Exception as exc:  # a failing task must not stop the scheduler
                logger.error(f"Task [{task.name}] failed: {exc}")
        elapsed_us = int((time.perf_counter() - start) * 1_000_000)
        logger.info(f"Task [{task.name}] executed in {elapsed_us} microseconds.")