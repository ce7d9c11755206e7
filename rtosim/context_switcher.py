"""Simulated CPU context save and restore."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from .logger import get_logger

REGISTER_COUNT = 16
_RAND_MAX = 2**31 - 1


@dataclass
class CPUContext:
    """Register file R0-R15 and the current program status register."""

    registers: list[int] = field(default_factory=lambda: [0] * REGISTER_COUNT)
    cpsr: int = 0

    def __post_init__(self) -> None:
        if len(self.registers) != REGISTER_COUNT:
            raise ValueError(f"a CPU context holds exactly {REGISTER_COUNT} registers")


class ContextSwitcher:
    """Saves and restores simulated CPU contexts."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def _rand(self) -> int:
        return self._rng.randint(0, _RAND_MAX)

    def save_context(self) -> CPUContext:
        """Capture the simulated register state."""
        context = CPUContext([self._rand() for _ in range(REGISTER_COUNT)], self._rand())
        get_logger().info("Context saved.")
        return context

    def restore_context(self, context: CPUContext) -> None:
        """Restore ``context``, logging its register values."""
        parts = ["Restoring context:\n"]
        for index, value in enumerate(context.registers):
            parts.append(f"R{index}: {value} ")
            if index % 4 == 3:
                parts.append("\n")
        parts.append(f"CPSR: {context.cpsr}")
        get_logger().info("".join(parts))