"""Hardware abstraction layer bundling the simulated device drivers."""

from __future__ import annotations

from .context_switcher import ContextSwitcher
from .interrupt_handler import InterruptHandler
from .logger import get_logger
from .mpu_driver import MPUDriver
from .network_driver import NetworkDriver
from .timer_driver import TimerDriver
from .uart_driver import UARTDriver
from .virtual_memory_manager import VirtualMemoryManager

_MPU_REGION_BASE = 0x20000000
_MPU_REGION_SIZE = 0x1000
_MPU_REGION_PERMISSIONS = 0x03


class HAL:
    """Owns and initializes every simulated hardware component."""

    def __init__(
        self,
        *,
        interrupt_handler=None,
        context_switcher=None,
        mpu_driver=None,
        timer_driver=None,
        uart_driver=None,
        virtual_memory_manager=None,
        network_driver=None,
    ) -> None:
        self.interrupt_handler = interrupt_handler or InterruptHandler()
        self.context_switcher = context_switcher or ContextSwitcher()
        self.mpu_driver = mpu_driver or MPUDriver()
        self.timer_driver = timer_driver or TimerDriver()
        self.uart_driver = uart_driver or UARTDriver()
        self.virtual_memory_manager = virtual_memory_manager or VirtualMemoryManager()
        self.network_driver = network_driver or NetworkDriver()

    def initialize(self) -> None:
        """Initialize all components in order.

        Raises RuntimeError naming the first component that fails.
        """
        logger = get_logger()
        logger.info("HAL: Initializing hardware abstraction layer components...")

        if not self.mpu_driver.initialize():
            self._fail("MPU")
        self.mpu_driver.configure_region(
            _MPU_REGION_BASE, _MPU_REGION_SIZE, _MPU_REGION_PERMISSIONS
        )
        self.mpu_driver.enforce_memory_protection()

        for name, component in (
            ("TimerDriver", self.timer_driver),
            ("UARTDriver", self.uart_driver),
            ("VirtualMemoryManager", self.virtual_memory_manager),
            ("NetworkDriver", self.network_driver),
        ):
            if not component.initialize():
                self._fail(name)

        logger.info("HAL: All components initialized successfully.")

    @staticmethod
    def _fail(name: str) -> None:
        get_logger().error(f"HAL: {name} initialization failed.")
        raise RuntimeError(f"{name} initialization failed")

    def trigger_interrupt(self, interrupt_number: int) -> None:
        """Raise ``interrupt_number`` through the interrupt handler."""
        get_logger().info(f"HAL: Triggering interrupt {interrupt_number}")
        self.interrupt_handler.trigger_interrupt(interrupt_number)

    def close(self) -> None:
        """Stop any running timer."""
        self.timer_driver.stop()

    def __enter__(self) -> "HAL":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()