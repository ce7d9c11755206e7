"""Command-line entry point running the RTOS simulation."""

from __future__ import annotations

import argparse
import time

from .allocator import allocate, deallocate
from .hal import HAL
from .logger import LogLevel, get_logger
from .scheduler import Scheduler, Task
from .virtual_memory_manager import MemoryPermissions

_BUFFER_SIZE = 1024


def _make_task_function(index: int):
    def run() -> None:
        get_logger().info(f"Executing Task {index} logic...")
        time.sleep(30e-6)

    return run


def _parse_args(argv):
    parser = argparse.ArgumentParser(prog="rtosim", description="Run the RTOS simulation.")
    parser.add_argument("--log-file", default="rtos.log", help="file the log is appended to")
    parser.add_argument(
        "--duration", type=float, default=1.0,
        help="seconds the scheduler runs before it is stopped",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run the simulation; returns the process exit status."""
    args = _parse_args(argv)
    logger = get_logger()
    logger.set_log_level(LogLevel.DEBUG)
    try:
        logger.set_log_file(args.log_file)
    except OSError as exc:
        logger.warn(f"Could not open log file {args.log_file}: {exc}")
    try:
        return _run(args.duration)
    finally:
        logger.close()


def _run(duration: float) -> int:
    logger = get_logger()
    logger.info("RTOS Simulation Starting via HAL...")

    with HAL() as hal:
        try:
            hal.initialize()
        except RuntimeError:
            logger.error("HAL initialization failed. Exiting...")
            return 1

        hal.interrupt_handler.register_interrupt(
            1, lambda: logger.info("HAL: Handling interrupt 1: Timer tick.")
        )
        hal.interrupt_handler.register_interrupt(
            2, lambda: logger.info("HAL: Handling interrupt 2: External event.")
        )
        hal.trigger_interrupt(1)
        hal.trigger_interrupt(2)

        context = hal.context_switcher.save_context()
        hal.context_switcher.restore_context(context)

        with Scheduler() as scheduler:
            scheduler.start()
            for i in range(5):
                base = 10 - i
                scheduler.add_task(Task(i, f"Task_{i}", base, base, _make_task_function(i)))

            buffer = allocate(_BUFFER_SIZE, 1)
            deallocate(buffer, _BUFFER_SIZE)

            vmm = hal.virtual_memory_manager
            try:
                vmm.map_region(
                    0x40000000, 0x80000000, 4096,
                    MemoryPermissions.READ | MemoryPermissions.WRITE,
                )
            except ValueError:
                pass
            else:
                logger.info("Mapped virtual region 0x40000000 successfully.")

            physical = vmm.translate_address(0x40000010)
            if physical is not None:
                logger.info(
                    f"Translated virtual address 0x40000010 to physical address: 0x{physical}"
                )
            else:
                vmm.handle_page_fault(0x40000010)

            if vmm.translate_address(0x50000000) is None:
                vmm.handle_page_fault(0x50000000)

            logger.debug(vmm.dump_page_table())

            hal.network_driver.send_packet("Hello from RTOS!")
            packet = hal.network_driver.receive_packet()
            logger.info(f"Main: Received packet: {packet}")

            time.sleep(duration)

    logger.info("RTOS Simulation Ending.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())