# rtosim

rtosim simulates a small real-time operating system inside one Python
process. No real hardware is involved. Every component reports what it does
through a shared logger.

## Components

- `rtosim.scheduler` provides `Scheduler` and `Task`.
  - `Scheduler` runs queued tasks one at a time on a background thread.
  - A higher `current_priority` runs first. When two tasks have the same priority, the one with the lower `id` runs first.
  - `add_task` queues a copy of the task.
  - `start` raises `RuntimeError` if the scheduler is already running.
  - `stop` waits for the task that is running to finish.
  - The scheduler can also be used as a context manager, which stops it on exit.
  - `apply_priority_inheritance(task, priority)` raises a task's `current_priority` when the given priority is higher.
  - If a task raises an exception, the scheduler logs it and keeps running.
  - `Task.current_priority` defaults to `base_priority`.
- `rtosim.interrupt_handler` provides `InterruptHandler`.
  - It has `register_interrupt`, `unregister_interrupt` and `trigger_interrupt`.
  - Triggering a number that has no callback logs an error. It does not raise.
- `rtosim.context_switcher` provides `ContextSwitcher` and `CPUContext`.
  - `CPUContext` holds sixteen registers and `cpsr`.
  - `save_context()` returns a new `CPUContext` filled with random values. You can pass a `random.Random` to the constructor to make the values reproducible.
  - `restore_context(context)` logs the register values.
- `rtosim.virtual_memory_manager` provides `VirtualMemoryManager`, `MemoryPermissions` (flags `READ`, `WRITE`, `EXECUTE`), `PageTableEntry` and `has_permission`.
  - `map_region` returns the new `PageTableEntry`. It raises `ValueError` when the address already starts a mapping, when an address does not fit in 32 bits, or when the size is negative.
  - `unmap_region` raises `KeyError` for an unknown region.
  - `translate_address` returns the physical address, or `None` when the address is not mapped.
  - `handle_page_fault` logs the fault.
  - `dump_page_table` returns a text listing of the mappings.
  - `entries` lists the current mappings.
- `rtosim.mpu_driver` provides `MPUDriver`.
  - `configure_region` returns `False` before `initialize` has been called.
  - `enforce_memory_protection` logs an error before `initialize` has been called.
- `rtosim.timer_driver` provides `TimerDriver`.
  - `start(interval_ms, callback)` calls the callback every `interval_ms` milliseconds on a background thread. It does nothing if the timer is already running.
  - `stop` ends the timer.
  - `running` reports whether the timer is running.
- `rtosim.uart_driver` provides `UARTDriver`. It has `write` and `read`.
- `rtosim.network_driver` provides `NetworkDriver`. It has `send_packet` and `receive_packet`.
- `rtosim.allocator` provides two functions:
  - `allocate(size, numa_node=0)` returns a zeroed `bytearray`. It raises `ValueError` for a negative size.
  - `deallocate(buffer, size)` clears the buffer.
- `rtosim.hal` provides `HAL`, which creates all the drivers and exposes them as attributes:
  - `interrupt_handler`
  - `context_switcher`
  - `mpu_driver`
  - `timer_driver`
  - `uart_driver`
  - `virtual_memory_manager`
  - `network_driver`

  `HAL` has these methods:
  - `initialize()` initialises the drivers in order. It also configures one MPU region. If a component fails, it raises `RuntimeError` naming that component.
  - `trigger_interrupt(n)` triggers interrupt `n` through the interrupt handler.
  - `close()` stops the timer. `HAL` can also be used as a context manager.
- `rtosim.logger` provides `get_logger()`, which returns the shared `Logger`.
  - Each line has the form `YYYY-MM-DD HH:MM:SS [LEVEL] message`. Lines go to standard output.
  - `set_log_level(LogLevel.X)` filters out messages below that level.
  - `set_log_file(path)` also appends lines to a file. It raises `OSError` if the file cannot be opened.
  - `close()` stops writing to the file.

## Installing

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Running the demonstration

```
rtosim [--log-file PATH] [--duration SECONDS]
```

The demonstration runs these steps in order:

1. It initialises the HAL.
2. It triggers interrupts 1 and 2.
3. It saves and restores a CPU context.
4. It schedules five tasks.
5. It allocates a buffer and frees it.
6. It maps a virtual region at `0x40000000` and translates an address inside it.
7. It reports a page fault for an unmapped address.
8. It dumps the page table.
9. It sends and receives a network packet.
10. It lets the scheduler run for `--duration` seconds. The default is 1.

Log lines go to standard output. They are also appended to `--log-file`, which defaults to `rtos.log` in the current directory. If that file cannot be opened, a warning is logged and the run continues.

The command exits with status 0. If the HAL fails to initialise, it exits with status 1.

## Using it as a library

```python
from rtosim.hal import HAL
from rtosim.virtual_memory_manager import MemoryPermissions

with HAL() as hal:
    hal.initialize()

    hal.interrupt_handler.register_interrupt(1, lambda: print("tick"))
    hal.trigger_interrupt(1)

    vmm = hal.virtual_memory_manager
    vmm.map_region(0x40000000, 0x80000000, 4096,
                   MemoryPermissions.READ | MemoryPermissions.WRITE)
    print(hex(vmm.translate_address(0x40000010)))  # 0x80000010
    print(vmm.dump_page_table())
```

A scheduler example:

```python
from rtosim.scheduler import Scheduler, Task

with Scheduler() as scheduler:
    scheduler.start()
    scheduler.add_task(Task(id=0, name="Task_0", base_priority=10,
                            task_function=lambda: print("work")))
```

## What it does not do

- The drivers do not touch real devices. The UART and network drivers only log what they would send, and return fixed simulated data.
- The scheduler runs each queued task once, to completion. It does not pre-empt tasks or re-queue them.
- Priority inheritance is applied only when you call `apply_priority_inheritance` yourself.
- A page fault is only logged. No page is allocated.

## Running the tests

```
pytest
```