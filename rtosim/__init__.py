"""Simulated real-time operating system: priority scheduler, interrupts, device drivers, virtual memory and a shared logger."""

__version__ = "0.1.0"