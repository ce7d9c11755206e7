"""Simulated virtual memory with a flat page table."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import IntFlag

from .logger import get_logger

_ADDRESS_MASK = 0xFFFFFFFF


class MemoryPermissions(IntFlag):
    """Access rights of a mapped region."""

    NONE = 0
    READ = 1 << 0
    WRITE = 1 << 1
    EXECUTE = 1 << 2


def has_permission(perms: MemoryPermissions, flag: MemoryPermissions) -> bool:
    """Whether ``perms`` includes any bit of ``flag``."""
    return (int(perms) & int(flag)) != 0


@dataclass(frozen=True)
class PageTableEntry:
    """One mapped virtual region."""

    virtual_address: int
    physical_address: int
    size: int
    permissions: MemoryPermissions

    def contains(self, address: int) -> bool:
        return self.virtual_address <= address < self.virtual_address + self.size


def _check_address(name: str, address: int) -> None:
    if not 0 <= address <= _ADDRESS_MASK:
        raise ValueError(f"{name} must be a 32-bit unsigned address")


class VirtualMemoryManager:
    """Maps 32-bit virtual regions to physical addresses."""

    def __init__(self) -> None:
        self._page_table: dict[int, PageTableEntry] = {}
        self._lock = threading.Lock()

    @property
    def entries(self) -> list[PageTableEntry]:
        """The current page table entries, in mapping order."""
        with self._lock:
            return list(self._page_table.values())

    def initialize(self) -> bool:
        """Prepare the page table; always succeeds."""
        get_logger().info("VirtualMemoryManager: Initialized virtual memory management.")
        return True

    def map_region(
        self,
        virtual_address: int,
        physical_address: int,
        size: int,
        permissions: MemoryPermissions,
    ) -> PageTableEntry:
        """Map a region starting at ``virtual_address``.

        Raises ValueError if that address already starts a mapping.
        """
        _check_address("virtual address", virtual_address)
        _check_address("physical address", physical_address)
        if size < 0:
            raise ValueError("region size must not be negative")
        permissions = MemoryPermissions(permissions)
        logger = get_logger()
        with self._lock:
            if virtual_address in self._page_table:
                logger.error("VirtualMemoryManager: Virtual address already mapped.")
                raise ValueError(f"virtual address {virtual_address:#x} is already mapped")
            entry = PageTableEntry(virtual_address, physical_address, size, permissions)
            self._page_table[virtual_address] = entry
            logger.info(
                f"VirtualMemoryManager: Mapped virtual 0x{virtual_address} to physical "
                f"0x{physical_address} (size: {size} bytes, perms: {int(permissions)})."
            )
        return entry

    def unmap_region(self, virtual_address: int) -> None:
        """Remove the mapping starting at ``virtual_address``.

        Raises KeyError if there is none.
        """
        logger = get_logger()
        with self._lock:
            if virtual_address not in self._page_table:
                logger.error("VirtualMemoryManager: Attempt to unmap non-existent region.")
                raise KeyError(virtual_address)
            del self._page_table[virtual_address]
            logger.info(
                f"VirtualMemoryManager: Unmapped region starting at virtual 0x{virtual_address}"
            )

    def translate_address(self, virtual_address: int) -> int | None:
        """Return the physical address for ``virtual_address``, or None if unmapped."""
        logger = get_logger()
        with self._lock:
            for entry in self._page_table.values():
                if entry.contains(virtual_address):
                    offset = virtual_address - entry.virtual_address
                    physical = (entry.physical_address + offset) & _ADDRESS_MASK
                    logger.debug(
                        f"VirtualMemoryManager: Translated virtual 0x{virtual_address} "
                        f"to physical 0x{physical}"
                    )
                    return physical
        logger.error(
            f"VirtualMemoryManager: Translation failed for virtual 0x{virtual_address}"
        )
        return None

    def handle_page_fault(self, virtual_address: int) -> None:
        """Report a page fault at ``virtual_address``."""
        get_logger().error(
            f"VirtualMemoryManager: Page fault at virtual address 0x{virtual_address}"
        )

    def dump_page_table(self) -> str:
        """Describe every mapping, one per line."""
        lines = ["VirtualMemoryManager: Page Table Dump\n", "-" * 36 + "\n"]
        with self._lock:
            for entry in self._page_table.values():
                lines.append(
                    f"Virtual: 0x{entry.virtual_address:x} | Physical: 0x{entry.physical_address:x}"
                    f" | Size: {entry.size} | Perms: 0x{int(entry.permissions):x}\n"
                )
        return "".join(lines)