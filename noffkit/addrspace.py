"""Address spaces: loading NOFF programs into paged physical memory."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum

from noffkit.noff import NoffHeader, Segment

USER_STACK_SIZE = 1024


class FaultKind(Enum):
    """Why an address could not be translated."""

    ADDRESS_ERROR = "address error"
    READ_ONLY = "read-only"
    BUS_ERROR = "bus error"


class AddressFault(Exception):
    """Raised when translating a virtual address fails."""

    def __init__(self, kind: FaultKind, vaddr: int) -> None:
        super().__init__(f"{kind.value} at virtual address 0x{vaddr:x}")
        self.kind = kind
        self.vaddr = vaddr


@dataclass
class TranslationEntry:
    """One page table entry."""

    virtual_page: int
    physical_page: int
    valid: bool = True
    read_only: bool = False
    use: bool = False
    dirty: bool = False


class PhysicalMemory:
    """Main memory divided into pages, with a record of which are in use."""

    def __init__(self, num_pages: int, page_size: int) -> None:
        if num_pages <= 0 or page_size <= 0:
            raise ValueError("page count and page size must be positive")
        self.num_pages = num_pages
        self.page_size = page_size
        self.data = bytearray(num_pages * page_size)
        self._in_use = [False] * num_pages
        self._lock = threading.RLock()

    def allocate(self) -> int:
        """Claim the lowest free page, zero it and return its number."""
        with self._lock:
            for page, used in enumerate(self._in_use):
                if not used:
                    self._in_use[page] = True
                    start = page * self.page_size
                    self.data[start:start + self.page_size] = bytes(self.page_size)
                    return page
        raise MemoryError("no free physical page")

    def free(self, page: int) -> None:
        """Return a page to the free pool."""
        if not 0 <= page < self.num_pages:
            raise ValueError(f"no physical page {page}")
        with self._lock:
            self._in_use[page] = False

    def num_free(self) -> int:
        """Number of pages not in use."""
        with self._lock:
            return self._in_use.count(False)


class AddressSpace:
    """A user program's page table over a shared physical memory."""

    def __init__(self, memory: PhysicalMemory, page_table: list[TranslationEntry]) -> None:
        self.memory = memory
        self.page_table = page_table

    @property
    def num_pages(self) -> int:
        return len(self.page_table)

    @classmethod
    def load(
        cls,
        noff_data: bytes,
        memory: PhysicalMemory,
        readonly_data: bool = True,
    ) -> AddressSpace:
        """Allocate pages for a NOFF program and copy its segments in.

        Raises ValueError for a malformed file or one too large for memory,
        and MemoryError when too few physical pages are free.
        """
        noff_data = bytes(noff_data)
        header = NoffHeader.unpack(noff_data, readonly_data)
        stored = [header.code, header.readonly_data, header.init_data]
        loaded = [seg for seg in stored if seg is not None and seg.size > 0]

        size = sum(seg.size for seg in loaded) + header.uninit_data.size + USER_STACK_SIZE
        page_size = memory.page_size
        num_pages = -(-size // page_size)
        if num_pages > memory.num_pages:
            raise ValueError("program is too large for physical memory")
        limit = num_pages * page_size
        for seg in loaded:
            if seg.in_file_addr + seg.size > len(noff_data):
                raise ValueError("NOFF file is truncated")
            if seg.virtual_addr + seg.size > limit:
                raise ValueError("segment lies outside the address space")

        with memory._lock:
            if num_pages > memory.num_free():
                raise MemoryError("not enough free physical pages")
            table = [TranslationEntry(vpn, memory.allocate()) for vpn in range(num_pages)]
            space = cls(memory, table)
            for seg in loaded:
                space._copy_in(seg, noff_data)
        return space

    def _copy_in(self, segment: Segment, noff_data: bytes) -> None:
        data = noff_data[segment.in_file_addr:segment.in_file_addr + segment.size]
        page_size = self.memory.page_size
        pos = 0
        while pos < len(data):
            vpn, offset = divmod(segment.virtual_addr + pos, page_size)
            count = min(page_size - offset, len(data) - pos)
            base = self.page_table[vpn].physical_page * page_size + offset
            self.memory.data[base:base + count] = data[pos:pos + count]
            pos += count

    def translate(self, vaddr: int, writing: bool = False) -> int:
        """Return the physical address for ``vaddr``, marking the page used."""
        page_size = self.memory.page_size
        if vaddr < 0:
            raise AddressFault(FaultKind.ADDRESS_ERROR, vaddr)
        vpn, offset = divmod(vaddr, page_size)
        if vpn >= len(self.page_table):
            raise AddressFault(FaultKind.ADDRESS_ERROR, vaddr)
        entry = self.page_table[vpn]
        if writing and entry.read_only:
            raise AddressFault(FaultKind.READ_ONLY, vaddr)
        if not 0 <= entry.physical_page < self.memory.num_pages:
            raise AddressFault(FaultKind.BUS_ERROR, vaddr)
        entry.use = True
        if writing:
            entry.dirty = True
        return entry.physical_page * page_size + offset

    def initial_registers(self) -> dict[str, int]:
        """Start-up register values: program counters and stack pointer."""
        return {
            "pc": 0,
            "next_pc": 4,
            "sp": self.num_pages * self.memory.page_size - 16,
        }

    def release(self) -> None:
        """Free every physical page held by this address space."""
        for entry in self.page_table:
            self.memory.free(entry.physical_page)
        self.page_table = []

    def __enter__(self) -> AddressSpace:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()