"""The Nachos object file format (NOFF) header."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

NOFF_MAGIC = 0xBADFAD

_WORD = 4
_SEGMENT_WORDS = 3


def header_size(readonly_data: bool = True) -> int:
    """Size in bytes of a NOFF header, with or without a read-only segment."""
    segments = 4 if readonly_data else 3
    return _WORD * (1 + _SEGMENT_WORDS * segments)


@dataclass
class Segment:
    """Where a segment lives in the file and in the virtual address space."""

    virtual_addr: int = 0
    in_file_addr: int = 0
    size: int = 0


@dataclass
class NoffHeader:
    """A NOFF header; ``readonly_data`` is None when the layout has no such segment."""

    code: Segment = field(default_factory=Segment)
    init_data: Segment = field(default_factory=Segment)
    uninit_data: Segment = field(default_factory=Segment)
    readonly_data: Segment | None = None
    magic: int = NOFF_MAGIC

    def _segments(self) -> list[Segment]:
        order = [self.code, self.init_data]
        if self.readonly_data is not None:
            order.append(self.readonly_data)
        order.append(self.uninit_data)
        return order

    def pack(self) -> bytes:
        """Encode the header in little-endian order."""
        words = [self.magic]
        for segment in self._segments():
            words += [segment.virtual_addr, segment.in_file_addr, segment.size]
        return struct.pack(f"<{len(words)}I", *words)

    @classmethod
    def unpack(cls, data: bytes, readonly_data: bool = True) -> NoffHeader:
        """Decode a header, accepting either byte order."""
        size = header_size(readonly_data)
        if len(data) < size:
            raise ValueError("NOFF header is too short")
        count = size // _WORD
        words = struct.unpack_from(f"<{count}I", data)
        if words[0] != NOFF_MAGIC:
            swapped = struct.unpack_from(f">{count}I", data)
            if swapped[0] != NOFF_MAGIC:
                raise ValueError("not a NOFF file: bad magic number")
            words = swapped
        segments = [
            Segment(*words[start:start + _SEGMENT_WORDS])
            for start in range(1, count, _SEGMENT_WORDS)
        ]
        if readonly_data:
            code, init_data, rdata, uninit = segments
        else:
            code, init_data, uninit = segments
            rdata = None
        return cls(code, init_data, uninit, rdata, words[0])