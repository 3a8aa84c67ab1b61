"""Reading little-endian MIPS COFF executables."""

from __future__ import annotations

import struct
from dataclasses import dataclass

MIPSEL_MAGIC = 0x0162
OMAGIC = 0o407
SOMAGIC = 0x0701

_FILE_HEADER = struct.Struct("<2H3i2H")
_AOUT_HEADER = struct.Struct("<2h13i")
_SECTION_HEADER = struct.Struct("<8s6I2HI")

FILE_HEADER_SIZE = _FILE_HEADER.size
AOUT_HEADER_SIZE = _AOUT_HEADER.size
SECTION_HEADER_SIZE = _SECTION_HEADER.size


class CoffFormatError(ValueError):
    """Raised when the input is not a usable MIPS COFF file."""


def _unpack(layout: struct.Struct, data: bytes, offset: int = 0) -> tuple:
    if len(data) < offset + layout.size:
        raise CoffFormatError("File is too short")
    return layout.unpack_from(data, offset)


@dataclass(frozen=True)
class FileHeader:
    """The COFF file header."""

    magic: int
    nscns: int
    timdat: int
    symptr: int
    nsyms: int
    opthdr: int
    flags: int

    @classmethod
    def from_bytes(cls, data: bytes) -> FileHeader:
        return cls(*_unpack(_FILE_HEADER, data))


@dataclass(frozen=True)
class AoutHeader:
    """The a.out (system) header that follows the file header."""

    magic: int
    vstamp: int
    tsize: int
    dsize: int
    bsize: int
    entry: int
    text_start: int
    data_start: int
    bss_start: int
    gprmask: int
    cprmask: tuple[int, int, int, int]
    gp_value: int

    @classmethod
    def from_bytes(cls, data: bytes) -> AoutHeader:
        fields = _unpack(_AOUT_HEADER, data)
        return cls(*fields[:10], tuple(fields[10:14]), fields[14])


@dataclass(frozen=True)
class SectionHeader:
    """One COFF section header."""

    name: str
    paddr: int
    vaddr: int
    size: int
    scnptr: int
    relptr: int
    lnnoptr: int
    nreloc: int
    nlnno: int
    flags: int

    @classmethod
    def from_bytes(cls, data: bytes) -> SectionHeader:
        raw_name, *rest = _unpack(_SECTION_HEADER, data)
        name = raw_name.split(b"\0", 1)[0].decode("latin-1")
        return cls(name, *rest)


@dataclass(frozen=True)
class CoffFile:
    """A parsed COFF executable: headers, sections and the raw file bytes."""

    file_header: FileHeader
    aout_header: AoutHeader
    sections: tuple[SectionHeader, ...]
    data: bytes

    @classmethod
    def from_bytes(cls, data: bytes) -> CoffFile:
        """Parse and check the headers of a MIPSEL OMAGIC COFF file."""
        data = bytes(data)
        file_header = FileHeader.from_bytes(data)
        if file_header.magic != MIPSEL_MAGIC:
            raise CoffFormatError("File is not a MIPSEL COFF file")
        aout_header = AoutHeader.from_bytes(data[FILE_HEADER_SIZE:])
        if aout_header.magic != OMAGIC:
            raise CoffFormatError("File is not a OMAGIC file")
        start = FILE_HEADER_SIZE + AOUT_HEADER_SIZE
        end = start + file_header.nscns * SECTION_HEADER_SIZE
        if len(data) < end:
            raise CoffFormatError("File is too short")
        sections = tuple(
            SectionHeader.from_bytes(data[offset:offset + SECTION_HEADER_SIZE])
            for offset in range(start, end, SECTION_HEADER_SIZE)
        )
        return cls(file_header, aout_header, sections, data)

    def section_data(self, section: SectionHeader) -> bytes:
        """Return the raw contents of a section stored in the file."""
        end = section.scnptr + section.size
        if end > len(self.data):
            raise CoffFormatError("File is too short")
        return self.data[section.scnptr:end]