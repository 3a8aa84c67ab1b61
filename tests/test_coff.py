import struct

import pytest

from noffkit.coff import (
    MIPSEL_MAGIC,
    OMAGIC,
    AoutHeader,
    CoffFile,
    CoffFormatError,
    FileHeader,
    SectionHeader,
)


def file_header_bytes(magic=MIPSEL_MAGIC, nscns=0):
    return struct.pack("<2H3i2H", magic, nscns, 7, 0, 0, 56, 3)


def aout_bytes(magic=OMAGIC):
    return struct.pack("<2h13i", magic, 2, 10, 20, 30, 0, 0, 40, 50, 1, 11, 12, 13, 14, 99)


def section_bytes(name, paddr, size, scnptr):
    return struct.pack("<8s6I2HI", name, paddr, paddr, size, scnptr, 0, 0, 0, 0, 0)


def build(sections, file_magic=MIPSEL_MAGIC, aout_magic=OMAGIC):
    headers = file_header_bytes(file_magic, len(sections)) + aout_bytes(aout_magic)
    table_end = len(headers) + 40 * len(sections)
    table = b""
    payloads = b""
    for name, paddr, payload in sections:
        table += section_bytes(name, paddr, len(payload), table_end + len(payloads))
        payloads += payload
    return headers + table + payloads


def test_file_header_fields():
    header = FileHeader.from_bytes(file_header_bytes(nscns=4))
    assert header.magic == MIPSEL_MAGIC
    assert header.nscns == 4
    assert header.timdat == 7
    assert header.flags == 3


def test_file_header_too_short():
    with pytest.raises(CoffFormatError, match="File is too short"):
        FileHeader.from_bytes(file_header_bytes()[:-1])


def test_aout_header_fields():
    header = AoutHeader.from_bytes(aout_bytes())
    assert header.magic == OMAGIC
    assert header.tsize == 10
    assert header.cprmask == (11, 12, 13, 14)
    assert header.gp_value == 99


def test_section_name_stops_at_nul():
    section = SectionHeader.from_bytes(section_bytes(b".text", 0x400, 16, 200))
    assert section.name == ".text"
    assert section.paddr == 0x400
    assert section.size == 16
    assert section.scnptr == 200


def test_section_name_without_nul_uses_all_eight_bytes():
    section = SectionHeader.from_bytes(section_bytes(b"abcdefgh", 0, 0, 0))
    assert section.name == "abcdefgh"


def test_coff_file_parses_sections_and_data():
    data = build([(b".text", 0, b"\x01\x02\x03\x04"), (b".data", 4, b"xyz!")])
    coff = CoffFile.from_bytes(data)
    assert [s.name for s in coff.sections] == [".text", ".data"]
    assert coff.section_data(coff.sections[0]) == b"\x01\x02\x03\x04"
    assert coff.section_data(coff.sections[1]) == b"xyz!"
    assert len(coff.sections) == coff.file_header.nscns


def test_wrong_file_magic():
    with pytest.raises(CoffFormatError, match="not a MIPSEL COFF file"):
        CoffFile.from_bytes(build([], file_magic=0x0160))


def test_wrong_aout_magic():
    with pytest.raises(CoffFormatError, match="not a OMAGIC file"):
        CoffFile.from_bytes(build([], aout_magic=0x0701))


def test_truncated_section_table():
    data = build([(b".text", 0, b"abcd")])
    with pytest.raises(CoffFormatError, match="File is too short"):
        CoffFile.from_bytes(data[: len(data) - 4 - 1])


def test_section_data_beyond_end():
    data = build([(b".text", 0, b"abcd")])
    coff = CoffFile.from_bytes(data[:-2])
    with pytest.raises(CoffFormatError, match="File is too short"):
        coff.section_data(coff.sections[0])