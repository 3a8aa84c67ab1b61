import struct

import pytest

from noffkit.noff import NOFF_MAGIC, NoffHeader, Segment, header_size


def sample_header(with_rdata=True):
    return NoffHeader(
        code=Segment(0, header_size(with_rdata), 100),
        init_data=Segment(200, 300, 40),
        uninit_data=Segment(240, 0, 64),
        readonly_data=Segment(100, 400, 8) if with_rdata else None,
    )


def test_magic_is_little_endian_first_word():
    assert NoffHeader().pack()[:4] == NOFF_MAGIC.to_bytes(4, "little")


def test_packed_length_matches_header_size():
    assert len(sample_header(True).pack()) == header_size(True)
    assert len(sample_header(False).pack()) == header_size(False)
    assert header_size(True) - header_size(False) == struct.calcsize("<3I")


@pytest.mark.parametrize("with_rdata", [True, False])
def test_round_trip(with_rdata):
    header = sample_header(with_rdata)
    assert NoffHeader.unpack(header.pack(), readonly_data=with_rdata) == header


def test_field_order_with_readonly_segment():
    words = [NOFF_MAGIC, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12]
    header = NoffHeader.unpack(struct.pack("<13I", *words))
    assert header.code == Segment(1, 2, 3)
    assert header.init_data == Segment(4, 5, 6)
    assert header.readonly_data == Segment(7, 8, 9)
    assert header.uninit_data == Segment(10, 11, 12)


def test_field_order_without_readonly_segment():
    words = [NOFF_MAGIC, 1, 2, 3, 4, 5, 6, 7, 8, 9]
    header = NoffHeader.unpack(struct.pack("<10I", *words), readonly_data=False)
    assert header.readonly_data is None
    assert header.uninit_data == Segment(7, 8, 9)


def test_big_endian_header_is_swapped():
    words = [NOFF_MAGIC, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12]
    header = NoffHeader.unpack(struct.pack(">13I", *words))
    assert header.magic == NOFF_MAGIC
    assert header.code == Segment(1, 2, 3)
    assert header.uninit_data == Segment(10, 11, 12)


def test_bad_magic():
    with pytest.raises(ValueError, match="bad magic"):
        NoffHeader.unpack(struct.pack("<13I", *([1] * 13)))


def test_too_short():
    with pytest.raises(ValueError, match="too short"):
        NoffHeader.unpack(sample_header().pack()[:-1])


def test_default_segments_are_empty():
    header = NoffHeader.unpack(NoffHeader(readonly_data=Segment()).pack())
    assert header.code.size == 0
    assert header.init_data.size == 0
    assert header.uninit_data.size == 0