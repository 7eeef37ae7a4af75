import struct

import pytest

from os2lx.headers import (
    LxHeader,
    LxObjectPageTableEntry,
    LxObjectTableEntry,
    LxResourceTableEntry,
    NeHeader,
    NeSegmentTableEntry,
)


def test_ne_header_is_sixty_four_bytes():
    assert NeHeader.SIZE == 64
    assert len(NeHeader().to_bytes()) == 64


def test_object_table_entry_size():
    assert len(LxObjectTableEntry().to_bytes()) == 24
    assert LxObjectTableEntry.from_bytes(bytes(24)) == LxObjectTableEntry()


def test_resource_entry_is_packed():
    raw = LxResourceTableEntry(type_id=1, offset=2).to_bytes()
    assert len(raw) == 14
    assert LxResourceTableEntry.from_bytes(raw).offset == 2


def test_lx_header_round_trip():
    header = LxHeader(
        magic_l=ord("L"),
        magic_x=ord("X"),
        cpu_type=2,
        os_type=1,
        page_size=4096,
        eip=0x1234,
        heapsize=0xABCDEF,
    )
    raw = header.to_bytes()
    assert len(raw) == LxHeader.SIZE
    assert LxHeader.from_bytes(raw) == header


def test_lx_header_leading_fields_order():
    raw = struct.pack("<4BIHH", ord("L"), ord("X"), 0, 0, 0, 3, 1)
    raw += struct.pack("<40I", *range(100, 140))
    header = LxHeader.from_bytes(raw)
    assert (header.magic_l, header.magic_x) == (ord("L"), ord("X"))
    assert header.cpu_type == 3
    assert header.os_type == 1
    assert header.module_version == 100
    assert header.heapsize == 139


def test_ne_header_round_trip_keeps_reserved():
    header = NeHeader(
        magic_n=ord("N"),
        magic_e=ord("E"),
        crc32=0xDEADBEEF,
        reg_cs=5,
        reg_ip=0x10,
        exe_type=1,
        os2_exe_flags=0x8,
        reserved=b"ABCDEFGH",
    )
    decoded = NeHeader.from_bytes(header.to_bytes())
    assert decoded == header
    assert decoded.reserved == b"ABCDEFGH"


def test_from_bytes_honours_offset():
    entry = LxObjectPageTableEntry(page_data_offset=77, data_size=4096, flags=3)
    data = b"\xff" * 5 + entry.to_bytes() + b"\xff"
    assert LxObjectPageTableEntry.from_bytes(data, 5) == entry


def test_object_table_entry_fields():
    raw = struct.pack("<6I", 1, 2, 3, 4, 5, 6)
    entry = LxObjectTableEntry.from_bytes(raw)
    assert entry == LxObjectTableEntry(1, 2, 3, 4, 5, 6)
    assert entry.to_bytes() == raw


def test_resource_entry_fields():
    raw = struct.pack("<HHIHI", 7, 8, 9000, 2, 0x40)
    entry = LxResourceTableEntry.from_bytes(raw)
    assert (entry.type_id, entry.name_id, entry.resource_size, entry.object, entry.offset) == (
        7,
        8,
        9000,
        2,
        0x40,
    )


def test_segment_entry_round_trip():
    entry = NeSegmentTableEntry(offset=3, size=0, segment_flags=0x100, minimum_allocation=0)
    assert NeSegmentTableEntry.from_bytes(entry.to_bytes()) == entry


@pytest.mark.parametrize(
    "cls",
    [
        LxHeader,
        NeHeader,
        LxObjectTableEntry,
        LxObjectPageTableEntry,
        LxResourceTableEntry,
        NeSegmentTableEntry,
    ],
)
def test_short_data_raises(cls):
    data = bytes(cls.SIZE - 1)
    with pytest.raises(ValueError):
        cls.from_bytes(data)


def test_offset_past_end_raises():
    data = NeSegmentTableEntry().to_bytes()
    with pytest.raises(ValueError):
        NeSegmentTableEntry.from_bytes(data, 1)