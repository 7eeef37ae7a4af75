import io
import struct

import pytest

from os2lx.exe import Executable, ExeFormatError, ExeKind, load_executable
from os2lx.headers import LxHeader, NeHeader
from os2lx.nedump import dump_ne, ne_module_flag_names, ne_segment_flag_names

STUB_LEN = 0x40
IMAGE_TABLES = NeHeader.SIZE  # image offset where tables start
FILE_TABLES = STUB_LEN + NeHeader.SIZE


def build_ne(tables=b"\0\0\0\0", **fields):
    stub = bytearray(STUB_LEN)
    stub[0:2] = b"MZ"
    struct.pack_into("<I", stub, 0x3C, STUB_LEN)
    fields.setdefault("exe_type", 1)
    header = NeHeader(magic_n=ord("N"), magic_e=ord("E"), **fields).to_bytes()
    return bytes(stub) + header + tables


def dump(data):
    out = io.StringIO()
    dump_ne(load_executable(data), out)
    return out.getvalue()


def test_module_flag_names():
    assert ne_module_flag_names(0) == ["NOAUTODATA"]
    assert ne_module_flag_names(0x8001) == ["SINGLEDATA", "LIBRARYMODULE"]
    assert ne_module_flag_names(0x2004) == ["FAMILYAPI", "NOTLOADABLE"]


def test_segment_flag_names():
    assert ne_segment_flag_names(0x0) == ["CODE"]
    assert ne_segment_flag_names(0x1) == ["DATA"]
    assert ne_segment_flag_names(0x3) == ["[UNKNOWN SEGMENT TYPE]"]
    assert ne_segment_flag_names(0x150) == ["CODE", "MOVABLE", "PRELOAD", "RELOCINFO"]


def test_os2_flags_listed():
    text = dump(build_ne(os2_exe_flags=0x3))
    assert "OS/2 flags: LONGFILENAMES PROTECTEDMODE" in text.splitlines()


def _segment_file(fixup_flags, chain_next):
    seg_pos = FILE_TABLES + 8
    seg = struct.pack("<4H", seg_pos, 8, 0x100, 0)
    segdata = bytearray(8)
    struct.pack_into("<H", segdata, 2, 6)
    struct.pack_into("<H", segdata, 6, chain_next)
    fixups = struct.pack("<H", 1) + struct.pack("<BBHHH", 5, fixup_flags, 2, 3, 7)
    return build_ne(
        seg + bytes(segdata) + fixups,
        num_segment_table_entries=1,
        segment_table_offset=IMAGE_TABLES,
    ), seg_pos


def test_segment_with_fixup_chain():
    data, seg_pos = _segment_file(1, 0xFFFF)
    lines = dump(data).splitlines()
    assert f"  Logical-sector offset: {seg_pos} (byte position {seg_pos})" in lines
    assert "  Size: 8" in lines
    assert "  Segment flags: CODE RELOCINFO" in lines
    assert "  Minimum allocation: 65536" in lines
    assert "  Fixup records (1 entries):" in lines
    assert "    Source type: OFFSET" in lines
    assert "    Fixup type: IMPORTORDINAL (module 3, ordinal 7)" in lines
    assert "    Source chain: 2 6" in lines


def test_additive_internal_fixup():
    seg_pos = FILE_TABLES + 8
    seg = struct.pack("<4H", seg_pos, 8, 0x100, 0)
    fixups = struct.pack("<H", 1) + struct.pack("<BBHBBH", 2, 0x4, 2, 0xFF, 0, 9)
    data = build_ne(
        seg + bytes(8) + fixups,
        num_segment_table_entries=1,
        segment_table_offset=IMAGE_TABLES,
    )
    lines = dump(data).splitlines()
    assert "    Source type: SEGMENT" in lines
    assert "    Fixup type: ADDITIVE INTERNALREF (movable segment, ordinal 9)" in lines
    assert "    Additive source: 2" in lines


def test_looping_source_chain_raises():
    data, _ = _segment_file(1, 2)
    with pytest.raises(ExeFormatError):
        dump(data)


def test_entry_table():
    entries = (
        bytes([1, 0xFF, 0x3]) + struct.pack("<H", 0x3FCD) + bytes([2]) + struct.pack("<H", 16)
        + bytes([2, 0])
        + bytes([1, 1, 1]) + struct.pack("<H", 32)
        + bytes([0])
    )
    data = build_ne(entries, entry_table_offset=IMAGE_TABLES, entry_table_size=len(entries))
    lines = dump(data).splitlines()
    start = lines.index("Entry table:")
    assert lines[start + 1:start + 11] == [
        " 1:",
        "  Flags: MOVABLE EXPORTED GLOBAL",
        "  Int3f: 3FCD",
        "  Segment: 2",
        "  Offset: 16",
        " 4:",
        "  Flags: FIXED EXPORTED",
        "  Segment: 1",
        "  Offset: 32",
        "",
    ]


def test_resident_name_table():
    names = b"\x05HELLO" + struct.pack("<H", 0) + b"\x03FOO" + struct.pack("<H", 1) + b"\0"
    lines = dump(build_ne(names, resident_name_table_offset=IMAGE_TABLES)).splitlines()
    start = lines.index("Resident name table:")
    assert lines[start + 1:start + 3] == [" 0: 'HELLO' (ordinal 0)", " 1: 'FOO' (ordinal 1)"]


def test_empty_resident_name_table_is_omitted():
    text = dump(build_ne(b"\0\0\0\0", resident_name_table_offset=IMAGE_TABLES))
    assert "Resident name table:" not in text


def test_non_resident_name_table_is_file_relative():
    names = b"\x04DESC" + struct.pack("<H", 0)
    data = build_ne(
        b"\0\0" + names,
        non_resident_name_table_offset=FILE_TABLES + 2,
        non_resident_name_table_size=len(names),
    )
    assert " 0: 'DESC' (ordinal 0)" in dump(data).splitlines()


def test_module_reference_table():
    refs = struct.pack("<HH", 1, 5)
    imported = b"\x00\x03DOS\x03VIO"
    data = build_ne(
        refs + imported,
        num_module_ref_table_entries=2,
        module_reference_table_offset=IMAGE_TABLES,
        imported_names_table_offset=IMAGE_TABLES + len(refs),
    )
    lines = dump(data).splitlines()
    start = lines.index("Module reference table (2 entries):")
    assert lines[start + 1:start + 3] == [" 1: DOS", " 2: VIO"]


def test_resources():
    table = (
        struct.pack("<HH", 0x8001, 1) + bytes(4)
        + struct.pack("<4H", 10, 20, 0x30, 0x8005) + bytes(4)
        + struct.pack("<H", 0)
    )
    data = build_ne(table, num_resource_entries=1, resource_table_offset=IMAGE_TABLES)
    lines = dump(data).splitlines()
    start = lines.index("Resources (1 entries):")
    assert lines[start + 1:start + 6] == [
        " 1:  Type ID: 1",
        "  Offset: 10",
        "  Size: 20",
        "  Flags: MOVABLE PURE",
        "  Resource ID: 5",
    ]


def test_named_resource_type():
    head = struct.pack("<HH", 22, 1) + bytes(4) + struct.pack("<4H", 0, 0, 0, 0x8001) + bytes(4)
    table = head + struct.pack("<H", 0) + b"\x04ICON"
    assert len(head) + 2 == 22
    data = build_ne(table, num_resource_entries=1, resource_table_offset=IMAGE_TABLES)
    assert ' 1:  Type ID: "ICON"' in dump(data).splitlines()


def test_truncated_table_raises():
    data = build_ne(num_module_ref_table_entries=1, module_reference_table_offset=5000)
    with pytest.raises(ExeFormatError):
        dump(data)


def test_lx_executable_rejected():
    exe = Executable(bytes(200), 0, ExeKind.LX, LxHeader())
    with pytest.raises(ValueError):
        dump_ne(exe, io.StringIO())