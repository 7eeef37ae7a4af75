"""Human-readable dump of a 16-bit NE executable's header and tables."""

from __future__ import annotations

import struct
from functools import partial
from typing import List, Optional, TextIO, Tuple

from .exe import Executable, ExeFormatError
from .headers import NeSegmentTableEntry
from .lxdump import _Cursor, _pascal_string, _record

__all__ = ["ne_module_flag_names", "ne_segment_flag_names", "dump_ne"]

_MODULE_FLAGS: Tuple[Tuple[int, str], ...] = (
    (0x1, "SINGLEDATA"),
    (0x2, "MULTIPLEDATA"),
    (0x4, "FAMILYAPI"),
    (0x2000, "NOTLOADABLE"),
    (0x4000, "NONCONFORMING"),
    (0x8000, "LIBRARYMODULE"),
)

_APP_TYPES = ("CONSOLE", "FULLSCREEN", "WINPMCOMPAT", "WINPMUSES")

_OS2_FLAGS: Tuple[Tuple[int, str], ...] = (
    (1 << 0, "LONGFILENAMES"),
    (1 << 1, "PROTECTEDMODE"),
    (1 << 2, "PROPORTIONALFONTS"),
    (1 << 3, "GANGLOADAREA"),
)

_SEGMENT_FLAGS: Tuple[Tuple[int, str], ...] = (
    (0x4, "REALMODE"),
    (0x8, "ITERATED"),
    (0x10, "MOVABLE"),
    (0x20, "SHAREABLE"),
    (0x40, "PRELOAD"),
    (0x80, "READONLY"),
    (0x100, "RELOCINFO"),
    (0x200, "DEBUGINFO"),
    (0xF000, "DISCARD"),
)

_SEGMENT_TYPES = {0: "CODE", 1: "DATA"}

_FIXUP_SOURCE_TYPES = {0: "LOBYTE", 2: "SEGMENT", 3: "FAR_ADDR", 5: "OFFSET"}

_RESOURCE_FLAGS: Tuple[Tuple[int, str], ...] = (
    (0x10, "MOVABLE"),
    (0x20, "PURE"),
    (0x40, "PRELOAD"),
)

_ENTRY_FLAGS: Tuple[Tuple[int, str], ...] = ((0x1, "EXPORTED"), (0x2, "GLOBAL"))

# (label, header field)
_HEADER_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("Number of segment table entries", "num_segment_table_entries"),
    ("Number of module reference table entries", "num_module_ref_table_entries"),
    ("Non-resident name table size", "non_resident_name_table_size"),
    ("Segment table offset", "segment_table_offset"),
    ("Resource table offset", "resource_table_offset"),
    ("Resident name table offset", "resident_name_table_offset"),
    ("Module reference table offset", "module_reference_table_offset"),
    ("Imported names table offset", "imported_names_table_offset"),
    ("Non-resident name table offset", "non_resident_name_table_offset"),
    ("Number of movable entries", "num_movable_entries"),
    ("Sector alignment shift count", "sector_alignment_shift_count"),
    ("Number of resource entries", "num_resource_entries"),
    ("Executable type", "exe_type"),
)


def _names(flags: int, table) -> List[str]:
    return [name for mask, name in table if flags & mask]


def _joined(names: List[str]) -> str:
    return "".join(f" {n}" for n in names)


def ne_module_flag_names(flags) -> List[str]:
    """Names of the NE module flags set in ``flags``; NOAUTODATA when none are."""
    names = ["NOAUTODATA"] if flags == 0 else []
    return names + _names(flags, _MODULE_FLAGS)


def ne_segment_flag_names(flags) -> List[str]:
    """Segment type followed by the names of the NE segment flags set in ``flags``."""
    kind = _SEGMENT_TYPES.get(flags & 0x3, "[UNKNOWN SEGMENT TYPE]")
    return [kind] + _names(flags, _SEGMENT_FLAGS)


def _dump_segment_fixups(data: bytes, seg: NeSegmentTableEntry, shift: int, out: TextIO) -> None:
    p = partial(print, file=out)
    segpos = seg.offset << shift
    cur = _Cursor(data, segpos + (seg.size if seg.size else 0xFFFF))
    count = cur.u16()
    p(f"  Fixup records ({count} entries):")
    for j in range(count):
        srctype = cur.u8()
        flags = cur.u8()
        chain = cur.u16()
        target = cur.raw(4)
        additive = bool(flags & 0x4)
        p(f"   {j}:")
        p("    Source type: " + _FIXUP_SOURCE_TYPES.get(srctype & 0xF, "[unknown type]"))

        line = "    Fixup type:" + (" ADDITIVE" if additive else "")
        kind = flags & 0x3
        if kind == 0:
            segment = target[0]
            (offset,) = struct.unpack_from("<H", target, 2)
            if segment == 0xFF:
                line += f" INTERNALREF (movable segment, ordinal {offset})"
            else:
                line += f" INTERNALREF (segment {segment}, offset {offset})"
        else:
            first, second = struct.unpack("<HH", target)
            if kind == 1:
                line += f" IMPORTORDINAL (module {first}, ordinal {second})"
            elif kind == 2:
                line += f" IMPORTNAME (module {first}, name offset {second})"
            else:
                line += f" OSFIXUP (type {first})"
        p(line)

        if additive:
            p(f"    Additive source: {chain}")
            continue
        links = []
        seen = set()
        while True:
            if chain in seen:
                raise ExeFormatError(f"fixup source chain loops at offset {chain:X}")
            seen.add(chain)
            links.append(f" {chain:X}")
            chain = _Cursor(data, segpos + chain).u16()
            if chain >= seg.size:
                break
        p("    Source chain:" + "".join(links))


def _dump_segments(exe: Executable, out: TextIO) -> None:
    ne = exe.header
    p = partial(print, file=out)
    shift = ne.sector_alignment_shift_count
    total = ne.num_segment_table_entries
    p(f"Segment table ({total} entries):")
    for i in range(total):
        seg = _record(
            NeSegmentTableEntry,
            exe.image,
            ne.segment_table_offset + i * NeSegmentTableEntry.SIZE,
        )
        p(f" {i + 1}:")
        if seg.offset == 0:
            p(f"  Logical-sector offset: {seg.offset} (no file data)")
        else:
            p(f"  Logical-sector offset: {seg.offset} (byte position {seg.offset << shift})")
        p(f"  Size: {seg.size if seg.size else 0x10000}")
        p("  Segment flags:" + _joined(ne_segment_flag_names(seg.segment_flags)))
        p(f"  Discard priority: {(seg.segment_flags >> 13) & 0x7}")
        p(f"  Minimum allocation: {seg.minimum_allocation if seg.minimum_allocation else 0x10000}")
        if seg.segment_flags & 0x100:
            _dump_segment_fixups(exe.data, seg, shift, out)
    p()


def _resource_id(image: bytes, table: int, value: int) -> str:
    if value & 0x8000:
        return str(value & 0x7FFF)
    return '"' + _pascal_string(_Cursor(image, table + value)) + '"'


def _dump_resources(exe: Executable, out: TextIO) -> None:
    ne = exe.header
    image = exe.image
    table = ne.resource_table_offset
    p = partial(print, file=out)
    p(f"Resources ({ne.num_resource_entries} entries):")
    cur = _Cursor(image, table)
    idx = 0
    while True:
        type_id = cur.u16()
        if not type_id:
            break
        count = cur.u16()
        cur.raw(4)  # reserved
        for _ in range(count):
            idx += 1
            p(f" {idx}:  Type ID: {_resource_id(image, table, type_id)}")
            offset = cur.u16()
            size = cur.u16()
            flags = cur.u16()
            resource_id = cur.u16()
            cur.raw(4)  # reserved
            p(f"  Offset: {offset}")
            p(f"  Size: {size}")
            p("  Flags:" + _joined(_names(flags, _RESOURCE_FLAGS)))
            p(f"  Resource ID: {_resource_id(image, table, resource_id)}")
    p()


def _dump_name_table(title: str, cur: _Cursor, end: Optional[int], out: TextIO) -> None:
    def more() -> bool:
        return (end is None or cur.pos < end) and cur.peek() != 0

    if not more():
        return
    print(title, file=out)
    index = 0
    while more():
        name = _pascal_string(cur)
        ordinal = cur.u16()
        print(f" {index}: '{name}' (ordinal {ordinal})", file=out)
        index += 1
    print(file=out)


def _dump_module_references(exe: Executable, out: TextIO) -> None:
    ne = exe.header
    p = partial(print, file=out)
    total = ne.num_module_ref_table_entries
    p(f"Module reference table ({total} entries):")
    refs = _Cursor(exe.image, ne.module_reference_table_offset)
    for i in range(total):
        name_offset = refs.u16()
        name = _pascal_string(_Cursor(exe.image, ne.imported_names_table_offset + name_offset))
        p(f" {i + 1}: {name}")
    p()


def _dump_entries(exe: Executable, out: TextIO) -> None:
    cur = _Cursor(exe.image, exe.header.entry_table_offset)
    if not cur.peek():
        return
    p = partial(print, file=out)
    p("Entry table:")
    ordinal = 1
    while True:
        bundled = cur.u8()
        if not bundled:
            break
        bundle_type = cur.u8()
        if bundle_type == 0x00:  # unused entries, to skip ordinals
            ordinal += bundled
            continue
        for _ in range(bundled):
            flags = cur.u8()
            flag_text = _joined(_names(flags, _ENTRY_FLAGS))
            p(f" {ordinal}:")
            if bundle_type == 0xFF:
                int3f = cur.u16()
                segment = cur.u8()
                offset = cur.u16()
                p("  Flags: MOVABLE" + flag_text)
                p(f"  Int3f: {int3f:X}")
                p(f"  Segment: {segment}")
            else:
                offset = cur.u16()
                p("  Flags: FIXED" + flag_text)
                p(f"  Segment: {bundle_type}")
            p(f"  Offset: {offset}")
            ordinal += 1
    p()


def dump_ne(exe: Executable, out: TextIO) -> None:
    """Write a description of the NE executable ``exe`` to ``out``.

    Raises ValueError if ``exe`` is not NE, and ExeFormatError if a table
    runs past the end of the file or a fixup source chain loops.
    """
    if exe.is_lx:
        raise ValueError("not an NE executable")
    ne = exe.header
    p = partial(print, file=out)

    p("NE (16-bit) executable.")
    p(f"Linker version: {ne.linker_version}")
    p(f"Linker revision: {ne.linker_revision}")
    p(f"Entry table offset: {ne.entry_table_offset}")
    p(f"Entry table size: {ne.entry_table_size}")
    p(f"CRC32: 0x{ne.crc32:X}")
    p("Module flags:" + _joined(ne_module_flag_names(ne.module_flags)))
    p("Application type: " + _APP_TYPES[(ne.module_flags >> 8) & 0x3])
    p(f"Automatic data segment: {ne.auto_data_segment}")
    p(f"Dynamic heap size: {ne.dynamic_heap_size}")
    p(f"Stack size: {ne.stack_size}")
    p(f"Initial code address: {ne.reg_cs:X}:{ne.reg_ip:X}")
    p(f"Initial stack address: {ne.reg_ss:X}:{ne.reg_sp:X}")
    for label, field in _HEADER_FIELDS:
        p(f"{label}: {getattr(ne, field)}")
    if ne.os2_exe_flags == 0:
        p("OS/2 flags: (none)")
    else:
        p("OS/2 flags:" + _joined(_names(ne.os2_exe_flags, _OS2_FLAGS)))
    p()

    if ne.num_segment_table_entries > 0:
        _dump_segments(exe, out)
    if ne.num_resource_entries > 0:
        _dump_resources(exe, out)
    if ne.resident_name_table_offset > 0:
        _dump_name_table(
            "Resident name table:",
            _Cursor(exe.image, ne.resident_name_table_offset),
            None,
            out,
        )
    if ne.non_resident_name_table_offset > 0:
        start = ne.non_resident_name_table_offset
        _dump_name_table(
            "Non-resident name table:",
            _Cursor(exe.data, start),
            start + ne.non_resident_name_table_size,
            out,
        )
    if ne.num_module_ref_table_entries > 0:
        _dump_module_references(exe, out)
    if ne.entry_table_size > 0:
        _dump_entries(exe, out)