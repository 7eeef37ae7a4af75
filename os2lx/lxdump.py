"""Human-readable dump of a 32-bit LX executable's header and tables."""

from __future__ import annotations

import struct
from functools import partial
from typing import List, TextIO, Tuple

from .exe import Executable, ExeFormatError
from .headers import LxObjectPageTableEntry, LxObjectTableEntry, LxResourceTableEntry

__all__ = [
    "UnsupportedFixupError",
    "lx_module_flag_names",
    "lx_object_flag_names",
    "dump_lx",
]


class UnsupportedFixupError(ExeFormatError):
    """A fixup record uses a target type the dump cannot decode."""


_MODULE_FLAGS: Tuple[Tuple[int, str], ...] = (
    (0x4, "LIBINIT"),
    (0x10, "INTERNALFIXUPS"),
    (0x20, "EXTERNALFIXUPS"),
    (0x100, "PMINCOMPAT"),
    (0x200, "PMCOMPAT"),
    (0x300, "USESPM"),
    (0x2000, "NOTLOADABLE"),
    (0x8000, "LIBRARYMODULE"),
    (0x18000, "PROTMEMLIBRARYMODULE"),
    (0x20000, "PHYSDRIVERMODULE"),
    (0x28000, "VIRTDRIVERMODULE"),
    (0x40000000, "LIBTERM"),
)

_OBJECT_FLAGS: Tuple[Tuple[int, str], ...] = (
    (0x1, "READ"),
    (0x2, "WRITE"),
    (0x4, "EXEC"),
    (0x8, "RESOURCE"),
    (0x10, "DISCARD"),
    (0x20, "SHARED"),
    (0x40, "PRELOAD"),
    (0x80, "INVALID"),
    (0x100, "ZEROFILL"),
    (0x200, "RESIDENT"),
    (0x300, "RESIDENT+CONTIG"),
    (0x400, "RESIDENT+LONGLOCK"),
    (0x800, "SYSRESERVED"),
    (0x1000, "16:16"),
    (0x2000, "BIG"),
    (0x4000, "CONFORM"),
    (0x8000, "IOPL"),
)

_PAGE_FLAGS = {
    0x0: "PHYSICAL",
    0x1: "ITERATED",
    0x2: "INVALID",
    0x3: "ZEROFILL",
    0x4: "RANGE",
    0x5: "COMPRESSED",
}

_SOURCE_TYPES = {
    0x00: "Byte fixup",
    0x02: "16-bit selector fixup",
    0x03: "16:16 pointer fixup",
    0x05: "16-bit offset fixup",
    0x06: "16:32 pointer fixup",
    0x07: "32-bit offset fixup",
    0x08: "32-bit self-relative offset fixup",
}

_TARGET_KINDS = ("INTERNAL", "IMPORTBYORDINAL", "IMPORTBYNAME", "INTERNALVIAENTRY")

_TARGET_FLAGS: Tuple[Tuple[int, str], ...] = (
    (0x4, "ADDITIVE"),
    (0x8, "INTERNALCHAINING"),
    (0x10, "32BITTARGETOFFSET"),
    (0x20, "32BITADDITIVE"),
    (0x40, "16BITORDINAL"),
    (0x80, "8BITORDINAL"),
)

_BUNDLE_TYPES = {1: "16BIT", 2: "286CALLGATE", 3: "32BIT"}

# (label, header field, shown in hex)
_HEADER_FIELDS: Tuple[Tuple[str, str, bool], ...] = (
    ("Number of pages in module", "module_num_pages", False),
    ("EIP Object number", "eip_object", False),
    ("EIP", "eip", True),
    ("ESP Object number", "esp_object", False),
    ("ESP", "esp", True),
    ("Page size", "page_size", False),
    ("Page offset shift", "page_offset_shift", False),
    ("Fixup section size", "fixup_section_size", False),
    ("Fixup section checksum", "fixup_section_checksum", True),
    ("Loader section size", "loader_section_size", False),
    ("Loader section checksum", "loader_section_checksum", True),
    ("Object table offset", "object_table_offset", False),
    ("Number of objects in module", "module_num_objects", False),
    ("Object page table offset", "object_page_table_offset", False),
    ("Object iterated pages offset", "object_iter_pages_offset", False),
    ("Resource table offset", "resource_table_offset", False),
    ("Number of resource table entries", "num_resource_table_entries", False),
    ("Resident name table offset", "resident_name_table_offset", False),
    ("Entry table offset", "entry_table_offset", False),
    ("Module directives offset", "module_directives_offset", False),
    ("Number of module directives", "num_module_directives", False),
    ("Fixup page table offset", "fixup_page_table_offset", False),
    ("Fixup record table offset", "fixup_record_table_offset", False),
    ("Import module table offset", "import_module_table_offset", False),
    ("Number of inport module entries", "num_import_mod_entries", False),
    ("Import procedure name table offset", "import_proc_table_offset", False),
    ("Per-page checksum offset", "per_page_checksum_offset", False),
    ("Data pages offset", "data_pages_offset", False),
    ("Number of preload pages", "num_preload_pages", False),
    ("Non-resident name table offset", "non_resident_name_table_offset", False),
    ("Non-resident name table length", "non_resident_name_table_len", False),
    ("Non-resident name table checksum", "non_resident_name_table_checksum", True),
    ("Auto data segment object number", "auto_ds_object_num", False),
    ("Debug info offset", "debug_info_offset", False),
    ("Debug info length", "debug_info_len", False),
    ("Number of instance pages in preload section", "num_instance_preload", False),
    ("Number of instance pages in demand section", "num_instance_demand", False),
    ("Heap size", "heapsize", False),
)


def _names(flags: int, table) -> List[str]:
    return [name for mask, name in table if flags & mask]


def lx_module_flag_names(flags) -> List[str]:
    """Names of the LX module flags that ``flags`` touches, in header order."""
    return _names(flags, _MODULE_FLAGS)


def lx_object_flag_names(flags) -> List[str]:
    """Names of the LX object flags that ``flags`` touches, in table order."""
    return _names(flags, _OBJECT_FLAGS)


class _Cursor:
    """Sequential little-endian reader that reports truncation as a format error."""

    def __init__(self, data: bytes, pos: int) -> None:
        self.data = data
        self.pos = pos

    def _check(self, size: int) -> None:
        if self.pos < 0 or self.pos + size > len(self.data):
            raise ExeFormatError(
                f"truncated executable: need {size} bytes at offset {self.pos}"
            )

    def _take(self, fmt: str) -> int:
        size = struct.calcsize(fmt)
        self._check(size)
        (value,) = struct.unpack_from(fmt, self.data, self.pos)
        self.pos += size
        return value

    def peek(self) -> int:
        self._check(1)
        return self.data[self.pos]

    def u8(self) -> int:
        return self._take("<B")

    def u16(self) -> int:
        return self._take("<H")

    def s16(self) -> int:
        return self._take("<h")

    def u32(self) -> int:
        return self._take("<I")

    def raw(self, size: int) -> bytes:
        self._check(size)
        chunk = self.data[self.pos:self.pos + size]
        self.pos += size
        return chunk


def _record(cls, data: bytes, offset: int):
    try:
        return cls.from_bytes(data, offset)
    except ValueError as exc:
        raise ExeFormatError(f"truncated executable: {exc}") from None


def _pascal_string(cur: _Cursor, mask: int = 0xFF) -> str:
    length = cur.u8() & mask
    return cur.raw(length).decode("latin-1")


def _dump_fixup(image: bytes, lx, cur: _Cursor, number: int, out: TextIO) -> None:
    p = partial(print, file=out)
    p(f"Fixup Record #{number}:")
    srctype = cur.u8()
    line = "Source type: "
    if srctype & 0x10:
        line += "[FIXUPTOALIAS] "
    if srctype & 0x20:
        line += "[SOURCELIST] "
    line += _SOURCE_TYPES.get(srctype & 0xF, "(undefined fixup)")
    p(line)

    flags = cur.u8()
    kind = flags & 0x3
    p("Target flags: " + " ".join([_TARGET_KINDS[kind]] + _names(flags, _TARGET_FLAGS)))

    srclist_count = 0
    if srctype & 0x20:
        srclist_count = cur.u8()
        p(f"Source offset list count: {srclist_count}")
    else:
        p(f"Source offset: {cur.s16()}")
    p()

    def module_ordinal() -> int:
        return cur.u16() if flags & 0x40 else cur.u8()

    def additive() -> int:
        if not flags & 0x4:
            return 0
        return cur.u32() if flags & 0x20 else cur.u16()

    if kind == 0:
        p("Internal fixup record:")
        p(f"Object: {module_ordinal()}")
        if (srctype & 0xF) == 0x2:
            p("Target offset: [not used for 16-bit selector fixups]")
        elif flags & 0x10:
            p(f"Target offset: {cur.u32()}")
        else:
            p(f"Target offset: {cur.u16()}")
    elif kind == 1:
        p("Import by ordinal fixup record:")
        p(f"Module ordinal: {module_ordinal()}")
        if flags & 0x80:
            ordinal = cur.u8()
        elif flags & 0x10:
            ordinal = cur.u32()
        else:
            ordinal = cur.u16()
        p(f"Import ordinal: {ordinal}")
        p(f"Additive: {additive()}")
    elif kind == 2:
        p("Import by name fixup record:")
        p(f"Module ordinal: {module_ordinal()}")
        name_offset = cur.u32() if flags & 0x10 else cur.u16()
        name = _pascal_string(
            _Cursor(image, lx.import_proc_table_offset + name_offset), 0x7F
        )
        p(f"Name offset: {name_offset} ('{name}')")
        p(f"Additive: {additive()}")
    else:
        p("Internal entry table fixup record:")
        p("WRITE ME")
        raise UnsupportedFixupError(
            "internal entry table fixup records are not supported"
        )

    if srctype & 0x20:
        offsets = "".join(f" {cur.s16()}" for _ in range(srclist_count))
        out.write(f"Source offset list:{offsets}")
    out.write("\n\n")


def _dump_objects(image: bytes, lx, out: TextIO) -> None:
    p = partial(print, file=out)
    p()
    p(f"Object table ({lx.module_num_objects} entries):")
    for i in range(lx.module_num_objects):
        obj = _record(
            LxObjectTableEntry,
            image,
            lx.object_table_offset + i * LxObjectTableEntry.SIZE,
        )
        p(f"Object #{i + 1}:")
        p(f"Virtual size: {obj.virtual_size}")
        p(f"Relocation base address: 0x{obj.reloc_base_addr:X}")
        p("Object flags:" + "".join(f" {n}" for n in lx_object_flag_names(obj.object_flags)))
        p(f"Page table index: {obj.page_table_index}")
        p(f"Number of page table entries: {obj.num_page_table_entries}")
        p(f"System-reserved field: {obj.reserved}")
        p("Object pages:")

        first = obj.page_table_index - 1
        for n in range(obj.num_page_table_entries):
            index = first + n
            page = _record(
                LxObjectPageTableEntry,
                image,
                lx.object_page_table_offset + index * LxObjectPageTableEntry.SIZE,
            )
            p(f"Object Page #{n + obj.page_table_index}:")
            p(f"Page data offset: 0x{page.page_data_offset:X}")
            p(f"Page data size: {page.data_size}")
            p(f"Page flags: ({page.flags}) {_PAGE_FLAGS.get(page.flags, 'UNKNOWN')}")

            bounds = _Cursor(image, lx.fixup_page_table_offset + index * 4)
            fixup_start = bounds.u32()
            fixup_len = (bounds.u32() - fixup_start) & 0xFFFFFFFF
            p(f"Page's fixup record offset: {fixup_start}")
            p(f"Page's fixup record size: {fixup_len}")
            p("Fixup records:")
            cur = _Cursor(image, lx.fixup_record_table_offset + fixup_start)
            end = cur.pos + fixup_len
            number = 1
            while cur.pos < end:
                _dump_fixup(image, lx, cur, number, out)
                number += 1
            p()


def _dump_entry_table(image: bytes, lx, out: TextIO) -> None:
    p = partial(print, file=out)
    p("Entry table:")
    cur = _Cursor(image, lx.entry_table_offset)
    bundle_id = 1
    ordinal = 1
    while cur.peek():
        count = cur.u8()
        type_byte = cur.u8()
        bundle_type = type_byte & 0x7F
        prefix = f"Bundle {bundle_id} ({count} entries): "
        if type_byte & 0x80:
            prefix += "[PARAMTYPES] "
        bundle_id += 1

        if bundle_type == 0:
            p(prefix + "UNUSED")
            p(f" {count} unused entries.")
            p()
            ordinal += count
        elif bundle_type in _BUNDLE_TYPES:
            p(prefix + _BUNDLE_TYPES[bundle_type])
            p(f" Object number: {cur.u16()}")
            for _ in range(count):
                p(f" {ordinal}:")
                ordinal += 1
                flags = cur.u8()
                p(" Flags:" + (" EXPORTED" if flags & 0x1 else ""))
                p(f" Parameter word count: {(flags & 0xF8) >> 3}")
                offset = cur.u32() if bundle_type == 3 else cur.u16()
                p(f" Offset: {offset}")
                if bundle_type == 2:
                    p(f" Callgate selector: {cur.u16()}")
                p()
        elif bundle_type == 4:
            # Forwarder bundles are announced but their entries are not decoded.
            p(prefix + "FORWARDER")
        else:
            p(prefix + f"UNKNOWN ({bundle_type})")
            p()
    p()


def _dump_name_table(cur: _Cursor, end, out: TextIO) -> None:
    index = 0
    while (end is None or cur.pos < end) and cur.peek():
        name = _pascal_string(cur)
        ordinal = cur.u16()
        print(f"{index}: '{name}' (ordinal {ordinal})", file=out)
        index += 1


def dump_lx(exe: Executable, out: TextIO, err: TextIO) -> None:
    """Write a description of the LX executable ``exe`` to ``out``.

    Format warnings go to ``err``. Raises ValueError if ``exe`` is not LX,
    ExeFormatError if a table runs past the end of the file, and
    UnsupportedFixupError for internal-entry-table fixups.
    """
    if not exe.is_lx:
        raise ValueError("not an LX executable")
    lx = exe.header
    image = exe.image
    p = partial(print, file=out)

    p("LX (32-bit) executable.")
    p(f"module version: {lx.module_version}")
    p("module flags:" + "".join(f" {n}" for n in lx_module_flag_names(lx.module_flags)))
    for label, field, as_hex in _HEADER_FIELDS:
        value = getattr(lx, field)
        p(f"{label}: 0x{value:X}" if as_hex else f"{label}: {value}")

    # Required as of OS/2 2.0.
    if lx.object_iter_pages_offset != 0 and lx.object_iter_pages_offset != lx.data_pages_offset:
        print(
            "Object iterator pages offset must be 0 or equal to Data pages offset",
            file=err,
        )

    _dump_objects(image, lx, out)

    p()
    p(f"Resource table ({lx.num_resource_table_entries} entries):")
    for i in range(lx.num_resource_table_entries):
        rsrc = _record(
            LxResourceTableEntry,
            image,
            lx.resource_table_offset + i * LxResourceTableEntry.SIZE,
        )
        p(f"{i}:")
        p(f"Type ID: {rsrc.type_id}")
        p(f"Name ID: {rsrc.name_id}")
        p(f"Resource size: {rsrc.resource_size}")
        p(f"Object: {rsrc.object}")
        p(f"Offset: 0x{rsrc.offset:X}")
        p()
    p()

    _dump_entry_table(image, lx, out)

    p(f"Module directives ({lx.num_module_directives} entries):")
    cur = _Cursor(image, lx.module_directives_offset)
    for i in range(lx.num_module_directives):
        p(f"{i + 1}:")
        p(f"Directive ID: {cur.u16()}")
        p(f"Data size: {cur.u16()}")
        p(f"Data offset: {cur.u32()}")
        p()
    p()

    if lx.per_page_checksum_offset == 0:
        p("No per-page checksums available.")
    else:
        p("!!! FIXME: look at per-page checksums!")
    p()

    p(f"Import modules ({lx.num_import_mod_entries} entries):")
    cur = _Cursor(image, lx.import_module_table_offset)
    for i in range(lx.num_import_mod_entries):
        p(f"{i + 1}: {_pascal_string(cur)}")

    p("Resident name table:")
    _dump_name_table(_Cursor(image, lx.resident_name_table_offset), None, out)

    p("Non-resident name table:")
    start = lx.non_resident_name_table_offset
    _dump_name_table(
        _Cursor(exe.data, start), start + lx.non_resident_name_table_len, out
    )