"""Binary layouts of the LX and NE executable headers and their table entries.

Every record is little-endian and packed, exactly as it lies in the file.
"""

from __future__ import annotations

import struct
from dataclasses import astuple, dataclass
from typing import ClassVar, Type, TypeVar

__all__ = [
    "LxHeader",
    "NeHeader",
    "LxObjectTableEntry",
    "LxObjectPageTableEntry",
    "LxResourceTableEntry",
    "NeSegmentTableEntry",
]

_R = TypeVar("_R", bound="_Record")


def _unpack(cls: Type[_R], data, offset: int) -> _R:
    """Decode one ``cls`` record from ``data`` at ``offset``.

    Raises ValueError if the record does not fit in the data.
    """
    size = cls._STRUCT.size
    if offset < 0 or len(data) < offset + size:
        available = max(len(data) - offset, 0)
        raise ValueError(
            f"{cls.__name__} needs {size} bytes at offset {offset}, "
            f"only {available} available"
        )
    return cls(*cls._STRUCT.unpack_from(data, offset))


class _Record:
    """Shared encoding for fixed-size packed records."""

    _STRUCT: ClassVar[struct.Struct]
    SIZE: ClassVar[int]

    def to_bytes(self) -> bytes:
        """Encode the record in its on-disk form."""
        return self._STRUCT.pack(*astuple(self))


@dataclass(frozen=True)
class LxHeader(_Record):
    """Header of a 32-bit LX module."""

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<4BIHH40I")
    SIZE: ClassVar[int] = _STRUCT.size

    magic_l: int = 0
    magic_x: int = 0
    byte_order: int = 0
    word_order: int = 0
    lx_version: int = 0
    cpu_type: int = 0
    os_type: int = 0
    module_version: int = 0
    module_flags: int = 0
    module_num_pages: int = 0
    eip_object: int = 0
    eip: int = 0
    esp_object: int = 0
    esp: int = 0
    page_size: int = 0
    page_offset_shift: int = 0
    fixup_section_size: int = 0
    fixup_section_checksum: int = 0
    loader_section_size: int = 0
    loader_section_checksum: int = 0
    object_table_offset: int = 0
    module_num_objects: int = 0
    object_page_table_offset: int = 0
    object_iter_pages_offset: int = 0
    resource_table_offset: int = 0
    num_resource_table_entries: int = 0
    resident_name_table_offset: int = 0
    entry_table_offset: int = 0
    module_directives_offset: int = 0
    num_module_directives: int = 0
    fixup_page_table_offset: int = 0
    fixup_record_table_offset: int = 0
    import_module_table_offset: int = 0
    num_import_mod_entries: int = 0
    import_proc_table_offset: int = 0
    per_page_checksum_offset: int = 0
    data_pages_offset: int = 0
    num_preload_pages: int = 0
    non_resident_name_table_offset: int = 0
    non_resident_name_table_len: int = 0
    non_resident_name_table_checksum: int = 0
    auto_ds_object_num: int = 0
    debug_info_offset: int = 0
    debug_info_len: int = 0
    num_instance_preload: int = 0
    num_instance_demand: int = 0
    heapsize: int = 0

    @classmethod
    def from_bytes(cls, data, offset=0) -> "LxHeader":
        """Decode an LX header from ``data`` at ``offset``."""
        return _unpack(cls, data, offset)


@dataclass(frozen=True)
class NeHeader(_Record):
    """Header of a 16-bit NE module."""

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<4B2HI16HI3H2B8s")
    SIZE: ClassVar[int] = _STRUCT.size

    magic_n: int = 0
    magic_e: int = 0
    linker_version: int = 0
    linker_revision: int = 0
    entry_table_offset: int = 0
    entry_table_size: int = 0
    crc32: int = 0
    module_flags: int = 0
    auto_data_segment: int = 0
    dynamic_heap_size: int = 0
    stack_size: int = 0
    reg_ip: int = 0
    reg_cs: int = 0
    reg_sp: int = 0
    reg_ss: int = 0
    num_segment_table_entries: int = 0
    num_module_ref_table_entries: int = 0
    non_resident_name_table_size: int = 0
    segment_table_offset: int = 0
    resource_table_offset: int = 0
    resident_name_table_offset: int = 0
    module_reference_table_offset: int = 0
    imported_names_table_offset: int = 0
    non_resident_name_table_offset: int = 0
    num_movable_entries: int = 0
    sector_alignment_shift_count: int = 0
    num_resource_entries: int = 0
    exe_type: int = 0
    os2_exe_flags: int = 0
    reserved: bytes = bytes(8)

    @classmethod
    def from_bytes(cls, data, offset=0) -> "NeHeader":
        """Decode an NE header from ``data`` at ``offset``."""
        return _unpack(cls, data, offset)


@dataclass(frozen=True)
class LxObjectTableEntry(_Record):
    """One object (section) of an LX module."""

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<6I")
    SIZE: ClassVar[int] = _STRUCT.size

    virtual_size: int = 0
    reloc_base_addr: int = 0
    object_flags: int = 0
    page_table_index: int = 0
    num_page_table_entries: int = 0
    reserved: int = 0

    @classmethod
    def from_bytes(cls, data, offset=0) -> "LxObjectTableEntry":
        """Decode an object table entry from ``data`` at ``offset``."""
        return _unpack(cls, data, offset)


@dataclass(frozen=True)
class LxObjectPageTableEntry(_Record):
    """One page of an LX object."""

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<IHH")
    SIZE: ClassVar[int] = _STRUCT.size

    page_data_offset: int = 0
    data_size: int = 0
    flags: int = 0

    @classmethod
    def from_bytes(cls, data, offset=0) -> "LxObjectPageTableEntry":
        """Decode an object page table entry from ``data`` at ``offset``."""
        return _unpack(cls, data, offset)


@dataclass(frozen=True)
class LxResourceTableEntry(_Record):
    """One entry of the LX resource table."""

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<HHIHI")
    SIZE: ClassVar[int] = _STRUCT.size

    type_id: int = 0
    name_id: int = 0
    resource_size: int = 0
    object: int = 0
    offset: int = 0

    @classmethod
    def from_bytes(cls, data, offset=0) -> "LxResourceTableEntry":
        """Decode a resource table entry from ``data`` at ``offset``."""
        return _unpack(cls, data, offset)


@dataclass(frozen=True)
class NeSegmentTableEntry(_Record):
    """One entry of the NE segment table."""

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<4H")
    SIZE: ClassVar[int] = _STRUCT.size

    offset: int = 0
    size: int = 0
    segment_flags: int = 0
    minimum_allocation: int = 0

    @classmethod
    def from_bytes(cls, data, offset=0) -> "NeSegmentTableEntry":
        """Decode a segment table entry from ``data`` at ``offset``."""
        return _unpack(cls, data, offset)