"""Recognising and validating OS/2 LX and NE executables."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union

from .headers import LxHeader, NeHeader

__all__ = ["ExeFormatError", "ExeKind", "Executable", "load_executable", "read_executable"]

_NEW_HEADER_POINTER = 0x3C
_NOT_OS2 = "not an OS/2 EXE"


class ExeFormatError(ValueError):
    """The data is not an OS/2 executable this package understands."""


class ExeKind(Enum):
    """Kind of OS/2 executable."""

    LX = "LX"
    NE = "NE"


@dataclass(frozen=True)
class Executable:
    """A validated OS/2 executable: the whole file and its decoded header."""

    data: bytes
    header_offset: int
    kind: ExeKind
    header: Union[LxHeader, NeHeader]

    @property
    def is_lx(self) -> bool:
        return self.kind is ExeKind.LX

    @property
    def image(self) -> bytes:
        """The file from the LX or NE header onwards, past the DOS stub."""
        return self.data[self.header_offset:]


def _check_lx(data: bytes, offset: int) -> LxHeader:
    if LxHeader.SIZE >= len(data) - offset:
        raise ExeFormatError(_NOT_OS2)
    lx = LxHeader.from_bytes(data, offset)
    if lx.byte_order != 0 or lx.word_order != 0:
        raise ExeFormatError("Program is not little-endian!")
    if lx.lx_version != 0:
        raise ExeFormatError(f"Program is unknown LX EXE version ({lx.lx_version})")
    if lx.cpu_type > 3:  # 1==286, 2==386, 3==486
        raise ExeFormatError(f"Program needs unknown CPU type ({lx.cpu_type})")
    if lx.os_type != 1:  # 1==OS/2
        raise ExeFormatError(f"Program needs unknown OS type ({lx.os_type})")
    if lx.page_size != 4096:
        raise ExeFormatError(f"Program page size isn't 4096 ({lx.page_size})")
    return lx


def _check_ne(data: bytes, offset: int) -> NeHeader:
    if NeHeader.SIZE >= len(data) - offset:
        raise ExeFormatError(_NOT_OS2)
    ne = NeHeader.from_bytes(data, offset)
    if ne.exe_type > 1:
        raise ExeFormatError(
            f"Not an OS/2 NE EXE file (exe_type is {ne.exe_type}, not 1)"
        )
    return ne


def load_executable(data) -> Executable:
    """Validate ``data`` as an OS/2 executable and decode its header.

    Raises ExeFormatError with a description of the first problem found.
    """
    data = bytes(data)
    if len(data) < _NEW_HEADER_POINTER + 4:
        raise ExeFormatError(_NOT_OS2)
    (offset,) = struct.unpack_from("<I", data, _NEW_HEADER_POINTER)
    if offset + 2 > len(data):
        raise ExeFormatError(_NOT_OS2)

    magic = data[offset:offset + 2]
    if magic == b"LX":
        return Executable(data, offset, ExeKind.LX, _check_lx(data, offset))
    if magic == b"NE":
        return Executable(data, offset, ExeKind.NE, _check_ne(data, offset))
    raise ExeFormatError(_NOT_OS2)


def read_executable(path) -> Executable:
    """Read the file at ``path`` and validate it as an OS/2 executable."""
    return load_executable(Path(path).read_bytes())