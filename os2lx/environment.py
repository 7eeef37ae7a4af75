"""The process's environment block and command line as OS/2 programs see them."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple, Union

__all__ = [
    "ProcessInfo",
    "split_cmdline",
    "build_command_line",
    "build_environment_block",
    "process_info",
]

# The block must start a 64k segment for 16-bit code, and fit in it.
ENV_SEGMENT_SIZE = 0x10000
PROC_CMDLINE = "/proc/self/cmdline"

_LOADER_NAME = "lx_loader"
# The replacement PATH entry is formatted into a buffer that holds 253 characters.
_PATH_ENTRY_LIMIT = 253


def split_cmdline(data) -> List[str]:
    """Split NUL-terminated arguments, as found in /proc/self/cmdline.

    Text after the last NUL is not an argument and is dropped.
    """
    return [os.fsdecode(piece) for piece in bytes(data).split(b"\0")[:-1]]


def _quote(arg: str) -> str:
    if " " not in arg and "\t" not in arg:
        return arg
    escaped = "".join("\\" + ch if ch in "\\\n" else ch for ch in arg)
    return f'"{escaped}"'


def build_command_line(argv: Sequence[str]) -> str:
    """The OS/2 command line: program name, NUL, the joined arguments, NUL.

    Arguments holding a space or a tab are quoted, with backslashes and
    newlines inside them escaped by a backslash.
    """
    argv = list(argv)
    if not argv:
        raise ValueError("the command line needs a program name")
    return argv[0] + "\0" + " ".join(_quote(arg) for arg in argv[1:]) + "\0"


def build_environment_block(environ: Mapping[str, str], subprocess: bool = False) -> Tuple[str, str]:
    """Build the ``var=value\\0...\\0`` block and pick out LIBPATH.

    IS_2INE is left out. Unless ``subprocess`` is set, PATH is replaced by
    the value of OS2PATH. Returns the block and LIBPATH ("" if unset).
    """
    # A missing OS2PATH formats the way the C library prints a null string.
    path_entry = ("PATH=" + environ.get("OS2PATH", "(null)"))[:_PATH_ENTRY_LIMIT]
    libpath: Optional[str] = None
    entries: List[str] = []
    for key, value in environ.items():
        entry = f"{key}={value}"
        if key == "PATH":
            if not subprocess:
                entry = path_entry
        elif key == "LIBPATH":
            libpath = value
        elif key == "IS_2INE":
            continue
        entries.append(entry)
    block = "".join(entry + "\0" for entry in entries) + "\0"
    return block, libpath if libpath is not None else ""


@dataclass(frozen=True)
class ProcessInfo:
    """The process information block: ids, command line and environment."""

    pid: int
    ppid: int
    exe_name: str
    command: str
    environment: str
    libpath: str

    @property
    def segment(self) -> bytes:
        """Environment, then the program name, then the command line, as laid out in memory."""
        return os.fsencode(self.environment + self.exe_name + "\0" + self.command)

    @property
    def libpath_len(self) -> int:
        """Length of LIBPATH including its terminator."""
        return len(os.fsencode(self.libpath)) + 1


def process_info(
    cmdline: Union[bytes, Iterable[str], None] = None,
    environ: Optional[Mapping[str, str]] = None,
    subprocess: Optional[bool] = None,
    pid: Optional[int] = None,
    ppid: Optional[int] = None,
) -> ProcessInfo:
    """Build the process information block.

    ``cmdline`` is raw /proc/self/cmdline data or a list of arguments and is
    read from /proc when omitted. When the program is the loader itself its
    name is dropped. ``subprocess`` defaults to whether IS_2INE is set.
    Raises ValueError when there is no program name or the block does not
    fit in one segment.
    """
    if environ is None:
        environ = os.environ
    if cmdline is None:
        cmdline = Path(PROC_CMDLINE).read_bytes()
    if isinstance(cmdline, (bytes, bytearray, memoryview)):
        argv = split_cmdline(cmdline)
    else:
        argv = list(cmdline)

    if argv and argv[0].rsplit("/", 1)[-1] == _LOADER_NAME:
        argv = argv[1:]
    if not argv:
        raise ValueError("the command line needs a program name")

    if subprocess is None:
        subprocess = "IS_2INE" in environ
    block, libpath = build_environment_block(environ, subprocess)
    info = ProcessInfo(
        pid=os.getpid() if pid is None else pid,
        ppid=os.getppid() if ppid is None else ppid,
        exe_name=argv[0],
        command=build_command_line(argv),
        environment=block,
        libpath=libpath,
    )
    if len(info.segment) > ENV_SEGMENT_SIZE:
        raise ValueError(
            f"environment and command line take {len(info.segment)} bytes, "
            f"more than one {ENV_SEGMENT_SIZE}-byte segment"
        )
    return info