"""Command that prints the structure of an OS/2 executable."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from .exe import ExeFormatError, load_executable
from .lxdump import UnsupportedFixupError, dump_lx
from .nedump import dump_ne

__all__ = ["dump_executable", "main"]


def dump_executable(name, data, out: TextIO, err: TextIO) -> bool:
    """Print ``name`` and a dump of the executable in ``data`` to ``out``.

    Returns False, after writing the reason to ``err``, when ``data`` is not
    an OS/2 executable. Errors found while dumping the tables propagate.
    """
    print(name, file=out)
    try:
        exe = load_executable(data)
    except ExeFormatError as exc:
        print(exc, file=err)
        return False
    if exe.is_lx:
        dump_lx(exe, out, err)
    else:
        dump_ne(exe, out)
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Dump the executable named on the command line; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)
    if len(argv) != 1:
        prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "lx_dump"
        print(f"USAGE: {prog} <program.exe>", file=sys.stderr)
        return 1

    path = argv[0]
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        print(f"can't open '{path}: {exc.strerror or exc}'", file=sys.stderr)
        return 2

    try:
        dump_executable(path, data, sys.stdout, sys.stderr)
    except UnsupportedFixupError:
        sys.stdout.flush()
        return 1
    except ExeFormatError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())