"""Mapping of OS/2 drive letters onto the host filesystem."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

__all__ = ["DriveTable", "prepare_drives"]

NUM_DISKS = 26
_DRIVE_C = 2


@dataclass
class DriveTable:
    """Mounted drives, their current directories and the current drive.

    ``current_disk`` counts from 1 (1 is A:) and bit ``i`` of ``diskmap``
    is set when drive ``i`` (0 is A:) was mounted from the configuration.
    """

    disks: List[Optional[str]]
    current_dir: List[Optional[str]]
    current_disk: int
    diskmap: int
    warnings: List[str] = field(default_factory=list)

    @property
    def current_letter(self) -> str:
        return chr(ord("A") + self.current_disk - 1)

    def mount_point(self, letter: str) -> Optional[str]:
        """Host directory behind drive ``letter``, or None if it is unmounted."""
        idx = ord(letter.upper()) - ord("A")
        if not 0 <= idx < NUM_DISKS:
            raise ValueError(f"invalid drive letter {letter!r}")
        return self.disks[idx]


def _under(mount: str, cwd: str) -> bool:
    if not cwd.startswith(mount):
        return False
    return mount.endswith("/") or len(cwd) == len(mount) or cwd[len(mount)] == "/"


def _os2_relative(path: str) -> str:
    return path.replace("/", "\\")


def prepare_drives(disks: Sequence[Optional[str]], cwd=None) -> DriveTable:
    """Resolve configured mount points and work out each drive's current directory.

    ``disks`` holds up to 26 host paths, A: first, None for unmounted drives.
    ``cwd`` defaults to the process's working directory. Mount points that
    cannot be resolved are dropped with a warning. With nothing mounted, the
    host root becomes C:.
    """
    if len(disks) > NUM_DISKS:
        raise ValueError(f"at most {NUM_DISKS} drives, got {len(disks)}")
    slots: List[Optional[str]] = list(disks) + [None] * (NUM_DISKS - len(disks))
    current: List[Optional[str]] = [None] * NUM_DISKS
    warnings: List[str] = []

    use_process_cwd = cwd is None
    try:
        cwd = os.path.realpath(os.getcwd() if use_process_cwd else os.fspath(cwd), strict=True)
    except OSError as exc:
        warnings.append(f"Can't get cwd ({exc.strerror or exc}), defaulting to \"/\".")
        cwd = "/"
        if use_process_cwd:
            os.chdir(cwd)

    diskmap = 0
    lowest_mounted = 0
    lowest_cwd = 0
    for i, path in enumerate(slots):
        if path is None:
            continue
        try:
            resolved = os.path.realpath(path, strict=True)
        except OSError as exc:
            letter = chr(ord("A") + i)
            warnings.append(
                f"Can't realpath \"{path}\" ({exc.strerror or exc}), not mounting {letter}:\\"
            )
            slots[i] = None
            continue

        # Prefer C: and later; A: or B: only when nothing else qualifies.
        if lowest_mounted < 3:
            lowest_mounted = i + 1
        diskmap |= 1 << i

        if _under(resolved, cwd):
            rest = cwd[len(resolved):]
            if rest.startswith("/"):
                rest = rest[1:]
            current[i] = _os2_relative(rest)
            if lowest_cwd < 3:
                lowest_cwd = i + 1
        else:
            current[i] = ""

    if not lowest_mounted:
        slots[_DRIVE_C] = "/"
        current[_DRIVE_C] = _os2_relative(cwd[1:])
        current_disk = _DRIVE_C + 1
    elif not lowest_cwd:
        current_disk = lowest_mounted
    else:
        current_disk = lowest_cwd

    return DriveTable(slots, current, current_disk, diskmap, warnings)