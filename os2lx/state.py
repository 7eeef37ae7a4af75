"""Process-wide state shared by the loader and the API implementations."""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from .audio import AudioMixer
from .config import Settings, load_settings
from .drives import DriveTable, prepare_drives
from .environment import ProcessInfo, process_info

__all__ = ["ThreadInfoBlock", "LoaderState", "create_loader_state"]

DEFAULT_STACK_SIZE = 8 * 1024 * 1024
TLS_SLOTS = 32


@dataclass
class ThreadInfoBlock:
    """Per-thread information block, with its TLS slots."""

    tid: int
    stack_base: int
    stack_limit: int
    exception_chain: Optional[object] = None
    version: int = 20
    ordinal: int = 79
    priority: int = 512
    tib2_version: int = 20
    mc_count: int = 0
    mc_force_flag: int = 0
    tls: List[int] = field(default_factory=lambda: [0] * TLS_SLOTS)


def _default_beep_volume() -> float:
    return Settings().beep_volume


@dataclass
class LoaderState:
    """Drives, process block, settings and per-thread data of the process."""

    drives: Optional[DriveTable] = None
    pib: Optional[ProcessInfo] = None
    trace_native: bool = False
    trace_events: bool = False
    beep_volume: float = field(default_factory=_default_beep_volume)
    subprocess: bool = False
    stack_size: int = DEFAULT_STACK_SIZE
    main_tib: Optional[ThreadInfoBlock] = None
    main_tib_selector: int = 0
    audio: AudioMixer = field(default_factory=AudioMixer)
    warnings: List[str] = field(default_factory=list)
    _tls: threading.local = field(
        default_factory=threading.local, init=False, repr=False, compare=False
    )

    @property
    def libpath(self) -> str:
        """LIBPATH as it was at start-up."""
        return self.pib.libpath if self.pib is not None else ""

    def init_tib(self, top_of_stack: int, stack_len: int, tid: int) -> ThreadInfoBlock:
        """A new information block for thread ``tid`` whose stack ends at ``top_of_stack``."""
        return ThreadInfoBlock(tid=tid, stack_base=top_of_stack - stack_len, stack_limit=top_of_stack)

    def set_tib(self, tib: ThreadInfoBlock) -> int:
        """Make ``tib`` the calling thread's block; returns its selector."""
        self._tls.tib = tib
        return 1

    def get_tib(self) -> Optional[ThreadInfoBlock]:
        """The calling thread's block, or None if it has none."""
        return getattr(self._tls, "tib", None)

    def deinit_tib(self, selector: int) -> None:
        """Forget the calling thread's block."""
        self._tls.tib = None

    def make_unix_path(self, os2path: str) -> str:
        """Host path for ``os2path``; native programs already use host paths."""
        return str(os2path)

    def find_selector(self, addr: int, iscode: bool) -> Optional[int]:
        """Selector covering ``addr``; always None, as 16-bit code is not supported."""
        return None

    def alloc_segment(self, iscode: bool) -> Optional[int]:
        """Allocate a 16-bit segment; always None, as 16-bit code is not supported."""
        return None

    def terminate(self, exitcode: int) -> None:
        """End the process with ``exitcode``, letting exit handlers run."""
        raise SystemExit(exitcode)

    def shutdown(self) -> None:
        """Release the audio output, the drive table and the process block."""
        self.audio.clear()
        self.drives = None
        self.pib = None
        self.deinit_tib(self.main_tib_selector)


def _stack_limit() -> int:
    try:
        import resource

        soft, _hard = resource.getrlimit(resource.RLIMIT_STACK)
    except (ImportError, OSError, ValueError):
        return DEFAULT_STACK_SIZE
    return soft if soft >= 0 else DEFAULT_STACK_SIZE


def create_loader_state(
    environ: Optional[Mapping[str, str]] = None,
    cmdline=None,
    cwd=None,
) -> LoaderState:
    """Set up the process state from configuration files, the environment and the command line.

    TRACE_NATIVE and TRACE_EVENTS in the environment override the
    configuration; IS_2INE marks the process as started by another one.
    """
    if environ is None:
        environ = os.environ
    settings = load_settings(environ)
    drives = prepare_drives(settings.disks, cwd)
    subprocess = "IS_2INE" in environ
    stack_size = _stack_limit()

    state = LoaderState(
        drives=drives,
        trace_native=settings.trace_native or "TRACE_NATIVE" in environ,
        trace_events=settings.trace_events or "TRACE_EVENTS" in environ,
        beep_volume=settings.beep_volume,
        subprocess=subprocess,
        stack_size=stack_size,
        warnings=list(settings.warnings) + list(drives.warnings),
    )
    # No real stack address is available; the main stack is described from zero.
    state.main_tib = state.init_tib(stack_size, stack_size, 0)
    state.main_tib_selector = state.set_tib(state.main_tib)
    state.pib = process_info(cmdline, environ, subprocess)
    return state