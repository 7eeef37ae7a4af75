"""Loading of the emulator's configuration files."""

from __future__ import annotations

import math
import os
import re
import stat
import struct
from dataclasses import dataclass, field
from typing import Iterable, List, Mapping, Optional, TextIO

__all__ = [
    "Settings",
    "parse_bool",
    "parse_float",
    "config_paths",
    "load_settings",
]

SYSTEM_CONFIG = "/etc/2ine.cfg"
NUM_DISKS = 26

_SPACE = " \t\r\n"
_TRUE_WORDS = ("1", "yes", "y", "true", "t", "on")
_FALSE_WORDS = ("0", "no", "n", "false", "f", "off")

_LINE = re.compile(r"([A-Za-z_]*)\.([A-Za-z_]*)(?:=|[ \t\r\n]+=)[ \t\r\n]*(.*)", re.DOTALL)
_FLOAT_PREFIX = re.compile(
    r"[ \t\r\n\f\v]*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        raise ValueError(f"{value!r} is out of range for a float") from None


def parse_bool(value: str) -> bool:
    """Interpret a configuration truth value; raise ValueError if it is none."""
    lowered = value.lower()
    if lowered in _TRUE_WORDS:
        return True
    if lowered in _FALSE_WORDS:
        return False
    raise ValueError(f'"{value}" is not valid for this setting. Try 1 or 0.')


def parse_float(value: str) -> float:
    """Read the leading number of ``value`` as a single-precision float.

    Text without a leading number reads as 0.0. Raises ValueError when the
    number is too large for a single-precision float.
    """
    match = _FLOAT_PREFIX.match(value)
    if match is None:
        return 0.0
    text = match.group(1)
    number = float(text)
    if math.isinf(number) and "inf" not in text.lower():
        raise ValueError(f'"{value}" is not valid for this setting. Try a number.')
    try:
        return _to_float32(number)
    except ValueError:
        raise ValueError(f'"{value}" is not valid for this setting. Try a number.') from None


@dataclass
class Settings:
    """Settings read from configuration files, with their defaults."""

    trace_native: bool = False
    trace_events: bool = False
    # The PC speaker emulated by some virtual machines is very quiet.
    beep_volume: float = field(default_factory=lambda: _to_float32(0.05))
    disks: List[Optional[str]] = field(default_factory=lambda: [None] * NUM_DISKS)
    warnings: List[str] = field(default_factory=list)
    err: Optional[TextIO] = field(default=None, repr=False, compare=False)

    def _warn(self, fname: str, lineno: int, message: str) -> None:
        text = f"[{fname}:{lineno}] {message}"
        self.warnings.append(text)
        if self.err is not None:
            print(f"config warning: {text}", file=self.err)

    def load(self, path) -> None:
        """Apply the configuration file at ``path``; a missing file is ignored."""
        try:
            with open(path, "r", encoding="utf-8", errors="surrogateescape", newline="") as io:
                self.load_lines(io, os.fspath(path))
        except OSError:
            return

    def load_lines(self, lines: Iterable[str], fname="<config>") -> None:
        """Apply configuration lines; ``fname`` names their source in warnings."""
        for lineno, line in enumerate(lines, start=1):
            text = line.rstrip(_SPACE).lstrip(_SPACE)
            if not text or text[0] in ";#" or text.startswith("//"):
                continue
            match = _LINE.fullmatch(text)
            if match is None:
                self._warn(fname, lineno, "Invalid configuration line")
                continue
            category, var, val = match.groups()
            self._process_line(fname, lineno, category, var, val)

    def _process_line(self, fname: str, lineno: int, category: str, var: str, val: str) -> None:
        if not category or not var:
            self._warn(fname, lineno, "Invalid configuration line")
        elif category == "mountpoint":
            self._process_mount_point(fname, lineno, var, val)
        elif category == "system":
            self._process_system(fname, lineno, var, val)
        else:
            self._warn(fname, lineno, f'Unknown category "{category}"')

    def _process_system(self, fname: str, lineno: int, var: str, val: str) -> None:
        try:
            if var == "trace_native":
                self.trace_native = parse_bool(val)
            elif var == "trace_events":
                self.trace_events = parse_bool(val)
            elif var == "beep_volume":
                self.beep_volume = parse_float(val)
            else:
                self._warn(fname, lineno, f"Unknown variable system.{var}")
        except ValueError as exc:
            self._warn(fname, lineno, str(exc))

    def _process_mount_point(self, fname: str, lineno: int, var: str, val: str) -> None:
        letter = var[0].upper()
        if len(var) != 1 or not ("A" <= letter <= "Z"):
            self._warn(fname, lineno, f"Invalid disk \"{var}\" (must be between 'A' and 'Z')")
            return

        idx = ord(letter) - ord("A")
        self.disks[idx] = None  # in case this overrides an earlier line
        if not val:  # an empty value means "don't mount"
            return

        try:
            info = os.stat(val)
        except OSError as exc:
            reason = exc.strerror or str(exc)
            self._warn(fname, lineno, f'Path "{val}" for drive {letter}:\\ isn\'t accessible: {reason}')
            return
        if not stat.S_ISDIR(info.st_mode):
            self._warn(fname, lineno, f'Path "{val}" for drive {letter}:\\ isn\'t a directory')
            return
        self.disks[idx] = val if val.endswith("/") else val + "/"


def config_paths(environ: Optional[Mapping[str, str]] = None) -> List[str]:
    """Configuration files to read, in order; later files override earlier ones."""
    if environ is None:
        environ = os.environ
    paths = [SYSTEM_CONFIG]
    xdg = environ.get("XDG_CONFIG_HOME")
    if xdg is not None:
        paths.append(f"{xdg}/2ine/2ine.cfg")
    else:
        home = environ.get("HOME")
        if home is not None:
            paths.append(f"{home}/.config/2ine/2ine.cfg")
    return paths


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Read the system and the user's configuration files into new Settings."""
    settings = Settings()
    for path in config_paths(environ):
        settings.load(path)
    return settings