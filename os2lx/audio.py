"""A single shared mono output stream that several sound generators feed."""

from __future__ import annotations

import threading
import time
from typing import Callable, List, Optional

__all__ = ["AudioMixer"]

DEFAULT_FREQUENCY = 48000
DEFAULT_SAMPLES = 1024
IDLE_TIMEOUT = 5.0

# A generator adds its samples into the buffer and returns False once it is done.
Generator = Callable[[List[float], int], bool]


class _Entry:
    __slots__ = ("fn",)

    def __init__(self, fn: Generator) -> None:
        self.fn = fn


class AudioMixer:
    """Mixes registered generators into one float stream.

    The output is considered open while generators exist; once it has had
    none for ``idle_timeout`` seconds of rendering it closes, and the next
    registration opens it again.
    """

    def __init__(
        self,
        frequency: int = DEFAULT_FREQUENCY,
        idle_timeout: float = IDLE_TIMEOUT,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.frequency = frequency
        self.idle_timeout = idle_timeout
        self._clock = clock
        self._lock = threading.RLock()
        self._entries: List[_Entry] = []
        self._idle_deadline: Optional[float] = None
        self.is_open = False

    def __len__(self) -> int:
        return len(self._entries)

    def register(self, fn: Generator, singleton: bool = False) -> int:
        """Add a generator; the newest runs first.

        Returns 1 when added, 2 when ``singleton`` is set and ``fn`` is
        already registered.
        """
        with self._lock:
            if not self.is_open:
                self.is_open = True
                self._idle_deadline = None
            if singleton and any(entry.fn == fn for entry in self._entries):
                return 2
            self._idle_deadline = None
            self._entries.insert(0, _Entry(fn))
            return 1

    def render(self, samples: int = DEFAULT_SAMPLES, freq: Optional[int] = None) -> List[float]:
        """Produce ``samples`` mixed samples, dropping generators that finish."""
        if samples < 0:
            raise ValueError("sample count must not be negative")
        if freq is None:
            freq = self.frequency
        stream = [0.0] * samples
        with self._lock:
            if not self._entries:
                now = self._clock()
                if self._idle_deadline is None:
                    self._idle_deadline = now + self.idle_timeout
                elif now >= self._idle_deadline:
                    self.is_open = False
                    self._idle_deadline = None
                return stream

            self._idle_deadline = None
            finished = [entry for entry in list(self._entries) if not entry.fn(stream, freq)]
            if finished:
                self._entries = [
                    entry for entry in self._entries
                    if not any(entry is done for done in finished)
                ]
        return stream

    def clear(self) -> None:
        """Drop every generator and close the output."""
        with self._lock:
            self._entries.clear()
            self.is_open = False
            self._idle_deadline = None