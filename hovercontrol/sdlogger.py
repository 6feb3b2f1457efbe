"""Buffered logging of sensor triples to numbered binary files."""

from __future__ import annotations

import struct
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

_RECORD = struct.Struct("<Ifff")

RECORD_SIZE = _RECORD.size
"""Bytes per packed record: a 32-bit timestamp and three 32-bit floats."""

BUFFER_BYTES = 4096
"""Size of the in-memory buffer and of every file written."""

SAMPLING_INTERVAL_MS = 100
LOGGING_DURATION_MS = 60000


@dataclass(frozen=True)
class SensorRecord:
    """One sample: milliseconds since logging started and three values."""

    time: int
    value1: float
    value2: float
    value3: float

    def pack(self) -> bytes:
        """The record in its little-endian on-disk form."""
        return _RECORD.pack(self.time, self.value1, self.value2, self.value3)


_EMPTY = SensorRecord(0, 0.0, 0.0, 0.0)


def _default_clock() -> Callable[[], int]:
    start = time.monotonic()
    return lambda: int((time.monotonic() - start) * 1000)


class SDCardWriter:
    """Samples values at a fixed interval and flushes full buffers to files.

    Every file holds the whole buffer; slots not filled since the last flush
    keep their earlier contents.
    """

    def __init__(
        self, directory: str | Path, clock: Callable[[], int] | None = None
    ) -> None:
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)
        self._clock = clock if clock is not None else _default_clock()
        self.capacity = BUFFER_BYTES // RECORD_SIZE
        self._slots = [_EMPTY] * self.capacity
        self._count = 0
        self.stopped = False
        self._last_sample = 0
        self._start = 0
        self._window_start = 0
        self._max_write_time = 0

    @property
    def pending(self) -> list[SensorRecord]:
        """Records collected since the last flush."""
        return self._slots[: self._count]

    def log(self, v1: float, v2: float, v3: float, timer: int = 40) -> None:
        """Record the values if a sampling interval has passed.

        ``timer`` is the number of seconds after which the buffer is flushed
        and logging stops.
        """
        if self.stopped:
            return
        if self._count == 0:
            self._window_start = self._clock()
            self._max_write_time = timer * 1000
            self._start = self._clock()

        now = self._clock()
        if now - self._last_sample >= SAMPLING_INTERVAL_MS:
            self._last_sample = now
            self._slots[self._count] = SensorRecord(now - self._start, v1, v2, v3)
            self._count += 1
            if self._count == self.capacity:
                self.write_buffer()
                self._count = 0
            if now >= LOGGING_DURATION_MS:
                self.stopped = True

        if self._clock() - self._window_start >= self._max_write_time:
            self.finish_writing()

    def finish_writing(self) -> Path | None:
        """Flush pending records and stop logging; ``None`` if nothing pending."""
        if self._count == 0:
            return None
        self.stopped = True
        path = self.write_buffer()
        self._count = 0
        return path

    def write_buffer(self) -> Path:
        """Write the whole buffer to the first free ``dataN.bin`` file."""
        counter = 0
        while (path := self.directory / f"data{counter}.bin").exists():
            counter += 1
        path.write_bytes(b"".join(record.pack() for record in self._slots))
        return path


def read_records(path: str | Path) -> list[SensorRecord]:
    """All records stored in a file written by :class:`SDCardWriter`."""
    data = Path(path).read_bytes()
    return [SensorRecord(*fields) for fields in _RECORD.iter_unpack(data)]