"""Time-of-flight distance sensor with a short moving-average filter."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections import deque
from typing import Callable

from hovercontrol.motor import HIGH, LOW, Board, PinMode

FILTER_LENGTH = 4
"""Number of readings averaged by the distance filter."""

POWER_UP_DELAY = 0.15
"""Seconds to wait after releasing the shutdown pin."""

ADDRESS_SETTLE_DELAY = 0.05
"""Seconds to wait after assigning a new bus address."""


class RangeSensor(ABC):
    """The ranging chip behind a :class:`TOFSensor`."""

    @abstractmethod
    def init(self) -> bool:
        """Start the chip; return whether it answered."""

    @abstractmethod
    def set_address(self, address: int) -> None:
        """Move the chip to a new bus address."""

    @abstractmethod
    def read_range_mm(self) -> int:
        """Take a single range measurement in millimetres."""


class SensorNotInitialisedError(RuntimeError):
    """Raised when a distance is requested before the address was set."""


class TOFSensor:
    """A range sensor on its own shutdown pin, with offset and smoothing."""

    def __init__(
        self,
        board: Board,
        sensor: RangeSensor,
        shut_pin: int,
        offset: float = 0.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.board = board
        self.sensor = sensor
        self.shut_pin = shut_pin
        self.offset = offset
        self._sleep = sleep
        self._window: deque[int] = deque(maxlen=FILTER_LENGTH)
        self.initialised = False
        board.pin_mode(shut_pin, PinMode.OUTPUT)
        board.digital_write(shut_pin, LOW)

    def init_address(self, address: int) -> bool:
        """Power this sensor up and give it ``address``.

        Returns ``False`` when the chip does not start; the sensor then stays
        uninitialised.
        """
        self.board.digital_write(self.shut_pin, HIGH)
        self._sleep(POWER_UP_DELAY)
        if not self.sensor.init():
            return False
        self.sensor.set_address(address)
        self._sleep(ADDRESS_SETTLE_DELAY)
        self.initialised = True
        return True

    def distance(self) -> float:
        """Filtered distance in millimetres, offset included."""
        if not self.initialised:
            raise SensorNotInitialisedError("sensor address has not been set")
        reading = int(self.sensor.read_range_mm() + self.offset)
        return self._filter(reading)

    def _filter(self, reading: int) -> float:
        if not self._window:
            self._window.extend([reading] * FILTER_LENGTH)
        self._window.append(reading)
        return sum(self._window) / FILTER_LENGTH