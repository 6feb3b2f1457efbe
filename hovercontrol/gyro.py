"""Orientation sensor wrapper that keeps a continuous (unwrapped) yaw."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

_DEGREES_PER_RADIAN = 180 / 3.14


@dataclass(frozen=True)
class Orientation:
    """One fused sample: yaw, pitch and roll in radians, linear acceleration."""

    yaw: float
    pitch: float
    roll: float
    accel_x: int = 0
    accel_y: int = 0
    accel_z: int = 0


class MotionSource(ABC):
    """Delivers fused orientation samples from a motion processor."""

    @abstractmethod
    def read(self) -> Orientation | None:
        """The newest sample, or ``None`` when no new packet is ready."""


class GyroSensor:
    """Tracks orientation in degrees with a yaw that does not wrap at ±180."""

    def __init__(self, source: MotionSource) -> None:
        self.source = source
        self.yaw_raw = 0.0
        self.pitch = 0.0
        self.roll = 0.0
        self._accel = (0, 0, 0)
        self._yaw_refined = 0.0
        self._yaw_offset = 0.0
        self._previous_yaw = 0.0

    @property
    def yaw(self) -> float:
        """Accumulated yaw in degrees relative to the last zeroing."""
        return self._yaw_refined - self._yaw_offset

    @property
    def accel_x(self) -> int:
        return -self._accel[0]

    @property
    def accel_y(self) -> int:
        return -self._accel[1]

    @property
    def accel_z(self) -> int:
        return self._accel[2]

    def update(self) -> None:
        """Read a new sample if there is one and advance the unwrapped yaw."""
        sample = self.source.read()
        if sample is not None:
            self.yaw_raw = sample.yaw * _DEGREES_PER_RADIAN
            self.pitch = sample.pitch * _DEGREES_PER_RADIAN
            self.roll = sample.roll * _DEGREES_PER_RADIAN
            self._accel = (sample.accel_x, sample.accel_y, sample.accel_z)
        self._unwrap_yaw()

    def set_yaw_offset(self) -> None:
        """Take the current accumulated yaw as an additional zero offset."""
        self._yaw_offset += self._yaw_refined

    def _unwrap_yaw(self) -> None:
        delta = self.yaw_raw - self._previous_yaw
        if delta > 180:
            delta -= 360
        elif delta < -180:
            delta += 360
        self._yaw_refined += delta
        self._previous_yaw = self.yaw_raw