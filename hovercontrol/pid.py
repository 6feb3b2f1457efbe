"""PID controllers that turn a measurement into a blower force in newtons."""

from __future__ import annotations

import time
from typing import Callable

INTEGRAL_LIMIT = 10.0
"""Anti-windup bound on the integral term of the rotation controller."""

DERIVATIVE_LIMIT = 50.0
"""Bound on the derivative term of the distance controller."""

FILTER_WEIGHT = 0.3
"""Weight of a new distance sample in the low-pass filter."""

MIN_DT = 0.001
"""Time step in seconds used when the clock has not advanced."""

Clock = Callable[[], int]


def _default_clock() -> Clock:
    start = time.monotonic()
    return lambda: int((time.monotonic() - start) * 1000)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


class _TimedController:
    """Shared gains and time-step bookkeeping; the clock returns milliseconds."""

    def __init__(self, kp: float, ki: float, kd: float, clock: Clock | None) -> None:
        self.kp = kp
        self.ki = ki
        self.kd = kd
        self._clock = clock if clock is not None else _default_clock()
        self._last_time = 0
        self.integral = 0.0
        self.last_error = 0.0

    def _elapsed(self) -> float:
        now = self._clock()
        dt = (now - self._last_time) / 1000
        if dt <= 0:
            dt = MIN_DT
        self._last_time = now
        return dt


class RotationController(_TimedController):
    """Holds a yaw (or yaw rate) at ``setpoint`` by a force on a lever arm."""

    def __init__(
        self,
        kp: float,
        ki: float,
        kd: float,
        setpoint: float = 0.0,
        arm_length: float = 0.1,
        max_force: float = 0.2,
        clock: Clock | None = None,
    ) -> None:
        super().__init__(kp, ki, kd, clock)
        self.setpoint = setpoint
        self.arm_length = arm_length
        self.max_force = max_force

    def force(self, measurement: float) -> float:
        """Force per motor in newtons, limited to ``±max_force``."""
        error = self.setpoint - measurement
        dt = self._elapsed()
        self.integral = _clamp(
            self.integral + error * dt, -INTEGRAL_LIMIT, INTEGRAL_LIMIT
        )
        derivative = (error - self.last_error) / dt
        self.last_error = error
        torque = self.kp * error + self.ki * self.integral + self.kd * derivative
        return _clamp(torque / (2 * self.arm_length), -self.max_force, self.max_force)


class DistanceController(_TimedController):
    """Holds a filtered distance at ``setpoint``.

    With ``approach`` the error is positive when too far away (push towards the
    target); otherwise it is positive when too close (push away).
    """

    def __init__(
        self,
        kp: float,
        ki: float,
        kd: float,
        setpoint: float,
        limit: float = 0.2,
        clock: Clock | None = None,
        approach: bool = True,
    ) -> None:
        super().__init__(kp, ki, kd, clock)
        self.setpoint = setpoint
        self.limit = limit
        self.approach = approach
        self.filtered = setpoint

    def force(self, distance: float) -> float:
        """Force in newtons, limited to ``±limit``."""
        self.filtered = distance * FILTER_WEIGHT + self.filtered * (1 - FILTER_WEIGHT)
        if self.approach:
            error = self.filtered - self.setpoint
        else:
            error = self.setpoint - self.filtered
        dt = self._elapsed()
        self.integral += error * dt
        derivative = _clamp(
            (error - self.last_error) / dt, -DERIVATIVE_LIMIT, DERIVATIVE_LIMIT
        )
        self.last_error = error
        result = self.kp * error + self.ki * self.integral + self.kd * derivative
        return _clamp(result, -self.limit, self.limit)