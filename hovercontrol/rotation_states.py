"""States that control the hovercraft's rotation with the two rear blowers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

from hovercontrol.blower import Blower
from hovercontrol.gyro import GyroSensor
from hovercontrol.pid import Clock, RotationController
from hovercontrol.tof import TOFSensor

ARM_LENGTH = 0.1
"""Metres from a rear blower to the centre of mass."""

MAX_FORCE = 0.2
"""Largest force per blower in newtons, in either direction."""

NEWTON_PER_GRAM = 0.00981
"""Newtons in one gram-force."""

SENSOR_SPACING = 0.142
"""Metres between the front and rear side-facing distance sensors."""


class Logger(Protocol):
    def log(self, v1: float, v2: float, v3: float, timer: int) -> None: ...


@dataclass(frozen=True)
class ThrustReport:
    """What one control step measured and sent to the blowers."""

    measurement: float
    force_left: float
    force_right: float
    grams_left: float
    grams_right: float
    pwm_left: int
    pwm_right: int


def yaw_from_distances(
    front_mm: float, rear_mm: float, sensor_spacing: float = SENSOR_SPACING
) -> float:
    """Yaw angle in radians from two side distances in millimetres."""
    if sensor_spacing <= 0:
        return 0.0
    return math.atan((front_mm - rear_mm) / 1000 / sensor_spacing)


def _clamp_force(force: float) -> float:
    return max(-MAX_FORCE, min(force, MAX_FORCE))


def _apply_torque(
    left: Blower, right: Blower, force: float, measurement: float
) -> ThrustReport:
    force_left = _clamp_force(force)
    force_right = _clamp_force(-force)
    grams_left = force_left / NEWTON_PER_GRAM
    grams_right = force_right / NEWTON_PER_GRAM
    return ThrustReport(
        measurement=measurement,
        force_left=force_left,
        force_right=force_right,
        grams_left=grams_left,
        grams_right=grams_right,
        pwm_left=left.deliver(grams_left),
        pwm_right=right.deliver(grams_right),
    )


class _GyroRateState:
    KP = 0.0
    KI = 0.0
    KD = 0.0
    SETPOINT = 0.0
    LOG_TIMER = 0

    def __init__(
        self,
        left_blower: Blower,
        right_blower: Blower,
        gyro: GyroSensor,
        logger: Logger | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.left_blower = left_blower
        self.right_blower = right_blower
        self.gyro = gyro
        self.logger = logger
        self.controller = RotationController(
            self.KP, self.KI, self.KD, self.SETPOINT, ARM_LENGTH, MAX_FORCE, clock
        )

    def run(self) -> ThrustReport:
        yaw_deg = self.gyro.yaw
        force = self.controller.force(math.radians(yaw_deg))
        report = _apply_torque(self.left_blower, self.right_blower, force, yaw_deg)
        if self.logger is not None:
            self.logger.log(
                yaw_deg, report.force_left, report.force_right, self.LOG_TIMER
            )
        return report


class GyroTurnState(_GyroRateState):
    """Turns the craft by steering the gyro reading towards 1.3 rad."""

    KP = 0.2
    KI = 0.01
    KD = 0.2
    SETPOINT = 1.3
    LOG_TIMER = 10

    def __init__(
        self,
        left_blower: Blower,
        right_blower: Blower,
        gyro: GyroSensor,
        logger: Logger | None = None,
        clock: Clock | None = None,
    ) -> None:
        super().__init__(left_blower, right_blower, gyro, logger, clock)

    def run(self) -> ThrustReport:
        """One control step; the report's measurement is the yaw in degrees."""
        return super().run()


class GyroAntiRotationState(_GyroRateState):
    """Holds the gyro yaw at zero."""

    KP = 0.04
    KI = 0.01
    KD = 0.12
    SETPOINT = 0.0
    LOG_TIMER = 20

    def __init__(
        self,
        left_blower: Blower,
        right_blower: Blower,
        gyro: GyroSensor,
        logger: Logger | None = None,
        clock: Clock | None = None,
    ) -> None:
        super().__init__(left_blower, right_blower, gyro, logger, clock)

    def run(self) -> ThrustReport:
        """One control step; the report's measurement is the yaw in degrees."""
        return super().run()


class TofAntiRotationState:
    """Keeps the craft parallel to a wall seen by two side distance sensors."""

    KP = 0.2
    KI = 0.01
    KD = 0.2

    def __init__(
        self,
        left_blower: Blower,
        right_blower: Blower,
        front_tof: TOFSensor,
        rear_tof: TOFSensor,
        clock: Clock | None = None,
    ) -> None:
        self.left_blower = left_blower
        self.right_blower = right_blower
        self.front_tof = front_tof
        self.rear_tof = rear_tof
        self.controller = RotationController(
            self.KP, self.KI, self.KD, 0.0, ARM_LENGTH, MAX_FORCE, clock
        )

    def run(self) -> ThrustReport:
        """One control step; the report's measurement is the yaw in radians."""
        yaw = yaw_from_distances(self.front_tof.distance(), self.rear_tof.distance())
        force = self.controller.force(yaw)
        return _apply_torque(self.left_blower, self.right_blower, force, yaw)