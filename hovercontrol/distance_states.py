"""States that hold a distance (or a camera bearing) with the blowers."""

from __future__ import annotations

import math
from dataclasses import dataclass

from hovercontrol.blower import Blower
from hovercontrol.pid import Clock, DistanceController, RotationController
from hovercontrol.rotation_states import (
    ARM_LENGTH,
    MAX_FORCE,
    NEWTON_PER_GRAM,
    Logger,
    yaw_from_distances,
)
from hovercontrol.tof import TOFSensor

PIXELS_PER_CM = 3.4
"""Camera pixels per centimetre of marker distance."""

WALL_SETPOINT_CM = 30.0
DOCKING_SETPOINT_CM = 20.0
DOCKING_LIMIT = 0.15
"""Largest side-blower force in newtons while docking."""

YAW_INFLUENCE = 0.6
"""Share of the yaw correction mixed into the forward drive."""

_WALL_GAINS = (0.147, 0.006, 0.377)
_DOCKING_GAINS = (0.147, 0.0, 0.6)
_ORIENTATION_GAINS = (0.08, 0.0, 0.01)
_FORWARD_YAW_GAINS = (0.2, 0.01, 0.2)

_ORIENTATION_SCALE = 10
_ORIENTATION_PI = 3.141


@dataclass(frozen=True)
class DistanceReport:
    """What one control step measured and sent to its blowers.

    ``forces``, ``grams`` and ``pwm`` hold one entry per blower driven, left
    before right. ``yaw`` is only set by states that also steer rotation.
    """

    measurement: float
    forces: tuple[float, ...]
    grams: tuple[float, ...]
    pwm: tuple[int, ...]
    yaw: float = 0.0


def _clamp_force(force: float) -> float:
    return max(-MAX_FORCE, min(force, MAX_FORCE))


def _to_grams(force: float) -> float:
    return force / NEWTON_PER_GRAM


class WallStopState:
    """Stops the craft at a fixed distance from a wall ahead."""

    LOG_TIMER = 15

    def __init__(
        self,
        left_blower: Blower,
        right_blower: Blower,
        front_tof: TOFSensor,
        logger: Logger | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.left_blower = left_blower
        self.right_blower = right_blower
        self.front_tof = front_tof
        self.logger = logger
        self.controller = DistanceController(
            *_WALL_GAINS, setpoint=WALL_SETPOINT_CM, limit=MAX_FORCE, clock=clock
        )

    def run(self) -> DistanceReport:
        """One control step; the measurement is the distance in centimetres."""
        distance_cm = self.front_tof.distance() / 10
        force = self.controller.force(distance_cm)
        grams = _to_grams(force)
        pwm = (self.left_blower.deliver(grams), self.right_blower.deliver(grams))
        if self.logger is not None:
            self.logger.log(distance_cm, force, grams, self.LOG_TIMER)
        return DistanceReport(distance_cm, (force, force), (grams, grams), pwm)


class ArucoDistanceState:
    """Drives towards a marker until its measured pixel distance is zero."""

    def __init__(
        self, left_blower: Blower, right_blower: Blower, clock: Clock | None = None
    ) -> None:
        self.left_blower = left_blower
        self.right_blower = right_blower
        self.controller = DistanceController(
            *_WALL_GAINS, setpoint=0.0, limit=MAX_FORCE, clock=clock
        )

    def run(self, distance_pixels: float) -> DistanceReport:
        """One control step; the measurement is the distance in centimetres."""
        distance_cm = distance_pixels / PIXELS_PER_CM
        force = self.controller.force(distance_cm)
        grams = _to_grams(force)
        pwm = (self.left_blower.deliver(grams), self.right_blower.deliver(grams))
        return DistanceReport(distance_cm, (force, force), (grams, grams), pwm)


class ArucoOrientationState:
    """Turns the craft until a marker sits in the middle of the camera image."""

    def __init__(
        self, left_blower: Blower, right_blower: Blower, clock: Clock | None = None
    ) -> None:
        self.left_blower = left_blower
        self.right_blower = right_blower
        self.controller = RotationController(
            *_ORIENTATION_GAINS,
            setpoint=0.0,
            arm_length=ARM_LENGTH,
            max_force=MAX_FORCE,
            clock=clock,
        )

    def run(self, x_angle: float) -> DistanceReport:
        """One control step; the measurement is the marker's horizontal angle."""
        bearing = x_angle * _ORIENTATION_SCALE * (_ORIENTATION_PI / 180)
        force = self.controller.force(bearing)
        grams = _to_grams(force)
        pwm = (self.left_blower.deliver(grams), self.right_blower.deliver(-grams))
        return DistanceReport(x_angle, (force, -force), (grams, -grams), pwm)


class DockingState:
    """Moves the craft sideways to a fixed distance from a wall beside it."""

    LOG_TIMER = 15

    def __init__(
        self,
        side_blower: Blower,
        front_tof: TOFSensor,
        rear_tof: TOFSensor,
        logger: Logger | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.side_blower = side_blower
        self.front_tof = front_tof
        self.rear_tof = rear_tof
        self.logger = logger
        self.controller = DistanceController(
            *_DOCKING_GAINS,
            setpoint=DOCKING_SETPOINT_CM,
            limit=DOCKING_LIMIT,
            clock=clock,
            approach=False,
        )

    def run(self) -> DistanceReport:
        """One control step; the measurement is the mean distance in centimetres.

        A zero reading from either sensor is taken as a fault: the blower is
        given zero thrust and the controller is left untouched.
        """
        front = self.front_tof.distance()
        rear = self.rear_tof.distance()
        if front == 0 or rear == 0:
            pwm = self.side_blower.deliver(0.0)
            return DistanceReport(0.0, (0.0,), (0.0,), (pwm,))
        distance_cm = (front + rear) / 2 / 10
        force = self.controller.force(distance_cm)
        grams = _to_grams(force)
        pwm = self.side_blower.deliver(grams)
        if self.logger is not None:
            self.logger.log(distance_cm, grams, force, self.LOG_TIMER)
        return DistanceReport(distance_cm, (force,), (grams,), (pwm,))


class ForwardState:
    """Approaches a wall ahead while staying parallel to a wall at the side."""

    LOG_TIMER = 20

    def __init__(
        self,
        left_blower: Blower,
        right_blower: Blower,
        front_tof: TOFSensor,
        side_front_tof: TOFSensor,
        side_rear_tof: TOFSensor,
        logger: Logger | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.left_blower = left_blower
        self.right_blower = right_blower
        self.front_tof = front_tof
        self.side_front_tof = side_front_tof
        self.side_rear_tof = side_rear_tof
        self.logger = logger
        self.distance_controller = DistanceController(
            *_WALL_GAINS, setpoint=WALL_SETPOINT_CM, limit=MAX_FORCE, clock=clock
        )
        self.yaw_controller = RotationController(
            *_FORWARD_YAW_GAINS,
            setpoint=0.0,
            arm_length=ARM_LENGTH,
            max_force=MAX_FORCE,
            clock=clock,
        )

    def run(self) -> DistanceReport:
        """One control step; the measurement is the front distance in centimetres."""
        distance_cm = self.front_tof.distance() / 10
        yaw = yaw_from_distances(
            self.side_front_tof.distance(), self.side_rear_tof.distance()
        )
        distance_force = self.distance_controller.force(distance_cm)
        yaw_force = self.yaw_controller.force(yaw)

        force_left = _clamp_force((distance_force + YAW_INFLUENCE * yaw_force) / 2)
        force_right = _clamp_force((distance_force - YAW_INFLUENCE * yaw_force) / 2)
        grams_left = _to_grams(force_left)
        grams_right = _to_grams(force_right)
        pwm = (
            self.left_blower.deliver(grams_left),
            self.right_blower.deliver(grams_right),
        )
        if self.logger is not None:
            self.logger.log(distance_cm, yaw, force_left, self.LOG_TIMER)
        return DistanceReport(
            distance_cm,
            (force_left, force_right),
            (grams_left, grams_right),
            pwm,
            yaw,
        )