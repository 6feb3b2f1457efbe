"""Two-input H-bridge motor control on top of a pin-level board interface."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

HIGH = 1
LOW = 0

DEFAULT_SPEED = 255
"""Speed used by the pair helpers when none is given."""


class PinMode(Enum):
    """Direction of a digital pin."""

    INPUT = "input"
    OUTPUT = "output"


class Board(ABC):
    """The pin operations a motor controller needs from a microcontroller."""

    @abstractmethod
    def pin_mode(self, pin: int, mode: PinMode) -> None:
        """Configure the direction of ``pin``."""

    @abstractmethod
    def digital_write(self, pin: int, value: int) -> None:
        """Drive ``pin`` to ``HIGH`` or ``LOW``."""

    @abstractmethod
    def analog_write(self, pin: int, value: int) -> None:
        """Write a PWM duty value to ``pin``."""


@dataclass
class RecordingBoard(Board):
    """A board that keeps the last state of every pin and a log of all calls."""

    modes: dict[int, PinMode] = field(default_factory=dict)
    levels: dict[int, int] = field(default_factory=dict)
    duties: dict[int, int] = field(default_factory=dict)
    calls: list[tuple[str, int, object]] = field(default_factory=list)

    def pin_mode(self, pin: int, mode: PinMode) -> None:
        self.modes[pin] = mode
        self.calls.append(("pin_mode", pin, mode))

    def digital_write(self, pin: int, value: int) -> None:
        self.levels[pin] = value
        self.calls.append(("digital_write", pin, value))

    def analog_write(self, pin: int, value: int) -> None:
        self.duties[pin] = value
        self.calls.append(("analog_write", pin, value))


class Motor:
    """One motor channel of a TB6612-style H-bridge."""

    def __init__(
        self,
        board: Board,
        in1: int,
        in2: int,
        pwm: int,
        offset: int = 1,
        standby: int = 0,
    ) -> None:
        self.board = board
        self.in1_pin = in1
        self.in2_pin = in2
        self.pwm_pin = pwm
        self.offset = offset
        self.standby_pin = standby
        for pin in (in1, in2, pwm, standby):
            board.pin_mode(pin, PinMode.OUTPUT)

    def drive(self, speed: int, duration: float | None = None) -> None:
        """Spin in the direction of ``speed``'s sign at its magnitude.

        When ``duration`` (milliseconds) is given, block for that long afterwards.
        """
        self.board.digital_write(self.standby_pin, HIGH)
        speed *= self.offset
        if speed >= 0:
            self._spin(HIGH, LOW, speed)
        else:
            self._spin(LOW, HIGH, -speed)
        if duration is not None:
            time.sleep(duration / 1000)

    def brake(self) -> None:
        """Stop the motor by pulling both inputs high."""
        self._spin(HIGH, HIGH, 0)

    def standby(self) -> None:
        """Put the driver chip into standby; the next drive wakes it."""
        self.board.digital_write(self.standby_pin, LOW)

    def _spin(self, in1_level: int, in2_level: int, duty: int) -> None:
        self.board.digital_write(self.in1_pin, in1_level)
        self.board.digital_write(self.in2_pin, in2_level)
        self.board.analog_write(self.pwm_pin, duty)


def forward(motor1: Motor, motor2: Motor, speed: int = DEFAULT_SPEED) -> None:
    """Drive both motors at ``speed``; a negative speed goes backwards."""
    motor1.drive(speed)
    motor2.drive(speed)


def back(motor1: Motor, motor2: Motor, speed: int = DEFAULT_SPEED) -> None:
    """Drive both motors backwards, whatever the sign of ``speed``."""
    magnitude = abs(speed)
    motor1.drive(-magnitude)
    motor2.drive(-magnitude)


def left(left_motor: Motor, right_motor: Motor, speed: int) -> None:
    """Turn left on the spot at half of ``speed``."""
    half = abs(speed) // 2
    left_motor.drive(-half)
    right_motor.drive(half)


def right(left_motor: Motor, right_motor: Motor, speed: int) -> None:
    """Turn right on the spot at half of ``speed``."""
    half = abs(speed) // 2
    left_motor.drive(half)
    right_motor.drive(-half)


def brake(motor1: Motor, motor2: Motor) -> None:
    """Brake both motors."""
    motor1.brake()
    motor2.brake()