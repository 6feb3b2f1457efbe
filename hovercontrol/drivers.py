"""Blower drivers that turn a signed PWM value into pin activity."""

from __future__ import annotations

from abc import ABC, abstractmethod

from hovercontrol.motor import LOW, Board, Motor, PinMode


class BlowerDriver(ABC):
    """Drives a blower with a signed PWM value."""

    @abstractmethod
    def drive(self, pwm: int) -> int:
        """Apply ``pwm`` and return the value actually applied."""


class SideBlowerDriver(BlowerDriver):
    """Side blower on an H-bridge, clamped to a PWM band per direction."""

    OFFSET = 1

    def __init__(
        self,
        board: Board,
        pin_in1: int,
        pin_in2: int,
        pwm_pin: int,
        min_forward: int,
        max_forward: int,
        min_reverse: int,
        max_reverse: int,
    ) -> None:
        self.min_forward = min_forward
        self.max_forward = max_forward
        self.min_reverse = min_reverse
        self.max_reverse = max_reverse
        self.motor = Motor(board, pin_in1, pin_in2, pwm_pin, self.OFFSET, 0)

    def drive(self, pwm: int) -> int:
        """Clamp ``pwm`` into the band for its direction and drive the motor.

        Zero falls in the reverse branch and is raised to the reverse minimum.
        """
        if pwm > 0:
            pwm = min(max(pwm, self.min_forward), self.max_forward)
        else:
            pwm = max(min(pwm, self.min_reverse), self.max_reverse)
        self.motor.drive(pwm)
        return pwm


class StuwBlowerDriver(BlowerDriver):
    """Thrust blower driven by two PWM pins, one per direction."""

    def __init__(self, board: Board, pin_a: int, pin_b: int) -> None:
        self.board = board
        self.pin_a = pin_a
        self.pin_b = pin_b
        for pin in (pin_a, pin_b):
            board.pin_mode(pin, PinMode.OUTPUT)
            board.digital_write(pin, LOW)

    def drive(self, pwm: int) -> int:
        if pwm < 0:
            active, idle = self.pin_a, self.pin_b
        else:
            active, idle = self.pin_b, self.pin_a
        self.board.analog_write(active, abs(pwm))
        self.board.digital_write(idle, LOW)
        return pwm