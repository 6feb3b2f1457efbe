"""Conversion between PWM duty values and blower thrust (gram-force)."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass


class PWMTranslator(ABC):
    """Maps a signed PWM value to thrust and back."""

    @abstractmethod
    def pwm_to_thrust(self, pwm: int) -> float:
        """Thrust produced by ``pwm``; the sign gives the direction."""

    @abstractmethod
    def thrust_to_pwm(self, thrust: float) -> int:
        """PWM value needed for ``thrust``; the sign gives the direction."""


@dataclass(frozen=True)
class _Curve:
    """Quadratic thrust curve ``a*p**2 + b*p + c`` for a non-negative PWM ``p``."""

    a: float
    b: float
    c: float

    def thrust(self, pwm: float) -> float:
        return self.a * pwm**2 + self.b * pwm + self.c

    def half_vertex(self) -> float:
        return self.b / (2 * self.a)

    def root_term(self, thrust: float) -> float:
        return math.sqrt(
            thrust / self.a - self.c / self.a + self.b**2 / (4 * self.a**2)
        )


def _signed_thrust(pwm: int, forward: _Curve, reverse: _Curve) -> float:
    if pwm == 0:
        return 0.0
    if pwm > 0:
        return forward.thrust(pwm)
    return -reverse.thrust(-pwm)


class SidePWMTranslator(PWMTranslator):
    """Translator for the side blower, limited to a working PWM band."""

    FORWARD_SHIFT = 106.0
    REVERSE_SHIFT = 220.2

    def __init__(
        self,
        a_forward: float,
        b_forward: float,
        c_forward: float,
        a_reverse: float,
        b_reverse: float,
        c_reverse: float,
    ) -> None:
        self._forward = _Curve(a_forward, b_forward, c_forward)
        self._reverse = _Curve(a_reverse, b_reverse, c_reverse)

        self.min_pwm_forward = 20
        self.max_pwm_forward = 170
        self.min_thrust_forward = self.pwm_to_thrust(self.min_pwm_forward)
        self.max_thrust_forward = self.pwm_to_thrust(self.max_pwm_forward)

        self.min_pwm_reverse = -20
        self.max_pwm_reverse = -170
        self.min_thrust_reverse = self.pwm_to_thrust(self.min_pwm_reverse)
        self.max_thrust_reverse = self.pwm_to_thrust(self.max_pwm_reverse)

    def pwm_to_thrust(self, pwm: int) -> float:
        return _signed_thrust(pwm, self._forward, self._reverse)

    def thrust_to_pwm(self, thrust: float) -> int:
        if thrust == 0:
            return 0
        if thrust > 0:
            if thrust <= self.min_thrust_forward:
                return self.min_pwm_forward
            if thrust >= self.max_thrust_forward:
                return self.max_pwm_forward
            curve = self._forward
            return int(
                abs(curve.half_vertex()) + curve.root_term(thrust) - self.FORWARD_SHIFT
            )
        if thrust >= self.min_thrust_reverse:
            return self.min_pwm_reverse
        if thrust <= self.max_thrust_reverse:
            return self.max_pwm_reverse
        curve = self._reverse
        magnitude = int(
            abs(curve.half_vertex()) + curve.root_term(abs(thrust)) - self.REVERSE_SHIFT
        )
        return -magnitude

    def debug_report(self) -> str:
        """The PWM band and matching thrust limits in both directions."""
        return (
            f"forward: min_pwm={self.min_pwm_forward}, max_pwm={self.max_pwm_forward}, "
            f"min_thrust={self.min_thrust_forward:.4f}, "
            f"max_thrust={self.max_thrust_forward:.4f}\n"
            f"reverse: min_pwm={self.min_pwm_reverse}, max_pwm={self.max_pwm_reverse}, "
            f"min_thrust={self.min_thrust_reverse:.4f}, "
            f"max_thrust={self.max_thrust_reverse:.4f}"
        )


class StuwPWMTranslator(PWMTranslator):
    """Translator for the rear thrust blowers over the full PWM range."""

    MAX_PWM = 255

    def __init__(
        self,
        a_forward: float,
        b_forward: float,
        c_forward: float,
        a_reverse: float,
        b_reverse: float,
        c_reverse: float,
    ) -> None:
        self._forward = _Curve(a_forward, b_forward, c_forward)
        self._reverse = _Curve(a_reverse, b_reverse, c_reverse)
        self.max_thrust_forward = self.pwm_to_thrust(self.MAX_PWM)
        self.max_thrust_reverse = self.pwm_to_thrust(-self.MAX_PWM)

    def pwm_to_thrust(self, pwm: int) -> float:
        return _signed_thrust(pwm, self._forward, self._reverse)

    def thrust_to_pwm(self, thrust: float) -> int:
        if thrust == 0:
            return 0
        if thrust > 0:
            if thrust > self.max_thrust_forward:
                return self.MAX_PWM
            curve, direction = self._forward, 1
        else:
            if thrust < self.max_thrust_reverse:
                return -self.MAX_PWM
            curve, direction = self._reverse, -1
            thrust = -thrust
        pwm = int(-(curve.half_vertex() + curve.root_term(thrust)))
        return pwm * direction

    def debug_report(self) -> str:
        """The thrust reached at full PWM in both directions."""
        return (
            f"forward: max_pwm={self.MAX_PWM}, "
            f"max_thrust={self.max_thrust_forward:.4f}\n"
            f"reverse: max_pwm={-self.MAX_PWM}, "
            f"max_thrust={self.max_thrust_reverse:.4f}"
        )