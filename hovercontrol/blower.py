"""A blower: a translator from thrust to PWM paired with a driver."""

from __future__ import annotations

from hovercontrol.drivers import BlowerDriver
from hovercontrol.translators import PWMTranslator


class Blower:
    """Delivers a requested thrust through its translator and driver."""

    def __init__(self, driver: BlowerDriver, translator: PWMTranslator) -> None:
        self.driver = driver
        self.translator = translator

    def deliver(self, thrust: float) -> int:
        """Drive the blower for ``thrust`` (gram-force) and return the PWM applied."""
        return self.driver.drive(self.translator.thrust_to_pwm(thrust))