"""Single-digit seven-segment display driven from eight pins."""

from __future__ import annotations

from collections.abc import Sequence

from hovercontrol.motor import HIGH, LOW, Board, PinMode

DIGITS: tuple[tuple[int, ...], ...] = (
    (LOW, LOW, LOW, LOW, LOW, LOW, HIGH, HIGH),  # 0
    (HIGH, LOW, LOW, HIGH, HIGH, HIGH, HIGH, HIGH),  # 1
    (LOW, LOW, HIGH, LOW, LOW, HIGH, LOW, HIGH),  # 2
    (LOW, LOW, LOW, LOW, HIGH, HIGH, LOW, HIGH),  # 3
    (HIGH, LOW, LOW, HIGH, HIGH, LOW, LOW, HIGH),  # 4
    (LOW, HIGH, LOW, LOW, HIGH, LOW, LOW, HIGH),  # 5
    (LOW, HIGH, LOW, LOW, LOW, LOW, LOW, HIGH),  # 6
    (LOW, LOW, LOW, HIGH, HIGH, HIGH, HIGH, HIGH),  # 7
    (LOW, LOW, LOW, LOW, LOW, LOW, LOW, HIGH),  # 8
    (LOW, LOW, LOW, LOW, HIGH, LOW, LOW, HIGH),  # 9
)
"""Active-low segment levels for each digit; the last pin is the enable line."""

PIN_COUNT = 8


class SevenSegmentDisplay:
    """Shows one decimal digit; ``enabled`` drives the last pin."""

    def __init__(self, board: Board, pins: Sequence[int]) -> None:
        if len(pins) != PIN_COUNT:
            raise ValueError(f"expected {PIN_COUNT} pins, got {len(pins)}")
        self.board = board
        self.pins = tuple(pins)
        self.enabled = HIGH
        for pin in self.pins:
            board.pin_mode(pin, PinMode.OUTPUT)
            board.digital_write(pin, HIGH)
        self.draw_digit(0)

    def draw_digit(self, digit: int) -> None:
        """Light the segments for ``digit`` (0-9)."""
        if not 0 <= digit < len(DIGITS):
            raise ValueError(f"digit out of range: {digit}")
        for pin, level in zip(self.pins, DIGITS[digit]):
            self.board.digital_write(pin, level)
        self.board.digital_write(self.pins[-1], self.enabled)