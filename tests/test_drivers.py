import pytest

from hovercontrol.drivers import BlowerDriver, SideBlowerDriver, StuwBlowerDriver
from hovercontrol.motor import HIGH, LOW, PinMode, RecordingBoard

IN1, IN2, PWM = 7, 8, 9


def make_side(board):
    return SideBlowerDriver(board, IN1, IN2, PWM, 20, 230, -20, -230)


def test_blower_driver_is_abstract():
    with pytest.raises(TypeError):
        BlowerDriver()


@pytest.mark.parametrize(
    "requested, applied",
    [(10, 20), (255, 230), (-10, -20), (-255, -230)],
)
def test_side_driver_clamps(requested, applied):
    board = RecordingBoard()
    assert make_side(board).drive(requested) == applied
    assert board.duties[PWM] == abs(applied)


def test_side_driver_passes_values_inside_band():
    board = RecordingBoard()
    driver = make_side(board)
    assert driver.drive(100) == 100
    assert board.levels[IN1] == HIGH and board.levels[IN2] == LOW
    assert driver.drive(-100) == -100
    assert board.levels[IN1] == LOW and board.levels[IN2] == HIGH
    assert board.duties[PWM] == 100


def test_side_driver_zero_becomes_reverse_minimum():
    board = RecordingBoard()
    assert make_side(board).drive(0) == -20


def test_side_driver_sets_up_motor_pins():
    board = RecordingBoard()
    make_side(board)
    for pin in (IN1, IN2, PWM):
        assert board.modes[pin] == PinMode.OUTPUT


def test_stuw_driver_initialises_pins_low():
    board = RecordingBoard()
    StuwBlowerDriver(board, 3, 4)
    assert board.modes == {3: PinMode.OUTPUT, 4: PinMode.OUTPUT}
    assert board.levels == {3: LOW, 4: LOW}


def test_stuw_driver_negative_uses_first_pin():
    board = RecordingBoard()
    driver = StuwBlowerDriver(board, 3, 4)
    assert driver.drive(-120) == -120
    assert board.duties == {3: 120}
    assert board.levels[4] == LOW


def test_stuw_driver_positive_uses_second_pin():
    board = RecordingBoard()
    driver = StuwBlowerDriver(board, 3, 4)
    assert driver.drive(90) == 90
    assert board.duties == {4: 90}
    assert board.levels[3] == LOW


def test_stuw_driver_zero_goes_to_second_pin():
    board = RecordingBoard()
    driver = StuwBlowerDriver(board, 3, 4)
    assert driver.drive(0) == 0
    assert board.duties == {4: 0}