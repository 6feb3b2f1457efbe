import math

import pytest

from hovercontrol.rotation_states import (
    GyroAntiRotationState,
    GyroTurnState,
    TofAntiRotationState,
    yaw_from_distances,
)


class FakeBlower:
    def __init__(self):
        self.requests = []

    def deliver(self, thrust):
        self.requests.append(thrust)
        return round(thrust)


class FakeGyro:
    def __init__(self, yaw=0.0):
        self.yaw = yaw


class FakeTof:
    def __init__(self, value):
        self.value = value

    def distance(self):
        return self.value


class FakeLogger:
    def __init__(self):
        self.entries = []

    def log(self, v1, v2, v3, timer):
        self.entries.append((v1, v2, v3, timer))


class FakeClock:
    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now


def test_yaw_equal_distances_is_zero():
    assert yaw_from_distances(300, 300) == 0.0


def test_yaw_nonpositive_spacing_is_zero():
    assert yaw_from_distances(500, 100, 0.0) == 0.0
    assert yaw_from_distances(500, 100, -1.0) == 0.0


def test_yaw_worked_example():
    assert yaw_from_distances(242, 100) == pytest.approx(math.pi / 4)


def test_yaw_is_antisymmetric():
    assert yaw_from_distances(120, 180) == pytest.approx(-yaw_from_distances(180, 120))


def test_antirotation_at_rest_sends_nothing():
    left, right, logger = FakeBlower(), FakeBlower(), FakeLogger()
    state = GyroAntiRotationState(left, right, FakeGyro(0.0), logger, FakeClock())
    report = state.run()
    assert report.force_left == 0.0
    assert left.requests == [0.0]
    assert right.requests == [-0.0]
    assert logger.entries == [(0.0, 0.0, -0.0, 20)]


def test_antirotation_saturates_and_opposes():
    left, right = FakeBlower(), FakeBlower()
    state = GyroAntiRotationState(left, right, FakeGyro(1000.0), None, FakeClock())
    report = state.run()
    assert report.force_left == -0.2
    assert report.force_right == 0.2
    assert report.measurement == 1000.0


def test_report_grams_match_forces_and_blowers():
    left, right = FakeBlower(), FakeBlower()
    clock = FakeClock()
    gyro = FakeGyro(2.0)
    state = GyroAntiRotationState(left, right, gyro, None, clock)
    clock.now = 100
    report = state.run()
    assert report.grams_left * 0.00981 == pytest.approx(report.force_left)
    assert report.grams_right == pytest.approx(-report.grams_left)
    assert left.requests == [report.grams_left]
    assert right.requests == [report.grams_right]
    assert report.pwm_left == round(report.grams_left)
    assert abs(report.force_left) <= 0.2


def test_turn_pushes_left_forward_and_logs_timer():
    left, right, logger = FakeBlower(), FakeBlower(), FakeLogger()
    state = GyroTurnState(left, right, FakeGyro(0.0), logger, FakeClock())
    report = state.run()
    assert report.force_left > 0
    assert report.force_right == -report.force_left
    assert logger.entries[0][3] == 10
    assert logger.entries[0][1:3] == (report.force_left, report.force_right)


def test_tof_parallel_gives_zero_force():
    left, right = FakeBlower(), FakeBlower()
    state = TofAntiRotationState(left, right, FakeTof(250), FakeTof(250), FakeClock())
    report = state.run()
    assert report.measurement == 0.0
    assert report.force_left == 0.0


def test_tof_turned_away_corrects_backwards_on_left():
    left, right = FakeBlower(), FakeBlower()
    state = TofAntiRotationState(left, right, FakeTof(300), FakeTof(250), FakeClock())
    report = state.run()
    assert report.measurement == pytest.approx(yaw_from_distances(300, 250))
    assert report.force_left < 0
    assert report.force_right == -report.force_left
    assert len(left.requests) == 1 and len(right.requests) == 1