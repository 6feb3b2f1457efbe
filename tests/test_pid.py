import pytest

from hovercontrol.pid import DistanceController, RotationController


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


def test_rotation_zero_error_gives_zero_force():
    controller = RotationController(0.2, 0.01, 0.2, 0.0, 0.1, 0.2, FakeClock())
    assert controller.force(0.0) == 0.0


def test_rotation_force_is_clamped():
    clock = FakeClock()
    controller = RotationController(0.2, 0.01, 0.2, 0.0, 0.1, 0.2, clock)
    assert controller.force(100.0) == -0.2
    clock.now = 50
    assert controller.force(-100.0) == 0.2


def test_rotation_is_antisymmetric():
    clock_a, clock_b = FakeClock(), FakeClock()
    a = RotationController(0.04, 0.01, 0.12, 0.0, 0.1, 5.0, clock_a)
    b = RotationController(0.04, 0.01, 0.12, 0.0, 0.1, 5.0, clock_b)
    for step, value in enumerate([0.01, 0.02, -0.005, 0.03], start=1):
        clock_a.now = clock_b.now = step * 20
        assert a.force(value) == pytest.approx(-b.force(-value))


def test_rotation_integral_is_bounded():
    clock = FakeClock()
    controller = RotationController(0, 1, 0, 0.0, 0.5, 100.0, clock)
    controller.force(-1000.0)
    clock.now = 10000
    assert controller.force(-1000.0) == pytest.approx(10.0)
    assert controller.integral == 10.0


def test_rotation_error_sign_follows_setpoint():
    controller = RotationController(0.2, 0.01, 0.2, 1.3, 0.1, 0.2, FakeClock())
    assert controller.force(0.0) > 0


def test_distance_derivative_is_clamped():
    controller = DistanceController(0, 0, 1, 0.0, 1000.0, FakeClock(), True)
    assert controller.force(100.0) == pytest.approx(50.0)


def test_distance_docking_direction_flips_sign():
    pushing = DistanceController(0, 0, 1, 0.0, 1000.0, FakeClock(), False)
    assert pushing.force(100.0) == pytest.approx(-50.0)


def test_distance_output_is_limited():
    clock = FakeClock()
    controller = DistanceController(0.147, 0.006, 0.377, 30.0, 0.2, clock)
    assert controller.force(500.0) == 0.2
    clock.now = 100
    assert controller.force(500.0) == 0.2


def test_distance_at_setpoint_gives_zero():
    controller = DistanceController(0.147, 0.006, 0.377, 30.0, 0.2, FakeClock())
    assert controller.force(30.0) == 0.0
    assert controller.filtered == 30.0


def test_distance_filter_converges_monotonically():
    clock = FakeClock()
    controller = DistanceController(0.147, 0.0, 0.6, 20.0, 0.15, clock, False)
    previous = controller.filtered
    for step in range(1, 41):
        clock.now = step * 100
        controller.force(50.0)
        assert previous < controller.filtered < 50.0
        previous = controller.filtered
    assert controller.filtered == pytest.approx(50.0, abs=0.01)