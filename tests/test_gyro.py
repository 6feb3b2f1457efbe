import pytest

from hovercontrol.gyro import GyroSensor, MotionSource, Orientation


class QueueSource(MotionSource):
    def __init__(self, samples):
        self.samples = list(samples)

    def read(self):
        return self.samples.pop(0) if self.samples else None


def rad(degrees):
    return degrees * 3.14 / 180


def sample(yaw_deg, pitch_deg=0.0, roll_deg=0.0, **accel):
    return Orientation(rad(yaw_deg), rad(pitch_deg), rad(roll_deg), **accel)


def test_update_converts_to_degrees():
    gyro = GyroSensor(QueueSource([sample(30, 10, -5)]))
    gyro.update()
    assert gyro.yaw_raw == pytest.approx(30)
    assert gyro.pitch == pytest.approx(10)
    assert gyro.roll == pytest.approx(-5)
    assert gyro.yaw == pytest.approx(30)


def test_yaw_unwraps_across_180_boundary():
    gyro = GyroSensor(QueueSource([sample(170), sample(-170)]))
    gyro.update()
    gyro.update()
    assert gyro.yaw_raw == pytest.approx(-170)
    assert gyro.yaw == pytest.approx(190)


def test_yaw_unwraps_in_negative_direction():
    gyro = GyroSensor(QueueSource([sample(-170), sample(170)]))
    gyro.update()
    gyro.update()
    assert gyro.yaw == pytest.approx(-190)


def test_missing_packet_keeps_values():
    gyro = GyroSensor(QueueSource([sample(45)]))
    gyro.update()
    gyro.update()
    assert gyro.yaw == pytest.approx(45)
    assert gyro.yaw_raw == pytest.approx(45)


def test_set_yaw_offset_zeroes_yaw():
    gyro = GyroSensor(QueueSource([sample(60), sample(70)]))
    gyro.update()
    gyro.set_yaw_offset()
    assert gyro.yaw == pytest.approx(0)
    gyro.update()
    assert gyro.yaw == pytest.approx(10)


def test_acceleration_signs():
    gyro = GyroSensor(QueueSource([sample(0, accel_x=3, accel_y=-4, accel_z=5)]))
    gyro.update()
    assert (gyro.accel_x, gyro.accel_y, gyro.accel_z) == (-3, 4, 5)


def test_many_small_steps_accumulate_past_full_turn():
    steps = [sample(((i * 30 + 180) % 360) - 180) for i in range(1, 25)]
    gyro = GyroSensor(QueueSource(steps))
    for _ in steps:
        gyro.update()
    assert gyro.yaw == pytest.approx(720, abs=1e-6)