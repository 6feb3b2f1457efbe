# hovercontrol

This package controls a small hovercraft that is moved by PWM blowers. The
code talks to hardware only through small pin and sensor interfaces. You can
connect those interfaces to a real board, or run the whole package in
software with the included `RecordingBoard`.

## Modules

- `hovercontrol.motor`
  - `Board` is the abstract pin interface. It has `pin_mode`,
    `digital_write` and `analog_write`.
  - `RecordingBoard` keeps the last mode, level and duty of every pin, and a
    list of every call made to it.
  - `Motor` is one H-bridge channel. `drive(speed, duration=None)` runs it in
    the direction given by the sign of `speed`. `duration` is in
    milliseconds. `brake()` and `standby()` are also provided.
  - The helpers `forward`, `back`, `left`, `right` and `brake` each drive a
    pair of motors.
- `hovercontrol.translators`
  - `PWMTranslator` is the abstract base class.
  - `SidePWMTranslator` and `StuwPWMTranslator` each map a signed PWM value
    to thrust through one quadratic curve per direction. `pwm_to_thrust`
    goes from PWM to thrust, and `thrust_to_pwm` goes back.
  - `SidePWMTranslator` keeps its results inside the PWM band 20–170 in each
    direction.
  - `StuwPWMTranslator` returns ±255 when the requested thrust is beyond what
    full PWM gives.
  - `debug_report()` returns a text summary of these limits.
- `hovercontrol.drivers`
  - `BlowerDriver.drive(pwm)` returns the PWM value that was actually applied.
  - `SideBlowerDriver` clamps PWM into a forward band and a reverse band, then
    drives a `Motor`. A PWM of zero falls into the reverse branch.
  - `StuwBlowerDriver` drives one of two PWM pins, chosen by the sign of the
    PWM value.
- `hovercontrol.blower`
  - `Blower` joins a driver and a translator.
  - `deliver(thrust)` takes a thrust in grams-force and returns the PWM that
    was applied.
- `hovercontrol.tof`
  - `TOFSensor` wraps any `RangeSensor` that sits on its own shutdown pin.
  - `init_address(address)` powers the sensor up and sets its bus address. It
    returns `False` if the chip does not start.
  - `distance()` returns the average of the last four readings in
    millimetres, with the offset added. It raises `SensorNotInitialisedError`
    if the address has not been set.
- `hovercontrol.gyro`
  - `GyroSensor` reads `Orientation` samples from a `MotionSource` when you
    call `update()`.
  - The `yaw` property keeps counting past ±180°; it does not wrap.
  - `set_yaw_offset()` adds the current yaw to the zero offset.
  - The sensor also exposes `yaw_raw`, `pitch`, `roll`, `accel_x`, `accel_y`
    and `accel_z`.
- `hovercontrol.display`
  - `SevenSegmentDisplay(board, pins)` takes exactly eight pins.
  - `draw_digit(digit)` shows a digit from 0 to 9.
  - The last pin carries the `enabled` level.
- `hovercontrol.sdlogger`
  - `SDCardWriter(directory, clock=None)` records three values at most every
    100 ms as packed 16-byte `SensorRecord`s.
  - When its 4096-byte buffer is full, or when `timer` seconds have passed,
    it writes the whole buffer to the first free `data<N>.bin` file in
    `directory`.
  - `read_records(path)` reads such a file back.
- `hovercontrol.pid`
  - `RotationController` is a PID loop with anti-windup. It turns a torque
    into a force on an arm.
  - `DistanceController` is a low-pass-filtered PID loop on distance.
  - Both take a `clock` that returns milliseconds.
- `hovercontrol.rotation_states`
  - `GyroTurnState`, `GyroAntiRotationState` and `TofAntiRotationState` each
    steer rotation with the two rear blowers.
  - `yaw_from_distances` computes a yaw angle from two side distances.
- `hovercontrol.distance_states`
  - `WallStopState`, `ArucoDistanceState`, `ArucoOrientationState`,
    `DockingState` and `ForwardState` each hold a distance or a marker
    bearing.

Each state's `run()` performs one control step. It returns a `ThrustReport`
or a `DistanceReport` that lists the forces, grams-force and PWM values it
sent. States that take a `logger` pass their values to its `log` method. An
`SDCardWriter` can serve as that logger.

## Example

```python
from hovercontrol.motor import RecordingBoard
from hovercontrol.drivers import StuwBlowerDriver
from hovercontrol.translators import StuwPWMTranslator
from hovercontrol.blower import Blower

board = RecordingBoard()
translator = StuwPWMTranslator(0.002, 0.05, 0.0, 0.002, 0.05, 0.0)
blower = Blower(StuwBlowerDriver(board, 5, 6), translator)

applied = blower.deliver(20.0)   # grams-force in, PWM applied out
print(applied, board.duties)
print(translator.debug_report())
```

## What it does not do

- It has no board or sensor backends for real hardware. You supply your own
  `Board`, `RangeSensor` and `MotionSource`.
- It has no command-line program and no main loop that switches between
  states. Your code chooses a state and calls `run()` on it repeatedly.
- Nothing is printed. Diagnostic values come back in the reports and in
  `debug_report()`.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```