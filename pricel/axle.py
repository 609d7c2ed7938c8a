"""Wheel axles moving along the track and triggering sensors."""

from __future__ import annotations

from typing import Callable

from pricel.sensor import Clock, Sensor, wall_clock_ms

PassedSensorCallback = Callable[[Sensor, float, int, int, float], None]

TICK_INTERVAL = 0.1
DETECTION_RANGE = 1.0
_FUZZY_EPSILON = 0.00001


def _is_null(value: float) -> bool:
    return abs(value) <= _FUZZY_EPSILON


class Axle:
    """One axle of a locomotive, with a position and velocity along the track."""

    def __init__(self, number: int, clock: Clock | None = None) -> None:
        self.number = number
        self.position = 0.0
        self._velocity = 0.0
        self._clock = clock or wall_clock_ms
        self.last_pass_time = self._clock()
        self._sensors: list[Sensor] = []
        self._passed: set[int] = set()
        self._listeners: list[PassedSensorCallback] = []

    def __repr__(self) -> str:
        return f"Axle(number={self.number}, position={self.position}, velocity={self._velocity})"

    @property
    def velocity(self) -> float:
        return self._velocity

    @velocity.setter
    def velocity(self, value: float) -> None:
        self.set_velocity(value)

    @property
    def sensors(self) -> tuple[Sensor, ...]:
        """Sensors this axle checks, in registration order."""
        return tuple(self._sensors)

    def on_passed_sensor(self, callback: PassedSensorCallback) -> PassedSensorCallback:
        """Call *callback* with (sensor, velocity, time_since_last, axle_num, distance) on each pass."""
        self._listeners.append(callback)
        return callback

    def update_position(self, interval: float = TICK_INTERVAL) -> None:
        """Advance by velocity times *interval* seconds; a stopped axle stays put."""
        if _is_null(self._velocity):
            return
        self.move(self._velocity * interval)

    def move(self, distance: float) -> None:
        """Shift the axle by *distance* and report every newly reached sensor."""
        self.position += distance

        for sensor in list(self._sensors):
            if id(sensor) in self._passed:
                continue
            if abs(self.position - sensor.x) < DETECTION_RANGE:
                now = self._clock()
                time_since_last = now - self.last_pass_time
                self.last_pass_time = now
                self._passed.add(id(sensor))
                for listener in list(self._listeners):
                    listener(sensor, self._velocity, time_since_last, self.number, distance)

    def register_sensor(self, sensor: Sensor | None) -> None:
        """Add *sensor* to those this axle checks; duplicates and None are ignored."""
        if sensor is not None and not any(s is sensor for s in self._sensors):
            self._sensors.append(sensor)

    def has_passed(self, sensor: Sensor) -> bool:
        """True once this axle has triggered *sensor* since the last reset."""
        return id(sensor) in self._passed

    def set_velocity(self, velocity: float) -> None:
        """Set the velocity; a non-zero velocity restarts the pass timer."""
        self._velocity = velocity
        if not _is_null(velocity):
            self.last_pass_time = self._clock()

    def reset_position(self, new_position: float) -> None:
        """Place the axle at *new_position* and forget which sensors it passed."""
        self.position = new_position
        self.last_pass_time = self._clock()
        self._passed.clear()

    def distance_to(self, other: "Axle") -> float:
        """Absolute distance between this axle and *other*."""
        return abs(self.position - other.position)