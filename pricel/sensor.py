"""Track-side wheel sensors that record axle passes."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Callable

Clock = Callable[[], int]
NewDataCallback = Callable[[int, float, int, int, float], None]

SENSOR_WIDTH = 0.2


def wall_clock_ms() -> int:
    """Milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


@dataclass(frozen=True)
class AxleDetection:
    """One recorded pass of an axle over a sensor."""

    axle: Any
    velocity: float
    time_prev: int
    detection_time: int


class Sensor:
    """A sensor placed at a point on the track."""

    def __init__(self, sensor_id: int, clock: Clock | None = None) -> None:
        self.id = sensor_id
        self.position: tuple[float, float] = (0.0, 0.0)
        self.last_velocity: float | None = None
        self.last_time_since_last: int | None = None
        self.last_axle_num: int | None = None
        self.axle_pass_times: dict[int, int] = {}
        self.axle_positions: dict[int, float] = {}
        self._clock = clock or wall_clock_ms
        self._detections: list[AxleDetection] = []
        self._listeners: list[NewDataCallback] = []

    def __repr__(self) -> str:
        return f"Sensor(id={self.id}, position={self.position})"

    @property
    def x(self) -> float:
        """Position of the sensor along the track."""
        return self.position[0]

    @property
    def detections(self) -> tuple[AxleDetection, ...]:
        """Passes recorded with :meth:`register_axle_pass`, oldest first."""
        return tuple(self._detections)

    def on_new_data(self, callback: NewDataCallback) -> NewDataCallback:
        """Call *callback* with (sensor_id, velocity, time_since_last, axle_num, distance) on each pass."""
        self._listeners.append(callback)
        return callback

    def register_axle_pass(self, axle: Any, velocity: float, time_prev: int) -> AxleDetection:
        """Record a detection of *axle*, stamped with the current time."""
        detection = AxleDetection(
            axle=axle,
            velocity=velocity,
            time_prev=time_prev,
            detection_time=self._clock(),
        )
        self._detections.append(detection)
        return detection

    def handle_axle_pass(
        self,
        sensor: "Sensor",
        velocity: float,
        time_since_last: int,
        axle_num: int,
        distance: float,
    ) -> None:
        """Store a pass reported for *sensor* and notify listeners; passes for other sensors are ignored."""
        if sensor is not self:
            return

        self.axle_pass_times[axle_num] = self._clock()
        self.axle_positions[axle_num] = self.x

        self.last_velocity = velocity
        self.last_time_since_last = time_since_last
        self.last_axle_num = axle_num

        for listener in list(self._listeners):
            listener(self.id, velocity, time_since_last, axle_num, distance)

    def is_axle_passing(self, axle_pos: float) -> bool:
        """True when *axle_pos* lies within the sensor's detection zone."""
        return abs(axle_pos - self.x) < SENSOR_WIDTH