"""The simulated track: sensors, a locomotive's axles and the pass log."""

from __future__ import annotations

from dataclasses import dataclass

from pricel.axle import TICK_INTERVAL, Axle
from pricel.config import Settings
from pricel.sensor import Clock, Sensor

SENSOR_COUNT = 5
FIRST_SENSOR_X = 50.0
TRACK_Y = 150.0
START_POSITION = 30.0


@dataclass(frozen=True)
class SensorRecord:
    """One row of the sensor log."""

    sensor_id: int
    velocity: float
    time_since_last: int
    axle_num: int
    distance: float


class TrackSystem:
    """Five sensors along a track and the axles of one locomotive passing them."""

    def __init__(self, settings: Settings | None = None, clock: Clock | None = None) -> None:
        self.settings = settings if settings is not None else Settings()
        self.blocked = False
        self.records: list[SensorRecord] = []
        self.sensors: list[Sensor] = [
            Sensor(sensor_id, clock) for sensor_id in range(1, SENSOR_COUNT + 1)
        ]

        x = FIRST_SENSOR_X
        self.sensors[0].position = (x, TRACK_Y)
        for sensor, gap in zip(self.sensors[1:], self.settings.sensor_gaps):
            x += gap
            sensor.position = (x, TRACK_Y)

        self.axles: list[Axle] = []
        current = START_POSITION
        for number, gap in enumerate(self.settings.wheel_formula):
            axle = Axle(number, clock)
            axle.position = current
            axle.set_velocity(self.settings.speed)
            self.axles.append(axle)
            current += gap

        for axle in self.axles:
            for sensor in self.sensors:
                axle.register_sensor(sensor)
                axle.on_passed_sensor(sensor.handle_axle_pass)
            axle.on_passed_sensor(self.handle_sensor_data)

    def handle_sensor_data(
        self,
        sensor: Sensor,
        velocity: float,
        time_since_last: int,
        axle_num: int,
        distance: float,
    ) -> SensorRecord | None:
        """Log a pass over one of this system's sensors; other sensors are ignored."""
        if not any(s is sensor for s in self.sensors):
            return None
        record = SensorRecord(
            sensor_id=sensor.id,
            velocity=velocity,
            time_since_last=time_since_last,
            axle_num=axle_num,
            distance=(distance * time_since_last) / 100,
        )
        self.records.append(record)
        return record

    def set_axles_velocity(self, velocity: float) -> None:
        """Set every axle's velocity; a blocked system keeps them stopped."""
        for axle in self.axles:
            axle.set_velocity(0.0 if self.blocked else velocity)

    def toggle_block(self) -> bool:
        """Stop or restart the locomotive and return the new blocked state."""
        self.blocked = not self.blocked
        self.set_axles_velocity(0.0 if self.blocked else self.settings.speed)
        return self.blocked

    def reset(self) -> None:
        """Put the axles back at the start and clear the log."""
        formula = self.settings.wheel_formula
        if len(formula) < len(self.axles):
            raise ValueError(
                f"wheel formula has {len(formula)} entries for {len(self.axles)} axles"
            )
        current = START_POSITION
        for axle, gap in zip(self.axles, formula):
            current += gap
            axle.position = current
            axle.reset_position(current)
        self.records.clear()

    def tick(self, interval: float = TICK_INTERVAL) -> None:
        """Advance every axle by one timer step of *interval* seconds."""
        for axle in self.axles:
            axle.update_position(interval)

    def all_passed(self) -> bool:
        """True once every axle has triggered every sensor."""
        return all(axle.has_passed(sensor) for axle in self.axles for sensor in self.sensors)