"""Scene description, log formatting and the command-line simulation."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

from pricel.axle import TICK_INTERVAL
from pricel.config import DEFAULT_SETTINGS_PATH, load_settings
from pricel.system import TRACK_Y, SensorRecord, TrackSystem

TRACK_LENGTH = 1000.0
SENSOR_TRIANGLE = ((0.0, 0.0), (15.0, 30.0), (-15.0, 30.0))
AXLE_RADIUS = 8.0
HEADERS = ("Sensor", "Speed (m/s)", "Time (ms)", "Axle", "Distance (m)")


@dataclass(frozen=True)
class SceneItem:
    """One drawable element of the track view."""

    kind: str
    x: float
    y: float
    color: str | None = None
    text: str | None = None
    shape: tuple[tuple[float, float], ...] = ()


def build_scene(system: TrackSystem) -> list[SceneItem]:
    """Describe the track, sensors and axles as drawable items."""
    items = [
        SceneItem(
            kind="line",
            x=0.0,
            y=TRACK_Y,
            color="red",
            shape=((0.0, TRACK_Y), (TRACK_LENGTH, TRACK_Y)),
        )
    ]
    for sensor in system.sensors:
        items.append(
            SceneItem(kind="polygon", x=sensor.x, y=TRACK_Y, color="yellow", shape=SENSOR_TRIANGLE)
        )
        items.append(SceneItem(kind="text", x=sensor.x - 5, y=120.0, text=str(sensor.id)))
    for axle in system.axles:
        items.append(
            SceneItem(
                kind="ellipse",
                x=axle.position,
                y=TRACK_Y,
                color="red" if axle.number % 2 == 0 else "green",
                shape=((-AXLE_RADIUS, -AXLE_RADIUS), (2 * AXLE_RADIUS, 2 * AXLE_RADIUS)),
            )
        )
        items.append(SceneItem(kind="text", x=axle.position - 5, y=170.0, text=str(axle.number)))
    return items


def format_record(record: SensorRecord) -> tuple[str, str, str, str, str]:
    """Render a log record as the five table cells."""
    return (
        str(record.sensor_id),
        f"{record.velocity:.2f}",
        str(record.time_since_last),
        str(record.axle_num),
        f"{record.distance:.2f}",
    )


class _SimulatedClock:
    def __init__(self) -> None:
        self.now_ms = 0

    def __call__(self) -> int:
        return self.now_ms


def main(argv: list[str] | None = None) -> int:
    """Run the locomotive over the sensors and print the pass log."""
    parser = argparse.ArgumentParser(description="Simulate axles passing track sensors.")
    parser.add_argument("--config", default=str(DEFAULT_SETTINGS_PATH), help="settings INI file")
    parser.add_argument(
        "--interval", type=float, default=TICK_INTERVAL, help="seconds per simulation step"
    )
    parser.add_argument("--max-ticks", type=int, default=2000, help="upper bound on steps")
    args = parser.parse_args(argv)

    if args.interval <= 0:
        parser.error("--interval must be positive")

    clock = _SimulatedClock()
    system = TrackSystem(load_settings(args.config), clock)
    step_ms = round(args.interval * 1000)

    for _ in range(args.max_ticks):
        if system.all_passed():
            break
        clock.now_ms += step_ms
        system.tick(args.interval)

    print("\t".join(HEADERS))
    for record in system.records:
        print("\t".join(format_record(record)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())