import pytest

from pricel.config import Settings
from pricel.sensor import Sensor
from pricel.system import SensorRecord, TrackSystem


class FakeClock:
    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now


def make_system(**kwargs):
    settings = Settings(
        d12=10.0, d23=10.0, d34=10.0, d45=10.0,
        wheel_formula=kwargs.pop("wheel_formula", (1.0, 2.0)),
        speed=kwargs.pop("speed", 1.0),
    )
    clock = FakeClock()
    return TrackSystem(settings, clock), clock


def test_sensor_positions_follow_gaps():
    system, _ = make_system()
    xs = [s.x for s in system.sensors]
    assert xs[0] == 50.0
    assert [s.id for s in system.sensors] == [1, 2, 3, 4, 5]
    gaps = [b - a for a, b in zip(xs, xs[1:])]
    assert gaps == pytest.approx(list(system.settings.sensor_gaps))
    assert all(s.position[1] == 150.0 for s in system.sensors)


def test_axles_placed_from_wheel_formula():
    system, _ = make_system(wheel_formula=(1.0, 2.0))
    assert [a.number for a in system.axles] == [0, 1]
    assert system.axles[0].position == 30.0
    assert system.axles[1].position == pytest.approx(31.0)
    assert all(a.velocity == 1.0 for a in system.axles)
    assert all(len(a.sensors) == 5 for a in system.axles)


def test_handle_sensor_data_records_row():
    system, _ = make_system()
    record = system.handle_sensor_data(system.sensors[2], 1.5, 1000, 1, 0.1)
    assert record == system.records[-1]
    assert record.sensor_id == 3
    assert record.axle_num == 1
    assert record.distance == pytest.approx(1.0)


def test_handle_sensor_data_ignores_foreign_sensor():
    system, _ = make_system()
    assert system.handle_sensor_data(Sensor(9), 1.0, 10, 0, 0.1) is None
    assert system.records == []


def test_ticking_triggers_first_sensor():
    system, clock = make_system(wheel_formula=(1.0,))
    for _ in range(200):
        clock.now += 100
        system.tick(0.1)
    assert len(system.records) == 1
    record = system.records[0]
    assert record.sensor_id == 1
    assert record.axle_num == 0
    assert system.sensors[0].last_axle_num == 0
    assert system.axles[0].has_passed(system.sensors[0])


def test_toggle_block_stops_and_restarts():
    system, _ = make_system(speed=2.5)
    assert system.toggle_block() is True
    assert all(a.velocity == 0.0 for a in system.axles)
    before = [a.position for a in system.axles]
    system.tick()
    assert [a.position for a in system.axles] == before
    assert system.toggle_block() is False
    assert all(a.velocity == 2.5 for a in system.axles)


def test_set_axles_velocity_respects_block():
    system, _ = make_system()
    system.set_axles_velocity(3.0)
    assert all(a.velocity == 3.0 for a in system.axles)
    system.blocked = True
    system.set_axles_velocity(3.0)
    assert all(a.velocity == 0.0 for a in system.axles)


def test_reset_restores_positions_and_clears_log():
    system, clock = make_system(wheel_formula=(1.0, 2.0))
    for _ in range(250):
        clock.now += 100
        system.tick(0.1)
    assert system.records
    system.reset()
    assert system.records == []
    assert system.axles[0].position == pytest.approx(31.0)
    assert system.axles[1].position == pytest.approx(33.0)
    assert not any(a.has_passed(s) for a in system.axles for s in system.sensors)


def test_reset_with_short_formula_raises():
    system, _ = make_system(wheel_formula=(1.0, 2.0))
    system.settings = Settings(wheel_formula=(1.0,))
    with pytest.raises(ValueError):
        system.reset()


def test_record_is_immutable():
    record = SensorRecord(1, 1.0, 5, 0, 0.5)
    with pytest.raises(AttributeError):
        record.sensor_id = 2
    assert record.sensor_id == 1