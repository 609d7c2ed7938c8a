# pricel

`pricel` simulates a locomotive's axles rolling along a track past a row of
five sensors. Each time an axle comes within 1.0 of a sensor it has not yet
passed, the pass is recorded with the sensor id, the axle velocity, the time
in milliseconds since that axle's previous pass, the axle number and a
distance value.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Configuration

Settings are read from an INI file (by default `config/settings.ini`,
relative to the current directory) with two sections. Every key is optional,
and a missing file gives all the defaults shown below. A value that is not a
number is read as 0.0.

```ini
[distances]
; spacing between consecutive sensors
d12 = 31.50
d23 = 3.20
d34 = 0.60
d45 = 35.10

[locomotive]
; spacing between consecutive axles, comma separated
wheel_formula = 2.0,2.0,4.66,2.0,2.0
; axle speed per second
speed = 1.0
```

The first sensor stands at position 50 and each further sensor is placed at
the previous one plus its spacing. There is one axle per entry in the wheel
formula: the first starts at position 30 and each following axle starts at
the previous one plus the previous entry.

## Command line

```
pricel
```

runs the simulation on a simulated clock and prints a tab-separated table of
the recorded passes, with the columns `Sensor`, `Speed (m/s)`, `Time (ms)`,
`Axle` and `Distance (m)`. The run stops once every axle has passed every
sensor, or after the step limit.

Options:

- `--config PATH` – settings file to read (default `config/settings.ini`).
- `--interval SECONDS` – simulated time per step (default `0.1`); must be
  positive.
- `--max-ticks N` – upper bound on the number of steps (default `2000`).

## Library use

- `pricel.config.load_settings(path)` reads a settings file into a frozen
  `Settings` object (`d12`, `d23`, `d34`, `d45`, `wheel_formula`, `speed`,
  and the `sensor_gaps` tuple). `parse_wheel_formula(text)` turns a
  comma-separated formula into a list of floats, skipping empty parts.
- `pricel.system.TrackSystem(settings, clock)` builds the five sensors and
  the axles. `clock` is a callable returning milliseconds; it defaults to the
  wall clock.
  - `tick(interval)` advances every moving axle by velocity × interval.
  - `toggle_block()` stops the axles or restarts them at the configured
    speed, and returns the new blocked state.
  - `set_axles_velocity(velocity)` sets every axle's velocity (0 while
    blocked).
  - `reset()` places each axle at 30 plus the sum of the formula entries up
    to and including its own, forgets which sensors were passed and clears
    `records`. It raises `ValueError` if the wheel formula has fewer entries
    than there are axles.
  - `records` holds the `SensorRecord` entries; a record's `distance` is the
    distance moved in the triggering step times the elapsed milliseconds,
    divided by 100.
  - `all_passed()` tells whether every axle has triggered every sensor.
- `pricel.axle.Axle` is a moving axle (`move`, `update_position`,
  `register_sensor`, `set_velocity`, `reset_position`, `distance_to`,
  `has_passed`). `Axle.on_passed_sensor(callback)` registers a callback
  called with `(sensor, velocity, time_since_last, axle_num, distance)`.
- `pricel.sensor.Sensor` is a fixed sensor (`position`, `x`,
  `register_axle_pass`, `detections`, `handle_axle_pass`,
  `is_axle_passing`, which checks a zone of ±0.2).
  `Sensor.on_new_data(callback)` registers a callback called with
  `(sensor_id, velocity, time_since_last, axle_num, distance)`.
- `pricel.app.build_scene(system)` returns a list of `SceneItem` values
  describing the track line, the sensor triangles and labels, and the axle
  circles and labels. `format_record(record)` renders one `SensorRecord` as
  five table cells.

## What it does not do

There is no graphical window. `build_scene` only describes the picture as
data; nothing in the package draws it, and the command prints the pass log
alone. Blocking and resetting are available through `TrackSystem`, not from
the command line.