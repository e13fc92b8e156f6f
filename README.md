# buttplug_patterns

A small, composable library for describing how the intensity of a device's
actuators changes over time, and for driving connected devices with those
descriptions.

A pattern answers two questions: what intensity it has at a given moment
(`sample(time)`), and how long one cycle of it lasts (`duration()`). Stateful
patterns can be returned to their starting state with `reset()`. Times and
durations are plain float seconds; a duration of `math.inf` means the pattern
never ends.

## Installing

```
pip install buttplug_patterns
```

The package has no runtime dependencies. The test suite needs the `test`
extra:

```
pip install "buttplug_patterns[test]"
```

## Modules

- `buttplug_patterns.pattern` – the `Pattern` base class, `CustomPattern`,
  and the combinator classes (`ScaleTime`, `ScaleIntensity`, `Sum`,
  `Subtract`, `Average`, `Clamp`, `ValidScale`, `Shift`, `Repeat`, `Forever`,
  `Chain`, `AmplitudeModulator`).
- `buttplug_patterns.shapes` – basic shapes and waves.
- `buttplug_patterns.randomness` – random patterns.
- `buttplug_patterns.driver` – the `Driver` that sends patterns to devices.

## Shapes

All in `buttplug_patterns.shapes`:

- `Constant(level, length)` – `level` for `length` seconds.
- `Linear(start, end, length)` – a straight ramp from `start` to `end` over
  `length` seconds.
- `SawWave(amplitude, wavelength)` – rises at `amplitude / wavelength` per
  second, wrapping back to 0 at 1.0.
- `TriangleWave(amplitude, wavelength)` – a triangle wave between 0 and
  `amplitude`.
- `SquareWave(amplitude, wavelength)` – `amplitude` for the first half of each
  wavelength, then 0.
- `SineWave(amplitude, wavelength)` – a sine wave between 0 and `amplitude`,
  starting at its trough.

Each wave's duration is one wavelength; use `repeat` or `forever` for more
cycles.

## Random patterns

All in `buttplug_patterns.randomness`. Values are drawn from the half-open
range `low`..`high`; a range with `low >= high` raises `ValueError`.

- `Random(low, high, length)` – a fresh value on every sample.
- `RandomEvery(low, high, length, interval)` – a value that changes only once
  more than `interval` seconds of wall-clock time have passed since the last
  change. It cannot change faster than it is sampled.
- `RandomWalk(low, high, length, increase, decrease)` – starts at 0 and on
  every sample steps up by `increase` or down by `decrease` at random; each
  step is limited to `low`..`high`. `reset()` returns it to 0.

## Custom patterns

`CustomPattern(sampler, length)` wraps a function of time and a function
returning the duration. For anything more involved, subclass `Pattern` and
implement `sample` and `duration`.

```python
from buttplug_patterns.pattern import CustomPattern

pulse = CustomPattern(lambda t: 1.0 if t < 0.1 else 0.0, lambda: 1.0)
```

## Combining patterns

Every pattern has methods that return a new, transformed pattern:

| Method | Effect |
| --- | --- |
| `scale_time(scalar)` | samples the inner pattern at `scalar / time` |
| `scale_intensity(scalar)` | multiplies every sample by `scalar` |
| `sum(other)` | adds two patterns |
| `subtract(other)` | subtracts `other` from this pattern |
| `average(other)` | mean of two patterns |
| `clamp(floor, ceiling)` | limits samples to `floor`..`ceiling` |
| `clamp_valid()` | limits samples to 0.0..1.0 |
| `scale_valid()` | squashes samples into 0.0..1.0 with the logistic function |
| `shift(time_shift)` | skips the first `time_shift` seconds |
| `repeat(count)` | plays the pattern `count` times; fractions are allowed |
| `forever()` | loops the pattern without end |
| `chain(other)` | switches to `other` once this pattern's duration has passed |
| `amplitude_modulate(modulator)` | multiplies this pattern by another |

`sum`, `subtract` and `average` last as long as the longer of the two
patterns; `chain` lasts as long as both together; `amplitude_modulate` lasts
as long as the pattern being modulated. `chain` passes the same time to
`other`, it does not restart it from zero.

Invalid times raise `ValueError`: a negative or non-finite shift, a shift
longer than the pattern, or repeating or looping a pattern of zero duration.

```python
from buttplug_patterns.shapes import SineWave, Constant

pattern = (
    SineWave(1.0, 2.0)
    .repeat(5)
    .chain(Constant(0.3, 4.0))
    .clamp_valid()
)
```

## Driving devices

`Driver(client, pattern)` from `buttplug_patterns.driver` samples patterns at
a fixed rate and sends the levels to every vibrating actuator of every
connected device.

- `set_tickrate(hz)` – samples per second, 1 to 1000 (10 by default); other
  values raise `ValueError`.
- `set_pattern(pattern)` – the global pattern.
- `set_device_pattern(device_id, pattern)` / `remove_device_pattern(device_id)`.
- `set_actuator_pattern(device_id, actuator_id, pattern)` /
  `remove_actuator_pattern(device_id, actuator_id)`.

An actuator pattern takes precedence over a device pattern, which takes
precedence over the global one. The setters return the driver, so calls can
be chained.

`await driver.run()` plays until the global pattern's duration is over.
`await driver.run_while(running)` also stops as soon as `running.is_set()` is
false, so a `threading.Event` or `asyncio.Event` can end playback early. All
patterns are reset before playback, and `stop_all_devices()` is awaited when
the loop ends. An error raised by a device propagates without stopping the
devices.

## What the package does not do

The package does not connect to a device server or discover devices itself.
The driver works with any client object you supply that has:

- `devices()` returning the connected devices, and
- `async stop_all_devices()`.

Each device needs an `index` attribute, `vibrate_attributes()` returning
actuators that each have an `index`, and `async vibrate(levels)` taking a
mapping of actuator index to level. Only vibration is driven.