import math
from dataclasses import dataclass, field

import pytest

from buttplug_patterns.pattern import (
    AmplitudeModulator,
    Average,
    Chain,
    Clamp,
    CustomPattern,
    Forever,
    Pattern,
    Repeat,
    ScaleIntensity,
    ScaleTime,
    Shift,
    Subtract,
    Sum,
    ValidScale,
)


@dataclass
class Level(Pattern):
    level: float
    length: float = 1.0

    def sample(self, time):
        return self.level

    def duration(self):
        return self.length


@dataclass
class Ramp(Pattern):
    """Returns the sampled time itself and records each request."""

    length: float = 2.0
    seen: list = field(default_factory=list)

    def sample(self, time):
        self.seen.append(time)
        return time

    def duration(self):
        return self.length


def constant(level, length=1.0):
    return CustomPattern(lambda t: level, lambda: length)


def test_pattern_is_abstract():
    with pytest.raises(TypeError):
        Pattern()


def test_custom_pattern_delegates():
    custom = CustomPattern(lambda t: t, lambda: 3.0)
    assert custom.sample(1.5) == 1.5
    assert custom.duration() == 3.0


def test_custom_pattern_combines_with_methods():
    custom = CustomPattern(lambda t: 0.25, lambda: 4.0)
    combined = custom.sum(Level(0.5, 1.0))
    assert combined.sample(0.0) == 0.25 + 0.5
    assert combined.duration() == 4.0


def test_scale_time_samples_at_scalar_over_time():
    ramp = Ramp()
    scaled = ScaleTime(ramp, 2.0)
    assert ramp.scale_time(2.0) == scaled
    assert scaled.sample(4.0) == pytest.approx(2.0 / 4.0)
    assert ramp.seen == [pytest.approx(2.0 / 4.0)]
    assert scaled.duration() == ramp.duration()


def test_scale_time_at_zero_raises():
    with pytest.raises(ValueError):
        ScaleTime(Ramp(), 2.0).sample(0.0)


def test_scale_intensity():
    ramp = Ramp(length=5.0)
    scaled = ScaleIntensity(ramp, 3.0)
    assert ramp.scale_intensity(3.0) == scaled
    for t in (0.0, 0.5, 1.25):
        assert scaled.sample(t) == pytest.approx(3.0 * t)
    assert scaled.duration() == 5.0


@pytest.mark.parametrize(
    "a_len,b_len", [(1.0, 2.0), (3.0, 0.5), (2.0, 2.0)]
)
def test_binary_durations_take_the_longer(a_len, b_len):
    a, b = constant(0.2, a_len), constant(0.4, b_len)
    expected = max(a_len, b_len)
    assert Sum(a, b).duration() == expected
    assert Subtract(a, b).duration() == expected
    assert Average(a, b).duration() == expected


def test_sum_subtract_average_values():
    a, b = constant(0.75), constant(0.25)
    assert Sum(a, b).sample(0.3) == pytest.approx(0.75 + 0.25)
    assert Subtract(a, b).sample(0.3) == pytest.approx(0.75 - 0.25)
    assert Average(a, b).sample(0.3) == pytest.approx((0.75 + 0.25) / 2)


def test_average_lies_between_inputs():
    avg = Average(Ramp(), constant(1.0))
    for t in (0.0, 0.4, 1.6):
        assert min(t, 1.0) <= avg.sample(t) <= max(t, 1.0)


def test_methods_build_equal_dataclasses():
    a, b = Level(0.1), Level(0.2)
    assert a.sum(b) == Sum(a, b)
    assert a.subtract(b) == Subtract(a, b)
    assert a.average(b) == Average(a, b)
    assert a.clamp(0.0, 0.5) == Clamp(a, 0.0, 0.5)
    assert a.scale_valid() == ValidScale(a)
    assert a.repeat(2.0) == Repeat(a, 2.0)
    assert a.forever() == Forever(a)
    assert a.chain(b) == Chain(a, b)
    assert a.amplitude_modulate(b) == AmplitudeModulator(a, b)


@pytest.mark.parametrize("level", [-3.0, 0.0, 0.3, 0.7, 1.0, 5.0])
def test_clamp_keeps_value_in_range(level):
    clamped = Clamp(constant(level), 0.2, 0.8)
    value = clamped.sample(0.0)
    assert 0.2 <= value <= 0.8
    if 0.2 <= level <= 0.8:
        assert value == level


def test_clamp_valid_bounds():
    assert constant(-0.5).clamp_valid().sample(0.0) == 0.0
    assert constant(1.5).clamp_valid().sample(0.0) == 1.0
    assert constant(0.4).clamp_valid().sample(0.0) == 0.4
    assert constant(0.4, 7.0).clamp_valid().duration() == 7.0


def test_scale_valid_midpoint():
    assert ValidScale(constant(0.0)).sample(0.0) == 0.5


@pytest.mark.parametrize("level", [-50.0, -2.0, -0.1, 0.1, 2.0, 50.0])
def test_scale_valid_is_symmetric_and_bounded(level):
    up = ValidScale(constant(level)).sample(0.0)
    down = ValidScale(constant(-level)).sample(0.0)
    assert 0.0 <= up <= 1.0
    assert up + down == pytest.approx(1.0)


def test_scale_valid_is_monotonic():
    values = [
        ValidScale(constant(x)).sample(0.0) for x in (-3.0, -1.0, 0.0, 1.0, 3.0)
    ]
    assert values == sorted(values)


def test_scale_valid_extreme_negative_does_not_overflow():
    assert ValidScale(constant(-1e6)).sample(0.0) == 0.0
    assert ValidScale(constant(1e6)).sample(0.0) == 1.0


def test_shift_moves_time_forward():
    ramp = Ramp(length=3.0)
    shifted = Shift(ramp, 1.0)
    assert ramp.shift(1.0) == shifted
    for t in (0.0, 0.5, 1.5):
        assert shifted.sample(t) == pytest.approx(t + 1.0)
    assert shifted.duration() == pytest.approx(3.0 - 1.0)


def test_shift_longer_than_pattern_raises():
    with pytest.raises(ValueError):
        Shift(Ramp(length=1.0), 2.0).duration()


def test_negative_shift_raises():
    with pytest.raises(ValueError):
        Shift(Ramp(), -1.0).sample(0.5)


def test_repeat_duration_scales_with_count():
    for count in (1.0, 1.5, 3.0):
        assert Repeat(Ramp(length=2.0), count).duration() == pytest.approx(count * 2.0)


def test_repeat_samples_within_total_duration():
    repeated = Repeat(Ramp(length=2.0), 3.0)
    for t in (0.0, 1.0, 2.5, 5.0):
        assert repeated.sample(t) == pytest.approx(t)


def test_repeat_of_empty_pattern_raises():
    repeated = Repeat(Ramp(length=0.0), 2.0)
    with pytest.raises(ValueError):
        repeated.sample(1.0)


def test_forever_loops_with_inner_period():
    looped = Forever(Ramp(length=2.0))
    assert looped.duration() == math.inf
    for t in (0.25, 0.5, 1.75):
        assert looped.sample(t + 2.0) == pytest.approx(looped.sample(t))
        assert looped.sample(t + 6.0) == pytest.approx(t)


def test_forever_cannot_be_repeated():
    repeated = Repeat(Forever(Ramp()), 2.0)
    with pytest.raises(ValueError):
        repeated.duration()


def test_chain_switches_after_first_duration():
    first = Level(0.3, 1.0)
    then = Ramp(length=2.0)
    chained = Chain(first, then)
    assert chained.duration() == pytest.approx(1.0 + 2.0)
    assert chained.sample(0.5) == 0.3
    assert chained.sample(1.5) == 1.5
    assert then.seen == [1.5]


def test_chain_boundary_belongs_to_second():
    chained = Chain(Level(0.3, 1.0), Level(0.9, 1.0))
    assert chained.sample(1.0) == 0.9


def test_amplitude_modulate_multiplies():
    modulated = AmplitudeModulator(Ramp(length=4.0), Level(0.5, 10.0))
    for t in (0.0, 1.0, 3.0):
        assert modulated.sample(t) == pytest.approx(t * 0.5)
    assert modulated.duration() == 4.0


def test_transformers_compose():
    pattern = Clamp(
        Chain(ScaleIntensity(Level(2.0, 1.0), 0.5), Level(-1.0, 1.0)), 0.0, 1.0
    )
    assert pattern == (
        Level(2.0, 1.0).scale_intensity(0.5).chain(Level(-1.0, 1.0)).clamp_valid()
    )
    assert pattern.sample(0.5) == pytest.approx(2.0 * 0.5)
    assert pattern.sample(1.5) == 0.0
    assert pattern.duration() == pytest.approx(1.0 + 1.0)