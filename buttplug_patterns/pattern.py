"""Core pattern abstraction and the combinators that transform patterns.

Times and durations are expressed as float seconds. A duration of
``math.inf`` means the pattern never ends.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass

__all__ = [
    "Pattern",
    "CustomPattern",
    "ScaleTime",
    "ScaleIntensity",
    "Sum",
    "Subtract",
    "Average",
    "Clamp",
    "ValidScale",
    "Shift",
    "Repeat",
    "Forever",
    "Chain",
    "AmplitudeModulator",
]


def _as_time(seconds: float) -> float:
    """Validate that ``seconds`` is a usable point in time or span."""
    if math.isnan(seconds) or math.isinf(seconds) or seconds < 0.0:
        raise ValueError(f"invalid time value: {seconds!r} seconds")
    return float(seconds)


class Pattern(ABC):
    """A pattern yielding an intensity for any point in time.

    Sampling past a pattern's duration is unspecified; use :meth:`repeat`,
    :meth:`forever` and :meth:`chain` to extend patterns.
    """

    @abstractmethod
    def sample(self, time: float) -> float:
        """Return the intensity at ``time`` seconds."""

    @abstractmethod
    def duration(self) -> float:
        """Return how long one cycle of the pattern takes, in seconds."""

    def reset(self) -> None:
        """Return a stateful pattern to its initial state; stateless ones ignore this."""

    def scale_time(self, scalar: float) -> ScaleTime:
        """Scale the pattern in the time domain by ``scalar``."""
        return ScaleTime(self, scalar)

    def scale_intensity(self, scalar: float) -> ScaleIntensity:
        """Scale the pattern's intensity by ``scalar``."""
        return ScaleIntensity(self, scalar)

    def sum(self, other: Pattern) -> Sum:
        """Add ``other`` to this pattern."""
        return Sum(self, other)

    def subtract(self, other: Pattern) -> Subtract:
        """Subtract ``other`` from this pattern."""
        return Subtract(self, other)

    def average(self, other: Pattern) -> Average:
        """Average this pattern with ``other``."""
        return Average(self, other)

    def clamp(self, floor: float, ceiling: float) -> Clamp:
        """Limit the pattern's output to ``floor``..``ceiling``."""
        return Clamp(self, floor, ceiling)

    def clamp_valid(self) -> Clamp:
        """Limit the pattern's output to the valid command range 0.0..1.0."""
        return self.clamp(0.0, 1.0)

    def scale_valid(self) -> ValidScale:
        """Squash the pattern's output into 0.0..1.0 with a sigmoid."""
        return ValidScale(self)

    def shift(self, time_shift: float) -> Shift:
        """Skip the first ``time_shift`` seconds of the pattern."""
        return Shift(self, time_shift)

    def repeat(self, count: float) -> Repeat:
        """Repeat the pattern ``count`` times; fractional counts are allowed."""
        return Repeat(self, count)

    def forever(self) -> Forever:
        """Loop the pattern without end."""
        return Forever(self)

    def chain(self, other: Pattern) -> Chain:
        """Run ``other`` once this pattern's duration has passed."""
        return Chain(self, other)

    def amplitude_modulate(self, modulator: Pattern) -> AmplitudeModulator:
        """Multiply this pattern by ``modulator``."""
        return AmplitudeModulator(self, modulator)


@dataclass
class CustomPattern(Pattern):
    """A pattern built from a sampling function and a duration function."""

    sampler: Callable[[float], float]
    length: Callable[[], float]

    def sample(self, time: float) -> float:
        return self.sampler(time)

    def duration(self) -> float:
        return self.length()


@dataclass
class ScaleTime(Pattern):
    """Scales the pattern in the time domain by a given scalar."""

    pattern: Pattern
    scalar: float

    def sample(self, time: float) -> float:
        inverse = math.inf if time == 0 else 1.0 / time
        return self.pattern.sample(_as_time(self.scalar * inverse))

    def duration(self) -> float:
        return self.pattern.duration()


@dataclass
class ScaleIntensity(Pattern):
    """Scales the pattern in the intensity domain by a given scalar."""

    pattern: Pattern
    scalar: float

    def sample(self, time: float) -> float:
        return self.scalar * self.pattern.sample(time)

    def duration(self) -> float:
        return self.pattern.duration()


@dataclass
class Sum(Pattern):
    """Adds two patterns together."""

    a: Pattern
    b: Pattern

    def sample(self, time: float) -> float:
        return self.a.sample(time) + self.b.sample(time)

    def duration(self) -> float:
        return max(self.a.duration(), self.b.duration())


@dataclass
class Subtract(Pattern):
    """Subtracts the second pattern from the first."""

    a: Pattern
    b: Pattern

    def sample(self, time: float) -> float:
        return self.a.sample(time) - self.b.sample(time)

    def duration(self) -> float:
        return max(self.a.duration(), self.b.duration())


@dataclass
class Average(Pattern):
    """Averages two patterns."""

    a: Pattern
    b: Pattern

    def sample(self, time: float) -> float:
        return (self.a.sample(time) + self.b.sample(time)) / 2.0

    def duration(self) -> float:
        return max(self.a.duration(), self.b.duration())


@dataclass
class Clamp(Pattern):
    """Clamps the pattern to a given range."""

    pattern: Pattern
    floor: float
    ceiling: float

    def sample(self, time: float) -> float:
        return min(max(self.pattern.sample(time), self.floor), self.ceiling)

    def duration(self) -> float:
        return self.pattern.duration()


@dataclass
class ValidScale(Pattern):
    """Squashes the pattern into 0.0..1.0 with the logistic function."""

    pattern: Pattern

    def sample(self, time: float) -> float:
        value = self.pattern.sample(time)
        if value >= 0.0:
            return 1.0 / (1.0 + math.exp(-value))
        try:
            return 1.0 / (1.0 + math.exp(-value))
        except OverflowError:
            return 0.0

    def duration(self) -> float:
        return self.pattern.duration()


@dataclass
class Shift(Pattern):
    """Shifts the pattern forward by a given time."""

    pattern: Pattern
    time_shift: float

    def sample(self, time: float) -> float:
        return self.pattern.sample(time + _as_time(self.time_shift))

    def duration(self) -> float:
        shift = _as_time(self.time_shift)
        remaining = self.pattern.duration() - shift
        if remaining < 0.0:
            raise ValueError("time shift is longer than the pattern's duration")
        return remaining


@dataclass
class Repeat(Pattern):
    """Repeats a pattern a given number of times."""

    pattern: Pattern
    count: float

    def sample(self, time: float) -> float:
        total = self.duration()
        if total == 0.0:
            raise ValueError("cannot repeat a pattern of zero total duration")
        return self.pattern.sample(_as_time(math.fmod(time, total)))

    def duration(self) -> float:
        return _as_time(self.count * self.pattern.duration())


@dataclass
class Forever(Pattern):
    """Repeats a pattern without end."""

    pattern: Pattern

    def sample(self, time: float) -> float:
        cycle = self.pattern.duration()
        if cycle == 0.0:
            raise ValueError("cannot loop a pattern of zero duration")
        return self.pattern.sample(_as_time(math.fmod(time, cycle)))

    def duration(self) -> float:
        return math.inf


@dataclass
class Chain(Pattern):
    """Runs ``then`` once ``first``'s duration has passed."""

    first: Pattern
    then: Pattern

    def sample(self, time: float) -> float:
        if time < self.first.duration():
            return self.first.sample(time)
        return self.then.sample(time)

    def duration(self) -> float:
        return self.first.duration() + self.then.duration()


@dataclass
class AmplitudeModulator(Pattern):
    """Multiplies a pattern by a modulating pattern."""

    pattern: Pattern
    modulator: Pattern

    def sample(self, time: float) -> float:
        return self.pattern.sample(time) * self.modulator.sample(time)

    def duration(self) -> float:
        return self.pattern.duration()