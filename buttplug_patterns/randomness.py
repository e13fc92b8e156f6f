"""Patterns that generate random values."""

from __future__ import annotations

import random
import time as _time
from dataclasses import dataclass, field

from buttplug_patterns.pattern import Pattern

__all__ = ["Random", "RandomEvery", "RandomWalk"]


def _check_range(low: float, high: float) -> None:
    if not low < high:
        raise ValueError(f"empty range: {low!r}..{high!r}")


def _draw(low: float, high: float) -> float:
    """Draw a value from the half-open range ``low``..``high``."""
    value = low + (high - low) * random.random()
    return value if value < high else low


@dataclass
class Random(Pattern):
    """A fresh random value in ``low``..``high`` at every sample."""

    low: float
    high: float
    length: float

    def __post_init__(self) -> None:
        _check_range(self.low, self.high)

    def sample(self, time: float) -> float:
        return _draw(self.low, self.high)

    def duration(self) -> float:
        return self.length


@dataclass
class RandomEvery(Pattern):
    """A random value in ``low``..``high`` that changes every ``interval`` seconds.

    Values cannot change faster than they are sampled; slow sampling skips values.
    """

    low: float
    high: float
    length: float
    interval: float
    _last_time: float = field(init=False, repr=False, compare=False)
    _last_value: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        _check_range(self.low, self.high)
        self._last_value = _draw(self.low, self.high)
        self._last_time = _time.monotonic()

    def sample(self, time: float) -> float:
        now = _time.monotonic()
        if now - self._last_time > self.interval:
            self._last_time = now
            self._last_value = _draw(self.low, self.high)
        return self._last_value

    def duration(self) -> float:
        return self.length

    def reset(self) -> None:
        self._last_value = _draw(self.low, self.high)


@dataclass
class RandomWalk(Pattern):
    """Steps up by ``increase`` or down by ``decrease`` at random on every sample.

    Each step is limited to ``low``..``high``; the walk starts at 0.
    """

    low: float
    high: float
    length: float
    increase: float
    decrease: float
    _state: float = field(default=0.0, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        _check_range(self.low, self.high)

    def sample(self, time: float) -> float:
        value = _draw(self.low, self.high)
        step = self.increase if value > self._state else -self.decrease
        self._state += min(max(step, self.low), self.high)
        return self._state

    def duration(self) -> float:
        return self.length

    def reset(self) -> None:
        self._state = 0.0