"""Patterns that generate basic shapes and waves.

Waves are single pulses of one wavelength; use ``repeat`` or ``forever``
to play several cycles in sequence.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from buttplug_patterns.pattern import Pattern

__all__ = [
    "Constant",
    "Linear",
    "SawWave",
    "TriangleWave",
    "SquareWave",
    "SineWave",
]


@dataclass
class Constant(Pattern):
    """A constant level held for ``length`` seconds."""

    level: float
    length: float

    def sample(self, time: float) -> float:
        return self.level

    def duration(self) -> float:
        return self.length


@dataclass
class Linear(Pattern):
    """A straight ramp from ``start`` to ``end`` over ``length`` seconds."""

    start: float
    end: float
    length: float

    def sample(self, time: float) -> float:
        return self.start + (self.end - self.start) * time / self.length

    def duration(self) -> float:
        return self.length


@dataclass
class SawWave(Pattern):
    """A saw wave rising from 0 towards ``amplitude`` over one wavelength."""

    amplitude: float
    wavelength: float

    def sample(self, time: float) -> float:
        return math.fmod(self.amplitude * (1.0 / self.wavelength) * time, 1.0)

    def duration(self) -> float:
        return self.wavelength


@dataclass
class TriangleWave(Pattern):
    """A triangle wave between 0 and ``amplitude``."""

    amplitude: float
    wavelength: float

    def sample(self, time: float) -> float:
        half = self.wavelength / 2.0
        offset = math.fmod(time - half, self.wavelength) - half
        value = (2.0 * self.amplitude / self.wavelength) * abs(offset)
        # The first values of a cycle overshoot, so they are capped.
        return min(value, self.amplitude)

    def duration(self) -> float:
        return self.wavelength


@dataclass
class SquareWave(Pattern):
    """A square wave: ``amplitude`` for the first half cycle, then 0."""

    amplitude: float
    wavelength: float

    def sample(self, time: float) -> float:
        if math.fmod(time, self.wavelength) < self.wavelength / 2.0:
            return self.amplitude
        return 0.0

    def duration(self) -> float:
        return self.wavelength

@dataclass
class SineWave(Pattern):
    """A sine wave between 0 and ``amplitude``, starting at its trough."""

    amplitude: float
    wavelength: float

    def sample(self, time: float) -> float:
        half_amplitude = self.amplitude / 2.0
        phase = 2.0 * 3.14 * (1.0 / self.wavelength) * (time + self.wavelength / 2.0)
        return half_amplitude * math.cos(phase) + half_amplitude

    def duration(self) -> float:
        return self.wavelength