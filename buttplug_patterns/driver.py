"""Driving connected devices with patterns.

The driver works with any client object offering:

* ``devices()`` returning the connected devices,
* ``async stop_all_devices()``.

Each device offers an ``index`` attribute, ``vibrate_attributes()`` returning
actuators that each have an ``index`` attribute, and
``async vibrate(levels)`` taking a mapping of actuator index to level.
"""

from __future__ import annotations

import asyncio
import threading
import time
from collections.abc import Iterable, Mapping
from typing import Any, Protocol

from buttplug_patterns.pattern import Pattern

__all__ = ["Driver"]

_DEFAULT_TICKRATE_HZ = 10


class _Actuator(Protocol):
    index: int


class _Device(Protocol):
    index: int

    def vibrate_attributes(self) -> Iterable[_Actuator]: ...

    async def vibrate(self, levels: Mapping[int, float]) -> Any: ...


class _Client(Protocol):
    def devices(self) -> Iterable[_Device]: ...

    async def stop_all_devices(self) -> Any: ...


class _Flag(Protocol):
    def is_set(self) -> bool: ...


class Driver:
    """Sends pattern intensities to every actuator of every connected device."""

    def __init__(self, buttplug: _Client, pattern: Pattern) -> None:
        self.buttplug = buttplug
        self._tickrate_hz = _DEFAULT_TICKRATE_HZ
        self._pattern = pattern
        self._device_patterns: dict[int, Pattern] = {}
        self._actuator_patterns: dict[tuple[int, int], Pattern] = {}

    def set_tickrate(self, hz: int) -> Driver:
        """Set how many times per second patterns are sampled and sent."""
        if not 1 <= hz <= 1000:
            raise ValueError(f"tickrate must be between 1 and 1000 Hz, got {hz!r}")
        self._tickrate_hz = hz
        return self

    def set_pattern(self, pattern: Pattern) -> Driver:
        """Set the pattern for every actuator without a more specific one."""
        self._pattern = pattern
        return self

    def set_device_pattern(self, device_id: int, pattern: Pattern) -> Driver:
        """Set the pattern of one device by its index."""
        self._device_patterns[device_id] = pattern
        return self

    def remove_device_pattern(self, device_id: int) -> Driver:
        """Drop the pattern of one device."""
        self._device_patterns.pop(device_id, None)
        return self

    def set_actuator_pattern(self, device_id: int, actuator_id: int, pattern: Pattern) -> Driver:
        """Set the pattern of one actuator of one device."""
        self._actuator_patterns[(device_id, actuator_id)] = pattern
        return self

    def remove_actuator_pattern(self, device_id: int, actuator_id: int) -> Driver:
        """Drop the pattern of one actuator."""
        self._actuator_patterns.pop((device_id, actuator_id), None)
        return self

    async def run(self) -> None:
        """Run until the global pattern ends, then stop all devices."""
        running = threading.Event()
        running.set()
        await self.run_while(running)

    async def run_while(self, running: _Flag) -> None:
        """Run while ``running.is_set()`` holds and the global pattern lasts.

        All devices are stopped when the loop ends; an error from a device
        propagates without stopping them.
        """
        self._pattern.reset()
        for pattern in self._device_patterns.values():
            pattern.reset()
        for pattern in self._actuator_patterns.values():
            pattern.reset()

        period = (1000 // self._tickrate_hz) / 1000.0
        start = time.monotonic()
        deadline = start
        while running.is_set():
            elapsed = time.monotonic() - start
            if elapsed > self._pattern.duration():
                break

            global_level = self._pattern.sample(elapsed)
            for device in self.buttplug.devices():
                levels = {
                    actuator.index: self._level_for(device.index, actuator.index, elapsed, global_level)
                    for actuator in device.vibrate_attributes()
                }
                await device.vibrate(levels)

            await asyncio.sleep(max(0.0, deadline - time.monotonic()))
            deadline += period
        await self.buttplug.stop_all_devices()

    def _level_for(self, device_id: int, actuator_id: int, elapsed: float, global_level: float) -> float:
        actuator_pattern = self._actuator_patterns.get((device_id, actuator_id))
        actuator_level = actuator_pattern.sample(elapsed) if actuator_pattern is not None else None
        device_pattern = self._device_patterns.get(device_id)
        device_level = device_pattern.sample(elapsed) if device_pattern is not None else global_level
        return actuator_level if actuator_level is not None else device_level