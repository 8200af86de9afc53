"""Simulated sensors that produce random readings within fixed ranges."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import ClassVar


class Sensor(ABC):
    """A named source of readings that remembers the last value it produced.

    Each sensor owns its own random generator. If none is given, it gets a
    fresh one seeded from system entropy.
    """

    def __init__(self, sensor_id: str, rng: random.Random | None = None) -> None:
        self._sensor_id = sensor_id
        self._rng = rng if rng is not None else random.Random()
        self._last_reading = 0.0

    @property
    def sensor_id(self) -> str:
        """The identifier the sensor was created with."""
        return self._sensor_id

    @property
    def last_reading(self) -> float:
        """The most recent reading, or 0.0 before the first read."""
        return self._last_reading

    def read(self) -> float:
        """Take a new reading, remember it and return it."""
        reading = self._measure()
        self._last_reading = reading
        return reading

    @abstractmethod
    def _measure(self) -> float:
        """Produce a new raw reading."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._sensor_id!r})"


class _UniformSensor(Sensor):
    """A sensor whose readings are uniformly distributed over [low, high)."""

    low: ClassVar[float]
    high: ClassVar[float]

    def _measure(self) -> float:
        return self.low + (self.high - self.low) * self._rng.random()


class TemperatureSensor(_UniformSensor):
    """Temperature in degrees Celsius, between 20 and 40."""

    low = 20.0
    high = 40.0


class DistanceSensor(_UniformSensor):
    """Distance in metres, between 0 and 100."""

    low = 0.0
    high = 100.0


class PressureSensor(_UniformSensor):
    """Pressure in hectopascals, between 950 and 1050."""

    low = 950.0
    high = 1050.0