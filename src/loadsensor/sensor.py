"""Sensor contract: the three lookups that make up one load measurement."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

Lookup = Callable[[], str]


class MeasurementSource(Protocol):
    """Object-style sensor implementation accepted by :meth:`Sensor.from_source`."""

    def host_name(self) -> str:
        """Return the host the measurement is reported for."""

    def resource_name(self) -> str:
        """Return the scheduler resource (complex) name."""

    def measurement(self) -> str:
        """Return the current value of the resource."""


@dataclass(slots=True, frozen=True)
class Sensor:
    """Callbacks required for performing one load measurement.

    Each callback may raise to signal that its lookup failed; the sensor then
    reports nothing for that cycle.
    """

    host_name: Lookup | None
    resource_name: Lookup | None
    measurement: Lookup | None

    @classmethod
    def from_source(cls, source: MeasurementSource) -> Sensor:
        return cls(
            host_name=source.host_name,
            resource_name=source.resource_name,
            measurement=source.measurement,
        )

    @classmethod
    def constant(cls, host: str, resource: str, value: str) -> Sensor:
        """Sensor that always reports the same line; handy for static complexes."""
        return cls(
            host_name=lambda: host,
            resource_name=lambda: resource,
            measurement=lambda: value,
        )


@dataclass(slots=True, frozen=True)
class Measurement:
    """One successful sensor reading."""

    host: str
    resource: str
    value: str

    def to_line(self) -> str:
        return f"{self.host}:{self.resource}:{self.value}"


@dataclass(slots=True, frozen=True)
class SensorFailure:
    """A sensor callback that raised during a cycle."""

    index: int
    call: str
    error: Exception

    def describe(self) -> str:
        return f"{type(self.error).__name__}: {self.error}"


@dataclass(slots=True, frozen=True)
class CycleReport:
    """Outcome of one pass over all sensors, in registration order."""

    measurements: tuple[Measurement, ...]
    failures: tuple[SensorFailure, ...]

    def lines(self) -> list[str]:
        return [measurement.to_line() for measurement in self.measurements]
