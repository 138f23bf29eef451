"""Exception types raised by the load sensor and its sensors."""

from __future__ import annotations


class LoadSensorError(RuntimeError):
    """Base class for load sensor failures."""


class ConfigError(LoadSensorError):
    """Raised when a load sensor cannot be built from the given sensors."""


class MissingCallbackError(ConfigError):
    """Raised when a sensor is missing one of its three callbacks."""

    def __init__(self, index: int, field: str) -> None:
        super().__init__(f"{field} is not set for sensor #{index}")
        self.index = index
        self.field = field


class SensorError(LoadSensorError):
    """Raised by a sensor callback when a host, resource or value cannot be determined."""


class StreamError(LoadSensorError):
    """Raised when the scheduler input stream cannot be read."""
