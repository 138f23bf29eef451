"""Helpers for writing Grid Engine load sensors in Python."""

from .engine import LoadSensor, Termination
from .errors import ConfigError, LoadSensorError, MissingCallbackError, SensorError, StreamError
from .probes import grid_engine_arch, local_hostname
from .sensor import CycleReport, Measurement, MeasurementSource, Sensor, SensorFailure

__all__ = [
    "ConfigError",
    "CycleReport",
    "LoadSensor",
    "LoadSensorError",
    "Measurement",
    "MeasurementSource",
    "MissingCallbackError",
    "Sensor",
    "SensorError",
    "SensorFailure",
    "StreamError",
    "Termination",
    "grid_engine_arch",
    "local_hostname",
]
