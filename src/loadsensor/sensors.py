"""Built-in sensors that can be enabled through settings."""

from __future__ import annotations

import os
import socket
from collections.abc import Callable
from functools import partial

from loadsensor.config import Settings
from loadsensor.errors import ConfigError, SensorError
from loadsensor.probes import local_hostname
from loadsensor.sensor import Lookup, Sensor


def os_hostname() -> str:
    try:
        return socket.gethostname()
    except OSError as exc:
        raise SensorError(f"unable to read OS host name: {exc}") from exc


def load_average() -> str:
    """One-minute load average of the host."""
    try:
        one_minute, _, _ = os.getloadavg()
    except (AttributeError, OSError) as exc:
        raise SensorError("load average is not available on this platform") from exc
    return f"{one_minute:.2f}"


def host_lookup(settings: Settings) -> Lookup:
    backend = settings.effective_hostname_backend()
    if backend == "grid_engine":
        return partial(local_hostname, settings.sge_root)
    return os_hostname


def hostname_sensor(settings: Settings) -> Sensor:
    """Report the OS host name as a string complex (``name`` by default)."""
    resource = settings.hostname_resource
    return Sensor(
        host_name=host_lookup(settings),
        resource_name=lambda: resource,
        measurement=os_hostname,
    )


def load_average_sensor(settings: Settings) -> Sensor:
    resource = settings.load_average_resource
    return Sensor(
        host_name=host_lookup(settings),
        resource_name=lambda: resource,
        measurement=load_average,
    )


BUILTIN_SENSORS: dict[str, Callable[[Settings], Sensor]] = {
    "hostname": hostname_sensor,
    "load_average": load_average_sensor,
}


def build_sensors(settings: Settings) -> list[Sensor]:
    """Instantiate the enabled built-in sensors in configured order."""
    sensors: list[Sensor] = []
    for name in settings.sensors:
        factory = BUILTIN_SENSORS.get(name)
        if factory is None:
            known = ", ".join(sorted(BUILTIN_SENSORS))
            raise ConfigError(f"Unknown sensor '{name}' (known sensors: {known})")
        sensors.append(factory(settings))
    return sensors
