"""CLI entrypoint for the load sensor."""

from __future__ import annotations

import typer
from rich import print
from rich.console import Console

from loadsensor.config import Settings, settings
from loadsensor.engine import LoadSensor
from loadsensor.errors import ConfigError, SensorError
from loadsensor.sensors import BUILTIN_SENSORS, build_sensors, host_lookup
from loadsensor.telemetry import configure_logging

app = typer.Typer(help="Grid Engine load sensor")

# stdout belongs to the scheduler protocol while `run` is active.
err_console = Console(stderr=True)

HOSTNAME_BACKENDS = ("auto", "grid_engine", "os")


def _effective_settings(sensor: list[str] | None = None, hostname_backend: str | None = None) -> Settings:
    update: dict[str, object] = {}
    if sensor:
        update["sensors"] = list(sensor)
    if hostname_backend:
        if hostname_backend not in HOSTNAME_BACKENDS:
            raise typer.BadParameter(f"hostname backend must be one of: {', '.join(HOSTNAME_BACKENDS)}")
        update["hostname_backend"] = hostname_backend
    return settings.model_copy(update=update) if update else settings


def _build_load_sensor(effective: Settings) -> LoadSensor:
    try:
        return LoadSensor.create(build_sensors(effective))
    except ConfigError as exc:
        err_console.print({"error": str(exc)})
        raise typer.Exit(code=1)


@app.command()
def run(
    sensor: list[str] = typer.Option(None, "--sensor", help=f"Sensor to enable: {', '.join(BUILTIN_SENSORS)}"),
    hostname_backend: str = typer.Option(None, help="auto/grid_engine/os"),
) -> None:
    """Answer scheduler polls on stdin/stdout until `quit` or end of input."""
    effective = _effective_settings(sensor, hostname_backend)
    try:
        configure_logging(effective.log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="LOADSENSOR_LOG_LEVEL")
    load_sensor = _build_load_sensor(effective)
    raise typer.Exit(code=load_sensor.run())


@app.command()
def sample(
    sensor: list[str] = typer.Option(None, "--sensor", help=f"Sensor to enable: {', '.join(BUILTIN_SENSORS)}"),
    hostname_backend: str = typer.Option(None, help="auto/grid_engine/os"),
) -> None:
    """Run a single measurement cycle and show the result."""
    effective = _effective_settings(sensor, hostname_backend)
    cycle = _build_load_sensor(effective).collect()
    print(
        {
            "measurements": cycle.lines(),
            "failures": [
                {"sensor": failure.index, "call": failure.call, "error": failure.describe()}
                for failure in cycle.failures
            ],
        }
    )


@app.command("show-config")
def show_config() -> None:
    """Show effective runtime configuration."""
    print({**settings.model_dump(), "effective_hostname_backend": settings.effective_hostname_backend()})


@app.command()
def hostname(hostname_backend: str = typer.Option(None, help="auto/grid_engine/os")) -> None:
    """Print the host name reported by the built-in sensors."""
    effective = _effective_settings(hostname_backend=hostname_backend)
    try:
        print({"hostname": host_lookup(effective)(), "backend": effective.effective_hostname_backend()})
    except SensorError as exc:
        err_console.print({"error": str(exc)})
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
