"""Grid Engine load sensor protocol loop.

On every poll the scheduler writes one line to the sensor's stdin. The sensor
answers with a ``begin``/``end`` framed block of ``host:resource:value`` lines
and waits for the next poll, until it receives ``quit`` or its input closes.
"""

from __future__ import annotations

import io
import logging
import sys
from collections.abc import Iterable, Iterator, Sequence
from enum import Enum
from typing import TextIO

from loadsensor.errors import MissingCallbackError, StreamError
from loadsensor.sensor import CycleReport, Measurement, Sensor, SensorFailure

QUIT_COMMAND = "quit"
BEGIN_MARKER = "begin"
END_MARKER = "end"

_CALLS = (
    ("host_name", "hostname"),
    ("resource_name", "resource name"),
    ("measurement", "measurement"),
)


class Termination(str, Enum):
    """Why the protocol loop stopped."""

    QUIT = "quit"
    END_OF_STREAM = "end_of_stream"
    READ_ERROR = "read_error"

    @property
    def exit_code(self) -> int:
        return 0 if self is Termination.QUIT else 1


def _strip_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def _next_line(reader: Iterator[str]) -> str | None:
    try:
        line = next(reader)
    except StopIteration:
        return None
    except OSError as exc:
        raise StreamError(f"unable to read from scheduler: {exc}") from exc
    return _strip_terminator(line)


class LoadSensor:
    """Runs an ordered, fixed set of sensors for each scheduler poll."""

    def __init__(self, sensors: Sequence[Sensor], *, logger: logging.Logger | None = None) -> None:
        self._sensors = tuple(sensors)
        self._logger = logger or logging.getLogger("loadsensor.engine")

    @classmethod
    def create(cls, sensors: Iterable[Sensor], *, logger: logging.Logger | None = None) -> LoadSensor:
        """Validate the sensors and build a load sensor around a copy of them."""
        snapshot = tuple(sensors)
        for index, sensor in enumerate(snapshot):
            for field, _ in _CALLS:
                if not callable(getattr(sensor, field, None)):
                    raise MissingCallbackError(index, field)
        return cls(snapshot, logger=logger)

    @property
    def sensors(self) -> tuple[Sensor, ...]:
        return self._sensors

    def collect(self) -> CycleReport:
        """Invoke every sensor once, in registration order."""
        measurements: list[Measurement] = []
        failures: list[SensorFailure] = []
        for index, sensor in enumerate(self._sensors):
            values: list[str] = []
            for field, label in _CALLS:
                try:
                    value = getattr(sensor, field)()
                except Exception as exc:  # noqa: BLE001 - a broken sensor must not end the cycle.
                    failure = SensorFailure(index=index, call=field, error=exc)
                    failures.append(failure)
                    self._logger.warning(
                        "error during %s function call of sensor #%d: %s",
                        label,
                        index,
                        failure.describe(),
                        extra={"sensor_index": index, "sensor_call": field},
                    )
                    break
                values.append(str(value))
            else:
                measurements.append(Measurement(*values))
        return CycleReport(measurements=tuple(measurements), failures=tuple(failures))

    def report(self, output: TextIO) -> CycleReport:
        """Write one framed cycle to ``output``."""
        cycle = self.collect()
        output.write(f"{BEGIN_MARKER}\n")
        for line in cycle.lines():
            output.write(f"{line}\n")
        output.write(f"{END_MARKER}\n")
        output.flush()
        self._logger.debug(
            "cycle_reported",
            extra={"measurements": len(cycle.measurements), "failures": len(cycle.failures)},
        )
        return cycle

    def serve(self, lines: Iterable[str], output: TextIO) -> Termination:
        """Answer polls read from ``lines`` until ``quit`` or the input ends."""
        reader = iter(lines)
        while True:
            try:
                line = _next_line(reader)
            except StreamError:
                self._logger.exception("input_stream_failed")
                return Termination.READ_ERROR
            if line is None:
                self._logger.info("input_stream_closed")
                return Termination.END_OF_STREAM
            if line == QUIT_COMMAND:
                self._logger.info("quit_received")
                return Termination.QUIT
            self.report(output)

    def run(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
        """Serve the process streams and return the exit status to use."""
        source = stdin if stdin is not None else sys.stdin
        # Trigger line content is ignored, so undecodable bytes must not end the loop.
        if isinstance(source, io.TextIOWrapper):
            source.reconfigure(errors="surrogateescape")
        sink = stdout if stdout is not None else sys.stdout
        self._logger.info("load_sensor_started", extra={"sensor_count": len(self._sensors)})
        termination = self.serve(iter(source.readline, ""), sink)
        return termination.exit_code
