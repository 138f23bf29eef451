"""Lookups against a local Grid Engine installation.

Grid Engine resolves host names through its own ``gethostname`` utility, which
can differ from the OS host name when a machine is known under several names.
Sensors should report the Grid Engine name so the qmaster matches the values
to the right execution host.
"""

from __future__ import annotations

import os
import subprocess
from functools import lru_cache
from pathlib import Path

from loadsensor.errors import SensorError


def _resolve_sge_root(sge_root: str | None) -> Path:
    root = sge_root or os.environ.get("SGE_ROOT")
    if not root:
        raise SensorError("SGE_ROOT is not set")
    return Path(root)


def _run(cmd: list[str]) -> str:
    try:
        result = subprocess.run(cmd, check=True, text=True, capture_output=True)
    except FileNotFoundError as exc:
        raise SensorError(f"{cmd[0]} not found") from exc
    except subprocess.CalledProcessError as exc:
        raise SensorError(f"{cmd[0]} exited with status {exc.returncode}: {exc.stderr.strip()}") from exc
    return result.stdout.strip()


@lru_cache(maxsize=None)
def _arch_for(root: Path) -> str:
    return _run([str(root / "util" / "arch")])


def grid_engine_arch(sge_root: str | None = None) -> str:
    """Return the Grid Engine architecture string, e.g. ``lx-amd64``.

    The value never changes while the sensor runs, so it is computed once per
    installation root.
    """
    return _arch_for(_resolve_sge_root(sge_root))


def local_hostname(sge_root: str | None = None) -> str:
    """Return the local host name as Grid Engine knows it."""
    root = _resolve_sge_root(sge_root)
    arch = grid_engine_arch(str(root))
    hostname = _run([str(root / "utilbin" / arch / "gethostname"), "-name"])
    if not hostname:
        raise SensorError("gethostname returned an empty host name")
    return hostname
