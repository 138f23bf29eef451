from __future__ import annotations

import pytest
from typer.testing import CliRunner

from loadsensor import main


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def _fake_hostname(monkeypatch) -> None:
    monkeypatch.setattr("socket.gethostname", lambda: "node-a")


def test_run_answers_polls_until_quit(runner) -> None:
    result = runner.invoke(main.app, ["run", "--hostname-backend", "os"], input="\npoll\nquit\n")

    assert result.exit_code == 0
    assert result.stdout == "begin\nnode-a:name:node-a\nend\n" * 2


def test_run_exits_abnormally_at_end_of_input(runner) -> None:
    result = runner.invoke(main.app, ["run", "--hostname-backend", "os"], input="poll\n")

    assert result.exit_code == 1
    assert result.stdout == "begin\nnode-a:name:node-a\nend\n"


def test_run_rejects_unknown_sensor(runner) -> None:
    result = runner.invoke(main.app, ["run", "--sensor", "gpu"], input="quit\n")

    assert result.exit_code == 1
    assert "begin" not in result.stdout


def test_sample_prints_one_cycle(runner) -> None:
    result = runner.invoke(main.app, ["sample", "--hostname-backend", "os"])

    assert result.exit_code == 0
    assert "node-a:name:node-a" in result.stdout


def test_hostname_command_reports_os_hostname(runner) -> None:
    result = runner.invoke(main.app, ["hostname", "--hostname-backend", "os"])

    assert result.exit_code == 0
    assert "node-a" in result.stdout


def test_run_rejects_unknown_log_level(runner, monkeypatch) -> None:
    monkeypatch.setattr(main.settings, "log_level", "LOUD")

    result = runner.invoke(main.app, ["run", "--hostname-backend", "os"], input="quit\n")

    assert result.exit_code == 2
    assert "LOADSENSOR_LOG_LEVEL" in result.output
    assert "begin" not in result.output


def test_hostname_command_reports_errors_on_stderr(runner, monkeypatch) -> None:
    monkeypatch.setattr(main.settings, "sge_root", None)
    monkeypatch.delenv("SGE_ROOT", raising=False)
    printed: list[object] = []
    monkeypatch.setattr(main.err_console, "print", lambda *args, **kwargs: printed.extend(args))

    result = runner.invoke(main.app, ["hostname", "--hostname-backend", "grid_engine"])

    assert result.exit_code == 1
    assert printed == [{"error": "SGE_ROOT is not set"}]
    assert "'hostname'" not in result.output
