import pytest
from click.testing import CliRunner
from tests.fakes import FakeNvml
from gpustatus import cli, status
from gpustatus.commands.nvml.nvml_command import NvmlCommand


@pytest.fixture
def runner(monkeypatch, fake_nvml, processes):
    class SnapshotTable:
        @classmethod
        def snapshot(cls):
            return processes

    monkeypatch.setattr(cli, "NvmlCommand", lambda: NvmlCommand(fake_nvml))
    monkeypatch.setattr(cli, "ProcessTable", SnapshotTable)
    monkeypatch.setattr(status.socket, "gethostname", lambda: "gpu-node-01")
    return CliRunner()


def test_status(runner, fake_nvml):
    result = runner.invoke(cli.status, [])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0].startswith("gpu-node-01\t")
    assert lines[0].endswith("\t535.129.03")
    assert "alice(2048M),bob(Unavailable)" in lines[1]
    assert "\x1b[" not in result.output
    assert fake_nvml.calls[-1] == ("nvmlShutdown",)


def test_show_all(runner):
    result = runner.invoke(cli.status, ["-a"])

    assert result.exit_code == 0
    assert "F: 50 %" in result.output
    assert "D: 45 %" in result.output
    assert "alice:train.py --lr 0.1/1234(2048M)" in result.output


def test_short_flags(runner):
    result = runner.invoke(cli.status, ["-c", "-p"])

    assert result.exit_code == 0
    assert "alice:train.py/1234(2048M)" in result.output
    assert "F: " not in result.output


def test_color_forced(runner):
    result = runner.invoke(cli.status, ["--color"])

    assert result.exit_code == 0
    assert "\x1b[1m" in result.output


def test_no_color_wins(runner):
    result = runner.invoke(cli.status, ["--color", "--no-color"])

    assert result.exit_code == 0
    assert "\x1b[" not in result.output


def test_unknown_flag(runner):
    result = runner.invoke(cli.status, ["--show-everything"])

    assert result.exit_code == 2
    assert "No such option" in result.output


@pytest.mark.parametrize('flag', ["-V", "--version"])
def test_version(runner, flag):
    result = runner.invoke(cli.status, [flag])

    assert result.exit_code == 0
    assert "0.1.4" in result.output


def test_help(runner):
    result = runner.invoke(cli.status, ["-h"])

    assert result.exit_code == 0
    assert "--show-codec" in result.output


def test_failure_prints_no_table(monkeypatch, runner, devices):
    fake = FakeNvml(devices + [dict(devices[0])], failing_device=1)
    monkeypatch.setattr(cli, "NvmlCommand", lambda: NvmlCommand(fake))

    result = runner.invoke(cli.status, [])

    assert result.exit_code == 1
    assert "GPU is lost" in result.output
    assert "gpu-node-01" not in result.output
    assert "[0]" not in result.output
    assert fake.queried == [0, 1]
    assert fake.calls[-1] == ("nvmlShutdown",)
