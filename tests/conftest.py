import pytest
from tests.fakes import FakeNvml, fake_getpwuid, load_devices
from gpustatus.commands.nvml.nvml_command import NvmlCommand
from gpustatus.commands.processes.models import ProcessInfo
from gpustatus.commands.processes.process_table import ProcessTable


@pytest.fixture
def devices():
    return load_devices()


@pytest.fixture
def fake_nvml(devices):
    return FakeNvml(devices)


@pytest.fixture
def nvml(fake_nvml):
    command = NvmlCommand(fake_nvml)
    command.init()
    return command


@pytest.fixture
def processes():
    return ProcessTable([
        ProcessInfo(pid=1234, name="train.py", cmdline=["train.py", "--lr", "0.1"], uid=1000),
        ProcessInfo(pid=4321, name="python3", cmdline=["python3", "serve.py"], uid=1001),
        ProcessInfo(pid=5555, name="ghost", cmdline=[], uid=4242),
    ], getpwuid=fake_getpwuid)
