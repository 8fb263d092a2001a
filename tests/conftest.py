"""Pytest configuration and fixtures."""

import logging
import pytest
from collections import namedtuple
from pathlib import Path
import tempfile
import shutil

import psutil

from barstat.core import config as config_module
from barstat.core.config import SystemConfig
from barstat.core.interfaces import SessionType
from tests.fixtures.mock_services import build_sysfs


FakeVirtualMemory = namedtuple("FakeVirtualMemory", ["total", "used", "percent"])


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo root logger changes made by the CLI."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def temp_data_dir():
    """Create temporary data directory."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture
def test_config(temp_data_dir):
    """Create test configuration."""
    config = SystemConfig()
    config.log_level = "DEBUG"
    config.log_file = None
    config.session_type = SessionType.WAYLAND
    config.sampling.cpu_interval_seconds = 0.01
    config.state.mode_file = str(temp_data_dir / "system-info.yaml")
    return config


@pytest.fixture
def fake_probe():
    """Fake machine with one Intel package zone and one amdgpu card."""
    return build_sysfs(
        thermal_zones={
            "thermal_zone0": "acpitz:27800",
            "thermal_zone1": "x86_pkg_temp:45000",
        },
        cards=["card0"],
    )


@pytest.fixture
def fake_psutil(monkeypatch):
    """Replace psutil CPU and memory queries with fixed values."""
    calls = {"cpu_percent": []}

    def cpu_percent(interval=None, percpu=False):
        calls["cpu_percent"].append(interval)
        return 12.5

    def virtual_memory():
        return FakeVirtualMemory(total=8589934592, used=4294967296, percent=47.3)

    monkeypatch.setattr(psutil, "cpu_percent", cpu_percent)
    monkeypatch.setattr(psutil, "virtual_memory", virtual_memory)
    return calls


@pytest.fixture
def clean_env(monkeypatch, temp_data_dir):
    """Environment isolated from the developer's session."""
    for name in (
        "XDG_SESSION_TYPE",
        "BARSTAT_CONFIG",
        "BARSTAT_DEBUG",
        "BARSTAT_LOG_LEVEL",
        "BARSTAT_CPU_INTERVAL",
    ):
        monkeypatch.delenv(name, raising=False)

    monkeypatch.setenv("BARSTAT_LOG_FILE", "")
    monkeypatch.setenv("BARSTAT_STATE_FILE", str(temp_data_dir / "system-info.yaml"))
    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_PATH", temp_data_dir / "absent.yaml")
    monkeypatch.chdir(temp_data_dir)
    return monkeypatch
