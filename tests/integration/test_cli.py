"""Integration tests for the command-line entry point."""

import json

import pytest
import yaml

from barstat import cli
from barstat.core.exceptions import SensorNotFound
from barstat.core.interfaces import CpuSample, GpuSample, MemorySample
from tests.fixtures.mock_services import FailingGpuSource, StaticSensor


@pytest.fixture
def fake_sensors(clean_env):
    """Replace the hardware sensors used by the CLI."""
    sensors = {
        "cpu": StaticSensor(CpuSample(utilization_percent=23.0, temperature_celsius=51.0, device_name="Intel i5")),
        "ram": StaticSensor(MemorySample(total_gib=16.0, used_gib=6.25, used_percent=39.1)),
        "gpu": StaticSensor(GpuSample(device_name="N/A", utilization_percent=91, temperature_celsius=60)),
    }
    clean_env.setattr(cli, "create_default_sensors", lambda config: sensors)
    return sensors


def read_modes(temp_data_dir):
    with open(temp_data_dir / "system-info.yaml") as f:
        return yaml.safe_load(f)


class TestCli:
    """Test full invocations."""

    def test_usage_hint(self, clean_env, capsys):
        """No metric flag prints the hint and succeeds."""
        assert cli.main([]) == 0
        assert capsys.readouterr().out == cli.USAGE_HINT + "\n"

    def test_metric_flags_exclusive(self, clean_env):
        """Two metric flags are rejected by the parser."""
        with pytest.raises(SystemExit) as exc:
            cli.main(["--cpu", "--gpu"])
        assert exc.value.code == 2

    def test_cpu_x11(self, fake_sensors, clean_env, capsys):
        """CPU reading for polybar."""
        clean_env.setenv("XDG_SESSION_TYPE", "x11")

        assert cli.main(["--cpu"]) == 0
        assert capsys.readouterr().out == "%{F#a6e3a1}\U000F035B 23%%{F-}\n"

    def test_gpu_wayland_critical(self, fake_sensors, clean_env, capsys):
        """GPU at 91% uses the critical color passed on the command line."""
        clean_env.setenv("XDG_SESSION_TYPE", "wayland")

        assert cli.main(["--gpu", "--critical-color", "#ff0000"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["text"] == '<span color="#ff0000">\U000F08AE 91%</span>'

    def test_ram_x11(self, fake_sensors, clean_env, capsys):
        """Memory line for polybar has no newline."""
        clean_env.setenv("XDG_SESSION_TYPE", "x11")

        assert cli.main(["--memory"]) == 0
        assert capsys.readouterr().out == "%{F#a6e3a1}\U000F0F86  6.25 GB%{F-}"

    def test_unknown_session_silent(self, fake_sensors, clean_env, temp_data_dir, capsys):
        """Without a session type the read runs but nothing is printed."""
        assert cli.main(["--cpu"]) == 0

        assert capsys.readouterr().out == ""
        assert fake_sensors["cpu"].call_count == 1
        assert (temp_data_dir / "system-info.yaml").exists()

    def test_toggle_then_read(self, fake_sensors, clean_env, temp_data_dir, capsys):
        """A click flips the mode silently and the next read shows temperature."""
        clean_env.setenv("XDG_SESSION_TYPE", "x11")

        assert cli.main(["--cpu", "--click"]) == 0
        assert capsys.readouterr().out == ""
        assert fake_sensors["cpu"].call_count == 0
        assert read_modes(temp_data_dir)["cpu-label-mode"] == "temperature"

        assert cli.main(["--cpu"]) == 0
        assert capsys.readouterr().out == "%{F#a6e3a1}\U000F035B 51°C%{F-}\n"

    def test_gpu_toggle_skips_read(self, fake_sensors, clean_env, temp_data_dir):
        """Toggling the GPU mode never touches the hardware."""
        assert cli.main(["--gpu", "--toggle"]) == 0

        assert fake_sensors["gpu"].call_count == 0
        modes = read_modes(temp_data_dir)
        assert modes["gpu-label-mode"] == "temperature"
        assert modes["cpu-label-mode"] == "utilization"

    def test_ram_ignores_click(self, fake_sensors, clean_env, capsys):
        """Memory has no mode, so a click still prints a reading."""
        clean_env.setenv("XDG_SESSION_TYPE", "x11")

        assert cli.main(["--ram", "--click"]) == 0
        assert "6.25 GB" in capsys.readouterr().out

    def test_sensor_failure(self, clean_env, capsys):
        """A failed GPU chain exits 1 with nothing on stdout."""
        from barstat.sensors.gpu_sensor import GpuSensor

        chain = GpuSensor([FailingGpuSource(SensorNotFound("no DRM card"))])
        clean_env.setattr(cli, "create_default_sensors", lambda config: {"gpu": chain})
        clean_env.setenv("XDG_SESSION_TYPE", "wayland")

        assert cli.main(["--gpu"]) == 1
        assert capsys.readouterr().out == ""

    def test_named_color_passed_through(self, fake_sensors, clean_env, capsys):
        """Pango color names reach waybar unchanged."""
        clean_env.setenv("XDG_SESSION_TYPE", "wayland")

        assert cli.main(["--cpu", "--normal-color", "green"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["text"] == '<span color="green">\U000F035B 23%</span>'

    def test_argb_color_passed_through(self, fake_sensors, clean_env, capsys):
        """polybar's #argb form is accepted."""
        clean_env.setenv("XDG_SESSION_TYPE", "x11")

        assert cli.main(["--cpu", "--normal-color", "#fa6e"]) == 0
        assert capsys.readouterr().out == "%{F#fa6e}\U000F035B 23%%{F-}\n"

    def test_markup_breaking_color(self, fake_sensors, clean_env, capsys):
        """A color that would break the polybar tag is rejected before reading."""
        assert cli.main(["--cpu", "--normal-color", "red}"]) == 1
        assert fake_sensors["cpu"].call_count == 0
        assert capsys.readouterr().out == ""

    def test_usage_hint_ignores_bad_color(self, clean_env, capsys):
        """Without a metric flag, the hint is printed whatever the colors."""
        assert cli.main(["--normal-color", "bogus}"]) == 0
        assert capsys.readouterr().out == cli.USAGE_HINT + "\n"

    def test_usage_hint_ignores_broken_config(self, clean_env, temp_data_dir, capsys):
        """Without a metric flag, a broken config file is never read."""
        path = temp_data_dir / "config.yaml"
        path.write_text("colors: [oops\n")

        assert cli.main(["--config", str(path)]) == 0
        assert capsys.readouterr().out == cli.USAGE_HINT + "\n"

    def test_non_string_path_in_config(self, fake_sensors, clean_env, temp_data_dir, capsys):
        """A numeric path in the config file exits 1 before reading."""
        path = temp_data_dir / "config.yaml"
        path.write_text("paths:\n  thermal-root: 5\n")

        assert cli.main(["--cpu", "--config", str(path)]) == 1
        assert fake_sensors["cpu"].call_count == 0
        assert capsys.readouterr().out == ""


class TestCliWithFakeMachine:
    """End to end with the real sensors over a fake filesystem."""

    def test_gpu_sysfs_fallback(self, clean_env, fake_probe, capsys):
        """NVML missing, sysfs read through the probe."""
        from barstat.sensors import create_default_sensors
        from barstat.sensors import gpu_sensor

        clean_env.setattr(gpu_sensor, "NVIDIA_AVAILABLE", False)
        clean_env.setattr(
            cli, "create_default_sensors",
            lambda config: create_default_sensors(config, probe=fake_probe)
        )
        clean_env.setenv("XDG_SESSION_TYPE", "wayland")

        assert cli.main(["--gpu"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["tooltip"].startswith("\U000F08AE Name: N/A\n")
        assert "Utilization: 57%" in data["tooltip"]
        assert "Temp: 62°C" in data["tooltip"]
