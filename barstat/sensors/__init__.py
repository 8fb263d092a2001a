"""Hardware metric sensors.

This module reads CPU, memory and GPU metrics and normalizes them into
sample objects:
- Sensor path discovery (thermal zones, DRM cards, hwmon)
- CPU utilization, model name and package temperature
- Memory usage in GiB
- GPU utilization and temperature through NVML or sysfs

Key Features:
- Filesystem access behind ISystemProbe, swappable for tests
- GPU sources tried in order, first success wins
- CPU temperature failures degrade to 0 instead of failing the read

Usage:
    from barstat.sensors import create_default_sensors
    from barstat.core.config import load_config

    config = load_config()
    sensors = create_default_sensors(config)

    cpu = sensors["cpu"].read()
"""

from barstat.sensors.probe import LocalSystemProbe
from barstat.sensors.resolver import SensorPathResolver
from barstat.sensors.cpu_sensor import CpuSensor
from barstat.sensors.memory_sensor import MemorySensor
from barstat.sensors.gpu_sensor import (
    GpuSensor,
    NvmlGpuSource,
    SysfsGpuSource,
    create_gpu_sensor,
)

__all__ = [
    "LocalSystemProbe",
    "SensorPathResolver",
    "CpuSensor",
    "MemorySensor",
    "GpuSensor",
    "NvmlGpuSource",
    "SysfsGpuSource",
    "create_gpu_sensor",
    "create_default_sensors",
]


def create_default_sensors(config, probe=None):
    """Factory function to create the sensor set.

    Args:
        config: SystemConfig with paths and sampling settings
        probe: Optional ISystemProbe, defaults to the live filesystem

    Returns:
        Dict of sensors keyed by "cpu", "ram" and "gpu"
    """
    probe = probe or LocalSystemProbe()
    resolver = SensorPathResolver(probe, config.paths)

    return {
        "cpu": CpuSensor(probe, resolver, config.paths, config.sampling),
        "ram": MemorySensor(),
        "gpu": create_gpu_sensor(probe, resolver),
    }
