"""
barstat - CPU, memory and GPU indicators for polybar and waybar.

Each invocation takes one reading and prints it in the format of the
running status bar. CPU package temperature is found by scanning the
kernel thermal zones; the GPU is read through NVML when available and
through the DRM sysfs tree otherwise.

Usage:
    barstat --cpu
    barstat --gpu --click
    barstat --ram --normal-color "#a6e3a1" --critical-color "#f38ba8"
"""

__version__ = "1.0.0"
__license__ = "MIT"

# Core exports
from barstat.core import (
    SystemConfig,
    load_config,
    validate_config,
    CpuSample,
    MemorySample,
    GpuSample,
    MetricKind,
    DisplayMode,
    SessionType,
)

# Component exports
from barstat.sensors import create_default_sensors
from barstat.display import classify, Presenter
from barstat.state import ModeStore

# Utility exports
from barstat.utils import setup_logging

__all__ = [
    # Version info
    "__version__",
    "__license__",

    # Core
    "SystemConfig",
    "load_config",
    "validate_config",
    "CpuSample",
    "MemorySample",
    "GpuSample",
    "MetricKind",
    "DisplayMode",
    "SessionType",

    # Components
    "create_default_sensors",
    "classify",
    "Presenter",
    "ModeStore",

    # Utilities
    "setup_logging",
]
