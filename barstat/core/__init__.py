"""Core types, configuration and errors.

Usage:
    from barstat.core import load_config, validate_config, CpuSample

    config = load_config()
    errors = validate_config(config)
"""

from barstat.core.config import (
    SystemConfig,
    PathsConfig,
    ColorConfig,
    SamplingConfig,
    StateConfig,
    load_config,
    validate_config,
)
from barstat.core.exceptions import (
    BarstatError,
    SensorError,
    SensorNotFound,
    SensorReadError,
    QueryFailed,
    ModeStoreError,
    ConfigError,
)
from barstat.core.interfaces import (
    CpuSample,
    MemorySample,
    GpuSample,
    MetricKind,
    DisplayMode,
    SessionType,
    ISystemProbe,
    IGpuSource,
)

__all__ = [
    # Config
    "SystemConfig",
    "PathsConfig",
    "ColorConfig",
    "SamplingConfig",
    "StateConfig",
    "load_config",
    "validate_config",

    # Errors
    "BarstatError",
    "SensorError",
    "SensorNotFound",
    "SensorReadError",
    "QueryFailed",
    "ModeStoreError",
    "ConfigError",

    # Types
    "CpuSample",
    "MemorySample",
    "GpuSample",
    "MetricKind",
    "DisplayMode",
    "SessionType",
    "ISystemProbe",
    "IGpuSource",
]
