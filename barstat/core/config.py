"""Configuration models and loading."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from pathlib import Path
import yaml
import os
from dotenv import load_dotenv

from barstat.core.exceptions import ConfigError
from barstat.core.interfaces import SessionType
from barstat.utils.validation import (
    parse_session_type,
    validate_color,
    validate_log_level,
)

CACHE_DIR = Path.home() / ".cache" / "barstat"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "barstat" / "config.yaml"


@dataclass
class PathsConfig:
    """Kernel pseudo-filesystem locations."""
    thermal_root: str = "/sys/class/thermal"
    drm_root: str = "/sys/class/drm"
    cpuinfo_path: str = "/proc/cpuinfo"


@dataclass
class ColorConfig:
    """Bar text colors."""
    normal: str = "#a6e3a1"
    critical: str = "#f38ba8"


@dataclass
class SamplingConfig:
    """CPU sampling settings."""
    cpu_interval_seconds: float = 1.0


@dataclass
class StateConfig:
    """Display-mode preference file."""
    mode_file: str = str(CACHE_DIR / "system-info.yaml")


@dataclass
class SystemConfig:
    """Main system configuration."""
    debug_mode: bool = False
    log_level: str = "WARNING"
    log_file: Optional[str] = str(CACHE_DIR / "barstat.log")
    session_type: Optional[SessionType] = None

    paths: PathsConfig = field(default_factory=PathsConfig)
    colors: ColorConfig = field(default_factory=ColorConfig)
    sampling: SamplingConfig = field(default_factory=SamplingConfig)
    state: StateConfig = field(default_factory=StateConfig)


def _apply_section(target: Any, data: Any, section: str) -> None:
    if data is None:
        return
    if not isinstance(data, dict):
        raise ConfigError(f"Config section '{section}' must be a mapping")

    for key, value in data.items():
        attr = str(key).replace("-", "_")
        if not hasattr(target, attr):
            raise ConfigError(f"Unknown key '{key}' in config section '{section}'")
        setattr(target, attr, value)


def _load_file(config: SystemConfig, config_path: Path) -> None:
    """Overlay a YAML config file onto config."""
    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e

    if data is None:
        return
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")

    _apply_section(config.colors, data.get("colors"), "colors")
    _apply_section(config.paths, data.get("paths"), "paths")
    _apply_section(config.sampling, data.get("sampling"), "sampling")
    _apply_section(config.state, data.get("state"), "state")

    logging_data = data.get("logging")
    if isinstance(logging_data, dict):
        config.debug_mode = bool(logging_data.get("debug", config.debug_mode))
        config.log_level = str(logging_data.get("level", config.log_level))
        log_file = logging_data.get("file", config.log_file)
        if log_file is not None and not isinstance(log_file, str):
            raise ConfigError(f"Config key 'logging.file' must be a string, got {log_file!r}")
        config.log_file = log_file


def load_config(config_path: Optional[str] = None) -> SystemConfig:
    """Load configuration from defaults, config file and environment."""
    load_dotenv()

    # Load base config
    config = SystemConfig()

    # Config file is optional unless explicitly named
    explicit = config_path or os.getenv("BARSTAT_CONFIG")
    path = Path(explicit).expanduser() if explicit else DEFAULT_CONFIG_PATH
    if explicit or path.exists():
        _load_file(config, path)

    # Load from environment
    config.debug_mode = os.getenv(
        "BARSTAT_DEBUG", str(config.debug_mode)
    ).lower() == "true"
    config.log_level = os.getenv("BARSTAT_LOG_LEVEL", config.log_level)

    log_file = os.getenv("BARSTAT_LOG_FILE")
    if log_file is not None:
        config.log_file = log_file or None

    config.state.mode_file = os.getenv("BARSTAT_STATE_FILE", config.state.mode_file)

    interval = os.getenv("BARSTAT_CPU_INTERVAL")
    if interval is not None:
        try:
            config.sampling.cpu_interval_seconds = float(interval)
        except ValueError as e:
            raise ConfigError(f"BARSTAT_CPU_INTERVAL is not a number: {interval!r}") from e

    config.session_type = parse_session_type(os.getenv("XDG_SESSION_TYPE"))

    return config


def validate_config(config: SystemConfig) -> List[str]:
    """Validate configuration and return errors."""
    errors = []

    if not validate_color(config.colors.normal):
        errors.append(f"Invalid normal color: {config.colors.normal!r}")

    if not validate_color(config.colors.critical):
        errors.append(f"Invalid critical color: {config.colors.critical!r}")

    interval = config.sampling.cpu_interval_seconds
    if not isinstance(interval, (int, float)) or isinstance(interval, bool) or interval <= 0:
        errors.append("cpu_interval_seconds must be a positive number")

    if not validate_log_level(config.log_level):
        errors.append(f"Unknown log level: {config.log_level!r}")

    for name in ("thermal_root", "drm_root", "cpuinfo_path"):
        value = getattr(config.paths, name)
        if not isinstance(value, str) or not value:
            errors.append(f"Path '{name}' must be a non-empty string, got {value!r}")

    if not isinstance(config.state.mode_file, str) or not config.state.mode_file:
        errors.append(f"Mode file must be a non-empty string, got {config.state.mode_file!r}")

    return errors


def config_summary(config: SystemConfig) -> Dict[str, Any]:
    """Flat view of the effective configuration for debug logging."""
    return {
        "session_type": config.session_type.value if config.session_type else None,
        "thermal_root": config.paths.thermal_root,
        "drm_root": config.paths.drm_root,
        "mode_file": config.state.mode_file,
        "cpu_interval_seconds": config.sampling.cpu_interval_seconds,
        "log_level": config.log_level,
    }
