"""Error types."""


class BarstatError(Exception):
    """Base error for barstat."""
    pass


class SensorError(BarstatError):
    """A hardware metric could not be obtained."""
    pass


class SensorNotFound(SensorError):
    """Expected hardware signal is absent (no thermal zone, no DRM card)."""
    pass


class SensorReadError(SensorError):
    """Path was resolved but reading or parsing it failed."""
    pass


class QueryFailed(SensorError):
    """A psutil or NVML query failed or returned nothing."""
    pass


class ModeStoreError(BarstatError):
    """Display-mode preference file could not be written."""
    pass


class ConfigError(BarstatError):
    """Configuration file is unreadable or malformed."""
    pass
