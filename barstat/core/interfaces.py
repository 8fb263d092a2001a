"""Interface definitions and sample types for all major components."""

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List


@dataclass(frozen=True)
class CpuSample:
    """One CPU reading."""
    utilization_percent: float
    temperature_celsius: float  # 0.0 when the thermal zone is unavailable
    device_name: str


@dataclass(frozen=True)
class MemorySample:
    """One memory reading, sizes in GiB rounded to 2 decimals."""
    total_gib: float
    used_gib: float
    used_percent: float


@dataclass(frozen=True)
class GpuSample:
    """One GPU reading, identical in shape for every source."""
    device_name: str
    utilization_percent: int
    temperature_celsius: int


class MetricKind(Enum):
    """Metric kinds that carry a persisted display mode."""
    CPU = "cpu"
    GPU = "gpu"


class DisplayMode(Enum):
    """What the bar text shows for a metric."""
    UTILIZATION = "utilization"
    TEMPERATURE = "temperature"

    @classmethod
    def coerce(cls, value) -> "DisplayMode":
        """Parse a stored value; anything unrecognized is UTILIZATION."""
        for mode in cls:
            if value == mode.value:
                return mode
        return cls.UTILIZATION

    def toggled(self) -> "DisplayMode":
        if self is DisplayMode.TEMPERATURE:
            return DisplayMode.UTILIZATION
        return DisplayMode.TEMPERATURE


class SessionType(Enum):
    """Windowing-system session, selects the output format."""
    X11 = "x11"
    WAYLAND = "wayland"


class ISystemProbe(ABC):
    """Filesystem access used for sysfs/procfs discovery."""

    @abstractmethod
    def list_dir(self, path: str) -> List[str]:
        """List entry names in a directory, sorted by name.

        Raises OSError if the directory cannot be listed.
        """
        pass

    @abstractmethod
    def read_text(self, path: str) -> str:
        """Read a whole file. Raises OSError on failure."""
        pass

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        """Check whether path is a directory, following symlinks."""
        pass

    def join(self, *parts: str) -> str:
        """Join path components."""
        return os.path.join(*parts)


class IGpuSource(ABC):
    """One candidate strategy for reading the GPU."""

    @abstractmethod
    def attempt(self) -> GpuSample:
        """Read the GPU or raise a SensorError."""
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Get source name."""
        pass
