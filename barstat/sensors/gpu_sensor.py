"""GPU sensor with an ordered chain of sources.

NVML covers the proprietary NVIDIA driver. When it is missing or sees no
device, the DRM sysfs tree is read instead (amdgpu exposes
``gpu_busy_percent`` and an hwmon temperature there).
"""

import logging
from typing import List, Optional

try:
    import pynvml
    NVIDIA_AVAILABLE = True
except ImportError:
    NVIDIA_AVAILABLE = False

from barstat.core.exceptions import QueryFailed, SensorError, SensorReadError
from barstat.core.interfaces import GpuSample, IGpuSource, ISystemProbe
from barstat.sensors.resolver import SensorPathResolver

logger = logging.getLogger(__name__)

SYSFS_DEVICE_NAME = "N/A"


class NvmlGpuSource(IGpuSource):
    """Reads the first NVIDIA GPU through NVML."""

    def attempt(self) -> GpuSample:
        if not NVIDIA_AVAILABLE:
            raise QueryFailed("pynvml not available")

        try:
            pynvml.nvmlInit()
        except Exception as e:
            raise QueryFailed(f"NVIDIA initialization failed: {e}") from e

        try:
            if pynvml.nvmlDeviceGetCount() == 0:
                raise QueryFailed("NVML reports no devices")

            handle = pynvml.nvmlDeviceGetHandleByIndex(0)
            name = pynvml.nvmlDeviceGetName(handle)
            if isinstance(name, bytes):
                name = name.decode("utf-8", errors="replace")

            util = pynvml.nvmlDeviceGetUtilizationRates(handle)
            temperature = pynvml.nvmlDeviceGetTemperature(handle, pynvml.NVML_TEMPERATURE_GPU)

            return GpuSample(
                device_name=name,
                utilization_percent=int(util.gpu),
                temperature_celsius=int(temperature)
            )
        except QueryFailed:
            raise
        except Exception as e:
            raise QueryFailed(f"NVML query failed: {e}") from e
        finally:
            try:
                pynvml.nvmlShutdown()
            except Exception as e:
                logger.debug(f"NVML shutdown failed: {e}")

    def get_name(self) -> str:
        return "nvml"


class SysfsGpuSource(IGpuSource):
    """Reads a DRM card's hwmon temperature and busy percent."""

    def __init__(self, probe: ISystemProbe, resolver: SensorPathResolver):
        self.probe = probe
        self.resolver = resolver

    def attempt(self) -> GpuSample:
        card_path = self.resolver.resolve_gpu_card_path()
        hwmon_dir = self.resolver.resolve_gpu_hwmon_dir(card_path)
        temp_file = self.resolver.resolve_gpu_temp_input_file(hwmon_dir)

        temp_milli = self._read_int(self.probe.join(hwmon_dir, temp_file))
        # Truncate toward zero
        temperature = int(temp_milli / 1000)

        utilization = self._read_int(self.probe.join(card_path, "device", "gpu_busy_percent"))

        return GpuSample(
            device_name=SYSFS_DEVICE_NAME,
            utilization_percent=utilization,
            temperature_celsius=temperature
        )

    def _read_int(self, path: str) -> int:
        try:
            return int(self.probe.read_text(path).strip())
        except (OSError, ValueError) as e:
            raise SensorReadError(f"Cannot read {path}: {e}") from e

    def get_name(self) -> str:
        return "sysfs"


class GpuSensor:
    """Tries each source in order and returns the first reading."""

    def __init__(self, sources: List[IGpuSource]):
        if not sources:
            raise ValueError("GpuSensor needs at least one source")
        self.sources = sources

    def read(self) -> GpuSample:
        """Read the GPU.

        Raises:
            SensorError: the last source's error when every source failed
        """
        last_error: Optional[SensorError] = None

        for source in self.sources:
            try:
                sample = source.attempt()
            except SensorError as e:
                logger.info(f"GPU source '{source.get_name()}' failed: {e}")
                last_error = e
                continue

            logger.debug(f"GPU sample from '{source.get_name()}': {sample}")
            return sample

        raise last_error


def create_gpu_sensor(probe: ISystemProbe, resolver: SensorPathResolver) -> GpuSensor:
    """Default chain: NVML first, then sysfs."""
    return GpuSensor([
        NvmlGpuSource(),
        SysfsGpuSource(probe, resolver),
    ])
