"""CPU utilization, model name and package temperature."""

import logging
import psutil

from barstat.core.config import PathsConfig, SamplingConfig
from barstat.core.exceptions import QueryFailed, SensorError, SensorReadError
from barstat.core.interfaces import CpuSample, ISystemProbe
from barstat.sensors.resolver import SensorPathResolver

logger = logging.getLogger(__name__)


class CpuSensor:
    """Produces a CpuSample.

    Utilization and model name are required; a missing temperature
    reads as 0.0 so the primary metric is still shown.
    """

    def __init__(
        self,
        probe: ISystemProbe,
        resolver: SensorPathResolver,
        paths: PathsConfig = None,
        sampling: SamplingConfig = None
    ):
        self.probe = probe
        self.resolver = resolver
        self.paths = paths or PathsConfig()
        self.sampling = sampling or SamplingConfig()

    def read(self) -> CpuSample:
        """Sample the CPU. Blocks for the sampling interval."""
        utilization = self.read_utilization()
        name = self.read_model_name()

        try:
            temperature = self.read_temperature()
        except SensorError as e:
            logger.warning(f"CPU temperature unavailable, using 0: {e}")
            temperature = 0.0

        sample = CpuSample(
            utilization_percent=utilization,
            temperature_celsius=temperature,
            device_name=name
        )
        logger.debug(f"CPU sample: {sample}")
        return sample

    def read_utilization(self) -> float:
        """Get CPU utilization over the sampling window."""
        try:
            return float(psutil.cpu_percent(interval=self.sampling.cpu_interval_seconds))
        except Exception as e:
            raise QueryFailed(f"CPU utilization query failed: {e}") from e

    def read_model_name(self) -> str:
        """Get the model name from the first ``name`` line of cpuinfo.

        Only the field between the first and second colon is kept.
        """
        try:
            cpuinfo = self.probe.read_text(self.paths.cpuinfo_path)
        except OSError as e:
            raise SensorReadError(f"Cannot read {self.paths.cpuinfo_path}: {e}") from e

        for line in cpuinfo.splitlines():
            if "name" in line and ":" in line:
                return line.split(":")[1].strip()

        logger.warning(f"No model name in {self.paths.cpuinfo_path}")
        return ""

    def read_temperature(self) -> float:
        """Get package temperature in degrees Celsius."""
        zone_path = self.resolver.resolve_cpu_thermal_zone()
        temp_path = self.probe.join(zone_path, "temp")

        try:
            raw = self.probe.read_text(temp_path).strip()
            return float(raw) / 1000.0
        except (OSError, ValueError) as e:
            raise SensorReadError(f"Cannot read {temp_path}: {e}") from e
