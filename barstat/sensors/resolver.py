"""Sensor path discovery.

The kernel numbers thermal zones, DRM cards and hwmon directories
differently on every machine (and sometimes on every boot), so the
paths have to be found by scanning rather than hard-coded.
"""

import logging
import re
from typing import Optional

from barstat.core.config import PathsConfig
from barstat.core.exceptions import SensorNotFound, SensorReadError
from barstat.core.interfaces import ISystemProbe

logger = logging.getLogger(__name__)

THERMAL_ZONE_PATTERN = re.compile(r'^thermal_zone\d+$')
DRM_CARD_PATTERN = re.compile(r'^card\d+$')
TEMP_INPUT_PATTERN = re.compile(r'^temp\d+_input$')

CPU_PACKAGE_ZONE_TYPE = "x86_pkg_temp"
DEFAULT_HWMON_NAME = "hwmon0"


class SensorPathResolver:
    """Resolves CPU thermal zone and GPU hwmon paths."""

    def __init__(self, probe: ISystemProbe, paths: Optional[PathsConfig] = None):
        self.probe = probe
        self.paths = paths or PathsConfig()

    def resolve_cpu_thermal_zone(self) -> str:
        """Find the thermal zone reporting CPU package temperature.

        Returns the first zone (in listing order) whose ``type`` is
        ``x86_pkg_temp``.

        Raises:
            SensorNotFound: no such zone, or the thermal root is unreadable
            SensorReadError: a zone's type file could not be read
        """
        root = self.paths.thermal_root
        try:
            entries = self.probe.list_dir(root)
        except OSError as e:
            raise SensorNotFound(f"Cannot list thermal zones in {root}: {e}") from e

        for name in entries:
            if not THERMAL_ZONE_PATTERN.match(name):
                continue

            zone_path = self.probe.join(root, name)
            try:
                zone_type = self.probe.read_text(self.probe.join(zone_path, "type")).strip()
            except OSError as e:
                raise SensorReadError(f"Cannot read type of {name}: {e}") from e

            if zone_type == CPU_PACKAGE_ZONE_TYPE:
                logger.debug(f"CPU package thermal zone: {zone_path}")
                return zone_path

        raise SensorNotFound(f"No {CPU_PACKAGE_ZONE_TYPE} thermal zone under {root}")

    def resolve_gpu_card_path(self) -> str:
        """Find the DRM card directory.

        The scan does not stop at the first match: with several cards the
        last one in listing order wins, which is not necessarily the
        primary GPU.

        Raises:
            SensorNotFound: no cardN directory, or the DRM root is unreadable
        """
        root = self.paths.drm_root
        try:
            entries = self.probe.list_dir(root)
        except OSError as e:
            raise SensorNotFound(f"Cannot list DRM devices in {root}: {e}") from e

        card_path = None
        for name in entries:
            full_path = self.probe.join(root, name)
            if self.probe.is_dir(full_path) and DRM_CARD_PATTERN.match(name):
                card_path = full_path

        if card_path is None:
            raise SensorNotFound(f"No DRM card under {root}")

        logger.debug(f"GPU card path: {card_path}")
        return card_path

    def resolve_gpu_hwmon_dir(self, card_path: str) -> str:
        """Find the hwmon directory of a DRM card.

        Falls back to ``hwmon0`` when the listing succeeds but holds no
        hwmon entry; that path is unverified.

        Raises:
            SensorReadError: the card's hwmon directory cannot be listed
        """
        hwmon_root = self.probe.join(card_path, "device", "hwmon")
        try:
            entries = self.probe.list_dir(hwmon_root)
        except OSError as e:
            raise SensorReadError(f"Cannot list GPU hwmon directory {hwmon_root}: {e}") from e

        for name in entries:
            if "hwmon" in name:
                return self.probe.join(hwmon_root, name)

        logger.debug(f"No hwmon entry in {hwmon_root}, assuming {DEFAULT_HWMON_NAME}")
        return self.probe.join(hwmon_root, DEFAULT_HWMON_NAME)

    def resolve_gpu_temp_input_file(self, hwmon_dir: str) -> str:
        """Find the first ``tempN_input`` file name in a hwmon directory.

        Raises:
            SensorNotFound: no temperature input, or the directory is unreadable
        """
        try:
            entries = self.probe.list_dir(hwmon_dir)
        except OSError as e:
            raise SensorNotFound(f"Cannot list hwmon directory {hwmon_dir}: {e}") from e

        for name in entries:
            if TEMP_INPUT_PATTERN.match(name):
                return name

        raise SensorNotFound(f"No temperature input in {hwmon_dir}")
