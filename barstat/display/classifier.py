"""Severity classification for utilization and temperature."""

from dataclasses import dataclass
from enum import Enum


class SeverityBand(Enum):
    """Fixed-threshold severity tiers."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


# Upper bounds are exclusive: 40 is MEDIUM, 90 is CRITICAL
MEDIUM_THRESHOLD = 40
HIGH_THRESHOLD = 70
CRITICAL_THRESHOLD = 90

UTILIZATION_ICONS = {
    SeverityBand.LOW: "\U000F0F86 ",
    SeverityBand.MEDIUM: "\U000F0F85 ",
    SeverityBand.HIGH: "\U000F04C5 ",
    SeverityBand.CRITICAL: "\uF421 ",
}

TEMPERATURE_ICONS = {
    SeverityBand.LOW: "\uF2CA ",
    SeverityBand.MEDIUM: "\uF2C9 ",
    SeverityBand.HIGH: "\uF2C8 ",
    SeverityBand.CRITICAL: "\uF2C7 ",
}


@dataclass(frozen=True)
class Classification:
    """Icons and critical flags for one utilization/temperature pair."""
    utilization_band: SeverityBand
    utilization_icon: str
    utilization_critical: bool
    temperature_band: SeverityBand
    temperature_icon: str
    temperature_critical: bool

    @property
    def critical(self) -> bool:
        return self.utilization_critical or self.temperature_critical


def severity_band(value: float) -> SeverityBand:
    """Map a reading onto its band."""
    if value < MEDIUM_THRESHOLD:
        return SeverityBand.LOW
    elif value < HIGH_THRESHOLD:
        return SeverityBand.MEDIUM
    elif value < CRITICAL_THRESHOLD:
        return SeverityBand.HIGH
    else:
        return SeverityBand.CRITICAL


def classify(utilization: float, temperature: float) -> Classification:
    """Classify utilization and temperature independently."""
    util_band = severity_band(utilization)
    temp_band = severity_band(temperature)

    return Classification(
        utilization_band=util_band,
        utilization_icon=UTILIZATION_ICONS[util_band],
        utilization_critical=util_band is SeverityBand.CRITICAL,
        temperature_band=temp_band,
        temperature_icon=TEMPERATURE_ICONS[temp_band],
        temperature_critical=temp_band is SeverityBand.CRITICAL,
    )
