"""Status-bar output rendering.

polybar (X11) takes a line of text with ``%{F...}`` color tags; waybar
(Wayland) takes a JSON object with ``text`` and ``tooltip``. Both formats
are read by the bar configs shipped with the desktop, so they are kept
byte for byte.
"""

import json
import logging
from typing import Optional

from barstat.core.config import ColorConfig
from barstat.core.interfaces import (
    CpuSample,
    DisplayMode,
    GpuSample,
    MemorySample,
    SessionType,
)
from barstat.display.classifier import (
    Classification,
    SeverityBand,
    UTILIZATION_ICONS,
    classify,
    severity_band,
)

logger = logging.getLogger(__name__)

CPU_ICON = "\U000F035B"
GPU_ICON = "\U000F08AE"
MEMORY_USAGE_ICON = "\uE266"

# HTML-sensitive characters and line separators are written as \uXXXX
_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def encode_payload(text: str, tooltip: str) -> str:
    """Encode a waybar payload as one compact JSON line."""
    encoded = json.dumps(
        {"text": text, "tooltip": tooltip},
        ensure_ascii=False,
        separators=(",", ":"),
    )
    for char, escape in _JSON_ESCAPES.items():
        encoded = encoded.replace(char, escape)
    return encoded


class Presenter:
    """Renders samples for one session type.

    Every render method returns the exact string to write to stdout, or
    None when the session type is unknown.
    """

    def __init__(self, session_type: Optional[SessionType], colors: ColorConfig):
        self.session_type = session_type
        self.colors = colors

        if session_type is None:
            logger.debug("Unknown session type, output disabled")

    def _color(self, critical: bool) -> str:
        return self.colors.critical if critical else self.colors.normal

    def _polybar(self, color: str, text: str) -> str:
        return f"%{{F{color}}}{text}%{{F-}}"

    def _span(self, color: str, text: str) -> str:
        return f'<span color="{color}">{text}</span>'

    def render_cpu(self, sample: CpuSample, mode: DisplayMode,
                   classification: Optional[Classification] = None) -> Optional[str]:
        """Render a CPU sample."""
        icons = classification or classify(sample.utilization_percent, sample.temperature_celsius)
        color = self._color(icons.critical)

        if mode is DisplayMode.TEMPERATURE:
            text = f"{CPU_ICON} {sample.temperature_celsius:.0f}°C"
        else:
            text = f"{CPU_ICON} {sample.utilization_percent:.0f}%"

        if self.session_type is SessionType.X11:
            return self._polybar(color, text) + "\n"

        if self.session_type is SessionType.WAYLAND:
            tooltip = (
                f"{CPU_ICON} Name: {sample.device_name}\n"
                f"{icons.utilization_icon}Utilization: {sample.utilization_percent:.0f}%\n"
                f"{icons.temperature_icon}Temp: {sample.temperature_celsius:.0f}°C"
            )
            return encode_payload(self._span(color, text), tooltip) + "\n"

        return None

    def render_gpu(self, sample: GpuSample, mode: DisplayMode,
                   classification: Optional[Classification] = None) -> Optional[str]:
        """Render a GPU sample."""
        icons = classification or classify(sample.utilization_percent, sample.temperature_celsius)
        color = self._color(icons.critical)

        if mode is DisplayMode.TEMPERATURE:
            text = f"{GPU_ICON} {sample.temperature_celsius}°C"
        else:
            text = f"{GPU_ICON} {sample.utilization_percent}%"

        if self.session_type is SessionType.X11:
            return self._polybar(color, text) + "\n"

        if self.session_type is SessionType.WAYLAND:
            tooltip = (
                f"{GPU_ICON} Name: {sample.device_name}\n"
                f"{icons.utilization_icon}Utilization: {sample.utilization_percent}%\n"
                f"{icons.temperature_icon}Temp: {sample.temperature_celsius}°C"
            )
            return encode_payload(self._span(color, text), tooltip) + "\n"

        return None

    def render_memory(self, sample: MemorySample) -> Optional[str]:
        """Render a memory sample.

        The polybar line has no trailing newline.
        """
        band = severity_band(sample.used_percent)
        icon = UTILIZATION_ICONS[band]
        color = self._color(band is SeverityBand.CRITICAL)
        text = f"{icon} {sample.used_gib:.2f} GB"

        if self.session_type is SessionType.X11:
            return self._polybar(color, text)

        if self.session_type is SessionType.WAYLAND:
            tooltip = (
                f"{icon}Percent Utilization: {sample.used_percent:.2f}%\n"
                f"{MEMORY_USAGE_ICON}  Utilization: {sample.used_gib:.2f}/{sample.total_gib:.2f} GB"
            )
            return encode_payload(self._span(color, text), tooltip) + "\n"

        return None
