"""Classification and rendering of samples for the status bar."""

from barstat.display.classifier import (
    Classification,
    SeverityBand,
    classify,
    severity_band,
)
from barstat.display.presenter import Presenter, encode_payload

__all__ = [
    "Classification",
    "SeverityBand",
    "classify",
    "severity_band",
    "Presenter",
    "encode_payload",
]
