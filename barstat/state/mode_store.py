"""Persisted display-mode preference.

The preference file is a small YAML mapping::

    cpu-label-mode: utilization
    gpu-label-mode: temperature

Updates are a plain read-modify-write without locking. Two toggles
running at the same moment can lose one update; toggles come from mouse
clicks on the bar, one at a time, so the race is accepted rather than
guarded.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from barstat.core.exceptions import ModeStoreError
from barstat.core.interfaces import DisplayMode, MetricKind

logger = logging.getLogger(__name__)

MODE_KEYS = {
    MetricKind.CPU: "cpu-label-mode",
    MetricKind.GPU: "gpu-label-mode",
}


class ModeStore:
    """Reads and writes the display mode of each metric kind."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def load(self) -> Dict[MetricKind, DisplayMode]:
        """Get the mode of every kind, creating the file with defaults if absent."""
        if not self.path.exists():
            defaults = {kind: DisplayMode.UTILIZATION for kind in MetricKind}
            self._write(self._to_document({}, defaults))
            logger.info(f"Created display mode file {self.path}")
            return defaults

        document = self._read_document()
        return {
            kind: DisplayMode.coerce(document.get(key))
            for kind, key in MODE_KEYS.items()
        }

    def get(self, kind: MetricKind) -> DisplayMode:
        """Get the display mode of one kind."""
        return self.load()[kind]

    def set(self, kind: MetricKind, mode: DisplayMode) -> None:
        """Persist the display mode of one kind, keeping the others."""
        modes = self.load()
        modes[kind] = mode

        document = self._read_document() if self.path.exists() else {}
        self._write(self._to_document(document, modes))
        logger.debug(f"Display mode of {kind.value} set to {mode.value}")

    def toggle(self, kind: MetricKind) -> DisplayMode:
        """Flip the display mode of one kind and return the new mode."""
        new_mode = self.get(kind).toggled()
        self.set(kind, new_mode)
        return new_mode

    def _read_document(self) -> Dict[str, Any]:
        try:
            with open(self.path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.warning(f"Display mode file {self.path} is not valid YAML, using defaults: {e}")
            return {}
        except OSError as e:
            raise ModeStoreError(f"Cannot read display mode file {self.path}: {e}") from e

        if not isinstance(data, dict):
            return {}
        return data

    def _to_document(
        self,
        document: Dict[str, Any],
        modes: Dict[MetricKind, DisplayMode]
    ) -> Dict[str, Any]:
        updated = dict(document)
        for kind, key in MODE_KEYS.items():
            updated[key] = modes[kind].value
        return updated

    def _write(self, document: Dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                yaml.safe_dump(document, f, default_flow_style=False, sort_keys=True)
        except OSError as e:
            raise ModeStoreError(f"Cannot write display mode file {self.path}: {e}") from e
