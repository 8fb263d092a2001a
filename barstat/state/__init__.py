"""Display-mode persistence.

Usage:
    from barstat.state import ModeStore
    from barstat.core.interfaces import MetricKind

    store = ModeStore("~/.cache/barstat/system-info.yaml")
    mode = store.get(MetricKind.CPU)
    store.toggle(MetricKind.CPU)
"""

from barstat.state.mode_store import ModeStore, MODE_KEYS

__all__ = [
    "ModeStore",
    "MODE_KEYS",
]
