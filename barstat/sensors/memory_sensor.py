"""Memory usage sensor."""

import logging
import math
import psutil

from barstat.core.exceptions import QueryFailed
from barstat.core.interfaces import MemorySample

logger = logging.getLogger(__name__)

BYTES_PER_GIB = 1024 ** 3


def round_half_away(value: float, digits: int = 2) -> float:
    """Round to ``digits`` decimals, halves away from zero."""
    factor = 10 ** digits
    return math.copysign(math.floor(abs(value) * factor + 0.5), value) / factor


def bytes_to_gib(n: int) -> float:
    return round_half_away(n / BYTES_PER_GIB, 2)


class MemorySensor:
    """Produces a MemorySample from one virtual-memory query."""

    def read(self) -> MemorySample:
        try:
            vm = psutil.virtual_memory()
        except Exception as e:
            raise QueryFailed(f"Memory query failed: {e}") from e

        sample = MemorySample(
            total_gib=bytes_to_gib(vm.total),
            used_gib=bytes_to_gib(vm.used),
            used_percent=float(vm.percent)
        )
        logger.debug(f"Memory sample: {sample}")
        return sample
