"""Real filesystem probe for sysfs and procfs."""

import os
from typing import List

from barstat.core.interfaces import ISystemProbe


class LocalSystemProbe(ISystemProbe):
    """Reads the live kernel pseudo-filesystems."""

    def list_dir(self, path: str) -> List[str]:
        return sorted(os.listdir(path))

    def read_text(self, path: str) -> str:
        with open(path, encoding="utf-8") as f:
            return f.read()

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)
