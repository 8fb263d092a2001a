"""Input validation utilities."""

import logging
import re
from typing import Optional

from barstat.core.interfaces import SessionType


def validate_color(color: str) -> bool:
    """Validate a color string before it is placed in bar markup.

    The value is passed to the bar verbatim, so named pango colors and
    polybar's ``#argb``/``#aarrggbb`` forms are accepted. Only values
    that would break the surrounding ``%{F...}`` tag or ``color="..."``
    attribute are rejected.
    """
    if not color or not isinstance(color, str) or not color.strip():
        return False

    return not re.search(r'[{}"<>\n]', color)


def validate_log_level(level: str) -> bool:
    """Validate a logging level name."""
    if not level or not isinstance(level, str):
        return False
    return isinstance(logging.getLevelName(level.upper()), int)


def parse_session_type(value: Optional[str]) -> Optional[SessionType]:
    """Map XDG_SESSION_TYPE onto a known session, or None."""
    if not value:
        return None

    for session in SessionType:
        if value == session.value:
            return session
    return None
