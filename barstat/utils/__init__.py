"""Utility functions and helpers.

This module provides common utilities used throughout the system:
- Logging configuration
- Input validation

Usage:
    from barstat.utils import setup_logging, validate_color

    # Setup logging
    setup_logging(debug_mode=True, log_file="~/.cache/barstat/barstat.log")

    if not validate_color("#a6e3a1"):
        ...
"""

from barstat.utils.logging_config import setup_logging
from barstat.utils.validation import (
    validate_color,
    validate_log_level,
    parse_session_type,
)

__all__ = [
    # Logging
    "setup_logging",

    # Validation
    "validate_color",
    "validate_log_level",
    "parse_session_type",
]
