"""
Tornado alert processing for Tornado Watch.
"""

from .tornado import (
    NO_NEW_TORNADOES,
    ProcessResult,
    TimeFormatError,
    format_alert,
    is_tornado_alert,
    process_alerts,
    to_local_time,
)

__all__ = [
    "NO_NEW_TORNADOES",
    "ProcessResult",
    "TimeFormatError",
    "format_alert",
    "is_tornado_alert",
    "process_alerts",
    "to_local_time",
]
