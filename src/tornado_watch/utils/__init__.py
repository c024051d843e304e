"""
Utilities for Tornado Watch.
"""

from .logging import setup_logging, AlertLogger, TornadoWatchFormatter

__all__ = [
    "setup_logging",
    "AlertLogger",
    "TornadoWatchFormatter",
]
