"""
Core application components for Tornado Watch.
"""

from .config import AppConfig, ConfigError, NWSApiConfig, FilterConfig, LoggingConfig
from .models import AlertRecord, AlertFeed, Feature, FeedResponse, PassResult
from .scheduler import Scheduler, RunOnceScheduler, IntervalScheduler
from .state import AlertStore

__all__ = [
    "AppConfig",
    "ConfigError",
    "NWSApiConfig",
    "FilterConfig",
    "LoggingConfig",
    "AlertRecord",
    "AlertFeed",
    "Feature",
    "FeedResponse",
    "PassResult",
    "Scheduler",
    "RunOnceScheduler",
    "IntervalScheduler",
    "AlertStore",
]
