"""
API clients for external services.
"""

from .feed import parse_feed, FeedParseError
from .nws_client import NWSClient, NWSClientError

__all__ = ["parse_feed", "FeedParseError", "NWSClient", "NWSClientError"]
