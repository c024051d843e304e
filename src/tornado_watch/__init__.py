"""
Tornado Watch - reports new tornado alerts from the NWS active alerts feed.
"""

__version__ = "1.0.0"
