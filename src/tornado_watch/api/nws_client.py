"""
NWS API client for fetching the active alerts feed.
"""

import logging
from typing import Optional
import httpx

from ..core.config import NWSApiConfig
from ..core.models import FeedResponse

logger = logging.getLogger(__name__)


class NWSClientError(Exception):
    """NWS API client error."""

    pass


class NWSClient:
    """NWS API client for fetching weather alerts."""

    def __init__(self, config: NWSApiConfig, client: Optional[httpx.Client] = None):
        """
        Initialize NWS client.

        Args:
            config: NWS API configuration
            client: Preconfigured HTTP client (a default one is built from config otherwise)
        """
        self.config = config
        self.client = client or httpx.Client(
            base_url=config.base_url,
            timeout=config.timeout,
            headers={"User-Agent": config.user_agent},
            follow_redirects=True,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def _get(self, url: str) -> httpx.Response:
        """
        Issue a GET request for the feed.

        Raises:
            NWSClientError: On transport errors or non-2xx responses
        """
        try:
            response = self.client.get(url, headers={"accept": self.config.accept})
            response.raise_for_status()
            return response
        except httpx.HTTPStatusError as e:
            raise NWSClientError(f"HTTP error: {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise NWSClientError(f"Request failed: {e}") from e

    def fetch_active_alerts(self) -> FeedResponse:
        """
        Fetch the active alerts feed.

        Failures are logged and reported as a FeedResponse without a body.

        Returns:
            FeedResponse holding the raw JSON body, or the failure reason
        """
        url = self.config.alerts_path
        logger.debug(f"Fetching active alerts from {url}")

        try:
            response = self._get(url)
        except NWSClientError as e:
            logger.error(f"Failed to fetch active alerts: {e}")
            status_code = None
            if isinstance(e.__cause__, httpx.HTTPStatusError):
                status_code = e.__cause__.response.status_code
            return FeedResponse(body=None, status_code=status_code, error=str(e))

        logger.debug(f"Fetched {len(response.content)} bytes of alert data")
        return FeedResponse(body=response.text, status_code=response.status_code)

    def test_connection(self) -> bool:
        """
        Test connection to the NWS API.

        Returns:
            True if connection successful, False otherwise
        """
        try:
            self._get(self.config.alerts_path)
            logger.info("NWS API connection test successful")
            return True
        except NWSClientError as e:
            logger.error(f"NWS API connection test failed: {e}")
            return False
