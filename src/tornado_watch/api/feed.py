"""
Decoding of the NWS active-alerts GeoJSON document.
"""

import json
import logging
from typing import List, Union
from pydantic import ValidationError

from ..core.models import AlertFeed, AlertRecord, FeedResponse

logger = logging.getLogger(__name__)


class FeedParseError(Exception):
    """Alert feed could not be decoded."""

    pass


def parse_feed(document: Union[str, bytes, FeedResponse]) -> List[AlertRecord]:
    """
    Parse an alert feed document into alert records.

    Args:
        document: Raw JSON text/bytes, or the FeedResponse of a fetch

    Returns:
        Alert records in feed order

    Raises:
        FeedParseError: If there is no data, the JSON is invalid, or the
            top-level ``features`` array is missing or malformed
    """
    if isinstance(document, FeedResponse):
        if not document.ok:
            raise FeedParseError(f"No feed data to parse: {document.error or 'empty response'}")
        document = document.body

    try:
        data = json.loads(document)
    except (json.JSONDecodeError, UnicodeDecodeError, TypeError) as e:
        raise FeedParseError(f"Invalid JSON document: {e}") from e

    if not isinstance(data, dict):
        raise FeedParseError("Feed document is not a JSON object")
    if "features" not in data:
        raise FeedParseError("Feed document has no 'features' array")

    try:
        feed = AlertFeed.model_validate(data)
    except ValidationError as e:
        raise FeedParseError(f"Malformed feed document: {e}") from e

    records = [feature.properties for feature in feed.features]
    logger.debug(f"Parsed {len(records)} alert features")
    return records
