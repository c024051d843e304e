"""
Tornado alert extraction and deduplication.

Nothing in this module performs I/O: callers load the seen-set, hand it in,
and persist it afterwards.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, MutableSet, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
from dateutil import parser

from ..core.models import AlertRecord

logger = logging.getLogger(__name__)

NO_NEW_TORNADOES = "No new tornadoes found :("
DEFAULT_KEYWORD = "Tornado"
DEFAULT_TIMEZONE = "America/Denver"
LOCAL_TIME_FORMAT = "%m/%d/%y %H:%M:%S"


class TimeFormatError(Exception):
    """An alert timestamp could not be converted to local time."""

    pass


@dataclass
class ProcessResult:
    """Result of filtering one feed snapshot."""

    summary: str
    new_alerts: List[str] = field(default_factory=list)
    new_ids: List[str] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return bool(self.new_alerts)


def is_tornado_alert(record: AlertRecord, keyword: str = DEFAULT_KEYWORD) -> bool:
    """Check whether the record's event names a tornado (case-sensitive)."""
    return bool(record.event) and keyword in record.event


def to_local_time(timestamp: Optional[str], timezone: str = DEFAULT_TIMEZONE) -> str:
    """
    Convert an ISO-8601 timestamp with offset to local time in ``timezone``.

    Args:
        timestamp: ISO-8601 timestamp, e.g. "2024-06-15T20:00:00Z"
        timezone: IANA zone name

    Returns:
        Local time formatted as MM/dd/yy HH:mm:ss

    Raises:
        TimeFormatError: If the timestamp is missing, unparseable, or has no offset
    """
    if not timestamp:
        raise TimeFormatError("Missing effective timestamp")

    try:
        parsed = parser.isoparse(timestamp)
    except (ValueError, TypeError, OverflowError) as e:
        raise TimeFormatError(f"Invalid timestamp {timestamp!r}: {e}") from e

    if parsed.tzinfo is None:
        raise TimeFormatError(f"Timestamp {timestamp!r} has no zone offset")

    try:
        zone = ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise TimeFormatError(f"Unknown timezone {timezone!r}") from e

    return parsed.astimezone(zone).strftime(LOCAL_TIME_FORMAT)


def format_alert(record: AlertRecord, timezone: str = DEFAULT_TIMEZONE) -> str:
    """Build the comma-separated display line for an alert."""
    fields = [
        to_local_time(record.effective, timezone),
        record.event,
        record.area_desc,
        record.severity,
        record.urgency,
    ]
    return ",".join(value or "" for value in fields)


def process_alerts(
    records: Iterable[AlertRecord],
    seen: MutableSet[str],
    keyword: str = DEFAULT_KEYWORD,
    timezone: str = DEFAULT_TIMEZONE,
) -> ProcessResult:
    """
    Extract tornado alerts that have not been reported yet.

    Every accepted alert's effective timestamp is added to ``seen``, so later
    records in the same feed and later passes treat it as already reported.

    Args:
        records: Parsed alert records in feed order
        seen: Identifiers already reported; updated in place
        keyword: Substring an event must contain to count as a tornado
        timezone: Zone used to display alert times

    Returns:
        ProcessResult with the console summary and the new formatted lines

    Raises:
        TimeFormatError: If a new tornado alert has an unusable timestamp
    """
    result = ProcessResult(summary=NO_NEW_TORNADOES)

    for record in records:
        if not is_tornado_alert(record, keyword):
            continue
        if record.effective in seen:
            logger.debug(f"Skipping already processed alert {record.effective}")
            continue

        line = format_alert(record, timezone)
        result.new_alerts.append(line)
        result.new_ids.append(record.effective)
        seen.add(record.effective)

    if result.new_alerts:
        result.summary = "".join(f"{line}\n" for line in result.new_alerts)

    return result
