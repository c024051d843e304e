"""
Core application logic for Tornado Watch.
"""

import logging
from datetime import datetime
from typing import Callable, Optional
from rich.console import Console
from rich.markup import escape

from .config import AppConfig
from .models import PassResult
from .scheduler import Scheduler, IntervalScheduler
from .state import AlertStore
from ..api.feed import parse_feed
from ..api.nws_client import NWSClient
from ..processing.tornado import process_alerts
from ..utils.logging import AlertLogger

logger = logging.getLogger(__name__)

RUN_TIMESTAMP_FORMAT = "%m/%d %H:%M:%S"


class TornadoWatchApplication:
    """Main application class for Tornado Watch."""

    def __init__(
        self,
        config: AppConfig,
        nws_client: Optional[NWSClient] = None,
        store: Optional[AlertStore] = None,
        console: Optional[Console] = None,
        alert_logger: Optional[AlertLogger] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize the application.

        Args:
            config: Application configuration
            nws_client: Feed client (built from config if omitted)
            store: Seen-alert store (built from config if omitted)
            console: Output sink for pass summaries
            alert_logger: Structured logger for alert events
            clock: Returns the local wall-clock time used to stamp passes
        """
        self.config = config
        self.nws_client = nws_client or NWSClient(config.nws)
        self.store = store or AlertStore(config.state_file)
        self.console = console or Console()
        self.alert_logger = alert_logger or AlertLogger(logger)
        self.clock = clock

    def run_pass(self) -> PassResult:
        """
        Execute one load/fetch/parse/process/emit/persist pass.

        Raises:
            FeedParseError: If the feed is missing or malformed
            TimeFormatError: If a new tornado alert has an unusable timestamp
        """
        seen = self.store.load()

        response = self.nws_client.fetch_active_alerts()
        started_at = self.clock()
        records = parse_feed(response)

        result = process_alerts(
            records,
            seen,
            keyword=self.config.filter.event_keyword,
            timezone=self.config.filter.timezone,
        )

        self.console.print(
            f"{started_at.strftime(RUN_TIMESTAMP_FORMAT)}: {escape(result.summary)}",
            end="" if result.found else "\n",
            highlight=False,
            soft_wrap=True,
            emoji=False,
        )
        if result.found:
            for line in result.new_alerts:
                self.alert_logger.log_new_alert(line)
        else:
            self.alert_logger.log_no_new_alerts(alerts_checked=len(records))

        saved = self.store.save(seen)
        if not saved:
            logger.warning("Processed alerts were not persisted; they may be reported again")

        return PassResult(
            started_at=started_at,
            summary=result.summary,
            new_alerts=result.new_alerts,
            saved=saved,
        )

    def run(self, scheduler: Optional[Scheduler] = None) -> int:
        """
        Run passes on a schedule.

        Args:
            scheduler: Pass scheduler (defaults to the configured poll interval)

        Returns:
            Number of passes that completed
        """
        scheduler = scheduler or IntervalScheduler(self.config.poll_interval)
        return scheduler.run(self.run_pass)

    def close(self) -> None:
        """Release network resources."""
        self.nws_client.close()
