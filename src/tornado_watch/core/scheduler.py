"""
Pass schedulers for Tornado Watch.
"""

import logging
import time
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class Scheduler:
    """Decides when, and how many times, a pass runs."""

    def run(self, pass_fn: Callable[[], Any]) -> int:
        """
        Run passes until the schedule is exhausted.

        Args:
            pass_fn: Callable executing a single pass

        Returns:
            Number of passes that completed
        """
        raise NotImplementedError


class RunOnceScheduler(Scheduler):
    """Run a single pass; errors propagate to the caller."""

    def run(self, pass_fn: Callable[[], Any]) -> int:
        pass_fn()
        return 1


class IntervalScheduler(Scheduler):
    """Run passes back to back with a blocking sleep between them.

    The loop stops on the first exception raised by a pass.
    """

    def __init__(
        self,
        interval: float,
        sleep: Callable[[float], None] = time.sleep,
        max_passes: Optional[int] = None,
    ):
        """
        Initialize the interval scheduler.

        Args:
            interval: Seconds to sleep after each pass
            sleep: Blocking sleep function
            max_passes: Stop after this many passes (None runs forever)
        """
        self.interval = interval
        self.sleep = sleep
        self.max_passes = max_passes

    def run(self, pass_fn: Callable[[], Any]) -> int:
        logger.info(f"Starting main loop with {self.interval}s poll interval")
        completed = 0

        while self.max_passes is None or completed < self.max_passes:
            try:
                pass_fn()
            except Exception as e:
                logger.error(f"Error in main loop, stopping: {e}", exc_info=True)
                break
            completed += 1

            if self.max_passes is not None and completed >= self.max_passes:
                break
            self.sleep(self.interval)

        logger.info(f"Main loop finished after {completed} passes")
        return completed
