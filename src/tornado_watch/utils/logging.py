"""
Logging utilities for Tornado Watch.
"""

import logging
import logging.handlers
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict
import structlog
from structlog.stdlib import LoggerFactory

from ..core.config import LoggingConfig

_RESERVED_ATTRS = {
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname',
    'filename', 'module', 'lineno', 'funcName', 'created',
    'msecs', 'relativeCreated', 'thread', 'threadName', 'taskName',
    'processName', 'process', 'getMessage', 'exc_info',
    'exc_text', 'stack_info', 'message', 'asctime',
}


class TornadoWatchFormatter(logging.Formatter):
    """JSON formatter carrying ``extra`` fields under ``data``."""

    def format(self, record: logging.LogRecord) -> str:
        extra_data = {
            key: value for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS
        }

        log_entry: Dict[str, Any] = {
            'timestamp': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if extra_data:
            log_entry['data'] = extra_data

        if record.exc_info:
            log_entry['exception'] = {
                'type': record.exc_info[0].__name__ if record.exc_info[0] else None,
                'message': str(record.exc_info[1]) if record.exc_info[1] else None,
                'traceback': self.formatException(record.exc_info),
            }

        return json.dumps(log_entry, default=str)


# Event dicts end up as stdlib records: the event becomes the message and
# every bound key an ``extra`` attribute, which TornadoWatchFormatter renders.
STRUCTLOG_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
    structlog.stdlib.render_to_log_kwargs,
]


class AlertLogger:
    """Specialized logger for alert processing events."""

    def __init__(self, logger: logging.Logger):
        self.logger = structlog.wrap_logger(
            logger,
            processors=STRUCTLOG_PROCESSORS,
            wrapper_class=structlog.stdlib.BoundLogger,
        )

    def log_new_alert(self, alert_line: str, **extra_data) -> None:
        """Log a newly reported tornado alert."""
        self.logger.info(
            f"New tornado alert: {alert_line}",
            event_type='alert_new',
            alert_line=alert_line,
            **extra_data
        )

    def log_no_new_alerts(self, **extra_data) -> None:
        """Log a pass that found nothing new."""
        self.logger.info(
            "No new tornado alerts",
            event_type='no_new_alerts',
            **extra_data
        )


def setup_logging(config: LoggingConfig) -> tuple[logging.Logger, AlertLogger]:
    """
    Setup logging for Tornado Watch.

    Args:
        config: Logging configuration

    Returns:
        Tuple of (main_logger, alert_logger)
    """
    structlog.configure(
        processors=STRUCTLOG_PROCESSORS,
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logger = logging.getLogger('tornado_watch')
    logger.setLevel(getattr(logging, config.level.upper(), logging.INFO))
    logger.handlers.clear()

    if config.format == 'json':
        formatter = TornadoWatchFormatter()
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    # Logs go to stderr so stdout carries only pass summaries
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if config.file:
        file_path = Path(config.file)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            file_path,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8',
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging system initialized", extra={
        'log_level': config.level,
        'log_format': config.format,
        'log_file': str(config.file) if config.file else None
    })

    return logger, AlertLogger(logger)

