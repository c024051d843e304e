"""
Tests for logging setup
"""

import json
import logging

import structlog

from tornado_watch.core.config import LoggingConfig
from tornado_watch.utils.logging import AlertLogger, TornadoWatchFormatter, setup_logging


def make_record(msg="hello", **extra):
    record = logging.LogRecord("tornado_watch.test", logging.INFO, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestFormatter:
    """Tests for the JSON formatter."""

    def test_json_entry(self):
        entry = json.loads(TornadoWatchFormatter().format(make_record(alert_line="x")))

        assert entry["level"] == "INFO"
        assert entry["logger"] == "tornado_watch.test"
        assert entry["message"] == "hello"
        assert entry["data"] == {"alert_line": "x"}

    def test_no_extra_data(self):
        entry = json.loads(TornadoWatchFormatter().format(make_record()))
        assert "data" not in entry


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "tornado-watch.log"
        logger, alert_logger = setup_logging(LoggingConfig(level="DEBUG", file=log_file, format="json"))

        alert_logger.log_new_alert("06/15/24 14:00:00,Tornado Warning,Weld, CO,Extreme,Immediate")
        for handler in logger.handlers:
            handler.flush()

        entries = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
        new_alert = [e for e in entries if e.get("data", {}).get("event_type") == "alert_new"]
        assert len(new_alert) == 1
        assert new_alert[0]["data"]["alert_line"].startswith("06/15/24 14:00:00")

        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    def test_text_format_and_level(self):
        logger, _ = setup_logging(LoggingConfig(level="warning", format="text"))

        assert logger.name == "tornado_watch"
        assert logger.level == logging.WARNING
        assert not isinstance(logger.handlers[0].formatter, TornadoWatchFormatter)
        assert len(logger.handlers) == 1

        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


class TestAlertLogger:
    """Tests for structured alert events."""

    def test_no_new_alerts_event(self, caplog):
        with caplog.at_level(logging.INFO, logger="tornado_watch"):
            AlertLogger(logging.getLogger("tornado_watch.test")).log_no_new_alerts(alerts_checked=4)

        record = caplog.records[-1]
        assert record.event_type == "no_new_alerts"
        assert record.alerts_checked == 4

    def test_new_alert_event_goes_through_structlog(self, caplog):
        alert_logger = AlertLogger(logging.getLogger("tornado_watch.test"))

        with caplog.at_level(logging.INFO, logger="tornado_watch"):
            alert_logger.log_new_alert("line", pass_number=2)

        record = caplog.records[-1]
        assert record.getMessage() == "New tornado alert: line"
        assert record.alert_line == "line"
        assert record.pass_number == 2

    def test_filtered_level_drops_event(self, caplog):
        alert_logger = AlertLogger(logging.getLogger("tornado_watch.test"))

        with caplog.at_level(logging.WARNING, logger="tornado_watch"):
            alert_logger.log_no_new_alerts()

        assert caplog.records == []


class TestStructlogConfiguration:
    """Tests for the structlog configuration installed by setup_logging."""

    def test_structlog_loggers_reach_stdlib_handlers(self, caplog):
        logger, _ = setup_logging(LoggingConfig(level="INFO", format="text"))
        try:
            with caplog.at_level(logging.INFO, logger="tornado_watch"):
                structlog.get_logger("tornado_watch.structured").info("pass finished", new_alerts=3)

            record = caplog.records[-1]
            assert record.name == "tornado_watch.structured"
            assert record.getMessage() == "pass finished"
            assert record.new_alerts == 3
        finally:
            logger.handlers.clear()
            logger.setLevel(logging.NOTSET)
