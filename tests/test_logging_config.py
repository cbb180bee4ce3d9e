"""
Tests for structured logging helpers
"""

import io
import json
import logging

from ledger_core.logging_config import JSONFormatter, setup_logging, get_logger, log_action


class TestLogging:
    """Test JSON formatting and action logging"""

    def _capture(self, logger):
        stream = io.StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(JSONFormatter())
        logger.handlers[0] = handler
        return stream

    def test_setup_logging_json(self):
        logger = setup_logging("DEBUG", logger_name="ledger_core_test.json")

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)
        assert logger.propagate is False

    def test_setup_logging_is_idempotent(self):
        setup_logging(logger_name="ledger_core_test.repeat")
        logger = setup_logging(logger_name="ledger_core_test.repeat")
        assert len(logger.handlers) == 1

    def test_setup_logging_text(self):
        logger = setup_logging("INFO", logger_name="ledger_core_test.text", log_format="text")
        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_log_action_fields(self):
        logger = setup_logging("DEBUG", logger_name="ledger_core_test.action")
        stream = self._capture(logger)

        log_action(
            logger, "info", "Deposit completed",
            action="deposit", resource="account:ACC001001",
            extra={"amount": "10.00"}
        )

        entry = json.loads(stream.getvalue())
        assert entry["message"] == "Deposit completed"
        assert entry["level"] == "INFO"
        assert entry["action"] == "deposit"
        assert entry["resource"] == "account:ACC001001"
        assert entry["extra"] == {"amount": "10.00"}

    def test_log_action_respects_level(self):
        logger = setup_logging("WARNING", logger_name="ledger_core_test.level")
        stream = self._capture(logger)

        log_action(logger, "debug", "hidden", action="deposit")

        assert stream.getvalue() == ""

    def test_get_logger(self):
        assert get_logger("ledger_core.service").name == "ledger_core.service"
