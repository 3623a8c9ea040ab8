"""
Tests for structured logging
"""

import io
import json
import logging

from bank_ledger.logging_config import JSONFormatter, log_action, setup_logging


class TestJSONFormatter:
    """Test JSON log records"""

    def test_format_includes_custom_fields(self):
        formatter = JSONFormatter()
        logger = logging.getLogger("test")
        record = logger.makeRecord(
            "test", logging.INFO, __name__, 42,
            "Test message", (), None
        )
        record.action = "deposit"
        record.resource = "account:1"
        record.correlation_id = "test-123"

        log_data = json.loads(formatter.format(record))

        assert log_data["level"] == "INFO"
        assert log_data["message"] == "Test message"
        assert log_data["action"] == "deposit"
        assert log_data["resource"] == "account:1"
        assert log_data["correlation_id"] == "test-123"
        assert "timestamp" in log_data

    def test_none_fields_dropped(self):
        formatter = JSONFormatter()
        record = logging.getLogger("test").makeRecord(
            "test", logging.WARNING, __name__, 1, "plain", (), None
        )

        log_data = json.loads(formatter.format(record))

        assert "action" not in log_data
        assert "extra" not in log_data


class TestSetupLogging:
    """Test logger setup and log_action"""

    def setup_method(self):
        self.logger_name = "bank_ledger_test_logger"

    def teardown_method(self):
        logger = logging.getLogger(self.logger_name)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            handler.close()

    def test_single_handler_after_repeated_setup(self):
        setup_logging("INFO", self.logger_name)
        logger = setup_logging("DEBUG", self.logger_name)

        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_text_format(self):
        logger = setup_logging("INFO", self.logger_name, log_format="text")
        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_log_file(self, tmp_path):
        log_path = tmp_path / "ledger.log"
        logger = setup_logging("INFO", self.logger_name, log_file=str(log_path))

        log_action(logger, "info", "Account created", action="create_account",
                   resource="account:1", extra={"owner": "Alice"})
        logger.handlers[0].flush()

        log_data = json.loads(log_path.read_text().strip())
        assert log_data["message"] == "Account created"
        assert log_data["extra"] == {"owner": "Alice"}

    def test_log_action_respects_level(self):
        logger = setup_logging("WARNING", self.logger_name)
        stream = io.StringIO()
        logger.handlers[0].setStream(stream)

        log_action(logger, "info", "hidden")
        log_action(logger, "warning", "shown", action="withdraw")

        lines = stream.getvalue().strip().splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0])["action"] == "withdraw"

    def test_log_action_reports_caller_location(self):
        """Test records point at the calling module and line"""
        logger = setup_logging("INFO", self.logger_name)
        stream = io.StringIO()
        logger.handlers[0].setStream(stream)

        log_action(logger, "info", "located", action="deposit")

        log_data = json.loads(stream.getvalue().strip())
        assert log_data["module"] == "test_logging_config"

    def test_log_action_record_line_number(self, caplog):
        logger = logging.getLogger("bank_ledger_caller_test")

        with caplog.at_level(logging.INFO, logger=logger.name):
            log_action(logger, "info", "located")

        record = caplog.records[-1]
        assert record.module == "test_logging_config"
        assert record.funcName == "test_log_action_record_line_number"
        assert record.lineno > 0
