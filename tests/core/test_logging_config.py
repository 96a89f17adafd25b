"""
Tests for fasttable.core.logging_config
"""

import json
import logging
import sys

import pytest

from fasttable.core.logging_config import ContextFormatter, JSONFormatter, get_logger, log_with_context, setup_logging


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after the test"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def make_record(message="Rendered table", **attrs):
    record = logging.LogRecord("fasttable.renderer", logging.INFO, __file__, 10, message, None, None)
    for key, value in attrs.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    """Test JSON log formatting"""

    def test_basic_fields(self):
        """Test standard fields are present"""
        data = json.loads(JSONFormatter().format(make_record()))
        assert data["level"] == "INFO"
        assert data["logger"] == "fasttable.renderer"
        assert data["message"] == "Rendered table"
        assert data["timestamp"].endswith("Z")

    def test_extra_fields_merged(self):
        """Test log_with_context fields are merged"""
        record = make_record(extra_fields={"table_id": "t1", "row_count": 2})
        data = json.loads(JSONFormatter().format(record))
        assert data["table_id"] == "t1"
        assert data["row_count"] == 2

    def test_exception_included(self):
        """Test exception info is formatted"""
        try:
            raise IndexError("no rows")
        except IndexError:
            record = make_record(exc_info=sys.exc_info())
        data = json.loads(JSONFormatter().format(record))
        assert "IndexError: no rows" in data["exception"]


class TestContextFormatter:
    """Test console formatting"""

    def test_levelname_restored(self):
        """Test color codes do not leak into the record"""
        record = make_record()
        ContextFormatter(fmt="%(levelname)s %(message)s").format(record)
        assert record.levelname == "INFO"


class TestSetupLogging:
    """Test logging configuration"""

    def test_level_and_handler(self, restore_root_logger):
        """Test the root logger gets one console handler"""
        setup_logging(level="DEBUG")
        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1

    def test_file_handler_json(self, restore_root_logger, tmp_path):
        """Test file output is JSON"""
        log_file = tmp_path / "logs" / "fasttable.log"
        setup_logging(level="INFO", log_file=log_file)

        get_logger("fasttable.test").info("hello")
        for handler in restore_root_logger.handlers:
            handler.flush()

        line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
        assert json.loads(line)["message"] == "hello"

    def test_unknown_level_defaults_to_info(self, restore_root_logger):
        """Test unknown level names fall back to INFO"""
        setup_logging(level="chatty")
        assert restore_root_logger.level == logging.INFO


class TestLogWithContext:
    """Test contextual logging helper"""

    def test_extra_fields_attached(self, caplog):
        """Test context is attached as extra_fields"""
        logger = get_logger("fasttable.test")
        with caplog.at_level(logging.DEBUG, logger="fasttable.test"):
            log_with_context(logger, "debug", "Rendered table markup", table_id="t1")

        record = caplog.records[-1]
        assert record.getMessage() == "Rendered table markup"
        assert record.extra_fields == {"table_id": "t1"}
