"""
Unit tests for logging module.
"""

import logging
import sys

from monoid_docs.core.logging import (
    DocsServerFormatter,
    StructuredLogger,
    get_logger,
    setup_logging,
)


def make_record(msg="Test message", level=logging.INFO, exc_info=None):
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


class TestDocsServerFormatter:
    """Test custom formatter."""

    def test_format_basic_log(self):
        """Test basic log formatting."""
        result = DocsServerFormatter().format(make_record())
        assert "ℹ️" in result
        assert "Test message" in result

    def test_format_with_extra_data(self):
        """Test formatting with extra data."""
        record = make_record()
        record.extra_data = {"key": "value", "count": 42}
        result = DocsServerFormatter().format(record)
        assert "key=value" in result
        assert "count=42" in result

    def test_format_error_level(self):
        result = DocsServerFormatter().format(make_record(level=logging.ERROR))
        assert "❌" in result

    def test_color_only_when_enabled(self):
        record = make_record(level=logging.WARNING)
        assert DocsServerFormatter(use_color=True).format(record).startswith("\033[33m")
        assert "\033[" not in DocsServerFormatter(use_color=False).format(record)

    def test_format_includes_traceback(self):
        """Test exception info is appended."""
        try:
            raise ValueError("broken")
        except ValueError:
            record = make_record(level=logging.ERROR, exc_info=sys.exc_info())

        result = DocsServerFormatter().format(record)
        assert "ValueError: broken" in result


class TestStructuredLogger:
    """Test structured logger."""

    def test_logger_creation(self):
        """Test logger creation."""
        logger = StructuredLogger("test_logger")
        assert logger.logger.name == "test_logger"

    def test_info_carries_extra_data(self, caplog):
        """Test keyword data is attached to the record."""
        logger = StructuredLogger("test_logger")
        with caplog.at_level(logging.INFO, logger="test_logger"):
            logger.info("MCP request", method="ping")

        record = caplog.records[-1]
        assert record.getMessage() == "MCP request"
        assert record.extra_data == {"method": "ping"}

    def test_bind_merges_context(self, caplog):
        """Test bound context is attached to every record."""
        logger = StructuredLogger("test_logger").bind(server="acme-docs")
        with caplog.at_level(logging.INFO, logger="test_logger"):
            logger.info("MCP batch", size=2)

        assert caplog.records[-1].extra_data == {"server": "acme-docs", "size": 2}

    def test_disabled_level_is_skipped(self, caplog):
        """Test nothing is emitted below the logger level."""
        logger = StructuredLogger("test_quiet")
        with caplog.at_level(logging.WARNING, logger="test_quiet"):
            logger.debug("Test debug", debug_info="details")
            logger.info("Test info")

        assert caplog.records == []

    def test_warning_and_error(self, caplog):
        logger = StructuredLogger("test_logger")
        with caplog.at_level(logging.DEBUG, logger="test_logger"):
            logger.warning("Test warning", code=1)
            logger.error("Test error", error_code=500)

        assert [r.levelname for r in caplog.records] == ["WARNING", "ERROR"]


class TestLoggingUtilities:
    """Test logging utility functions."""

    def test_get_logger(self):
        """Test get_logger function."""
        logger = get_logger("test_module")
        assert isinstance(logger, StructuredLogger)
        assert logger.logger.name == "test_module"

    def test_setup_logging_uses_stderr(self):
        """Test the console handler never writes to stdout."""
        root_logger = logging.getLogger()
        saved_handlers = root_logger.handlers[:]
        saved_level = root_logger.level
        try:
            setup_logging("debug")

            assert root_logger.level == logging.DEBUG
            assert len(root_logger.handlers) == 1
            handler = root_logger.handlers[0]
            assert handler.stream is sys.stderr
            assert isinstance(handler.formatter, DocsServerFormatter)
        finally:
            root_logger.handlers[:] = saved_handlers
            root_logger.setLevel(saved_level)

    def test_setup_logging_with_file(self, tmp_path):
        """Test an optional file handler is added."""
        root_logger = logging.getLogger()
        saved_handlers = root_logger.handlers[:]
        saved_level = root_logger.level
        log_file = tmp_path / "logs" / "docs.log"
        try:
            setup_logging("INFO", log_file)

            assert log_file.parent.exists()
            assert any(isinstance(h, logging.FileHandler) for h in root_logger.handlers)
        finally:
            for handler in root_logger.handlers:
                if isinstance(handler, logging.FileHandler):
                    handler.close()
            root_logger.handlers[:] = saved_handlers
            root_logger.setLevel(saved_level)
