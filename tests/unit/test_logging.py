"""Tests for logging configuration."""

import logging
from io import StringIO

from twofa_analyzer.logging_config import (
    configure_logging,
    enable_debug,
    enable_quiet,
    get_logger,
)


class TestLoggingConfiguration:
    """Test logging setup and configuration."""

    def test_simple_mode_output(self):
        """Simple mode produces the bare message."""
        stream = StringIO()
        configure_logging(simple_mode=True, stream=stream)
        logger = get_logger("twofa_analyzer.test.simple")
        logger.info("Test message")
        output = stream.getvalue()
        assert output == "Test message\n"

    def test_structured_mode_output(self):
        """Structured mode includes level, logger and thread names."""
        stream = StringIO()
        configure_logging(simple_mode=False, stream=stream)
        logger = get_logger("twofa_analyzer.test.structured")
        logger.info("Test message")
        output = stream.getvalue()
        assert "Test message" in output
        assert "INFO" in output
        assert "twofa_analyzer.test.structured" in output
        assert "MainThread" in output

    def test_get_logger_returns_same_instance(self):
        assert get_logger("twofa_analyzer.test.cache") is get_logger("twofa_analyzer.test.cache")

    def test_different_names_different_loggers(self):
        assert get_logger("twofa_analyzer.test.one") is not get_logger("twofa_analyzer.test.two")

    def test_does_not_propagate_to_root(self):
        configure_logging(stream=StringIO())
        assert logging.getLogger("twofa_analyzer").propagate is False


class TestLoggingLevels:
    """Test logging level configuration."""

    def test_set_level(self):
        stream = StringIO()
        configure_logging(level=logging.WARNING, stream=stream)
        logger = get_logger("twofa_analyzer.test.level")

        logger.info("Should not appear")
        logger.warning("Should appear")

        output = stream.getvalue()
        assert "Should not appear" not in output
        assert "Should appear" in output

    def test_enable_debug(self):
        stream = StringIO()
        configure_logging(stream=stream)
        enable_debug()
        get_logger("twofa_analyzer.test.debug").debug("Debug message")
        assert "Debug message" in stream.getvalue()

    def test_enable_quiet(self):
        stream = StringIO()
        configure_logging(stream=stream)
        enable_quiet()
        logger = get_logger("twofa_analyzer.test.quiet")
        logger.info("Info message")
        logger.warning("Warning message")
        output = stream.getvalue()
        assert "Info message" not in output
        assert "Warning message" in output


class TestCustomFormat:
    def test_custom_format_string(self):
        stream = StringIO()
        configure_logging(format_string="[CUSTOM] %(message)s", stream=stream)
        get_logger("twofa_analyzer.test.custom").info("Hello")
        assert stream.getvalue() == "[CUSTOM] Hello\n"


class TestWarningStream:
    """Warnings are split from report lines."""

    def test_warnings_go_to_warning_stream(self):
        report, warnings = StringIO(), StringIO()
        configure_logging(stream=report, warning_stream=warnings)
        logger = get_logger("twofa_analyzer.test.split")

        logger.info("Report line")
        logger.warning("Unreadable file")

        assert report.getvalue() == "Report line\n"
        assert warnings.getvalue() == "WARNING: Unreadable file\n"

    def test_single_stream_receives_both(self):
        stream = StringIO()
        configure_logging(stream=stream)
        logger = get_logger("twofa_analyzer.test.single")

        logger.info("Report line")
        logger.error("Broken")

        assert stream.getvalue() == "Report line\nERROR: Broken\n"
