"""
Logging setup for 2FA log analysis.

The report is written through the ``twofa_analyzer`` loggers, so logging
carries two kinds of output:

- report lines (DEBUG/INFO) go to the report stream, stdout by default,
  as bare messages;
- file and folder warnings (WARNING and above) go to the warning stream,
  stderr by default, prefixed with their level so they stand out from the
  report when both end up on a terminal.

Passing a single ``stream`` sends both to it, which is what tests do.

Usage:
    from twofa_analyzer.logging_config import get_logger

    logger = get_logger(__name__)
    logger.warning("%s", error)
"""

import logging
import sys
from typing import Optional, TextIO

ROOT_LOGGER_NAME = "twofa_analyzer"

REPORT_FORMAT = "%(message)s"
WARNING_FORMAT = "%(levelname)s: %(message)s"
DEBUG_FORMAT = "%(asctime)s - %(name)s - %(threadName)s - %(levelname)s - %(message)s"

_configured: bool = False


class _BelowWarning(logging.Filter):
    """Pass only report-level records, leaving warnings to their own handler."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def configure_logging(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
    warning_stream: Optional[TextIO] = None,
    simple_mode: bool = True,
) -> None:
    """
    Install the report and warning handlers on the package logger.

    Args:
        level: Logging level (default: INFO).
        format_string: Format used for both handlers. If None, report lines
            are bare messages and warnings carry their level; with
            simple_mode False both use DEBUG_FORMAT.
        stream: Report stream (default: sys.stdout at call time).
        warning_stream: Warning stream. Defaults to ``stream`` when one is
            given, otherwise sys.stderr at call time.
        simple_mode: If False, include time, logger and worker thread names.
    """
    global _configured

    if format_string is not None:
        report_format = warning_format = format_string
    elif simple_mode:
        report_format, warning_format = REPORT_FORMAT, WARNING_FORMAT
    else:
        report_format = warning_format = DEBUG_FORMAT

    if warning_stream is None:
        warning_stream = stream if stream is not None else sys.stderr

    report_handler = logging.StreamHandler(stream or sys.stdout)
    report_handler.setFormatter(logging.Formatter(report_format))
    report_handler.addFilter(_BelowWarning())

    warning_handler = logging.StreamHandler(warning_stream)
    warning_handler.setFormatter(logging.Formatter(warning_format))
    warning_handler.setLevel(logging.WARNING)

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.addHandler(report_handler)
    package_logger.addHandler(warning_handler)
    package_logger.setLevel(level)
    package_logger.propagate = False

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module, setting up default handlers first."""
    if not _configured:
        configure_logging()
    return logging.getLogger(name)


def enable_debug() -> None:
    """Show debug records (per-folder progress) in the report stream."""
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(logging.DEBUG)


def enable_quiet() -> None:
    """Drop the report and keep only warnings and errors."""
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(logging.WARNING)
