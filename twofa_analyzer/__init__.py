"""
2FA Email Log Analysis Toolkit

Scans folders of plain-text logs concurrently, counts "2FA - Email" entries
by date and hour, and aggregates the per-folder tallies into one report.
"""

from .aggregator import aggregate, average_per_hour, hourly_profile
from .classifier import classify_line, parse_date, parse_hour
from .config import load_config
from .dispatcher import scan_all
from .exceptions import (
    ConfigurationError,
    FolderAccessError,
    FolderScanError,
    LogReadError,
    NoMatchingFilesError,
    TwoFAAnalysisError,
)
from .patterns import DATE_FORMAT, LOG_FILE_GLOB, MARKER
from .results import AggregateReport, FolderResult, LineMatch
from .scanner import scan_folder

__all__ = [
    # Pipeline
    "classify_line",
    "parse_date",
    "parse_hour",
    "scan_folder",
    "scan_all",
    "aggregate",
    "average_per_hour",
    "hourly_profile",
    "load_config",
    # Result classes
    "LineMatch",
    "FolderResult",
    "AggregateReport",
    # Exceptions
    "TwoFAAnalysisError",
    "FolderScanError",
    "FolderAccessError",
    "NoMatchingFilesError",
    "LogReadError",
    "ConfigurationError",
    # Constants
    "MARKER",
    "LOG_FILE_GLOB",
    "DATE_FORMAT",
]

__version__ = "1.0.0"
