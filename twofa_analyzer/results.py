"""
Result data classes for 2FA log analysis.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from .exceptions import FolderScanError, LogReadError


@dataclass(frozen=True)
class LineMatch:
    """A classified marker line.

    Attributes:
        date: Date token of the line (YYYY-MM-DD).
        hour: Hour of day 0-23, or None when the time token did not parse.
    """

    date: str
    hour: Optional[int] = None


@dataclass(frozen=True)
class FolderResult:
    """Tallies for one scanned folder.

    Attributes:
        folder_path: Folder that was scanned.
        date_counts: Matches per date.
        file_counts: Matches per file name (every file read, zero included).
        hourly_counts: Matches per date, then per hour of day.
        total_count: Matches in the whole folder.
        error: Folder-level failure, if the folder could not be scanned.
        file_errors: Files that could not be opened or read.
    """

    folder_path: str
    date_counts: Dict[str, int] = field(default_factory=dict)
    file_counts: Dict[str, int] = field(default_factory=dict)
    hourly_counts: Dict[str, Dict[int, int]] = field(default_factory=dict)
    total_count: int = 0
    error: Optional[FolderScanError] = None
    file_errors: Tuple[LogReadError, ...] = ()

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> Optional[str]:
        return self.error.kind if self.error is not None else None


@dataclass(frozen=True)
class AggregateReport:
    """Combined tallies across all successfully scanned folders.

    Attributes:
        date_counts: Matches per date across folders.
        hourly_counts: Matches per date and hour across folders.
        total_count: Matches across folders.
        folders_attempted: Number of folders in the run.
        folders_succeeded: Number of folders without a folder-level error.
        failed_folders: Paths of folders that carried an error, sorted.
    """

    date_counts: Dict[str, int]
    hourly_counts: Dict[str, Dict[int, int]]
    total_count: int
    folders_attempted: int
    folders_succeeded: int
    failed_folders: Tuple[str, ...] = ()

    @property
    def distinct_dates(self) -> int:
        return len(self.date_counts)

    @property
    def has_entries(self) -> bool:
        return self.distinct_dates > 0

    @property
    def average_per_day(self) -> float:
        """Total matches divided by distinct dates, 0.0 when there are none."""
        if not self.has_entries:
            return 0.0
        return self.total_count / self.distinct_dates
