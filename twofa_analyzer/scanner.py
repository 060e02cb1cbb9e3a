"""
Folder scanning: tally 2FA email lines in every log file of one folder.
"""

import fnmatch
import os
from collections import defaultdict
from typing import Dict, List, Tuple

from .classifier import classify_line
from .exceptions import FolderAccessError, LogReadError, NoMatchingFilesError
from .logging_config import get_logger
from .patterns import LOG_FILE_GLOB
from .results import FolderResult

logger = get_logger(__name__)


def list_log_files(folder_path: str) -> List[str]:
    """List ``*.txt`` entries directly inside a folder, sorted by name.

    Raises:
        OSError: If the folder cannot be listed.
        ValueError: If the path is not a usable path (embedded NUL).
    """
    with os.scandir(folder_path) as entries:
        names = [entry.name for entry in entries if fnmatch.fnmatch(entry.name, LOG_FILE_GLOB)]
    return [os.path.join(folder_path, name) for name in sorted(names)]


def tally_file(file_path: str) -> Tuple[int, Dict[str, int], Dict[str, Dict[int, int]]]:
    """Count marker lines in one file.

    Returns:
        (count, per-date counts, per-date-per-hour counts) for the file.

    Raises:
        LogReadError: If the file cannot be opened or read.
    """
    count = 0
    date_counts = defaultdict(int)
    hourly_counts = defaultdict(lambda: defaultdict(int))
    line_number = 0

    try:
        with open(file_path, encoding="utf-8-sig", errors="replace") as f:
            for line in f:
                line_number += 1
                match = classify_line(line)
                if match is None:
                    continue
                count += 1
                date_counts[match.date] += 1
                if match.hour is not None:
                    hourly_counts[match.date][match.hour] += 1
    except OSError as e:
        raise LogReadError(
            f"Error reading file: {e}", file_path=file_path, line_number=line_number or None
        ) from e

    return count, date_counts, hourly_counts


def scan_folder(folder_path: str) -> FolderResult:
    """Scan one folder and return its tallies.

    Folder-level failures are returned on ``FolderResult.error``; files that
    cannot be read are logged, recorded in ``file_errors`` and skipped.
    """
    logger.debug("Scanning folder: %s", folder_path)

    try:
        log_files = list_log_files(folder_path)
    except (OSError, ValueError) as e:
        return FolderResult(
            folder_path=folder_path,
            error=FolderAccessError(f"error reading folder: {e}", folder_path=folder_path),
        )

    if not log_files:
        return FolderResult(
            folder_path=folder_path,
            error=NoMatchingFilesError("no .txt files found in folder", folder_path=folder_path),
        )

    total_count = 0
    date_counts = defaultdict(int)
    file_counts = {}
    hourly_counts = defaultdict(lambda: defaultdict(int))
    file_errors = []

    for file_path in log_files:
        try:
            count, file_dates, file_hours = tally_file(file_path)
        except LogReadError as e:
            logger.warning("%s", e)
            file_errors.append(e)
            continue

        file_counts[os.path.basename(file_path)] = count
        total_count += count
        for date, date_count in file_dates.items():
            date_counts[date] += date_count
        for date, hours in file_hours.items():
            for hour, hour_count in hours.items():
                hourly_counts[date][hour] += hour_count

    logger.debug(
        "  %s: %d files, %d entries, %d unreadable",
        folder_path,
        len(file_counts),
        total_count,
        len(file_errors),
    )

    return FolderResult(
        folder_path=folder_path,
        date_counts=dict(date_counts),
        file_counts=file_counts,
        hourly_counts={date: dict(hours) for date, hours in hourly_counts.items()},
        total_count=total_count,
        file_errors=tuple(file_errors),
    )
