"""
Text report for folder results and the aggregate.
"""

from typing import Sequence

from .aggregator import average_per_hour, hourly_profile
from .logging_config import get_logger
from .patterns import MARKER
from .results import AggregateReport, FolderResult

logger = get_logger(__name__)

RULE = "=" * 80


def log_folder_result(result: FolderResult, verbose: bool = False) -> None:
    """Log one folder's outcome; per-file and per-day detail when verbose."""
    if result.error is not None:
        logger.info("\n[ERROR] Folder: %s", result.folder_path)
        logger.info("  Error: %s", result.error)
        return

    logger.info("\n[SUCCESS] Folder: %s", result.folder_path)

    if verbose and result.file_counts:
        logger.info("  Files:")
        for file_name, count in sorted(result.file_counts.items()):
            logger.info("    - %s: %d entries", file_name, count)

    if verbose and result.file_errors:
        logger.info("  Unreadable files:")
        for error in result.file_errors:
            logger.info("    - %s", error)

    if verbose and result.date_counts:
        logger.info("  Per-Day Statistics:")
        for date, count in sorted(result.date_counts.items()):
            hourly = result.hourly_counts.get(date)
            avg = average_per_hour(hourly, count)
            profile = hourly_profile(hourly)
            if profile:
                logger.info(
                    "    - %s: %d entries (avg %.2f emails/hour, peak %02d:00 with %d)",
                    date,
                    count,
                    avg,
                    profile["peak_hour"],
                    profile["peak_count"],
                )
            else:
                logger.info("    - %s: %d entries (avg %.2f emails/hour)", date, count, avg)

    logger.info("  Total '%s' entries: %d", MARKER, result.total_count)


def log_aggregate(report: AggregateReport) -> None:
    """Log the aggregate section, or a notice when nothing matched."""
    logger.info("\n" + RULE)
    if not report.has_entries:
        logger.info("No entries with '%s' found in any log files.", MARKER)
        return

    logger.info("AGGREGATE RESULTS (ALL FOLDERS)")
    logger.info(RULE)

    logger.info("\n%s Entries by Date:", MARKER)
    for date, count in sorted(report.date_counts.items()):
        logger.info("  %s: %d entries", date, count)

    logger.info("\nSummary:")
    logger.info("  Total folders processed: %d", report.folders_attempted)
    logger.info("  Successful folders: %d", report.folders_succeeded)
    logger.info("  Total entries with '%s': %d", MARKER, report.total_count)
    logger.info("  Total distinct days: %d", report.distinct_dates)
    logger.info("  Average entries per day: %.2f", report.average_per_day)


def log_report(
    results: Sequence[FolderResult], report: AggregateReport, verbose: bool = False
) -> None:
    """Log the full report: every folder in input order, then the aggregate."""
    logger.info("\n" + RULE)
    logger.info("RESULTS BY FOLDER")
    logger.info(RULE)

    for result in results:
        log_folder_result(result, verbose=verbose)

    log_aggregate(report)
