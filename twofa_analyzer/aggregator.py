"""
Aggregation of per-folder results into a global report, plus hourly statistics.
"""

from collections import defaultdict
from typing import Any, Dict, Iterable, Mapping, Optional

import numpy as np

from .results import AggregateReport, FolderResult


def average_per_hour(hourly: Optional[Mapping[int, int]], total: int) -> float:
    """Average matches per hour over the observed hour span of a date.

    The span runs from the earliest to the latest hour with a match,
    inclusive. Returns 0.0 when there is no hourly breakdown.
    """
    if not hourly:
        return 0.0
    hours_span = max(hourly) - min(hourly) + 1
    if hours_span <= 0:
        hours_span = 1
    return total / hours_span


def hourly_profile(hourly: Optional[Mapping[int, int]]) -> Optional[Dict[str, Any]]:
    """Distribution statistics for one date's hourly breakdown.

    Returns:
        Dictionary with active_hours, mean, std, peak_hour and peak_count,
        or None for an empty breakdown. Ties for the peak go to the earliest
        hour.
    """
    if not hourly:
        return None
    hours = np.array(sorted(hourly), dtype=int)
    counts = np.array([hourly[h] for h in hours], dtype=float)
    peak = int(np.argmax(counts))
    return {
        "active_hours": len(hours),
        "mean": float(np.mean(counts)),
        "std": float(np.std(counts)),
        "peak_hour": int(hours[peak]),
        "peak_count": int(counts[peak]),
    }


def aggregate(results: Iterable[FolderResult]) -> AggregateReport:
    """Merge folder results into an AggregateReport.

    Results carrying an error are counted as attempted but otherwise
    skipped. The outcome does not depend on the order of ``results``.
    """
    date_counts = defaultdict(int)
    hourly_counts = defaultdict(lambda: defaultdict(int))
    total_count = 0
    attempted = 0
    failed = []

    for result in results:
        attempted += 1
        if result.error is not None:
            failed.append(result.folder_path)
            continue

        total_count += result.total_count
        for date, count in result.date_counts.items():
            date_counts[date] += count
        for date, hours in result.hourly_counts.items():
            for hour, count in hours.items():
                hourly_counts[date][hour] += count

    return AggregateReport(
        date_counts=dict(date_counts),
        hourly_counts={date: dict(hours) for date, hours in hourly_counts.items()},
        total_count=total_count,
        folders_attempted=attempted,
        folders_succeeded=attempted - len(failed),
        failed_folders=tuple(sorted(failed)),
    )
