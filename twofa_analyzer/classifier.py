"""
Line classification for 2FA email log lines.
"""

from datetime import datetime
from typing import Optional

from .patterns import DATE_FORMAT, DATE_TOKEN_PATTERN, HOUR_PATTERN, MARKER, MAX_HOUR, MIN_HOUR
from .results import LineMatch


def parse_date(token: str) -> Optional[str]:
    """Return the token if it is a valid zero-padded YYYY-MM-DD date."""
    if not DATE_TOKEN_PATTERN.match(token):
        return None
    try:
        datetime.strptime(token, DATE_FORMAT)
    except ValueError:
        return None
    return token


def parse_hour(token: Optional[str]) -> Optional[int]:
    """Extract the hour from an HH:MM:SS-shaped token.

    Only the part before the first ':' is used; its leading integer must be
    within 0-23.
    """
    if not token:
        return None
    match = HOUR_PATTERN.match(token.split(":", 1)[0])
    if not match:
        return None
    hour = int(match.group(0))
    if hour < MIN_HOUR or hour > MAX_HOUR:
        return None
    return hour


def classify_line(line: str) -> Optional[LineMatch]:
    """Classify a single log line.

    Returns a LineMatch when the line contains the marker and starts with a
    valid date; the hour is None when the time token is missing or invalid.
    Marker lines with an invalid date return None.
    """
    if MARKER not in line:
        return None

    parts = line.split()
    date = parse_date(parts[0])
    if date is None:
        return None

    time_token = parts[1] if len(parts) > 1 else None
    return LineMatch(date=date, hour=parse_hour(time_token))
