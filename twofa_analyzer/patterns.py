"""
Marker, formats and patterns used to classify 2FA email log lines.
"""

import re

# Literal substring identifying a 2FA email log line
MARKER = "2FA - Email"

# Log files considered inside each folder (non-recursive)
LOG_FILE_GLOB = "*.txt"

# Date token: 2024-01-15 (zero padded, validated with DATE_FORMAT afterwards)
DATE_TOKEN_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
DATE_FORMAT = "%Y-%m-%d"

# Leading integer of the time token's hour part: "14" from "14:23:45"
HOUR_PATTERN = re.compile(r"^[+-]?\d+")

MIN_HOUR = 0
MAX_HOUR = 23
