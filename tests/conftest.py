"""
Pytest configuration and shared fixtures for 2FA log analysis tests.
"""

import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


# =============================================================================
# SAMPLE LOG DATA FIXTURES
# =============================================================================

@pytest.fixture
def sample_log_lines():
    """Sample application log lines: 4 counted entries on two dates."""
    return [
        "2024-01-15 09:12:01 INFO auth 2FA - Email sent to user 1001",
        "2024-01-15 09:40:33 INFO auth 2FA - SMS sent to user 1002",
        "2024-01-15 11:05:10 INFO auth 2FA - Email sent to user 1003",
        "2024-01-15 25:00:00 INFO auth 2FA - Email sent to user 1004",
        "15-01-2024 10:00:00 INFO auth 2FA - Email sent to user 1005",
        "2024-01-16 00:01:59 INFO auth 2FA - Email sent to user 1006",
        "2024-01-16 00:02:00 INFO login ok for user 1006",
        "",
        "garbage without a date",
    ]


@pytest.fixture
def write_log_folder(tmp_path):
    """Factory creating a folder of log files from a {name: lines} mapping."""

    def _write(name, files):
        folder = tmp_path / name
        folder.mkdir()
        for file_name, lines in files.items():
            (folder / file_name).write_text("\n".join(lines) + "\n", encoding="utf-8")
        return folder

    return _write


@pytest.fixture
def temp_log_folder(write_log_folder, sample_log_lines):
    """A folder with two copies of the sample log and one unrelated file."""
    return write_log_folder(
        "logs",
        {
            "app1.txt": sample_log_lines,
            "app2.txt": sample_log_lines,
            "notes.log": ["2024-01-15 09:00:00 2FA - Email not counted, wrong extension"],
        },
    )


@pytest.fixture
def empty_log_folder(write_log_folder):
    """A folder with files, none of them *.txt."""
    return write_log_folder("empty", {"server.log": ["2024-01-15 09:00:00 2FA - Email"]})
