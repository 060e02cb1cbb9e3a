#!/usr/bin/env python3
"""
2FA Email Log Analyzer

Counts "2FA - Email" entries in the .txt logs of one or more folders,
scanning the folders concurrently, and reports per-folder and aggregate
statistics by date.

Usage:
    python analyze_2fa_logs.py [--verbose] <folder> [folder ...]
    python analyze_2fa_logs.py [--verbose] --config config.json
"""

import sys

from twofa_analyzer.cli import main

if __name__ == "__main__":
    sys.exit(main())
