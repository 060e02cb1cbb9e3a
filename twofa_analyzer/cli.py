"""
Command-line entry point for the 2FA email log analyzer.
"""

import sys
from typing import List, Optional

from .aggregator import aggregate
from .config import load_config
from .dispatcher import scan_all
from .exceptions import ConfigurationError
from .logging_config import configure_logging, enable_debug, enable_quiet, get_logger
from .report import log_report

logger = get_logger(__name__)


def print_usage() -> None:
    print("Usage:")
    print("  analyze-2fa-logs [options] <folder_path1> [folder_path2] ...")
    print("  analyze-2fa-logs [options] --config <config_file>")
    print()
    print("Options:")
    print("  --verbose       Show per-file counts and per-day statistics")
    print("  --config <file> Load folder paths from a JSON config file")
    print("  --debug         Show debug logging")
    print("  --quiet         Only show warnings and errors")
    print("  --help          Show this message")
    print()
    print("Examples:")
    print("  analyze-2fa-logs /var/log/app1")
    print("  analyze-2fa-logs /var/log/app1 /mnt/server2/logs --verbose")
    print("  analyze-2fa-logs --config config.json --verbose")


def main(argv: Optional[List[str]] = None) -> int:
    """Run the analyzer and return the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)

    if not args or "--help" in args:
        print_usage()
        return 0 if args else 1

    configure_logging()
    if "--debug" in args:
        enable_debug()
    elif "--quiet" in args:
        enable_quiet()

    folder_paths = []
    verbose = False

    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--verbose":
            verbose = True
        elif arg == "--config":
            if i + 1 >= len(args):
                print("Error: --config flag requires a file path")
                print_usage()
                return 1
            try:
                folder_paths.extend(load_config(args[i + 1]))
            except ConfigurationError as e:
                print(f"Error loading config file: {e}")
                return 1
            i += 1
        elif arg.startswith("--"):
            if arg not in ("--debug", "--quiet"):
                logger.debug("Ignoring unknown option: %s", arg)
        else:
            folder_paths.append(arg)
        i += 1

    if not folder_paths:
        print("Error: No folder paths provided")
        print_usage()
        return 1

    logger.info("Analyzing %d folder(s)...", len(folder_paths))

    results = scan_all(folder_paths)
    report = aggregate(results)
    log_report(results, report, verbose=verbose)

    return 0


if __name__ == "__main__":
    sys.exit(main())
