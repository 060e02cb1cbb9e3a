"""
Custom exceptions for 2FA email log analysis.

Folder-level failures are not raised out of the scanner; they are stored on
the FolderResult so that one bad folder never stops the others. The same
applies to per-file read failures, which end up in ``FolderResult.file_errors``.
"""

from typing import Optional


class TwoFAAnalysisError(Exception):
    """Base exception for all 2FA log analysis errors."""

    pass


class FolderScanError(TwoFAAnalysisError):
    """A folder could not be scanned.

    Attributes:
        kind: Short machine-readable error kind.
        folder_path: Folder the error belongs to.
    """

    kind = "folder-error"

    def __init__(self, message: str, folder_path: Optional[str] = None) -> None:
        self.folder_path = folder_path
        super().__init__(message)


class FolderAccessError(FolderScanError):
    """Raised when a folder is missing, unreadable or cannot be listed."""

    kind = "folder-access-error"


class NoMatchingFilesError(FolderScanError):
    """Raised when a folder contains no ``*.txt`` files."""

    kind = "no-matching-files"


class LogReadError(TwoFAAnalysisError):
    """Raised when a log file cannot be opened or read.

    Attributes:
        file_path: Path to the file that failed.
        line_number: Last line read before the failure (if any).
    """

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        line_number: Optional[int] = None,
    ) -> None:
        self.file_path = file_path
        self.line_number = line_number
        super().__init__(message)

    def __str__(self) -> str:
        base = super().__str__()
        if self.file_path and self.line_number:
            return f"{base} (file: {self.file_path}, line: {self.line_number})"
        elif self.file_path:
            return f"{base} (file: {self.file_path})"
        return base


class ConfigurationError(TwoFAAnalysisError):
    """Raised for configuration-related errors."""

    pass
