"""Fatal error types raised by the walker and mapped to exit codes by the CLI."""

from __future__ import annotations

from pathlib import Path

EXIT_USAGE = 2
EXIT_DIRECTORY_OPEN = 3
EXIT_UNKNOWN_ENTRY_TYPE = 4
EXIT_ENTRY_LIMIT = 5


class GitreeError(Exception):
    """Base class for conditions that abort a scan."""

    exit_code = 1


class DirectoryOpenError(GitreeError):
    """A directory could not be listed (missing, not a directory, permissions)."""

    exit_code = EXIT_DIRECTORY_OPEN

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"cannot open directory {path}: {reason}")


class UnknownEntryTypeError(GitreeError):
    """The type of a directory entry could not be determined."""

    exit_code = EXIT_UNKNOWN_ENTRY_TYPE

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"unknown file type: {path}")


class EntryLimitError(GitreeError):
    """A directory holds more subdirectories or files than the configured cap."""

    exit_code = EXIT_ENTRY_LIMIT

    def __init__(self, path: Path, what: str, limit: int) -> None:
        self.path = path
        self.limit = limit
        super().__init__(f"reach max {what} num ({limit}) in {path}")
