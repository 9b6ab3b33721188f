"""Directory listing with entry-kind resolution and an optional per-directory cap."""

from __future__ import annotations

import os
import stat
from pathlib import Path

from .errors import DirectoryOpenError, EntryLimitError, UnknownEntryTypeError
from .types import (
    ENTRY_DIRECTORY,
    ENTRY_OTHER,
    ENTRY_REGULAR_FILE,
    ENTRY_UNKNOWN,
    DirectoryEntry,
)


def entry_kind(entry: os.DirEntry) -> str:
    """Resolve one scandir entry to an ``ENTRY_*`` kind without following symlinks.

    Uses the cached ``d_type`` where the filesystem provides it and falls back
    to ``lstat``. Returns ``ENTRY_UNKNOWN`` when neither works.
    """
    try:
        if entry.is_symlink():
            return ENTRY_OTHER
        if entry.is_dir(follow_symlinks=False):
            return ENTRY_DIRECTORY
        if entry.is_file(follow_symlinks=False):
            return ENTRY_REGULAR_FILE
        mode = entry.stat(follow_symlinks=False).st_mode
    except OSError:
        return ENTRY_UNKNOWN
    if stat.S_ISFIFO(mode) or stat.S_ISSOCK(mode) or stat.S_ISCHR(mode) or stat.S_ISBLK(mode):
        return ENTRY_OTHER
    return ENTRY_UNKNOWN


def list_directory(directory: Path, max_entries: int | None = None) -> list[DirectoryEntry]:
    """List immediate members of ``directory`` with their kinds.

    Raises ``DirectoryOpenError`` when the directory cannot be scanned and
    ``UnknownEntryTypeError`` for an entry whose type cannot be determined.
    When ``max_entries`` is set, more than that many subdirectories (or more
    than that many files) raises ``EntryLimitError``.
    """
    entries: list[DirectoryEntry] = []
    dir_count = 0
    file_count = 0
    try:
        with os.scandir(directory) as scanned:
            for child in scanned:
                kind = entry_kind(child)
                if kind == ENTRY_UNKNOWN:
                    raise UnknownEntryTypeError(directory / child.name)
                if kind == ENTRY_DIRECTORY:
                    dir_count += 1
                    if max_entries is not None and dir_count > max_entries:
                        raise EntryLimitError(directory, "dir", max_entries)
                elif kind == ENTRY_REGULAR_FILE:
                    file_count += 1
                    if max_entries is not None and file_count > max_entries:
                        raise EntryLimitError(directory, "file", max_entries)
                entries.append(DirectoryEntry(child.name, kind))
    except OSError as exc:
        raise DirectoryOpenError(directory, exc) from exc
    return entries


def list_names(directory: Path) -> list[str]:
    """Return sorted member names of ``directory`` without resolving their kinds."""
    try:
        with os.scandir(directory) as scanned:
            names = [child.name for child in scanned]
    except OSError as exc:
        raise DirectoryOpenError(directory, exc) from exc
    names.sort()
    return names
