"""Mode constants and directory datatypes shared by the classifier modules."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

MODE_LAYOUT_CHECK = "layout-check"
MODE_FIND_NON_BARE = "find-non-bare"
MODE_FIND_STRAY = "find-stray"
MODES = (MODE_LAYOUT_CHECK, MODE_FIND_NON_BARE, MODE_FIND_STRAY)

ENTRY_DIRECTORY = "directory"
ENTRY_REGULAR_FILE = "regular-file"
ENTRY_OTHER = "other"
ENTRY_UNKNOWN = "unknown"

OBJECTS_DIR_NAME = "objects"
REFS_DIR_NAME = "refs"


@dataclass(frozen=True)
class DirectoryEntry:
    """One immediate directory member as reported by the filesystem.

    ``kind`` is one of the ``ENTRY_*`` constants. ``ENTRY_OTHER`` covers
    symlinks, fifos, sockets and device nodes, which are neither walked nor
    listed as files.
    """

    name: str
    kind: str

    @property
    def is_dir(self) -> bool:
        return self.kind == ENTRY_DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind == ENTRY_REGULAR_FILE


@dataclass(frozen=True)
class ClassificationResult:
    """Partitioned listing of one directory plus its Git-root markers."""

    path: Path
    subdirs: tuple[str, ...]
    files: tuple[str, ...]
    has_objects_dir: bool
    has_refs_dir: bool

    @property
    def is_git_root(self) -> bool:
        return self.has_objects_dir and self.has_refs_dir


def classify_entries(path: Path, entries: list[DirectoryEntry]) -> ClassificationResult:
    """Split ``entries`` into sorted subdirectory/file names and detect Git-root markers."""
    subdirs = sorted(entry.name for entry in entries if entry.is_dir)
    files = sorted(entry.name for entry in entries if entry.is_file)
    return ClassificationResult(
        path=path,
        subdirs=tuple(subdirs),
        files=tuple(files),
        has_objects_dir=OBJECTS_DIR_NAME in subdirs,
        has_refs_dir=REFS_DIR_NAME in subdirs,
    )
