"""Per-repository checks run by the tree classifier.

``check_layout`` flags Git-root members outside the known-names table.
``check_non_bare`` reports a directory that holds a working-copy ``.git``.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from .fs import list_names
from .report import ScanCounters
from .tables import KNOWN_NAMES, ExceptionTable, basename, is_git_named


def layout_warning(path: Path, name: str) -> str:
    return f"WARNING: {path / name} breaks Git repo layout rule"


def name_warning(path: Path) -> str:
    return f"WARNING: {path} name not terminated with .git"


def check_layout(
    path: Path,
    counters: ScanCounters,
    emit: Callable[[str], None],
    known_names: frozenset[str] = KNOWN_NAMES,
) -> None:
    """Warn about every member of Git root ``path`` missing from ``known_names``.

    The directory is listed again here; member types are not validated, so a
    known name is accepted whether it is a file or a directory.
    """
    for name in list_names(path):
        if name in known_names:
            continue
        counters.layout_violations += 1
        emit(layout_warning(path, name))


def check_root_name(path: Path, counters: ScanCounters, emit: Callable[[str], None]) -> None:
    """Warn when Git root ``path`` is not named ``*.git``."""
    if is_git_named(basename(path)):
        return
    counters.names_not_git += 1
    emit(name_warning(path))


def check_non_bare(
    path: Path,
    counters: ScanCounters,
    emit: Callable[[str], None],
    exceptions: ExceptionTable,
) -> None:
    """Report ``path`` as holding a non-bare tree unless it is excepted."""
    if exceptions.contains(path):
        return
    counters.non_bare_trees += 1
    emit(str(path))
