"""Depth-first tree classifier.

Walks a directory tree, tells Git roots (``objects`` + ``refs``) apart from
ordinary directories, and emits findings for the active mode. Git roots are
never descended into.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from .checks import check_layout, check_non_bare, check_root_name
from .fs import list_directory
from .report import ScanCounters
from .tables import KNOWN_NAMES, ExceptionTable, is_dot_git, is_git_named
from .types import (
    MODE_FIND_NON_BARE,
    MODE_FIND_STRAY,
    MODE_LAYOUT_CHECK,
    MODES,
    ClassificationResult,
    classify_entries,
)

logger = logging.getLogger(__name__)

_WALK = "walk"
_GIT_NAMED = "git-named"


@dataclass(frozen=True)
class _WorkItem:
    """Pending stack frame: walk ``path``, or handle ``*.git`` child ``path`` of ``parent``."""

    action: str
    path: Path
    parent: Path | None = None


@dataclass
class TreeClassifier:
    """Classify a directory tree under one mode and write findings to ``out``.

    ``walk`` may be called repeatedly; every call returns its own counters.
    """

    mode: str
    exceptions: ExceptionTable = field(default_factory=ExceptionTable)
    known_names: frozenset[str] = KNOWN_NAMES
    max_entries: int | None = None
    out: TextIO | None = None

    def __post_init__(self) -> None:
        if self.mode not in MODES:
            raise ValueError(f"unknown mode: {self.mode!r}")

    def _emitter(self) -> Callable[[str], None]:
        stream = self.out if self.out is not None else sys.stdout

        def emit(line: str) -> None:
            stream.write(line + "\n")

        return emit

    def classify(self, path: Path) -> ClassificationResult:
        """List ``path`` once and report whether it is a Git root."""
        return classify_entries(path, list_directory(path, self.max_entries))

    def walk(self, root: Path) -> ScanCounters:
        """Classify ``root`` and everything below it that is not inside a Git root.

        Fatal filesystem conditions propagate as ``GitreeError`` subclasses
        and abort the walk; nothing is retried or skipped.
        """
        counters = ScanCounters()
        emit = self._emitter()
        stack: list[_WorkItem] = [_WorkItem(_WALK, root)]
        while stack:
            item = stack.pop()
            if item.action == _GIT_NAMED:
                self._visit_git_named(item.path, item.parent, counters, emit)
                continue
            pending = self._visit(item.path, counters, emit)
            # reversed so siblings pop in listing order
            stack.extend(reversed(pending))
        return counters

    def _visit(self, path: Path, counters: ScanCounters, emit: Callable[[str], None]) -> list[_WorkItem]:
        logger.debug("Checking %s", path)
        result = self.classify(path)

        if result.is_git_root:
            if self.mode == MODE_LAYOUT_CHECK:
                check_layout(path, counters, emit, self.known_names)
                check_root_name(path, counters, emit)
            return []

        excepted = self.mode == MODE_FIND_STRAY and self.exceptions.contains(path)
        if self.mode == MODE_FIND_STRAY and not excepted:
            for name in result.files:
                counters.stray_files += 1
                emit(str(path / name))

        pending: list[_WorkItem] = []
        for name in result.subdirs:
            child = path / name
            if is_git_named(name):
                pending.append(_WorkItem(_GIT_NAMED, child, path))
            elif excepted:
                logger.debug("Skipping %s under excepted %s", child, path)
            else:
                pending.append(_WorkItem(_WALK, child))
        return pending

    def _visit_git_named(
        self,
        path: Path,
        parent: Path | None,
        counters: ScanCounters,
        emit: Callable[[str], None],
    ) -> None:
        if self.mode == MODE_LAYOUT_CHECK:
            check_layout(path, counters, emit, self.known_names)
        elif self.mode == MODE_FIND_NON_BARE and parent is not None and is_dot_git(path.name):
            check_non_bare(parent, counters, emit, self.exceptions)
