"""Name tables and name-matching helpers.

``KNOWN_NAMES`` lists what may live directly inside a Git root.
``ExceptionTable`` decides which directories are exempt from non-bare and
stray-file reporting.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

GIT_SUFFIX = ".git"

KNOWN_NAMES: frozenset[str] = frozenset(
    {
        # git files
        "COMMIT_EDITMSG",
        "config",
        "description",
        "FETCH_HEAD",
        "HEAD",
        "index",
        "packed-refs",
        "ORIG_HEAD",
        "MERGE_HEAD",
        "MERGE_MODE",
        "MERGE_MSG",
        "MERGE_RR",
        "RENAMED-REF",
        "gitk.cache",
        # git dirs
        "hooks",
        "info",
        "logs",
        "objects",
        "rebase-apply",
        "refs",
        "branches",
        "remotes",
        "shallow",
        "rr-cache",
        # gitweb
        "cloneurl",
        # repo tool
        ".repopickle_config",
        "clone.bundle",
        # leftovers tolerated on shared servers
        "config.bak",
        "config_bak",
        "config~",
        "description~",
        "hooks_bk",
        "hooks.bak",
        "hooks-bak",
        "COMMIT_EDITMSG~",
        ".gitignore",
        "pnt",
        "svn",
        "temp.patch",
    }
)

NON_BARE_EXCEPTIONS: frozenset[str] = frozenset({"manifests", "repo", ".repo"})
PREFIX_EXCEPTIONS: frozenset[str] = frozenset({"/git/android/.repo"})

EXCEPTION_MATCH_BASENAME = "basename"
EXCEPTION_MATCH_PREFIX = "prefix"
EXCEPTION_MATCH_STRATEGIES = (EXCEPTION_MATCH_BASENAME, EXCEPTION_MATCH_PREFIX)


def is_git_named(name: str) -> bool:
    """Return whether ``name`` ends with ``.git`` (``.git`` itself included)."""
    return name.endswith(GIT_SUFFIX)


def is_dot_git(name: str) -> bool:
    """Return whether ``name`` is the bare ``.git`` form with no repository name."""
    return name == GIT_SUFFIX


def basename(path: Path) -> str:
    """Final path component, resolving ``.``/``..`` against the working directory."""
    name = path.name
    if name and name not in {".", ".."}:
        return name
    return os.path.basename(os.path.abspath(path))


def normalize_root(raw: str) -> Path:
    """Strip trailing slashes from a user-supplied root path.

    A path made only of slashes collapses to ``/``.
    """
    stripped = raw.rstrip("/")
    if not stripped and raw:
        stripped = "/"
    return Path(stripped)


@dataclass(frozen=True)
class ExceptionTable:
    """Directories permitted to hold non-bare trees and stray files.

    With ``strategy == "basename"`` an entry must equal the directory's final
    path component exactly. With ``"prefix"`` the directory's full path must
    start with an entry.
    """

    entries: frozenset[str] = NON_BARE_EXCEPTIONS
    strategy: str = EXCEPTION_MATCH_BASENAME

    def __post_init__(self) -> None:
        if self.strategy not in EXCEPTION_MATCH_STRATEGIES:
            raise ValueError(f"unknown exception match strategy: {self.strategy!r}")

    @classmethod
    def with_extra(cls, extra: Iterable[str], strategy: str = EXCEPTION_MATCH_BASENAME) -> ExceptionTable:
        base = NON_BARE_EXCEPTIONS if strategy == EXCEPTION_MATCH_BASENAME else PREFIX_EXCEPTIONS
        return cls(entries=base | frozenset(extra), strategy=strategy)

    def contains(self, path: Path) -> bool:
        if self.strategy == EXCEPTION_MATCH_PREFIX:
            text = str(path)
            return any(text.startswith(entry) for entry in self.entries)
        return basename(path) in self.entries
