"""Scan counters threaded through a walk and the end-of-run summary text."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScanCounters:
    """Per-invocation tallies; every walk starts from a fresh instance."""

    layout_violations: int = 0
    names_not_git: int = 0
    non_bare_trees: int = 0
    stray_files: int = 0


def format_summary(counters: ScanCounters) -> str:
    """Render the layout-check summary block printed after a ``-1`` walk."""
    return (
        "\nCheck Result:\n"
        f"{counters.layout_violations} files break Git repo layout rule\n"
        f"{counters.names_not_git} git dirs name not terminated with .git\n"
    )
