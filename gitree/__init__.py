"""Audit directory trees of Git repositories.

Exports ``main`` for programmatic CLI invocation and ``TreeClassifier`` for
library use. The walk itself lives in ``gitree.classifier``.
"""

from __future__ import annotations

from .classifier import TreeClassifier
from .report import ScanCounters


def main(*args, **kwargs):
    """Lazily import CLI entrypoint so library users skip argparse/config setup."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["ScanCounters", "TreeClassifier", "main"]
