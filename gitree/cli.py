"""Command-line front door for gitree.

Parses the mode flag and root path, loads settings, and runs one walk.
Fatal scan errors become a stderr message plus a distinct exit status.
"""

from __future__ import annotations

import argparse
import logging
import sys

from .classifier import TreeClassifier
from .config import load_settings
from .errors import GitreeError
from .log import configure_logging
from .report import format_summary
from .tables import normalize_root
from .types import MODE_FIND_NON_BARE, MODE_FIND_STRAY, MODE_LAYOUT_CHECK

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gitree",
        description="Audit a tree of Git repositories.",
        epilog=(
            "-1 warns about files breaking the Git repo layout rule and git dirs "
            "not named *.git; -2 lists directories holding a non-bare .git tree; "
            "-3 lists files not in any git tree."
        ),
    )
    modes = parser.add_mutually_exclusive_group(required=True)
    modes.add_argument(
        "-1",
        dest="mode",
        action="store_const",
        const=MODE_LAYOUT_CHECK,
        help="Check Git repo layout and naming; print a summary.",
    )
    modes.add_argument(
        "-2",
        dest="mode",
        action="store_const",
        const=MODE_FIND_NON_BARE,
        help="List directories containing a non-bare git tree.",
    )
    modes.add_argument(
        "-3",
        dest="mode",
        action="store_const",
        const=MODE_FIND_STRAY,
        help="List files found outside any git tree.",
    )
    parser.add_argument("path", help="Root directory to scan.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, walk the requested tree, and print findings.

    Usage errors exit through argparse before any traversal. Findings never
    affect the exit status; a ``GitreeError`` aborts with its ``exit_code``.
    """
    args = build_parser().parse_args(argv)
    configure_logging()

    settings = load_settings()
    root = normalize_root(args.path)
    classifier = TreeClassifier(
        args.mode,
        exceptions=settings.exceptions,
        known_names=settings.known_names,
        max_entries=settings.max_entries,
    )
    logger.debug("Scanning %s in %s mode", root, args.mode)
    try:
        counters = classifier.walk(root)
    except GitreeError as exc:
        sys.stdout.flush()
        sys.stderr.write(f"gitree: {exc}\n")
        raise SystemExit(exc.exit_code) from exc

    if args.mode == MODE_LAYOUT_CHECK:
        sys.stdout.write(format_summary(counters))


if __name__ == "__main__":
    main()
