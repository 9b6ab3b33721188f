"""Logging initialization."""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV_VAR = "GITREE_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging() -> None:
    # findings own stdout, so diagnostics always go to stderr
    level = (os.getenv(LOG_LEVEL_ENV_VAR) or "WARNING").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        level = "WARNING"
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


__all__ = ["configure_logging"]
