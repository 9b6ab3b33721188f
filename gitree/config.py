"""JSON config loading for table extensions and walk limits.

The config file is optional and read-only. Malformed or invalid values are
logged and replaced by defaults so configuration never aborts a scan.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .tables import (
    EXCEPTION_MATCH_BASENAME,
    EXCEPTION_MATCH_STRATEGIES,
    KNOWN_NAMES,
    ExceptionTable,
)

logger = logging.getLogger(__name__)

APP_NAME = "gitree"
CONFIG_FILENAME = "config.json"
CONFIG_ENV_VAR = "GITREE_CONFIG"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings for one invocation."""

    known_names: frozenset[str] = KNOWN_NAMES
    exceptions: ExceptionTable = ExceptionTable()
    max_entries: int | None = None


def config_path() -> Path:
    """Return the config path, honoring ``GITREE_CONFIG`` when set."""
    override = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    return CONFIG_PATH


def load_config(path: Path | None = None) -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing. Unreadable or malformed
    files, and files not holding a top-level JSON object, are logged and also
    yield an empty dict.
    """
    path = path if path is not None else config_path()
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError as exc:
        logger.warning("cannot read config %s: %s", path, exc)
        return {}
    try:
        data = json.loads(text)
    except ValueError as exc:
        logger.warning("ignoring malformed config %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: top level is not an object", path)
        return {}
    return data


def _string_list(data: dict[str, object], key: str) -> frozenset[str]:
    value = data.get(key)
    if value is None:
        return frozenset()
    if not isinstance(value, list) or not all(isinstance(item, str) and item for item in value):
        logger.warning("config key %r must be a list of non-empty strings; ignoring", key)
        return frozenset()
    return frozenset(value)


def _exception_match(data: dict[str, object]) -> str:
    value = data.get("exception_match", EXCEPTION_MATCH_BASENAME)
    if value not in EXCEPTION_MATCH_STRATEGIES:
        logger.warning(
            "config key 'exception_match' must be one of %s; using %r",
            ", ".join(EXCEPTION_MATCH_STRATEGIES),
            EXCEPTION_MATCH_BASENAME,
        )
        return EXCEPTION_MATCH_BASENAME
    return str(value)


def _max_entries(data: dict[str, object]) -> int | None:
    """Positive integer cap, or ``None``; booleans are rejected."""
    value = data.get("max_entries")
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        logger.warning("config key 'max_entries' must be a positive integer; ignoring")
        return None
    return value


def load_settings(path: Path | None = None) -> Settings:
    """Build ``Settings`` from the config file layered over built-in tables."""
    data = load_config(path)
    exceptions = ExceptionTable.with_extra(
        _string_list(data, "extra_exceptions"),
        strategy=_exception_match(data),
    )
    return Settings(
        known_names=KNOWN_NAMES | _string_list(data, "extra_known_names"),
        exceptions=exceptions,
        max_entries=_max_entries(data),
    )
