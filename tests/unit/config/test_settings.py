"""Config-file loading into ``Settings`` with defensive fallbacks."""

from __future__ import annotations

import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from gitree import config
from gitree.tables import KNOWN_NAMES, NON_BARE_EXCEPTIONS, PREFIX_EXCEPTIONS


def write_config(root: Path, data: object) -> Path:
    path = root / "config.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class ConfigPathTests(unittest.TestCase):
    def test_env_var_overrides_default_location(self) -> None:
        with mock.patch.dict(os.environ, {config.CONFIG_ENV_VAR: "/tmp/custom-gitree.json"}):
            self.assertEqual(config.config_path(), Path("/tmp/custom-gitree.json"))

    def test_default_location_is_platform_config_dir(self) -> None:
        with mock.patch.dict(os.environ, {config.CONFIG_ENV_VAR: ""}):
            self.assertEqual(config.config_path(), config.CONFIG_PATH)
        self.assertEqual(config.DEFAULT_CONFIG_PATH.name, "config.json")
        self.assertIn("gitree", str(config.DEFAULT_CONFIG_PATH))


class LoadSettingsTests(unittest.TestCase):
    def test_missing_file_yields_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            settings = config.load_settings(Path(tmp) / "absent.json")

        self.assertEqual(settings.known_names, KNOWN_NAMES)
        self.assertEqual(settings.exceptions.entries, NON_BARE_EXCEPTIONS)
        self.assertEqual(settings.exceptions.strategy, "basename")
        self.assertIsNone(settings.max_entries)

    def test_extensions_and_limits_are_applied(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = write_config(
                Path(tmp),
                {
                    "extra_known_names": ["git-daemon-export-ok"],
                    "extra_exceptions": ["vendor"],
                    "max_entries": 4096,
                },
            )
            settings = config.load_settings(path)

        self.assertIn("git-daemon-export-ok", settings.known_names)
        self.assertTrue(KNOWN_NAMES < settings.known_names)
        self.assertEqual(settings.exceptions.entries, NON_BARE_EXCEPTIONS | {"vendor"})
        self.assertEqual(settings.max_entries, 4096)

    def test_prefix_strategy_starts_from_legacy_paths(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = write_config(Path(tmp), {"exception_match": "prefix", "extra_exceptions": ["/srv/mirror"]})
            settings = config.load_settings(path)

        self.assertEqual(settings.exceptions.strategy, "prefix")
        self.assertEqual(settings.exceptions.entries, PREFIX_EXCEPTIONS | {"/srv/mirror"})

    def test_malformed_json_logs_and_falls_back(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text("{not json", encoding="utf-8")
            with self.assertLogs("gitree.config", level="WARNING") as logs:
                settings = config.load_settings(path)

        self.assertEqual(settings, config.Settings())
        self.assertIn("malformed", logs.output[0])

    def test_non_object_top_level_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = write_config(Path(tmp), ["manifests"])
            with self.assertLogs("gitree.config", level="WARNING"):
                self.assertEqual(config.load_config(path), {})

    def test_invalid_values_fall_back_individually(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = write_config(
                Path(tmp),
                {
                    "extra_known_names": "HEAD2",
                    "extra_exceptions": ["vendor"],
                    "exception_match": "substring",
                    "max_entries": True,
                },
            )
            with self.assertLogs("gitree.config", level="WARNING") as logs:
                settings = config.load_settings(path)

        self.assertEqual(settings.known_names, KNOWN_NAMES)
        self.assertEqual(settings.exceptions.strategy, "basename")
        self.assertIn("vendor", settings.exceptions.entries)
        self.assertIsNone(settings.max_entries)
        self.assertEqual(len(logs.output), 3)

    def test_zero_cap_is_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = write_config(Path(tmp), {"max_entries": 0})
            with self.assertLogs("gitree.config", level="WARNING"):
                settings = config.load_settings(path)

        self.assertIsNone(settings.max_entries)


if __name__ == "__main__":
    unittest.main()
