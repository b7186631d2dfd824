"""Tests for configuration loading and validation."""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
import unittest
from unittest.mock import patch

from modelkit.config import DEFAULT_CONFIG, apply_config, ensure_config_dir, load_config
from modelkit.events import emitter as emitter_module


class ConfigTests(unittest.TestCase):
    """Validate config merge and fallback behavior."""

    def test_missing_config_uses_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "config.toml"
            config = load_config(config_path=config_path)
            self.assertEqual(config, DEFAULT_CONFIG)
            self.assertEqual(config["logging"]["level"], "INFO")
            self.assertFalse(config["events"]["debug_dispatch"])

    def test_partial_config_overrides_selected_values(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "config.toml"
            config_path.write_text(
                """
[logging]
level = "debug"

[events]
debug_dispatch = true
                """.strip(),
                encoding="utf-8",
            )
            config = load_config(config_path=config_path)
            self.assertEqual(config["logging"]["level"], "DEBUG")
            self.assertTrue(config["events"]["debug_dispatch"])
            self.assertEqual(
                config["logging"]["structured"],
                DEFAULT_CONFIG["logging"]["structured"],
            )

    def test_invalid_values_fallback_to_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "config.toml"
            config_path.write_text(
                """
[logging]
level = "LOUD"
log_file_path = ""
                """.strip(),
                encoding="utf-8",
            )
            with self.assertLogs("modelkit.config", level="WARNING"):
                config = load_config(config_path=config_path)
            self.assertEqual(config, DEFAULT_CONFIG)

    def test_unparseable_toml_falls_back_to_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "config.toml"
            config_path.write_text("[logging\nlevel = ", encoding="utf-8")
            with self.assertLogs("modelkit.config", level="WARNING") as logs:
                config = load_config(config_path=config_path)
            self.assertEqual(config, DEFAULT_CONFIG)
            self.assertTrue(any("Failed to parse config" in line for line in logs.output))

    def test_ensure_config_dir_creates_directory(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            target = Path(temp_dir) / "nested" / "modelkit"
            self.assertEqual(ensure_config_dir(target), target)
            self.assertTrue(target.is_dir())


class ApplyConfigTests(unittest.TestCase):
    """Validate that a loaded config drives logging and dispatch diagnostics."""

    def setUp(self) -> None:
        root = logging.getLogger()
        self._original_level = root.level
        self._original_handlers = list(root.handlers)

    def tearDown(self) -> None:
        root = logging.getLogger()
        root.setLevel(self._original_level)
        root.handlers.clear()
        root.handlers.extend(self._original_handlers)
        emitter_module.set_dispatch_logging(False)

    def test_apply_config_configures_logging_and_dispatch(self) -> None:
        config = load_config(config_path=Path("/nonexistent/modelkit.toml"))
        config["events"]["debug_dispatch"] = True
        with patch("modelkit.config.configure_logging") as configure_mock:
            apply_config(config)
        configure_mock.assert_called_once_with(config["logging"])
        self.assertTrue(emitter_module._dispatch_logging)

    def test_dispatch_logging_emits_debug_records(self) -> None:
        emitter_module.set_dispatch_logging(True)
        emitter = emitter_module.Emitter()
        emitter.on("a", lambda: None)
        with self.assertLogs("modelkit.events.emitter", level="DEBUG") as logs:
            emitter.trigger("a")
        self.assertTrue(any("event.dispatch" in line for line in logs.output))


if __name__ == "__main__":
    unittest.main()
