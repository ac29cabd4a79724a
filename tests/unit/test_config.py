import json
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))

from itermcolors_core.config import AppConfig, config_path, load_config, save_config


class ConfigTests(unittest.TestCase):
    def test_load_default_when_missing(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "missing.json"
            cfg = load_config(path)
            self.assertIsInstance(cfg, AppConfig)
            self.assertEqual(cfg.input.default_path, "iceberg.itermcolors")
            self.assertTrue(cfg.output.heading)
            self.assertIsNone(cfg.output.path)

    def test_save_and_reload(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "nested" / "config.json"
            cfg = load_config(path)
            cfg.input.default_path = "Dracula.itermcolors"
            cfg.output.heading = False
            cfg.preview.swatch = 32
            save_config(cfg, path)
            reloaded = load_config(path)
            self.assertEqual(reloaded.input.default_path, "Dracula.itermcolors")
            self.assertFalse(reloaded.output.heading)
            self.assertEqual(reloaded.preview.swatch, 32)

    def test_unknown_keys_ignored_and_ranges_normalized(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            raw = {
                "preview": {"swatch": 4000, "gap": -3, "bogus": 1},
                "logging": {"keep_log_files": 0},
                "device": {"auto_connect": True},
            }
            path.write_text(json.dumps(raw), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.preview.swatch, 256)
            self.assertEqual(cfg.preview.gap, 0)
            self.assertFalse(hasattr(cfg.preview, "bogus"))
            self.assertEqual(cfg.logging.keep_log_files, 2)

    def test_corrupt_file_falls_back_to_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text("{not json", encoding="utf-8")
            self.assertEqual(load_config(path), AppConfig())

    def test_wrongly_typed_values_fall_back_to_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            raw = {
                "config_version": "two",
                "input": {"default_path": None},
                "output": {"heading": "yes", "path": None},
                "preview": {"swatch": "big", "gap": True, "path": 7},
                "logging": {"keep_log_files": [3], "console": 1},
            }
            path.write_text(json.dumps(raw), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg, AppConfig())

    def test_blank_default_path_uses_default(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text(json.dumps({"input": {"default_path": "  "}}), encoding="utf-8")
            self.assertEqual(load_config(path).input.default_path, "iceberg.itermcolors")

    def test_output_path_accepts_string(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text(json.dumps({"output": {"path": "kitty-colors.conf"}}), encoding="utf-8")
            self.assertEqual(load_config(path).output.path, "kitty-colors.conf")

    def test_home_override(self):
        with tempfile.TemporaryDirectory() as tmp:
            with patch.dict(os.environ, {"ITERMCOLORS_HOME": tmp}):
                self.assertEqual(config_path(), Path(tmp) / "config.json")


if __name__ == "__main__":
    unittest.main()
