"""
Test cases for YAML configuration loading.
"""
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

sys.path.insert(0, str(Path(__file__).parent.parent))

from flashcard_gestures.config import CONFIG_ENV_VAR, ConfigError, load_config


class TestLoadConfig(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)

    def write(self, text: str) -> str:
        path = Path(self.tmpdir.name) / "config.yaml"
        path.write_text(text)
        return str(path)

    def test_default_file(self):
        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop(CONFIG_ENV_VAR, None)
            cfg = load_config()
        self.assertEqual(cfg.hold.hold_duration_ms, 3000)
        self.assertEqual(cfg.hold.tick_interval_ms, 50)
        self.assertEqual(cfg.mediapipe.max_num_hands, 1)

    def test_partial_file_uses_defaults(self):
        cfg = load_config(self.write("hold:\n  hold_duration_ms: 1500\n"))
        self.assertEqual(cfg.hold.hold_duration_ms, 1500)
        self.assertEqual(cfg.hold.tick_interval_ms, 50)
        self.assertEqual(cfg.camera.width, 640)
        self.assertEqual(cfg.logging.level, "INFO")

    def test_empty_file(self):
        cfg = load_config(self.write(""))
        self.assertEqual(cfg.hold.hold_duration_ms, 3000)

    def test_env_var_override(self):
        path = self.write("hold:\n  tick_interval_ms: 20\nlogging:\n  level: debug\n")
        with mock.patch.dict(os.environ, {CONFIG_ENV_VAR: path}):
            cfg = load_config()
        self.assertEqual(cfg.hold.tick_interval_ms, 20)
        self.assertEqual(cfg.logging.level, "DEBUG")

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_config(str(Path(self.tmpdir.name) / "nope.yaml"))

    def test_non_positive_hold(self):
        for text in ("hold:\n  hold_duration_ms: 0\n",
                     "hold:\n  tick_interval_ms: -5\n",
                     "hold:\n  hold_duration_ms: 2.5\n"):
            with self.assertRaises(ConfigError):
                load_config(self.write(text))

    def test_unknown_key(self):
        with self.assertRaises(ConfigError):
            load_config(self.write("camera:\n  zoom: 2\n"))

    def test_section_not_a_mapping(self):
        for text in ("hold: 3000\n", "logging: debug\n", "display: [1, 2]\n", "camera: 0\n"):
            with self.assertRaises(ConfigError, msg=text):
                load_config(self.write(text))

    def test_document_not_a_mapping(self):
        for text in ("3000\n", "- hold\n- display\n"):
            with self.assertRaises(ConfigError, msg=text):
                load_config(self.write(text))

    def test_wrong_value_types(self):
        for text in ("display:\n  show_landmarks: \"no\"\n",
                     "display:\n  window_name: 12\n",
                     "camera:\n  width: wide\n",
                     "camera:\n  fps: true\n",
                     "mediapipe:\n  min_detection_confidence: high\n"):
            with self.assertRaises(ConfigError, msg=text):
                load_config(self.write(text))

    def test_valid_value_types(self):
        cfg = load_config(self.write(
            "display:\n  show_landmarks: false\n"
            "mediapipe:\n  min_tracking_confidence: 1\n"))
        self.assertIs(cfg.display.show_landmarks, False)
        self.assertEqual(cfg.mediapipe.min_tracking_confidence, 1.0)
        self.assertIsInstance(cfg.mediapipe.min_tracking_confidence, float)


if __name__ == '__main__':
    unittest.main()
