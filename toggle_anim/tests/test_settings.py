# test_settings.py
import tempfile
import unittest
from pathlib import Path

from toggle_anim.curves import SpeedCurve
from toggle_anim.errors import InvalidArgument
from toggle_anim.settings import AnimCfg, PresetCfg, load_settings, parse_settings

_REPO_ROOT = Path(__file__).resolve().parents[2]


class SettingsTestCase(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)

    def write(self, text: str) -> str:
        p = Path(self._tmp.name) / "animations.yaml"
        p.write_text(text, encoding="utf-8")
        return str(p)


class TestLoadSettings(SettingsTestCase):
    def test_missing_file_uses_defaults(self):
        missing = str(Path(self._tmp.name) / "nope.yaml")
        with self.assertLogs("toggle_anim.settings", level="WARNING"):
            cfg = load_settings(missing)
        self.assertEqual(cfg, AnimCfg())
        self.assertEqual(cfg.default, PresetCfg(250, SpeedCurve.LINEAR))

    def test_empty_file(self):
        cfg = load_settings(self.write(""))
        self.assertEqual(cfg.default.duration_ms, 250)
        self.assertEqual(cfg.presets, {})

    def test_presets_inherit_default(self):
        cfg = load_settings(self.write(
            "default:\n"
            "  duration_ms: 400\n"
            "  curve: ease_in_out\n"
            "presets:\n"
            "  fade:\n"
            "    duration_ms: 100\n"
            "    curve: EASE-OUT\n"
            "  slow:\n"
            "    duration_ms: 2000\n"
            "  plain:\n"
        ))
        self.assertEqual(cfg.default, PresetCfg(400, SpeedCurve.EASE_IN_OUT))
        self.assertEqual(cfg.preset("fade"), PresetCfg(100, SpeedCurve.EASE_OUT))
        self.assertEqual(cfg.preset("slow"), PresetCfg(2000, SpeedCurve.EASE_IN_OUT))
        self.assertEqual(cfg.preset("plain"), cfg.default)
        self.assertIs(cfg.preset("unknown"), cfg.default)

    def test_shipped_config(self):
        cfg = load_settings(str(_REPO_ROOT / "config" / "animations.yaml"))
        self.assertEqual(cfg.preset("fade"), PresetCfg(200, SpeedCurve.EASE_OUT))
        self.assertEqual(cfg.preset("hover"), PresetCfg(120, SpeedCurve.LINEAR))
        self.assertEqual(cfg.preset("press"), PresetCfg(250, SpeedCurve.EASE_IN))


class TestBadSettings(SettingsTestCase):
    def test_negative_duration(self):
        with self.assertRaises(InvalidArgument):
            load_settings(self.write("presets:\n  fade:\n    duration_ms: -5\n"))

    def test_unknown_curve(self):
        with self.assertRaises(InvalidArgument):
            load_settings(self.write("default:\n  curve: bounce\n"))

    def test_bad_duration(self):
        with self.assertRaises(InvalidArgument):
            parse_settings({"default": {"duration_ms": "soon"}})

    def test_fractional_duration_not_truncated(self):
        with self.assertRaises(InvalidArgument):
            load_settings(self.write("presets:\n  fade:\n    duration_ms: 1.5\n"))

    def test_non_mapping(self):
        with self.assertRaises(InvalidArgument):
            load_settings(self.write("- just\n- a list\n"))
        with self.assertRaises(InvalidArgument):
            parse_settings({"presets": ["fade"]})
        with self.assertRaises(InvalidArgument):
            parse_settings({"presets": {"fade": 200}})

    def test_malformed_yaml(self):
        with self.assertRaises(InvalidArgument):
            load_settings(self.write("default: {duration_ms: [\n"))


if __name__ == "__main__":
    unittest.main()
