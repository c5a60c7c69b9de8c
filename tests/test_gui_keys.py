"""Tests for the keyboard mapping and settings helpers of the GUI."""

import pytest

pytest.importorskip("tkinter")

from calculator import Calculator  # noqa: E402
from gui import key_to_label, load_settings, save_settings  # noqa: E402


class TestKeyToLabel:
    @pytest.mark.parametrize("char,keysym,expected", [
        ("7", "7", "7"),
        ("*", "asterisk", "X"),
        ("/", "slash", "/"),
        ("-", "minus", "-"),
        (".", "period", "."),
        ("%", "percent", "%"),
        ("=", "equal", "Answer"),
        ("\r", "Return", "Answer"),
        ("", "KP_Enter", "Answer"),
        ("\x08", "BackSpace", "Delete"),
        ("\x1b", "Escape", "C"),
        ("a", "a", None),
        ("", "Shift_L", None),
    ])
    def test_mapping(self, char, keysym, expected):
        assert key_to_label(char, keysym) == expected

    def test_keys_drive_calculator(self):
        calc = Calculator()
        for char, keysym in [("9", "9"), ("*", "asterisk"), ("3", "3"), ("\r", "Return")]:
            calc.press(key_to_label(char, keysym))
        assert calc.committed_result == "27"


class TestSettings:
    def test_missing_file(self, tmp_path):
        assert load_settings(str(tmp_path / "nope.json")) == {}

    def test_roundtrip_merges(self, tmp_path):
        path = str(tmp_path / "settings.json")
        save_settings({"dark_mode": True}, path)
        save_settings({"other": 1}, path)
        assert load_settings(path) == {"dark_mode": True, "other": 1}

    def test_unwritable_location_is_reported(self, tmp_path, caplog):
        path = str(tmp_path / "missing-dir" / "settings.json")
        with caplog.at_level("WARNING", logger="gui"):
            assert save_settings({"dark_mode": True}, path) is False
        assert "Could not save settings" in caplog.text
        assert load_settings(path) == {}
