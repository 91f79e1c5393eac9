"""
Integration tests for the langpref command line.
"""

import json

import pytest

from langpref.errors import LocalizationError
from langpref.localization import Language
from langpref.main import main, parse_args, parse_language


@pytest.fixture
def english_device(monkeypatch):
    """Make the environment report an English device."""
    for name in ("LANGUAGE", "LC_ALL", "LC_MESSAGES"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("LANG", "en_US.UTF-8")


class TestParseArgs:
    """Test argument parsing."""

    def test_show_is_default(self):
        """No command means show."""
        assert parse_args([]).command == "show"

    def test_set_takes_code(self):
        """set requires a code."""
        args = parse_args(["--debug", "set", "ar"])
        assert args.command == "set"
        assert args.code == "ar"
        assert args.debug


class TestCommands:
    """Test command execution end to end."""

    def test_show_adopts_device_language(self, english_device, settings_path, capsys):
        """show prints and stores the device language."""
        assert main(["--settings-file", str(settings_path), "show"]) == 0

        assert capsys.readouterr().out.strip() == "en\tEnglish\tltr"
        assert json.loads(settings_path.read_text(encoding="utf-8")) == {
            "UserPreferedAppLanguage": "en"
        }

    def test_set_then_show(self, english_device, settings_path, capsys):
        """A language set from the command line is shown afterwards."""
        assert main(["--settings-file", str(settings_path), "set", "ar"]) == 0
        assert main(["--settings-file", str(settings_path)]) == 0

        lines = capsys.readouterr().out.strip().splitlines()
        assert lines == ["ar\tArabic\trtl", "ar\tArabic\trtl"]

    def test_set_unknown_code(self, english_device, settings_path, capsys):
        """Unsupported codes are rejected without writing anything."""
        assert main(["--settings-file", str(settings_path), "set", "de"]) == 2

        assert "Unsupported language 'de'" in capsys.readouterr().err
        assert not settings_path.exists()

    def test_parse_language_rejects_unknown_code(self):
        """Unknown codes raise instead of falling back to English."""
        assert parse_language("ar") is Language.ARABIC

        with pytest.raises(LocalizationError) as exc_info:
            parse_language("de")

        assert exc_info.value.context["language_code"] == "de"

    def test_list_marks_active(self, english_device, settings_path, capsys):
        """list prints every language and marks the active one."""
        main(["--settings-file", str(settings_path), "set", "fr"])
        capsys.readouterr()

        assert main(["--settings-file", str(settings_path), "list"]) == 0

        assert capsys.readouterr().out.splitlines() == [
            "  en\tEnglish\tltr",
            "  ar\tArabic\trtl",
            "* fr\tFrench\tltr",
        ]

    def test_configuration_error_exit_code(self, english_device, settings_path, monkeypatch, capsys):
        """Invalid configuration exits with status 1."""
        monkeypatch.setenv("LANGPREF_TRANSITION_DURATION", "-3")

        assert main(["--settings-file", str(settings_path), "show"]) == 1
        assert "Error:" in capsys.readouterr().err
