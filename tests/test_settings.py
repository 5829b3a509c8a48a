"""Tests for settings persistence."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from textdiff.core.models import CompareOptions, DiffMode
from textdiff.services.settings import (
    ApplicationSettings,
    ComparisonSettings,
    DiffStyle,
    SettingsManager,
)


def test_missing_file_gives_defaults(settings_manager: SettingsManager) -> None:
    settings = settings_manager.settings
    assert settings.comparison == ComparisonSettings()
    assert settings.comparison.diff_mode == DiffMode.LINES


def test_round_trip(settings_manager: SettingsManager) -> None:
    settings = ApplicationSettings(
        comparison=ComparisonSettings(
            ignore_case=True,
            diff_mode=DiffMode.WORDS,
            diff_style=DiffStyle.SIDE_BY_SIDE,
            max_tokens=500,
        ),
    )
    assert settings_manager.save(settings)

    data = json.loads(settings_manager.settings_path.read_text(encoding="utf-8"))
    assert data["comparison"]["diff_mode"] == "WORDS"

    loaded = SettingsManager(settings_manager.settings_path).load()
    assert loaded == settings


def test_corrupt_file_falls_back(settings_manager: SettingsManager) -> None:
    settings_manager.settings_path.write_text("{not json", encoding="utf-8")
    assert settings_manager.load() == ApplicationSettings()


def test_unknown_enum_uses_default(settings_manager: SettingsManager) -> None:
    settings_manager.settings_path.write_text(
        json.dumps({"comparison": {"diff_mode": "CHARS", "ignore_case": True}}),
        encoding="utf-8",
    )
    comparison = settings_manager.load().comparison
    assert comparison.diff_mode == DiffMode.LINES
    assert comparison.ignore_case


def test_to_compare_options() -> None:
    comparison = ComparisonSettings(ignore_case=True, ignore_whitespace=True)
    assert comparison.to_compare_options() == CompareOptions(True, True)


def test_reset_writes_defaults(settings_manager: SettingsManager) -> None:
    settings_manager.save(ApplicationSettings(ComparisonSettings(ignore_case=True)))
    assert settings_manager.reset() == ApplicationSettings()
    assert SettingsManager(settings_manager.settings_path).load() == ApplicationSettings()


def test_wrongly_typed_values_use_defaults(settings_manager: SettingsManager) -> None:
    settings_manager.settings_path.write_text(
        json.dumps({"comparison": {
            "max_tokens": "500",
            "ignore_case": "yes",
            "show_line_numbers": 0,
            "diff_mode": "WORDS",
        }}),
        encoding="utf-8",
    )
    comparison = settings_manager.load().comparison
    assert comparison.max_tokens == 20000
    assert comparison.ignore_case is False
    assert comparison.show_line_numbers is True
    assert comparison.diff_mode == DiffMode.WORDS


@pytest.mark.parametrize("value", [-1, True, 2.5, None])
def test_invalid_max_tokens_use_default(settings_manager: SettingsManager, value) -> None:
    settings_manager.settings_path.write_text(
        json.dumps({"comparison": {"max_tokens": value}}), encoding="utf-8"
    )
    assert settings_manager.load().comparison.max_tokens == 20000


def test_default_path_honours_xdg(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr("os.name", "posix")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert SettingsManager().settings_path == tmp_path / "textdiff" / "settings.json"
