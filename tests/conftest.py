"""Shared test fixtures for textdiff."""

from __future__ import annotations

from pathlib import Path

import pytest
from PyQt6.QtCore import QCoreApplication

from textdiff.services.settings import SettingsManager


@pytest.fixture(scope="session")
def qapp() -> QCoreApplication:
    """A Qt core application for worker tests (no display needed)."""
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    return app


@pytest.fixture
def settings_manager(tmp_path: Path) -> SettingsManager:
    return SettingsManager(tmp_path / "settings.json")


@pytest.fixture
def write_text(tmp_path: Path):
    """Write a text file under tmp_path and return its path."""

    def _write(name: str, content: str, encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_bytes(content.encode(encoding))
        return path

    return _write
