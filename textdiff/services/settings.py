"""
Application settings management.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field, asdict
from enum import Enum, auto
from pathlib import Path
from typing import Any, Optional

from textdiff.core.models import CompareOptions, DiffMode


class DiffStyle(Enum):
    """Default layout of command line output."""
    UNIFIED = auto()        # One prefixed record per line
    SIDE_BY_SIDE = auto()   # Two aligned columns


@dataclass
class ComparisonSettings:
    """Settings for text comparison."""
    ignore_whitespace: bool = False
    ignore_case: bool = False
    diff_mode: DiffMode = DiffMode.LINES
    diff_style: DiffStyle = DiffStyle.UNIFIED
    show_line_numbers: bool = True

    # Tokens per side above which comparisons are refused
    max_tokens: int = 20000

    def to_compare_options(self) -> CompareOptions:
        return CompareOptions(
            ignore_case=self.ignore_case,
            ignore_whitespace=self.ignore_whitespace,
        )


@dataclass
class ApplicationSettings:
    """Main application settings container."""
    comparison: ComparisonSettings = field(default_factory=ComparisonSettings)


class SettingsManager:
    """Manager for loading/saving application settings."""

    def __init__(self, settings_path: Optional[Path] = None):
        self.settings_path = Path(settings_path) if settings_path else self._get_default_path()
        self._settings: Optional[ApplicationSettings] = None

    @staticmethod
    def _get_default_path() -> Path:
        """Get the default settings file path."""
        if os.name == 'nt':
            # Windows
            app_data = os.environ.get('APPDATA', os.path.expanduser('~'))
            return Path(app_data) / 'TextDiff' / 'settings.json'
        else:
            # Linux/Mac
            config_home = os.environ.get('XDG_CONFIG_HOME',
                                         os.path.expanduser('~/.config'))
            return Path(config_home) / 'textdiff' / 'settings.json'

    @property
    def settings(self) -> ApplicationSettings:
        """Get current settings, loading from disk if needed."""
        if self._settings is None:
            self._settings = self.load()
        return self._settings

    def load(self) -> ApplicationSettings:
        """Load settings from disk."""
        if not self.settings_path.exists():
            return ApplicationSettings()

        try:
            with open(self.settings_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            return self._from_dict(data)
        except (OSError, ValueError, AttributeError) as e:
            logging.warning(f"SettingsManager - Could not load {self.settings_path}, using defaults: {e}")
            return ApplicationSettings()

    def save(self, settings: Optional[ApplicationSettings] = None) -> bool:
        """Save settings to disk."""
        settings = settings or self._settings
        if settings is None:
            return False

        try:
            self.settings_path.parent.mkdir(parents=True, exist_ok=True)

            with open(self.settings_path, 'w', encoding='utf-8') as f:
                json.dump(self._to_dict(settings), f, indent=2)

        except OSError as e:
            logging.error(f"SettingsManager - Failed to save {self.settings_path}: {e}")
            return False

        self._settings = settings
        return True

    def reset(self) -> ApplicationSettings:
        """Reset to default settings."""
        self._settings = ApplicationSettings()
        self.save()
        return self._settings

    def _to_dict(self, settings: ApplicationSettings) -> dict:
        """Convert settings to dictionary for JSON serialization."""
        def convert(obj: Any) -> Any:
            if isinstance(obj, Enum):
                return obj.name
            elif isinstance(obj, list):
                return [convert(item) for item in obj]
            elif isinstance(obj, dict):
                return {k: convert(v) for k, v in obj.items()}
            else:
                return obj

        return convert(asdict(settings))

    def _from_dict(self, data: dict) -> ApplicationSettings:
        """Convert dictionary back to settings objects."""
        def get_enum(enum_class: type, value: Any, default: Enum) -> Enum:
            if isinstance(value, str):
                try:
                    return enum_class[value]
                except KeyError:
                    return default
            return default

        def get_bool(value: Any, default: bool) -> bool:
            return value if isinstance(value, bool) else default

        def get_count(value: Any, default: int) -> int:
            # Non-negative ints only; bool is an int subclass
            if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
                return value
            return default

        defaults = ComparisonSettings()
        comparison_data = data.get('comparison', {})

        comparison = ComparisonSettings(
            ignore_whitespace=get_bool(comparison_data.get('ignore_whitespace'), defaults.ignore_whitespace),
            ignore_case=get_bool(comparison_data.get('ignore_case'), defaults.ignore_case),
            diff_mode=get_enum(DiffMode, comparison_data.get('diff_mode'), defaults.diff_mode),
            diff_style=get_enum(DiffStyle, comparison_data.get('diff_style'), defaults.diff_style),
            show_line_numbers=get_bool(comparison_data.get('show_line_numbers'), defaults.show_line_numbers),
            max_tokens=get_count(comparison_data.get('max_tokens'), defaults.max_tokens),
        )

        return ApplicationSettings(comparison=comparison)
