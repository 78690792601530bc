"""
Settings manager for the palette translation engine
Handles saving and loading user preferences
"""

import json
import os
from pathlib import Path
from typing import Any, Optional

from .constants import (
    DEFAULT_GREYSCALE_B,
    DEFAULT_GREYSCALE_G,
    DEFAULT_GREYSCALE_R,
)


class SettingsManager:
    """Manages application settings with persistence"""

    def __init__(self, app_name="palette_translation"):
        self.app_name = app_name
        self.settings_file = self._get_settings_path()
        self.settings = self._load_settings()

    def _get_settings_path(self) -> Path:
        """Get the appropriate settings directory for the platform"""
        if os.name == "nt":  # Windows
            base = Path(os.environ.get("APPDATA", os.path.expanduser("~")))
            settings_dir = base / self.app_name
        else:  # Linux/Mac
            base = Path(os.path.expanduser("~"))
            settings_dir = base / f".{self.app_name}"

        settings_dir.mkdir(parents=True, exist_ok=True)
        return settings_dir / "settings.json"

    def _load_settings(self) -> dict[str, Any]:
        """Load settings from file"""
        if self.settings_file.exists():
            try:
                with open(self.settings_file) as f:
                    return json.load(f)
            except (OSError, json.JSONDecodeError):
                # Corrupted file, start fresh
                return self._get_default_settings()
        return self._get_default_settings()

    def _get_default_settings(self) -> dict[str, Any]:
        """Get default settings"""
        return {
            "greyscale": {
                "r": DEFAULT_GREYSCALE_R,
                "g": DEFAULT_GREYSCALE_G,
                "b": DEFAULT_GREYSCALE_B,
            },
            "last_palette_file": "",
            "recent_definitions": [],
            "preferences": {
                "max_recent_definitions": 10,
            },
        }

    def save_settings(self):
        """Save current settings to file"""
        try:
            with open(self.settings_file, "w") as f:
                json.dump(self.settings, f, indent=2)
        except OSError:
            # Settings are a convenience; an unwritable file is not fatal
            pass

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value"""
        keys = key.split(".")
        value = self.settings
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def set(self, key: str, value: Any):
        """Set a setting value"""
        keys = key.split(".")
        target = self.settings
        for k in keys[:-1]:
            if k not in target:
                target[k] = {}
            target = target[k]
        target[keys[-1]] = value
        self.save_settings()

    def get_greyscale_weights(self) -> tuple[float, float, float]:
        """Get the (r, g, b) weights used by blend ranges"""
        return (
            float(self.get("greyscale.r", DEFAULT_GREYSCALE_R)),
            float(self.get("greyscale.g", DEFAULT_GREYSCALE_G)),
            float(self.get("greyscale.b", DEFAULT_GREYSCALE_B)),
        )

    def set_greyscale_weights(self, r: float, g: float, b: float):
        """Update the blend range greyscale weights"""
        self.set("greyscale", {"r": r, "g": g, "b": b})

    def add_recent_definition(self, definition: str):
        """Add a translation definition to the recent list"""
        definition = str(definition)
        recent_list = self.settings.setdefault("recent_definitions", [])

        if definition in recent_list:
            recent_list.remove(definition)
        recent_list.insert(0, definition)

        max_recent = self.get("preferences.max_recent_definitions", 10)
        self.settings["recent_definitions"] = recent_list[:max_recent]

        self.save_settings()

    def get_recent_definitions(self) -> list:
        """Get recently used translation definitions"""
        return self.settings.get("recent_definitions", [])

    def update_last_palette(self, palette_file: Optional[str]):
        """Remember the last palette file used"""
        if palette_file is not None:
            self.set("last_palette_file", str(palette_file))

    def reset_settings(self):
        """Reset all settings to defaults"""
        self.settings = self._get_default_settings()
        self.save_settings()


# Singleton instance
_settings_instance = None


def get_settings() -> SettingsManager:
    """Get the singleton settings instance"""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = SettingsManager()
    return _settings_instance
