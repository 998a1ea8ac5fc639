from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from PySide6.QtCore import QStandardPaths

from .logger import get_logger

_logger = get_logger("settings")


def default_settings_path() -> str:
    app_cfg = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppConfigLocation)
    if app_cfg:
        return (Path(app_cfg) / "bookstore" / "settings.json").as_posix()
    return (Path(__file__).resolve().parent / "settings.json").as_posix()


class SettingsManager:
    def __init__(self, settings_path: str):
        self.settings_path = settings_path
        self._settings: dict[str, Any] = {}
        self.load()

    DEFAULTS: dict[str, Any] = {
        "theme": "light",
        "font_size": 10,
        "base_url": "http://example.org/book/",
        "start_fragment": "",
        "window_width": 640,
        "window_height": 360,
    }

    def load(self) -> None:
        try:
            if os.path.exists(self.settings_path):
                with open(self.settings_path, encoding="utf-8") as f:
                    data = json.load(f)
                    if isinstance(data, dict):
                        self._settings = data
                        _logger.debug("settings loaded: %s", self.settings_path)
                        return
                    _logger.warning("settings ignored, not an object: %s", self.settings_path)
        except (OSError, ValueError) as e:
            _logger.warning("settings load failed: %s", e)
        self._settings = {}

    def save(self) -> None:
        try:
            os.makedirs(os.path.dirname(self.settings_path) or ".", exist_ok=True)
            with open(self.settings_path, "w", encoding="utf-8") as f:
                json.dump(self._settings, f, ensure_ascii=False, indent=2)
            _logger.debug("settings saved: %s", self.settings_path)
        except OSError as e:
            _logger.error("settings save failed: %s", e)

    def get(self, key: str, default: Any = None) -> Any:
        if key in self._settings:
            return self._settings[key]
        if default is not None:
            return default
        return self.DEFAULTS.get(key)

    def has(self, key: str) -> bool:
        return key in self._settings

    def set(self, key: str, value: Any) -> None:
        self._settings[key] = value
        self.save()

    @property
    def data(self) -> dict[str, Any]:
        return self._settings

    @property
    def theme(self) -> str:
        val = self.get("theme")
        return val if val in ("dark", "light") else self.DEFAULTS["theme"]

    @property
    def font_size(self) -> int:
        try:
            return int(self.get("font_size"))
        except (TypeError, ValueError):
            _logger.warning("saved font_size invalid: %r", self.get("font_size"))
            return int(self.DEFAULTS["font_size"])

    @property
    def base_url(self) -> str:
        val = self.get("base_url")
        return val if isinstance(val, str) and val else self.DEFAULTS["base_url"]

    @property
    def start_fragment(self) -> str:
        val = self.get("start_fragment")
        return val if isinstance(val, str) else ""

    def window_size(self) -> tuple[int, int]:
        try:
            return int(self.get("window_width")), int(self.get("window_height"))
        except (TypeError, ValueError):
            _logger.warning("saved window size invalid, using defaults")
            return int(self.DEFAULTS["window_width"]), int(self.DEFAULTS["window_height"])
