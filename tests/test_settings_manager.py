from __future__ import annotations

import json
from pathlib import Path

from PySide6.QtCore import QStandardPaths

from bookstore.settings_manager import SettingsManager, default_settings_path


def test_defaults_without_file(tmp_path: Path) -> None:
    sm = SettingsManager(str(tmp_path / "settings.json"))

    assert sm.theme == "light"
    assert sm.font_size == 10
    assert sm.base_url == "http://example.org/book/"
    assert sm.start_fragment == ""
    assert sm.window_size() == (640, 360)
    assert not (tmp_path / "settings.json").exists()


def test_set_persists_immediately(tmp_path: Path) -> None:
    settings_path = tmp_path / "nested" / "settings.json"
    sm = SettingsManager(str(settings_path))

    sm.set("start_fragment", "livedemo")

    with open(settings_path, encoding="utf-8") as f:
        assert json.load(f) == {"start_fragment": "livedemo"}
    assert SettingsManager(str(settings_path)).start_fragment == "livedemo"


def test_corrupt_file_falls_back_to_defaults(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.json"
    settings_path.write_text("{not json", encoding="utf-8")

    sm = SettingsManager(str(settings_path))

    assert sm.data == {}
    assert sm.theme == "light"


def test_non_object_file_is_ignored(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.json"
    settings_path.write_text("[1, 2]", encoding="utf-8")

    assert SettingsManager(str(settings_path)).data == {}


def test_invalid_values_fall_back(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.json"
    settings_path.write_text(
        json.dumps({"theme": "sepia", "font_size": "big", "base_url": "", "window_width": None}),
        encoding="utf-8",
    )
    sm = SettingsManager(str(settings_path))

    assert sm.theme == "light"
    assert sm.font_size == 10
    assert sm.base_url == "http://example.org/book/"
    assert sm.window_size() == (640, 360)


def test_default_settings_path_uses_app_config_location() -> None:
    app_cfg = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppConfigLocation)
    path = default_settings_path()
    if app_cfg:
        assert path == (Path(app_cfg) / "bookstore" / "settings.json").as_posix()
    else:
        assert path.endswith("bookstore/settings.json")
