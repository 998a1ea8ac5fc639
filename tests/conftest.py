"""Pytest configuration.

The suite builds PySide6 widgets in most modules. A single ``QApplication`` is
created for the whole session as early as possible (before collection imports
any widget module) and shut down cleanly at the end. Tests run on the
offscreen platform unless the caller picked one.
"""

from __future__ import annotations

import os
from typing import Any

import pytest

_APP: Any | None = None


def pytest_configure(config) -> None:  # noqa: ARG001
    """Ensure a QApplication exists before collecting/running tests."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

    from PySide6.QtWidgets import QApplication

    global _APP

    app = QApplication.instance()
    # Keep a strong ref so it isn't GC'd mid-session.
    _APP = app if app is not None else QApplication([])


def pytest_sessionfinish(session, exitstatus) -> None:  # noqa: ARG001
    """Attempt a clean Qt shutdown to avoid lingering threads at interpreter exit."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        return
    app.quit()
    app.processEvents()


@pytest.fixture(autouse=True)
def _isolated_logging_env(monkeypatch):
    monkeypatch.delenv("BOOKSTORE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("BOOKSTORE_LOG_CATS", raising=False)


@pytest.fixture
def settings(tmp_path):
    from bookstore.settings_manager import SettingsManager

    return SettingsManager(str(tmp_path / "settings.json"))
