import argparse
import os
import sys

from PySide6.QtWidgets import QApplication, QMainWindow, QVBoxLayout, QWidget

from bookstore.logger import get_logger, setup_logger
from bookstore.settings_manager import SettingsManager, default_settings_path
from bookstore.styles import apply_theme
from bookstore.views import (
    LIVE_DEMO_FRAGMENT,
    PROPERTIES_FRAGMENT,
    FragmentHelpView,
    LiveDemoView,
    PropertiesDemoView,
)

logger = get_logger("main")

HELP_STATE = "help"

# QGuiApplication/QApplication options followed by a separate value
_QT_VALUE_OPTIONS = frozenset(
    {
        "-platform",
        "-platformpluginpath",
        "-platformtheme",
        "-plugin",
        "-qwindowgeometry",
        "-qwindowicon",
        "-qwindowtitle",
        "-session",
        "-style",
        "-stylesheet",
        "-display",
        "-geometry",
        "-title",
        "-name",
    }
)


def _apply_cli_logging_options(argv: list[str]) -> list[str]:
    """Strip --log-level/--log-cats before Qt sees argv and mirror them into env vars.

    Returns the remaining arguments (program name first).
    """
    parser = argparse.ArgumentParser(description="Bookstore", add_help=False)
    parser.add_argument("--log-level", help="Set log level")
    parser.add_argument("--log-cats", help="Set log categories")
    args, remaining = parser.parse_known_args(argv[1:])
    if args.log_level:
        os.environ["BOOKSTORE_LOG_LEVEL"] = args.log_level
    if args.log_cats:
        os.environ["BOOKSTORE_LOG_CATS"] = args.log_cats
    # Re-read env overrides now that they may have changed
    setup_logger()
    return [argv[0], *remaining]


def fragment_from(url_or_fragment: str | None) -> str:
    """Extract the navigation fragment from a URL, ``#fragment`` or bare fragment."""
    if not url_or_fragment:
        return ""
    if "#" in url_or_fragment:
        return url_or_fragment.partition("#")[2]
    if "://" in url_or_fragment:
        return ""
    return url_or_fragment


def route_fragment(fragment: str) -> str:
    """Map a fragment to the view it selects. Matching is exact."""
    if fragment == LIVE_DEMO_FRAGMENT:
        return LIVE_DEMO_FRAGMENT
    if fragment == PROPERTIES_FRAGMENT:
        return PROPERTIES_FRAGMENT
    return HELP_STATE


class BookstoreWindow(QMainWindow):
    """One demo session: a window that renders exactly one view for its lifetime."""

    def __init__(self, settings_manager: SettingsManager | None = None):
        super().__init__()
        self.setWindowTitle("Bookstore")
        self._settings_manager = settings_manager or SettingsManager(default_settings_path())
        self.resize(*self._settings_manager.window_size())
        self._rendered_state: str | None = None
        self._view: QWidget | None = None

    @property
    def rendered_state(self) -> str | None:
        return self._rendered_state

    @property
    def view(self) -> QWidget | None:
        return self._view

    def init(self, fragment: str) -> QWidget:
        if self._rendered_state is not None:
            raise RuntimeError(f"view already rendered as {self._rendered_state!r}")

        state = route_fragment(fragment)
        if state == LIVE_DEMO_FRAGMENT:
            view: QWidget = LiveDemoView()
        elif state == PROPERTIES_FRAGMENT:
            view = PropertiesDemoView()
        else:
            view = FragmentHelpView(fragment, self._settings_manager.base_url)

        main = QWidget()
        main_layout = QVBoxLayout(main)
        main_layout.setContentsMargins(18, 18, 18, 18)
        main_layout.setSpacing(12)
        main_layout.addWidget(view)
        self.setCentralWidget(main)

        self._view = view
        self._rendered_state = state
        logger.debug("fragment %r rendered as %s", fragment, state)
        return view


def _split_qt_args(args: list[str]) -> tuple[list[str], list[str]]:
    """Separate Qt's own command-line options from ours.

    Returns (own, qt). Options Qt reads a separate value for keep that value.
    """
    own: list[str] = []
    qt: list[str] = []
    it = iter(args)
    for arg in it:
        if arg.startswith("-"):
            qt.append(arg)
            if arg in _QT_VALUE_OPTIONS:
                value = next(it, None)
                if value is not None:
                    qt.append(value)
        else:
            own.append(arg)
    return own, qt


def build_window(location: str | None, settings: SettingsManager) -> BookstoreWindow:
    """Create a session window rendered for a URL/fragment, or the configured start fragment."""
    window = BookstoreWindow(settings)
    window.init(fragment_from(location or settings.start_fragment))
    return window


def run(argv: list[str] | None = None) -> int:
    """Application entrypoint (packaging-friendly)."""
    if argv is None:
        argv = sys.argv

    argv = _apply_cli_logging_options(list(argv))
    own_args, qt_args = _split_qt_args(argv[1:])

    parser = argparse.ArgumentParser(prog="bookstore", add_help=False)
    parser.add_argument("location", nargs="?", help="URL or fragment, e.g. http://example.org/book/#livedemo")
    args, extra = parser.parse_known_args(own_args)
    if extra:
        logger.warning("ignoring extra arguments: %s", " ".join(extra))

    app = QApplication([argv[0], *qt_args])
    settings = SettingsManager(default_settings_path())
    apply_theme(app, settings.theme, settings.font_size)

    window = build_window(args.location, settings)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(run())
