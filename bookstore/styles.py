from PySide6.QtGui import QColor, QFont, QPalette
from PySide6.QtWidgets import QApplication

# -----------------------------------------------------------------------------
# Fluent Design Color Palette (WinUI 3 Inspired)
# -----------------------------------------------------------------------------


class FluentColors:
    # Dark Theme
    DARK_WINDOW = "#202020"
    DARK_SURFACE = "#2D2D2D"
    DARK_SURFACE_ALT = "#323232"
    DARK_BORDER = "#454545"
    DARK_TEXT = "#E0E0E0"
    DARK_TEXT_SEC = "#A0A0A0"
    DARK_ACCENT = "#4CC2FF"
    DARK_ACCENT_TEXT = "#000000"

    # Light Theme
    LIGHT_WINDOW = "#F3F3F3"
    LIGHT_SURFACE = "#FFFFFF"
    LIGHT_SURFACE_ALT = "#FAFAFA"
    LIGHT_BORDER = "#E5E5E5"
    LIGHT_TEXT = "#1F1F1F"
    LIGHT_TEXT_SEC = "#5D5D5D"
    LIGHT_ACCENT = "#0067C0"
    LIGHT_ACCENT_TEXT = "#FFFFFF"


COMMON_QSS = """
    * {
        font-family: "Segoe UI", sans-serif;
        font-size: {{font_size}}pt;
    }

    QLabel {
        color: {{text}};
    }

    /* Read-only title viewer in the live demo */
    QLabel#viewer {
        font-weight: 600;
        color: {{accent}};
    }

    QLineEdit {
        background-color: {{surface}};
        border: 1px solid {{border}};
        border-bottom: 2px solid {{border}};
        color: {{text}};
        padding: 5px 8px;
        border-radius: 4px;
        selection-background-color: {{accent}};
        selection-color: {{accent_text}};
    }
    QLineEdit:hover {
        background-color: {{surface_alt}};
    }
    QLineEdit:focus {
        border-bottom: 2px solid {{accent}};
        background-color: {{window}};
    }
    QLineEdit:read-only {
        color: {{text_sec}};
    }

    /* Large editor */
    QLineEdit#big {
        font-size: {{big_font_size}}pt;
        padding: 8px 10px;
    }
"""


def _palette_for(theme: str) -> dict[str, str]:
    if theme == "dark":
        return {
            "window": FluentColors.DARK_WINDOW,
            "surface": FluentColors.DARK_SURFACE,
            "surface_alt": FluentColors.DARK_SURFACE_ALT,
            "border": FluentColors.DARK_BORDER,
            "text": FluentColors.DARK_TEXT,
            "text_sec": FluentColors.DARK_TEXT_SEC,
            "accent": FluentColors.DARK_ACCENT,
            "accent_text": FluentColors.DARK_ACCENT_TEXT,
        }
    return {
        "window": FluentColors.LIGHT_WINDOW,
        "surface": FluentColors.LIGHT_SURFACE,
        "surface_alt": FluentColors.LIGHT_SURFACE_ALT,
        "border": FluentColors.LIGHT_BORDER,
        "text": FluentColors.LIGHT_TEXT,
        "text_sec": FluentColors.LIGHT_TEXT_SEC,
        "accent": FluentColors.LIGHT_ACCENT,
        "accent_text": FluentColors.LIGHT_ACCENT_TEXT,
    }


def build_stylesheet(theme: str = "light", font_size: int = 10) -> str:
    qss = COMMON_QSS.replace("{{font_size}}", str(font_size))
    qss = qss.replace("{{big_font_size}}", str(font_size + 6))
    for key, val in _palette_for(theme).items():
        qss = qss.replace(f"{{{{{key}}}}}", val)
    return qss


def apply_theme(app: QApplication, theme: str = "light", font_size: int = 10) -> None:
    """Apply a theme to the application.

    Args:
        app: QApplication instance
        theme: Theme name ("dark" or "light")
        font_size: Base font size in points (default: 10)
    """
    pal_def = _palette_for(theme)

    palette = QPalette()
    c_text = QColor(pal_def["text"])
    c_surface = QColor(pal_def["surface"])
    c_accent = QColor(pal_def["accent"])
    c_disabled = QColor(pal_def["text_sec"])

    palette.setColor(QPalette.ColorRole.Window, QColor(pal_def["window"]))
    palette.setColor(QPalette.ColorRole.WindowText, c_text)
    palette.setColor(QPalette.ColorRole.Base, c_surface)
    palette.setColor(QPalette.ColorRole.AlternateBase, QColor(pal_def["surface_alt"]))
    palette.setColor(QPalette.ColorRole.Text, c_text)
    palette.setColor(QPalette.ColorRole.Button, c_surface)
    palette.setColor(QPalette.ColorRole.ButtonText, c_text)
    palette.setColor(QPalette.ColorRole.Link, c_accent)
    palette.setColor(QPalette.ColorRole.Highlight, c_accent)
    palette.setColor(QPalette.ColorRole.HighlightedText, QColor(pal_def["accent_text"]))
    palette.setColor(QPalette.ColorGroup.Disabled, QPalette.ColorRole.Text, c_disabled)
    palette.setColor(QPalette.ColorGroup.Disabled, QPalette.ColorRole.WindowText, c_disabled)
    app.setPalette(palette)

    font = QFont("Segoe UI")
    font.setStyleHint(QFont.StyleHint.SansSerif)
    font.setPointSize(font_size)
    app.setFont(font)

    app.setStyleSheet(build_stylesheet(theme, font_size))
