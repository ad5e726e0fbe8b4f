from datetime import datetime

from PySide6.QtCore    import Qt # type: ignore
from PySide6.QtGui     import QColor, QPalette # type: ignore
from PySide6.QtWidgets import QApplication # type: ignore

from movieStore.settings import LOG_PATH, ACCENT_COLOR


def log_debug(message: str) -> None:
    """Append timestamped message to the log file."""
    LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().isoformat(timespec="seconds")
    with LOG_PATH.open("a", encoding="utf-8") as f:
        f.write(f"[{ts}] {message}\n")


def apply_dark_palette(app: QApplication) -> None:
    """Apply a dark Fusion palette to the application."""
    palette = QPalette()
    palette.setColor(QPalette.Window,          QColor("#1e1f22"))
    palette.setColor(QPalette.WindowText,      Qt.white)
    palette.setColor(QPalette.Base,            QColor("#2b2d30"))
    palette.setColor(QPalette.AlternateBase,   QColor("#313338"))
    palette.setColor(QPalette.Button,          QColor("#2b2d30"))
    palette.setColor(QPalette.ButtonText,      Qt.white)
    palette.setColor(QPalette.Text,            Qt.white)
    palette.setColor(QPalette.PlaceholderText, QColor("#8b8d91"))
    palette.setColor(QPalette.Highlight,       QColor(ACCENT_COLOR))
    palette.setColor(QPalette.HighlightedText, Qt.white)
    app.setStyle("Fusion")
    app.setPalette(palette)
