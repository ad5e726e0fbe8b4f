import sys
from PySide6.QtWidgets import QApplication # type: ignore

from movieStore.utils           import apply_dark_palette, log_debug
from movieStore.settings        import MOVIE_STORE_URL
from movieStore.gui.main_window import MainWindow


# ────────────────────────────────────────────────────────────────────────────
# Application entry
# ────────────────────────────────────────────────────────────────────────────
def main() -> None:
    app = QApplication(sys.argv)
    apply_dark_palette(app)
    log_debug(f"starting against {MOVIE_STORE_URL}")

    window = MainWindow()
    window.show()

    # initial list fetch; the controller takes it from here
    window.controller.fetch_movies()

    sys.exit(app.exec())

# Python entry-point guard
if __name__ == "__main__":
    main()
