# gui/main_window.py
from __future__ import annotations

from PySide6.QtCore    import Qt, Slot # type: ignore
from PySide6.QtGui     import QAction # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QScrollArea, QStackedWidget, QMessageBox
)

from movieStore.settings           import ICON, ERROR_COLOR, LOADING_TEXT, NO_MOVIES_TEXT
from movieStore.store.models       import Movie, Idle, Loading, Loaded, Failed, Retrying
from movieStore.gui.controller     import MovieController
from movieStore.gui.add_movie_form import AddMovieForm
from movieStore.gui.movie_card     import MovieCard


class MainWindow(QMainWindow):
    def __init__(self, controller: MovieController | None = None):
        super().__init__()
        self.setWindowTitle("Movie Store")
        self.resize(720, 640)

        self.controller = controller or MovieController(parent=self)

        # ── form + fetch button ─────────────────────────────────────────
        self.form = AddMovieForm()
        self.fetch_btn = QPushButton(ICON("fa5s.sync-alt"), "Fetch Movies")
        self.fetch_btn.setAutoDefault(False)

        # ── content pages ───────────────────────────────────────────────
        self.message_label = QLabel(NO_MOVIES_TEXT, alignment=Qt.AlignCenter)

        self.error_page  = QWidget()
        err_box = QVBoxLayout(self.error_page)
        err_box.setAlignment(Qt.AlignTop)
        self.error_label = QLabel("", alignment=Qt.AlignCenter)
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(f"color:{ERROR_COLOR};")
        self.retry_btn  = QPushButton("Retry")
        self.cancel_btn = QPushButton("Cancel")
        btn_row = QHBoxLayout()
        btn_row.addStretch()
        btn_row.addWidget(self.retry_btn)
        btn_row.addWidget(self.cancel_btn)
        btn_row.addStretch()
        err_box.addWidget(self.error_label)
        err_box.addLayout(btn_row)

        self.list_widget = QWidget()
        self.list_layout = QVBoxLayout(self.list_widget)
        self.list_layout.setAlignment(Qt.AlignTop)
        self.list_page = QScrollArea()
        self.list_page.setWidgetResizable(True)
        self.list_page.setWidget(self.list_widget)

        self.pages = QStackedWidget()
        self.pages.addWidget(self.message_label)
        self.pages.addWidget(self.error_page)
        self.pages.addWidget(self.list_page)

        central = QWidget()
        root = QVBoxLayout(central)
        root.addWidget(self.form)
        root.addWidget(self.fetch_btn, 0, Qt.AlignHCenter)
        root.addWidget(self.pages, 1)
        self.setCentralWidget(central)

        # ── toolbar ─────────────────────────────────────────────────────
        tb = self.addToolBar("Main")
        act = QAction(ICON("fa5s.sync-alt"), "Fetch", self)
        act.setShortcut("Ctrl+R")
        act.triggered.connect(self.controller.fetch_movies)
        tb.addAction(act)

        # ── wiring ──────────────────────────────────────────────────────
        self.fetch_btn.clicked.connect(self.controller.fetch_movies)
        self.retry_btn.clicked.connect(self.controller.retry)
        self.cancel_btn.clicked.connect(self.controller.cancel)
        self.form.submitted.connect(self._on_submit)
        self.controller.state_changed.connect(self.render_state)

        self.render_state(self.controller.view_state)

    # ───────────────────────────────────────────────────────────────────
    @Slot(object)
    def render_state(self, state) -> None:
        """Redraw the content area for *state*."""
        if isinstance(state, Loading):
            self._show_message(LOADING_TEXT)
        elif isinstance(state, Failed):
            self._show_error(state.message, can_retry=True)
        elif isinstance(state, Retrying):
            self._show_error(f"Retrying… (attempt {state.attempt})", can_retry=False)
        elif isinstance(state, Loaded) and state.movies:
            self._show_movies(state.movies)
        else:                               # Idle / empty list
            self._show_message(NO_MOVIES_TEXT)

    def _show_message(self, text: str) -> None:
        self.message_label.setText(text)
        self.pages.setCurrentWidget(self.message_label)

    def _show_error(self, text: str, can_retry: bool) -> None:
        self.error_label.setText(text)
        self.retry_btn.setVisible(can_retry)
        self.pages.setCurrentWidget(self.error_page)

    def _show_movies(self, movies: tuple[Movie, ...]) -> None:
        while self.list_layout.count():
            w = self.list_layout.takeAt(0).widget()
            if w is not None:
                w.setParent(None)
                w.deleteLater()
        for movie in movies:
            card = MovieCard(movie)
            card.delete_requested.connect(self.controller.delete_movie)
            self.list_layout.addWidget(card)
        self.pages.setCurrentWidget(self.list_page)

    @Slot(object)
    def _on_submit(self, draft) -> None:
        try:
            self.controller.add_movie(draft)
        except ValueError as e:
            QMessageBox.warning(self, "Missing field", str(e))

    def closeEvent(self, event):
        self.controller.shutdown()
        super().closeEvent(event)
