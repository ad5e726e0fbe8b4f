from __future__ import annotations
from PySide6.QtCore    import Qt, Signal, QPropertyAnimation # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QFrame, QLabel, QVBoxLayout, QHBoxLayout, QToolButton,
    QGraphicsDropShadowEffect
)

from ..settings    import ICON
from ..store.models import Movie


class MovieCard(QFrame):
    """Card with title, release date, opening text and a delete button."""
    delete_requested = Signal(str)          # movie id

    def __init__(self, movie: Movie, parent=None):
        super().__init__(parent)
        self.movie = movie
        self.setObjectName("MovieCardItem")
        self.setFrameShape(QFrame.StyledPanel)

        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)

        # ── header row: title | release date | delete ───────────────────
        header = QHBoxLayout()
        self.title_lbl = QLabel(movie.title)
        self.title_lbl.setStyleSheet("font-weight:bold; font-size:15px;")
        self.title_lbl.setWordWrap(True)

        self.date_lbl = QLabel(movie.release_date or "—", alignment=Qt.AlignRight)

        self.delete_btn = QToolButton()
        self.delete_btn.setIcon(ICON("fa5s.trash-alt"))
        self.delete_btn.setToolTip("Delete movie")
        self.delete_btn.setCursor(Qt.PointingHandCursor)
        self.delete_btn.clicked.connect(lambda: self.delete_requested.emit(self.movie.id))

        header.addWidget(self.title_lbl, 1)
        header.addWidget(self.date_lbl,  0, Qt.AlignRight)
        header.addWidget(self.delete_btn, 0, Qt.AlignRight)
        root.addLayout(header)

        # ── body ─────────────────────────────────────────────────────────
        self.text_lbl = QLabel(movie.opening_text)
        self.text_lbl.setWordWrap(True)
        root.addWidget(self.text_lbl)

        self._shadow = QGraphicsDropShadowEffect(self)
        self._shadow.setBlurRadius(4)
        self._shadow.setOffset(0, 0)
        self.setGraphicsEffect(self._shadow)

    # ------------------------------------------------------------------
    # hover animation
    def enterEvent(self, event):
        super().enterEvent(event)
        self._animate_shadow(16)

    def leaveEvent(self, event):
        super().leaveEvent(event)
        self._animate_shadow(4)

    def _animate_shadow(self, radius: int) -> None:
        anim = QPropertyAnimation(self._shadow, b"blurRadius", self)
        anim.setDuration(200)
        anim.setEndValue(radius)
        anim.start(QPropertyAnimation.DeleteWhenStopped)
