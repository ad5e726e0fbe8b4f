from __future__ import annotations
from PySide6.QtCore    import Signal, Slot # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QWidget, QGroupBox, QFormLayout, QVBoxLayout, QLineEdit,
    QTextEdit, QPushButton, QMessageBox
)

from ..store.models import MovieDraft


class AddMovieForm(QWidget):
    """Title / opening text / release date, emits a draft on submit."""
    submitted = Signal(object)              # MovieDraft

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._build_ui()

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        box  = QGroupBox("Add Movie")
        form = QFormLayout(box)

        self.title_input = QLineEdit()
        self.opening_input = QTextEdit()
        self.opening_input.setAcceptRichText(False)
        self.opening_input.setFixedHeight(80)
        self.date_input = QLineEdit()
        self.date_input.setPlaceholderText("YYYY-MM-DD")

        form.addRow("Title:",        self.title_input)
        form.addRow("Opening Text:", self.opening_input)
        form.addRow("Release Date:", self.date_input)

        self.submit_btn = QPushButton("Add Movie")
        self.submit_btn.setAutoDefault(False)
        self.submit_btn.clicked.connect(self.submit)
        form.addRow(self.submit_btn)

        root.addWidget(box)

    def draft(self) -> MovieDraft:
        return MovieDraft(
            title=self.title_input.text(),
            opening_text=self.opening_input.toPlainText(),
            release_date=self.date_input.text(),
        )

    @Slot()
    def submit(self) -> None:
        """Validate, emit and clear; a missing field only shows a warning."""
        draft = self.draft()
        try:
            draft.validate()
        except ValueError as e:
            QMessageBox.warning(self, "Missing field", str(e))
            return

        self.submitted.emit(draft)
        self.title_input.clear()
        self.opening_input.clear()
        self.date_input.clear()
