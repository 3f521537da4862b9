"""Output View - renders generation results as text or AAC keyword chips."""

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QGridLayout,
    QLabel,
    QSizePolicy,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

CHIPS_PER_ROW = 5

CHIP_STYLE = (
    "background-color: #dbeafe; color: #1e40af; font-weight: 600;"
    "border-radius: 8px; padding: 6px 12px;"
)


class OutputView(QWidget):
    """Result area showing exactly one of: loading, error, placeholder, text, keyword chips."""

    PLACEHOLDER = "Your result will appear here..."

    def __init__(self):
        super().__init__()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)

        self.status_label = QLabel(self.PLACEHOLDER)
        self.status_label.setWordWrap(True)
        self.status_label.setStyleSheet("color: gray;")
        layout.addWidget(self.status_label)

        self.text_view = QTextEdit()
        self.text_view.setReadOnly(True)
        self.text_view.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        layout.addWidget(self.text_view, 1)

        self.chips_container = QWidget()
        self.chips_layout = QGridLayout(self.chips_container)
        self.chips_layout.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignLeft)
        layout.addWidget(self.chips_container, 1)

        self.chip_labels: list[QLabel] = []
        self.show_placeholder()

    def show_loading(self) -> None:
        self._show_status("Working...", "color: gray;")

    def show_error(self, message: str) -> None:
        self._show_status(message, "color: red;")

    def show_placeholder(self) -> None:
        self._show_status(self.PLACEHOLDER, "color: gray;")

    def show_text(self, text: str) -> None:
        self._clear_chips()
        self.status_label.hide()
        self.chips_container.hide()
        if self.text_view.toPlainText() != text:
            self.text_view.setPlainText(text)
        self.text_view.show()

    def show_keywords(self, keywords: list[str]) -> None:
        """One chip per AAC keyword, wrapped into rows."""
        self._clear_chips()
        for index, word in enumerate(keywords):
            chip = QLabel(word)
            chip.setAlignment(Qt.AlignmentFlag.AlignCenter)
            chip.setStyleSheet(CHIP_STYLE)
            self.chips_layout.addWidget(chip, index // CHIPS_PER_ROW, index % CHIPS_PER_ROW)
            self.chip_labels.append(chip)

        self.status_label.hide()
        self.text_view.hide()
        self.chips_container.show()

    def _show_status(self, message: str, style: str) -> None:
        self._clear_chips()
        self.text_view.clear()
        self.text_view.hide()
        self.chips_container.hide()
        self.status_label.setText(message)
        self.status_label.setStyleSheet(style)
        self.status_label.show()

    def _clear_chips(self) -> None:
        for chip in self.chip_labels:
            self.chips_layout.removeWidget(chip)
            chip.deleteLater()
        self.chip_labels = []
