"""Main Window - Translator shell with input, controls and output panels."""

from pathlib import Path
from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QAction, QDragEnterEvent, QDropEvent, QGuiApplication, QPixmap
from PySide6.QtWidgets import (
    QButtonGroup,
    QComboBox,
    QFileDialog,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPlainTextEdit,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from accessible_translator.core import (
    MAX_EASY_READ_LEVEL,
    MAX_INPUT_CHARS,
    MIN_EASY_READ_LEVEL,
    ImagePreview,
    Language,
    Session,
    TranslationMode,
)
from .output_view import OutputView
from .speech import SpeechReader

IMAGE_SUFFIXES = (".png", ".jpg", ".jpeg", ".webp")
PREVIEW_MAX_SIZE = 240
IMAGE_HINT = "Drop a PNG, JPG, or WEBP image here"


class MainWindow(QMainWindow):
    """
    Renders a Session snapshot and turns user input into intent signals.

    The window never mutates state itself; every control emits a signal that
    the composition root wires to the session coordinator.
    """

    mode_selected = Signal(object)  # TranslationMode
    input_text_edited = Signal(str)
    source_lang_selected = Signal(str)
    target_lang_selected = Signal(str)
    easy_read_level_changed = Signal(int)
    generate_requested = Signal()
    swap_requested = Signal()
    image_selected = Signal(Path)

    def __init__(self, speech_reader: Optional[SpeechReader] = None):
        super().__init__()
        self.setWindowTitle("Accessible AI Translator")
        self.setGeometry(100, 100, 1100, 720)
        self.setAcceptDrops(True)

        self._speech = speech_reader or SpeechReader()
        self._session: Optional[Session] = None
        self._shown_preview: Optional[ImagePreview] = None

        self._setup_ui()
        self._create_menu_bar()

    def _setup_ui(self):
        """Initialize the main UI layout."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QVBoxLayout(central_widget)

        # Mode selector
        mode_layout = QHBoxLayout()
        self.mode_group = QButtonGroup(self)
        self.mode_group.setExclusive(True)
        self.mode_buttons: dict[TranslationMode, QPushButton] = {}
        for mode in TranslationMode:
            button = QPushButton(mode.label)
            button.setCheckable(True)
            button.clicked.connect(lambda _checked=False, m=mode: self.mode_selected.emit(m))
            self.mode_group.addButton(button)
            self.mode_buttons[mode] = button
            mode_layout.addWidget(button)
        main_layout.addLayout(mode_layout)

        panels = QHBoxLayout()
        main_layout.addLayout(panels, 1)

        # Input panel
        input_panel = QVBoxLayout()
        panels.addLayout(input_panel, 1)

        lang_grid = QGridLayout()
        lang_grid.addWidget(QLabel("From"), 0, 0)
        self.source_combo = QComboBox()
        self.source_combo.setAccessibleName("Select source language")
        self.source_combo.activated.connect(self._on_source_activated)
        lang_grid.addWidget(self.source_combo, 1, 0)

        self.target_label = QLabel("To")
        lang_grid.addWidget(self.target_label, 0, 2)
        self.target_combo = QComboBox()
        self.target_combo.setAccessibleName("Select target language")
        self.target_combo.activated.connect(self._on_target_activated)
        lang_grid.addWidget(self.target_combo, 1, 2)

        self.swap_button = QPushButton("⇄")
        self.swap_button.setAccessibleName("Swap languages")
        self.swap_button.clicked.connect(self.swap_requested.emit)
        lang_grid.addWidget(self.swap_button, 1, 1)
        input_panel.addLayout(lang_grid)

        self.detecting_label = QLabel("Detecting language...")
        self.detecting_label.setStyleSheet("color: gray;")
        input_panel.addWidget(self.detecting_label)

        self.level_label = QLabel()
        input_panel.addWidget(self.level_label)
        self.level_slider = QSlider(Qt.Orientation.Horizontal)
        self.level_slider.setRange(MIN_EASY_READ_LEVEL, MAX_EASY_READ_LEVEL)
        self.level_slider.valueChanged.connect(self.easy_read_level_changed.emit)
        input_panel.addWidget(self.level_slider)

        self.input_edit = QPlainTextEdit()
        self.input_edit.setPlaceholderText("Enter text here...")
        self.input_edit.setAccessibleName("Input text")
        self.input_edit.textChanged.connect(self._on_input_changed)
        input_panel.addWidget(self.input_edit, 1)

        input_actions = QHBoxLayout()
        self.speak_input_button = QPushButton("Listen")
        self.speak_input_button.setAccessibleName("Listen to input text")
        self.speak_input_button.clicked.connect(self._speak_input)
        input_actions.addWidget(self.speak_input_button)
        self.upload_button = QPushButton("Upload Image...")
        self.upload_button.clicked.connect(self._on_upload_image)
        input_actions.addWidget(self.upload_button)
        input_actions.addStretch()
        self.char_counter = QLabel()
        self.char_counter.setStyleSheet("color: gray;")
        input_actions.addWidget(self.char_counter)
        input_panel.addLayout(input_actions)

        self.image_label = QLabel(IMAGE_HINT)
        self.image_label.setStyleSheet("color: gray;")
        input_panel.addWidget(self.image_label)

        self.generate_button = QPushButton("Translate")
        self.generate_button.setMinimumHeight(36)
        self.generate_button.clicked.connect(self.generate_requested.emit)
        input_panel.addWidget(self.generate_button)

        # Output panel
        output_panel = QVBoxLayout()
        panels.addLayout(output_panel, 1)

        self.output_view = OutputView()
        output_panel.addWidget(self.output_view, 1)

        output_actions = QHBoxLayout()
        self.speak_output_button = QPushButton("Listen")
        self.speak_output_button.setAccessibleName("Listen to result")
        self.speak_output_button.clicked.connect(self._speak_output)
        output_actions.addWidget(self.speak_output_button)
        self.copy_button = QPushButton("Copy")
        self.copy_button.setAccessibleName("Copy result to clipboard")
        self.copy_button.clicked.connect(self._copy_output)
        output_actions.addWidget(self.copy_button)
        output_actions.addStretch()
        output_panel.addLayout(output_actions)

    def _create_menu_bar(self):
        """Create the application menu bar."""
        file_menu = self.menuBar().addMenu("&File")

        open_action = QAction("&Open Image...", self)
        open_action.setShortcut("Ctrl+O")
        open_action.triggered.connect(self._on_upload_image)
        file_menu.addAction(open_action)

        file_menu.addSeparator()

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

    def render(
        self,
        session: Session,
        source_options: list[Language],
        target_options: list[Language],
        keywords: list[str],
    ) -> None:
        """Paint the given session state onto the widgets."""
        self._session = session
        normal_mode = session.mode.supports_target_language

        for mode, button in self.mode_buttons.items():
            button.setChecked(mode is session.mode)

        self._fill_combo(self.source_combo, source_options, session.source_lang)
        self._fill_combo(self.target_combo, target_options, session.target_lang)
        self.detecting_label.setVisible(session.is_detecting_language)

        self.target_label.setVisible(normal_mode)
        self.target_combo.setVisible(normal_mode)
        self.swap_button.setVisible(normal_mode)
        self.swap_button.setEnabled(session.can_swap())

        easy_read = session.mode is TranslationMode.EASY_READ
        self.level_label.setVisible(easy_read)
        self.level_slider.setVisible(easy_read)
        self.level_label.setText(f"Simplicity Level: {session.easy_read_level}")
        if self.level_slider.value() != session.easy_read_level:
            self.level_slider.blockSignals(True)
            self.level_slider.setValue(session.easy_read_level)
            self.level_slider.blockSignals(False)

        if self.input_edit.toPlainText() != session.input_text:
            self.input_edit.blockSignals(True)
            self.input_edit.setPlainText(session.input_text)
            self.input_edit.blockSignals(False)
        self.char_counter.setText(f"{len(session.input_text)} / {MAX_INPUT_CHARS}")
        self.speak_input_button.setEnabled(session.has_input)
        self.upload_button.setEnabled(not session.is_loading)
        self._render_image_preview(session)

        self.generate_button.setEnabled(session.can_generate())
        if session.is_loading:
            self.generate_button.setText("Working...")
        else:
            self.generate_button.setText("Translate" if normal_mode else "Generate")

        if session.is_loading:
            self.output_view.show_loading()
        elif session.error:
            self.output_view.show_error(session.error)
        elif not session.output_text:
            self.output_view.show_placeholder()
        elif session.mode is TranslationMode.AAC:
            self.output_view.show_keywords(keywords)
        else:
            self.output_view.show_text(session.output_text)

        has_output = bool(session.output_text) and not session.is_loading
        self.speak_output_button.setEnabled(has_output)
        self.copy_button.setEnabled(has_output)

    def show_error(self, title: str, message: str):
        """Display an error message to the user."""
        QMessageBox.critical(self, title, message)

    def _render_image_preview(self, session: Session) -> None:
        """Show a thumbnail of the last uploaded image, decoding it only when it changes."""
        preview = session.image_preview
        if preview is self._shown_preview:
            return
        self._shown_preview = preview

        if preview is None:
            self.image_label.clear()
            self.image_label.setText(IMAGE_HINT)
            return

        pixmap = QPixmap()
        if pixmap.loadFromData(preview.data):
            self.image_label.setPixmap(
                pixmap.scaled(
                    PREVIEW_MAX_SIZE,
                    PREVIEW_MAX_SIZE,
                    Qt.AspectRatioMode.KeepAspectRatio,
                    Qt.TransformationMode.SmoothTransformation,
                )
            )
        else:
            self.image_label.clear()
            self.image_label.setText(f"Last image: {preview.mime_type}")

    def dragEnterEvent(self, event: QDragEnterEvent):
        if self._dropped_image(event) is not None:
            event.acceptProposedAction()
        else:
            event.ignore()

    def dropEvent(self, event: QDropEvent):
        path = self._dropped_image(event)
        if path is None:
            event.ignore()
            return
        event.acceptProposedAction()
        self.image_selected.emit(path)

    @staticmethod
    def _dropped_image(event) -> Optional[Path]:
        mime = event.mimeData()
        if not mime.hasUrls():
            return None
        for url in mime.urls():
            if url.isLocalFile() and url.toLocalFile().lower().endswith(IMAGE_SUFFIXES):
                return Path(url.toLocalFile())
        return None

    @staticmethod
    def _fill_combo(combo: QComboBox, options: list[Language], selected: str) -> None:
        combo.blockSignals(True)
        codes = [combo.itemData(i) for i in range(combo.count())]
        if codes != [lang.code for lang in options]:
            combo.clear()
            for lang in options:
                combo.addItem(lang.name, lang.code)
        index = combo.findData(selected)
        if index >= 0:
            combo.setCurrentIndex(index)
        combo.blockSignals(False)

    def _on_source_activated(self, index: int):
        self.source_lang_selected.emit(self.source_combo.itemData(index))

    def _on_target_activated(self, index: int):
        self.target_lang_selected.emit(self.target_combo.itemData(index))

    def _on_input_changed(self):
        self.input_text_edited.emit(self.input_edit.toPlainText())

    def _on_upload_image(self):
        """Handle the upload button and Open Image menu action."""
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            "Select Image",
            str(Path.home()),
            "Images (*.png *.jpg *.jpeg *.webp)",
        )
        if file_path:
            self.image_selected.emit(Path(file_path))

    def _speak_input(self):
        if self._session is not None:
            self._speech.speak(self._session.input_text, self._session.source_lang)

    def _speak_output(self):
        if self._session is None:
            return
        # Translations are in the target language, other modes stay in the source language
        if self._session.mode.supports_target_language:
            lang = self._session.target_lang
        else:
            lang = self._session.source_lang
        self._speech.speak(self._session.output_text, lang)

    def _copy_output(self):
        if self._session is not None and self._session.output_text:
            QGuiApplication.clipboard().setText(self._session.output_text)
