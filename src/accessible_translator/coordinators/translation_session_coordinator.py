"""Translation Session Coordinator - Manages generate/swap/image workflows and session state."""

import logging
import mimetypes
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QObject, QThreadPool, Signal

from accessible_translator.core import (
    AUTO_DETECT_CODE,
    DEFAULT_CATALOG,
    ImagePreview,
    Language,
    LanguageCatalog,
    Session,
    TranslationMode,
    clamp_easy_read_level,
    truncate_input,
)
from accessible_translator.services import (
    SUPPORTED_IMAGE_TYPES,
    AIGateway,
    ImageInputError,
    TranslatorError,
    split_aac_keywords,
)
from .gateway_request import GatewayRequest
from .language_detection_coordinator import LanguageDetectionCoordinator

logger = logging.getLogger(__name__)

mimetypes.add_type("image/webp", ".webp")


class TranslationSessionCoordinator(QObject):
    """
    Orchestrates the translator session.

    Responsibilities:
    - Own the Session and expose the user action surface (setters, generate,
      swap, image upload).
    - Dispatch exactly one gateway call per generate, chosen by mode.
    - Keep at most one user-facing request (generation or text extraction)
      in flight; calls made while loading are ignored.
    - Feed input and source-language changes to the detection coordinator.
    """

    state_changed = Signal()
    generation_started = Signal()
    generation_completed = Signal(str)
    generation_failed = Signal(str)
    text_extracted = Signal(str)

    def __init__(
        self,
        gateway: AIGateway,
        detection_coordinator: LanguageDetectionCoordinator,
        session: Session,
        catalog: LanguageCatalog = DEFAULT_CATALOG,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__()

        if gateway is None:
            raise ValueError("AIGateway must not be None")
        if detection_coordinator is None:
            raise ValueError("LanguageDetectionCoordinator must not be None")
        if session.target_lang not in catalog:
            raise ValueError(f"Unknown target language: {session.target_lang}")

        self._gateway = gateway
        self._detection = detection_coordinator
        self._session = session
        self._catalog = catalog
        self.thread_pool = thread_pool if thread_pool is not None else QThreadPool.globalInstance()

        # Track the active request so stale completions never update state
        self._active_request_id: Optional[int] = None
        self._request_counter = 0
        self._request_helper: Optional[GatewayRequest] = None

        self._detection.state_changed.connect(self.state_changed)

    @property
    def session(self) -> Session:
        return self._session

    def source_languages(self) -> list[Language]:
        return self._catalog.source_options()

    def target_languages(self) -> list[Language]:
        """Catalog without the current source language."""
        return self._catalog.target_options(self._session.source_lang)

    def output_keywords(self) -> list[str]:
        """AAC keyword chips for the current output; empty outside AAC mode."""
        if self._session.mode is not TranslationMode.AAC:
            return []
        return split_aac_keywords(self._session.output_text)

    def set_mode(self, mode: TranslationMode) -> None:
        self._session.mode = TranslationMode(mode)
        self.state_changed.emit()

    def set_input_text(self, text: str) -> None:
        """Replace the input text, bounded to the maximum input length."""
        self._session.input_text = truncate_input(text)
        self._on_input_text_changed()
        self.state_changed.emit()

    def set_source_lang(self, code: str) -> None:
        if code != AUTO_DETECT_CODE and code not in self._catalog:
            raise ValueError(f"Unknown source language: {code}")

        self._session.source_lang = code
        if code == self._session.target_lang:
            replacement = self._catalog.replacement_target(code)
            if replacement is not None:
                self._session.target_lang = replacement

        self._detection.evaluate()
        self.state_changed.emit()

    def set_target_lang(self, code: str) -> None:
        if code not in self._catalog:
            raise ValueError(f"Unknown target language: {code}")
        if code == self._session.source_lang:
            raise ValueError("Target language must differ from the source language")

        self._session.target_lang = code
        self.state_changed.emit()

    def set_easy_read_level(self, level: int) -> None:
        self._session.easy_read_level = clamp_easy_read_level(level)
        self.state_changed.emit()

    def generate(self) -> None:
        """Run the mode's gateway operation on the current input."""
        session = self._session
        if not session.has_input or session.is_auto_source:
            logger.debug("Generate ignored: input blank or source language not set")
            return
        if session.is_loading:
            logger.debug("Generate ignored: a request is already in flight")
            return

        session.is_loading = True
        session.error = None
        session.output_text = ""
        self.generation_started.emit()
        self.state_changed.emit()

        source_name = self._catalog.name_for(session.source_lang)
        if session.mode is TranslationMode.NORMAL:
            target_name = self._catalog.name_for(session.target_lang)
            operation, args = self._gateway.translate, (session.input_text, source_name, target_name)
        elif session.mode is TranslationMode.EASY_READ:
            operation, args = self._gateway.simplify, (session.input_text, source_name, session.easy_read_level)
        else:
            operation, args = self._gateway.convert_to_aac, (session.input_text, source_name)

        logger.info("Generating %s output (%d chars)", session.mode.label, len(session.input_text))
        self._start_request(operation, args, self._handle_generation_result, self._handle_generation_error)

    def swap_languages(self) -> None:
        """Exchange source and target; only meaningful in normal mode with a concrete source."""
        if not self._session.can_swap():
            return

        self._session.source_lang, self._session.target_lang = (
            self._session.target_lang,
            self._session.source_lang,
        )
        self._detection.evaluate()
        self.state_changed.emit()

    def upload_image(self, path: Path) -> None:
        """Read an image file and extract its text into the input."""
        if self._session.is_loading:
            logger.debug("Image upload ignored: a request is already in flight")
            return

        try:
            image_bytes, mime_type = self._read_image(Path(path))
        except ImageInputError as exc:
            logger.warning("Could not load image %s: %s", path, exc.user_message)
            self._session.error = exc.user_message
            self.state_changed.emit()
            return

        self.handle_image_input(image_bytes, mime_type)

    def handle_image_input(self, image_bytes: bytes, mime_type: str) -> None:
        """Extract text from raw image bytes; the result replaces the input text."""
        if self._session.is_loading:
            logger.debug("Image input ignored: a request is already in flight")
            return

        self._session.is_loading = True
        self._session.error = None
        self._session.image_preview = ImagePreview(data=image_bytes, mime_type=mime_type)
        self.state_changed.emit()

        self._start_request(
            self._gateway.extract_text,
            (image_bytes, mime_type),
            self._handle_extraction_result,
            self._handle_generation_error,
        )

    def _handle_generation_result(self, request_id: int, text: str) -> None:
        if not self._finish_request(request_id):
            return

        self._session.output_text = text
        self.generation_completed.emit(text)
        self.state_changed.emit()

    def _handle_extraction_result(self, request_id: int, text: str) -> None:
        if not self._finish_request(request_id):
            return

        self._session.input_text = truncate_input(text)
        self._on_input_text_changed()
        self.text_extracted.emit(self._session.input_text)
        self.state_changed.emit()

    def _handle_generation_error(self, request_id: int, error: Exception) -> None:
        if not self._finish_request(request_id):
            return

        message = error.user_message if isinstance(error, TranslatorError) else str(error)
        self._session.error = message
        self.generation_failed.emit(message)
        self.state_changed.emit()

    def _start_request(self, operation, args, on_result, on_error) -> None:
        self._request_counter += 1
        request_id = self._request_counter
        self._active_request_id = request_id

        # Store reference so it doesn't get garbage collected while worker runs
        request = GatewayRequest(request_id, on_result=on_result, on_error=on_error)
        self._request_helper = request
        request.start(self.thread_pool, operation, *args)

    def _finish_request(self, request_id: int) -> bool:
        """Clear the loading state for the active request; False for stale ones."""
        if request_id != self._active_request_id:
            logger.debug("Ignoring stale result (request %d, current %s)", request_id, self._active_request_id)
            return False

        self._active_request_id = None
        self._session.is_loading = False
        return True

    def _on_input_text_changed(self) -> None:
        # Clearing the input hands the source language back to detection
        if not self._session.has_input and not self._session.is_auto_source:
            self._session.source_lang = AUTO_DETECT_CODE
        self._detection.evaluate()

    @staticmethod
    def _read_image(path: Path) -> tuple[bytes, str]:
        mime_type, _ = mimetypes.guess_type(path.name)
        if mime_type not in SUPPORTED_IMAGE_TYPES:
            raise ImageInputError(
                f"Unsupported image type: {mime_type or path.suffix or 'unknown'}. Use PNG, JPG, or WEBP."
            )
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise ImageInputError() from exc
        if not data:
            raise ImageInputError()
        return data, mime_type
