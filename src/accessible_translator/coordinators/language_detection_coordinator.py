"""Language Detection Coordinator - debounced source-language inference while the user types."""

import logging
from enum import Enum
from typing import Optional

from PySide6.QtCore import QObject, QThreadPool, QTimer, Signal, Slot

from accessible_translator.core import (
    DEFAULT_CATALOG,
    MIN_DETECTION_CHARS,
    LanguageCatalog,
    Session,
)
from accessible_translator.services import AIGateway, TranslatorError
from accessible_translator.services.settings_manager import (
    DEFAULT_DEBOUNCE_MS,
    DEFAULT_FALLBACK_SOURCE_LANGUAGE,
)
from .gateway_request import GatewayRequest

logger = logging.getLogger(__name__)


class DetectionState(Enum):
    IDLE = "idle"
    DEBOUNCING = "debouncing"
    DETECTING = "detecting"


class LanguageDetectionCoordinator(QObject):
    """
    Infers the source language from the input text while it is set to auto.

    Responsibilities:
    - Debounce input changes with a single-shot timer (one slot per coordinator).
    - Issue one detect_language call per settled snapshot.
    - Apply the result only if the cycle is still current and the user has
      not picked a source language in the meantime.
    - Fall back to a configurable source language when detection fails.

    Every evaluate()/cancel() starts a new cycle id. Completions carrying an
    older id are discarded, since a network call cannot be aborted once sent.
    """

    state_changed = Signal()
    language_detected = Signal(str)
    detection_failed = Signal(str)

    def __init__(
        self,
        session: Session,
        gateway: AIGateway,
        catalog: LanguageCatalog = DEFAULT_CATALOG,
        debounce_ms: int = DEFAULT_DEBOUNCE_MS,
        fallback_source_language: str = DEFAULT_FALLBACK_SOURCE_LANGUAGE,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__()

        if session is None:
            raise ValueError("Session must not be None")
        if gateway is None:
            raise ValueError("AIGateway must not be None")
        if fallback_source_language not in catalog:
            raise ValueError(f"Unknown fallback source language: {fallback_source_language}")

        self._session = session
        self._gateway = gateway
        self._catalog = catalog
        self.fallback_source_language = fallback_source_language
        self.thread_pool = thread_pool if thread_pool is not None else QThreadPool.globalInstance()

        self._state = DetectionState.IDLE
        self._snapshot: Optional[str] = None
        self._cycle_id = 0
        # Keep a reference so the helper is not garbage collected while its worker runs.
        # Replacing it disconnects an older, already superseded request.
        self._request_helper: Optional[GatewayRequest] = None

        self._debounce_timer = QTimer(self)
        self._debounce_timer.setSingleShot(True)
        self._debounce_timer.setInterval(debounce_ms)
        self._debounce_timer.timeout.connect(self._on_debounce_timeout)

    @property
    def state(self) -> DetectionState:
        return self._state

    @property
    def snapshot(self) -> Optional[str]:
        """Input text the current cycle will detect, if any."""
        return self._snapshot

    @property
    def debounce_ms(self) -> int:
        return self._debounce_timer.interval()

    def evaluate(self) -> None:
        """
        Re-run the transition rules after the input text or source language changed.

        Any pending cycle is superseded. A new debounce window starts only
        when the source is auto and the trimmed input is long enough.
        """
        self._supersede_pending_cycle()

        text = self._session.input_text
        if self._session.is_auto_source and len(text.strip()) > MIN_DETECTION_CHARS:
            self._snapshot = text
            self._state = DetectionState.DEBOUNCING
            self._session.is_detecting_language = True
            self._debounce_timer.start()
            logger.debug("Detection cycle %d debouncing (%d chars)", self._cycle_id, len(text))
        else:
            self._enter_idle()

        self.state_changed.emit()

    def cancel(self) -> None:
        """Drop any pending detection and return to idle."""
        self._supersede_pending_cycle()
        self._enter_idle()
        self.state_changed.emit()

    @Slot()
    def _on_debounce_timeout(self) -> None:
        if self._state is not DetectionState.DEBOUNCING or self._snapshot is None:
            return

        self._state = DetectionState.DETECTING
        cycle_id = self._cycle_id
        logger.debug("Detection cycle %d sending request", cycle_id)

        request = GatewayRequest(
            cycle_id,
            on_result=self._handle_detection_result,
            on_error=self._handle_detection_error,
        )
        self._request_helper = request
        request.start(self.thread_pool, self._gateway.detect_language, self._snapshot)

    def _handle_detection_result(self, cycle_id: int, detected_code: str) -> None:
        """Apply a detected code (runs in main thread)."""
        if cycle_id != self._cycle_id:
            logger.debug("Ignoring stale detection result (cycle %d, current %d)", cycle_id, self._cycle_id)
            return

        if self._session.is_auto_source:
            self._apply_source(detected_code)
            logger.info("Detected source language: %s", detected_code)
            self.language_detected.emit(detected_code)

        self._enter_idle()
        self.state_changed.emit()

    def _handle_detection_error(self, cycle_id: int, error: Exception) -> None:
        """Fall back to the default source language (runs in main thread)."""
        if cycle_id != self._cycle_id:
            logger.debug("Ignoring stale detection error (cycle %d, current %d)", cycle_id, self._cycle_id)
            return

        message = error.user_message if isinstance(error, TranslatorError) else str(error)
        logger.warning("Language detection failed: %s", message)

        if self._session.is_auto_source:
            self._apply_source(self.fallback_source_language)
        self.detection_failed.emit(message)

        self._enter_idle()
        self.state_changed.emit()

    def _apply_source(self, code: str) -> None:
        """Set the source language and move the target away from it if they clash."""
        self._session.source_lang = code
        if self._session.target_lang == code:
            replacement = self._catalog.replacement_target(code)
            if replacement is not None:
                self._session.target_lang = replacement

    def _supersede_pending_cycle(self) -> None:
        self._debounce_timer.stop()
        self._cycle_id += 1

    def _enter_idle(self) -> None:
        self._state = DetectionState.IDLE
        self._snapshot = None
        self._session.is_detecting_language = False
