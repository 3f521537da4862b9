"""Unit tests for LanguageDetectionCoordinator."""

from unittest.mock import MagicMock

import pytest
from PySide6.QtTest import QTest

from accessible_translator.coordinators import DetectionState, LanguageDetectionCoordinator
from accessible_translator.core import AUTO_DETECT_CODE, Session
from accessible_translator.services import GatewayError, UnsupportedLanguageError

FRENCH_TEXT = "Bonjour, comment allez-vous?"


@pytest.fixture
def detector(session, mock_gateway, immediate_pool):
    """Create a LanguageDetectionCoordinator that runs requests synchronously."""
    return LanguageDetectionCoordinator(
        session=session,
        gateway=mock_gateway,
        thread_pool=immediate_pool,
    )


def type_text(detector, session, text):
    session.input_text = text
    detector.evaluate()


class TestDetectionInitialization:
    def test_starts_idle(self, detector, session):
        assert detector.state is DetectionState.IDLE
        assert detector.snapshot is None
        assert not session.is_detecting_language

    def test_default_debounce_is_700ms(self, detector):
        assert detector.debounce_ms == 700

    def test_rejects_unknown_fallback_language(self, session, mock_gateway):
        with pytest.raises(ValueError):
            LanguageDetectionCoordinator(session, mock_gateway, fallback_source_language="xx")

    def test_rejects_missing_gateway(self, session):
        with pytest.raises(ValueError):
            LanguageDetectionCoordinator(session, None)


class TestDebouncing:
    """Tests for entering and leaving the debounce window."""

    def test_long_input_with_auto_source_starts_debounce(self, detector, session, mock_gateway):
        type_text(detector, session, FRENCH_TEXT)

        assert detector.state is DetectionState.DEBOUNCING
        assert detector.snapshot == FRENCH_TEXT
        assert session.is_detecting_language
        assert detector._debounce_timer.isActive()
        mock_gateway.detect_language.assert_not_called()

    def test_short_input_stays_idle(self, detector, session):
        type_text(detector, session, "   Bonjour   ")

        assert detector.state is DetectionState.IDLE
        assert not detector._debounce_timer.isActive()

    def test_exactly_ten_trimmed_chars_stays_idle(self, detector, session):
        type_text(detector, session, "  0123456789  ")
        assert detector.state is DetectionState.IDLE

        type_text(detector, session, "01234567890")
        assert detector.state is DetectionState.DEBOUNCING

    def test_concrete_source_stays_idle(self, detector, session):
        session.source_lang = "fr"
        type_text(detector, session, FRENCH_TEXT)

        assert detector.state is DetectionState.IDLE
        assert not session.is_detecting_language

    def test_new_input_replaces_snapshot(self, detector, session):
        type_text(detector, session, "Bonjour tout le monde")
        type_text(detector, session, FRENCH_TEXT)

        assert detector.snapshot == FRENCH_TEXT

    def test_shrinking_input_cancels_pending_debounce(self, detector, session):
        type_text(detector, session, FRENCH_TEXT)
        type_text(detector, session, "Bonjour")

        assert detector.state is DetectionState.IDLE
        assert not detector._debounce_timer.isActive()
        assert not session.is_detecting_language

    def test_cancel_returns_to_idle(self, detector, session):
        type_text(detector, session, FRENCH_TEXT)
        detector.cancel()

        assert detector.state is DetectionState.IDLE
        assert not detector._debounce_timer.isActive()

    def test_stale_timeout_does_nothing(self, detector, session, mock_gateway):
        detector._on_debounce_timeout()
        mock_gateway.detect_language.assert_not_called()


class TestDetectionResults:
    """Tests for applying detection outcomes."""

    def test_detected_language_applied_after_debounce(self, detector, session, mock_gateway):
        mock_gateway.detect_language.return_value = "fr"
        detected_spy = MagicMock()
        detector.language_detected.connect(detected_spy)

        type_text(detector, session, FRENCH_TEXT)
        detector._on_debounce_timeout()

        mock_gateway.detect_language.assert_called_once_with(FRENCH_TEXT)
        assert session.source_lang == "fr"
        assert detector.state is DetectionState.IDLE
        assert not session.is_detecting_language
        detected_spy.assert_called_once_with("fr")

    def test_target_reassigned_to_english_when_it_clashes(self, detector, session, mock_gateway):
        session.target_lang = "fr"
        mock_gateway.detect_language.return_value = "fr"

        type_text(detector, session, FRENCH_TEXT)
        detector._on_debounce_timeout()

        assert session.source_lang == "fr"
        assert session.target_lang == "en"

    def test_target_reassigned_to_first_other_when_english_detected(self, detector, session, mock_gateway):
        session.target_lang = "en"
        mock_gateway.detect_language.return_value = "en"

        type_text(detector, session, "Hello, how are you today?")
        detector._on_debounce_timeout()

        assert session.source_lang == "en"
        assert session.target_lang == "ar"

    def test_target_untouched_when_no_clash(self, detector, session, mock_gateway):
        mock_gateway.detect_language.return_value = "fr"

        type_text(detector, session, FRENCH_TEXT)
        detector._on_debounce_timeout()

        assert session.target_lang == "it"

    def test_gateway_failure_falls_back_to_english(self, detector, session, mock_gateway):
        mock_gateway.detect_language.side_effect = GatewayError("Failed to detect language.")
        failed_spy = MagicMock()
        detector.detection_failed.connect(failed_spy)

        type_text(detector, session, FRENCH_TEXT)
        detector._on_debounce_timeout()

        assert session.source_lang == "en"
        assert session.error is None
        assert detector.state is DetectionState.IDLE
        failed_spy.assert_called_once_with("Failed to detect language.")

    def test_unsupported_language_falls_back(self, detector, session, mock_gateway):
        mock_gateway.detect_language.side_effect = UnsupportedLanguageError("Klingon")

        type_text(detector, session, "nuqneH, yIDoghQo' jIH")
        detector._on_debounce_timeout()

        assert session.source_lang == "en"

    def test_fallback_language_is_configurable(self, session, mock_gateway, immediate_pool):
        detector = LanguageDetectionCoordinator(
            session=session,
            gateway=mock_gateway,
            fallback_source_language="de",
            thread_pool=immediate_pool,
        )
        mock_gateway.detect_language.side_effect = GatewayError()

        type_text(detector, session, FRENCH_TEXT)
        detector._on_debounce_timeout()

        assert session.source_lang == "de"

    def test_repeated_detection_is_idempotent(self, detector, session, mock_gateway):
        mock_gateway.detect_language.return_value = "fr"

        for _ in range(2):
            session.source_lang = AUTO_DETECT_CODE
            type_text(detector, session, FRENCH_TEXT)
            detector._on_debounce_timeout()
            assert session.source_lang == "fr"

        assert mock_gateway.detect_language.call_count == 2


class TestDetectionRaces:
    """Late results must never override newer state."""

    @pytest.fixture
    def deferred_detector(self, session, mock_gateway, deferred_pool):
        return LanguageDetectionCoordinator(
            session=session,
            gateway=mock_gateway,
            thread_pool=deferred_pool,
        )

    def test_user_choice_during_flight_wins(self, deferred_detector, session, mock_gateway, deferred_pool):
        mock_gateway.detect_language.return_value = "fr"
        type_text(deferred_detector, session, FRENCH_TEXT)
        deferred_detector._on_debounce_timeout()
        assert deferred_detector.state is DetectionState.DETECTING

        # User picks German while the request is in flight
        session.source_lang = "de"
        deferred_detector.evaluate()
        deferred_pool.run_all()

        assert session.source_lang == "de"
        assert deferred_detector.state is DetectionState.IDLE

    def test_user_choice_wins_over_late_failure(self, deferred_detector, session, mock_gateway, deferred_pool):
        mock_gateway.detect_language.side_effect = GatewayError()
        type_text(deferred_detector, session, FRENCH_TEXT)
        deferred_detector._on_debounce_timeout()

        session.source_lang = "es"
        deferred_detector.evaluate()
        deferred_pool.run_all()

        assert session.source_lang == "es"

    def test_superseded_snapshot_result_discarded(self, deferred_detector, session, mock_gateway, deferred_pool):
        mock_gateway.detect_language.return_value = "fr"
        type_text(deferred_detector, session, FRENCH_TEXT)
        deferred_detector._on_debounce_timeout()

        # More typing starts a new cycle before the first answer arrives
        type_text(deferred_detector, session, FRENCH_TEXT + " Très bien, merci.")
        deferred_pool.run_all()

        assert session.source_lang == AUTO_DETECT_CODE
        assert deferred_detector.state is DetectionState.DEBOUNCING

    def test_one_request_per_settled_snapshot(self, deferred_detector, session, mock_gateway, deferred_pool):
        for text in ("Bonjour tout", "Bonjour tout le", "Bonjour tout le monde"):
            type_text(deferred_detector, session, text)
        deferred_detector._on_debounce_timeout()

        assert len(deferred_pool.pending) == 1
        deferred_pool.run_all()
        mock_gateway.detect_language.assert_called_once_with("Bonjour tout le monde")


class TestDetectionSignals:
    def test_state_changed_emitted_on_evaluate(self, detector, session):
        spy = MagicMock()
        detector.state_changed.connect(spy)

        type_text(detector, session, FRENCH_TEXT)

        spy.assert_called()


class TestDebounceTimer:
    """Detection driven by the real single-shot timer instead of a manual timeout."""

    @pytest.fixture
    def timed_detector(self, session, mock_gateway, immediate_pool):
        return LanguageDetectionCoordinator(
            session=session,
            gateway=mock_gateway,
            debounce_ms=50,
            thread_pool=immediate_pool,
        )

    def test_timer_fires_detection_after_quiet_period(self, timed_detector, session, mock_gateway, wait_until):
        mock_gateway.detect_language.return_value = "fr"

        type_text(timed_detector, session, FRENCH_TEXT)

        assert wait_until(lambda: session.source_lang == "fr")
        mock_gateway.detect_language.assert_called_once_with(FRENCH_TEXT)
        assert timed_detector.state is DetectionState.IDLE
        assert not session.is_detecting_language

    def test_typing_inside_window_restarts_timer(self, session, mock_gateway, immediate_pool, wait_until):
        detector = LanguageDetectionCoordinator(
            session=session,
            gateway=mock_gateway,
            debounce_ms=300,
            thread_pool=immediate_pool,
        )
        mock_gateway.detect_language.return_value = "fr"
        final_text = FRENCH_TEXT + " Très bien."

        type_text(detector, session, FRENCH_TEXT)
        QTest.qWait(20)
        type_text(detector, session, final_text)

        assert wait_until(lambda: session.source_lang == "fr")
        mock_gateway.detect_language.assert_called_once_with(final_text)

    def test_concrete_source_never_fires(self, timed_detector, session, mock_gateway):
        session.source_lang = "es"
        type_text(timed_detector, session, FRENCH_TEXT)

        QTest.qWait(150)

        mock_gateway.detect_language.assert_not_called()
        assert session.source_lang == "es"
