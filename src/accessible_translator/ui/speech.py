"""Speech Reader - reads text aloud with the platform speech engine."""

from typing import Optional

from PySide6.QtCore import QLocale
from PySide6.QtTextToSpeech import QTextToSpeech

from accessible_translator.core import AUTO_DETECT_CODE


class SpeechReader:
    """Thin wrapper over QTextToSpeech; the engine is created on first use."""

    def __init__(self):
        self._engine: Optional[QTextToSpeech] = None

    def speak(self, text: str, lang_code: str) -> None:
        """Stop any current utterance and read ``text`` in the given language."""
        if not text.strip():
            return

        if self._engine is None:
            self._engine = QTextToSpeech()

        self._engine.stop()
        if lang_code and lang_code != AUTO_DETECT_CODE:
            self._engine.setLocale(QLocale(lang_code))
        self._engine.say(text)
