"""AI Gateway - abstract contract between the coordinators and the generation service."""

from abc import ABC, abstractmethod

SUPPORTED_IMAGE_TYPES = ("image/png", "image/jpeg", "image/webp")


class AIGateway(ABC):
    """
    Turns one domain intent into one call to the generation service.

    Every operation either returns text or raises a TranslatorError subclass.
    Implementations keep no per-call state, so one instance may serve a
    detection and a generation request at the same time.
    """

    @abstractmethod
    def translate(self, text: str, source_lang_name: str, target_lang_name: str) -> str:
        """
        Translate text literally, without commentary.

        Args:
            text: Non-empty text to translate.
            source_lang_name: Display name of the source language.
            target_lang_name: Display name of the target language.

        Returns:
            The translated text, verbatim from the model.
        """

    @abstractmethod
    def simplify(self, text: str, lang_name: str, level: int) -> str:
        """Rewrite text in the same language at a simplicity level from 1 to 15 (15 simplest)."""

    @abstractmethod
    def convert_to_aac(self, text: str, lang_name: str) -> str:
        """Reduce text to a core-vocabulary keyword sequence joined by " - "."""

    @abstractmethod
    def detect_language(self, text: str) -> str:
        """
        Detect the language of text.

        Returns:
            Catalog code of the detected language.

        Raises:
            GatewayError: The service call failed.
            UnsupportedLanguageError: The named language is not in the catalog.
        """

    @abstractmethod
    def extract_text(self, image_bytes: bytes, mime_type: str) -> str:
        """Extract all legible text from an image; empty string when there is none."""
