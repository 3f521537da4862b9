"""Gemini Gateway - Implements the AI gateway via Google Gemini API."""

import logging
from typing import Optional, Union

import google.genai as genai
from google.genai import types

from accessible_translator.core import DEFAULT_CATALOG, LanguageCatalog
from accessible_translator.services.errors import (
    GatewayError,
    ImageInputError,
    MissingApiKeyError,
    UnsupportedLanguageError,
)
from accessible_translator.services.gateway.ai_gateway import SUPPORTED_IMAGE_TYPES, AIGateway
from accessible_translator.services.settings_manager import DEFAULT_MODEL_NAME

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Failed to get a response from the AI model."
DETECTION_FAILURE = "Failed to detect language."
EXTRACTION_FAILURE = "Failed to extract text from image."


class GeminiGateway(AIGateway):
    """
    AI gateway using Google Gemini API.

    One genai client is created per gateway and reused for every call.
    Calls are never retried; the caller decides what a failure means.
    """

    TRANSLATE_PROMPT = (
        "Translate the following text from {source_lang} to {target_lang}. "
        "Provide only the translated text, without any introductory phrases. "
        'Text: "{text}"'
    )

    SIMPLIFY_PROMPT = (
        "Rewrite the following text in {lang} to be very simple and easy to understand, "
        "at a simplicity level of {level} out of 15 (where 15 is the simplest). "
        'Provide only the simplified text. Text: "{text}"'
    )

    AAC_PROMPT = """You are an expert in Augmentative and Alternative Communication (AAC) systems. Your task is to convert the following text in {lang} into a sequence of core vocabulary words suitable for an AAC device.

Follow these critical AAC standards:
1.  **Simplify Grammar:** Reduce the sentence to its essential meaning. Remove articles (a, an, the), verb conjugations, plurals, and filler words.
2.  **Focus on Core Words:** Prioritize high-frequency, reusable words (e.g., "I", "want", "go", "more", "help", "drink", "eat").
3.  **Extract Intent:** Identify the primary intent of the message, not just the literal words.
4.  **Output Format:** Separate each word with a hyphen surrounded by spaces ( - ). Provide ONLY the keyword sequence.

For example, for the input "I would really like to have a big glass of cold water because I'm very thirsty", the correct output is: "I - want - drink - water".

Now, process the following text: "{text}\""""

    DETECT_PROMPT = (
        "Detect the language of the following text. Respond with ONLY the English name "
        'of the language (e.g., "English", "French", "Japanese"). Text: "{text}"'
    )

    EXTRACT_PROMPT = "Extract all text from this image. If no text is found, return an empty string."

    def __init__(
        self,
        api_key: Optional[str],
        model_name: str = DEFAULT_MODEL_NAME,
        catalog: LanguageCatalog = DEFAULT_CATALOG,
        client: Optional[genai.Client] = None,
    ):
        """
        Build the gateway.

        Args:
            api_key: Gemini API key. Missing or blank keys fail immediately.
            model_name: Gemini model identifier.
            catalog: Catalog used to map detected language names to codes.
            client: Pre-built client, mainly for tests.

        Raises:
            MissingApiKeyError: When no API key is given.
        """
        if not api_key or not api_key.strip():
            raise MissingApiKeyError()

        self.model_name = model_name
        self._catalog = catalog
        self._client = client if client is not None else genai.Client(api_key=api_key.strip())

    def translate(self, text: str, source_lang_name: str, target_lang_name: str) -> str:
        prompt = self.TRANSLATE_PROMPT.format(
            source_lang=source_lang_name,
            target_lang=target_lang_name,
            text=text,
        )
        return self._generate(prompt, GENERIC_FAILURE)

    def simplify(self, text: str, lang_name: str, level: int) -> str:
        prompt = self.SIMPLIFY_PROMPT.format(lang=lang_name, level=level, text=text)
        return self._generate(prompt, GENERIC_FAILURE)

    def convert_to_aac(self, text: str, lang_name: str) -> str:
        prompt = self.AAC_PROMPT.format(lang=lang_name, text=text)
        return self._generate(prompt, GENERIC_FAILURE)

    def detect_language(self, text: str) -> str:
        """Ask for the English language name and map it onto a catalog code."""
        prompt = self.DETECT_PROMPT.format(text=text)
        lang_name = self._generate(prompt, DETECTION_FAILURE)

        found = self._catalog.find_by_name(lang_name)
        if found is None:
            raise UnsupportedLanguageError(lang_name)
        return found.code

    def extract_text(self, image_bytes: bytes, mime_type: str) -> str:
        if mime_type not in SUPPORTED_IMAGE_TYPES:
            raise ImageInputError(f"Unsupported image type: {mime_type}")
        if not image_bytes:
            raise ImageInputError()

        contents = [
            types.Part.from_bytes(data=image_bytes, mime_type=mime_type),
            self.EXTRACT_PROMPT,
        ]
        return self._generate(contents, EXTRACTION_FAILURE, allow_empty=True)

    def _generate(
        self,
        contents: Union[str, list],
        failure_message: str,
        allow_empty: bool = False,
    ) -> str:
        """
        Issue exactly one generate_content call.

        Args:
            contents: Prompt text, or a list of parts for multimodal requests.
            failure_message: User-facing message for GatewayError.
            allow_empty: Treat an empty response as a valid empty answer.

        Returns:
            Response text, unmodified.
        """
        if isinstance(contents, str):
            logger.debug("Gemini request (%s): %s", self.model_name, contents)
        else:
            logger.debug("Gemini multimodal request (%s) with %d parts", self.model_name, len(contents))

        try:
            response = self._client.models.generate_content(
                model=self.model_name,
                contents=contents,
            )
        except Exception as exc:
            logger.warning("Gemini request failed: %s", exc, exc_info=True)
            raise GatewayError(failure_message) from exc

        text = getattr(response, "text", None)
        if not text:
            if allow_empty:
                return ""
            logger.warning("Gemini returned an empty response")
            raise GatewayError(failure_message)

        logger.debug("Gemini response length: %d chars", len(text))
        return text
