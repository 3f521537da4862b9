"""Error taxonomy shared by the gateway and the coordinators."""

from typing import Optional


class TranslatorError(Exception):
    """Base class for failures that carry a message safe to show to the user."""

    default_message = "An unknown error occurred."

    def __init__(self, user_message: Optional[str] = None):
        self.user_message = user_message or self.default_message
        super().__init__(self.user_message)


class GatewayError(TranslatorError):
    """The AI endpoint failed (transport, service error, empty response)."""

    default_message = "Failed to get a response from the AI model."


class UnsupportedLanguageError(TranslatorError):
    """Detection named a language that is not in the catalog."""

    def __init__(self, detected_name: str):
        self.detected_name = detected_name
        super().__init__(f'Detected language "{detected_name.strip()}" is not supported.')


class MissingApiKeyError(TranslatorError):
    """No API credential is configured, so no gateway can be built."""

    default_message = "API key not configured. Add GEMINI_API_KEY to .env file."


class ImageInputError(TranslatorError):
    """An uploaded image could not be read or has an unsupported type."""

    default_message = "Failed to read the image file."
