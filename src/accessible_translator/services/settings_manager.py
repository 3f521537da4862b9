"""Settings Manager - Handles API key and runtime configuration."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from accessible_translator.core import DEFAULT_TARGET_LANGUAGE
from accessible_translator.services.errors import MissingApiKeyError

logger = logging.getLogger(__name__)

DEFAULT_MODEL_NAME = "gemini-2.5-flash"
DEFAULT_DEBOUNCE_MS = 700
DEFAULT_FALLBACK_SOURCE_LANGUAGE = "en"
DEFAULT_LOG_LEVEL = "INFO"


class SettingsManager:
    """
    Manages settings and API key configuration.

    Reads values from the process environment after loading the .env file
    in the project root.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_gemini_api_key(self) -> Optional[str]:
        """Get the Gemini API key from environment."""
        return self._get_str("GEMINI_API_KEY")

    def require_gemini_api_key(self) -> str:
        """Get the Gemini API key or raise MissingApiKeyError."""
        key = self.get_gemini_api_key()
        if key is None:
            raise MissingApiKeyError()
        return key

    def get_model_name(self) -> str:
        return self._get_str("GEMINI_MODEL") or DEFAULT_MODEL_NAME

    def get_detection_debounce_ms(self) -> int:
        """Delay between the last keystroke and a language detection request."""
        raw = self._get_str("DETECTION_DEBOUNCE_MS")
        if raw is None:
            return DEFAULT_DEBOUNCE_MS
        try:
            value = int(raw)
        except ValueError:
            logger.warning("Ignoring non-numeric DETECTION_DEBOUNCE_MS=%r", raw)
            return DEFAULT_DEBOUNCE_MS
        return max(0, value)

    def get_fallback_source_language(self) -> str:
        """Source language applied when detection fails or finds no match."""
        return self._get_str("FALLBACK_SOURCE_LANGUAGE") or DEFAULT_FALLBACK_SOURCE_LANGUAGE

    def get_default_target_language(self) -> str:
        return self._get_str("DEFAULT_TARGET_LANGUAGE") or DEFAULT_TARGET_LANGUAGE

    def get_log_level(self) -> str:
        return (self._get_str("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)

    @staticmethod
    def _get_str(name: str) -> Optional[str]:
        value = os.getenv(name)
        return value.strip() if value and value.strip() else None
