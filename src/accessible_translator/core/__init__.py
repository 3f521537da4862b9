"""Core domain models - languages, modes and session state."""

from .language import AUTO_DETECT, AUTO_DETECT_CODE, DEFAULT_CATALOG, LANGUAGES, Language, LanguageCatalog
from .session import (
    DEFAULT_EASY_READ_LEVEL,
    DEFAULT_TARGET_LANGUAGE,
    MAX_EASY_READ_LEVEL,
    MAX_INPUT_CHARS,
    MIN_DETECTION_CHARS,
    MIN_EASY_READ_LEVEL,
    ImagePreview,
    Session,
    clamp_easy_read_level,
    truncate_input,
)
from .translation_mode import TranslationMode

__all__ = [
    "AUTO_DETECT",
    "AUTO_DETECT_CODE",
    "DEFAULT_CATALOG",
    "LANGUAGES",
    "Language",
    "LanguageCatalog",
    "TranslationMode",
    "Session",
    "ImagePreview",
    "DEFAULT_EASY_READ_LEVEL",
    "DEFAULT_TARGET_LANGUAGE",
    "MAX_EASY_READ_LEVEL",
    "MAX_INPUT_CHARS",
    "MIN_DETECTION_CHARS",
    "MIN_EASY_READ_LEVEL",
    "clamp_easy_read_level",
    "truncate_input",
]
