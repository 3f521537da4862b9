"""Session - ephemeral UI state for one translator window."""

from dataclasses import dataclass, field
from typing import Optional

from .language import AUTO_DETECT_CODE
from .translation_mode import TranslationMode

MAX_INPUT_CHARS = 20000
MIN_EASY_READ_LEVEL = 1
MAX_EASY_READ_LEVEL = 15
DEFAULT_EASY_READ_LEVEL = 8
DEFAULT_TARGET_LANGUAGE = "it"
# Detection only starts once the trimmed input is longer than this.
MIN_DETECTION_CHARS = 10


def clamp_easy_read_level(level: int) -> int:
    return max(MIN_EASY_READ_LEVEL, min(MAX_EASY_READ_LEVEL, int(level)))


def truncate_input(text: str) -> str:
    return text[:MAX_INPUT_CHARS]


@dataclass(frozen=True)
class ImagePreview:
    """Reference to the last uploaded image, kept for display only."""

    data: bytes = field(repr=False)
    mime_type: str


@dataclass
class Session:
    """
    Mutable session state.

    Owned by TranslationSessionCoordinator; LanguageDetectionCoordinator
    only touches source_lang, target_lang and is_detecting_language.
    """

    mode: TranslationMode = TranslationMode.NORMAL
    input_text: str = ""
    output_text: str = ""
    source_lang: str = AUTO_DETECT_CODE
    target_lang: str = DEFAULT_TARGET_LANGUAGE
    easy_read_level: int = DEFAULT_EASY_READ_LEVEL
    is_loading: bool = False
    is_detecting_language: bool = False
    error: Optional[str] = None
    image_preview: Optional[ImagePreview] = None

    @property
    def has_input(self) -> bool:
        return bool(self.input_text.strip())

    @property
    def is_auto_source(self) -> bool:
        return self.source_lang == AUTO_DETECT_CODE

    def can_generate(self) -> bool:
        """True when Generate would dispatch a request."""
        return self.has_input and not self.is_auto_source and not self.is_loading

    def can_swap(self) -> bool:
        return self.mode.supports_target_language and not self.is_auto_source
