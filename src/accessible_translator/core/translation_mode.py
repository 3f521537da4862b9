"""Translation modes offered by the session."""

from enum import Enum


class TranslationMode(Enum):
    """What the Generate action produces from the input text."""

    NORMAL = "Normal"
    EASY_READ = "Easy to Read"
    AAC = "AAC"

    @property
    def label(self) -> str:
        return self.value

    @property
    def supports_target_language(self) -> bool:
        """Only plain translation has a target language (and a swap button)."""
        return self is TranslationMode.NORMAL
