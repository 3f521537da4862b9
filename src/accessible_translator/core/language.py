"""Language catalog - supported languages and lookups used by prompts and selectors."""

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class Language:
    """A selectable language."""

    code: str
    name: str


AUTO_DETECT_CODE = "auto"
AUTO_DETECT = Language(code=AUTO_DETECT_CODE, name="Detect Language")

LANGUAGES: tuple[Language, ...] = (
    Language("ar", "Arabic"),
    Language("bg", "Bulgarian"),
    Language("zh", "Chinese"),
    Language("hr", "Croatian"),
    Language("cs", "Czech"),
    Language("da", "Danish"),
    Language("nl", "Dutch"),
    Language("en", "English"),
    Language("et", "Estonian"),
    Language("fi", "Finnish"),
    Language("fr", "French"),
    Language("de", "German"),
    Language("el", "Greek"),
    Language("he", "Hebrew"),
    Language("hi", "Hindi"),
    Language("hu", "Hungarian"),
    Language("id", "Indonesian"),
    Language("ga", "Irish"),
    Language("it", "Italian"),
    Language("ja", "Japanese"),
    Language("ko", "Korean"),
    Language("lv", "Latvian"),
    Language("lt", "Lithuanian"),
    Language("mt", "Maltese"),
    Language("no", "Norwegian"),
    Language("pl", "Polish"),
    Language("pt", "Portuguese"),
    Language("ro", "Romanian"),
    Language("ru", "Russian"),
    Language("sk", "Slovak"),
    Language("sl", "Slovenian"),
    Language("es", "Spanish"),
    Language("sv", "Swedish"),
    Language("th", "Thai"),
    Language("tr", "Turkish"),
    Language("uk", "Ukrainian"),
    Language("vi", "Vietnamese"),
)


class LanguageCatalog:
    """
    Immutable lookup table over the supported languages.

    The auto-detect sentinel is only ever offered as a source option and is
    never part of ``languages``.
    """

    def __init__(self, languages: Iterable[Language]):
        self._languages = tuple(languages)
        self._by_code = {lang.code: lang for lang in self._languages}
        if len(self._by_code) != len(self._languages):
            raise ValueError("Language codes must be unique")
        if AUTO_DETECT_CODE in self._by_code:
            raise ValueError(f"'{AUTO_DETECT_CODE}' is reserved for language detection")

    @property
    def languages(self) -> tuple[Language, ...]:
        return self._languages

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def __len__(self) -> int:
        return len(self._languages)

    def get(self, code: str) -> Optional[Language]:
        return self._by_code.get(code)

    def name_for(self, code: str) -> str:
        """Display name for a code, or the code itself when it is unknown."""
        lang = self._by_code.get(code)
        return lang.name if lang else code

    def find_by_name(self, name: str) -> Optional[Language]:
        """Match an English language name case-insensitively, ignoring surrounding whitespace."""
        wanted = name.strip().lower()
        for lang in self._languages:
            if lang.name.lower() == wanted:
                return lang
        return None

    def source_options(self) -> list[Language]:
        return [AUTO_DETECT, *self._languages]

    def target_options(self, source_code: str) -> list[Language]:
        return [lang for lang in self._languages if lang.code != source_code]

    def replacement_target(self, excluded_code: str, preferred: str = "en") -> Optional[str]:
        """
        Pick a target language that differs from ``excluded_code``.

        Args:
            excluded_code: Code the target must not equal (usually the new source).
            preferred: Code to use when available and different.

        Returns:
            The preferred code, else the first other catalog code, else None
            when the catalog has nothing else to offer.
        """
        if preferred != excluded_code and preferred in self._by_code:
            return preferred
        for lang in self._languages:
            if lang.code != excluded_code:
                return lang.code
        return None


DEFAULT_CATALOG = LanguageCatalog(LANGUAGES)
