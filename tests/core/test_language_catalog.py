"""Unit tests for LanguageCatalog."""

import pytest

from accessible_translator.core import AUTO_DETECT_CODE, DEFAULT_CATALOG, LANGUAGES, Language, LanguageCatalog


@pytest.fixture
def small_catalog():
    return LanguageCatalog([
        Language("en", "English"),
        Language("fr", "French"),
        Language("it", "Italian"),
    ])


class TestCatalogLookups:
    """Tests for code and name lookups."""

    def test_get_returns_language_for_known_code(self, small_catalog):
        assert small_catalog.get("fr") == Language("fr", "French")

    def test_get_returns_none_for_unknown_code(self, small_catalog):
        assert small_catalog.get("xx") is None

    def test_name_for_falls_back_to_code(self, small_catalog):
        assert small_catalog.name_for("fr") == "French"
        assert small_catalog.name_for("xx") == "xx"

    def test_find_by_name_is_case_insensitive_and_trimmed(self, small_catalog):
        assert small_catalog.find_by_name("  french\n").code == "fr"
        assert small_catalog.find_by_name("ITALIAN").code == "it"

    def test_find_by_name_returns_none_for_unsupported(self, small_catalog):
        assert small_catalog.find_by_name("Klingon") is None

    def test_contains(self, small_catalog):
        assert "en" in small_catalog
        assert AUTO_DETECT_CODE not in small_catalog


class TestCatalogOptions:
    """Tests for source/target option lists."""

    def test_source_options_start_with_detect_language(self, small_catalog):
        options = small_catalog.source_options()
        assert options[0].code == AUTO_DETECT_CODE
        assert options[0].name == "Detect Language"
        assert [lang.code for lang in options[1:]] == ["en", "fr", "it"]

    @pytest.mark.parametrize("source", [lang.code for lang in LANGUAGES] + [AUTO_DETECT_CODE])
    def test_target_options_never_contain_source(self, source):
        targets = DEFAULT_CATALOG.target_options(source)
        expected = [lang for lang in LANGUAGES if lang.code != source]
        assert targets == expected

    def test_auto_is_never_a_target(self):
        codes = [lang.code for lang in DEFAULT_CATALOG.target_options("en")]
        assert AUTO_DETECT_CODE not in codes


class TestReplacementTarget:
    """Tests for picking a target that differs from a new source."""

    def test_prefers_english(self, small_catalog):
        assert small_catalog.replacement_target("it") == "en"

    def test_first_other_entry_when_excluded_is_english(self, small_catalog):
        assert small_catalog.replacement_target("en") == "fr"

    def test_none_when_catalog_has_no_alternative(self):
        catalog = LanguageCatalog([Language("en", "English")])
        assert catalog.replacement_target("en") is None


class TestCatalogValidation:
    def test_duplicate_codes_rejected(self):
        with pytest.raises(ValueError):
            LanguageCatalog([Language("en", "English"), Language("en", "Inglese")])

    def test_auto_code_reserved(self):
        with pytest.raises(ValueError):
            LanguageCatalog([Language("auto", "Auto")])

    def test_default_catalog_has_english_and_default_target(self):
        assert "en" in DEFAULT_CATALOG
        assert "it" in DEFAULT_CATALOG
