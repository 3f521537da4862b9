"""Text processing helpers for rendering model output."""

from accessible_translator.services.text_processing.aac_keywords import AAC_DELIMITER, split_aac_keywords

__all__ = [
    "AAC_DELIMITER",
    "split_aac_keywords",
]
