"""
Accessible Translator - translate, simplify, or convert text to AAC keywords.

This package provides a desktop application built around one AI model:
- Literal translation between catalog languages
- Easy-to-read rewrites at a chosen simplicity level
- AAC core-vocabulary keyword sequences
- Text extraction from images, with debounced language detection
"""

__version__ = "0.1.0"

# Make key components available at package level
from accessible_translator.core import Language, LanguageCatalog, Session, TranslationMode

__all__ = [
    "Language",
    "LanguageCatalog",
    "Session",
    "TranslationMode",
]
