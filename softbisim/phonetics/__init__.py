"""
Language detection and phonetic normalization for personal names.

Provides the detect/normalize pair that feeds the Soft-Bisim engine:
German, Polish and Spanish rewrite rules, Cyrillic and Hebrew
transliteration, and a language-independent fallback.
"""

from .language import LanguageTag, detect_language, LANGUAGE_RULES
from .normalizer import (
    PhoneticNormalizer,
    normalize,
    apply_rules,
    generic_phonetic_transform,
    reduce_vowels,
    transliterate_russian,
    transliterate_hebrew,
)

__all__ = [
    'LanguageTag',
    'detect_language',
    'LANGUAGE_RULES',
    'PhoneticNormalizer',
    'normalize',
    'apply_rules',
    'generic_phonetic_transform',
    'reduce_vowels',
    'transliterate_russian',
    'transliterate_hebrew',
]
