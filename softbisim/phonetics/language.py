"""
Surface-pattern language detection for personal names.

Rules are checked in a fixed priority order; the first matching rule
decides the tag and GENERIC is returned when none match.
"""

import re
from enum import Enum
from typing import Callable, Tuple


class LanguageTag(Enum):
    """Languages with dedicated normalization rules."""
    GERMAN = "german"
    POLISH = "polish"
    SPANISH = "spanish"
    RUSSIAN = "russian"
    HEBREW = "hebrew"
    GENERIC = "generic"


CYRILLIC_CHARS = re.compile(r"[\u0400-\u052F\u1C80-\u1C8F\u2DE0-\u2DFF\uA640-\uA69F]")
HEBREW_CHARS = re.compile(r"[\u0590-\u05FF\uFB1D-\uFB4F]")


def contains_cyrillic(text: str) -> bool:
    return CYRILLIC_CHARS.search(text) is not None


def contains_hebrew(text: str) -> bool:
    return HEBREW_CHARS.search(text) is not None


# (predicate, tag) pairs over the lowercased name, highest priority first
LANGUAGE_RULES: Tuple[Tuple[Callable[[str], bool], LanguageTag], ...] = (
    (lambda name: 'sch' in name or name.endswith('mann'), LanguageTag.GERMAN),
    (lambda name: 'cz' in name or 'sz' in name, LanguageTag.POLISH),
    (lambda name: name.startswith('ch') or name.endswith('ez'), LanguageTag.SPANISH),
    (contains_cyrillic, LanguageTag.RUSSIAN),
    (contains_hebrew, LanguageTag.HEBREW),
)


def detect_language(name: str) -> LanguageTag:
    """
    Guess the naming convention a name is written in.

    Args:
        name: Raw name in any script

    Returns:
        First matching LanguageTag, or LanguageTag.GENERIC
    """
    lowered = name.lower()
    for predicate, tag in LANGUAGE_RULES:
        if predicate(lowered):
            return tag
    return LanguageTag.GENERIC
