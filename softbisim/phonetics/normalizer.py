"""
Language-aware phonetic normalization of personal names.

Each language has an ordered rewrite table. Tables are applied in a
single left-to-right pass: at every position the first listed pattern
that matches wins, and replaced text is never re-scanned. Cyrillic and
Hebrew names are transliterated to Latin and then go through the
language-independent rules.
"""

import re
import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Tuple

from .language import LanguageTag, detect_language

logger = logging.getLogger(__name__)


GERMAN_RULES = MappingProxyType({
    'sch': 'sh',
    'ch': 'k',
    'tz': 'ts',
    'z': 'ts',
    'ss': 's',
    'eu': 'oy',
    'ä': 'ae',
    'ö': 'oe',
    'ü': 'ue',
    'ß': 'ss',
})

POLISH_RULES = MappingProxyType({
    'cz': 'ch',
    'sz': 'sh',
    'w': 'v',
    'ł': 'l',
    'ń': 'n',
    'ś': 's',
    'ź': 'z',
    'ż': 'z',
    'ą': 'a',
    'ę': 'e',
})

SPANISH_RULES = MappingProxyType({
    'll': 'y',
    'ch': 'k',
    'ñ': 'n',
    'v': 'b',
    'ce': 'se',
    'ci': 'si',
    'z': 's',
    'j': 'h',
    'h': '',
})

GENERIC_RULES = MappingProxyType({
    'ph': 'f',
    'ck': 'k',
    'gh': 'g',
    'sch': 'sh',
    'ch': 'k',
    'th': 't',
    'sh': 's',
    'cz': 'c',
    'qu': 'k',
    'gn': 'n',
    'wr': 'r',
    'kn': 'n',
    'wh': 'w',
    'dg': 'g',
})

DOUBLE_LETTERS = ('tt', 'll', 'ss', 'pp', 'rr', 'mm')

VOWELS = 'aeiou'

CYRILLIC_TO_LATIN = MappingProxyType({
    'ш': 'sh', 'ч': 'ch', 'ц': 'ts', 'ж': 'zh',
    'ю': 'yu', 'я': 'ya', 'х': 'kh', 'й': 'y',
    'ё': 'yo', 'э': 'e', 'ы': 'i', 'щ': 'shch',
    'ъ': '', 'ь': '',
    'а': 'a', 'б': 'b', 'в': 'v', 'г': 'g',
    'д': 'd', 'е': 'e', 'з': 'z', 'и': 'i',
    'к': 'k', 'л': 'l', 'м': 'm', 'н': 'n',
    'о': 'o', 'п': 'p', 'р': 'r', 'с': 's',
    'т': 't', 'у': 'u', 'ф': 'f',
})

HEBREW_TO_LATIN = MappingProxyType({
    'א': 'a', 'ב': 'b', 'ג': 'g', 'ד': 'd',
    'ה': 'h', 'ו': 'v', 'ז': 'z', 'ח': 'ch',
    'ט': 't', 'י': 'y', 'כ': 'k', 'ל': 'l',
    'מ': 'm', 'נ': 'n', 'ס': 's', 'ע': 'a',
    'פ': 'p', 'צ': 'tz', 'ק': 'k', 'ר': 'r',
    'ש': 'sh', 'ת': 't',
    # final forms
    'ך': 'k', 'ם': 'm', 'ן': 'n', 'ף': 'p', 'ץ': 'tz',
})


@lru_cache(maxsize=None)
def _compile(patterns: Tuple[str, ...]) -> re.Pattern:
    return re.compile("|".join(re.escape(pattern) for pattern in patterns))


_CYRILLIC_TABLE = str.maketrans(dict(CYRILLIC_TO_LATIN))
_HEBREW_TABLE = str.maketrans(dict(HEBREW_TO_LATIN))


def apply_rules(text: str, rules: Mapping[str, str]) -> str:
    """
    Rewrite text with an ordered rule table in one pass.

    Args:
        text: Input text
        rules: Ordered pattern -> replacement mapping

    Returns:
        Rewritten text
    """
    pattern = _compile(tuple(rules))
    return pattern.sub(lambda m: rules[m.group(0)], text)


def generic_phonetic_transform(name: str) -> str:
    """Language-independent digraph, silent-h and double-letter rules."""
    name = apply_rules(name.lower(), GENERIC_RULES)
    name = name.replace('h', '')
    for double in DOUBLE_LETTERS:
        name = name.replace(double, double[0])
    return name


def german_rules(name: str) -> str:
    return apply_rules(name.lower(), GERMAN_RULES)


def polish_rules(name: str) -> str:
    return apply_rules(name.lower(), POLISH_RULES)


def spanish_rules(name: str) -> str:
    return apply_rules(name.lower(), SPANISH_RULES)


def transliterate_russian(name: str) -> str:
    return name.lower().translate(_CYRILLIC_TABLE)


def transliterate_hebrew(name: str) -> str:
    return name.lower().translate(_HEBREW_TABLE)


def reduce_vowels(name: str) -> str:
    """Keep the first character, drop every later vowel."""
    if len(name) > 1:
        return name[0] + ''.join(c for c in name[1:] if c not in VOWELS)
    return name


LANGUAGE_TRANSFORMS = MappingProxyType({
    LanguageTag.GERMAN: german_rules,
    LanguageTag.POLISH: polish_rules,
    LanguageTag.SPANISH: spanish_rules,
    LanguageTag.RUSSIAN: lambda name: generic_phonetic_transform(transliterate_russian(name)),
    LanguageTag.HEBREW: lambda name: generic_phonetic_transform(transliterate_hebrew(name)),
    LanguageTag.GENERIC: generic_phonetic_transform,
})


def normalize(name: str, tag: LanguageTag, vowel_reduction: bool = True) -> str:
    """
    Normalize a name with the rules for the given language.

    Args:
        name: Raw name
        tag: Language whose rules apply
        vowel_reduction: Drop non-initial vowels afterwards

    Returns:
        Lowercase normalized name
    """
    normalized = LANGUAGE_TRANSFORMS[tag](name)
    if vowel_reduction:
        normalized = reduce_vowels(normalized)
    return normalized


class PhoneticNormalizer:
    """
    Detect-then-normalize pipeline applied to both sides of a comparison.

    The detector is pluggable; any callable returning a LanguageTag works.
    """

    def __init__(
        self,
        reduce_vowels: bool = True,
        detector: Optional[Callable[[str], LanguageTag]] = None,
    ):
        self.reduce_vowels = reduce_vowels
        self.detector = detector or detect_language

    def detect(self, name: str) -> LanguageTag:
        tag = self.detector(name)
        logger.debug(f"Detected language for {name!r}: {tag.value}")
        return tag

    def normalize(self, name: str, tag: Optional[LanguageTag] = None) -> str:
        if tag is None:
            tag = self.detect(name)
        return normalize(name, tag, vowel_reduction=self.reduce_vowels)

    def __call__(self, name: str) -> str:
        return self.normalize(name)
