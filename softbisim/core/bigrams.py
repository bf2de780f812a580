"""Bigram extraction over Unicode code points."""

from typing import Iterator, List


def iter_bigrams(text: str) -> Iterator[str]:
    """Yield overlapping 2-code-point windows of text, left to right."""
    for i in range(len(text) - 1):
        yield text[i:i + 2]


def compute_bigrams(text: str) -> List[str]:
    """
    Split a normalized name into overlapping bigrams.

    Python strings index by code point, so Cyrillic and Hebrew input is
    windowed per character rather than per byte.

    Args:
        text: Normalized name

    Returns:
        List of ``max(len(text) - 1, 0)`` bigrams
    """
    if not text:
        return []
    return list(iter_bigrams(text))


def bigram_count(text: str) -> int:
    return max(len(text) - 1, 0)
