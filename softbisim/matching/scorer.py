"""
Similarity scoring on top of the Soft-Bisim distance.

Converts an alignment cost into a length-normalized similarity and
packages per-comparison details for callers that want more than a
single number.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional
import logging

from ..core.alignment import alignment_cost, WeightedAlignment
from ..core.bigrams import compute_bigrams
from ..core.weights import Weights
from ..phonetics.language import LanguageTag
from ..phonetics.normalizer import PhoneticNormalizer

logger = logging.getLogger(__name__)


def distance_to_similarity(
    distance: float,
    name1: str,
    name2: str,
    clamp: bool = False,
) -> float:
    """
    Normalize a distance by the longer original name.

    Lengths are counted in code points of the names as given, before
    normalization. Two empty names are identical and score 1.0.

    Args:
        distance: Soft-Bisim distance between the names
        name1: First raw name
        name2: Second raw name
        clamp: Floor the result at 0.0

    Returns:
        ``1 - distance / max(len(name1), len(name2))``
    """
    longest = max(len(name1), len(name2))
    if longest == 0:
        return 1.0

    score = 1.0 - distance / longest
    if clamp:
        score = max(score, 0.0)
    return score


@dataclass
class MatchResult:
    """Result of comparing two names."""

    name1: str
    name2: str
    normalized1: str
    normalized2: str
    language1: LanguageTag
    language2: LanguageTag
    distance: float
    similarity: float
    is_match: bool
    weights: Weights = field(default_factory=Weights.balanced)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name1': self.name1,
            'name2': self.name2,
            'normalized1': self.normalized1,
            'normalized2': self.normalized2,
            'language1': self.language1.value,
            'language2': self.language2.value,
            'distance': self.distance,
            'similarity': self.similarity,
            'is_match': self.is_match,
            'weights': self.weights.to_dict(),
        }

    def __str__(self) -> str:
        """Human-readable description."""
        return (
            f"{self.name1} <-> {self.name2}\n"
            f"  Normalized: {self.normalized1} ({self.language1.value}) / "
            f"{self.normalized2} ({self.language2.value})\n"
            f"  Distance:   {self.distance:.4f}\n"
            f"  Similarity: {self.similarity:.4f}\n"
            f"  Match:      {'yes' if self.is_match else 'no'}"
        )


class SimilarityScorer:
    """
    Scores name pairs with a fixed cost model and normalizer.

    ``similarity`` follows the raw formula and may go below zero;
    ``compare`` clamps at zero by default.
    """

    def __init__(
        self,
        weights: Optional[Weights] = None,
        normalizer: Optional[PhoneticNormalizer] = None,
        match_threshold: float = 0.8,
    ):
        """
        Initialize the scorer.

        Args:
            weights: Cost model (balanced weights when omitted)
            normalizer: Normalizer shared by both names
            match_threshold: Minimum similarity counted as a match
        """
        self.weights = weights or Weights.balanced()
        self.normalizer = normalizer or PhoneticNormalizer()
        self.match_threshold = match_threshold
        self.alignment = WeightedAlignment(self.weights, self.normalizer)

    def distance(self, name1: str, name2: str, weights: Optional[Weights] = None) -> float:
        return self.alignment.distance(name1, name2, weights or self.weights)

    def similarity(
        self,
        name1: str,
        name2: str,
        weights: Optional[Weights] = None,
        clamp: bool = False,
    ) -> float:
        distance = self.distance(name1, name2, weights)
        return distance_to_similarity(distance, name1, name2, clamp=clamp)

    def compare(
        self,
        name1: str,
        name2: str,
        weights: Optional[Weights] = None,
        clamp: bool = True,
    ) -> MatchResult:
        """
        Compare two names and keep the intermediate results.

        Args:
            name1: First raw name
            name2: Second raw name
            weights: Overrides the scorer's weights for this call
            clamp: Floor the similarity at 0.0

        Returns:
            MatchResult with normalized forms, languages and scores
        """
        weights = weights or self.weights

        language1 = self.normalizer.detect(name1)
        language2 = self.normalizer.detect(name2)
        normalized1 = self.normalizer.normalize(name1, language1)
        normalized2 = self.normalizer.normalize(name2, language2)

        distance = alignment_cost(
            compute_bigrams(normalized1),
            compute_bigrams(normalized2),
            weights,
        )
        similarity = distance_to_similarity(distance, name1, name2, clamp=clamp)

        return MatchResult(
            name1=name1,
            name2=name2,
            normalized1=normalized1,
            normalized2=normalized2,
            language1=language1,
            language2=language2,
            distance=distance,
            similarity=similarity,
            is_match=similarity >= self.match_threshold,
            weights=weights,
        )


def similarity(
    name1: str,
    name2: str,
    weights: Weights,
    normalizer: Optional[PhoneticNormalizer] = None,
    clamp: bool = False,
) -> float:
    """Length-normalized Soft-Bisim similarity of two raw names."""
    return SimilarityScorer(weights, normalizer).similarity(name1, name2, clamp=clamp)
