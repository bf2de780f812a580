"""
Weighted bigram alignment (Soft-Bisim distance).

Edit distance over bigram sequences with separately weighted match,
substitution, case-change, insertion, deletion and adjacent-transposition
operations.
"""

from typing import Optional, Sequence
import logging

from .bigrams import compute_bigrams
from .weights import Weights
from ..phonetics.normalizer import PhoneticNormalizer

logger = logging.getLogger(__name__)


def alignment_cost(
    source: Sequence[str],
    target: Sequence[str],
    weights: Weights,
) -> float:
    """
    Minimum cost of editing one bigram sequence into another.

    Only the last three rows of the DP matrix are kept: the transposition
    rule reads ``d[i-2][j-2]``.

    Args:
        source: Bigrams of the first name
        target: Bigrams of the second name
        weights: Operation costs

    Returns:
        Total alignment cost ``d[m][n]``
    """
    n = len(target)

    before_previous: Optional[list] = None
    previous = [j * weights.insert for j in range(n + 1)]

    for i in range(1, len(source) + 1):
        current = [i * weights.delete] + [0.0] * n
        a = source[i - 1]

        for j in range(1, n + 1):
            b = target[j - 1]

            if a == b:
                current[j] = previous[j - 1] + weights.match
                continue

            if a.lower() == b.lower():
                substitution = weights.case_change
            else:
                substitution = weights.replace

            cost = min(
                previous[j] + weights.delete,
                current[j - 1] + weights.insert,
                previous[j - 1] + substitution,
            )

            # Adjacent bigrams swapped
            if i > 1 and j > 1 and a == target[j - 2] and source[i - 2] == b:
                cost = min(cost, before_previous[j - 2] + weights.transposition)

            current[j] = cost

        before_previous, previous = previous, current

    return previous[n]


class WeightedAlignment:
    """
    Soft-Bisim distance between raw names.

    Both names go through the same normalizer before their bigrams are
    aligned, so a name and its transliteration are compared in one script.
    """

    def __init__(
        self,
        weights: Optional[Weights] = None,
        normalizer: Optional[PhoneticNormalizer] = None,
    ):
        self.weights = weights or Weights.balanced()
        self.normalizer = normalizer or PhoneticNormalizer()

    def bigrams(self, name: str) -> list:
        return compute_bigrams(self.normalizer.normalize(name))

    def distance(self, name1: str, name2: str, weights: Optional[Weights] = None) -> float:
        """
        Compute the Soft-Bisim distance between two raw names.

        Args:
            name1: First name, any supported script
            name2: Second name, any supported script
            weights: Overrides the instance weights for this call

        Returns:
            Alignment cost of the normalized bigram sequences
        """
        weights = weights or self.weights
        bigrams1 = self.bigrams(name1)
        bigrams2 = self.bigrams(name2)

        cost = alignment_cost(bigrams1, bigrams2, weights)
        logger.debug(f"distance({name1!r}, {name2!r}) = {cost:.4f}")
        return cost


def soft_bisim_distance(
    name1: str,
    name2: str,
    weights: Weights,
    normalizer: Optional[PhoneticNormalizer] = None,
) -> float:
    """Soft-Bisim distance between two raw names under the given weights."""
    return WeightedAlignment(weights, normalizer).distance(name1, name2)
