"""Fitness of a cost model over a labeled pair corpus."""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, Union
import logging

import numpy as np
from joblib import Parallel, delayed

from ...core.alignment import alignment_cost
from ...core.bigrams import compute_bigrams
from ...core.exceptions import ConfigurationError
from ...core.weights import Weights
from ...matching.scorer import distance_to_similarity
from ...phonetics.normalizer import PhoneticNormalizer
from ..data.dataset import LabeledPair

logger = logging.getLogger(__name__)

PairLike = Union[LabeledPair, Tuple[str, str]]


@dataclass(frozen=True)
class PreparedPair:
    """A labeled pair with both names already normalized into bigrams."""

    name1: str
    name2: str
    bigrams1: Tuple[str, ...]
    bigrams2: Tuple[str, ...]
    is_match: bool = True


def score_pair(pair: PreparedPair, weights: Weights) -> float:
    """
    Score one prepared pair.

    Positive pairs score their similarity; negative pairs score
    ``1 - similarity`` so that pushing them apart is rewarded.
    """
    distance = alignment_cost(pair.bigrams1, pair.bigrams2, weights)
    similarity = distance_to_similarity(distance, pair.name1, pair.name2)
    return similarity if pair.is_match else 1.0 - similarity


def mean_fitness(pairs: Sequence[PreparedPair], weights: Weights) -> float:
    return float(np.mean([score_pair(pair, weights) for pair in pairs]))


class FitnessEvaluator:
    """
    Averages pair scores for a candidate cost model.

    Normalization does not depend on the weights, so pairs are normalized
    and split into bigrams once by ``prepare`` and reused for every
    candidate.
    """

    def __init__(
        self,
        normalizer: Optional[PhoneticNormalizer] = None,
        n_jobs: int = 1,
    ):
        """
        Initialize evaluator.

        Args:
            normalizer: Normalizer applied to every name
            n_jobs: joblib workers; 1 evaluates in-process
        """
        self.normalizer = normalizer or PhoneticNormalizer()
        self.n_jobs = n_jobs
        self._warned_no_negatives = False

    def prepare(self, pairs: Iterable[PairLike]) -> List[PreparedPair]:
        """
        Normalize and bigram every pair once.

        Raises:
            ConfigurationError: if there are no pairs
        """
        prepared = []
        for pair in pairs:
            if not isinstance(pair, LabeledPair):
                pair = LabeledPair(*pair)
            prepared.append(PreparedPair(
                name1=pair.name1,
                name2=pair.name2,
                bigrams1=tuple(compute_bigrams(self.normalizer.normalize(pair.name1))),
                bigrams2=tuple(compute_bigrams(self.normalizer.normalize(pair.name2))),
                is_match=pair.is_match,
            ))

        if not prepared:
            raise ConfigurationError("Training set is empty; fitness is undefined")

        if all(p.is_match for p in prepared) and not self._warned_no_negatives:
            logger.warning(
                "Training set has no negative pairs; fitness only rewards "
                "higher similarity for matching names"
            )
            self._warned_no_negatives = True

        logger.debug(f"Prepared {len(prepared)} pairs")
        return prepared

    def _ensure_prepared(self, pairs) -> List[PreparedPair]:
        pairs = list(pairs)
        prepared_count = sum(isinstance(p, PreparedPair) for p in pairs)
        if prepared_count == 0:
            return self.prepare(pairs)
        if prepared_count != len(pairs):
            raise ConfigurationError(
                "Cannot mix prepared pairs with raw pairs; pass all pairs through prepare()"
            )
        return pairs

    def evaluate(self, pairs: Iterable[Union[PairLike, PreparedPair]], weights: Weights) -> float:
        """
        Mean score of the weights over all pairs.

        Args:
            pairs: Labeled pairs, raw tuples, or output of ``prepare``
            weights: Candidate cost model

        Returns:
            Arithmetic mean of per-pair scores
        """
        prepared = self._ensure_prepared(pairs)

        if self.n_jobs == 1:
            return mean_fitness(prepared, weights)

        scores = Parallel(n_jobs=self.n_jobs)(
            delayed(score_pair)(pair, weights) for pair in prepared
        )
        return float(np.mean(scores))

    def evaluate_many(
        self,
        pairs: Iterable[Union[PairLike, PreparedPair]],
        candidates: Sequence[Weights],
    ) -> List[float]:
        """
        Evaluate several candidates against the same pairs.

        Candidates are independent, so with ``n_jobs != 1`` each one is
        scored on its own worker.
        """
        prepared = self._ensure_prepared(pairs)

        if self.n_jobs == 1:
            return [mean_fitness(prepared, weights) for weights in candidates]

        return list(Parallel(n_jobs=self.n_jobs)(
            delayed(mean_fitness)(prepared, weights) for weights in candidates
        ))
