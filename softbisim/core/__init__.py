"""Core Soft-Bisim engine: cost model, bigrams and weighted alignment."""

from .exceptions import InvalidWeightsError, ConfigurationError
from .weights import Weights, FIELD_NAMES
from .bigrams import compute_bigrams, iter_bigrams, bigram_count
from .alignment import alignment_cost, soft_bisim_distance, WeightedAlignment

__all__ = [
    'InvalidWeightsError',
    'ConfigurationError',
    'Weights',
    'FIELD_NAMES',
    'compute_bigrams',
    'iter_bigrams',
    'bigram_count',
    'alignment_cost',
    'soft_bisim_distance',
    'WeightedAlignment',
]
