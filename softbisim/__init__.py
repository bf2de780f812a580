"""softbisim - Cross-script fuzzy matching of personal names with a tunable bigram edit distance."""

__version__ = "0.1.0"

from .core import Weights, InvalidWeightsError, ConfigurationError, soft_bisim_distance
from .phonetics import LanguageTag, detect_language, normalize, PhoneticNormalizer
from .matching import SimilarityScorer, MatchResult, similarity

__all__ = [
    'Weights',
    'InvalidWeightsError',
    'ConfigurationError',
    'soft_bisim_distance',
    'LanguageTag',
    'detect_language',
    'normalize',
    'PhoneticNormalizer',
    'SimilarityScorer',
    'MatchResult',
    'similarity',
]
