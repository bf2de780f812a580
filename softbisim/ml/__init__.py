"""
Machine learning module for softbisim.

Tunes the Soft-Bisim cost model against labeled name pairs with a
population-based random search.
"""

from .data import LabeledPair, LabeledPairDataset
from .training import FitnessEvaluator, WeightOptimizer, OptimizationResult, WeightTrainer
from .utils import TrainingConfig, WeightsRegistry

__all__ = [
    "LabeledPair",
    "LabeledPairDataset",
    "FitnessEvaluator",
    "WeightOptimizer",
    "OptimizationResult",
    "WeightTrainer",
    "TrainingConfig",
    "WeightsRegistry",
]
