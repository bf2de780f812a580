"""Cost model tuning: fitness evaluation, optimizer and trainer."""

from .fitness import FitnessEvaluator, PreparedPair, score_pair
from .optimizer import WeightOptimizer, OptimizationResult, optimize_weights
from .trainer import WeightTrainer

__all__ = [
    "FitnessEvaluator",
    "PreparedPair",
    "score_pair",
    "WeightOptimizer",
    "OptimizationResult",
    "optimize_weights",
    "WeightTrainer",
]
