"""
Population-based random search over Soft-Bisim cost models.

Each generation evaluates every candidate, records the best cost model
seen so far, and rerolls each candidate with a fixed probability. There
is no crossover or selection; the best-ever candidate is tracked apart
from the population and never reinserted.
"""

from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional
import logging
import time

import numpy as np

from ...core.weights import Weights, FIELD_NAMES
from ...phonetics.normalizer import PhoneticNormalizer
from ..utils.config import TrainingConfig
from .fitness import FitnessEvaluator

logger = logging.getLogger(__name__)


@dataclass
class OptimizationResult:
    """Outcome of an optimizer run."""

    best_weights: Weights
    best_fitness: float
    history: List[float] = field(default_factory=list)  # best-ever fitness after each generation
    generations_run: int = 0
    stopped_early: bool = False

    def to_dict(self) -> dict:
        return {
            'best_weights': self.best_weights.to_dict(),
            'best_fitness': self.best_fitness,
            'history': list(self.history),
            'generations_run': self.generations_run,
            'stopped_early': self.stopped_early,
        }


class WeightOptimizer:
    """Genetic-style search for the cost model with the highest fitness."""

    def __init__(
        self,
        config: Optional[TrainingConfig] = None,
        evaluator: Optional[FitnessEvaluator] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize optimizer.

        Args:
            config: Population size, generations, mutation rate, seed, budget
            evaluator: Fitness evaluator (built from config when omitted)
            clock: Monotonic time source used for the time budget
        """
        self.config = (config or TrainingConfig()).validate()
        self.evaluator = evaluator or FitnessEvaluator(
            normalizer=PhoneticNormalizer(reduce_vowels=self.config.reduce_vowels),
            n_jobs=self.config.n_jobs,
        )
        self.clock = clock

    def initial_population(self, rng: np.random.Generator) -> np.ndarray:
        """Population matrix, one row of coefficients per candidate, uniform in [0, 1)."""
        return rng.random((self.config.population_size, len(FIELD_NAMES)))

    def optimize(self, pairs: Iterable) -> OptimizationResult:
        """
        Search for the best cost model on the given pairs.

        Args:
            pairs: Labeled pairs (or raw name tuples) to train on

        Returns:
            OptimizationResult holding the best-ever weights

        Raises:
            ConfigurationError: if the pair collection is empty
        """
        config = self.config
        rng = np.random.default_rng(config.random_seed)
        prepared = self.evaluator.prepare(pairs)

        population = self.initial_population(rng)
        best_weights = Weights.from_array(population[0])
        best_fitness = self.evaluator.evaluate(prepared, best_weights)

        logger.info(
            f"Optimizing over {len(prepared)} pairs: population={config.population_size}, "
            f"generations={config.generations}, mutation_rate={config.mutation_rate}"
        )

        result = OptimizationResult(best_weights=best_weights, best_fitness=best_fitness)
        started = self.clock()

        for generation in range(config.generations):
            if config.time_budget is not None and self.clock() - started >= config.time_budget:
                logger.info(f"Time budget exhausted after {generation} generations")
                result.stopped_early = True
                break

            candidates = [Weights.from_array(row) for row in population]
            scores = self.evaluator.evaluate_many(prepared, candidates)

            for i, score in enumerate(scores):
                if score > result.best_fitness:
                    result.best_fitness = score
                    result.best_weights = candidates[i]

                # Full reroll, not a perturbation
                if rng.random() < config.mutation_rate:
                    population[i] = rng.random(len(FIELD_NAMES))

            result.history.append(result.best_fitness)
            result.generations_run = generation + 1
            logger.debug(
                f"Generation {generation + 1}/{config.generations}: "
                f"best fitness {result.best_fitness:.4f}"
            )

        logger.info(f"Best fitness {result.best_fitness:.4f} with weights {result.best_weights}")
        return result


def optimize_weights(
    pairs: Iterable,
    generations: int,
    population_size: int,
    random_seed: Optional[int] = None,
) -> Weights:
    """Run the optimizer with default settings and return the best weights."""
    config = TrainingConfig(
        population_size=population_size,
        generations=generations,
        random_seed=random_seed,
    )
    return WeightOptimizer(config).optimize(pairs).best_weights
