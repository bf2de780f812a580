"""Trainer that tunes and registers Soft-Bisim weights."""

from dataclasses import asdict
from pathlib import Path
from typing import Dict, Any, Optional, Union, Iterable
import logging

from ...phonetics.normalizer import PhoneticNormalizer
from ..data import LabeledPair, LabeledPairDataset
from ..utils import WeightsRegistry, TrainingConfig
from .fitness import FitnessEvaluator
from .optimizer import WeightOptimizer, OptimizationResult

logger = logging.getLogger(__name__)

TrainingData = Union[str, Path, LabeledPairDataset, Iterable[LabeledPair]]


class WeightTrainer:
    """Loads training pairs, runs the optimizer and stores the result."""

    def __init__(self, config: Optional[TrainingConfig] = None):
        """
        Initialize trainer.

        Args:
            config: Training configuration
        """
        self.config = (config or TrainingConfig()).validate()
        self.evaluator = FitnessEvaluator(
            normalizer=PhoneticNormalizer(reduce_vowels=self.config.reduce_vowels),
            n_jobs=self.config.n_jobs,
        )
        self._registry: Optional[WeightsRegistry] = None

    @property
    def registry(self) -> WeightsRegistry:
        if self._registry is None:
            self._registry = WeightsRegistry(self.config.model_dir)
        return self._registry

    @staticmethod
    def load_data(data: TrainingData) -> LabeledPairDataset:
        if isinstance(data, LabeledPairDataset):
            return data
        if isinstance(data, (str, Path)):
            return LabeledPairDataset.from_csv(Path(data))
        return LabeledPairDataset(
            pair if isinstance(pair, LabeledPair) else LabeledPair(*pair)
            for pair in data
        )

    def train(
        self,
        data: TrainingData,
        name: str = "soft_bisim",
        version: str = "v1.0.0",
        register: bool = True,
    ) -> Dict[str, Any]:
        """
        Tune weights on the training pairs.

        Args:
            data: CSV path, dataset, or iterable of labeled pairs
            name: Registry name of the weight set
            version: Registry version
            register: Store the tuned weights in the registry

        Returns:
            Metrics dictionary with the tuned weights and fitness values
        """
        logger.info("Training Soft-Bisim weights...")

        dataset = self.load_data(data)
        train_set, validation_set = dataset.split(
            self.config.validation_split,
            random_seed=self.config.random_seed,
        )
        logger.info(f"Training pairs: {len(train_set)}, validation pairs: {len(validation_set)}")

        optimizer = WeightOptimizer(self.config, evaluator=self.evaluator)
        result: OptimizationResult = optimizer.optimize(train_set)

        metrics: Dict[str, Any] = {
            'train_fitness': result.best_fitness,
            'validation_fitness': None,
            'generations_run': result.generations_run,
            'stopped_early': result.stopped_early,
            'train_pairs': len(train_set),
            'validation_pairs': len(validation_set),
        }

        if len(validation_set):
            metrics['validation_fitness'] = self.evaluator.evaluate(
                validation_set, result.best_weights
            )
            logger.info(f"Validation fitness: {metrics['validation_fitness']:.4f}")

        if register:
            config = asdict(self.config)
            config['model_dir'] = str(self.config.model_dir)
            weights_path = self.registry.register_weights(
                result.best_weights,
                name=name,
                version=version,
                metrics={k: v for k, v in metrics.items() if isinstance(v, (int, float))},
                config=config,
            )
            metrics['weights_path'] = str(weights_path)
            logger.info(f"Weights trained and saved to {weights_path}")

        metrics['weights'] = result.best_weights.to_dict()
        metrics['history'] = result.history
        return metrics
