"""Configuration for weight training."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ...core.exceptions import ConfigurationError


@dataclass
class TrainingConfig:
    """Configuration for the weight optimizer and trainer."""

    # Weights storage
    model_dir: Path = field(default_factory=lambda: Path("models/weights"))

    # Genetic search
    population_size: int = 20
    generations: int = 50
    mutation_rate: float = 0.1
    random_seed: Optional[int] = 42

    # Execution
    n_jobs: int = 1  # joblib workers for fitness evaluation
    time_budget: Optional[float] = None  # seconds, checked between generations

    # Data
    validation_split: float = 0.0

    # Normalization
    reduce_vowels: bool = True

    def __post_init__(self):
        self.model_dir = Path(self.model_dir)

    def validate(self) -> "TrainingConfig":
        """
        Check that the configuration can drive a training run.

        Raises:
            ConfigurationError: if any setting is out of range
        """
        if self.population_size < 1:
            raise ConfigurationError(
                f"population_size must be at least 1, got {self.population_size}"
            )
        if self.generations < 0:
            raise ConfigurationError(
                f"generations must be non-negative, got {self.generations}"
            )
        if not 0.0 <= self.mutation_rate <= 1.0:
            raise ConfigurationError(
                f"mutation_rate must be in [0, 1], got {self.mutation_rate}"
            )
        if not 0.0 <= self.validation_split < 1.0:
            raise ConfigurationError(
                f"validation_split must be in [0, 1), got {self.validation_split}"
            )
        if self.n_jobs == 0:
            raise ConfigurationError("n_jobs must not be 0")
        if self.time_budget is not None and self.time_budget <= 0:
            raise ConfigurationError(
                f"time_budget must be positive, got {self.time_budget}"
            )
        return self
