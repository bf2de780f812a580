"""Utilities for weight training."""

from .config import TrainingConfig
from .model_registry import WeightsRegistry, save_weights, load_weights

__all__ = ["TrainingConfig", "WeightsRegistry", "save_weights", "load_weights"]
