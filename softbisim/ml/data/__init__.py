"""Training data for weight optimization."""

from .dataset import LabeledPair, LabeledPairDataset

__all__ = ["LabeledPair", "LabeledPairDataset"]
