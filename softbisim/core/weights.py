"""Cost model for the Soft-Bisim alignment."""

import math
from dataclasses import dataclass, asdict, fields
from typing import Dict, Any, Optional

import numpy as np

from .exceptions import InvalidWeightsError


@dataclass(frozen=True)
class Weights:
    """
    Per-operation costs used by the weighted bigram alignment.

    All coefficients must be finite and non-negative. ``merge``, ``split``
    and ``phonetic_change`` are carried as configuration but are not used
    by the current recurrence.
    """

    match: float = 0.0
    replace: float = 1.0
    insert: float = 1.0
    delete: float = 1.0
    transposition: float = 1.0
    merge: float = 1.0
    split: float = 1.0
    case_change: float = 1.0
    phonetic_change: float = 1.0

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, (str, bytes, bool, np.bool_)):
                raise InvalidWeightsError(f"{f.name} must be a number, got {value!r}")
            try:
                value = float(value)
            except (TypeError, ValueError):
                raise InvalidWeightsError(f"{f.name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise InvalidWeightsError(f"{f.name} must be finite, got {value}")
            if value < 0:
                raise InvalidWeightsError(f"{f.name} must be non-negative, got {value}")
            object.__setattr__(self, f.name, value)

    @classmethod
    def field_names(cls) -> tuple:
        """Coefficient names in their canonical order."""
        return tuple(f.name for f in fields(cls))

    @classmethod
    def balanced(cls) -> "Weights":
        """All edit operations cost 1.0, exact matches are free."""
        return cls()

    @classmethod
    def random(cls, rng: Optional[np.random.Generator] = None) -> "Weights":
        """Draw every coefficient independently and uniformly from [0, 1)."""
        rng = rng if rng is not None else np.random.default_rng()
        return cls.from_array(rng.random(len(FIELD_NAMES)))

    @classmethod
    def from_array(cls, values) -> "Weights":
        values = np.asarray(values, dtype=float)
        if values.shape != (len(FIELD_NAMES),):
            raise InvalidWeightsError(
                f"Expected {len(FIELD_NAMES)} coefficients, got shape {values.shape}"
            )
        return cls(**{name: float(v) for name, v in zip(FIELD_NAMES, values)})

    def to_array(self) -> np.ndarray:
        return np.array([getattr(self, name) for name in FIELD_NAMES], dtype=float)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Weights":
        """
        Build weights from a mapping of coefficient names.

        Args:
            data: Mapping holding exactly the nine coefficient names

        Returns:
            Validated Weights instance

        Raises:
            InvalidWeightsError: on missing/unknown keys or invalid values
        """
        unknown = set(data) - set(FIELD_NAMES)
        missing = set(FIELD_NAMES) - set(data)
        if unknown:
            raise InvalidWeightsError(f"Unknown weight names: {sorted(unknown)}")
        if missing:
            raise InvalidWeightsError(f"Missing weight names: {sorted(missing)}")
        return cls(**{name: data[name] for name in FIELD_NAMES})

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    def __str__(self) -> str:
        return ", ".join(f"{name}={getattr(self, name):.4f}" for name in FIELD_NAMES)


FIELD_NAMES = Weights.field_names()
