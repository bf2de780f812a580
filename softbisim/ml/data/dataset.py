"""Labeled name pairs used to tune the cost model."""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union
import logging

import pandas as pd
from sklearn.model_selection import train_test_split

from ...core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

TRUTHY = {'1', 'true', 'yes', 'y', 't'}


@dataclass(slots=True, frozen=True)
class LabeledPair:
    """A pair of raw names with a same-name label."""

    name1: str
    name2: str
    is_match: bool = True
    source: str = "manual"  # How this label was obtained


class LabeledPairDataset:
    """Ordered collection of labeled name pairs."""

    REQUIRED_COLUMNS = ('name1', 'name2')

    def __init__(self, pairs: Iterable[LabeledPair] = ()):
        self.pairs: List[LabeledPair] = list(pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def __iter__(self) -> Iterator[LabeledPair]:
        return iter(self.pairs)

    def __getitem__(self, idx: int) -> LabeledPair:
        return self.pairs[idx]

    @property
    def positives(self) -> List[LabeledPair]:
        return [pair for pair in self.pairs if pair.is_match]

    @property
    def negatives(self) -> List[LabeledPair]:
        return [pair for pair in self.pairs if not pair.is_match]

    @classmethod
    def from_records(
        cls,
        records: Iterable[Union[Tuple[str, str], Tuple[str, str, bool]]],
        source: str = "manual",
    ) -> "LabeledPairDataset":
        """
        Build a dataset from ``(name1, name2)`` or ``(name1, name2, is_match)`` tuples.
        """
        pairs = []
        for record in records:
            if len(record) == 2:
                pairs.append(LabeledPair(record[0], record[1], source=source))
            else:
                pairs.append(LabeledPair(record[0], record[1], bool(record[2]), source=source))
        return cls(pairs)

    @classmethod
    def from_csv(cls, filepath: Path) -> "LabeledPairDataset":
        """
        Load pairs from a CSV file.

        Expects ``name1`` and ``name2`` columns; an optional ``is_match``
        column marks negative examples (blank means positive).

        Args:
            filepath: Path to CSV file

        Returns:
            Loaded dataset

        Raises:
            FileNotFoundError: if the file does not exist
            ConfigurationError: if required columns are missing
        """
        filepath = Path(filepath)
        if not filepath.exists():
            raise FileNotFoundError(f"Training data not found: {filepath}")

        df = pd.read_csv(filepath, dtype=str, keep_default_na=False)
        df.columns = [column.strip() for column in df.columns]

        missing = [column for column in cls.REQUIRED_COLUMNS if column not in df.columns]
        if missing:
            raise ConfigurationError(f"{filepath} is missing columns: {missing}")

        has_labels = 'is_match' in df.columns
        pairs = []
        for row in df.itertuples(index=False):
            is_match = True
            if has_labels and row.is_match.strip():
                is_match = row.is_match.strip().lower() in TRUTHY
            pairs.append(LabeledPair(row.name1, row.name2, is_match, source=filepath.name))

        logger.info(f"Loaded {len(pairs)} pairs from {filepath}")
        return cls(pairs)

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(
            [(p.name1, p.name2, p.is_match, p.source) for p in self.pairs],
            columns=['name1', 'name2', 'is_match', 'source'],
        )

    def split(
        self,
        validation_split: float,
        random_seed: Optional[int] = None,
    ) -> Tuple["LabeledPairDataset", "LabeledPairDataset"]:
        """
        Split into training and validation sets.

        Stratifies on ``is_match`` when both classes have at least two
        pairs. A split of 0 returns the whole dataset and an empty
        validation set.

        Returns:
            Tuple of (train, validation)
        """
        if validation_split == 0:
            return LabeledPairDataset(self.pairs), LabeledPairDataset()

        labels = [pair.is_match for pair in self.pairs]
        stratify: Optional[Sequence[bool]] = None
        if min(labels.count(True), labels.count(False)) >= 2:
            stratify = labels

        try:
            train, validation = train_test_split(
                self.pairs,
                test_size=validation_split,
                random_state=random_seed,
                stratify=stratify,
            )
        except ValueError as e:
            raise ConfigurationError(
                f"Cannot split {len(self.pairs)} pairs with validation_split={validation_split}: {e}"
            ) from e

        return LabeledPairDataset(train), LabeledPairDataset(validation)
