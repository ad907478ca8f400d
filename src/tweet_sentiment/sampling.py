from __future__ import annotations

import logging
from dataclasses import dataclass

from sklearn.model_selection import train_test_split

from .datasets import SentimentDataset
from .exceptions import InvalidArgumentError, InvalidInputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DatasetSplit:
    """Disjoint train/test partitions plus the source positions of their rows."""

    train: SentimentDataset
    test: SentimentDataset
    train_index: list[int]
    test_index: list[int]


def split_dataset(
    dataset: SentimentDataset,
    train_fraction: float,
    *,
    random_state: int | None = None,
    stratify: bool = False,
) -> DatasetSplit:
    """Randomly partition `dataset` so that about `train_fraction` of it is train.

    Sampling is without replacement over row positions, so every record lands
    in exactly one partition. Pass `random_state` for a reproducible split.

    Raises:
        InvalidArgumentError: `train_fraction` is not strictly between 0 and 1
        InvalidInputError: the dataset is too small to give both partitions at
            least one record, or to stratify by label
    """

    if not 0 < train_fraction < 1:
        raise InvalidArgumentError(f"Fraction must be between 0 and 1, got {train_fraction}")

    positions = list(range(len(dataset)))
    try:
        train_index, test_index = train_test_split(
            positions,
            train_size=train_fraction,
            random_state=random_state,
            stratify=dataset.label if stratify else None,
        )
    except ValueError as exc:
        raise InvalidInputError(f"Cannot split {len(dataset)} records: {exc}") from exc

    logger.info(f"Split {len(dataset)} records into {len(train_index)} train / {len(test_index)} test")
    return DatasetSplit(
        train=dataset.take(train_index),
        test=dataset.take(test_index),
        train_index=list(train_index),
        test_index=list(test_index),
    )


def training_line(label: str, text: str) -> str:
    """Single-field train record: ``"<Label> <text>"``."""

    return f"{label} {text}"
