from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Iterator, NamedTuple

import pandas as pd

from .exceptions import InvalidInputError
from .labels import Label, canonicalize_label

logger = logging.getLogger(__name__)


class Record(NamedTuple):
    text: str
    label: str


@dataclass(frozen=True)
class SentimentDataset:
    """Aligned text/label columns in source order."""

    text: list[str]
    label: list[str]

    def __post_init__(self) -> None:
        if len(self.text) != len(self.label):
            raise InvalidInputError(
                f"text and label columns differ in length ({len(self.text)} != {len(self.label)})"
            )

    def __len__(self) -> int:
        return len(self.text)

    def records(self) -> Iterator[Record]:
        for text, label in zip(self.text, self.label):
            yield Record(text, label)

    def take(self, positions: list[int]) -> "SentimentDataset":
        return SentimentDataset(
            text=[self.text[i] for i in positions],
            label=[self.label[i] for i in positions],
        )


def load_labeled_tweets(
    source: str | Path | IO[str],
    limit: int,
    *,
    text_column: str = "Tweet",
    label_column: str = "Tag",
) -> SentimentDataset:
    """Read the first `limit` complete rows of a labeled tweets CSV.

    Rows with a missing text or tag are dropped before the limit is applied.
    Labels are returned raw; see `canonicalize_labels`.
    """

    df = pd.read_csv(source)
    missing = [c for c in (text_column, label_column) if c not in df.columns]
    if missing:
        raise InvalidInputError(f"CSV is missing required columns: {', '.join(missing)}")

    df = df[[text_column, label_column]].dropna()
    logger.info(f"Loaded {len(df)} complete rows from {source}")

    if limit <= 0:
        raise InvalidInputError(f"Number of records must be positive, got {limit}")
    if limit > len(df):
        raise InvalidInputError(
            f"Input is larger than length of data frame ({limit} > {len(df)})"
        )

    df = df.head(limit)
    return SentimentDataset(
        text=df[text_column].astype(str).tolist(),
        label=df[label_column].astype(str).tolist(),
    )


def canonicalize_labels(dataset: SentimentDataset) -> SentimentDataset:
    """Map every raw tag onto a `Label`, preserving row order."""

    labels: list[Label] = [canonicalize_label(raw) for raw in dataset.label]
    return SentimentDataset(text=list(dataset.text), label=labels)
