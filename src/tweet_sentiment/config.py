"""
Configuration for the tweet sentiment pipeline.

Defaults reproduce the bitcoin tweets experiment: the first N rows of
``data/bitcointweets.csv``, an 80/20 random split, and serialized datasets
written to ``./output``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .vectorizers import TfidfConfig


@dataclass(frozen=True)
class ClassifierConfig:
    """
    Settings for the default TF-IDF + Logistic Regression classifier.

    Attributes:
        max_iter: Iteration cap for the solver
        tfidf: Vectorizer settings
    """
    max_iter: int = 200
    tfidf: TfidfConfig = field(default_factory=TfidfConfig)


@dataclass
class PipelineConfig:
    """
    Configuration for a full pipeline run.

    Attributes:
        data_path: CSV file with the labeled tweets
        output_dir: Directory for the serialized train/test files
        text_column: Column holding the tweet text
        label_column: Column holding the bracket-wrapped tag
        train_fraction: Share of records that go to the training set
        random_state: Seed for the split (None means a fresh random split)
        stratify: Keep label proportions equal across the split
        exit_sentinel: Line that ends the interactive loop
    """

    # Data Paths
    data_path: str = "./data/bitcointweets.csv"
    output_dir: str = "./output"
    train_file: str = "trainset.txt"
    test_file: str = "testset.txt"
    test_tag_file: str = "testsettag.txt"

    # Input Columns
    text_column: str = "Tweet"
    label_column: str = "Tag"

    # Split
    train_fraction: float = 0.8
    random_state: int | None = None
    stratify: bool = False

    # Interactive Mode
    exit_sentinel: str = "EXIT"

    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)

    @property
    def train_path(self) -> Path:
        return Path(self.output_dir) / self.train_file

    @property
    def test_path(self) -> Path:
        return Path(self.output_dir) / self.test_file

    @property
    def test_tag_path(self) -> Path:
        return Path(self.output_dir) / self.test_tag_file
