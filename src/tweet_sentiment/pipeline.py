"""
Tweet Sentiment Pipeline Module

Pipeline Architecture:
1. Loading → first N complete rows of the CSV, tags canonicalized
2. Splitting → random train/test partition
3. Preprocessing → normalize + lemmatize the train tweets
4. Serialization → train file and aligned test text/tag files
5. Training → classifier fitted on the train file
6. Evaluation → test files read back, preprocessed and classified

All intermediate results live on a `PipelineContext` owned by the caller and
passed to every stage.

Usage:
    pipeline = SentimentPipeline(config)
    context = pipeline.run(limit=500)
    print(format_report(context.report))
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import partial
from pathlib import Path
from typing import Callable, Optional

from .classifier import Classifier, train_classifier
from .config import PipelineConfig
from .datasets import SentimentDataset, canonicalize_labels, load_labeled_tweets
from .evaluation import EvaluationReport, evaluate as evaluate_classifier
from .exceptions import DatasetWriteError
from .interactive import run_interactive
from .labels import Label
from .lemmatization import WordNetLemmatizerAdapter
from .sampling import DatasetSplit, split_dataset, training_line
from .serialization import read_test_set, write_test_set, write_train_set
from .text_cleaning import normalize_text

logger = logging.getLogger(__name__)


@dataclass
class PipelineContext:
    """
    State threaded through the pipeline stages.

    Attributes:
        config: Run configuration
        dataset: Loaded dataset with canonical labels
        split: Train/test partition of `dataset`
        training_lines: Preprocessed ``<Label> <tokens>`` train examples
        test_texts: Preprocessed test tweets read back from disk
        test_labels: Tags aligned with `test_texts`
        model: Trained classifier, read-only after training
        report: Evaluation result
    """
    config: PipelineConfig
    dataset: Optional[SentimentDataset] = None
    split: Optional[DatasetSplit] = None
    training_lines: list[str] = field(default_factory=list)
    test_texts: list[str] = field(default_factory=list)
    test_labels: list[Label] = field(default_factory=list)
    model: Optional[Classifier] = None
    report: Optional[EvaluationReport] = None


def _require(value, stage: str):
    if value is None:
        raise RuntimeError(f"Pipeline stage '{stage}' has not run yet")
    return value


class SentimentPipeline:
    """
    Runs load → split → preprocess → serialize → train → evaluate.

    The lemmatizer and the trainer are collaborators: any `text -> text`
    callable and any `path -> Classifier` callable can be plugged in.
    The defaults are NLTK's WordNet lemmatizer and the scikit-learn model
    from `train_classifier`.
    """

    def __init__(
        self,
        config: Optional[PipelineConfig] = None,
        lemmatize: Optional[Callable[[str], str]] = None,
        trainer: Optional[Callable[[Path], Classifier]] = None,
    ):
        self.config = config or PipelineConfig()
        self.lemmatize = lemmatize or WordNetLemmatizerAdapter()
        self.trainer = trainer or partial(train_classifier, config=self.config.classifier)

    def preprocess(self, text: str) -> str:
        return self.lemmatize(normalize_text(text))

    def load(self, context: PipelineContext, limit: int) -> PipelineContext:
        cfg = context.config
        logger.info("Reading input data...")
        raw = load_labeled_tweets(
            cfg.data_path,
            limit,
            text_column=cfg.text_column,
            label_column=cfg.label_column,
        )
        context.dataset = canonicalize_labels(raw)
        return context

    def split(self, context: PipelineContext) -> PipelineContext:
        cfg = context.config
        logger.info("Splitting data into train and test sets...")
        context.split = split_dataset(
            _require(context.dataset, "load"),
            cfg.train_fraction,
            random_state=cfg.random_state,
            stratify=cfg.stratify,
        )
        return context

    def prepare_training_data(self, context: PipelineContext) -> PipelineContext:
        train = _require(context.split, "split").train
        logger.info(f"Preprocessing and lemmatizing {len(train)} train tweets (this may take a while)...")
        context.training_lines = [
            training_line(label, self.preprocess(text)) for text, label in train.records()
        ]
        return context

    def write_datasets(self, context: PipelineContext) -> PipelineContext:
        """Serialize train and test sets; write failures are logged, not raised."""
        cfg = context.config
        test = _require(context.split, "split").test
        logger.info("Creating input text files...")

        try:
            write_train_set(context.training_lines, cfg.train_path)
        except DatasetWriteError:
            logger.exception(f"Could not write training set to {cfg.train_path}")

        cleaned = SentimentDataset(
            text=[normalize_text(t) for t in test.text],
            label=list(test.label),
        )
        try:
            write_test_set(cleaned, cfg.test_path, cfg.test_tag_path)
        except DatasetWriteError:
            logger.exception(f"Could not write test set to {cfg.test_path}")

        return context

    def train(self, context: PipelineContext) -> PipelineContext:
        logger.info("Training model...")
        context.model = self.trainer(context.config.train_path)
        return context

    def load_test_data(self, context: PipelineContext) -> PipelineContext:
        cfg = context.config
        texts, labels = read_test_set(cfg.test_path, cfg.test_tag_path)
        context.test_texts = [self.preprocess(t) for t in texts]
        context.test_labels = labels
        return context

    def evaluate(self, context: PipelineContext) -> PipelineContext:
        logger.info("Testing model...")
        context.report = evaluate_classifier(
            _require(context.model, "train"),
            context.test_texts,
            context.test_labels,
        )
        return context

    def run(self, limit: int) -> PipelineContext:
        context = PipelineContext(config=self.config)
        for stage in (
            partial(self.load, limit=limit),
            self.split,
            self.prepare_training_data,
            self.write_datasets,
            self.train,
            self.load_test_data,
            self.evaluate,
        ):
            context = stage(context)
        return context

    def interact(
        self,
        context: PipelineContext,
        read_line: Optional[Callable[[], str]] = None,
        write: Optional[Callable[[str], None]] = None,
    ) -> int:
        return run_interactive(
            _require(context.model, "train"),
            self.preprocess,
            read_line=read_line,
            write=write,
            sentinel=context.config.exit_sentinel,
        )
