"""
Confusion-matrix evaluation of a sentiment classifier.

The matrix is addressed directly by ``(true_label, predicted_label)``. When it
is printed, rows are the *predicted* labels and columns the *true* tags, so
the diagonal holds the correct predictions for each label.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from .classifier import Classifier
from .labels import LABELS, Label, label_from_prediction

logger = logging.getLogger(__name__)


class ConfusionMatrix:
    """3x3 count table over (true label, predicted label) pairs."""

    def __init__(self) -> None:
        self._counts = np.zeros((len(LABELS), len(LABELS)), dtype=int)

    def add(self, true_label: Label, predicted_label: Label) -> None:
        self._counts[true_label.position, predicted_label.position] += 1

    def __getitem__(self, key: tuple[Label, Label]) -> int:
        true_label, predicted_label = key
        return int(self._counts[true_label.position, predicted_label.position])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfusionMatrix):
            return NotImplemented
        return bool(np.array_equal(self._counts, other._counts))

    @property
    def total(self) -> int:
        return int(self._counts.sum())

    @property
    def correct(self) -> int:
        return int(np.trace(self._counts))

    def accuracy(self) -> float:
        """Share of correct predictions; NaN when nothing was evaluated."""
        if self.total == 0:
            return math.nan
        return self.correct / self.total

    def by_true_label(self) -> list[list[int]]:
        return self._counts.tolist()

    def by_prediction(self) -> list[list[int]]:
        """Rows per predicted label, columns per true label."""
        return self._counts.T.tolist()


@dataclass
class EvaluationReport:
    """
    Result of evaluating a classifier on a test set.

    Attributes:
        matrix: Confusion matrix of the evaluated examples
        accuracy: trace / total (NaN for an empty test set)
        evaluated: Number of examples that were classified
        mismatched: True if texts and labels differed in length
    """
    matrix: ConfusionMatrix = field(default_factory=ConfusionMatrix)
    accuracy: float = math.nan
    evaluated: int = 0
    mismatched: bool = False


def evaluate(
    classifier: Classifier,
    test_texts: Sequence[str],
    test_labels: Sequence[Label],
) -> EvaluationReport:
    """Classify every test text and tally the results.

    If the two sequences differ in length a warning is logged and only the
    common prefix is evaluated. Each call starts from an empty matrix.
    """

    mismatched = len(test_texts) != len(test_labels)
    if mismatched:
        logger.warning(
            f"Number of tags don't match: {len(test_texts)} texts vs {len(test_labels)} tags; "
            f"evaluating the first {min(len(test_texts), len(test_labels))}"
        )

    matrix = ConfusionMatrix()
    for text, true_label in zip(test_texts, test_labels):
        prediction = classifier.predict(text.split())
        matrix.add(true_label, label_from_prediction(prediction.label))

    if matrix.total == 0:
        logger.warning("No test examples were evaluated; accuracy is undefined")

    return EvaluationReport(
        matrix=matrix,
        accuracy=matrix.accuracy(),
        evaluated=matrix.total,
        mismatched=mismatched,
    )


def format_confusion_matrix(matrix: ConfusionMatrix) -> str:
    lines = ["P/T \t" + "".join(f"{label.short_name}\t" for label in LABELS)]
    for label, row in zip(LABELS, matrix.by_prediction()):
        lines.append(f"{label.short_name} |\t" + "".join(f"{count}\t" for count in row) + "|")
    return "\n".join(lines)


def format_report(report: EvaluationReport) -> str:
    return "\n".join(
        [
            "Rows of Confusion Matrix correspond to predictions, columns correspond to true tags.",
            "Diagonal entries are the counts of correct predictions for each tag.",
            format_confusion_matrix(report.matrix),
            f"Accuracy Score: {report.accuracy}",
        ]
    )
