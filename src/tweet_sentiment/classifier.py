from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple, Protocol, Sequence

import numpy as np
from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.linear_model import LogisticRegression

from .config import ClassifierConfig
from .exceptions import InvalidInputError
from .serialization import read_training_lines
from .vectorizers import make_tfidf_vectorizer

logger = logging.getLogger(__name__)


class Prediction(NamedTuple):
    label: str
    scores: list[float]


class Classifier(Protocol):
    def predict(self, tokens: Sequence[str]) -> Prediction: ...


@dataclass(frozen=True)
class SentimentModel:
    """Trained TF-IDF + Logistic Regression model; read-only once built."""

    vectorizer: TfidfVectorizer
    estimator: LogisticRegression

    @property
    def labels(self) -> list[str]:
        return [str(c) for c in self.estimator.classes_]

    def predict(self, tokens: Sequence[str]) -> Prediction:
        X = self.vectorizer.transform([" ".join(tokens)])
        proba = self.estimator.predict_proba(X)[0]
        best = int(np.argmax(proba))
        return Prediction(label=self.labels[best], scores=[float(p) for p in proba])

    def predict_label(self, tokens: Sequence[str]) -> str:
        return self.predict(tokens).label


def train_classifier(path: str | Path, config: ClassifierConfig | None = None) -> SentimentModel:
    """Fit the sentiment model on a ``<Label> <tokens>`` train file."""

    cfg = config or ClassifierConfig()

    labels: list[str] = []
    documents: list[str] = []
    for label, tokens in read_training_lines(path):
        labels.append(label)
        documents.append(" ".join(tokens))

    if len(set(labels)) < 2:
        raise InvalidInputError(
            f"Training data needs at least two distinct labels, found {sorted(set(labels))}"
        )

    vectorizer = make_tfidf_vectorizer(cfg.tfidf)
    X = vectorizer.fit_transform(documents)

    clf = LogisticRegression(max_iter=cfg.max_iter)
    clf.fit(X, labels)

    logger.info(f"Trained classifier on {len(labels)} examples ({len(vectorizer.vocabulary_)} features)")
    return SentimentModel(vectorizer=vectorizer, estimator=clf)
