"""
Plain-text dataset files exchanged with the classifier.

Train file: one ``<Label> <tokens>`` example per line.
Test files: cleaned tweets and their tags in two line-aligned files, which is
what a "real world" batch of unlabeled input looks like.

Writes are single best-effort operations: nothing is retried and a failure
part way through leaves a partially written file behind.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

from .datasets import SentimentDataset
from .exceptions import DatasetWriteError
from .labels import LABELS, Label, label_from_prediction

logger = logging.getLogger(__name__)

# A train line with no text left after cleaning is just "<label> ".
_EMPTY_TRAIN_LINES = frozenset(f"{label.value.lower()} " for label in LABELS)


def _is_empty_training_line(line: str) -> bool:
    return line.lower() in _EMPTY_TRAIN_LINES


def _is_blank_text(text: str) -> bool:
    return text == "  " or not text.strip()


def _write_lines(lines: list[str], path: str | Path) -> None:
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            if lines:
                f.write("\n".join(lines) + "\n")
    except OSError as exc:
        raise DatasetWriteError(f"Failed to write {path}: {exc}") from exc


def write_train_set(lines: Iterable[str], path: str | Path) -> int:
    """Write train lines, dropping examples whose text is empty.

    The first line is always kept. Returns the number of lines written.
    """

    kept: list[str] = []
    for i, line in enumerate(lines):
        if i == 0 or not _is_empty_training_line(line):
            kept.append(line)

    _write_lines(kept, path)
    logger.info(f"Wrote {len(kept)} training examples to {path}")
    return len(kept)


def write_test_set(dataset: SentimentDataset, text_path: str | Path, tag_path: str | Path) -> int:
    """Write test texts and tags to two aligned files.

    Rows whose text is blank are skipped (the first row is always kept) so that
    line ``i`` of the text file always belongs with line ``i`` of the tag file.
    """

    texts: list[str] = []
    tags: list[str] = []
    for i, (text, label) in enumerate(dataset.records()):
        if i == 0 or not _is_blank_text(text):
            texts.append(text)
            tags.append(str(label))

    _write_lines(texts, text_path)
    _write_lines(tags, tag_path)
    logger.info(f"Wrote {len(texts)} test examples to {text_path} and {tag_path}")
    return len(texts)


def read_test_set(text_path: str | Path, tag_path: str | Path) -> tuple[list[str], list[Label]]:
    """Read aligned test files back, stopping at the end of the shorter one."""

    with Path(text_path).open("r", encoding="utf-8") as text_file, Path(tag_path).open(
        "r", encoding="utf-8"
    ) as tag_file:
        texts: list[str] = []
        labels: list[Label] = []
        for text, tag in zip(text_file, tag_file):
            texts.append(text.rstrip("\r\n"))
            labels.append(label_from_prediction(tag))

    return texts, labels


def read_training_lines(path: str | Path) -> Iterator[tuple[str, list[str]]]:
    """Yield ``(label, tokens)`` pairs from a train file, skipping blank lines."""

    with Path(path).open("r", encoding="utf-8") as f:
        for line in f:
            parts = line.split()
            if not parts:
                continue
            yield parts[0], parts[1:]
