from __future__ import annotations

import logging
from typing import Callable, Optional

from .classifier import Classifier
from .labels import label_from_prediction

logger = logging.getLogger(__name__)


def run_interactive(
    classifier: Classifier,
    preprocess: Callable[[str], str],
    read_line: Optional[Callable[[], str]] = None,
    write: Optional[Callable[[str], None]] = None,
    sentinel: str = "EXIT",
) -> int:
    """
    Classify user-typed tweets until the sentinel line or end of input.

    The sentinel must match the whole line exactly; ``" EXIT"`` or ``"exit"``
    are classified like any other text.

    Args:
        classifier: Trained model
        preprocess: Normalization + lemmatization applied to every line
        read_line: Source of input lines (raises EOFError when exhausted); defaults to `input`
        write: Sink for the predicted labels; defaults to `print`
        sentinel: Line that stops the loop

    Returns:
        Number of lines classified
    """
    read_line = read_line or input
    write = write or print

    write("Type your own Bitcoin tweets to check the sentiment!")
    write(f"Type '{sentinel}' on a new line to stop the program")

    classified = 0
    while True:
        try:
            line = read_line()
        except EOFError:
            logger.debug("Input exhausted, leaving interactive mode")
            break

        if line == sentinel:
            break

        prediction = classifier.predict(preprocess(line).split())
        write(str(label_from_prediction(prediction.label)))
        classified += 1

    return classified
