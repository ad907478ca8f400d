"""
Sentiment labels and tag canonicalization.

Raw tags in the bitcoin tweets dump look like ``['positive']``: the label word
wrapped in exactly two marker characters on each side. ``canonicalize_label``
only understands that encoding; it is not a general tag parser.
"""

from __future__ import annotations

from enum import Enum

from .exceptions import UnknownLabelError

BRACKET_WIDTH = 2


class Label(str, Enum):
    """The three sentiment classes, in confusion-matrix order."""
    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    NEGATIVE = "Negative"

    def __str__(self) -> str:
        return self.value

    @property
    def short_name(self) -> str:
        return self.value[:3]

    @property
    def position(self) -> int:
        return LABELS.index(self)


LABELS: tuple[Label, ...] = (Label.POSITIVE, Label.NEUTRAL, Label.NEGATIVE)


def label_from_prediction(raw: str) -> Label:
    """Capitalize a bare label word (``positive`` -> ``Positive``) and look it up."""

    name = raw.strip().capitalize()
    try:
        return Label(name)
    except ValueError:
        raise UnknownLabelError(f"Unknown sentiment label: {raw!r}") from None


def canonicalize_label(raw: str) -> Label:
    """Strip the two-character markers from a raw tag and capitalize it."""

    if len(raw) <= 2 * BRACKET_WIDTH:
        raise UnknownLabelError(f"Tag too short to hold a label: {raw!r}")

    name = raw[BRACKET_WIDTH:-BRACKET_WIDTH].capitalize()
    try:
        return Label(name)
    except ValueError:
        raise UnknownLabelError(f"Unknown sentiment tag: {raw!r}") from None
