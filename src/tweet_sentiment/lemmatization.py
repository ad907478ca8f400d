"""
Lemmatization backed by NLTK's WordNet lemmatizer.

Tokens are POS-tagged first so that verbs and adjectives are reduced with the
right WordNet part of speech (``seeking`` -> ``seek``, ``am`` -> ``be``).
The output is the lemma sequence with a single space after every lemma.
"""

from __future__ import annotations

import logging
from typing import Iterable

import nltk
from nltk.stem import WordNetLemmatizer

from .tokenization import simple_tokenize

logger = logging.getLogger(__name__)

NLTK_PACKAGES = ("wordnet", "omw-1.4", "averaged_perceptron_tagger", "averaged_perceptron_tagger_eng")

# Treebank tag prefix -> WordNet POS constant
_WORDNET_POS = {
    "J": "a",
    "V": "v",
    "N": "n",
    "R": "r",
}


def ensure_nltk_resources(packages: Iterable[str] = NLTK_PACKAGES) -> None:
    """Download the NLTK data the lemmatizer needs."""

    for pkg in packages:
        if not nltk.download(pkg, quiet=True):
            logger.warning(f"Could not download NLTK package {pkg!r}")


def wordnet_pos(treebank_tag: str) -> str:
    return _WORDNET_POS.get(treebank_tag[:1], "n")


class WordNetLemmatizerAdapter:
    """Callable `text -> lemmatized text` wrapper around NLTK."""

    def __init__(self) -> None:
        self._lemmatizer = WordNetLemmatizer()

    def lemmatize(self, text: str) -> str:
        tokens = simple_tokenize(text)
        if not tokens:
            return ""

        tagged = nltk.pos_tag(tokens)
        return "".join(
            f"{self._lemmatizer.lemmatize(word, pos=wordnet_pos(tag))} " for word, tag in tagged
        )

    __call__ = lemmatize
