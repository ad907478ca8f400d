from __future__ import annotations

from dataclasses import dataclass

from sklearn.feature_extraction.text import TfidfVectorizer


@dataclass(frozen=True)
class TfidfConfig:
    ngram_range: tuple[int, int] = (1, 2)
    min_df: int = 1
    max_df: float = 1.0
    max_features: int | None = 20_000


def make_tfidf_vectorizer(config: TfidfConfig | None = None) -> TfidfVectorizer:
    """Vectorizer for documents that are already cleaned, lemmatized and space-joined."""

    cfg = config or TfidfConfig()
    return TfidfVectorizer(
        ngram_range=cfg.ngram_range,
        min_df=cfg.min_df,
        max_df=cfg.max_df,
        max_features=cfg.max_features,
        strip_accents=None,
        lowercase=False,
        preprocessor=None,
        tokenizer=None,
        # Every whitespace-separated token counts, punctuation included.
        token_pattern=r"\S+",
    )
