from __future__ import annotations

from tweet_sentiment.lemmatization import ensure_nltk_resources


def main() -> None:
    # WordNet + the POS tagger used by the lemmatizer
    ensure_nltk_resources()


if __name__ == "__main__":
    main()
