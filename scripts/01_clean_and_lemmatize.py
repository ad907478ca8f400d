from __future__ import annotations

from tweet_sentiment.lemmatization import WordNetLemmatizerAdapter
from tweet_sentiment.text_cleaning import normalize_text


def main() -> None:
    samples = [
        "Hi @@_ are YOU seeking HELP?",
        "HEY!!111 \n <333",
        "i AM feeling \n hApPY",
        "",
    ]
    lemmatize = WordNetLemmatizerAdapter()

    for raw in samples:
        cleaned = normalize_text(raw)
        print("RAW:", repr(raw))
        print("CLEANED:", repr(cleaned))
        print("LEMMAS:", repr(lemmatize(cleaned)))


if __name__ == "__main__":
    main()
