from __future__ import annotations

import re


# Words (optionally with apostrophes), numbers, and single punctuation marks.
_TOKEN_RE = re.compile(r"[^\W\d_]+(?:'[^\W\d_]+)?|\d+(?:\.\d+)?|[^\w\s]")


def simple_tokenize(text: str) -> list[str]:
    """Regex tokenization: words + numbers + standalone punctuation."""

    return _TOKEN_RE.findall(text)
