from __future__ import annotations

import re
from dataclasses import dataclass

import regex  # type: ignore


_WHITESPACE_RUN_RE = re.compile(r"\s{2,}")
_LINE_BREAK_RE = re.compile(r"(?:\r\n|[\n\r\v\f\x85\u2028\u2029])+")
# Anything that is not a letter, number, punctuation mark or separator.
_EMOJI_RE = regex.compile(r"[^\p{L}\p{N}\p{P}\p{Z}]")
_MENTION_RE = re.compile(r"@\S*(?:\s+|$)")
_LINK_RE = re.compile(r"http\S*", re.IGNORECASE)

SPECIAL_CHARACTERS = "'.`~|<>,/:;-=+_&^%()\""


@dataclass(frozen=True)
class CleanTextConfig:
    special_characters: str = SPECIAL_CHARACTERS
    lowercase: bool = True


def collapse_whitespace(text: str) -> str:
    s = _WHITESPACE_RUN_RE.sub(" ", text)
    s = _LINE_BREAK_RE.sub(" ", s)
    return s.strip()


def remove_emoji(text: str) -> str:
    return _EMOJI_RE.sub("", text)


def remove_mentions(text: str) -> str:
    """Drop `@handle` tokens together with the whitespace that follows them."""

    return _MENTION_RE.sub("", text)


def remove_links(text: str) -> str:
    return _LINK_RE.sub(" ", text)


def remove_special_characters(text: str, characters: str = SPECIAL_CHARACTERS) -> str:
    return text.translate(str.maketrans("", "", characters))


def _strip_links_and_special_characters(text: str, characters: str) -> str:
    # Stripping a character can join fragments into a new link ("ht.tp" -> "http"),
    # so repeat until neither step changes the text. Both steps only shorten it.
    while True:
        stripped = remove_special_characters(remove_links(text), characters)
        if stripped == text:
            return stripped
        text = stripped


def normalize_text(text: str, config: CleanTextConfig | None = None) -> str:
    """Clean a tweet for the sentiment model.

    The steps run in a fixed order: links are removed before the special
    characters so that no `://` or `.com` fragments survive. Link and
    special-character removal repeat until the text is stable, and the final
    whitespace pass makes the function idempotent.
    """

    cfg = config or CleanTextConfig()
    s = collapse_whitespace(text)
    s = remove_emoji(s)
    s = remove_mentions(s)
    s = _strip_links_and_special_characters(s, cfg.special_characters)

    if cfg.lowercase:
        # lower() can emit combining marks (e.g. for U+0130)
        s = remove_emoji(s.lower())

    return collapse_whitespace(s)
