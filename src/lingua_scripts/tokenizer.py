"""Regex-level segmentation of raw text into word-like tokens.

Han, Hangul, Hiragana and Katakana characters always form one token each;
those scripts do not separate words with whitespace. Every other letter is
grouped into maximal runs.
"""

from __future__ import annotations

from collections.abc import Iterator

import regex

_CJK_CLASS = r"[\p{Script=Han}\p{Script=Hangul}\p{Script=Hiragana}\p{Script=Katakana}]"
# Any letter that is not one of the single-character scripts above.
_RUN_LETTER = rf"(?:(?!{_CJK_CLASS})\p{{L}})"

TOKENS_WITHOUT_WHITESPACE_RE = regex.compile(
    rf"{_CJK_CLASS}|{_RUN_LETTER}+(?:['-]{_RUN_LETTER}+)*",
)
TOKENS_WITH_OPTIONAL_WHITESPACE_RE = regex.compile(
    rf"\s*(?:{_CJK_CLASS}|(?:{_RUN_LETTER}|['-])+)[\p{{N}}\p{{P}}]*\s*",
)
_MULTIPLE_WHITESPACE_RE = regex.compile(r"\s+")
_NUMBERS_RE = regex.compile(r"\p{N}")
_PUNCTUATION_RE = regex.compile(r"\p{P}")


def iter_tokens(text: str) -> Iterator[str]:
    """Lazily yield letter-only tokens of ``text``.

    Apostrophes and hyphens survive only between letters, so ``don't`` and
    ``stop-go`` stay whole while stray connectors, digits and punctuation
    are dropped.
    """

    for match in TOKENS_WITHOUT_WHITESPACE_RE.finditer(text):
        yield match.group()


def iter_tokens_with_whitespace(text: str) -> Iterator[str]:
    """Lazily yield tokens together with surrounding whitespace.

    Trailing digits and punctuation stay attached to the token before them.
    """

    for match in TOKENS_WITH_OPTIONAL_WHITESPACE_RE.finditer(text):
        yield match.group()


def tokenize(text: str) -> list[str]:
    return list(iter_tokens(text))


def tokenize_with_whitespace(text: str) -> list[str]:
    return list(iter_tokens_with_whitespace(text))


def normalize_text(text: str) -> str:
    """Lowercase, drop punctuation and numerals, collapse whitespace."""

    lowered = text.strip().lower()
    without_punctuation = _PUNCTUATION_RE.sub("", lowered)
    without_numbers = _NUMBERS_RE.sub("", without_punctuation)
    return _MULTIPLE_WHITESPACE_RE.sub(" ", without_numbers).strip()
