"""Unicode script families and whole-string script predicates."""

from __future__ import annotations

from enum import Enum

import regex

_JAPANESE_CHARACTER_SET_RE = regex.compile(
    r"[\p{Script=Hiragana}\p{Script=Katakana}\p{Script=Han}]+",
)


class Alphabet(str, Enum):
    """Writing systems a supported language can be written in."""

    ARABIC = "arabic"
    CYRILLIC = "cyrillic"
    DEVANAGARI = "devanagari"
    HAN = "han"
    HANGUL = "hangul"
    HIRAGANA = "hiragana"
    KATAKANA = "katakana"
    LATIN = "latin"

    @property
    def script_name(self) -> str:
        """Unicode script property value, e.g. ``Latin``."""

        return self.value.capitalize()

    def matches(self, text: str) -> bool:
        """Return True when every character of ``text`` belongs to this script.

        The empty string belongs to no script and never matches.
        """

        return _WHOLE_STRING_PATTERNS[self].fullmatch(text) is not None

    def matches_char(self, char: str) -> bool:
        """Single-character variant of :meth:`matches`."""

        return len(char) == 1 and self.matches(char)


# Script, not Script_Extensions: shared CJK punctuation stays out of Han/Kana.
_WHOLE_STRING_PATTERNS: dict[Alphabet, regex.Pattern[str]] = {
    alphabet: regex.compile(rf"\p{{Script={alphabet.script_name}}}+") for alphabet in Alphabet
}
_CONTAINS_PATTERNS: dict[Alphabet, regex.Pattern[str]] = {
    alphabet: regex.compile(rf"\p{{Script={alphabet.script_name}}}") for alphabet in Alphabet
}


def is_japanese_text(text: str) -> bool:
    """Whole ``text`` consists of Hiragana, Katakana and Han characters only."""

    return _JAPANESE_CHARACTER_SET_RE.fullmatch(text) is not None


def alphabets_in(text: str) -> tuple[Alphabet, ...]:
    """Alphabets with at least one character in ``text``, in declaration order."""

    if not text:
        return ()
    return tuple(alphabet for alphabet in Alphabet if _CONTAINS_PATTERNS[alphabet].search(text))
