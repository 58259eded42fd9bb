"""Script and diacritic facts about a text sample, ready for a scorer."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from lingua_scripts.alphabet import Alphabet, alphabets_in
from lingua_scripts.config import Settings
from lingua_scripts.hints import diagnostic_characters
from lingua_scripts.language import (
    Language,
    all_languages,
    language_with_unique_characters,
)
from lingua_scripts.tokenizer import tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DiacriticHint:
    """Diagnostic character found in the text."""

    char: str
    languages: tuple[Language, ...]


@dataclass(frozen=True, slots=True)
class TextInspection:
    """Facts gathered from one text sample; no scoring is involved."""

    text: str
    is_truncated: bool
    alphabets: tuple[Alphabet, ...]
    script_languages: tuple[Language, ...]
    hints: tuple[DiacriticHint, ...]
    unique_language: Language
    tokens: tuple[str, ...]


def inspect_text(text: str, settings: Settings | None = None) -> TextInspection:
    """Collect alphabets, reachable languages, hints and tokens of ``text``."""

    settings = settings or Settings()
    max_chars = settings.inspection.max_text_chars

    sample = text
    truncated = False
    if len(sample) > max_chars:
        logger.debug("Truncating inspected text from %d to %d chars", len(sample), max_chars)
        sample = sample[:max_chars]
        truncated = True

    alphabets = alphabets_in(sample)
    tokens = tokenize(sample)
    if not settings.inspection.preserve_case:
        tokens = [token.lower() for token in tokens]

    return TextInspection(
        text=sample,
        is_truncated=truncated,
        alphabets=alphabets,
        script_languages=_languages_written_in(alphabets),
        hints=tuple(
            DiacriticHint(char=char, languages=languages)
            for char, languages in diagnostic_characters(sample)
        ),
        unique_language=language_with_unique_characters(sample),
        tokens=tuple(tokens),
    )


def _languages_written_in(alphabets: tuple[Alphabet, ...]) -> tuple[Language, ...]:
    return tuple(
        language
        for language in all_languages()
        if any(alphabet in language.alphabets() for alphabet in alphabets)
    )
