"""Script/alphabet pre-classification layer for natural language identification."""

from lingua_scripts.alphabet import Alphabet, alphabets_in, is_japanese_text
from lingua_scripts.hints import CHARS_TO_LANGUAGES, diagnostic_characters, languages_for
from lingua_scripts.language import (
    IsoCode639_1,
    IsoCode639_3,
    Language,
    all_languages,
    all_languages_with_arabic_script,
    all_languages_with_cyrillic_script,
    all_languages_with_devanagari_script,
    all_languages_with_latin_script,
    all_languages_with_script,
    all_spoken_languages,
    language_from_iso_code_639_1,
    language_from_iso_code_639_3,
    language_with_unique_characters,
    languages_by_alphabet,
    single_language_alphabets,
)
from lingua_scripts.tokenizer import (
    iter_tokens,
    iter_tokens_with_whitespace,
    normalize_text,
    tokenize,
    tokenize_with_whitespace,
)

__version__ = "0.1.0"

__all__ = [
    "CHARS_TO_LANGUAGES",
    "Alphabet",
    "IsoCode639_1",
    "IsoCode639_3",
    "Language",
    "__version__",
    "all_languages",
    "all_languages_with_arabic_script",
    "all_languages_with_cyrillic_script",
    "all_languages_with_devanagari_script",
    "all_languages_with_latin_script",
    "all_languages_with_script",
    "all_spoken_languages",
    "alphabets_in",
    "diagnostic_characters",
    "is_japanese_text",
    "iter_tokens",
    "iter_tokens_with_whitespace",
    "language_from_iso_code_639_1",
    "language_from_iso_code_639_3",
    "language_with_unique_characters",
    "languages_by_alphabet",
    "languages_for",
    "normalize_text",
    "single_language_alphabets",
    "tokenize",
    "tokenize_with_whitespace",
]
