"""Registry of supported languages and their ISO 639 codes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import TypeVar

from lingua_scripts.alphabet import Alphabet


class IsoCode639_1(str, Enum):  # noqa: N801
    """Two-letter ISO 639-1 codes of the supported languages."""

    ZH = "zh"
    EN = "en"
    FR = "fr"
    DE = "de"
    IT = "it"
    JA = "ja"
    KO = "ko"
    PT = "pt"
    RU = "ru"
    ES = "es"
    UNKNOWN = "unknown"

    @classmethod
    def from_value(cls, value: str) -> IsoCode639_1:
        """Parse a code case-insensitively, ``UNKNOWN`` when unrecognized."""

        return _parse_code(cls, value)


class IsoCode639_3(str, Enum):  # noqa: N801
    """Three-letter ISO 639-3 codes of the supported languages."""

    ZHO = "zho"
    ENG = "eng"
    FRA = "fra"
    DEU = "deu"
    ITA = "ita"
    JPN = "jpn"
    KOR = "kor"
    POR = "por"
    RUS = "rus"
    SPA = "spa"
    UNKNOWN = "unknown"

    @classmethod
    def from_value(cls, value: str) -> IsoCode639_3:
        """Parse a code case-insensitively, ``UNKNOWN`` when unrecognized."""

        return _parse_code(cls, value)


_CodeT = TypeVar("_CodeT", IsoCode639_1, IsoCode639_3)


class Language(IntEnum):
    """Supported languages; ordinals are stable and follow declaration order.

    ``UNKNOWN`` means "no match" and is never part of the registry listings.
    """

    CHINESE = 0
    ENGLISH = 1
    FRENCH = 2
    GERMAN = 3
    ITALIAN = 4
    JAPANESE = 5
    KOREAN = 6
    PORTUGUESE = 7
    RUSSIAN = 8
    SPANISH = 9
    UNKNOWN = 10

    @property
    def iso_code_639_1(self) -> IsoCode639_1:
        return _PROFILES[self].iso_code_639_1

    @property
    def iso_code_639_3(self) -> IsoCode639_3:
        return _PROFILES[self].iso_code_639_3

    def alphabets(self) -> tuple[Alphabet, ...]:
        """Scripts the language is written in; the first one is primary."""

        return _PROFILES[self].alphabets

    def unique_characters(self) -> str:
        """Characters used by this language only, empty when there are none."""

        return _PROFILES[self].unique_characters


@dataclass(frozen=True, slots=True)
class LanguageProfile:
    """Static per-language metadata."""

    iso_code_639_1: IsoCode639_1
    iso_code_639_3: IsoCode639_3
    alphabets: tuple[Alphabet, ...]
    unique_characters: str = ""


_PROFILES: MappingProxyType[Language, LanguageProfile] = MappingProxyType(
    {
        Language.CHINESE: LanguageProfile(IsoCode639_1.ZH, IsoCode639_3.ZHO, (Alphabet.HAN,)),
        Language.ENGLISH: LanguageProfile(IsoCode639_1.EN, IsoCode639_3.ENG, (Alphabet.LATIN,)),
        Language.FRENCH: LanguageProfile(IsoCode639_1.FR, IsoCode639_3.FRA, (Alphabet.LATIN,)),
        Language.GERMAN: LanguageProfile(
            IsoCode639_1.DE,
            IsoCode639_3.DEU,
            (Alphabet.LATIN,),
            unique_characters="ß",
        ),
        Language.ITALIAN: LanguageProfile(IsoCode639_1.IT, IsoCode639_3.ITA, (Alphabet.LATIN,)),
        Language.JAPANESE: LanguageProfile(
            IsoCode639_1.JA,
            IsoCode639_3.JPN,
            (Alphabet.HIRAGANA, Alphabet.KATAKANA, Alphabet.HAN),
        ),
        Language.KOREAN: LanguageProfile(IsoCode639_1.KO, IsoCode639_3.KOR, (Alphabet.HANGUL,)),
        Language.PORTUGUESE: LanguageProfile(
            IsoCode639_1.PT,
            IsoCode639_3.POR,
            (Alphabet.LATIN,),
        ),
        Language.RUSSIAN: LanguageProfile(IsoCode639_1.RU, IsoCode639_3.RUS, (Alphabet.CYRILLIC,)),
        Language.SPANISH: LanguageProfile(
            IsoCode639_1.ES,
            IsoCode639_3.SPA,
            (Alphabet.LATIN,),
            unique_characters="¿¡",
        ),
        Language.UNKNOWN: LanguageProfile(IsoCode639_1.UNKNOWN, IsoCode639_3.UNKNOWN, ()),
    },
)

_ALL_LANGUAGES: tuple[Language, ...] = tuple(
    language for language in Language if language is not Language.UNKNOWN
)


def all_languages() -> tuple[Language, ...]:
    """All supported languages in enumeration order."""

    return _ALL_LANGUAGES


def all_spoken_languages() -> tuple[Language, ...]:
    """Supported languages that are still spoken."""

    # No extinct language is supported yet.
    return all_languages()


def all_languages_with_script(script: Alphabet) -> tuple[Language, ...]:
    """Languages whose primary alphabet is ``script``, possibly none."""

    return tuple(language for language in all_languages() if language.alphabets()[0] == script)


def all_languages_with_arabic_script() -> tuple[Language, ...]:
    return all_languages_with_script(Alphabet.ARABIC)


def all_languages_with_cyrillic_script() -> tuple[Language, ...]:
    return all_languages_with_script(Alphabet.CYRILLIC)


def all_languages_with_devanagari_script() -> tuple[Language, ...]:
    return all_languages_with_script(Alphabet.DEVANAGARI)


def all_languages_with_latin_script() -> tuple[Language, ...]:
    return all_languages_with_script(Alphabet.LATIN)


def language_from_iso_code_639_1(iso_code: IsoCode639_1) -> Language:
    """Language for an ISO 639-1 code, ``Language.UNKNOWN`` if none matches."""

    for language in all_languages():
        if language.iso_code_639_1 == iso_code:
            return language
    return Language.UNKNOWN


def language_from_iso_code_639_3(iso_code: IsoCode639_3) -> Language:
    """Language for an ISO 639-3 code, ``Language.UNKNOWN`` if none matches."""

    for language in all_languages():
        if language.iso_code_639_3 == iso_code:
            return language
    return Language.UNKNOWN


def languages_by_alphabet() -> MappingProxyType[Alphabet, tuple[Language, ...]]:
    """Every alphabet mapped to all languages that can be written in it."""

    return _LANGUAGES_BY_ALPHABET


def single_language_alphabets() -> MappingProxyType[Alphabet, Language]:
    """Alphabets used by exactly one supported language."""

    return _SINGLE_LANGUAGE_ALPHABETS


def language_with_unique_characters(text: str) -> Language:
    """The one language whose exclusive characters occur in ``text``.

    Returns ``Language.UNKNOWN`` when no exclusive character is present or
    when characters of several languages are mixed.
    """

    found = [
        language
        for language in all_languages()
        if language.unique_characters()
        and any(char in text for char in language.unique_characters())
    ]
    if len(found) != 1:
        return Language.UNKNOWN
    return found[0]


def _build_alphabet_index() -> dict[Alphabet, tuple[Language, ...]]:
    return {
        alphabet: tuple(
            language for language in all_languages() if alphabet in language.alphabets()
        )
        for alphabet in Alphabet
    }


def _parse_code(enum_type: type[_CodeT], value: str) -> _CodeT:
    normalized = value.strip().lower()
    for code in enum_type:
        if code is not enum_type.UNKNOWN and code.value == normalized:
            return code
    return enum_type.UNKNOWN


_LANGUAGES_BY_ALPHABET: MappingProxyType[Alphabet, tuple[Language, ...]] = MappingProxyType(
    _build_alphabet_index(),
)
_SINGLE_LANGUAGE_ALPHABETS: MappingProxyType[Alphabet, Language] = MappingProxyType(
    {
        alphabet: languages[0]
        for alphabet, languages in _LANGUAGES_BY_ALPHABET.items()
        if len(languages) == 1
    },
)
