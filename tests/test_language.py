from __future__ import annotations

import allure
import pytest

from lingua_scripts.alphabet import Alphabet
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

pytestmark = [
    allure.epic("Language Registry"),
    allure.feature("Languages & ISO Codes"),
]

_EXPECTED_LANGUAGES = (
    Language.CHINESE,
    Language.ENGLISH,
    Language.FRENCH,
    Language.GERMAN,
    Language.ITALIAN,
    Language.JAPANESE,
    Language.KOREAN,
    Language.PORTUGUESE,
    Language.RUSSIAN,
    Language.SPANISH,
)


def test_all_languages_in_declaration_order() -> None:
    assert all_languages() == _EXPECTED_LANGUAGES
    assert Language.UNKNOWN not in all_languages()


def test_all_spoken_languages_matches_all_languages() -> None:
    assert all_spoken_languages() == _EXPECTED_LANGUAGES


def test_language_ordinals_are_stable() -> None:
    assert [int(language) for language in all_languages()] == list(range(10))
    assert int(Language.UNKNOWN) == 10
    assert Language.CHINESE < Language.SPANISH < Language.UNKNOWN


def test_all_languages_with_arabic_and_devanagari_script_are_empty() -> None:
    assert all_languages_with_arabic_script() == ()
    assert all_languages_with_devanagari_script() == ()


def test_all_languages_with_cyrillic_script() -> None:
    assert all_languages_with_cyrillic_script() == (Language.RUSSIAN,)


def test_all_languages_with_latin_script() -> None:
    assert all_languages_with_latin_script() == (
        Language.ENGLISH,
        Language.FRENCH,
        Language.GERMAN,
        Language.ITALIAN,
        Language.PORTUGUESE,
        Language.SPANISH,
    )


def test_all_languages_with_script_uses_primary_alphabet_only() -> None:
    assert all_languages_with_script(Alphabet.HIRAGANA) == (Language.JAPANESE,)
    assert all_languages_with_script(Alphabet.HAN) == (Language.CHINESE,)
    assert all_languages_with_script(Alphabet.KATAKANA) == ()


@pytest.mark.parametrize("language", _EXPECTED_LANGUAGES)
def test_iso_codes_round_trip(language: Language) -> None:
    assert language_from_iso_code_639_1(language.iso_code_639_1) is language
    assert language_from_iso_code_639_3(language.iso_code_639_3) is language


def test_known_iso_codes() -> None:
    assert language_from_iso_code_639_1(IsoCode639_1.ZH) is Language.CHINESE
    assert language_from_iso_code_639_1(IsoCode639_1.EN) is Language.ENGLISH
    assert language_from_iso_code_639_3(IsoCode639_3.ZHO) is Language.CHINESE
    assert language_from_iso_code_639_3(IsoCode639_3.ENG) is Language.ENGLISH


def test_unknown_iso_codes_map_to_unknown_language() -> None:
    assert language_from_iso_code_639_1(IsoCode639_1.UNKNOWN) is Language.UNKNOWN
    assert language_from_iso_code_639_3(IsoCode639_3.UNKNOWN) is Language.UNKNOWN
    assert Language.UNKNOWN.iso_code_639_1 is IsoCode639_1.UNKNOWN
    assert Language.UNKNOWN.iso_code_639_3 is IsoCode639_3.UNKNOWN


def test_iso_code_from_value_is_case_insensitive() -> None:
    assert IsoCode639_1.from_value(" DE ") is IsoCode639_1.DE
    assert IsoCode639_3.from_value("Jpn") is IsoCode639_3.JPN
    assert IsoCode639_1.from_value("xx") is IsoCode639_1.UNKNOWN
    assert IsoCode639_3.from_value("") is IsoCode639_3.UNKNOWN


def test_alphabets_per_language() -> None:
    assert Language.JAPANESE.alphabets() == (Alphabet.HIRAGANA, Alphabet.KATAKANA, Alphabet.HAN)
    assert Language.KOREAN.alphabets() == (Alphabet.HANGUL,)
    assert Language.UNKNOWN.alphabets() == ()
    for language in all_languages():
        assert language.alphabets()


def test_unique_characters() -> None:
    assert Language.GERMAN.unique_characters() == "ß"
    assert Language.SPANISH.unique_characters() == "¿¡"
    assert Language.ENGLISH.unique_characters() == ""
    assert Language.UNKNOWN.unique_characters() == ""


def test_language_with_unique_characters() -> None:
    assert language_with_unique_characters("Die Straße ist lang") is Language.GERMAN
    assert language_with_unique_characters("¿Qué hora es?") is Language.SPANISH
    assert language_with_unique_characters("plain text") is Language.UNKNOWN
    assert language_with_unique_characters("Straße ¿") is Language.UNKNOWN


def test_languages_by_alphabet_covers_secondary_alphabets() -> None:
    index = languages_by_alphabet()
    assert set(index) == set(Alphabet)
    assert index[Alphabet.HAN] == (Language.CHINESE, Language.JAPANESE)
    assert index[Alphabet.KATAKANA] == (Language.JAPANESE,)
    assert index[Alphabet.ARABIC] == ()
    with pytest.raises(TypeError):
        index[Alphabet.LATIN] = ()  # type: ignore[index]


def test_single_language_alphabets() -> None:
    assert dict(single_language_alphabets()) == {
        Alphabet.CYRILLIC: Language.RUSSIAN,
        Alphabet.HANGUL: Language.KOREAN,
        Alphabet.HIRAGANA: Language.JAPANESE,
        Alphabet.KATAKANA: Language.JAPANESE,
    }
