"""Diagnostic accented characters and the languages they point to.

Keys are character groups: every character of a group is an equivalent hint
(upper and lower case forms, or letters that are diagnostic for exactly the
same languages). Values are ordered, duplicate-free candidate tuples.

A character that is missing from the table carries no information; it does
not rule any language out.
"""

from __future__ import annotations

from collections.abc import Iterator
from types import MappingProxyType

from lingua_scripts.language import Language

_FRENCH = Language.FRENCH
_GERMAN = Language.GERMAN
_ITALIAN = Language.ITALIAN
_PORTUGUESE = Language.PORTUGUESE
_RUSSIAN = Language.RUSSIAN
_SPANISH = Language.SPANISH

CHARS_TO_LANGUAGES: MappingProxyType[str, tuple[Language, ...]] = MappingProxyType(
    {
        "Îî": (_FRENCH,),
        "Ññ": (_SPANISH,),
        "Ûû": (_FRENCH,),
        "Ìì": (_ITALIAN,),
        "Ëë": (_FRENCH,),
        "ÈèÙù": (_FRENCH, _ITALIAN),
        "Êê": (_FRENCH, _PORTUGUESE),
        "Õõ": (_PORTUGUESE,),
        "Ôô": (_FRENCH, _PORTUGUESE),
        "ЁёЫыЭэ": (_RUSSIAN,),
        "ЩщЪъ": (_RUSSIAN,),
        "Òò": (_ITALIAN,),
        "Ää": (_GERMAN,),
        "Àà": (_FRENCH, _ITALIAN, _PORTUGUESE),
        "Ââ": (_FRENCH, _PORTUGUESE),
        "Üü": (_GERMAN, _SPANISH),
        "Çç": (_FRENCH, _PORTUGUESE),
        "Öö": (_GERMAN,),
        "Óó": (_PORTUGUESE, _SPANISH),
        "ÁáÍíÚú": (_PORTUGUESE, _SPANISH),
        "Éé": (_FRENCH, _ITALIAN, _PORTUGUESE, _SPANISH),
    },
)

_CHAR_INDEX: MappingProxyType[str, tuple[Language, ...]] = MappingProxyType(
    {char: languages for group, languages in CHARS_TO_LANGUAGES.items() for char in group},
)


def languages_for(key: str) -> tuple[Language, ...]:
    """Candidate languages for a single character or an exact group key.

    Returns an empty tuple when ``key`` is not diagnostic.
    """

    if len(key) == 1:
        return _CHAR_INDEX.get(key, ())
    return CHARS_TO_LANGUAGES.get(key, ())


def diagnostic_characters(text: str) -> Iterator[tuple[str, tuple[Language, ...]]]:
    """Yield each distinct diagnostic character of ``text`` with its candidates.

    Characters come out in order of first occurrence.
    """

    seen: set[str] = set()
    for char in text:
        if char in seen:
            continue
        languages = _CHAR_INDEX.get(char)
        if languages is None:
            continue
        seen.add(char)
        yield char, languages
