"""Controllers for lingua-scripts CLI commands."""

from __future__ import annotations

from dataclasses import dataclass

from lingua_scripts.alphabet import Alphabet
from lingua_scripts.config import Settings
from lingua_scripts.hints import CHARS_TO_LANGUAGES
from lingua_scripts.inspection import inspect_text
from lingua_scripts.language import (
    IsoCode639_1,
    IsoCode639_3,
    Language,
    all_languages,
    all_languages_with_script,
    language_from_iso_code_639_1,
    language_from_iso_code_639_3,
)
from lingua_scripts.tokenizer import tokenize, tokenize_with_whitespace


@dataclass(slots=True)
class LanguagesCommand:
    """CLI inputs for registry listing command."""

    script: Alphabet | None


@dataclass(slots=True)
class LookupCommand:
    """CLI inputs for ISO code lookup command."""

    code: str


@dataclass(slots=True)
class TokenizeCommand:
    """CLI inputs for tokenize command."""

    text: str
    keep_whitespace: bool


@dataclass(slots=True)
class InspectCommand:
    """CLI inputs for text inspection command."""

    text: str


@dataclass(slots=True)
class LookupResult:
    """Lines to print plus whether the code resolved to a language."""

    lines: list[str]
    found: bool


class ScriptsCliController:
    """Coordinates registry, hint table and tokenizer commands."""

    def languages(self, command: LanguagesCommand) -> list[str]:
        if command.script is None:
            languages = all_languages()
        else:
            languages = all_languages_with_script(command.script)
        if not languages:
            return [f"No supported language uses the {command.script.value} script."]
        return [_describe_language(language) for language in languages]

    def lookup(self, command: LookupCommand) -> LookupResult:
        code = command.code.strip().lower()
        if len(code) == 2:  # noqa: PLR2004
            language = language_from_iso_code_639_1(IsoCode639_1.from_value(code))
        else:
            language = language_from_iso_code_639_3(IsoCode639_3.from_value(code))
        if language is Language.UNKNOWN:
            return LookupResult(lines=[f"Unknown ISO 639 code: {command.code!r}"], found=False)
        return LookupResult(lines=[_describe_language(language)], found=True)

    def hints(self) -> list[str]:
        return [
            f"{group}: {', '.join(_language_name(language) for language in languages)}"
            for group, languages in CHARS_TO_LANGUAGES.items()
        ]

    def tokenize(self, command: TokenizeCommand) -> list[str]:
        if command.keep_whitespace:
            return [repr(token) for token in tokenize_with_whitespace(command.text)]
        return tokenize(command.text)

    def inspect(self, command: InspectCommand) -> list[str]:
        settings = Settings.from_env()
        settings.validate()
        inspection = inspect_text(command.text, settings)

        lines = [
            "Alphabets: "
            f"{', '.join(alphabet.value for alphabet in inspection.alphabets) or '-'}",
            "Script languages: "
            f"{', '.join(_language_name(lang) for lang in inspection.script_languages) or '-'}",
        ]
        if inspection.is_truncated:
            lines.append(f"Truncated to {settings.inspection.max_text_chars} chars")
        if inspection.unique_language is not Language.UNKNOWN:
            lines.append(f"Unique characters: {_language_name(inspection.unique_language)}")
        if inspection.hints:
            lines.append("Diacritic hints:")
            for hint in inspection.hints:
                names = ", ".join(_language_name(language) for language in hint.languages)
                lines.append(f"  {hint.char}: {names}")
        lines.append(f"Tokens ({len(inspection.tokens)}): {' '.join(inspection.tokens)}")
        return lines


def _describe_language(language: Language) -> str:
    alphabets = "/".join(alphabet.value for alphabet in language.alphabets())
    return (
        f"{_language_name(language)} "
        f"iso639_1={language.iso_code_639_1.value} "
        f"iso639_3={language.iso_code_639_3.value} "
        f"alphabets={alphabets}"
    )


def _language_name(language: Language) -> str:
    return language.name.capitalize()
