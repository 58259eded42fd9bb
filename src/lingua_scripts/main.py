"""CLI entrypoint for lingua-scripts."""

import rich_click as click

from lingua_scripts import __version__
from lingua_scripts.alphabet import Alphabet
from lingua_scripts.config import Settings
from lingua_scripts.controllers import (
    InspectCommand,
    LanguagesCommand,
    LookupCommand,
    ScriptsCliController,
    TokenizeCommand,
)

click.rich_click.USE_MARKDOWN = True
CONTROLLER = ScriptsCliController()


@click.group()
@click.version_option(version=__version__, prog_name="lingua-scripts")
def lingua_scripts() -> None:
    """Script and diacritic pre-classification for language identification."""

    try:
        settings = Settings.from_env()
        settings.validate()
    except ValueError as error:
        raise click.ClickException(str(error)) from error
    settings.configure_logging()


@lingua_scripts.command("languages")
@click.option(
    "--script",
    type=click.Choice([alphabet.value for alphabet in Alphabet]),
    default=None,
    help="Only list languages whose primary alphabet is this script.",
)
def languages(script: str | None) -> None:
    """List supported languages with ISO codes and alphabets."""

    _emit_lines(
        CONTROLLER.languages(
            LanguagesCommand(script=Alphabet(script) if script is not None else None),
        ),
    )


@lingua_scripts.command("lookup")
@click.argument("code")
def lookup(code: str) -> None:
    """Resolve an ISO 639-1 or ISO 639-3 code to a supported language."""

    result = CONTROLLER.lookup(LookupCommand(code=code))
    _emit_lines(result.lines)
    if not result.found:
        raise click.ClickException(f"No supported language for code {code!r}.")


@lingua_scripts.command("hints")
def hints() -> None:
    """Print the diacritic hint table."""

    _emit_lines(CONTROLLER.hints())


@lingua_scripts.command("tokenize")
@click.argument("text")
@click.option(
    "--keep-whitespace/--no-keep-whitespace",
    default=False,
    show_default=True,
    help="Keep surrounding whitespace, digits and punctuation with each token.",
)
def tokenize(text: str, keep_whitespace: bool) -> None:
    """Split text into word-like tokens, one per line."""

    _emit_lines(CONTROLLER.tokenize(TokenizeCommand(text=text, keep_whitespace=keep_whitespace)))


@lingua_scripts.command("inspect")
@click.argument("text")
def inspect(text: str) -> None:
    """Show alphabets, diacritic hints and tokens found in text."""

    _emit_lines(CONTROLLER.inspect(InspectCommand(text=text)))


def _emit_lines(lines: list[str]) -> None:
    for line in lines:
        click.echo(line)


if __name__ == "__main__":  # pragma: no cover
    lingua_scripts()
