"""
Converts text into slugs from the command line.
Each TEXT argument is printed as a slug on its own line; without arguments,
standard input is read line by line.
"""

from __future__ import annotations

import click

from . import __version__
from .config import ConfigError, build_config
from .constants import DEFAULT_CONFIG
from .slugify import slugify

__all__ = ["cli"]


def _parse_replacements(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> tuple[tuple[str, str], ...]:
    pairs = []
    for value in values:
        find, sep, replacement = value.partition("=")
        if not sep or not find:
            raise click.BadParameter(f"expected FIND=REPLACE, got {value!r}", ctx=ctx, param=param)
        pairs.append((find, replacement))
    return tuple(pairs)


@click.command()
@click.version_option(version=__version__)
@click.option(
    "--separator",
    help=f"Separator placed between words (default: {DEFAULT_CONFIG.separator!r})",
)
@click.option("--no-lowercase", is_flag=True, help="Keep the original letter case")
@click.option("--no-locale", is_flag=True, help="Skip the built-in transliteration table")
@click.option("--strict", is_flag=True, help="Turn underscores into separators")
@click.option("--max-length", type=int, help="Maximum slug length")
@click.option("--remove-stop-words", is_flag=True, help="Drop common English stop words")
@click.option("--stop-word", "stop_words", multiple=True, help="Custom stop word (repeatable)")
@click.option(
    "--replace",
    "replacements",
    multiple=True,
    callback=_parse_replacements,
    help="Custom replacement as FIND=REPLACE (repeatable)",
)
@click.argument("text", nargs=-1)
def cli(
    text: tuple[str, ...],
    separator: str | None = None,
    no_lowercase: bool = False,
    no_locale: bool = False,
    strict: bool = False,
    max_length: int | None = None,
    remove_stop_words: bool = False,
    stop_words: tuple[str, ...] = (),
    replacements: tuple[tuple[str, str], ...] = (),
):
    """
    Entry point for slugifying text from the command line.

    Args:
        text: Strings to slugify. Standard input is used when empty.
        separator: Override for the word separator.
        no_lowercase: Keep letter case instead of lowercasing.
        no_locale: Disable the built-in transliteration table.
        strict: Convert underscores to the separator.
        max_length: Maximum length of each slug.
        remove_stop_words: Remove the default English stop words.
        stop_words: Custom stop words; replaces the default list.
        replacements: Custom ``(find, replace)`` pairs, in order.

    Returns:
        None.

    Raises:
        click.BadParameter: If an option value is invalid.

    Examples:
        slugify-advanced "Crème brûlée" --separator _ --max-length 10
    """
    overrides: dict[str, object] = {
        "lowercase": not no_lowercase,
        "locale": not no_locale,
        "strict": strict,
        "max_length": max_length,
        "custom_replacements": replacements,
        "remove_stop_words": stop_words or remove_stop_words,
    }
    if separator is not None:
        overrides["separator"] = separator

    try:
        config = build_config(**overrides)
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    if text:
        for line in text:
            click.echo(slugify(line, config))
        return

    with click.open_file("-") as stream:
        for line in stream:
            click.echo(slugify(line.rstrip("\n"), config))


if __name__ == "__main__":
    cli()
