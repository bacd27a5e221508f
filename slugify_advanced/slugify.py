"""Slug generation from free text."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .config import SlugifyConfig, build_config
from .exceptions import InvalidArgumentError
from .pipeline import run_pipeline

logger = logging.getLogger(__name__)


def slugify(
    text: str,
    config: SlugifyConfig | Mapping[str, object] | None = None,
    **options: object,
) -> str:
    """Generate a URL-safe slug from arbitrary text.

    Trims the input, then runs custom replacements, locale transliteration,
    diacritic stripping, lowercasing, stop-word removal, separator
    normalization, character filtering, separator cleanup, and truncation, in
    that order. Blank input yields an empty slug without looking at the
    options.

    Args:
        text: The text to convert.
        config: A `SlugifyConfig`, a mapping of option names (snake_case or
            camelCase), or None for the defaults.
        options: Individual options overriding `config`. Unknown names are
            ignored.

    Returns:
        str: The slug. May be empty when nothing alphanumeric remains.

    Raises:
        InvalidArgumentError: If `text` is not a string.
        ConfigError: If an option has an unsupported value.

    Examples:
        slugify("Hello World!")  # "hello-world"
        slugify("für Straße")  # "fuer-strasse"
        slugify("foo   bar---baz", separator="--")  # "foo--bar--baz"
        slugify("The quick brown fox", {"removeStopWords": True})  # "quick-brown-fox"
    """
    if not isinstance(text, str):
        raise InvalidArgumentError(text)

    trimmed = text.strip()
    if not trimmed:
        logger.debug("Blank input, returning an empty slug")
        return ""

    return run_pipeline(trimmed, build_config(config, **options))
