"""Case and pattern helpers shared by the pipeline stages."""

from __future__ import annotations

import re


def preserve_case(original: str, replacement: str) -> str:
    """Adjust the case of `replacement` to follow the case of `original`.

    Checks run in order: a single uppercase character capitalizes the
    replacement, an all-uppercase original uppercases it, an all-lowercase
    original lowercases it, and a capitalized original capitalizes it. Any
    other casing leaves the replacement untouched.

    Args:
        original: Text that was matched in the input.
        replacement: Literal text substituted for the match.

    Returns:
        str: The replacement with its case adjusted.

    Examples:
        preserve_case("FOO", "bar")  # "BAR"
        preserve_case("F", "bar")  # "Bar"
        preserve_case("Foo", "BAR")  # "Bar"
    """
    if not replacement:
        return replacement
    if len(original) == 1 and original.upper() == original:
        return _capitalize(replacement)
    if original.upper() == original:
        return replacement.upper()
    if original.lower() == original:
        return replacement.lower()
    if len(original) > 1 and original[0].upper() == original[0] and original[1:].lower() == original[1:]:
        return _capitalize(replacement)
    return replacement


def escape_pattern(literal: str) -> str:
    """Return `literal` escaped for use as an exact-match regular expression."""
    return re.escape(literal)


def _capitalize(text: str) -> str:
    return text[0].upper() + text[1:].lower()
