"""Ordered text transformations that turn a trimmed string into a slug.

Each stage is a pure function over strings so it can be exercised on its
own. `run_pipeline` applies them in the order below; reordering changes the
output.

    1. custom replacements        7. disallowed-character removal
    2. locale transliteration     8. separator collapse
    3. diacritic stripping        9. edge trim
    4. case folding              10. length truncation
    5. stop-word removal         11. trailing-fragment cleanup
    6. whitespace normalization
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterable

from .config import SlugifyConfig
from .constants import DEFAULT_STOP_WORDS, LOCALE_MAPPINGS, SHARP_S_REPLACEMENTS
from .helpers import escape_pattern, preserve_case

WHITESPACE_OR_HYPHEN_PATTERN = re.compile(r"[\s-]+")
WHITESPACE_PATTERN = re.compile(r"\s+")
DISALLOWED_PATTERN = re.compile(r"[^a-zA-Z0-9_]")
STRICT_DISALLOWED_PATTERN = re.compile(r"[^a-zA-Z0-9]")


def sort_longest_first(pairs: Iterable[tuple[str, str]]) -> tuple[tuple[str, str], ...]:
    """Order ``(pattern, replacement)`` pairs by descending pattern length.

    The sort is stable, so patterns of equal length keep their input order.
    """
    return tuple(sorted(pairs, key=lambda pair: -len(pair[0])))


LOCALE_ENTRIES = sort_longest_first(LOCALE_MAPPINGS.items())


def replace_preserving_case(text: str, pairs: Iterable[tuple[str, str]]) -> str:
    """Replace every exact occurrence of each pattern, longest pattern first.

    Each replacement is case-adjusted against the text it replaces.

    Args:
        text: Input text.
        pairs: ``(pattern, replacement)`` pairs in any order.

    Returns:
        str: Text with all replacements applied.

    Examples:
        replace_preserving_case("Foo foo", [("foo", "bar")])  # "Foo bar"
        replace_preserving_case("FOO", [("FOO", "baz")])  # "BAZ"
    """
    for pattern, replacement in sort_longest_first(pairs):
        if not pattern:
            continue
        matcher = re.compile(escape_pattern(pattern))
        text = matcher.sub(lambda match: preserve_case(match.group(0), replacement), text)
    return text


def transliterate(text: str, locale: bool = True) -> str:
    """Apply the built-in locale table, then the unconditional sharp-s rule.

    Text is composed (NFC) before the table lookup so that precomposed and
    decomposed spellings of the same letter transliterate identically.
    """
    if locale:
        text = unicodedata.normalize("NFC", text)
        text = replace_preserving_case(text, LOCALE_ENTRIES)
    for sharp_s, replacement in SHARP_S_REPLACEMENTS:
        text = text.replace(sharp_s, replacement)
    return text


def strip_diacritics(text: str) -> str:
    """Decompose accented characters and drop their nonspacing marks.

    Examples:
        strip_diacritics("São Tomé")  # "Sao Tome"
    """
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(char for char in decomposed if unicodedata.category(char) != "Mn")


def fold_case(text: str, lowercase: bool = True) -> str:
    return text.lower() if lowercase else text


def resolve_stop_words(option: bool | tuple[str, ...]) -> tuple[str, ...]:
    """Return the stop words selected by a `remove_stop_words` option value."""
    if option is True:
        return DEFAULT_STOP_WORDS
    if not option:
        return ()
    return tuple(word for word in option if word)


def build_stop_word_pattern(words: Iterable[str]) -> re.Pattern[str] | None:
    alternatives = "|".join(escape_pattern(word) for word in words if word)
    if not alternatives:
        return None
    return re.compile(rf"\b(?:{alternatives})\b", re.IGNORECASE)


DEFAULT_STOP_WORD_PATTERN = build_stop_word_pattern(DEFAULT_STOP_WORDS)


def remove_stop_words(text: str, words: tuple[str, ...]) -> str:
    """Remove whole-word, case-insensitive occurrences of `words`.

    Remaining whitespace is collapsed to single spaces and trimmed. Word
    boundaries are Unicode-aware, so a stop word glued to a non-ASCII letter
    (``"øthe"``) is part of a longer word and is kept.

    Examples:
        remove_stop_words("The fox and the dog", ("the", "and"))  # "fox dog"
    """
    if words is DEFAULT_STOP_WORDS:
        pattern = DEFAULT_STOP_WORD_PATTERN
    else:
        pattern = build_stop_word_pattern(words)
    if pattern is None:
        return text
    text = pattern.sub(" ", text)
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def normalize_whitespace(text: str, separator: str) -> str:
    """Turn each run of whitespace or hyphens into one separator."""
    return WHITESPACE_OR_HYPHEN_PATTERN.sub(lambda _match: separator, text)


def remove_disallowed(text: str, separator: str, strict: bool = False) -> str:
    """Drop every character other than ASCII letters, digits, and separators.

    Underscores are kept unless `strict` is set, in which case they are turned
    into separators first. The text is split on the separator and only the
    spans between separators are filtered, so separators made of otherwise
    disallowed characters survive intact.

    Examples:
        remove_disallowed("foo_bar-baz!", "-", strict=True)  # "foo-bar-baz"
        remove_disallowed("a.b~~c", "~~")  # "ab~~c"
    """
    if strict:
        text = text.replace("_", separator)
    disallowed = STRICT_DISALLOWED_PATTERN if strict else DISALLOWED_PATTERN
    if not separator:
        return disallowed.sub("", text)
    return separator.join(disallowed.sub("", span) for span in text.split(separator))


def collapse_separators(text: str, separator: str) -> str:
    if not separator:
        return text
    repeated = re.compile(rf"(?:{escape_pattern(separator)}){{2,}}")
    return repeated.sub(lambda _match: separator, text)


def trim_separators(text: str, separator: str) -> str:
    """Remove separator instances at the start and end of `text`."""
    if not separator:
        return text
    while text.startswith(separator):
        text = text[len(separator) :]
    return _strip_trailing_separators(text, separator)


def truncate(text: str, max_length: int | None) -> str:
    """Cut `text` to at most `max_length` characters; None means no limit."""
    if max_length is None or max_length <= 0 or len(text) <= max_length:
        return text
    return text[:max_length]


def strip_trailing_fragment(text: str, separator: str) -> str:
    """Remove a trailing partial or whole separator left behind by truncation.

    A tail that matches a proper prefix of the separator is stripped, longest
    prefix first, followed by any trailing full separators. Both steps repeat
    until the text ends with neither.

    Examples:
        strip_trailing_fragment("foo--bar-", "--")  # "foo--bar"
        strip_trailing_fragment("foo-", "-")  # "foo"
    """
    if not separator:
        return text
    changed = True
    while changed:
        changed = False
        for size in range(len(separator) - 1, 0, -1):
            if text.endswith(separator[:size]):
                text = text[:-size]
                changed = True
                break
        stripped = _strip_trailing_separators(text, separator)
        if stripped != text:
            text = stripped
            changed = True
    return text


def run_pipeline(text: str, config: SlugifyConfig) -> str:
    """Apply every stage to an already trimmed, non-empty string.

    Args:
        text: Trimmed input text.
        config: Normalized and validated configuration.

    Returns:
        str: The finished slug, possibly empty.
    """
    separator = config.separator
    text = replace_preserving_case(text, config.custom_replacements)
    text = transliterate(text, config.locale)
    text = strip_diacritics(text)
    text = fold_case(text, config.lowercase)
    stop_words = resolve_stop_words(config.remove_stop_words)
    if stop_words:
        text = remove_stop_words(text, stop_words)
    text = normalize_whitespace(text, separator)
    text = remove_disallowed(text, separator, config.strict)
    text = collapse_separators(text, separator)
    text = trim_separators(text, separator)
    text = truncate(text, config.max_length)
    return strip_trailing_fragment(text, separator)


def _strip_trailing_separators(text: str, separator: str) -> str:
    while text.endswith(separator):
        text = text[: -len(separator)]
    return text
