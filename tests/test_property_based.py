from __future__ import annotations

import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from slugify_advanced import InvalidArgumentError
from slugify_advanced.slugify import slugify

separators = st.sampled_from(["-", "_", ".", "~", "--", "__", "-_-", "+=", "::"])


def _is_allowed(char: str) -> bool:
    return char in string.ascii_letters or char in string.digits


@given(st.text(), separators)
def test_slug_has_no_edge_or_doubled_separators(text: str, separator: str):
    slug = slugify(text, separator=separator)

    assert not slug.startswith(separator)
    assert not slug.endswith(separator)
    assert separator * 2 not in slug


@given(st.text(), separators, st.integers(min_value=1, max_value=40))
def test_truncated_slug_respects_limit_without_separator_fragment(
    text: str, separator: str, max_length: int
):
    slug = slugify(text, separator=separator, max_length=max_length)

    assert len(slug) <= max_length
    for size in range(1, len(separator) + 1):
        assert not slug.endswith(separator[:size])


@given(st.text())
def test_default_slug_is_lowercase_ascii(text: str):
    slug = slugify(text)

    slug.encode("ascii")
    assert slug == slug.lower()
    assert " " not in slug
    assert all(_is_allowed(char) or char in "-_" for char in slug)


@given(st.text())
def test_strict_slug_has_only_alphanumerics_and_separator(text: str):
    slug = slugify(text, strict=True)

    assert all(_is_allowed(char) or char == "-" for char in slug)


@given(st.text(alphabet=" \t\n\r", min_size=0))
def test_blank_input_always_returns_empty(text: str):
    assert slugify(text) == ""


@given(st.text())
def test_slugify_is_idempotent(text: str):
    slug = slugify(text)
    assert slugify(slug) == slug


@given(st.one_of(st.none(), st.integers(), st.floats(), st.dictionaries(st.text(), st.text())))
def test_non_string_input_always_rejected(value: object):
    with pytest.raises(InvalidArgumentError):
        slugify(value, separator="_", max_length=5)  # type: ignore[arg-type]
