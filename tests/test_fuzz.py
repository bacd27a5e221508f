from __future__ import annotations

import os

import pytest

from slugify_advanced.slugify import slugify

atheris = pytest.importorskip("atheris")


def test_slugify_with_fuzzed_input():
    data = os.urandom(4096)
    provider = atheris.FuzzedDataProvider(data)
    generated = set()

    for _ in range(128):
        if provider.remaining_bytes() == 0:
            break
        text = provider.ConsumeUnicodeNoSurrogates(64)
        slug = slugify(text)
        slug.encode("ascii")
        assert slug == slug.lower()
        assert not slug.startswith("-")
        assert not slug.endswith("-")
        generated.add(slug)

    assert generated  # ensure we exercised the loop


def test_slugify_with_fuzzed_options():
    data = os.urandom(4096)
    provider = atheris.FuzzedDataProvider(data)

    while provider.remaining_bytes() > 0:
        text = provider.ConsumeUnicodeNoSurrogates(48)
        separator = provider.PickValueInList(["-", "_", "--", ""])
        max_length = provider.ConsumeIntInRange(1, 32)
        slug = slugify(
            text,
            separator=separator,
            max_length=max_length,
            strict=provider.ConsumeBool(),
            remove_stop_words=provider.ConsumeBool(),
        )
        assert len(slug) <= max_length
