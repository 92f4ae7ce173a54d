#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Property-based tests for both transform modes."""

from __future__ import annotations

from hypothesis import assume, given, settings, strategies as st

from veil import Mode, decode, encode, whitespace_collisions
from veil.config.defaults import WHITESPACE_CODES
from veil.utils import to_code_units, utf16_length

secrets = st.text(min_size=1, max_size=16)
seeds = st.integers(min_value=-(2**31), max_value=2**31 - 1)
texts = st.text(max_size=64)
# Text with at least one unit that is not tab/newline/carriage return/space
visible_texts = texts.filter(lambda t: any(unit not in WHITESPACE_CODES for unit in to_code_units(t)))
bmp_chars = st.characters(max_codepoint=0xFFFF, exclude_categories=("Cs",))


class TestTextModeProperties:
    @given(text=texts, secret=secrets, seed=seeds)
    @settings(max_examples=200)
    def test_round_trip_without_collisions(self, text: str, secret: str, seed: int) -> None:
        assume(not whitespace_collisions(text, secret, seed))
        assert decode(encode(text, secret, seed), secret, seed) == text

    @given(text=texts, secret=secrets, seed=seeds)
    def test_whitespace_fidelity(self, text: str, secret: str, seed: int) -> None:
        before = to_code_units(text)
        after = to_code_units(encode(text, secret, seed))
        for index, unit in enumerate(before):
            if unit in WHITESPACE_CODES:
                assert after[index] == unit

    @given(text=texts, secret=secrets, seed=seeds)
    def test_length_preserved(self, text: str, secret: str, seed: int) -> None:
        assert utf16_length(encode(text, secret, seed)) == utf16_length(text)

    @given(text=texts, secret=secrets, seed=seeds)
    def test_deterministic(self, text: str, secret: str, seed: int) -> None:
        assert encode(text, secret, seed) == encode(text, secret, seed)

    @given(text=visible_texts, secret=secrets, seed=seeds)
    def test_seed_sensitivity(self, text: str, secret: str, seed: int) -> None:
        assert encode(text, secret, seed) != encode(text, secret, seed + 1)

    @given(text=visible_texts, first=bmp_chars, other=bmp_chars, rest=st.text(max_size=8), seed=seeds)
    def test_secret_sensitivity(self, text: str, first: str, other: str, rest: str, seed: int) -> None:
        assume(first != other)
        assert encode(text, first + rest, seed) != encode(text, other + rest, seed)


class TestBytesModeProperties:
    @given(text=st.text(min_size=1, max_size=64), secret=secrets, seed=seeds)
    @settings(max_examples=200)
    def test_round_trip(self, text: str, secret: str, seed: int) -> None:
        assert decode(encode(text, secret, seed, Mode.BYTES), secret, seed, Mode.BYTES) == text

    @given(text=st.text(min_size=1, max_size=64), secret=secrets, seed=seeds)
    def test_deterministic(self, text: str, secret: str, seed: int) -> None:
        assert encode(text, secret, seed, Mode.BYTES) == encode(text, secret, seed, Mode.BYTES)


# 🎭🔑🔚
