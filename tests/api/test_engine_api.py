#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the public encode/decode API."""

from __future__ import annotations

import pytest

import veil
from veil import (
    DecodingError,
    MissingSecretOrSeedError,
    MissingTextError,
    Mode,
    VeilError,
    WhitespaceCollisionError,
    decode,
    encode,
)


class TestMode:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (Mode.TEXT, Mode.TEXT),
            ("text", Mode.TEXT),
            ("BYTES", Mode.BYTES),
            (" bytes ", Mode.BYTES),
        ],
    )
    def test_parse(self, value: object, expected: Mode) -> None:
        assert Mode.parse(value) is expected

    def test_parse_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown mode 'rot13'"):
            Mode.parse("rot13")


class TestEncodeDecode:
    def test_text_mode_is_default(self) -> None:
        assert encode("hello", "key", 7) == "\x1a\x16\xe2\xeb\xe7"
        assert decode("\x1a\x16\xe2\xeb\xe7", "key", 7) == "hello"

    def test_bytes_mode(self) -> None:
        assert encode("AB", "\x01", 0, Mode.BYTES) == "YEM="
        assert decode("YEM=", "\x01", 0, "bytes") == "AB"

    def test_readme_example(self) -> None:
        hidden = encode("meet at noon", "hunter2", 42)
        assert hidden != "meet at noon"
        assert decode(hidden, "hunter2", 42) == "meet at noon"

    def test_modes_differ(self) -> None:
        assert encode("hello", "key", 7, Mode.TEXT) != encode("hello", "key", 7, Mode.BYTES)

    def test_empty_text_per_mode(self) -> None:
        assert encode("", "key", 7) == ""
        with pytest.raises(MissingTextError):
            encode("", "key", 7, Mode.BYTES)

    def test_strict_only_affects_text_mode(self) -> None:
        with pytest.raises(WhitespaceCollisionError):
            encode("ab cd", "k", 1, strict=True)
        assert decode(encode("ab cd", "k", 1, Mode.BYTES, strict=True), "k", 1, Mode.BYTES) == "ab cd"

    @pytest.mark.parametrize("mode", list(Mode))
    def test_missing_secret(self, mode: Mode) -> None:
        with pytest.raises(MissingSecretOrSeedError):
            encode("hello", "", 1, mode)
        with pytest.raises(MissingSecretOrSeedError):
            decode("aGVsbG8=", "", 1, mode)

    @pytest.mark.parametrize("mode", list(Mode))
    def test_missing_seed(self, mode: Mode) -> None:
        with pytest.raises(MissingSecretOrSeedError):
            encode("hello", "key", None, mode)

    def test_errors_share_base(self) -> None:
        with pytest.raises(VeilError):
            decode("%%%", "key", 1, Mode.BYTES)
        with pytest.raises(DecodingError):
            decode("%%%", "key", 1, Mode.BYTES)

    def test_package_exports(self) -> None:
        assert veil.encode is encode
        assert isinstance(veil.__version__, str)


# 🎭🔑🔚
