#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Public API for the veil text transform engine."""

from __future__ import annotations

from enum import Enum
from typing import Any

from veil.codec.binary import decode_bytes, encode_bytes
from veil.codec.text import decode_text, encode_text
from veil.config.defaults import MODE_BYTES, MODE_TEXT


class Mode(Enum):
    """Transform variants."""

    TEXT = MODE_TEXT
    BYTES = MODE_BYTES

    @classmethod
    def parse(cls, value: Mode | str) -> Mode:
        """Accept a Mode or its name, case-insensitively."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(mode.value for mode in cls)
            raise ValueError(f"Unknown mode {value!r}, expected one of: {choices}") from None


def encode(
    text: str,
    secret: str,
    seed: Any,
    mode: Mode | str = Mode.TEXT,
    *,
    strict: bool = False,
) -> str:
    """Obfuscate ``text`` with a secret and a numeric seed.

    Text mode (the default) XORs every character except tab, newline,
    carriage return and space, keeping the output the same length as the
    input. Bytes mode XORs the UTF-8 encoding and returns base64.

    Args:
        text: Text to encode
        secret: Non-empty secret string
        seed: Number (int, float or numeric string), truncated to 32 bits
        mode: ``Mode.TEXT`` or ``Mode.BYTES``
        strict: Text mode only; raise instead of warning when the output
            would not decode back to ``text``

    Returns:
        The encoded string

    Raises:
        MissingSecretOrSeedError: If the secret is empty or the seed is None
        InvalidSeedError: If the seed is not numeric
        MissingTextError: If bytes mode is given empty text
        WhitespaceCollisionError: If ``strict`` and the output has collisions

    Example:
        ```python
        from veil import decode, encode

        hidden = encode("meet at noon", "hunter2", 42)
        assert decode(hidden, "hunter2", 42) == "meet at noon"
        ```
    """
    if Mode.parse(mode) is Mode.BYTES:
        return encode_bytes(text, secret, seed)
    return encode_text(text, secret, seed, strict=strict)


def decode(text: str, secret: str, seed: Any, mode: Mode | str = Mode.TEXT) -> str:
    """Reverse :func:`encode` for the same secret, seed and mode.

    Raises:
        MissingSecretOrSeedError: If the secret is empty or the seed is None
        InvalidSeedError: If the seed is not numeric
        DecodingError: If bytes-mode input is not valid base64
    """
    if Mode.parse(mode) is Mode.BYTES:
        return decode_bytes(text, secret, seed)
    return decode_text(text, secret, seed)


# 🎭🔑🔚
