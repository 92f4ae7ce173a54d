#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Whitespace-preserving text mode.

Every UTF-16 code unit except tab, line feed, carriage return and space is
XORed with a key stream built from the secret and the seed. Whitespace is
copied through and does not advance the stream, so line breaks and
indentation survive encoding.

Encoding and decoding are the same operation. A decode only restores the
input when no encoded unit landed on one of the whitespace codes; see
:func:`whitespace_collisions`.
"""

from __future__ import annotations

from collections.abc import Iterator
from itertools import islice
from typing import Any

from provide.foundation import logger

from veil.codec.seed import normalize_seed, require_key
from veil.config.defaults import CODE_UNIT_MASK, KEYSTREAM_MODULUS, WHITESPACE_CODES
from veil.exceptions import WhitespaceCollisionError
from veil.utils.utf16 import from_code_units, to_code_units
from veil.utils.xor import xor_units


def iter_keystream(secret: str, seed: Any) -> Iterator[int]:
    """Yield ``(secret[i % len] + seed * (i + 1)) mod 65536`` for i = 0, 1, ...

    An empty secret contributes a base of zero.
    """
    number = normalize_seed(seed)
    bases = to_code_units(secret)
    period = len(bases)
    position = 0
    while True:
        base = bases[position % period] if period else 0
        yield (base + number * (position + 1)) % KEYSTREAM_MODULUS
        position += 1


def keystream(secret: str, seed: Any, length: int) -> list[int]:
    """Return the first ``length`` key stream values."""
    return list(islice(iter_keystream(secret, seed), length))


def _transform_units(units: list[int], secret: str, seed: Any) -> list[int]:
    return xor_units(units, iter_keystream(secret, seed), WHITESPACE_CODES, CODE_UNIT_MASK)


def transform_text(text: str, secret: str, seed: Any) -> str:
    """Apply the whitespace-preserving XOR. Used for both directions."""
    units = to_code_units(text)
    return from_code_units(_transform_units(units, secret, seed))


def whitespace_collisions(text: str, secret: str, seed: Any) -> list[int]:
    """UTF-16 positions where encoding ``text`` produces a whitespace code.

    Each such position makes the encoded text decode incorrectly from that
    point on.
    """
    units = to_code_units(text)
    return _collisions(units, _transform_units(units, secret, seed))


def _collisions(units: list[int], encoded: list[int]) -> list[int]:
    return [
        index
        for index, (before, after) in enumerate(zip(units, encoded))
        if before not in WHITESPACE_CODES and after in WHITESPACE_CODES
    ]


def encode_text(text: str, secret: str, seed: Any, *, strict: bool = False) -> str:
    """Encode ``text`` in text mode.

    With ``strict`` set, output that would not decode back raises
    :class:`WhitespaceCollisionError`; otherwise it is returned and a warning
    is logged.
    """
    require_key(secret, seed)
    units = to_code_units(text)
    encoded = _transform_units(units, secret, seed)
    positions = _collisions(units, encoded)
    logger.debug("Text mode encode", units=len(units), collisions=len(positions))

    if positions:
        if strict:
            raise WhitespaceCollisionError(positions)
        logger.warning("Encoded text will not decode cleanly", positions=positions)

    return from_code_units(encoded)


def decode_text(text: str, secret: str, seed: Any) -> str:
    """Decode text-mode output; the inverse of :func:`encode_text`."""
    require_key(secret, seed)
    logger.debug("Text mode decode", length=len(text))
    return transform_text(text, secret, seed)


# 🎭🔑🔚
