#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Bytes mode: UTF-8 bytes XORed with an xorshift32 stream, base64 framed."""

from __future__ import annotations

import base64
import binascii
from typing import Any

from provide.foundation import logger

from veil.codec.seed import require_key, seed_hash, xorshift32
from veil.config.defaults import BYTE_MASK
from veil.exceptions import DecodingError, MissingTextError
from veil.utils.xor import xor_bytes


def transform_bytes(data: bytes, secret: str, seed: Any) -> bytes:
    """
    XOR ``data`` with the low byte of each xorshift32 draw.

    The generator is seeded from :func:`seed_hash` on every call, so the same
    call restores the original bytes.

    Args:
        data: Bytes to transform
        secret: Secret string, must not be empty
        seed: Numeric seed

    Returns:
        Transformed bytes of the same length
    """
    require_key(secret, seed)
    return xor_bytes(data, xorshift32(seed_hash(secret, seed)), BYTE_MASK)


def encode_bytes(text: str, secret: str, seed: Any) -> str:
    """Encode ``text`` to a base64 string."""
    if not text:
        raise MissingTextError("Missing text")

    encoded = transform_bytes(text.encode("utf-8"), secret, seed)
    logger.debug("Bytes mode encode", size=len(encoded))
    return base64.b64encode(encoded).decode("ascii")


def decode_bytes(encoded: str, secret: str, seed: Any) -> str:
    """Decode a base64 string produced by :func:`encode_bytes`.

    ASCII whitespace inside the base64 text is ignored and missing ``=``
    padding is restored. Bytes that are not valid UTF-8 after the transform,
    which is what a wrong key produces, are replaced with U+FFFD.

    Raises:
        DecodingError: If ``encoded`` is not valid base64
    """
    require_key(secret, seed)
    compact = "".join(encoded.split())
    # Unpadded input is accepted; a length of 1 mod 4 stays invalid
    if "=" not in compact and len(compact) % 4 in (2, 3):
        compact += "=" * (-len(compact) % 4)
    try:
        raw = base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodingError(f"Invalid base64 input: {e}") from e

    logger.debug("Bytes mode decode", size=len(raw))
    return transform_bytes(raw, secret, seed).decode("utf-8", errors="replace")


# 🎭🔑🔚
