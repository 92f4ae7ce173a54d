#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Text and bytes transforms."""

from __future__ import annotations

from veil.codec.binary import decode_bytes, encode_bytes, transform_bytes
from veil.codec.seed import normalize_seed, parse_seed, require_key, seed_hash, xorshift32
from veil.codec.text import (
    decode_text,
    encode_text,
    iter_keystream,
    keystream,
    transform_text,
    whitespace_collisions,
)

__all__ = [
    "decode_bytes",
    "decode_text",
    "encode_bytes",
    "encode_text",
    "iter_keystream",
    "keystream",
    "normalize_seed",
    "parse_seed",
    "require_key",
    "seed_hash",
    "transform_bytes",
    "transform_text",
    "whitespace_collisions",
    "xorshift32",
]

# 🎭🔑🔚
