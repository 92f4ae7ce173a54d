#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""veiltext core package exports."""

from __future__ import annotations

from provide.foundation.utils import get_version

from veil.codec import (
    keystream,
    normalize_seed,
    seed_hash,
    transform_bytes,
    transform_text,
    whitespace_collisions,
    xorshift32,
)
from veil.engine import Mode, decode, encode
from veil.exceptions import (
    DecodingError,
    InvalidSeedError,
    MissingSecretOrSeedError,
    MissingTextError,
    VeilError,
    WhitespaceCollisionError,
)
from veil.utils import utf16_length

__version__ = get_version("veiltext", caller_file=__file__)

__all__ = [
    "DecodingError",
    "InvalidSeedError",
    "MissingSecretOrSeedError",
    "MissingTextError",
    "Mode",
    "VeilError",
    "WhitespaceCollisionError",
    "__version__",
    "decode",
    "encode",
    "keystream",
    "normalize_seed",
    "seed_hash",
    "transform_bytes",
    "transform_text",
    "utf16_length",
    "whitespace_collisions",
    "xorshift32",
]

# 🎭🔑🔚
