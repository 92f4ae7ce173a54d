#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Seed normalization, seed hashing and the xorshift32 generator."""

from __future__ import annotations

from collections.abc import Iterator
from decimal import Decimal
import math
import numbers
from typing import Any

from veil.config.defaults import (
    INT32_MODULUS,
    INT32_SIGN_BIT,
    SEED_HASH_MULTIPLIER,
    UINT32_MASK,
    XORSHIFT_SHIFTS,
)
from veil.exceptions import InvalidSeedError, MissingSecretOrSeedError
from veil.utils.utf16 import to_code_units


def require_key(secret: str, seed: Any) -> None:
    """Reject an empty secret or a missing seed."""
    if not secret or seed is None:
        raise MissingSecretOrSeedError("Missing secret or seed")


def parse_seed(value: str) -> int | float:
    """Parse a seed literal without coercing it to 32 bits.

    Digit-group underscores are refused. Non-finite literals such as
    ``"nan"`` come back as floats so callers can reject them.
    """
    literal = value.strip()
    if not literal:
        raise InvalidSeedError("Seed must be a number, got an empty string")
    if "_" in literal:
        raise InvalidSeedError(f"Seed must be a number, got {value!r}")
    try:
        return int(literal, 0)
    except ValueError:
        pass
    try:
        return float(literal)
    except ValueError as e:
        raise InvalidSeedError(f"Seed must be a number, got {value!r}") from e


def normalize_seed(value: Any) -> int:
    """Coerce a numeric seed to a signed 32-bit integer.

    Fractions are truncated toward zero, out-of-range values wrap modulo
    2**32, and NaN or infinity become 0. Numeric strings such as ``"42"``,
    ``"-3.5"`` or ``"0x1f"`` are accepted.

    Raises:
        MissingSecretOrSeedError: If ``value`` is None
        InvalidSeedError: If ``value`` is not numeric
    """
    if value is None:
        raise MissingSecretOrSeedError("Missing secret or seed")
    if isinstance(value, str):
        value = parse_seed(value)

    if isinstance(value, numbers.Integral):
        number = int(value)
    elif isinstance(value, (numbers.Real, Decimal)):
        as_float = float(value)
        if not math.isfinite(as_float):
            return 0
        number = math.trunc(as_float)
    else:
        raise InvalidSeedError(f"Seed must be a number, got {type(value).__name__}")

    number %= INT32_MODULUS
    if number >= INT32_SIGN_BIT:
        number -= INT32_MODULUS
    return number


def seed_hash(secret: str, seed: Any) -> int:
    """Fold the secret into the seed as an unsigned 32-bit hash.

    Starts from the normalized seed and applies ``hash * 31 + unit`` for each
    UTF-16 code unit of the secret, modulo 2**32.
    """
    value = normalize_seed(seed) & UINT32_MASK
    for unit in to_code_units(secret):
        value = (value * SEED_HASH_MULTIPLIER + unit) & UINT32_MASK
    return value


def xorshift32(state: int) -> Iterator[int]:
    """Yield successive xorshift32 outputs for ``state``.

    A zero state is a fixed point and yields zeros forever.
    """
    left, right, final = XORSHIFT_SHIFTS
    state &= UINT32_MASK
    while True:
        state ^= (state << left) & UINT32_MASK
        state ^= state >> right
        state ^= (state << final) & UINT32_MASK
        yield state


# 🎭🔑🔚
