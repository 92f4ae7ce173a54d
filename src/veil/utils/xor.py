#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""XOR primitives shared by both transform modes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def xor_bytes(data: bytes, stream: Iterator[int], mask: int = 0xFF) -> bytes:
    """
    XOR each byte with the low bits of successive stream values.

    Args:
        data: Bytes to transform
        stream: Key stream, consumed one value per byte
        mask: Bits of each stream value to use

    Returns:
        XOR transformed bytes
    """
    return bytes(byte ^ (next(stream) & mask) for byte in data)


def xor_units(units: Iterable[int], stream: Iterator[int], skip: frozenset[int], mask: int = 0xFFFF) -> list[int]:
    """
    XOR code units with a key stream, passing members of ``skip`` through.

    Skipped units do not consume a stream value, so the stream index counts
    transformed units only.

    Args:
        units: Code units to transform
        stream: Key stream, consumed one value per transformed unit
        skip: Unit values copied verbatim
        mask: Width of the result

    Returns:
        Transformed code units

    Since XOR is symmetric, applying this twice with the same stream restores
    the input as long as no transformed unit lands in ``skip``.
    """
    out: list[int] = []
    for unit in units:
        if unit in skip:
            out.append(unit)
        else:
            out.append((unit ^ next(stream)) & mask)
    return out


# 🎭🔑🔚
