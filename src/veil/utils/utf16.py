#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""UTF-16 code unit helpers.

Text mode works on UTF-16 code units, so characters outside the Basic
Multilingual Plane count as two units. Python strings hold code points, which
is why the transform splits and reassembles surrogate pairs here.
"""

from __future__ import annotations

from veil.config.defaults import (
    HIGH_SURROGATE_START,
    LOW_SURROGATE_START,
    SUPPLEMENTARY_START,
    SURROGATE_END,
)


def is_high_surrogate(unit: int) -> bool:
    return HIGH_SURROGATE_START <= unit < LOW_SURROGATE_START


def is_low_surrogate(unit: int) -> bool:
    return LOW_SURROGATE_START <= unit <= SURROGATE_END


def to_code_units(text: str) -> list[int]:
    """Split text into UTF-16 code units; lone surrogates are kept as-is."""
    units: list[int] = []
    for char in text:
        code = ord(char)
        if code >= SUPPLEMENTARY_START:
            code -= SUPPLEMENTARY_START
            units.append(HIGH_SURROGATE_START + (code >> 10))
            units.append(LOW_SURROGATE_START + (code & 0x3FF))
        else:
            units.append(code)
    return units


def from_code_units(units: list[int]) -> str:
    """Join UTF-16 code units back into a string.

    A high surrogate directly followed by a low surrogate becomes one
    supplementary character; any other surrogate stays a lone surrogate.
    UTF-16 cannot tell two adjacent lone surrogates from a pair, so
    ``"\\ud800\\udc00"`` comes back as ``"\\U00010000"``.
    """
    chars: list[str] = []
    index = 0
    count = len(units)
    while index < count:
        unit = units[index]
        if is_high_surrogate(unit) and index + 1 < count and is_low_surrogate(units[index + 1]):
            low = units[index + 1]
            code = SUPPLEMENTARY_START + ((unit - HIGH_SURROGATE_START) << 10) + (low - LOW_SURROGATE_START)
            chars.append(chr(code))
            index += 2
        else:
            chars.append(chr(unit))
            index += 1
    return "".join(chars)


def utf16_length(text: str) -> int:
    """Length of ``text`` in UTF-16 code units."""
    return sum(2 if ord(char) >= SUPPLEMENTARY_START else 1 for char in text)


# 🎭🔑🔚
